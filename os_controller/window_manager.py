"""Window snapshots and title-based window matching."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from os_controller.base_controller import BaseController

# Editor window titles read "<file> – <context>" with an en dash.
TITLE_SEPARATOR = " – "

DEFAULT_TITLE_TEMPLATES = (
    "{base}" + TITLE_SEPARATOR + "{path}",
    "{base}" + TITLE_SEPARATOR + "{base}",
    TITLE_SEPARATOR + "{path}",
    TITLE_SEPARATOR + "{base}",
)


@dataclass(frozen=True)
class Window:
    """One entry of a window listing."""

    id: str
    desktop_id: str = ""
    client_machine: str = ""
    title: str = ""


WindowSnapshot = dict[str, Window]


class TitleMatcher(ABC):
    """Decides whether a window title belongs to a file."""

    @abstractmethod
    def match(self, title: str, file_name: str) -> bool:
        """Return True if title denotes file_name."""


class SubstringTitleMatcher(TitleMatcher):
    """Matches when the title contains a pattern built from the file name.

    The template may reference ``{base}`` (final path segment) and
    ``{path}`` (the file name as given).
    """

    def __init__(self, template: str) -> None:
        self.template = template

    def match(self, title: str, file_name: str) -> bool:
        needle = self.template.format(base=os.path.basename(file_name), path=file_name)
        return needle in title

    def __repr__(self) -> str:
        return f"SubstringTitleMatcher({self.template!r})"


def default_matchers() -> list[TitleMatcher]:
    return [SubstringTitleMatcher(template) for template in DEFAULT_TITLE_TEMPLATES]


def parse_window_line(line: str) -> Window | None:
    """Parse ``<id> <desktop> <machine> <title>``; title keeps inner spaces."""
    line = line.strip()
    if not line:
        return None
    parts = line.split(None, 3)
    parts += [""] * (4 - len(parts))
    return Window(id=parts[0], desktop_id=parts[1], client_machine=parts[2], title=parts[3])


class WindowRegistry:
    """Captures window snapshots and picks the window showing a file."""

    def __init__(
        self,
        controller: BaseController,
        matchers: Sequence[TitleMatcher] | None = None,
    ) -> None:
        self.controller = controller
        self.matchers = list(matchers) if matchers is not None else default_matchers()
        self.logger = logging.getLogger("psh.window_registry")

    def snapshot(self) -> WindowSnapshot:
        """Return current windows keyed by id; empty when listing fails."""
        lines = self.controller.list_windows()
        if lines is None:
            return {}
        windows: WindowSnapshot = {}
        for line in lines:
            window = parse_window_line(line)
            if window is not None:
                windows[window.id] = window
        self.logger.debug("Snapshot holds %d windows", len(windows))
        return windows

    @staticmethod
    def diff_new(before: WindowSnapshot, after: WindowSnapshot) -> list[Window]:
        """Windows present only in after, newest first."""
        return [window for key, window in reversed(after.items()) if key not in before]

    def match_by_file_name(self, file_name: str, windows: Iterable[Window]) -> Window | None:
        """First window hit by the highest-priority matcher."""
        candidates = list(windows)
        for matcher in self.matchers:
            for window in candidates:
                if matcher.match(window.title, file_name):
                    self.logger.debug("Window %s matched by %r", window.id, matcher)
                    return window
        return None

    def select_window(
        self,
        file_name: str,
        before: WindowSnapshot,
        after: WindowSnapshot,
    ) -> Window | None:
        """Prefer a window that appeared during launch, else any open one."""
        window = self.match_by_file_name(file_name, self.diff_new(before, after))
        if window is None:
            window = self.match_by_file_name(file_name, after.values())
        return window
