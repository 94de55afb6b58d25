"""Validated handler configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HandlerConfig(BaseModel):
    """Effective handler settings after YAML merging."""

    protocol: str = "phpstorm"
    actions: list[str] = Field(default_factory=lambda: ["open"])
    editor_command: list[str] = Field(default_factory=lambda: ["/usr/bin/env", "phpstorm"], min_length=1)
    project_marker: str = ".idea"
    # Empirical guess at how long the editor needs to show its window.
    settle_interval: float = Field(default=2.0, ge=0)
    window_list_command: list[str] = Field(default_factory=lambda: ["wmctrl", "-l"], min_length=1)
    window_activate_command: list[str] = Field(
        default_factory=lambda: ["wmctrl", "-i", "-a"], min_length=1
    )
