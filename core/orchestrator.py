"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.control_loop import OpenOrchestrator
from core.handler import ProtocolHandler
from core.policy_runtime import load_effective_config
from core.settings import HandlerConfig
from executor.process_launcher import launch_detached
from os_controller.linux_controller import LinuxController
from os_controller.window_activator import WindowActivator
from os_controller.window_manager import WindowRegistry
from protocol.request_validator import RequestValidator


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: HandlerConfig
    handler: ProtocolHandler
    open_orchestrator: OpenOrchestrator
    registry: WindowRegistry


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, user_config: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.user_config = user_config

    def build(self, config: HandlerConfig | None = None) -> RuntimeBundle:
        config = config or load_effective_config(self.root, self.user_config)

        controller = LinuxController(
            list_command=config.window_list_command,
            activate_command=config.window_activate_command,
        )
        registry = WindowRegistry(controller)
        open_orchestrator = OpenOrchestrator(
            registry=registry,
            activator=WindowActivator(controller),
            launch=launch_detached,
            editor=config.editor_command,
            marker=config.project_marker,
            settle_interval=config.settle_interval,
        )

        available = {"open": lambda request: open_orchestrator.open(request.parameters)}
        unknown = [name for name in config.actions if name not in available]
        if unknown:
            raise ValueError(f"No handler for configured actions: {', '.join(unknown)}")
        actions = {name: available[name] for name in config.actions}

        handler = ProtocolHandler(
            validator=RequestValidator(protocol=config.protocol, actions=actions),
            actions=actions,
        )
        return RuntimeBundle(
            config=config,
            handler=handler,
            open_orchestrator=open_orchestrator,
            registry=registry,
        )
