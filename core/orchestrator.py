"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.event_bus import EventBus
from core.lifecycle import LifecycleController
from core.policy_runtime import load_effective_config
from core.settings import OCRSettings
from document.drawer import DrawerInserter
from executor.command_executor import CommandRunner


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict
    settings: OCRSettings
    bus: EventBus
    inserter: DrawerInserter
    lifecycle: LifecycleController


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(
        self,
        root: Path | None = None,
        user_config: Path | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.user_config = user_config
        self.runner = runner

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root, self.user_config)
        settings = OCRSettings.from_mapping(config)
        bus = EventBus()
        inserter = DrawerInserter(settings=settings, runner=self.runner)
        lifecycle = LifecycleController(bus=bus, inserter=inserter)
        return RuntimeBundle(
            config=config,
            settings=settings,
            bus=bus,
            inserter=inserter,
            lifecycle=lifecycle,
        )
