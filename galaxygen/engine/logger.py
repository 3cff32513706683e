"""Generation logging utilities with channel toggles."""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional

DEFAULT_CHANNELS = {
    "sector": True,
    "system": True,
    "hierarchy": True,
    "zones": True,
    "orbits": False,
    "registry": True,
}


@dataclass
class LoggerConfig:
    """Configuration for generation logging."""

    level: int = logging.INFO
    channels: Dict[str, bool] = field(default_factory=lambda: DEFAULT_CHANNELS.copy())

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoggerConfig":
        if not settings_path.exists():
            return cls()
        try:
            data = json.loads(settings_path.read_text())
        except json.JSONDecodeError:
            return cls()
        level_name = str(data.get("logLevel", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
        channels = DEFAULT_CHANNELS.copy()
        channels.update({str(name): bool(value) for name, value in data.get("logChannels", {}).items()})
        return cls(level=level, channels=channels)

    @classmethod
    def silent(cls) -> "LoggerConfig":
        return cls(level=logging.WARNING, channels={name: False for name in DEFAULT_CHANNELS})


class ChannelLogger:
    """Wrapper that only emits records when the channel is enabled."""

    def __init__(self, name: str, logger: logging.Logger, enabled: bool) -> None:
        self._logger = logger
        self._enabled = enabled
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def debug(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.error(msg, *args, **kwargs)


class GenerationLogger:
    """Central logging registry for a generation run."""

    def __init__(self, config: Optional[LoggerConfig] = None, configure_root: bool = True) -> None:
        config = config or LoggerConfig()
        if configure_root:
            logging.basicConfig(
                level=config.level,
                format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                stream=sys.stderr,
            )
        self._root = logging.getLogger("galaxygen")
        if configure_root:
            self._root.setLevel(config.level)
        self._channels: Dict[str, ChannelLogger] = {}
        for name, enabled in config.channels.items():
            self._channels[name] = ChannelLogger(
                name,
                logging.getLogger(f"galaxygen.{name}"),
                enabled,
            )

    @classmethod
    def quiet(cls) -> "GenerationLogger":
        """Logger with every channel disabled, used when callers pass none."""

        return cls(LoggerConfig.silent(), configure_root=False)

    def channel(self, name: str) -> ChannelLogger:
        if name not in self._channels:
            # Unknown channels start disabled until explicitly enabled.
            self._channels[name] = ChannelLogger(
                name,
                logging.getLogger(f"galaxygen.{name}"),
                False,
            )
        return self._channels[name]

    def set_enabled(self, name: str, enabled: bool) -> None:
        self.channel(name).enabled = enabled

    def channels(self) -> Iterable[str]:
        return self._channels.keys()


def init_logger(settings_path: Optional[Path] = None) -> GenerationLogger:
    """Initialise a logger from settings.json."""

    settings_path = settings_path or Path("settings.json")
    config = LoggerConfig.from_settings(settings_path)
    return GenerationLogger(config)


__all__ = ["GenerationLogger", "LoggerConfig", "ChannelLogger", "DEFAULT_CHANNELS", "init_logger"]
