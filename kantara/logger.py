from typing import NotRequired, TypedDict
import logging
from kantara.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "kantara",
    "is_enabled": True,
    "level": logging.INFO,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class InstanceLogger(logging.LoggerAdapter):
    """Gates records on its own switch and threshold before the shared logger sees them."""

    def __init__(self, logger: logging.Logger, is_enabled: bool, threshold: int):
        super().__init__(logger, {})
        self.is_enabled = is_enabled
        self.threshold = threshold

    def isEnabledFor(self, level: int) -> bool:
        return self.is_enabled and level >= self.threshold and self.logger.isEnabledFor(level)


class Logger:
    """Per-instance logging on top of a named, process-wide logger.

    Enabling and level live on the ``InstanceLogger`` adapter, so one
    wrapper never changes what another one emits. The shared logger only
    ever gets more permissive and receives a single stream handler.
    """

    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.shared = logging.getLogger(self.config["name"])
        self.logger = InstanceLogger(self.shared, self.config["is_enabled"], self.config["level"])
        if self.config["is_enabled"]:
            self._prepare_shared_logger()

    def _prepare_shared_logger(self) -> None:
        level = self.config["level"]
        if self.shared.level == logging.NOTSET or self.shared.level > level:
            self.shared.setLevel(level)
        if self.shared.handlers:
            return
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(self.config["format"]))
        self.shared.addHandler(handler)
