"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from doccatalog.messages import resolve_locale

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("uuid", "counter")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _choice(key: str, default: str, allowed: tuple[str, ...]) -> str:
    value = _env(key, default)
    value = value.upper() if default.isupper() else value.lower()
    if value not in allowed:
        logger.warning(f"Ignoring {key}={value!r}; expected one of {', '.join(allowed)}")
        return default
    return value


@dataclass(frozen=True)
class AppConfig:
    locale: str
    log_level: str
    id_strategy: str
    start_dir: Path

    def override(self, **changes: object) -> AppConfig:
        """Return a copy with the non-None values from ``changes`` applied."""
        values = {key: value for key, value in changes.items() if value is not None}
        if "locale" in values:
            values["locale"] = resolve_locale(str(values["locale"]))
        if "start_dir" in values:
            values["start_dir"] = Path(str(values["start_dir"]))
        return replace(self, **values)


def load_config() -> AppConfig:
    return AppConfig(
        locale=resolve_locale(_env("DOCCATALOG_LOCALE", "ru")),
        log_level=_choice("DOCCATALOG_LOG_LEVEL", "INFO", LOG_LEVELS),
        id_strategy=_choice("DOCCATALOG_ID_STRATEGY", "uuid", ID_STRATEGIES),
        start_dir=Path(_env("DOCCATALOG_START_DIR", str(Path.cwd()))),
    )
