# configuração lida das variáveis de ambiente
import logging
import os
from dataclasses import dataclass

DRY_RUN_ENV = "SHUTDOWN_TIMER_DRY_RUN"
LOG_LEVEL_ENV = "SHUTDOWN_TIMER_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    dry_run: bool = False
    log_level: int = logging.INFO


def parse_level(name):
    level = getattr(logging, str(name).strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def load_settings(environ=None):
    environ = os.environ if environ is None else environ
    dry_run = environ.get(DRY_RUN_ENV, "").strip().lower() in _TRUE_VALUES
    return Settings(dry_run=dry_run, log_level=parse_level(environ.get(LOG_LEVEL_ENV, "INFO")))
