"""
Module loggers for BlockBreaker.

Each part of the game asks for its own logger and writes
``[module] LEVEL: message`` lines to stdout (or a configured stream):

    from blockbreaker.logging import get_logger

    log = get_logger('engine')
    log.info("Level %d cleared", level)

Levels come from the environment when this module is imported:

    BLOCKBREAKER_LOG_LEVEL=DEBUG          # every module
    BLOCKBREAKER_LOG_ENGINE=DEBUG         # just the engine
    BLOCKBREAKER_LOG_SCORE_STORE=OFF

or from code, which wins over the environment:

    configure_logging(level='WARNING', modules={'engine': 'DEBUG'})

The same module also decides where persistent player data lives
(``get_data_dir``), since the score store and the logs share it.
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

ENV_PREFIX = 'BLOCKBREAKER_LOG_'
GLOBAL_LEVEL_ENV = ENV_PREFIX + 'LEVEL'
DATA_DIR_ENV = 'BLOCKBREAKER_DATA_DIR'


class LogLevel(IntEnum):
    """Numeric levels; DEBUG..CRITICAL line up with the stdlib values."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_NAMES: Dict[str, LogLevel] = {level.name: level for level in LogLevel}
_LEVEL_NAMES['WARN'] = LogLevel.WARNING

# Tag printed for each level; warnings are shortened to WARN
_TAGS: Dict[LogLevel, str] = {level: level.name for level in LogLevel}
_TAGS[LogLevel.WARNING] = 'WARN'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'stream': None,
}


def get_data_dir() -> str:
    """Directory for the high score file.

    ``BLOCKBREAKER_DATA_DIR`` wins; otherwise the platform's per-user
    application data folder (Application Support on macOS, APPDATA on
    Windows, XDG data home elsewhere).
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return str(Path(override).expanduser())

    home = Path.home()
    if sys.platform == 'darwin':
        return str(home / 'Library' / 'Application Support' / 'BlockBreaker')
    if sys.platform == 'win32':
        return str(Path(os.environ.get('APPDATA', str(home))) / 'BlockBreaker')
    xdg_data = os.environ.get('XDG_DATA_HOME') or str(home / '.local' / 'share')
    return str(Path(xdg_data) / 'blockbreaker')


def _parse_level(name: str) -> LogLevel:
    # Unknown names fall back to INFO rather than failing at startup
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    stream: Optional[Any] = None,
) -> None:
    """Set the default level, per-module levels and output stream.

    Args:
        level: Level name for modules without an override
        modules: module name -> level name
        stream: File-like target; None writes to sys.stdout
    """
    _config['default_level'] = _parse_level(level)
    for name, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(name)] = _parse_level(module_level)
    _config['stream'] = stream


def _load_env_config() -> None:
    for key, value in os.environ.items():
        if key == GLOBAL_LEVEL_ENV:
            _config['default_level'] = _parse_level(value)
        elif key.startswith(ENV_PREFIX):
            _config['module_levels'][_module_key(key[len(ENV_PREFIX):])] = _parse_level(value)


_load_env_config()


class GameLogger:
    """Printer bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _emit(self, tag: str, msg: str) -> None:
        print(f"[{self.module}] {tag}: {msg}", file=_config['stream'] or sys.stdout)

    def _log(self, level: LogLevel, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                # Keep the arguments visible instead of losing the line
                msg = f"{msg} {args}"
        self._emit(_TAGS[level], msg)

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the traceback being handled (if any)."""
        if not self.is_enabled_for(LogLevel.ERROR):
            return
        self._log(LogLevel.ERROR, msg, *args)
        exc_type = sys.exc_info()[0]
        if exc_type is None:
            return
        for line in traceback.format_exc().rstrip().splitlines():
            self._emit('TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """Cached logger for ``module`` ('engine', 'score_store', ...)."""
    return GameLogger(module)


def disable_logging() -> None:
    """Silence every module, dropping per-module overrides."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
