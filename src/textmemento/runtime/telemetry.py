"""Telelog-backed logging for buffer and history operations.

``get_logger()`` -- cached ``telelog.Logger`` configured from ``TEXTMEMENTO_*``
``record_event(name, ...)`` -- one structured ``event::<name>`` record
``span(name, ...)`` -- profile + component-track a history operation
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXTMEMENTO_"
LOGGER_NAME = "textmemento"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a ``TEXTMEMENTO_``-prefixed environment variable."""

    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _build_config(min_level: Optional[str]) -> Any:
    config = tl.Config()
    config.with_min_level((min_level or env("LOG_LEVEL") or "INFO").upper())
    config.with_profiling(True)

    quiet = env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(not quiet)
    if not quiet:
        config.with_colored_output(not env_flag("NO_COLOR", False))
    config.with_json_format(env_flag("LOG_JSON", False))

    log_file = env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, min_level: Optional[str] = None) -> None:
    """Rebuild the logger config from the environment.

    ``min_level`` overrides ``TEXTMEMENTO_LOG_LEVEL``; cached loggers are
    dropped so the next ``get_logger`` call picks the new config up.
    """

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = _build_config(min_level)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or env("LOGGER") or LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            configure()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ACTIVE_CONFIG
        )
    return _LOGGER_CACHE[logger_name]


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    method = getattr(log, f"{level.lower()}_with", None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(message, _pairs(data))


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    """Emit ``event::<name>``, e.g. ``buffer.restore`` or ``history.noop``."""

    _emit(get_logger(), level, f"event::{name}", {"event": name, **(data or {})})


@contextmanager
def span(name: str, *, metadata: Optional[Dict[str, Any]] = None) -> Iterator[None]:
    """Profile and component-track the block named ``name``.

    ``metadata`` is attached as logger context while the block runs. If the
    block raises, a ``span::fail`` error record is written before the
    exception propagates.
    """

    log = get_logger()
    context = {key: str(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        stack.enter_context(log.track_component(name))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            _emit(log, "error", "span::fail", {"span": name, "reason": exc})
            raise
        finally:
            for key in context:
                log.remove_context(key)


__all__ = ["configure", "env", "env_flag", "get_logger", "record_event", "span"]
