"""Telemetry for the session and history layers, built on telelog.

``configure`` selects a preset or an explicit ``telelog.Config``; without a
call, the first logger request builds one from ``CSHARP_ASSIST_*``
environment variables. ``record_event`` emits a structured event and
``span`` profiles a block, optionally tracking it as a component.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CSHARP_ASSIST_"

# preset -> (min level, console, json, default log file or None)
_PRESETS: Dict[str, tuple[str, bool, bool, Optional[str]]] = {
    "development": ("DEBUG", True, False, None),
    # The Textual front-end owns the terminal, so these log to disk.
    "production": ("INFO", False, False, "csharp_assist.log"),
    "performance": ("DEBUG", False, True, "csharp_assist-performance.log"),
}
PRESETS = tuple(_PRESETS)

_LOGGERS: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _preset_config(preset: str) -> Any:
    try:
        level, console, as_json, log_file = _PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'. Expected one of {PRESETS}.") from None

    config = tl.Config()
    config.with_min_level(level)
    config.with_console_output(console)
    config.with_colored_output(console)
    config.with_json_format(as_json)
    if log_file:
        config.with_file_output(_env("LOG_FILE") or log_file)
        config.with_buffering(True)
    config.with_profiling(True)
    return config


def _env_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    config.with_colored_output(console and not _env_flag("NO_COLOR"))
    config.with_json_format(_env_flag("LOG_JSON"))
    if _env("LOG_FILE"):
        config.with_file_output(_env("LOG_FILE"))
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active configuration; cached loggers are rebuilt lazily.

    ``config`` and ``preset`` are mutually exclusive. With neither, the
    configuration is re-read from the environment.
    """

    global _config
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = _preset_config(preset)
    _config = config if config is not None else _env_config()
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    logger_name = name or _env("LOGGER") or "csharp_assist"
    if logger_name not in _LOGGERS:
        if _config is None:
            _config = _env_config()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _LOGGERS[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level.lower(), f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span`` so the block can attach metadata as it learns it."""

    logger: Any
    span_name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block; ``component=True`` also tracks it under ``name``.

    ``metadata`` is pushed as logger context for the duration of the block.
    A failing block logs ``span::fail`` with the exception text and re-raises.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(
        logger=log,
        span_name=name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    for key, value in handle.metadata.items():
        log.add_context(key, value)
    context_keys = list(handle.metadata)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            _emit(log, "error", "span::fail", {"span": name, "reason": str(exc), **handle.metadata})
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
