"""Logging setup for the ratiolint CLI.

Two handlers hang off the root logger:

* a Rich console handler on **stderr**, so reports on stdout stay clean
  for piping. Its level follows ``-v``/``-q``;
* an optional *flight recorder*: a ``MemoryHandler`` that buffers every
  record at DEBUG and dumps the buffer to a file once a WARNING (or worse)
  is logged, or on exit when asked to.

Records from other libraries are shown on the console with a ``[lib]``
prefix so they are easy to tell apart from ratiolint's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "ratiolint"
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich", "platformdirs")

DEFAULT_RECORDER_CAPACITY = 2000
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Console level for ``-v``/``-q`` counts, starting from WARNING.

    Each step moves one standard level; the result is clamped to
    DEBUG..CRITICAL.
    """
    level = logging.WARNING + 10 * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LoggingOptions:
    """How one CLI invocation logs.

    ``log_path`` doubles as the flight-recorder switch: ``None`` means no
    recorder is installed.
    """

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    recorder_capacity: int = DEFAULT_RECORDER_CAPACITY
    flush_on_close: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def recording(self) -> bool:
        """Whether a flight recorder is installed."""
        return self.log_path is not None


class LibraryPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[lib] "`` for records from other libraries."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}] "
        return True


def console_handler(level: int, *, debug: bool = False, color: bool = True) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode the handler logs everything, with timestamps, logger names
    and clickable source paths.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s%(message)s"))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = DEFAULT_RECORDER_CAPACITY,
    *,
    flush_on_close: bool = False,
    flush_level: int = logging.WARNING,
) -> MemoryHandler:
    """Return a MemoryHandler that dumps its buffer to *path*.

    The buffer is written when a record at *flush_level* or above arrives,
    when it holds *capacity* records, and, if *flush_on_close* is set, when
    the handler is closed. The file is truncated at startup.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def setup_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    Replaces any handlers already on the root logger. The root logger itself
    passes everything; the handlers filter. Per-logger levels in
    ``options.logger_levels`` are applied last.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(options.console_level, debug=options.debug, color=options.color)
    ]
    if options.log_path is not None:
        handlers.append(
            flight_recorder(
                options.log_path,
                options.recorder_capacity,
                flush_on_close=options.flush_on_close,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in options.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def drop_unflushed_records(handlers: list[logging.Handler]) -> None:
    """Empty flight-recorder buffers that must not be written on close.

    ``logging.shutdown`` flushes every handler on Python 3.11, whatever a
    ``MemoryHandler``'s ``flushOnClose`` says.
    """
    for handler in handlers:
        if isinstance(handler, MemoryHandler) and not handler.flushOnClose:
            with handler.lock:
                handler.buffer.clear()


def shutdown_logging(handlers: list[logging.Handler]) -> None:
    """Shut logging down, writing recorder buffers only where flush-on-close is set."""
    drop_unflushed_records(handlers)
    logging.shutdown()


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    options: LoggingOptions,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO banner followed by DEBUG diagnostics.

    The diagnostics are mostly useful in the flight-recorder file, which
    sees DEBUG regardless of ``-v``/``-q``.
    """
    logger.info(
        "RATIOLINT %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(options.console_level),
        "ON" if options.recording else "OFF",
    )
    logger.debug("Python: %s", platform.python_version())
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("Executable: %s", sys.executable)
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for name in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, _distribution_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if options.recording:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path,
            options.recorder_capacity,
            options.flush_on_close,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in options.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
