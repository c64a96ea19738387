"""
Structured logging configuration using structlog.

Every calculation run logs snake_case events with key/value context:
- JSON lines in production, colored console output when settings.debug is set
- One log file per process run in settings.log_dir, older runs culled
- A calculation id bound through contextvars so all events of one
  calculate_kpis() call can be correlated
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import structlog
from structlog.typing import Processor

from spha.core.config import settings

LOG_FILE_PREFIX = "spha_"


def _run_files(logs_dir: Path) -> List[Path]:
    """Run log files in logs_dir, newest first."""
    return sorted(
        logs_dir.glob(f"{LOG_FILE_PREFIX}*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )


def _cull_old_logs(logs_dir: Path, keep: int) -> None:
    for old_file in _run_files(logs_dir)[keep:]:
        old_file.unlink(missing_ok=True)


def _renderer_processors(debug: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return processors


def _install_handlers(log_file: Path, level: int) -> None:
    root_logger = logging.getLogger()
    # Reconfiguration (tests) must not stack handlers
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)
    formatter = logging.Formatter("%(message)s")
    for handler in (logging.StreamHandler(), logging.FileHandler(log_file, mode="w")):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def configure_logging(
    log_sessions_to_keep: Optional[int] = None, logs_dir: Optional[Path] = None
) -> Path:
    """Configure structlog and the stdlib handlers it writes through.

    Call once at startup, before any logging.

    Args:
        log_sessions_to_keep: Number of run log files to retain, including
            the new one (default: settings.log_sessions_to_keep)
        logs_dir: Directory for log files (default: settings.log_dir)

    Returns:
        Path of this run's log file (<logs_dir>/spha_YYYYMMDD_HHMMSS.log)
    """
    keep = log_sessions_to_keep or settings.log_sessions_to_keep
    logs_dir = Path(logs_dir or settings.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    _cull_old_logs(logs_dir, keep=keep - 1)

    log_file = logs_dir / f"{LOG_FILE_PREFIX}{datetime.now():%Y%m%d_%H%M%S}.log"
    level = logging.DEBUG if settings.debug else logging.INFO

    _install_handlers(log_file, level)
    structlog.configure(
        processors=_renderer_processors(settings.debug),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return log_file


def bind_context(**kwargs) -> None:
    """Bind context variables included in all subsequent log events.

        bind_context(calculation_id=calculation_id)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context(*keys: str) -> None:
    """Unbind the given context variables, or all of them when none are named."""
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()
