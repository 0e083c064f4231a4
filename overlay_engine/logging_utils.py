from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path

ENGINE_LOGGER_NAME = "OverlayEngine"
LOG_DIR_ENV = "OVERLAY_ENGINE_LOG_DIR"
PROPAGATE_ENV = "OVERLAY_ENGINE_PROPAGATE_LOGS"
LOG_FILENAME = "overlay-engine.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_logs_dir(base_path: Path, log_dir_name: str = "OverlayEngine") -> Path:
    """
    Pick the directory for engine logs.

    Candidates in order: OVERLAY_ENGINE_LOG_DIR (relative values are taken
    from `base_path`), XDG state then cache homes, `cwd/logs`, and finally
    the system temp dir. The first one that can be created wins.
    """
    candidates = []

    env_override = os.environ.get(LOG_DIR_ENV)
    if env_override:
        override = Path(env_override).expanduser()
        if not override.is_absolute():
            override = base_path.resolve() / override
        candidates.append(override)

    state_home = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    candidates.extend([state_home / "logs", cache_home / "logs", Path.cwd() / "logs"])

    for base in candidates:
        target = base / log_dir_name
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return target

    fallback = Path(tempfile.gettempdir()) / log_dir_name
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


def configure_engine_logger(
    log_dir: Path,
    *,
    debug_enabled: bool = False,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
) -> logging.Logger:
    """Send the engine's loggers to a rotating file in `log_dir`; repeated calls reuse the handler."""
    logger = logging.getLogger(ENGINE_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    logger.propagate = os.environ.get(PROPAGATE_ENV, "").strip().lower() in {"1", "true", "yes", "on"}

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = (log_dir / LOG_FILENAME).resolve()
    for existing in logger.handlers:
        if isinstance(existing, RotatingFileHandler) and Path(existing.baseFilename).resolve() == log_path:
            return logger

    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=max(0, retention - 1),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
