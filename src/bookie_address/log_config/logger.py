"""Root logging setup driven by ``SystemConfig``, plus context-prefixed loggers."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, MutableMapping

from bookie_address.core.models.config import SystemConfig

# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_FILE = "bookie.log"

# Marks handlers installed here so a re-run only replaces its own.
_OWNED_ATTR = "_bookie_address_handler"


# ---------------------------------------------------------------------------
# setup_logging
# ---------------------------------------------------------------------------
def setup_logging(
    system: SystemConfig | None = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
) -> list[logging.Handler]:
    """Attach a console handler, and a rotating ``bookie.log`` when
    ``system.log_dir`` is set, to the root logger at ``system.log_level``.

    Handlers installed by an earlier call are removed first; handlers that
    belong to the embedding application are left alone.

    Returns:
        The handlers that were installed.
    """
    system = system or SystemConfig()
    level = logging.getLevelName(system.log_level)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in [h for h in root.handlers if getattr(h, _OWNED_ATTR, False)]:
        root.removeHandler(handler)
        handler.close()

    installed: list[logging.Handler] = [logging.StreamHandler()]
    if system.log_dir is not None:
        os.makedirs(system.log_dir, exist_ok=True)
        installed.append(
            RotatingFileHandler(
                os.path.join(system.log_dir, _LOG_FILE),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)
    for handler in installed:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        root.addHandler(handler)
    return installed


# ---------------------------------------------------------------------------
# Loggers
# ---------------------------------------------------------------------------
def get_logger(name: str) -> logging.Logger:
    """Return a stdlib Logger for *name* (typically ``__name__``)."""
    return logging.getLogger(name)


class ContextualLogger(logging.LoggerAdapter):
    """Adapter that prepends ``[key=value]`` context to every message.

    Usage::

        log = ContextualLogger(get_logger(__name__), source="detected", selector="eth0")
        log.info("Resolving")  # => "[source=detected] [selector=eth0] Resolving"
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        super().__init__(logger, context)
        self._prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        return (f"{self._prefix} {msg}" if self._prefix else msg), kwargs
