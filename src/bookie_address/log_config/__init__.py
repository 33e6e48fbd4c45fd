"""Logging setup and contextual logger."""

from bookie_address.log_config.logger import ContextualLogger, get_logger, setup_logging

__all__ = ["setup_logging", "get_logger", "ContextualLogger"]
