# utils/__init__.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Utility module exports

from .logger import LogLevel, get_logger, set_log_level, configure_logging
from .limits import EngineLimits, LimitExceededError, DEFAULT_LIMITS, UNLIMITED

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "EngineLimits",
    "LimitExceededError",
    "DEFAULT_LIMITS",
    "UNLIMITED",
]
