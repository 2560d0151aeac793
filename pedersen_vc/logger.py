"""
logger.py

Logging helpers with sanitization so commitment openings (blinding scalars,
value vectors) never end up in log output.
"""

import logging
from typing import Any, Optional

from .config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger("pedersen_vc")
logger.addHandler(logging.NullHandler())

_SENSITIVE_KEYS = {"blinding", "values", "value", "secret", "seed", "entropy", "r"}


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler with LOG_FORMAT to the package logger.
    Level defaults to config.log_level.
    """
    level = (level or config.log_level).upper()
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def _sanitize(obj: Any) -> Any:
    """
    Recursively sanitize common containers to avoid logging secrets.
    """
    if isinstance(obj, dict):
        out = {}
        for k, v in obj.items():
            if str(k).lower() in _SENSITIVE_KEYS:
                out[k] = "<REDACTED>"
            else:
                out[k] = _sanitize(v)
        return out
    elif isinstance(obj, (list, tuple)):
        return type(obj)(_sanitize(x) for x in obj)
    return obj


def secure_log(level: str, msg: str, log: Optional[logging.Logger] = None, **kwargs):
    """
    Log while sanitizing kwargs.
    Example: secure_log('debug', 'opening rejected', index=3, blinding=r)
    """
    lg = log or logger
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    if not lg.isEnabledFor(numeric):
        return
    method = getattr(lg, level.lower(), lg.info)
    if not kwargs:
        method(msg)
        return
    sanitized = {k: ("<REDACTED>" if k.lower() in _SENSITIVE_KEYS else _sanitize(v))
                 for k, v in kwargs.items()}
    method(msg + " | " + str(sanitized))
