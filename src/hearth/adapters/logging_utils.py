import logging
import json
import math
import sys
import time
from typing import Any, Dict

from .config import config

# keys the formatter writes itself; context cannot overwrite them
_RESERVED = ("ts", "level", "logger", "message", "env", "exc")


def _jsonable(value: Any) -> Any:
    # NaN/inf from degenerate loan inputs are not valid JSON
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


class JsonLogFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": config.ENV,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            for key, value in ctx.items():
                name = f"ctx_{key}" if key in _RESERVED else key
                payload[name] = _jsonable(value)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def with_context(**fields: Any) -> Dict[str, Dict[str, Any]]:
    """``extra=`` mapping for a log call: ``logger.info("msg", extra=with_context(calculator_id=...))``."""
    return {"context": fields}


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL.upper())
        logger.propagate = False
    return logger
