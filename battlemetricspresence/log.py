"""
Configuración de logging para BattleMetricsPresence.
By Killerbite95
"""

import logging
import sys
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


class UTCISOFormatter(logging.Formatter):
    """Formatter con timestamps ISO-8601 en UTC (2024-01-01T12:00:00.000Z)."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        base = time.strftime("%Y-%m-%dT%H:%M:%S", self.converter(record.created))
        return f"{base}.{int(record.msecs):03d}Z"


class _BelowErrorFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def setup_logging(level: int = logging.INFO) -> None:
    """
    Instala los handlers en el logger raíz.
    INFO/WARNING van a stdout, ERROR y superiores a stderr.
    """
    formatter = UTCISOFormatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(_BelowErrorFilter())

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.ERROR)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)
    root.setLevel(level)
