# logging_config.py
# Logging setup for the estimator. Call setup_logging() once at startup.

import json
import logging
import logging.handlers
import os
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Structured JSON log lines for machine parsing."""

    def format(self, record):
        entry = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        for key in ("item_id", "quote_id", "product_id", "total"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Readable console format with color."""
    COLORS = {
        "DEBUG": "\033[36m", "INFO": "\033[32m",
        "WARNING": "\033[33m", "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        return f"{color}{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}{self.RESET}"


def setup_logging(level=None, json_logs=None, log_file=None):
    """
    Configure the root logger.

    Args:
        level: log level name (default: LED_ESTIMATOR_LOG_LEVEL or INFO)
        json_logs: JSON console output (default: LED_ESTIMATOR_JSON_LOGS set)
        log_file: optional path for a rotating JSON log (5 MB x 5)
    """
    if level is None:
        level = os.environ.get("LED_ESTIMATOR_LOG_LEVEL", "INFO")
    level = level.upper()
    if json_logs is None:
        json_logs = bool(os.environ.get("LED_ESTIMATOR_JSON_LOGS"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    root.addHandler(console)

    if log_file:
        directory = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(directory, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(JSONFormatter())
        root.addHandler(fh)

    # Streamlit's own loggers are chatty at INFO
    for name in ("streamlit", "urllib3", "PIL"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("led_estimator").info("Logging initialized at %s", level)
