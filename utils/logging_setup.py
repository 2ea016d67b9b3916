import json
import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(app):
    """Attach JSON handlers to the root logger once per process."""
    logger = logging.getLogger()
    logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    if any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        return logger

    console = logging.StreamHandler()
    console.setFormatter(JsonFormatter())
    logger.addHandler(console)

    log_dir = app.config.get("LOG_DIR")
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        # Log file rotates daily, keeps 14 days
        handler = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, "salon.log"),
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    return logger
