import logging, json, sys, time, os

# decode-path context passed through ``extra=``
CONTEXT_FIELDS = ("record", "field", "key", "directory", "count")


class JsonFormatter(logging.Formatter):
    """One JSON object per line; context fields are added when a call supplies them."""

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%SZ")
        self.converter = time.gmtime  # Use UTC timestamps

    def format(self, record):
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = str(getattr(record, name))
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def get_logger(name="pkcs15", level=None, to_file=None):
    """Unified structured logger for all pkcs15_core modules."""
    logger = logging.getLogger(name)
    logger.setLevel(level or os.getenv("PKCS15_LOG_LEVEL", "INFO").upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            # Ensure the directory exists before writing
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
