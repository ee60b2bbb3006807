import os
import sys
import logging
from logging.handlers import RotatingFileHandler

FORMAT  = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def _reset_handlers(logger):
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def setup_logging(app_instance):
    """Configure structured logging for both console and rotating files."""
    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)
    log_dir = app_instance.config["LOG_DIR"]
    os.makedirs(log_dir, exist_ok=True)

    # Rotating file handler (10 MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    # Console handler
    level = app_instance.config["LOG_LEVEL"]
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, level, logging.INFO))

    # App logger
    _reset_handlers(app_instance.logger)
    app_instance.logger.addHandler(file_handler)
    app_instance.logger.addHandler(console_handler)
    app_instance.logger.setLevel(logging.DEBUG)
    app_instance.logger.propagate = False

    # Store / seed loggers live under the package namespace
    pkg = logging.getLogger("habitlists")
    _reset_handlers(pkg)
    pkg.addHandler(file_handler)
    pkg.addHandler(console_handler)
    pkg.setLevel(logging.DEBUG)
    pkg.propagate = False

    # Suppress noisy werkzeug request logs in production
    if app_instance.config["IS_PROD"]:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
