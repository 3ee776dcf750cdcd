"""
utils/__init__.py - Logging Setup

Shared logger factory: each named component logs to the console and
to its own file under the configured log directory.
"""

import os
import logging


def get_logger(name, filename=None, log_dir="Logs"):
    """
    Return a named logger writing to <log_dir>/<filename or name>.log and stderr.

    Repeated calls reuse the logger's handlers; the file handler is
    replaced when a call asks for a different log file.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    path = os.path.abspath(os.path.join(log_dir, f"{filename if filename else name}.log"))
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if any(h.baseFilename == path for h in file_handlers):
        return logger
    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    fh = logging.FileHandler(path)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    return logger
