# core/log_setup.py

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_file: str | os.PathLike | None = None) -> None:
    """
    Installs the root handlers used by every `logging.getLogger(__name__)` in Watson.

    Args:
        level (str): A logging level name such as "DEBUG" or "INFO".
        log_file (str | os.PathLike | None): If given, records are also appended to this file.

    Notes:
        - Console output goes to stderr so it never interleaves with command feedback on stdout.
        - Calling this again replaces the previous handlers.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file is not None:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
