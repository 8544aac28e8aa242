from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
HANDLER_NAME = "uniconnect"


def configure_logging(level: str = "INFO") -> None:
    """One stream handler on the package logger; werkzeug only reports warnings."""

    logger = logging.getLogger("uniconnect")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
