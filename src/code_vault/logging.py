"""Logging setup for code-vault.

The TUI owns the terminal, so records go to the Textual devtools console
(``textual console``) by default instead of stderr.
"""

import logging
from typing import Optional, Union

from textual.logging import TextualHandler

LOGGER_NAME = "code_vault"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach a single handler to the ``code_vault`` logger and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if handler is None:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
