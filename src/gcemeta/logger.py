import logging

from rich.console import Console
from rich.logging import RichHandler

# Library modules log under this name and never attach handlers themselves;
# only the gcemeta console command calls setup_logger().
LOGGER_NAME = "gcemeta"


def setup_logger(level: int = logging.ERROR) -> logging.Logger:
    """Routes gcemeta log records to stderr through a RichHandler."""

    logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        # markup off: error text carries pydantic's [type=...] details verbatim
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    return logger
