"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    Formatter,
    Logger,
    StreamHandler,
    basicConfig,
    getLogger,
)

_PACKAGE_LOGGER = "sourcemapper"

__console_handler: StreamHandler | None = None  # type: ignore[type-arg]


def init_logging(*, verbose: bool = False, filename: str | None = None) -> None:
    """Initialize logging for a host application.

    The library itself never configures handlers. Hosts that have no logging
    setup of their own may call this at startup. Repeated calls reuse the
    console handler installed by the first one.

    Args:
        verbose: Enable debug output for sourcemapper loggers.
        filename: Optional log file. Records go to stderr when omitted.

    """
    global __console_handler  # noqa: PLW0603

    if filename is not None:
        basicConfig(
            level=INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename=filename,
            filemode="w",
        )

    package_logger = getLogger(_PACKAGE_LOGGER)

    # Console handler for user-facing logs
    if (
        __console_handler is None
        or __console_handler not in package_logger.handlers
    ):
        __console_handler = StreamHandler()
        __console_handler.setFormatter(Formatter("%(levelname)s: %(message)s"))
        package_logger.addHandler(__console_handler)
    __console_handler.setLevel(DEBUG if verbose else INFO)

    if verbose:
        package_logger.setLevel(DEBUG)
        package_logger.debug("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)
