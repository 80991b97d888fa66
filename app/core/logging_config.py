import logging

from .config import settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level once per process."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _configured = True
