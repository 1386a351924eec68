import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Server loggers that should follow the application log level.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Process-wide logging facade for the concept-map service."""

    _logger: logging.Logger = logging.getLogger("conceptmap")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach a stdout handler and align server loggers with the app level."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)
        for name in _SERVER_LOGGERS:
            logging.getLogger(name).setLevel(level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
