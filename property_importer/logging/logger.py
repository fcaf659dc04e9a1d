import logging
import sys

# HTTP clients log every request at INFO; keep them quiet unless debugging.
_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "pdfminer", "psycopg.pool")


class Log:
    """Centralized logging for the import pipeline."""

    _logger: logging.Logger = logging.getLogger("property_importer")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the pipeline log level, attach a stdout handler and tame client libraries."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)
        third_party_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(third_party_level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
