import logging
import sys
from typing import TextIO

# pdfminer logs every parsed object at DEBUG; httpx logs every request at INFO.
_NOISY_LOGGERS = ("pdfminer", "httpx", "httpcore", "openai")


class Log:
    """Centralized logging for the pipeline."""

    _logger: logging.Logger = logging.getLogger("docpipeline")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the pipeline log level, point the single handler at *stream*
        (stdout by default) and keep third-party libraries at WARNING."""
        cls._logger.setLevel(log_level.upper())
        stream = stream or sys.stdout
        if cls._logger.handlers:
            for existing in cls._logger.handlers:
                if isinstance(existing, logging.StreamHandler):
                    existing.setStream(stream)
        else:
            handler = logging.StreamHandler(stream)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, exc: BaseException, **kwargs: object) -> None:
        """Log at ERROR with the traceback of *exc*."""
        cls._logger.error(message, exc_info=exc, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
