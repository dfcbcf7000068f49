"""Package logger: structured JSON records from the ``botapi`` logger.

By default the logger only carries a ``NullHandler``, so records reach the
application's own logging setup and nothing else.  Setting ``BOT_API_LOG_LEVEL``
or ``BOT_API_LOG_FILE`` (or passing a level to :meth:`BotApiLogger.get_logger`)
adds a JSON handler on stderr, plus a size-rotated file when a path is given.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOGGER_NAME = "botapi"


class _JsonFormatter(logging.Formatter):
    """Render a record as one line of JSON.

    The base keys are ``timestamp`` (UTC, ISO 8601), ``level``, ``logger``,
    ``message``, ``module`` and ``func_name``.  Keys passed through a logging
    call's ``extra`` mapping are added alongside them, so decoder and request
    code can attach ``union``, ``candidate``, ``api_method`` or
    ``error_code``::

        logger.warning("No matching union variant", extra={"union": "InputMedia"})
        # {"timestamp": "...", "level": "WARNING", ..., "union": "InputMedia"}

    Values that are not JSON serialisable are written with ``str()``.
    """

    _RESERVED: frozenset = frozenset(
        vars(logging.LogRecord("", 0, "", 0, "", (), None))
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in self._RESERVED and key not in entry
        )
        return json.dumps(entry, ensure_ascii=False, default=str)


class BotApiLogger:
    """Owner of the single ``botapi`` logger.

    Instantiating it attaches a ``NullHandler`` once; :meth:`enable_output`
    adds the JSON handlers.

    Usage::

        from botapi.logger import BotApiLogger

        logger = BotApiLogger.get_logger()
        logger.debug("Request built", extra={"api_method": "getMe"})
    """

    _instance: Optional["BotApiLogger"] = None
    _logger: Optional[logging.Logger] = None
    _name: str = LOGGER_NAME
    _output_enabled: bool = False

    _MAX_BYTES: int = 5 * 1024 * 1024
    _BACKUP_COUNT: int = 5

    def __new__(cls) -> "BotApiLogger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._logger = logging.getLogger(cls._name)
            # A reloaded module finds its handlers already attached.
            if not instance._logger.handlers:
                instance._logger.addHandler(logging.NullHandler())
            cls._instance = instance
        return cls._instance

    def enable_output(self, level: int = logging.INFO, log_file: Optional[str] = None) -> None:
        """Write JSON records at *level* or above to stderr and, optionally, *log_file*.

        Only the first call attaches handlers.
        """
        assert self._logger is not None
        if self._output_enabled:
            return
        self._logger.setLevel(level)
        for handler in self._build_handlers(log_file):
            handler.setLevel(level)
            handler.setFormatter(_JsonFormatter())
            self._logger.addHandler(handler)
        self._output_enabled = True

    def _build_handlers(self, log_file: Optional[str]) -> List[logging.Handler]:
        handlers: List[logging.Handler] = [logging.StreamHandler()]
        if log_file:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    log_file,
                    maxBytes=self._MAX_BYTES,
                    backupCount=self._BACKUP_COUNT,
                    encoding="utf-8",
                )
            )
        return handlers

    @staticmethod
    def get_logger(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
        """Return the shared ``botapi`` logger.

        Passing a *level* or a *log_file* turns on JSON output (INFO when only a
        file is given).  Without either the logger stays silent.
        """
        instance = BotApiLogger()
        if level is not None or log_file:
            instance.enable_output(logging.INFO if level is None else level, log_file)
        assert instance._logger is not None
        return instance._logger

    def cleanup(self) -> None:
        """Flush, close and detach every handler."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
        self._output_enabled = False
