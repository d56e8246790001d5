"""Diagnostic channel for the parser, plus logging setup for the CLI.

The parser reports three grades of diagnostics:

* info    - purely observational ("Found 5 parameters.")
* warning - recoverable anomaly (missing checksum, bad line terminator)
* error   - raised as ``NMEAParseError``; never suppressed

Info and warning messages go to the ``nmeastream`` loggers, but only when the
owning parser was created with ``log=True``. This keeps a busy stream quiet by
default while still letting an application turn on per-sentence tracing for
one parser instance without touching logger levels.
"""

import logging
import sys
from typing import NoReturn

from nmeastream.nmea.errors import NMEAParseError
from nmeastream.nmea.types import NMEASentence

__all__ = ["Diagnostics", "setup_logging"]

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Diagnostics:
    """Grade-aware diagnostic sink bound to one logger.

    Args:
        enabled: Emit info/warning messages. Errors are raised regardless.
        logger: Destination logger (default: this module's logger).
    """

    def __init__(self, enabled: bool = False, logger: logging.Logger | None = None) -> None:
        self.enabled = enabled
        self.logger = logger or logging.getLogger(__name__)

    def info(self, message: str) -> None:
        if self.enabled:
            self.logger.info(message)

    def warning(self, message: str) -> None:
        if self.enabled:
            self.logger.warning(message)

    def error(self, sentence: NMEASentence | None, message: str) -> NoReturn:
        """Raise an error-grade diagnostic for ``sentence``."""
        raise NMEAParseError("[ERROR] " + message, sentence)


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route ``nmeastream`` log records to stderr.

    Args:
        level: Threshold for the package logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger("nmeastream")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
