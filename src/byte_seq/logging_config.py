"""
Logging setup for byte_seq.

The library only creates module loggers under ``byte_seq``; nothing is
printed until an application calls setup_logging() or configures logging
itself.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

_LOGGING_CONFIGURED = False


class ThreeCharLevelFormatter(logging.Formatter):
    """Formatter that prints DBG/INF/WRN/ERR/CRT instead of full level names."""

    SHORT_LEVELS = {
        logging.DEBUG: 'DBG',
        logging.INFO: 'INF',
        logging.WARNING: 'WRN',
        logging.ERROR: 'ERR',
        logging.CRITICAL: 'CRT',
    }

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record, so rename the level on a copy
        short = logging.makeLogRecord(record.__dict__)
        short.levelname = self.SHORT_LEVELS.get(record.levelno, record.levelname[:3])
        return super().format(short)


def setup_logging(debug: bool = False, force: bool = False):
    """
    Send byte_seq log output to stdout.

    Args:
        debug: Log byte_seq at DEBUG instead of INFO
        force: Reconfigure even if setup_logging() already ran
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED and not force:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ThreeCharLevelFormatter(LOG_FORMAT))

    # Root stays at WARNING so third-party debug output is suppressed
    logging.basicConfig(level=logging.WARNING, handlers=[handler], force=True)

    logging.getLogger('byte_seq').setLevel(logging.DEBUG if debug else logging.INFO)

    _LOGGING_CONFIGURED = True


def is_configured() -> bool:
    return _LOGGING_CONFIGURED
