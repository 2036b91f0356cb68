"""
Logging configuration
Logs go to stderr and never include passphrases
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts secret material"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "secret",
        "words",
        "salt",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    # Likely contains a secret value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def verbosity_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int = 0):
    """Configure logging for the CLI; stdout stays reserved for output"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    logger = logging.getLogger("passgen")
    logger.setLevel(verbosity_level(verbosity))

    # Clear existing handlers to avoid duplicates
    logger.handlers = []
    logger.addHandler(handler)
    logger.propagate = False
