"""
Error kinds reported by the passgen CLI
Each kind maps to its own process exit status
"""


class PassgenError(Exception):
    """Base class for all failures surfaced to the user"""

    exit_code = 1


class InvalidConfiguration(PassgenError):
    """Options that cannot produce a passphrase (e.g. zero words)"""

    exit_code = 2


class InvalidWordlist(PassgenError):
    """Wordlist file unreadable or empty after normalization"""

    exit_code = 3


class ClipboardUnavailable(PassgenError):
    """Platform clipboard could not be accessed"""

    exit_code = 4
