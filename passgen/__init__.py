# passgen - diceware-style passphrase generator
from passgen.errors import (
    ClipboardUnavailable,
    InvalidConfiguration,
    InvalidWordlist,
    PassgenError,
)
from passgen.generator import Passphrase, generate_passphrase
from passgen.wordlist import load_wordlist

__version__ = "1.0.0"

__all__ = [
    "ClipboardUnavailable",
    "InvalidConfiguration",
    "InvalidWordlist",
    "PassgenError",
    "Passphrase",
    "generate_passphrase",
    "load_wordlist",
    "__version__",
]
