"""
Terminal output
"""

import sys
from typing import Optional, TextIO

from passgen.entropy import equivalent_ascii_length, strength_label
from passgen.generator import Passphrase

HISTORY_WARNING = (
    "DO NOT USE THIS PASSPHRASE. Most shells log their history in an "
    "unencrypted file. Instead run passgen in the standard mode to copy a "
    "passphrase directly to your clipboard."
)


def print_passphrase(passphrase: Passphrase, stream: Optional[TextIO] = None) -> None:
    """Print the passphrase and its entropy"""
    out = stream or sys.stdout
    print(passphrase.text, file=out)
    print(f"Entropy: {passphrase.entropy:.2f} bits", file=out)


def print_info(passphrase: Passphrase, stream: Optional[TextIO] = None) -> None:
    """Print a sample passphrase with information about its strength"""
    out = stream or sys.stdout
    print(HISTORY_WARNING, file=out)
    print(file=out)
    print(f"Sample: {passphrase.text}", file=out)
    print(f"Word list size: {passphrase.list_size}", file=out)
    print(f"Entropy: {passphrase.entropy:.2f} bits ({strength_label(passphrase.entropy)})", file=out)
    equivalent = equivalent_ascii_length(passphrase.entropy)
    print(
        f"This is equivalent to a {equivalent:.2f}-character password of random ASCII characters",
        file=out,
    )
