"""
Entropy of generated passphrases
"""

import math

from passgen.errors import InvalidConfiguration

# Rounded up from log2(95) printable characters
ASCII_BITS_PER_CHAR = 7.0

STRENGTH_LEVELS = (
    (50.0, "weak"),
    (70.0, "fair"),
    (100.0, "strong"),
)


def passphrase_entropy(
    list_size: int,
    word_count: int,
    salt_length: int = 0,
    alphabet_size: int = 10,
) -> float:
    """
    Bits of entropy for words drawn with replacement plus salt characters:
    word_count * log2(list_size) + salt_length * log2(alphabet_size)
    """
    if list_size < 1:
        raise InvalidConfiguration("list size must be >= 1")
    if word_count < 0 or salt_length < 0:
        raise InvalidConfiguration("word count and salt length must be >= 0")
    if salt_length > 0 and alphabet_size < 1:
        raise InvalidConfiguration("salt alphabet must not be empty")

    bits = word_count * math.log2(list_size)
    if salt_length > 0:
        bits += salt_length * math.log2(alphabet_size)
    return bits


def equivalent_ascii_length(bits: float) -> float:
    """Length of a random ASCII password with the same entropy"""
    return bits / ASCII_BITS_PER_CHAR


def strength_label(bits: float) -> str:
    for threshold, label in STRENGTH_LEVELS:
        if bits < threshold:
            return label
    return "very strong"
