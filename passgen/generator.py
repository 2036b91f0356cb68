"""
Passphrase generation
Uses only the system CSPRNG (secrets module)
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from passgen.config import Capitalization, PassphraseConfig, validate_config
from passgen.entropy import passphrase_entropy
from passgen.errors import InvalidWordlist

logger = logging.getLogger("passgen.generator")


@dataclass(frozen=True)
class Passphrase:
    """A generated passphrase and the entropy of the space it was drawn from"""

    text: str
    words: Tuple[str, ...]
    salted_index: Optional[int]
    entropy: float
    list_size: int

    def __repr__(self) -> str:
        # Keep the secret out of tracebacks and debug logs
        return f"Passphrase(words={len(self.words)}, entropy={self.entropy:.2f})"


def apply_case(word: str, case: Capitalization) -> str:
    if case == Capitalization.UPPER:
        return word.upper()
    if case == Capitalization.FIRST:
        return word[:1].upper() + word[1:]
    return word


def cased_candidates(wordlist: Sequence[str], case: Capitalization) -> Tuple[str, ...]:
    """
    Apply capitalization to the whole list, dropping entries it merges
    (e.g. "ss" and "ß" both upper-case to "SS")
    """
    seen = set()
    candidates = []
    for word in wordlist:
        cased = apply_case(word, case)
        if cased not in seen:
            seen.add(cased)
            candidates.append(cased)
    return tuple(candidates)


def draw_words(wordlist: Sequence[str], count: int) -> Tuple[str, ...]:
    """Draw count words independently and uniformly, with replacement"""
    size = len(wordlist)
    return tuple(wordlist[secrets.randbelow(size)] for _ in range(count))


def draw_salt(salt_chars: str, salt_length: int) -> str:
    return "".join(secrets.choice(salt_chars) for _ in range(salt_length))


def generate_passphrase(wordlist: Sequence[str], config: PassphraseConfig) -> Passphrase:
    """
    Build one passphrase
    - config.length words drawn from the capitalized, distinct wordlist
    - salt appended to one uniformly chosen word when salt_length > 0
    """
    validate_config(config)
    if not wordlist:
        raise InvalidWordlist("Wordlist is empty")

    candidates = cased_candidates(wordlist, config.case)
    words = list(draw_words(candidates, config.length))

    salted_index = None
    if config.salt_length > 0:
        salted_index = secrets.randbelow(len(words))
        words[salted_index] += draw_salt(config.salt_chars, config.salt_length)

    entropy = passphrase_entropy(
        len(candidates),
        config.length,
        config.salt_length,
        len(config.salt_chars),
    )
    logger.debug(f"Generated {config.length} words from {len(candidates)} candidates")

    return Passphrase(
        text=config.separator.join(words),
        words=tuple(words),
        salted_index=salted_index,
        entropy=entropy,
        list_size=len(candidates),
    )
