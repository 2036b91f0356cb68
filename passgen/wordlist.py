"""
Wordlists for passphrase generation
Built-in lists come from the official BIP39 lists in the mnemonic package,
custom lists are read from plain text files (one word per line, EFF
dice-numbered lines accepted)
"""

import logging
import os
from typing import Iterable, Optional, Tuple

from mnemonic import Mnemonic

from passgen.errors import InvalidWordlist

logger = logging.getLogger("passgen.wordlist")

DEFAULT_WORDLIST = "default"
BIP39_PREFIX = "bip39"


def builtin_names() -> Tuple[str, ...]:
    """Names accepted in place of a wordlist path"""
    languages = Mnemonic.list_languages()
    names = [DEFAULT_WORDLIST, BIP39_PREFIX]
    names.extend(f"{BIP39_PREFIX}-{language}" for language in sorted(languages))
    return tuple(names)


def _builtin_language(name: str) -> Optional[str]:
    if name in (DEFAULT_WORDLIST, BIP39_PREFIX):
        return "english"
    prefix = f"{BIP39_PREFIX}-"
    if name.startswith(prefix):
        return name[len(prefix):]
    return None


def load_builtin(name: str = DEFAULT_WORDLIST) -> Tuple[str, ...]:
    """Load a BIP39 wordlist by name (default, bip39, bip39-<language>)"""
    language = _builtin_language(name)
    if language is None or language not in Mnemonic.list_languages():
        raise InvalidWordlist(f"Unknown built-in wordlist: {name}")

    words = tuple(Mnemonic(language).wordlist)
    logger.debug(f"Loaded built-in wordlist {name} ({len(words)} words)")
    return words


def normalize_word(line: str) -> str:
    """
    Normalize one line of a wordlist file
    - surrounding non-alphabetic characters removed (drops dice numbers)
    - lowercased
    """
    start = 0
    end = len(line)
    while start < end and not line[start].isalpha():
        start += 1
    while end > start and not line[end - 1].isalpha():
        end -= 1
    return line[start:end].lower()


def parse_wordlist(lines: Iterable[str]) -> Tuple[str, ...]:
    """
    Build a wordlist from raw lines
    Empty entries are skipped and duplicates dropped, so the list size is
    the real number of distinct choices
    """
    seen = set()
    words = []
    for line in lines:
        word = normalize_word(line)
        if not word or word in seen:
            continue
        seen.add(word)
        words.append(word)

    if not words:
        raise InvalidWordlist("Wordlist contains no usable words")
    return tuple(words)


def read_wordlist_file(path: str) -> Tuple[str, ...]:
    """Read and normalize a wordlist file"""
    logger.info(f"Reading word list from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidWordlist(f"Cannot read wordlist {path}: {e}") from e

    try:
        words = parse_wordlist(lines)
    except InvalidWordlist:
        raise InvalidWordlist(f"Wordlist {path} contains no usable words") from None

    logger.debug(f"Loaded {len(words)} words from {path}")
    return words


def load_wordlist(source: Optional[str] = None) -> Tuple[str, ...]:
    """
    Load the wordlist for a run
    No source gives the default list; a built-in name is used unless a file
    of that name exists
    """
    if not source:
        return load_builtin(DEFAULT_WORDLIST)

    if not os.path.exists(source) and _builtin_language(source) is not None:
        return load_builtin(source)

    return read_wordlist_file(source)
