"""
Run configuration
Defaults come from PASSGEN_* environment variables, CLI flags override them
"""

import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from passgen.errors import InvalidConfiguration


class Capitalization(str, Enum):
    NONE = "none"
    FIRST = "first"
    UPPER = "upper"


class OutputMode(str, Enum):
    CLIPBOARD = "clipboard"
    TERMINAL = "terminal"
    INFO = "info"


DEFAULT_SALT_CHARS = "0123456789"
MAX_WAIT_SECONDS = 24 * 60 * 60


class Settings(BaseSettings):
    """Defaults read from the environment"""

    LENGTH: int = 7
    SEPARATOR: str = " "
    CASE: Capitalization = Capitalization.FIRST
    SALT_LENGTH: int = 0
    SALT_CHARS: str = DEFAULT_SALT_CHARS
    WORDLIST: Optional[str] = None
    WAIT: float = 10.0

    class Config:
        env_prefix = "PASSGEN_"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


@dataclass(frozen=True)
class PassphraseConfig:
    """Immutable options for a single run"""

    length: int = 7
    separator: str = " "
    case: Capitalization = Capitalization.FIRST
    salt_length: int = 0
    salt_chars: str = DEFAULT_SALT_CHARS
    wordlist: Optional[str] = None
    output: OutputMode = OutputMode.CLIPBOARD
    wait: float = 10.0


def validate_config(config: PassphraseConfig) -> None:
    """Validate every option, reporting all problems at once."""
    errors = []

    if config.length < 1:
        errors.append("length must be >= 1")

    if config.salt_length < 0:
        errors.append("salt length must be >= 0")

    if config.salt_length > 0:
        if not config.salt_chars:
            errors.append("salt characters must not be empty when salt length > 0")
        elif len(set(config.salt_chars)) != len(config.salt_chars):
            errors.append("salt characters must not repeat")

    if not math.isfinite(config.wait) or config.wait < 0:
        errors.append("wait must be a number of seconds >= 0")
    elif config.wait > MAX_WAIT_SECONDS:
        errors.append(f"wait must be <= {MAX_WAIT_SECONDS} seconds")

    if errors:
        raise InvalidConfiguration("Invalid configuration:\n- " + "\n- ".join(errors))


def _pick(value, default):
    return default if value is None else value


def build_config(args, settings: Settings) -> PassphraseConfig:
    """Merge parsed CLI arguments over environment settings and validate."""
    if getattr(args, "info", False):
        output = OutputMode.INFO
    elif getattr(args, "terminal", False):
        output = OutputMode.TERMINAL
    else:
        output = OutputMode.CLIPBOARD

    config = PassphraseConfig(
        length=_pick(args.length, settings.LENGTH),
        separator=_pick(args.separator, settings.SEPARATOR),
        case=Capitalization(_pick(args.case, settings.CASE)),
        salt_length=_pick(args.salt_length, settings.SALT_LENGTH),
        salt_chars=_pick(args.salt_chars, settings.SALT_CHARS),
        wordlist=_pick(args.wordlist, settings.WORDLIST),
        output=output,
        wait=_pick(args.wait, settings.WAIT),
    )
    validate_config(config)
    return config
