"""
Main CLI orchestration
parse options -> load wordlist -> generate -> copy or print
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from passgen import __version__
from passgen.clipboard import ClipboardSink
from passgen.config import (
    Capitalization,
    OutputMode,
    PassphraseConfig,
    build_config,
    get_settings,
)
from passgen.errors import InvalidConfiguration, PassgenError
from passgen.generator import generate_passphrase
from passgen.logging_config import setup_logging
from passgen.output import print_info, print_passphrase
from passgen.wordlist import load_wordlist

logger = logging.getLogger("passgen.main")

EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Command line options; unset options fall back to PASSGEN_* settings"""
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate a passphrase and copy it to the clipboard.",
    )
    parser.add_argument(
        "-d", "--debug", action="count", default=0,
        help="Show debugging information (repeat for more detail)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-t", "--terminal", action="store_true",
        help="Print the passphrase and its entropy instead of copying it",
    )
    mode.add_argument(
        "-i", "--info", action="store_true",
        help="Display a sample passphrase along with information about its security",
    )

    parser.add_argument(
        "-w", "--wait", type=float,
        help="Seconds to wait before clearing the clipboard, 0 disables (default: 10)",
    )
    parser.add_argument("-l", "--length", type=int, help="Number of words (default: 7)")
    parser.add_argument("-s", "--separator", help="Separator between words (default: space)")
    parser.add_argument(
        "--salt-length", "--sl", dest="salt_length", type=int,
        help="Number of salt characters appended to one word (default: 0)",
    )
    parser.add_argument(
        "--salt-chars", "--sc", dest="salt_chars",
        help="Characters salt is drawn from (default: 0123456789)",
    )
    parser.add_argument(
        "-c", "--case", choices=[c.value for c in Capitalization],
        help="Word case: none, first (capitalized) or upper (default: first)",
    )
    parser.add_argument(
        "-p", "--wordlist", metavar="FILE",
        help="Word list file, or a built-in list name (default, bip39, bip39-<language>)",
    )
    return parser


def run(config: PassphraseConfig, sleep: Optional[Callable[[float], None]] = None) -> None:
    """Run one generation with a validated configuration"""
    logger.debug(f"Generating {config.length} words, output mode {config.output.value}")

    wordlist = load_wordlist(config.wordlist)
    passphrase = generate_passphrase(wordlist, config)

    if config.output == OutputMode.INFO:
        print_info(passphrase)
    elif config.output == OutputMode.TERMINAL:
        print_passphrase(passphrase)
    else:
        sink = ClipboardSink(sleep=sleep)
        sink.write(passphrase.text)
        sink.clear_after(config.wait)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        try:
            settings = get_settings()
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid PASSGEN_* environment settings:\n{e}") from e

        config = build_config(args, settings)
        run(config)
    except PassgenError as e:
        print(f"passgen: error: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("passgen: interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED

    return 0


if __name__ == "__main__":
    sys.exit(main())
