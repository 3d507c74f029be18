"""Console entry point: load the wordlist, read a password, print the verdict."""
import argparse
import logging
import sys

from configuration.config_manager import ConfigManager, ConfigurationError
from screening.errors import DictionaryLoadError, TableSaturatedError
from screening.password_screener import PasswordScreener

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WEAK = 1
EXIT_CONFIG_ERROR = 2
EXIT_LOAD_ERROR = 3
EXIT_SATURATED = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="password-screener",
        description="Check whether a password is strong against a wordlist"
    )
    parser.add_argument("password", nargs="?", help="password to check, read from stdin when omitted")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--wordlist", help="wordlist file, one word per line")
    parser.add_argument("--chaining-size", type=int, help="bucket count of the chaining table")
    parser.add_argument("--probing-size", type=int, help="slot count of the probing table")
    parser.add_argument("--min-length", type=int, help="shortest acceptable password")
    parser.add_argument("--skip-blank-lines", action="store_true", default=None,
                        help="ignore empty lines in the wordlist")
    parser.add_argument("--parallel-load", action="store_true", default=None,
                        help="fill both tables concurrently")
    parser.add_argument("--exit-code", action="store_true",
                        help="exit with status 1 when the password is weak")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def read_password(stream=None) -> str:
    """Reads one line as the password, end of input counts as an empty password"""
    stream = stream or sys.stdin
    print("Enter a password to check: ", end="", flush=True)
    line = stream.readline()
    return line.rstrip("\r\n")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s"
    )

    try:
        manager = ConfigManager()
        config = manager.override(
            manager.load(args.config),
            wordlist_path=args.wordlist,
            chaining_size=args.chaining_size,
            probing_size=args.probing_size,
            min_password_length=args.min_length,
            skip_blank_lines=args.skip_blank_lines,
            parallel_load=args.parallel_load
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    print("Loading dictionary...")
    try:
        screener = PasswordScreener.from_wordlist(config=config)
    except DictionaryLoadError as e:
        logger.error(f"Dictionary unavailable: {e}")
        return EXIT_LOAD_ERROR
    except TableSaturatedError as e:
        logger.error(f"Dictionary does not fit: {e}")
        return EXIT_SATURATED
    print("Dictionary loaded.")

    password = args.password if args.password is not None else read_password()
    print(f"Checking password: {password}")
    strong = screener.is_strong(password)
    print(f"Is the password strong? {str(strong).lower()}")

    if args.exit_code and not strong:
        return EXIT_WEAK
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
