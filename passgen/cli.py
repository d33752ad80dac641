import argparse
import logging
import sys
from importlib.metadata import version, PackageNotFoundError

from .config import load_config, default_config_fn, ConfigFileException
from .charset import ConfigurationError
from .sampler import EntropyError
from .generate import PasswordGenerator

logger = logging.getLogger(__name__)

def package_version():
    try:
        return version("passgen")
    except PackageNotFoundError:
        return "unknown"

def argument_parser():
    ap = argparse.ArgumentParser(prog="passgen",
        description="Generates cryptographically secure passwords with "
            "configurable length and character sets.")
    ap.add_argument("-l", "--length", type=int, default=None,
        help="Password length (default: 16, minimum: 8)")
    ap.add_argument("--no-symbols", action="store_true",
        help="Exclude symbols from the password")
    ap.add_argument("--no-numbers", action="store_true",
        help="Exclude digits from the password")
    ap.add_argument("--only-letters", action="store_true",
        help="Use only letters (uppercase and lowercase). "
            "This is equivalent to --no-symbols --no-numbers")
    ap.add_argument("-c", "--config", dest="config_toml", default=None,
        help="Configuration file (default: %s)" % default_config_fn())
    ap.add_argument("-v", "--verbose", action="store_true",
        help="Print debug messages to stderr")
    ap.add_argument("-V", "--version", action="version",
        version=f"%(prog)s {package_version()}")
    return ap

def setup_logging(verbose: bool):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        force=True,
    )

def main_generate(args) -> str:
    if args.config_toml:
        config = load_config(args.config_toml)
    else:
        config = load_config(default_config_fn(), missing_ok=True)

    options = config.options(
        length=args.length,
        no_symbols=args.no_symbols,
        no_numbers=args.no_numbers,
        only_letters=args.only_letters,
    )

    # Raises on a too short length, before any randomness is drawn.
    generator = PasswordGenerator(options)
    logger.info("Generating %s.", generator.spec())
    return generator.generate()

def main(argv=None):
    ap = argument_parser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        password = main_generate(args)
    except (ConfigurationError, ConfigFileException, EntropyError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(password)
