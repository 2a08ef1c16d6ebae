import os
import sys
import logging

from typing import Mapping, Optional

from . import const, extractor, output, vt100

_logger = logging.getLogger(__name__)


def usage() -> str:
    """Returns a usage string for the command line."""
    return f"{const.ARGV0} [-k|--key [value]]... [--] [operands...]"


def argv(
    env: Mapping[str, str] = os.environ, args: Optional[list[str]] = None
) -> list[str]:
    """
    Collects the tokens to classify.

    Arguments from the environment variable named by `const.EXTRA_ARGS_ENV`
    come first, followed by the process arguments without the program name.
    """
    if args is None:
        args = sys.argv
    extra = env.get(const.EXTRA_ARGS_ENV, None)
    return (extra.split(" ") if extra else []) + args[1:]


def exec(tokens: list[str]) -> int:
    """
    Extracts `tokens` and prints the result as JSON.

    Returns:
        0 on success, 1 if the tokens could not be classified.
    """
    _logger.info(f"Extracting {len(tokens)} token(s)")
    try:
        result = extractor.extract(tokens)
    except extractor.ExtractorError as e:
        _logger.info(f"Extraction failed on '{e.token}': {type(e).__name__}")
        vt100.error(str(e))
        print("Usage: " + usage(), end="\n\n", file=sys.stderr)
        return 1

    _logger.info(
        f"Extracted {len(result.extracted)} option(s) and {len(result.trailing)} trailing token(s)"
    )
    print(output.toJson(result))
    return 0
