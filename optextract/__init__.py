import os
import sys
import logging

from . import (
    cli,
    const,
    extractor,
    output,
    vt100,
)

from .extractor import (  # noqa: F401 re-exported for library use
    AmbiguousOption,
    ExtractorError,
    Result,
    UnexpectedOperand,
    UnexpectedOption,
    extract,
)


def _truthy(value: str | None) -> bool:
    return value is not None and value.lower() in ("1", "true", "y", "yes")


class logger:
    @staticmethod
    def setup(env=os.environ):
        verbose = _truthy(env.get(const.VERBOSE_ENV))
        logFile = env.get(const.LOG_FILE_ENV)

        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        elif logFile:
            logging.basicConfig(
                level=logging.INFO,
                filename=logFile,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


def main() -> int:
    try:
        logger.setup()
        return cli.exec(cli.argv())

    except RuntimeError as e:
        logging.exception(e)
        vt100.error(str(e))
        print("Usage: " + cli.usage(), end="\n\n", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print()
        return 1
