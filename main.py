import argparse
import logging
import os
import sys

from core.exceptions import CheckpointCalcError
from parameters.session_parameters import SessionParameters, load_parameters
from runtime.console import StreamConsole
from runtime.dispatcher import Dispatcher
from runtime.logging_config import setup_logging
from storage.file_slot import FileSlot

logger = logging.getLogger("checkpoint_calc")


def resolve_config_path(path: str) -> str:
    """Return a valid config file path, allowing path without extension."""
    if os.path.isfile(path):
        return path
    for ext in (".yaml", ".yml", ".json"):
        alt = path + ext
        if os.path.isfile(alt):
            return alt
    raise FileNotFoundError(f"Cannot find config file '{path}'")


def read_instructions(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f]


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Crash-resumable line calculator (add, median, rand, help, exit)"
    )
    parser.add_argument(
        "-s",
        "--storage",
        default=None,
        help="Slot file holding the in-flight command (default: calculator.state)",
    )
    parser.add_argument(
        "-c", "--config", default=None, help="Optional YAML/JSON config file"
    )
    parser.add_argument(
        "--instructions",
        help="Optional file of input lines consumed before standard input",
    )
    parser.add_argument("--log", default=None, help="Optional log file")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress log output on stderr"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable verbose debug logging"
    )
    args = parser.parse_args(argv)

    global logger
    logger = setup_logging(args.log, quiet=args.quiet, debug=args.debug)

    try:
        if args.config:
            parameters = load_parameters(resolve_config_path(args.config))
        else:
            parameters = SessionParameters()
        preload = read_instructions(args.instructions) if args.instructions else []
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    storage_path = args.storage or parameters.get("storage_path")
    logger.debug(f"Using slot {storage_path}")

    console = StreamConsole(preload=preload)
    dispatcher = Dispatcher(console, FileSlot(storage_path), parameters)
    try:
        dispatcher.run()
    except EOFError:
        logger.info("Input closed; session suspended at the last checkpoint.")
    except CheckpointCalcError as exc:
        active = dispatcher.active
        if active is not None and not active.done:
            logger.critical(
                f"Fatal error in {active.kind} command at step "
                f"{active.cursor + 1}/{len(active.schedule)}: {exc}"
            )
        else:
            logger.critical(f"Fatal: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
