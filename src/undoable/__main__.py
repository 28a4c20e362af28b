"""Entry point for the undoable terminal demo."""

from __future__ import annotations

import argparse
import logging
import sys

from textual.logging import TextualHandler

from undoable.config import HistoryConfig
from undoable.exceptions import InvalidConfiguration
from undoable.history import StateHistory
from undoable.tui.app import HistoryTUI

logger = logging.getLogger("undoable")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(description="Edit a value with undo/redo history")
    parser.add_argument(
        "--capacity", type=int, help="Maximum entries kept (env: UNDOABLE_CAPACITY)"
    )
    parser.add_argument("--initial", type=str, default="", help="Initial value")
    parser.add_argument("--log-level", type=str, help="Logging level (env: UNDOABLE_LOG_LEVEL)")
    parser.add_argument("--log-file", type=str, help="Write logs to this file")
    return parser


def configure_logging(config: HistoryConfig, log_file: str | None = None) -> None:
    """Send logs to log_file, or to Textual's log while the TUI owns the terminal."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=config.log_level_value,
            format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=config.log_level_value, handlers=[TextualHandler()])


def main(argv: list[str] | None = None) -> int:
    """Run the history editor TUI."""
    args = build_parser().parse_args(argv)

    try:
        config = HistoryConfig.load(capacity=args.capacity, log_level=args.log_level)
    except InvalidConfiguration as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(config, args.log_file)
    logger.info("Starting with %s", config)

    history = StateHistory.from_config(args.initial, config)
    HistoryTUI(history).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
