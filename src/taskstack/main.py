"""Main entry point for taskstack."""

import logging
import sys

from .interfaces.cli import TaskCLI
from .registry import TaskRegistry
from .config import config

logger = logging.getLogger(__name__)


def cli_main():
    """Entry point for CLI."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry = TaskRegistry(max_history=config.history.max_undo)
    logger.debug("Starting with max undo depth %d", config.history.max_undo)

    cli = TaskCLI(registry)
    sys.exit(cli.run())


if __name__ == "__main__":
    cli_main()
