# src/taskflow/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the controller, then runs the interactive loop
in the main thread. Exit status is 0 after "q", 1 on a terminal I/O failure.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_controller, show_intro
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.info("Starting %s...", settings.app_name)

    controller = None
    try:
        controller = create_controller(settings=settings)
        show_intro(controller, settings)
        controller.run()
    except (OSError, EOFError):
        logger.exception("Terminal I/O failure, exiting.")
        return 1
    finally:
        if controller is not None and controller.keys is not None:
            controller.keys.close()

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
