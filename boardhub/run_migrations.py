from __future__ import annotations

import argparse
import sys

from boardhub.config import settings
from boardhub.database import engine
from boardhub.logger import get_logger, setup_logging
from boardhub.migrations import downgrade, reset, upgrade

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create or drop the BoardHub tables.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--down",
        action="store_true",
        help="Drop every table in reverse dependency order.",
    )
    group.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate every table.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(settings.LOG_LEVEL)

    if args.down:
        logger.info("Rolling back schema on %s", engine.url.render_as_string(hide_password=True))
        downgrade(engine)
    elif args.reset:
        logger.info("Resetting schema on %s", engine.url.render_as_string(hide_password=True))
        reset(engine)
    else:
        logger.info("Migrating schema on %s", engine.url.render_as_string(hide_password=True))
        upgrade(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
