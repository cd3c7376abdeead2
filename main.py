import logging
import sys
import argparse

from core.app_context import AppContext
from core.config_loader import load_config
from core.conversation import ConversationRunner
from core.geo import GeoPoint
from database.init_db import init_db

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Offer an item from the console and see nearby needs.")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--phone", required=True, help="Phone number identifying the user")
    parser.add_argument("--lat", type=float, help="User latitude")
    parser.add_argument("--lon", type=float, help="User longitude")
    parser.add_argument("--init-db", action="store_true", help="Create tables before starting")
    parser.add_argument("--days", help="Contact days to store before the conversation, e.g. \"Mon, Wed\"")
    return parser.parse_args(argv)


def run_console(runner: ConversationRunner, phone: str, coordinates=None, stdin=sys.stdin, stdout=sys.stdout) -> None:
    result = runner.start(phone, coordinates)
    for message in result.messages:
        print(message, file=stdout)

    while not result.finished:
        line = stdin.readline()
        if not line:
            logger.info("Input closed, leaving conversation")
            return
        result = runner.handle(result.state, line.strip())
        for message in result.messages:
            print(message, file=stdout)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )

    if (args.lat is None) != (args.lon is None):
        logger.error("--lat and --lon must be given together")
        return 2

    context = AppContext.build(config)
    if args.init_db:
        init_db(context.engine)

    coordinates = GeoPoint(args.lat, args.lon) if args.lat is not None else None
    runner = ConversationRunner(context)
    if args.days is not None:
        for message in runner.update_days(args.phone, args.days):
            print(message)

    run_console(runner, args.phone, coordinates)
    return 0


if __name__ == "__main__":
    sys.exit(main())
