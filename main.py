import argparse
import logging

from constants.settings import GameConfig
from game_instances.local_loop import LocalLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Classic snake game")
    parser.add_argument("--config", help="Path to a JSON file with game settings")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig.from_file(args.config) if args.config else GameConfig()

    game_loop = LocalLoop(config)
    game_loop.run()


if "__main__" == __name__:
    main()
