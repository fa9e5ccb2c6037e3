import argparse

from boost.api.app import run as run_api
from boost.config import settings
from boost.integrations.telegram_bot import main as run_bot
from boost.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Boost unified entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "bot"],
        default="api",
        help="Run mode: api (default), bot",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level, e.g. DEBUG")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    configure_logging(args.log_level)

    if args.mode == "bot":
        run_bot()
        return

    run_api()


if __name__ == "__main__":
    main()
