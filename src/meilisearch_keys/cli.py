"""
Command-line entry point.

Usage:
  meilisearch-key --create                       # prompt for every field
  meilisearch-key --create -n --actions=search --indexes=movies --expires="6 months"
  meilisearch-key <key> --update --name="Frontend search"
  meilisearch-key <key> --delete
"""

import argparse
from typing import Optional, Sequence

from rich.console import Console

from .client import MeilisearchClient
from .command import KeyActionCommand, KeyCommandOptions
from .config import config
from .logging import CommandLogger
from .prompts import ConsolePrompter, DefaultsPrompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meilisearch-key",
        description="Create, update or delete Meilisearch API keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "key",
        nargs="?",
        help="UUID or key value to perform update or delete",
    )
    parser.add_argument(
        "--actions",
        help="Comma separated list of API actions to be allowed for this key (only create)",
    )
    parser.add_argument(
        "--indexes",
        help="Comma separated list of indexes the key is authorized to act on (only create)",
    )
    parser.add_argument(
        "--expires",
        help="How long until the key expires, e.g. '1 hour' or '6 months' (only create)",
    )
    parser.add_argument("--name", help="A human-readable name for the key")
    parser.add_argument("--description", help="An optional description for the key")
    parser.add_argument(
        "--uid",
        help="A UUID to identify the API key. If not specified, it is generated by Meilisearch",
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--create", action="store_true", help="Trigger a key creation")
    action.add_argument("--update", action="store_true", help="Trigger a key modification")
    action.add_argument("--delete", action="store_true", help="Trigger a key deletion")

    parser.add_argument(
        "--url",
        default=None,
        help="Meilisearch URL (default: MEILI_HTTP_ADDR or http://localhost:7700)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="Meilisearch master key (default: MEILI_MASTER_KEY)",
    )
    parser.add_argument(
        "-n",
        "--no-interaction",
        action="store_true",
        help="Do not ask any question, use the defaults",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> KeyCommandOptions:
    return KeyCommandOptions(
        key=args.key,
        actions=args.actions,
        indexes=args.indexes,
        expires=args.expires,
        name=args.name,
        description=args.description,
        uid=args.uid,
        create=args.create,
        update=args.update,
        delete=args.delete,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    console = Console()
    error_console = Console(stderr=True)

    url = args.url or config.MEILI_HTTP_ADDR
    errors = config.validate(url)
    if errors:
        for error in errors:
            error_console.print(error, style="bold red", markup=False)
        return 1

    api_key = args.api_key if args.api_key is not None else config.MEILI_MASTER_KEY
    logger = CommandLogger("meilisearch-keys", config.LOG_DIR or None)
    prompter = DefaultsPrompter() if args.no_interaction else ConsolePrompter(console)

    try:
        with MeilisearchClient(url, api_key) as client:
            command = KeyActionCommand(
                client,
                prompter,
                console=console,
                error_console=error_console,
                logger=logger,
            )
            return command.handle(options_from_args(args))
    finally:
        logger.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
