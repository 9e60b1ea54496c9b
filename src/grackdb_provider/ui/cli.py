from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from grackdb_provider.config import ConfigurationError, configure_logging, get_provider_config
from grackdb_provider.domain.diagnostics import Severity
from grackdb_provider.domain.resources import CURRENT_USER_TYPE, DISCORD_ACCOUNT_TYPE, USER_TYPE
from grackdb_provider.domain.schema import UNSET, AttributeValue
from grackdb_provider.provider import Provider

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from grackdb_provider.adapters.http_resilience import ResilientClient
    from grackdb_provider.config.http_resilience import ResilienceConfig
    from grackdb_provider.domain.diagnostics import Diagnostics

log = logging.getLogger(__name__)

_RESOURCE_COMMANDS = {"user": USER_TYPE, "discord-account": DISCORD_ACCOUNT_TYPE}


def _add_id_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("id", type=str, help="Remote id of the object")


def _add_user_commands(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    user = subparsers.add_parser("user", help="Manage GrackDB users")
    user_sub = user.add_subparsers(dest="verb", required=True)

    create = user_sub.add_parser("create", help="Create a user")
    create.add_argument("--username", type=str, required=True, help="Username for the user")
    create.add_argument("--avatar-url", type=str, help="Optional avatar URL")

    _add_id_argument(user_sub.add_parser("read", help="Read a user"))

    update = user_sub.add_parser("update", help="Update a user")
    _add_id_argument(update)
    update.add_argument("--username", type=str, help="New username")
    avatar = update.add_mutually_exclusive_group()
    avatar.add_argument("--avatar-url", type=str, help="New avatar URL")
    avatar.add_argument(
        "--clear-avatar-url", action="store_true", help="Remove the avatar URL"
    )

    _add_id_argument(user_sub.add_parser("delete", help="Delete a user"))


def _add_discord_account_commands(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    account = subparsers.add_parser("discord-account", help="Manage GrackDB Discord accounts")
    account_sub = account.add_subparsers(dest="verb", required=True)

    create = account_sub.add_parser("create", help="Create a Discord account")
    create.add_argument("--discord-id", type=str, required=True, help="Discord snowflake")
    create.add_argument("--username", type=str, required=True, help="Discord username")
    create.add_argument("--discriminator", type=str, required=True, help="Discord discriminator")
    create.add_argument("--owner", type=str, help="Optional id of the owning user")

    _add_id_argument(account_sub.add_parser("read", help="Read a Discord account"))

    update = account_sub.add_parser("update", help="Update a Discord account")
    _add_id_argument(update)
    update.add_argument("--username", type=str, help="New username")
    update.add_argument("--discriminator", type=str, help="New discriminator")
    owner = update.add_mutually_exclusive_group()
    owner.add_argument("--owner", type=str, help="Id of the new owning user")
    owner.add_argument("--clear-owner", action="store_true", help="Remove the owner")

    _add_id_argument(account_sub.add_parser("delete", help="Delete a Discord account"))


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage GrackDB objects")
    parser.add_argument(
        "--api-url",
        type=str,
        help="GraphQL endpoint (defaults to $GRACKDB_API_URL or the public API)",
    )
    parser.add_argument(
        "--token",
        type=str,
        help="API token (defaults to $GRACKDB_TOKEN)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("current-user", help="Show the authenticated user")
    _add_user_commands(subparsers)
    _add_discord_account_commands(subparsers)

    return parser.parse_args(list(argv))


def _declared_values(args: argparse.Namespace) -> dict[str, AttributeValue]:
    if args.command == "user":
        values: dict[str, AttributeValue] = {
            "username": args.username,
            "avatar_url": args.avatar_url,
        }
        if getattr(args, "clear_avatar_url", False):
            values["avatar_url"] = UNSET
    else:
        values = {
            "username": args.username,
            "discriminator": args.discriminator,
            "owner": args.owner,
        }
        if args.verb == "create":
            values["discord_id"] = args.discord_id
        if getattr(args, "clear_owner", False):
            values["owner"] = UNSET
    # only the flags that were given; an update sends nothing else
    return {name: value for name, value in values.items() if value is not None}


def _report(diagnostics: Diagnostics) -> None:
    for diagnostic in diagnostics:
        if diagnostic.severity is Severity.ERROR:
            log.error("%s", diagnostic)
        else:
            log.warning("%s", diagnostic)


def _emit(resource_id: str | None, attributes: dict[str, str | None]) -> None:
    sys.stdout.write(json.dumps({"id": resource_id, "attributes": attributes}, indent=2) + "\n")


def _run_command(provider: Provider, args: argparse.Namespace) -> int:
    if args.command == "current-user":
        result = provider.read_data_source(CURRENT_USER_TYPE)
        _report(result.diagnostics)
        if not result.found:
            return 1
        _emit(result.id, result.fields)
        return 0

    reconciler = provider.resource(_RESOURCE_COMMANDS[args.command])
    if args.verb == "create":
        created = reconciler.create(_declared_values(args))
        _report(created.diagnostics)
        if created.id is not None:
            _emit(created.id, created.fields)
        return 1 if created.diagnostics.has_errors() else 0
    if args.verb == "read":
        read = reconciler.read(args.id)
        _report(read.diagnostics)
        if not read.found:
            return 1
        _emit(read.id, read.fields)
        return 0
    if args.verb == "update":
        updated = reconciler.update(args.id, _declared_values(args))
        _report(updated.diagnostics)
        if updated.diagnostics.has_errors():
            return 1
        _emit(args.id, updated.fields)
        return 0
    if args.verb == "delete":
        deleted = reconciler.delete(args.id)
        _report(deleted.diagnostics)
        return 1 if deleted.diagnostics.has_errors() else 0
    raise ValueError(f"Unsupported command: {args.command} {args.verb}")


def main(
    argv: Sequence[str] | None = None,
    *,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(verbose=parsed_args.verbose)
    try:
        config = get_provider_config(api_url=parsed_args.api_url, token=parsed_args.token)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    try:
        provider = Provider.configure(config, client_factory=client_factory)
        exit_code = _run_command(provider, parsed_args)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
