"""Command line access to the account operations."""

import argparse
import json
import logging

from . import accounts
from .map_helpers import stringify_keys
from .shapes import UserAttribute


def parse_attribute(text):
    """Parse a ``NAME=VALUE`` argument into a UserAttribute."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return UserAttribute(name, value)


def build_parser():
    """Build the argument parser with one subcommand per account operation."""
    parser = argparse.ArgumentParser(description="Manage user accounts in AWS Cognito")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log Cognito calls to stderr"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def command(name, func, help_text, *args, attrs=None):
        sub = commands.add_parser(name, help=help_text)
        for arg in args:
            sub.add_argument(arg)
        if attrs is not None:
            sub.add_argument(
                "--attr",
                "-a",
                dest="attrs",
                type=parse_attribute,
                action="append",
                default=[],
                required=attrs,
                metavar="NAME=VALUE",
                help="User attribute, may be repeated",
            )
        sub.set_defaults(func=func, positional=args)

    command("sign-up", accounts.sign_up, "Register a user", "username", "password", attrs=False)
    command("confirm", accounts.confirm, "Confirm a registration", "username", "confirmation_code")
    command("authenticate", accounts.authenticate, "Sign a user in", "username", "password")
    command("get-user", accounts.get_user, "Show the user owning a token", "access_token")
    command("admin-get-user", accounts.admin_get_user, "Show a user by username", "username")
    command(
        "change-password",
        accounts.change_password,
        "Change the password of the user owning a token",
        "access_token",
        "previous_password",
        "proposed_password",
    )
    command(
        "update-attributes",
        accounts.update_user_attributes,
        "Update attributes of the user owning a token",
        "access_token",
        attrs=True,
    )
    command("forgot-password", accounts.forgot_password, "Start a password reset", "username")
    command(
        "confirm-forgot-password",
        accounts.confirm_forgot_password,
        "Reset a password with a confirmation code",
        "confirmation_code",
        "username",
        "password",
    )
    return parser


def main(argv=None):
    """CLI entry point for account operations."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    call_args = [getattr(args, name) for name in args.positional]
    if hasattr(args, "attrs"):
        call_args.append(args.attrs)

    outcome = args.func(*call_args)
    if not outcome.ok:
        print(f"Error: {outcome.data['status']}: {outcome.data['message']}")
        return 1

    print(json.dumps(stringify_keys(outcome.data), indent=2, default=str))
    return 0


if __name__ == "__main__":
    exit(main())
