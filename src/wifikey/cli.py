"""Command-line interface for wifikey.

Provides one subcommand per Session operation so a device can be
driven from a shell script.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="wifikey",
        description="Send keyboard input to a WifiKeyboard device",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/wifikey.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--host", type=str, default=None,
        help="Device hostname or IP (overrides device.host from config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("status", help="Handshake and print the confirmed sequence")

    send_parser = subparsers.add_parser("send", help="Type text on the device")
    send_parser.add_argument("text", type=str, help="Text to type")

    line_parser = subparsers.add_parser("line", help="Type text and press Return")
    line_parser.add_argument("text", type=str, help="Text to type")

    key_parser = subparsers.add_parser("key", help="Press a key by name or code")
    key_parser.add_argument("key", type=str, help="Key name (e.g. Return, Left) or integer code")
    direction = key_parser.add_mutually_exclusive_group()
    direction.add_argument("--down", action="store_true", help="Only send the key down event")
    direction.add_argument("--up", action="store_true", help="Only send the key up event")

    clear_parser = subparsers.add_parser("clear", help="Delete the current line")
    clear_parser.add_argument(
        "--strict", action="store_true",
        help="Stop at the first failed step instead of attempting all of them",
    )

    return parser.parse_args(argv)


def _run_command(session, args: argparse.Namespace) -> None:
    """Dispatch a parsed subcommand against an open session."""
    from wifikey.protocol.keycodes import key_name_to_code

    if args.command == "status":
        print(f"{session.address}: sequence {session.sequence}")

    elif args.command == "send":
        session.send(args.text)

    elif args.command == "line":
        session.send_line(args.text)

    elif args.command == "key":
        code = key_name_to_code(args.key)
        if args.down:
            session.key_down(code)
        elif args.up:
            session.key_up(code)
        else:
            session.key_press_strict(code)

    elif args.command == "clear":
        if args.strict:
            session.clear_strict()
        else:
            errors = session.clear()
            if errors:
                print(f"clear: {len(errors)} step(s) failed", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the wifikey CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from wifikey.config.settings import load_settings
    from wifikey.errors import WifiKeyError
    from wifikey.session import Session
    from wifikey.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    host = args.host or settings.device.host
    if not host:
        print("error: no device host given (use --host or device.host)", file=sys.stderr)
        sys.exit(2)

    try:
        with Session.connect(
            host,
            port=settings.device.port,
            timeout=settings.device.timeout,
        ) as session:
            _run_command(session, args)
    except (WifiKeyError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
