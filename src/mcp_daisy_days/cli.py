"""CLI entry point for daisy-days."""

import argparse
import logging
import sys
from pathlib import Path

from mcp_daisy_days.commands import CommandError, SlashCommandHandler
from mcp_daisy_days.config import load_config
from mcp_daisy_days.errors import CorpusFormatError
from mcp_daisy_days.loader import CorpusLoader


def main(argv: list[str] | None = None) -> int:
    """Run the daisy-days command line.

    Args:
        argv: Arguments without the program name, defaults to sys.argv.

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(prog="daisy-days", description="daisyUI docs and layout generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")
    sub = parser.add_subparsers(dest="command")

    # serve command
    sub.add_parser("serve", help="Run the MCP server over stdio")

    # command command
    command_parser = sub.add_parser("command", help="Run an editor slash command, e.g. daisy-search button")
    command_parser.add_argument("name", help="Command name, e.g. daisy-layout or /daisy-layout")
    command_parser.add_argument("args", nargs="*", help="Command arguments")

    args = parser.parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        from mcp_daisy_days import server

        server.main(args.config)
        return 0

    if args.command == "command":
        try:
            corpus = CorpusLoader().load_configured(config)
        except (CorpusFormatError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        handler = SlashCommandHandler(corpus, search_limit=config.search_limit)
        try:
            output = handler.run(args.name, args.args)
        except CommandError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(output.text)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
