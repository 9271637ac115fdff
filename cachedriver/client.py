#!/usr/bin/env python3
"""
Cache Driver Interactive Client

A command-line client for manually exercising the Redis cache driver.

Usage:
    cache-driver                            # Prompt, 127.0.0.1:6379
    cache-driver --host /tmp/redis.sock     # Connect over a unix socket
    cache-driver --port 6380                # Custom port
    cache-driver SET greeting hello 60      # Run one command and exit
    cache-driver --debug GET greeting       # Enable debug logging

Environment Variables:
    CACHE_REDIS_HOST    - Default host or socket path
    CACHE_REDIS_PORT    - Default port
    CACHE_DEBUG         - Enable debug mode (true/false)
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cache.exceptions import CacheError
from .cache.redis_driver import RedisCache
from .config.settings import settings
from .protocol.commands import Command, CommandType, Response
from .protocol.parser import ProtocolParser

logger = logging.getLogger(__name__)

HELP_TEXT = """
Cache Commands:
---------------
  SET <key> <value> [ttl]   Store a value (optional TTL in seconds)
  GET <key>                 Retrieve the value for a key
  DEL <key>                 Delete a key
  EXISTS <key>              Check if a key exists (returns 1 or 0)
  CLEAR                     Flush EVERY key on the server
  QUIT                      Exit

Client Commands:
----------------
  help                      Show this help message
  exit                      Exit the client
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactive client for the Redis cache driver",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=settings.REDIS_HOST,
        help="Server address or unix socket path",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.REDIS_PORT,
        help="Server port (ignored for unix sockets)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    parser.add_argument(
        "command",
        nargs="*",
        help="Run a single command and exit",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def execute(cache: RedisCache, command: Command) -> Response:
    """
    Execute a parsed command against the cache.

    Args:
        cache: The driver to run the command on
        command: A valid, non-QUIT command

    Returns:
        Response object with the result
    """
    if command.type == CommandType.SET:
        return Response.stored(cache.set(command.key, command.value, command.ttl or None))

    if command.type == CommandType.GET:
        item = cache.get(command.key)
        return Response.value_response(item.value) if item.has_value else Response.key_not_found()

    if command.type == CommandType.DELETE:
        return Response.deleted(cache.remove(command.key))

    if command.type == CommandType.EXISTS:
        return Response.exists_response(cache.exists(command.key))

    if command.type == CommandType.CLEAR:
        return Response.cleared(cache.clear())

    return Response.error("invalid command")


def run_command(cache: RedisCache, parser: ProtocolParser, line: str) -> Optional[Response]:
    """Parse and execute one line. Returns None for QUIT."""
    command = parser.parse_request(line)

    if command.type == CommandType.QUIT:
        return None

    if not command.is_valid:
        return Response.error("invalid command")

    logger.debug(f"Executing {command.type.name} {command.key}")
    return execute(cache, command)


def interactive(cache: RedisCache, parser: ProtocolParser) -> None:
    """Read commands from the prompt until QUIT, exit, or EOF."""
    print("Connected! Type 'help' for commands.\n")

    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            print("\nGoodbye!")
            break

        if not line:
            continue

        if line.lower() == "help":
            print(HELP_TEXT)
            continue

        if line.lower() == "exit":
            print("Goodbye!")
            break

        response = run_command(cache, parser, line)
        if response is None:
            print("Goodbye!")
            break

        print(parser.format_response(response), end="")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the client."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    cache = RedisCache({"host": args.host, "port": args.port})
    parser = ProtocolParser()

    try:
        cache.connect()
    except CacheError as exc:
        print(f"Failed to connect: {exc}", file=sys.stderr)
        return 1

    if args.command:
        response = run_command(cache, parser, " ".join(args.command))
        if response is None:
            return 0
        print(parser.format_response(response), end="")
        return 0 if response.ok else 1

    try:
        interactive(cache, parser)
    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
