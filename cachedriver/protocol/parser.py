"""
Client Protocol Parser

Parses command lines typed into the interactive client and formats
the responses printed back.
"""

from typing import List

from .commands import Command, CommandType, Response

# Verbs that take exactly one key argument
_KEY_COMMANDS = {
    "GET": CommandType.GET,
    "DEL": CommandType.DELETE,
    "DELETE": CommandType.DELETE,
    "EXISTS": CommandType.EXISTS,
}

# Verbs that take no arguments
_BARE_COMMANDS = {
    "CLEAR": CommandType.CLEAR,
    "FLUSHALL": CommandType.CLEAR,
    "QUIT": CommandType.QUIT,
}


class ProtocolParser:
    """
    Parser for the client's text protocol.

    Protocol Format:
        Request:  <COMMAND> [ARGS...]\n
        Response: <STATUS> [DATA]\n

    Commands:
        SET <key> <value> [ttl]  -> OK stored | ERROR not stored
        GET <key>                -> OK <value> | ERROR key not found
        DEL <key>                -> OK deleted | ERROR key not found
        EXISTS <key>             -> OK 1 | OK 0
        CLEAR                    -> OK cleared | ERROR not cleared
        QUIT                     -> (client exits)

    DELETE and FLUSHALL are accepted as aliases of DEL and CLEAR.
    """

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw request string into a Command object.

        Args:
            data: Raw request string (may include trailing newline)

        Returns:
            Command object representing the parsed request.
            Returns Command with type=UNKNOWN for invalid/malformed requests.

        Examples:
            >>> parser = ProtocolParser()
            >>> cmd = parser.parse_request("SET mykey myvalue 60")
            >>> cmd.type == CommandType.SET
            True
            >>> cmd.ttl
            60
        """
        raw = data.strip()
        if not raw:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        parts = raw.split()
        command_name = parts[0].upper()

        if command_name == "SET":
            return self._parse_set(parts, raw)

        if command_name in _KEY_COMMANDS:
            if len(parts) != 2:
                return Command(type=CommandType.UNKNOWN, raw=raw)
            return Command(type=_KEY_COMMANDS[command_name], key=parts[1], raw=raw)

        if command_name in _BARE_COMMANDS:
            if len(parts) != 1:
                return Command(type=CommandType.UNKNOWN, raw=raw)
            return Command(type=_BARE_COMMANDS[command_name], raw=raw)

        return Command(type=CommandType.UNKNOWN, raw=raw)

    def _parse_set(self, parts: List[str], raw: str) -> Command:
        """
        Parse a SET command.

        Format: SET <key> <value> [ttl]
        """
        if len(parts) < 3 or len(parts) > 4:
            return Command(type=CommandType.UNKNOWN, raw=raw)

        ttl = 0
        if len(parts) == 4:
            try:
                ttl = int(parts[3])
            except ValueError:
                return Command(type=CommandType.UNKNOWN, raw=raw)
            if ttl < 0:
                return Command(type=CommandType.UNKNOWN, raw=raw)

        return Command(
            type=CommandType.SET,
            key=parts[1],
            value=parts[2],
            ttl=ttl,
            raw=raw,
        )

    def format_response(self, response: Response) -> str:
        """
        Format a Response object into a protocol string.

        Returns:
            Formatted response string WITH trailing newline.

        Examples:
            >>> parser = ProtocolParser()
            >>> parser.format_response(Response.stored(True))
            'OK stored\\n'
            >>> parser.format_response(Response.value_response("hello"))
            'OK hello\\n'
            >>> parser.format_response(Response.key_not_found())
            'ERROR key not found\\n'
        """
        prefix = response.status.value

        # If value is provided (GET), prefer it; otherwise use message
        if isinstance(response.value, bytes):
            body = response.value.decode("utf-8", errors="backslashreplace")
        elif response.value is not None:
            body = str(response.value)
        else:
            body = response.message

        if body:
            return f"{prefix} {body}\n"
        return f"{prefix}\n"
