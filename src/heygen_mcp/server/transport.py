"""
STDIO Transport — newline-delimited JSON-RPC over stdin/stdout

Reads from stdin, writes to stdout.
NEVER pollutes stdout with logs.
"""

import asyncio
import json
import sys
from typing import Any, BinaryIO, Dict, Optional, Union

from heygen_mcp.server.logger import get_logger

log = get_logger("transport")

# Sentinel returned for a line that could not be decoded; the loop keeps going.
SKIP = object()


class StdioTransport:
    """Async line reader on stdin, direct writer on stdout."""

    def __init__(
        self,
        reader: Optional[asyncio.StreamReader] = None,
        writer: Optional[BinaryIO] = None,
    ):
        self.running = False
        self._reader = reader
        self._stdout = writer

    async def start(self):
        """Attach to the process stdin/stdout unless streams were injected."""
        if self._reader is None:
            loop = asyncio.get_running_loop()
            self._reader = asyncio.StreamReader(limit=2**20)
            protocol = asyncio.StreamReaderProtocol(self._reader)
            await loop.connect_read_pipe(lambda: protocol, sys.stdin.buffer)

        if self._stdout is None:
            self._stdout = sys.stdout.buffer

        self.running = True
        log.info("Transport initialized")

    async def read_message(self) -> Union[Dict[str, Any], None, object]:
        """
        Read one JSON-RPC message from stdin.
        Returns the parsed message, SKIP for a blank or undecodable line,
        or None on EOF.
        """
        if not self._reader:
            raise RuntimeError("Transport not started")

        try:
            raw_bytes = await self._reader.readline()
            if not raw_bytes:
                return None

            if not raw_bytes.strip():
                return SKIP

            parsed = json.loads(raw_bytes)
        except (ValueError, UnicodeDecodeError) as exc:
            # JSONDecodeError, bad UTF-8, or a line over the reader limit
            log.error(f"Unreadable input line: {exc}")
            return SKIP

        log.debug(f"<- {parsed.get('method', 'response') if isinstance(parsed, dict) else '?'}")
        return parsed

    async def write_message(self, message: Dict[str, Any]):
        """Write a JSON-RPC message to stdout."""
        if self._stdout is None:
            raise RuntimeError("Transport not started")

        raw_text = json.dumps(message, separators=(",", ":"), ensure_ascii=False) + "\n"
        self._stdout.write(raw_text.encode("utf-8"))
        self._stdout.flush()
        log.debug(f"-> id={message.get('id')} bytes={len(raw_text)}")

    async def close(self):
        self.running = False
        log.info("Transport closed")
