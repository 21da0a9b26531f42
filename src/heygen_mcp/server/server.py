"""
MCP Server — Main Orchestrator

Ties together:
  Transport -> Protocol -> Router -> Tools -> HeyGen API

Flow:
  1. Transport reads one line from stdin
  2. Protocol validates JSON-RPC 2.0
  3. Router dispatches to the correct handler
  4. Tool handler calls the HeyGen API through HeyGenClient
  5. Transport writes the response to stdout
"""

import asyncio
import signal
from typing import Optional

from heygen_mcp.config import Config
from heygen_mcp.server.logger import get_logger
from heygen_mcp.server.transport import SKIP, StdioTransport
from heygen_mcp.server.protocol import (
    validate_message,
    make_response,
    make_error,
    ProtocolError,
    INTERNAL_ERROR,
)
from heygen_mcp.server.router import Router

log = get_logger("server")


class MCPServer:
    """
    Main server orchestrator.

    Usage:
        server = MCPServer()
        server.register_tools(TOOLS, handle_tool)
        await server.run()
    """

    def __init__(self, transport: Optional[StdioTransport] = None):
        Config.ensure_dirs()

        self._transport = transport or StdioTransport()
        self._router = Router()
        self._running = False
        self._signals = []
        self._task: Optional[asyncio.Task] = None

    def register_tools(self, tools_list, handler):
        """Register a tools module with the router."""
        self._router.register_tools(tools_list, handler)

    @property
    def router(self) -> Router:
        return self._router

    @property
    def running(self) -> bool:
        return self._running

    def request_stop(self):
        """Cancel the read loop, which may be blocked waiting on stdin."""
        if self._task is not None and not self._task.done():
            log.info("Stop requested")
            self._task.cancel()

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION}")

        await self._transport.start()

        self._task = asyncio.current_task()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self.request_stop)
                self._signals.append(sig)
            except (NotImplementedError, RuntimeError, ValueError):
                pass

        self._running = True
        log.info(f"Server ready — tools={self._router.tool_count}")

        try:
            while self._running:
                msg = await self._transport.read_message()
                if msg is None:
                    log.info("EOF on stdin — shutting down")
                    break
                if msg is SKIP:
                    continue

                await self.handle_message(msg)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        except Exception as exc:
            log.error(f"Server error: {exc}", exc_info=True)
        finally:
            await self.shutdown()

    async def handle_message(self, msg):
        """Process a single JSON-RPC message and write any response."""
        request_id = msg.get("id") if isinstance(msg, dict) else None

        try:
            msg_type = validate_message(msg)
            if msg_type == "response":
                # Server never issues requests; nothing to correlate.
                return

            result = await self._router.route(msg)

            if result is None or msg_type == "notification":
                return

            await self._transport.write_message(make_response(request_id, result))

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            if request_id is not None:
                error_resp = make_error(request_id, exc.code, exc.message, exc.data)
                await self._transport.write_message(error_resp)

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if request_id is not None:
                error_resp = make_error(request_id, INTERNAL_ERROR, str(exc))
                await self._transport.write_message(error_resp)

    async def shutdown(self):
        if not self._running:
            return
        self._running = False

        loop = asyncio.get_running_loop()
        for sig in self._signals:
            loop.remove_signal_handler(sig)
        self._signals = []

        await self._transport.close()
        log.info("Server stopped")
