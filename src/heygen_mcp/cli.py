"""
HeyGen MCP CLI

Commands:
    heygen-mcp server      Start the MCP server (stdio mode)
    heygen-mcp tools       List the exposed tools
    heygen-mcp init        Create ~/.heygen-mcp/ and a config template
    heygen-mcp mcp-config  Print Claude Desktop/Code JSON config
"""

import asyncio
import json
import shutil
import sys

import click

from heygen_mcp import __version__
from heygen_mcp.config import Config, ConfigError, load_settings


@click.group()
@click.version_option(version=__version__, prog_name="heygen-mcp")
def main():
    """HeyGen asset and folder management over MCP."""
    pass


@main.command()
def server():
    """Start the HeyGen MCP server (stdio mode)."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    from heygen_mcp.client import HeyGenClient
    from heygen_mcp.server.server import MCPServer
    from heygen_mcp.tools import ALL_TOOLS, make_tool_handler

    async def _run():
        srv = MCPServer()
        srv.register_tools(ALL_TOOLS, make_tool_handler(HeyGenClient(settings)))
        click.echo("HeyGen MCP Server running on stdio", err=True)
        await srv.run()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print full tool descriptors as JSON.")
def tools(as_json):
    """List the tools exposed by the server."""
    from heygen_mcp.tools import ALL_TOOLS

    if as_json:
        click.echo(json.dumps(ALL_TOOLS, indent=2))
        return

    for tool in ALL_TOOLS:
        required = tool["inputSchema"].get("required", [])
        suffix = f" (requires: {', '.join(required)})" if required else ""
        click.echo(f"{tool['name']}{suffix}")
        click.echo(f"    {tool['description']}")


@main.command()
def init():
    """Create the data directory and a config.env template."""
    Config.ensure_dirs()

    config_env = Config.DATA_DIR / "config.env"
    if not config_env.exists():
        config_env.write_text(
            "# HeyGen MCP Configuration\n"
            "# Environment variables take priority over this file.\n"
            "\n"
            "# HEYGEN_API_KEY=\n"
            "# HEYGEN_HTTP_TIMEOUT=30\n"
            "# HEYGEN_MCP_LOG_LEVEL=INFO\n"
        )

    click.echo(f"HeyGen MCP initialized at {Config.DATA_DIR}")
    click.echo(f"  Config: {config_env}")
    click.echo(f"  Logs:   {Config.LOG_DIR}")
    click.echo()
    click.echo("Next: set HEYGEN_API_KEY and add the server to your Claude settings.")
    click.echo("Run `heygen-mcp mcp-config` to get the JSON snippet.")


@main.command("mcp-config")
def mcp_config():
    """Print MCP config JSON for Claude Desktop or Claude Code."""
    path = shutil.which("heygen-mcp")
    if path:
        entry = {"command": path, "args": ["server"]}
    else:
        entry = {"command": sys.executable, "args": ["-m", "heygen_mcp", "server"]}
    entry["env"] = {Config.API_KEY_ENV: "<your-api-key>"}

    config = {"mcpServers": {"heygen": entry}}

    click.echo("Add this to your Claude settings:\n")
    click.echo(json.dumps(config, indent=2))


if __name__ == "__main__":
    main()
