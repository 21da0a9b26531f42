"""HeyGen MCP Server — asset and folder management tools over stdio."""

__version__ = "1.0.0"
