"""Request handlers shared by the HTTP API and the MCP server."""
