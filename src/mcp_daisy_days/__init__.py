"""daisyUI documentation lookup and layout generation for MCP clients and editors."""

__version__ = "1.1.0"
