"""
arc42 - architecture documentation templates served over MCP.

Subpackages:
- arc42.core: settings, logging, errors, registries, section catalogue
- arc42.formats: Markdown and AsciiDoc output strategies
- arc42.locales: language strategies and the localized template provider
- arc42.ops: workspace, section and template operations
- arc42.mcp: the MCP server and its tools
- arc42.cli: the ``arc42`` command line
"""

__version__ = "0.1.0"
