"""
Droplet MCP Server - Model Context Protocol server for DigitalOcean.

Exposes droplet and image management on the DigitalOcean API v2 to AI
assistants as MCP tools.
"""

__version__ = "0.1.0"
