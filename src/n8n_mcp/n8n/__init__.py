"""n8n REST API integration."""

from n8n_mcp.n8n.client import N8nClient

__all__ = ["N8nClient"]
