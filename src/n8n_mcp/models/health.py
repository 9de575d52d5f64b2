"""Health models for the n8n connectivity probe and the /health endpoint."""

from datetime import datetime, UTC
from enum import Enum

from pydantic import BaseModel, Field

from n8n_mcp.models.workflow import N8nModel


def _now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class HealthStatus(str, Enum):
    """Outcome of probing the n8n API."""

    OK = "ok"
    ERROR = "error"


class HealthCheckResult(N8nModel):
    """Result of N8nClient.health_check(). Never carries the API key."""

    status: HealthStatus
    message: str
    base_url: str
    timestamp: str = Field(default_factory=_now_iso)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class N8nConnectionInfo(BaseModel):
    """Configuration view of the n8n connection, with the URL sanitized."""

    configured: bool
    url: str | None = None


class ServerHealth(BaseModel):
    """Response of GET /health."""

    status: str
    mcp: str = "ready"
    n8n: N8nConnectionInfo
    timestamp: str = Field(default_factory=_now_iso)
