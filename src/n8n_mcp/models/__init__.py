"""Data models."""

from n8n_mcp.models.health import (
    HealthCheckResult,
    HealthStatus,
    N8nConnectionInfo,
    ServerHealth,
)
from n8n_mcp.models.workflow import (
    Connections,
    CreateWorkflowRequest,
    ListWorkflowsOptions,
    N8nModel,
    UpdateWorkflowRequest,
    Workflow,
    WorkflowNode,
    WorkflowSettings,
)

__all__ = [
    "Connections",
    "CreateWorkflowRequest",
    "HealthCheckResult",
    "HealthStatus",
    "ListWorkflowsOptions",
    "N8nConnectionInfo",
    "N8nModel",
    "ServerHealth",
    "UpdateWorkflowRequest",
    "Workflow",
    "WorkflowNode",
    "WorkflowSettings",
]
