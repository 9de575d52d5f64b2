"""The n8n workflow tools exposed over MCP.

Each tool is a thin wrapper around one N8nClient operation: its input model
declares the argument shape, and its handler maps the validated input to the
client call and shapes the result.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictStr

from n8n_mcp.models.workflow import (
    CreateWorkflowRequest,
    ListWorkflowsOptions,
    UpdateWorkflowRequest,
    Workflow,
)
from n8n_mcp.n8n.client import N8nClient
from n8n_mcp.tools.base import ToolDefinition
from n8n_mcp.tools.registry import ToolRegistry


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

class HealthCheckInput(BaseModel):
    """health_check takes no arguments."""


class WorkflowIdInput(BaseModel):
    id: StrictStr = Field(..., description="The workflow ID")


class UpdateWorkflowInput(UpdateWorkflowRequest):
    """Arguments of update_workflow: the ID plus the partial update."""

    id: StrictStr = Field(..., description="The workflow ID to update")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.pop("id", None)
        return payload


class ToggleWorkflowInput(BaseModel):
    id: StrictStr = Field(..., description="The workflow ID")
    active: StrictBool = Field(
        ..., description="Set to true to activate, false to deactivate"
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def health_check(client: N8nClient, _: HealthCheckInput) -> dict[str, Any]:
    result = await client.health_check()
    return result.to_payload()


async def list_workflows(
    client: N8nClient, options: ListWorkflowsOptions
) -> dict[str, Any]:
    return await client.list_workflows(options)


async def get_workflow(client: N8nClient, payload: WorkflowIdInput) -> Workflow:
    return await client.get_workflow(payload.id)


async def create_workflow(
    client: N8nClient, request: CreateWorkflowRequest
) -> Workflow:
    return await client.create_workflow(request)


async def update_workflow(
    client: N8nClient, payload: UpdateWorkflowInput
) -> Workflow:
    return await client.update_workflow(payload.id, payload)


async def delete_workflow(
    client: N8nClient, payload: WorkflowIdInput
) -> dict[str, Any]:
    """Delete a workflow and summarize what was removed."""
    deleted = await client.delete_workflow(payload.id)
    workflow_id = deleted.get("id", payload.id)
    name = deleted.get("name")

    if name is not None:
        message = f'Workflow "{name}" ({workflow_id}) has been deleted.'
    else:
        message = f"Workflow {workflow_id} has been deleted."

    return {
        "success": True,
        "message": message,
        "deletedWorkflow": deleted,
    }


async def toggle_workflow(
    client: N8nClient, payload: ToggleWorkflowInput
) -> dict[str, Any]:
    """Activate or deactivate a workflow and report its new state."""
    if payload.active:
        workflow = await client.activate_workflow(payload.id)
    else:
        workflow = await client.deactivate_workflow(payload.id)

    # n8n may answer with an empty body; the requested state is all we know
    if not isinstance(workflow, dict):
        workflow = {"id": payload.id, "active": payload.active}

    state = "active" if workflow.get("active", payload.active) else "inactive"
    name = workflow.get("name", payload.id)

    return {
        "success": True,
        "message": f'Workflow "{name}" is now {state}.',
        "workflow": workflow,
    }


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

WORKFLOW_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="health_check",
        description="Check n8n API connectivity and status",
        input_model=HealthCheckInput,
        handler=health_check,
    ),
    ToolDefinition(
        name="list_workflows",
        description=(
            "List all workflows from n8n. Optionally filter by active status, "
            "tags, or name."
        ),
        input_model=ListWorkflowsOptions,
        handler=list_workflows,
    ),
    ToolDefinition(
        name="get_workflow",
        description=(
            "Get a specific workflow by ID, including all nodes, connections, "
            "and settings."
        ),
        input_model=WorkflowIdInput,
        handler=get_workflow,
    ),
    ToolDefinition(
        name="create_workflow",
        description=(
            "Create a new workflow in n8n. The workflow will be created in "
            "inactive state."
        ),
        input_model=CreateWorkflowRequest,
        handler=create_workflow,
    ),
    ToolDefinition(
        name="update_workflow",
        description=(
            "Update an existing workflow. You can update name, nodes, "
            "connections, or settings. Fields you leave out keep their "
            "current values."
        ),
        input_model=UpdateWorkflowInput,
        handler=update_workflow,
    ),
    ToolDefinition(
        name="delete_workflow",
        description="Permanently delete a workflow. This action cannot be undone.",
        input_model=WorkflowIdInput,
        handler=delete_workflow,
    ),
    ToolDefinition(
        name="toggle_workflow",
        description="Activate or deactivate a workflow.",
        input_model=ToggleWorkflowInput,
        handler=toggle_workflow,
    ),
)


def build_registry() -> ToolRegistry:
    """Create a registry holding all workflow tools."""
    registry = ToolRegistry()
    for tool in WORKFLOW_TOOLS:
        registry.register(tool)
    return registry
