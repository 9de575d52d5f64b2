"""Workflow models for requests sent to the n8n public API.

Field names are snake_case in Python and camelCase on the wire. Responses
from n8n are not parsed into these models; they are passed through as plain
JSON objects (see ``Workflow``).
"""

from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel

# JSON object as returned by n8n for a single workflow
Workflow = dict[str, Any]

# Node type versions and positions may be fractional (e.g. typeVersion 4.2)
Number = StrictInt | StrictFloat


class N8nModel(BaseModel):
    """Base model mapping snake_case attributes to n8n's camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump to n8n's wire shape, leaving out fields that were not given."""
        return {
            key: value
            for key, value in self.model_dump(by_alias=True).items()
            if value is not None
        }


# Source node name -> {"main": [[{node, type, index}, ...], ...]}.
# Kept as an open mapping at the tool boundary: n8n also uses connection
# keys other than "main" (ai_tool, ai_languageModel, ...).
Connections = dict[str, Any]


class WorkflowNode(N8nModel):
    """A single node in a workflow graph.

    Unknown keys are kept so that node options this model does not list
    (webhookId, onError, ...) survive a create or update unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictStr = Field(..., description="Unique node ID")
    name: StrictStr = Field(..., description="Display name of the node")
    type: StrictStr = Field(
        ..., description="Node type (e.g., n8n-nodes-base.httpRequest)"
    )
    type_version: Number = Field(..., description="Version of the node type")
    position: list[Number] = Field(
        ..., min_length=2, max_length=2, description="Position [x, y]"
    )
    parameters: dict[str, Any] = Field(..., description="Node parameters")
    credentials: dict[str, Any] | None = Field(
        default=None, description="Credentials configuration"
    )
    disabled: StrictBool | None = Field(
        default=None, description="Whether the node is disabled"
    )
    notes: StrictStr | None = None
    continue_on_fail: StrictBool | None = None
    retry_on_fail: StrictBool | None = None
    max_tries: StrictInt | None = None
    wait_between_tries: StrictInt | None = None


class WorkflowSettings(N8nModel):
    """Execution behaviour flags of a workflow."""

    save_execution_progress: StrictBool | None = None
    save_manual_executions: StrictBool | None = None
    save_data_error_execution: Literal["all", "none"] | None = None
    save_data_success_execution: Literal["all", "none"] | None = None
    execution_timeout: Number | None = None
    timezone: StrictStr | None = None
    execution_order: Literal["v0", "v1"] | None = None
    error_workflow: StrictStr | None = None


class CreateWorkflowRequest(N8nModel):
    """Body of POST /workflows."""

    name: StrictStr = Field(..., description="Name of the workflow")
    nodes: list[WorkflowNode] = Field(..., description="Array of workflow nodes")
    connections: Connections = Field(..., description="Connections between nodes")
    settings: WorkflowSettings | None = Field(
        default=None, description="Workflow settings"
    )
    static_data: Any = Field(default=None, description="Workflow static data")
    tags: list[StrictStr] | None = Field(default=None, description="Tag names")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["nodes"] = [node.to_payload() for node in self.nodes]
        if self.settings is not None:
            payload["settings"] = self.settings.to_payload()
        return payload


class UpdateWorkflowRequest(N8nModel):
    """Partial update of a workflow.

    Only fields the caller provided (and did not set to null) appear in
    ``to_payload()``. Empty lists and mappings count as provided.
    """

    name: StrictStr | None = Field(default=None, description="New name for the workflow")
    nodes: list[WorkflowNode] | None = Field(
        default=None, description="Updated array of workflow nodes"
    )
    connections: Connections | None = Field(
        default=None, description="Updated connections between nodes"
    )
    settings: WorkflowSettings | None = Field(
        default=None, description="Updated workflow settings"
    )
    static_data: Any = Field(default=None, description="Updated workflow static data")
    tags: list[StrictStr] | None = Field(default=None, description="Updated tag names")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if self.nodes is not None:
            payload["nodes"] = [node.to_payload() for node in self.nodes]
        if self.settings is not None:
            payload["settings"] = self.settings.to_payload()
        return payload


class ListWorkflowsOptions(N8nModel):
    """Filters for GET /workflows. Every field is independently optional."""

    active: StrictBool | None = Field(default=None, description="Filter by active status")
    tags: StrictStr | None = Field(
        default=None, description="Filter by tags (comma-separated)"
    )
    name: StrictStr | None = Field(default=None, description="Filter by workflow name")
    limit: StrictInt | None = Field(
        default=None, ge=1, description="Maximum number of workflows to return"
    )
    cursor: StrictStr | None = Field(default=None, description="Pagination cursor")
