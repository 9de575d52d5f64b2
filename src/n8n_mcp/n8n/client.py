"""n8n REST API client.

All traffic to the n8n public API goes through ``N8nClient``. A client is
built per request from that request's credentials; it holds no connection
pool and no cached state.
"""

import logging
from typing import Any

import httpx

from n8n_mcp.config import API_KEY_HEADER, N8nConfig
from n8n_mcp.exceptions import N8nApiError
from n8n_mcp.models.health import HealthCheckResult, HealthStatus
from n8n_mcp.models.workflow import (
    CreateWorkflowRequest,
    ListWorkflowsOptions,
    UpdateWorkflowRequest,
    Workflow,
)

logger = logging.getLogger(__name__)


class N8nClient:
    """Async client for the n8n workflow endpoints."""

    def __init__(self, config: N8nConfig) -> None:
        """Initialize the client.

        Args:
            config: n8n base URL, API key and timeout
        """
        self.base_url = config.api_url.removesuffix("/")
        self._api_key = config.api_key
        self._timeout = config.timeout

    async def _request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Make an authenticated request to the n8n API.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL, starting with "/"
            body: Optional JSON-serializable request body
            params: Optional query parameters

        Returns:
            The decoded JSON body, or None when the body is empty

        Raises:
            N8nApiError: On any non-2xx status or transport failure
        """
        url = f"{self.base_url}{endpoint}"
        headers = {
            API_KEY_HEADER: self._api_key,
            "Accept": "application/json",
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"n8n request: {method} {url}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    json=body,
                    params=params,
                )
        except httpx.HTTPError as e:
            logger.warning(f"n8n request {method} {endpoint} failed: {e}")
            raise N8nApiError(f"Failed to reach n8n API: {e}") from e

        if not 200 <= response.status_code < 300:
            message = _error_message(response)
            logger.warning(
                f"n8n request {method} {endpoint} returned {response.status_code}: {message}"
            )
            raise N8nApiError(message, status_code=response.status_code)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise N8nApiError(
                f"Invalid JSON in n8n API response ({response.status_code})",
                status_code=response.status_code,
            ) from e

    async def health_check(self) -> HealthCheckResult:
        """Check n8n API connectivity. Never raises.

        Lists workflows with limit 1 purely to prove the URL and key work.
        """
        try:
            await self._request("GET", "/workflows", params={"limit": "1"})
        except Exception as e:
            return HealthCheckResult(
                status=HealthStatus.ERROR,
                message=str(e) or "Unknown error",
                base_url=self.base_url,
            )
        return HealthCheckResult(
            status=HealthStatus.OK,
            message="Successfully connected to n8n API",
            base_url=self.base_url,
        )

    async def list_workflows(
        self, options: ListWorkflowsOptions | None = None
    ) -> dict[str, Any]:
        """List workflows, sending only the filters that were provided.

        Returns:
            {"data": [workflow summaries], "nextCursor": str | None}
        """
        params: dict[str, str] = {}
        if options is not None:
            if options.active is not None:
                params["active"] = "true" if options.active else "false"
            if options.tags:
                params["tags"] = options.tags
            if options.name:
                params["name"] = options.name
            if options.limit is not None:
                params["limit"] = str(options.limit)
            if options.cursor:
                params["cursor"] = options.cursor

        return await self._request("GET", "/workflows", params=params or None)

    async def get_workflow(self, workflow_id: str) -> Workflow:
        """Get a workflow by ID."""
        return await self._request("GET", f"/workflows/{workflow_id}")

    async def create_workflow(self, request: CreateWorkflowRequest) -> Workflow:
        """Create a new workflow. n8n creates it inactive."""
        return await self._request("POST", "/workflows", request.to_payload())

    async def update_workflow(
        self, workflow_id: str, update: UpdateWorkflowRequest
    ) -> Workflow:
        """Update a workflow with read-modify-write.

        PUT /workflows/{id} replaces the whole workflow, so the current state
        is fetched first and the partial update is laid over it. Fields in
        ``update`` win; nodes and connections fall back to the current ones
        only when the update does not carry them at all (an explicit empty
        list or mapping is applied as is).
        """
        changes = update.to_payload()
        current = _expect_workflow(await self.get_workflow(workflow_id), workflow_id)

        merged = {
            **current,
            **changes,
            "nodes": _provided_or_current("nodes", changes, current),
            "connections": _provided_or_current("connections", changes, current),
        }

        logger.info(
            f"Updating workflow {workflow_id} (fields: {sorted(changes) or 'none'})"
        )
        return await self._request("PUT", f"/workflows/{workflow_id}", merged)

    async def delete_workflow(self, workflow_id: str) -> Workflow:
        """Delete a workflow and return it as echoed back by n8n.

        If n8n answers with an empty body, only the ID is known.
        """
        deleted = await self._request("DELETE", f"/workflows/{workflow_id}")
        if deleted is None:
            return {"id": workflow_id}
        return _expect_workflow(deleted, workflow_id)

    async def activate_workflow(self, workflow_id: str) -> Workflow:
        """Activate a workflow."""
        return await self._request("POST", f"/workflows/{workflow_id}/activate")

    async def deactivate_workflow(self, workflow_id: str) -> Workflow:
        """Deactivate a workflow."""
        return await self._request("POST", f"/workflows/{workflow_id}/deactivate")


def _expect_workflow(body: Any, workflow_id: str) -> Workflow:
    """Reject response bodies that are not a workflow object."""
    if not isinstance(body, dict):
        logger.warning(
            f"n8n returned {type(body).__name__} instead of workflow {workflow_id}"
        )
        raise N8nApiError(
            f"Unexpected n8n API response for workflow {workflow_id}: "
            "expected a workflow object"
        )
    return body


def _provided_or_current(
    field: str, changes: dict[str, Any], current: Workflow
) -> Any:
    if changes.get(field) is not None:
        return changes[field]
    return current.get(field)


def _error_message(response: httpx.Response) -> str:
    """Prefer the message n8n reports, else describe the HTTP status."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"n8n API error: {response.status_code} {response.reason_phrase}"
