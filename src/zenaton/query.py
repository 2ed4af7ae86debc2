"""Query builder addressing one running workflow instance.

Usage:
    await OrderWorkflow.where_id("order-42").pause()
    workflow = await OrderWorkflow.where_id("order-42").find()
"""

from __future__ import annotations

from typing import Any, Optional

from .client import Client, get_client
from .core.base import Workflow


class WorkflowQuery:
    """A workflow instance identified by its canonical name and custom id."""

    def __init__(self, workflow_name: str, custom_id: Any, client: Optional[Client] = None):
        self.workflow_name = workflow_name
        self.custom_id = str(custom_id)
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or get_client()

    async def find(self) -> Optional[Workflow]:
        return await self.client.find_workflow(self.workflow_name, self.custom_id)

    async def kill(self) -> Any:
        return await self.client.kill_workflow(self.workflow_name, self.custom_id)

    async def pause(self) -> Any:
        return await self.client.pause_workflow(self.workflow_name, self.custom_id)

    async def resume(self) -> Any:
        return await self.client.resume_workflow(self.workflow_name, self.custom_id)

    async def send_event(self, event_name: str, data: Any = None) -> Any:
        return await self.client.send_event(
            self.workflow_name, self.custom_id, event_name, data
        )

    def __repr__(self) -> str:
        return f"<WorkflowQuery {self.workflow_name} id={self.custom_id!r}>"
