"""
Base classes for tasks and workflows.

Classes produced by ``define_task`` / ``define_workflow`` derive from
these, so every definition can dispatch itself and be rebuilt from the
properties the API returns.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Optional


class Definition:
    """Common behaviour of tasks and workflows."""

    #: Declared name, set on each defined class
    name: str = ""

    def __init__(self, data: Any = None):
        self.data = data

    def handle(self, *args, **kwargs):
        """Main behaviour - provided by the implementation."""
        raise NotImplementedError

    async def _promise_handle(self, *args, **kwargs):
        """Run ``handle`` and wait for its result when it returned an awaitable."""
        result = self.handle(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result

    @classmethod
    def from_properties(cls, properties: Any) -> "Definition":
        """Rebuild an instance from stored properties without running ``__init__``."""
        instance = cls.__new__(cls)
        instance.data = None
        if isinstance(properties, Mapping):
            for key, value in properties.items():
                setattr(instance, key, value)
        elif properties is not None:
            instance.data = properties
        return instance

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} data={self.data!r}>"


class Task(Definition):
    """A single unit of work executed by a Zenaton worker.

    Implementations may define ``get_max_processing_time()`` to send a
    processing time hint along with the task.
    """

    async def dispatch(self) -> Any:
        """Start this task through the process-wide client."""
        from ..client import get_client

        return await get_client().start_task(self)


class Workflow(Definition):
    """A long-running, addressable process.

    Implementations may define ``id()`` returning a custom identifier
    (string or number) used to address the instance later.
    """

    #: Stable name used by the server for routing. None means ``name``.
    canonical_name: Optional[str] = None

    def get_canonical(self) -> str:
        return self.canonical_name or self.name

    async def dispatch(self) -> Any:
        """Start this workflow through the process-wide client."""
        from ..client import get_client

        return await get_client().start_workflow(self)

    @classmethod
    def where_id(cls, custom_id: str):
        """Address a running instance of this workflow by its custom id."""
        from ..query import WorkflowQuery

        return WorkflowQuery(cls.canonical_name or cls.name, custom_id)
