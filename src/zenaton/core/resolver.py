"""Turn a workflow name and its stored properties back into an instance."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..services.serializer import Serializer, get_serializer
from .base import Workflow
from .registry import DefinitionRegistry, get_workflow_registry

logger = logging.getLogger(__name__)


class WorkflowResolver:
    """Rehydrates workflows found through the API."""

    def __init__(
        self,
        registry: Optional[DefinitionRegistry] = None,
        serializer: Optional[Serializer] = None,
    ):
        self._registry = registry
        self._serializer = serializer

    @property
    def registry(self) -> DefinitionRegistry:
        return self._registry or get_workflow_registry()

    @property
    def serializer(self) -> Serializer:
        return self._serializer or get_serializer()

    def get_workflow(self, name: str, properties: Any) -> Optional[Workflow]:
        """Build an instance of the workflow registered as ``name``.

        Args:
            name: Workflow name as sent to the API
            properties: Instance properties, encoded or already decoded

        Returns:
            The workflow instance, or None if no class is registered
        """
        cls = self.registry.get_class(name)
        if cls is None:
            logger.warning(f"Unknown workflow: {name}. Available: {self.registry.names()}")
            return None

        if isinstance(properties, str):
            properties = self.serializer.decode(properties)
        return cls.from_properties(properties)
