"""
Definition Registry.

Maps a task or workflow name to the class built for it. Used both when
user code registers a definition and when a name coming back from the
API has to be turned into a runtime class again.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """Registry for task or workflow classes, keyed by name.

    Entries are never removed. Registering a name twice replaces the
    first class (see ``reregister``), which is what lets a reloaded
    module redefine its tasks and workflows.
    """

    def __init__(self, kind: str = "definition"):
        self.kind = kind
        self._classes: Dict[str, Type] = {}

    def set_class(self, name: str, cls: Type) -> None:
        """Store ``cls`` under ``name``, replacing any previous entry."""
        if name in self._classes and self._classes[name] is not cls:
            self.reregister(name, cls)
            return
        self._classes[name] = cls
        logger.debug(f"Registered {self.kind}: {name}")

    def reregister(self, name: str, cls: Type) -> None:
        """Replace the class stored under ``name``. Last writer wins."""
        previous = self._classes.get(name)
        self._classes[name] = cls
        if previous is not None:
            logger.warning(
                f"{self.kind.capitalize()} {name} re-registered, replacing previous class"
            )

    def get_class(self, name: str) -> Optional[Type]:
        """Get a registered class by name, or None."""
        return self._classes.get(name)

    def has(self, name: str) -> bool:
        return name in self._classes

    def names(self) -> List[str]:
        """List all registered names."""
        return list(self._classes.keys())


# Global registry instances
_task_registry: Optional[DefinitionRegistry] = None
_workflow_registry: Optional[DefinitionRegistry] = None


def get_task_registry() -> DefinitionRegistry:
    """Get or create the global task registry."""
    global _task_registry
    if _task_registry is None:
        _task_registry = DefinitionRegistry("task")
    return _task_registry


def get_workflow_registry() -> DefinitionRegistry:
    """Get or create the global workflow registry."""
    global _workflow_registry
    if _workflow_registry is None:
        _workflow_registry = DefinitionRegistry("workflow")
    return _workflow_registry
