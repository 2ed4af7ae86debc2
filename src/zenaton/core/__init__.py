"""
Zenaton Core - definitions and their registries.

Provides:
- Task / Workflow base classes
- define_task, define_workflow, define_version: definition factory
- DefinitionRegistry: name -> class lookup
- WorkflowResolver: rehydration of found workflows
"""

from .base import Definition, Task, Workflow
from .definitions import DefinitionSpec, define_task, define_version, define_workflow
from .registry import DefinitionRegistry, get_task_registry, get_workflow_registry
from .resolver import WorkflowResolver

__all__ = [
    "Definition",
    "Task",
    "Workflow",
    "DefinitionSpec",
    "define_task",
    "define_workflow",
    "define_version",
    "DefinitionRegistry",
    "get_task_registry",
    "get_workflow_registry",
    "WorkflowResolver",
]
