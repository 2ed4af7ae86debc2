"""
Task and workflow definitions.

``define_task`` / ``define_workflow`` validate a name plus an
implementation, build a class named after the definition and record it
in the matching registry. Called with a name only, they look the class
up instead.

Usage:
    from zenaton import define_task

    SendEmail = define_task("SendEmail", {
        "handle": lambda self: send(self.data),
    })
    await SendEmail({"to": "x@example.com"}).dispatch()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Type

from ..errors import InvalidArgumentError
from .base import Definition, Task, Workflow
from .registry import DefinitionRegistry, get_task_registry, get_workflow_registry

logger = logging.getLogger(__name__)

# Used internally to wrap ``handle``; implementations may not provide them
RESERVED_METHODS = ("_promiseHandle", "_promise_handle")

# Set on every class or instance, so a method of that name would be hidden
RESERVED_ATTRIBUTES = ("name", "data")

_MISSING = object()


@dataclass(frozen=True)
class DefinitionSpec:
    """Validated name and methods of a task or workflow."""

    kind: str
    name: str
    methods: Dict[str, Callable] = field(default_factory=dict)

    @classmethod
    def from_implementation(cls, kind: str, name: str, implementation: Any) -> "DefinitionSpec":
        """Validate an implementation (a callable or a dict of methods).

        Raises:
            InvalidArgumentError: If the implementation has the wrong shape
        """
        if callable(implementation):
            return cls(kind=kind, name=name, methods={"handle": implementation})

        if not isinstance(implementation, Mapping):
            raise InvalidArgumentError(
                f"2nd parameter ({kind} implementation) must be a function or a dict"
            )

        if "handle" not in implementation:
            raise InvalidArgumentError(f'Your {kind} MUST define a "handle" method')

        for reserved in RESERVED_METHODS:
            if reserved in implementation:
                raise InvalidArgumentError(
                    f'Your {kind} can NOT redefine a "{reserved}" method'
                )

        for reserved in RESERVED_ATTRIBUTES:
            if reserved in implementation:
                raise InvalidArgumentError(
                    f'Your {kind} can NOT define a "{reserved}" method - reserved attribute'
                )

        for key, value in implementation.items():
            if not isinstance(key, str) or not callable(value):
                raise InvalidArgumentError(
                    f'{kind.capitalize()}\'s methods must be functions - check value of "{key}"'
                )

        return cls(kind=kind, name=name, methods=dict(implementation))

    def materialize(self, base: Type[Definition]) -> Type[Definition]:
        """Build the class carrying these methods, named after the definition."""
        namespace: Dict[str, Any] = dict(self.methods)
        namespace["name"] = self.name
        namespace["__qualname__"] = self.name
        namespace["__module__"] = base.__module__
        return type(self.name, (base,), namespace)


def _define(
    kind: str,
    base: Type[Definition],
    registry: DefinitionRegistry,
    name: Any,
    implementation: Any,
) -> Optional[Type[Definition]]:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"1st parameter ({kind} name) must be a string")

    if implementation is _MISSING:
        return registry.get_class(name)

    spec = DefinitionSpec.from_implementation(kind, name, implementation)
    cls = spec.materialize(base)
    registry.set_class(name, cls)
    return cls


def define_task(
    name: str,
    implementation: Any = _MISSING,
    registry: Optional[DefinitionRegistry] = None,
) -> Optional[Type[Task]]:
    """Register a task, or look one up when only a name is given.

    Args:
        name: Task name, unique among tasks
        implementation: ``handle`` callable, or dict of methods including ``handle``
        registry: Registry to use (default: the process-wide task registry)

    Returns:
        The task class, or None in getter mode when the name is unknown
    """
    return _define("task", Task, registry or get_task_registry(), name, implementation)


def define_workflow(
    name: str,
    implementation: Any = _MISSING,
    registry: Optional[DefinitionRegistry] = None,
) -> Optional[Type[Workflow]]:
    """Register a workflow, or look one up when only a name is given.

    Same contract as ``define_task``.
    """
    return _define(
        "workflow", Workflow, registry or get_workflow_registry(), name, implementation
    )


def define_version(
    name: str,
    versions: Any = _MISSING,
    registry: Optional[DefinitionRegistry] = None,
) -> Optional[Type[Workflow]]:
    """Register successive implementations of a workflow under one canonical name.

    Instances of the returned class run the last version: they report that
    version's ``name`` while ``get_canonical()`` returns ``name``.

    Args:
        name: Canonical workflow name
        versions: Workflow classes, oldest first
        registry: Registry to use (default: the process-wide workflow registry)
    """
    registry = registry or get_workflow_registry()

    if not isinstance(name, str):
        raise InvalidArgumentError("1st parameter (workflow name) must be a string")

    if versions is _MISSING:
        return registry.get_class(name)

    if not isinstance(versions, Sequence) or isinstance(versions, str) or not versions:
        raise InvalidArgumentError(
            "2nd parameter (workflow versions) must be a non-empty list of workflows"
        )
    for version in versions:
        if not (isinstance(version, type) and issubclass(version, Workflow)):
            raise InvalidArgumentError(
                f"Workflow versions must be workflow classes - got {version!r}"
            )

    current = versions[-1]
    cls = type(
        current.__name__,
        (current,),
        {
            "canonical_name": name,
            "versions": tuple(versions),
            "__qualname__": current.__qualname__,
            "__module__": current.__module__,
        },
    )
    registry.set_class(name, cls)
    logger.debug(f"Workflow {name} now runs version {current.name}")
    return cls
