"""
Zenaton - Python client for the Zenaton workflow engine.

Define tasks and workflows, then dispatch, query and control them
through the local worker agent and the Zenaton API:
- define_task, define_workflow, define_version: definition factory
- Client, get_client: protocol client
- init: process-wide credentials

Usage:
    from zenaton import define_workflow, init

    init(app_id, api_token, "prod")

    Order = define_workflow("Order", {
        "handle": handle_order,
        "id": lambda self: self.data["order_id"],
    })
    await Order({"order_id": 42}).dispatch()
    await Order.where_id(42).kill()
"""

__version__ = "0.1.0"

from .core import (
    DefinitionRegistry,
    Task,
    Workflow,
    define_task,
    define_version,
    define_workflow,
    get_task_registry,
    get_workflow_registry,
)
from .client import Client, get_client
from .config import ClientConfig, get_config
from .credentials import Credentials, get_credentials, init
from .errors import ExternalZenatonError, InvalidArgumentError, ZenatonError
from .query import WorkflowQuery

__all__ = [
    "__version__",
    # Definitions
    "Task",
    "Workflow",
    "define_task",
    "define_workflow",
    "define_version",
    "DefinitionRegistry",
    "get_task_registry",
    "get_workflow_registry",
    # Client
    "Client",
    "get_client",
    "WorkflowQuery",
    # Config
    "ClientConfig",
    "get_config",
    "Credentials",
    "get_credentials",
    "init",
    # Errors
    "ZenatonError",
    "InvalidArgumentError",
    "ExternalZenatonError",
]
