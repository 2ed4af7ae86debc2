"""
Zenaton protocol client.

Turns orchestration intents (start a task, start/kill/pause/resume/find
a workflow, send an event) into HTTP requests against two backends:

- the local worker agent, ``{worker_url}:{worker_port}/api/v_newton/...``
- the Zenaton API, ``{api_url}/...``

Every request carries the client envelope (language, library version,
code path). Field names and constant values are part of the wire
contract and must not change.

Usage:
    from zenaton import Client, get_client

    Client.init(app_id, api_token, app_env)
    client = get_client()
    await client.start_workflow(MyWorkflow({"order": 42}))
    await client.kill_workflow("MyWorkflow", "order-42")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from . import __version__
from .config import ClientConfig, get_config
from .core.base import Task, Workflow
from .core.resolver import WorkflowResolver
from .credentials import Credentials, get_credentials, init as init_credentials
from .errors import ExternalZenatonError, InvalidArgumentError
from .services.http import HttpTransport, get_http
from .services.serializer import Serializer, get_serializer

logger = logging.getLogger(__name__)

WORKER_API_VERSION = "v_newton"

MAX_ID_SIZE = 256

API_TOKEN = "api_token"

ATTR_ID = "custom_id"
ATTR_NAME = "name"
ATTR_CANONICAL = "canonical_name"
ATTR_DATA = "data"
ATTR_PROG = "programming_language"
ATTR_INITIAL_LIB_VERSION = "initial_library_version"
ATTR_CODE_PATH_VERSION = "code_path_version"
ATTR_MODE = "mode"
ATTR_MAX_PROCESSING_TIME = "maxProcessingTime"

EVENT_INPUT = "event_input"
EVENT_NAME = "event_name"

PROG = "Python"
INITIAL_LIB_VERSION = __version__
CODE_PATH_VERSION = "async"

WORKFLOW_KILL = "kill"
WORKFLOW_PAUSE = "pause"
WORKFLOW_RUN = "run"

WORKFLOW_MODES = (WORKFLOW_KILL, WORKFLOW_PAUSE, WORKFLOW_RUN)

MISSING_CREDENTIALS = "Please initialize your Zenaton client with your credentials"


def envelope() -> Dict[str, str]:
    """Client identity fields attached to every request."""
    return {
        ATTR_PROG: PROG,
        ATTR_INITIAL_LIB_VERSION: INITIAL_LIB_VERSION,
        ATTR_CODE_PATH_VERSION: CODE_PATH_VERSION,
    }


class Client:
    """Protocol client for the Zenaton worker agent and API.

    Collaborators default to the process-wide ones and can be injected
    for a self-contained client.
    """

    def __init__(
        self,
        worker: bool = False,
        credentials: Optional[Credentials] = None,
        config: Optional[ClientConfig] = None,
        http: Optional[HttpTransport] = None,
        serializer: Optional[Serializer] = None,
        resolver: Optional[WorkflowResolver] = None,
    ):
        self.worker = worker
        self.credentials = credentials or get_credentials()
        self.config = config or get_config()
        self._http = http
        self._serializer = serializer
        self._resolver = resolver

    @staticmethod
    def init(app_id: Optional[str], api_token: Optional[str], app_env: Optional[str]) -> None:
        """Set the process-wide credentials shared by every client."""
        init_credentials(app_id, api_token, app_env)

    @property
    def http(self) -> HttpTransport:
        return self._http or get_http()

    @property
    def serializer(self) -> Serializer:
        return self._serializer or get_serializer()

    @property
    def resolver(self) -> WorkflowResolver:
        if self._resolver is None:
            self._resolver = WorkflowResolver(serializer=self._serializer)
        return self._resolver

    def check_credentials(self, worker: Optional[bool] = None) -> None:
        """Warn (or raise, in strict mode) when credentials are incomplete."""
        if worker is None:
            worker = self.worker
        if worker or self.credentials.is_complete():
            return
        if self.config.strict_credentials:
            raise ExternalZenatonError(MISSING_CREDENTIALS)
        logger.warning(MISSING_CREDENTIALS)

    # =========================================================================
    # URLs
    # =========================================================================

    def get_worker_url(self, resources: str = "", params: str = "") -> str:
        """Worker URL with a query string, for callers that still build their own.

        Args:
            resources: REST resource
            params: Query string (``key=value&...``), merged with the app env/id
        """
        full_params: Dict[str, str] = {}
        for param in params.split("&"):
            if not param:
                continue
            key, _, value = param.partition("=")
            full_params[key] = value
        full_params.update(self.app_params())
        return f"{self.worker_url(resources)}?{urlencode(full_params)}"

    def worker_url(self, resources: str = "") -> str:
        host = self.config.worker_url
        port = self.config.worker_port
        return f"{host}:{port}/api/{WORKER_API_VERSION}/{resources}"

    def website_url(self, resources: str = "") -> str:
        return f"{self.config.api_url}/{resources}"

    def instance_website_url(self) -> str:
        return self.website_url("instances")

    def instance_worker_url(self) -> str:
        return self.worker_url("instances")

    def task_worker_url(self) -> str:
        return self.worker_url("tasks")

    def send_event_url(self) -> str:
        return self.worker_url("events")

    def app_params(self) -> Dict[str, str]:
        # called from a worker, app env and id are usually not set
        return self.credentials.app_params()

    # =========================================================================
    # Operations
    # =========================================================================

    async def start_task(self, task: Task) -> Any:
        """Start a task instance."""
        get_max_processing_time = getattr(task, "get_max_processing_time", None)

        body = {
            **envelope(),
            ATTR_NAME: task.name,
            ATTR_DATA: self.serializer.encode(task.data),
            ATTR_MAX_PROCESSING_TIME: (
                get_max_processing_time() if callable(get_max_processing_time) else None
            ),
        }

        url = self.task_worker_url()
        logger.debug(f"Starting task {task.name}")
        return await self.http.post(url, body, params=self.app_params())

    async def start_workflow(self, flow: Workflow) -> Any:
        """Start a workflow instance.

        Raises:
            InvalidArgumentError: If ``id()`` returns neither a string nor a number
            ExternalZenatonError: If the custom id reaches 256 bytes
        """
        custom_id = self._custom_id(flow)

        body = {
            **envelope(),
            ATTR_CANONICAL: flow.get_canonical(),
            ATTR_NAME: flow.name,
            ATTR_DATA: self.serializer.encode(flow.data),
            ATTR_ID: custom_id,
        }

        url = self.instance_worker_url()
        logger.debug(f"Starting workflow {flow.name} (id={custom_id})")
        return await self.http.post(url, body, params=self.app_params())

    async def kill_workflow(self, workflow_name: str, custom_id: str) -> Any:
        """Kill a workflow instance."""
        return await self.update_instance(workflow_name, custom_id, WORKFLOW_KILL)

    async def pause_workflow(self, workflow_name: str, custom_id: str) -> Any:
        """Pause a workflow instance."""
        return await self.update_instance(workflow_name, custom_id, WORKFLOW_PAUSE)

    async def resume_workflow(self, workflow_name: str, custom_id: str) -> Any:
        """Resume a workflow instance."""
        return await self.update_instance(workflow_name, custom_id, WORKFLOW_RUN)

    async def find_workflow(self, workflow_name: str, custom_id: str) -> Optional[Workflow]:
        """Find a workflow instance and rebuild it from its stored properties."""
        properties = await self.find_workflow_properties(workflow_name, custom_id)
        return self.resolver.get_workflow(workflow_name, properties)

    async def find_workflow_properties(self, workflow_name: str, custom_id: str) -> Any:
        """Fetch the stored properties of a workflow instance, as returned by the API."""
        params = {
            ATTR_ID: custom_id,
            ATTR_NAME: workflow_name,
            **envelope(),
            API_TOKEN: self.credentials.api_token,
            **self.app_params(),
        }

        body = await self.http.get(self.instance_website_url(), params=params)
        return body["data"]["properties"]

    async def send_event(
        self,
        workflow_name: str,
        custom_id: str,
        event_name: str,
        event_data: Any,
    ) -> Any:
        """Send an event to a workflow instance."""
        body = {
            **envelope(),
            ATTR_NAME: workflow_name,
            ATTR_ID: custom_id,
            EVENT_NAME: event_name,
            EVENT_INPUT: self.serializer.encode(event_data),
        }

        url = self.send_event_url()
        logger.debug(f"Sending event {event_name} to {workflow_name} (id={custom_id})")
        return await self.http.post(url, body, params=self.app_params())

    async def update_instance(self, workflow_name: str, custom_id: str, mode: str) -> Any:
        """Change the state of a workflow instance (kill, pause or run)."""
        if mode not in WORKFLOW_MODES:
            raise InvalidArgumentError(
                f"Mode must be one of {', '.join(WORKFLOW_MODES)} - got {mode!r}"
            )

        body = {
            **envelope(),
            ATTR_NAME: workflow_name,
            ATTR_MODE: mode,
        }
        params = {ATTR_ID: custom_id, **self.app_params()}

        url = self.instance_worker_url()
        logger.debug(f"Updating workflow {workflow_name} (id={custom_id}) to {mode}")
        return await self.http.put(url, body, params=params)

    @staticmethod
    def _custom_id(flow: Workflow) -> Optional[str]:
        get_id = getattr(flow, "id", None)
        if not callable(get_id):
            return None

        custom_id = get_id()
        # bool is an int, but not a valid id
        if isinstance(custom_id, bool) or not isinstance(custom_id, (str, int, float)):
            raise InvalidArgumentError(
                "Provided id must be a string or a number - "
                f"current type: {type(custom_id).__name__}"
            )

        if isinstance(custom_id, float) and custom_id.is_integer():
            custom_id = int(custom_id)
        custom_id = str(custom_id)
        if len(custom_id) >= MAX_ID_SIZE:
            raise ExternalZenatonError(f"Provided id must not exceed {MAX_ID_SIZE} bytes")
        return custom_id


# Global client instance
_client: Optional[Client] = None


def get_client(worker: bool = False) -> Client:
    """Get or create the process-wide client.

    The first call creates the client; later calls return it unchanged.
    Non-worker callers are warned when credentials are missing.
    """
    global _client
    if _client is None:
        _client = Client(worker=worker)
    _client.check_credentials(worker=worker)
    return _client
