"""
Process-wide Zenaton credentials.

Whatever client is used to set the credentials, every code path reads
the same object, so ``init`` is the one place they are written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)

APP_ENV = "app_env"
APP_ID = "app_id"


@dataclass
class Credentials:
    """Application credentials sent along with every request."""

    app_id: Optional[str] = None
    api_token: Optional[str] = None
    app_env: Optional[str] = None

    def init(
        self,
        app_id: Optional[str],
        api_token: Optional[str],
        app_env: Optional[str],
    ) -> None:
        """Overwrite all three fields. Values are replaced, never merged."""
        self.app_id = app_id
        self.api_token = api_token
        self.app_env = app_env
        logger.debug(f"Credentials initialized for app {app_id} ({app_env})")

    def is_complete(self) -> bool:
        return bool(self.app_id and self.api_token and self.app_env)

    def app_params(self) -> Dict[str, str]:
        """Query parameters identifying the application.

        Unset fields are left out rather than sent empty. Worker-side
        callers usually have neither.
        """
        params: Dict[str, str] = {}
        if self.app_env:
            params[APP_ENV] = self.app_env
        if self.app_id:
            params[APP_ID] = self.app_id
        return params


# Global credentials instance
_credentials = Credentials()


def get_credentials() -> Credentials:
    """Get the process-wide credentials."""
    return _credentials


def init(
    app_id: Optional[str],
    api_token: Optional[str],
    app_env: Optional[str],
) -> Credentials:
    """Set the process-wide credentials. A later call wins."""
    _credentials.init(app_id, api_token, app_env)
    return _credentials
