from __future__ import annotations

from typing import Optional

import httpx

from minds.core.rest_api import RestAPI
from minds.datasources.services import DatasourceManager
from minds.minds.services import MindManager


class Client:
    """Entry point: one authenticated transport shared by both managers."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        *,
        project: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api = RestAPI(api_key, base_url, timeout_s=timeout_s, transport=transport)
        self.datasources = DatasourceManager(self.api)
        self.minds = MindManager(self.api, self.datasources, project=project)

    def close(self) -> None:
        self.api.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
