from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from minds.core.config import get_settings
from minds.core.exceptions import ObjectNotFound
from minds.core.rest_api import RestAPI, expect_status, quote_name
from minds.datasources.schemas import DatabaseConfig, Datasource
from minds.datasources.services import DatasourceManager
from minds.minds.exceptions import InvalidDatasourceReference
from minds.minds.schemas import Mind
from minds.minds.utils import DEFAULT_PROMPT_TEMPLATE, merge_parameters


logger = logging.getLogger(__name__)


class MindManager:
    def __init__(self, api: RestAPI, datasources: DatasourceManager, project: Optional[str] = None) -> None:
        self.api = api
        self.datasources = datasources
        self.project = project or get_settings().project

    # CRUD
    def create(
        self,
        name: str,
        model_name: Optional[str] = None,
        provider: Optional[str] = None,
        prompt_template: Optional[str] = None,
        datasources: Optional[Sequence[Any]] = None,
        parameters: Optional[Dict[str, Any]] = None,
        replace: bool = False,
    ) -> Mind:
        if replace:
            try:
                self.get(name)
            except ObjectNotFound:
                pass
            else:
                logger.info("Replacing existing mind %s", name)
                self.drop(name)

        data: dict[str, Any] = {"name": name}
        if model_name is not None:
            data["model_name"] = model_name
        if provider is not None:
            data["provider"] = provider
        if datasources is not None:
            data["datasources"] = [self.resolve_datasource(ds) for ds in datasources]
        data["parameters"] = merge_parameters(parameters, prompt_template, default_template=DEFAULT_PROMPT_TEMPLATE)

        response = self.api.post(self.mind_path(), data)
        expect_status(response, 201, f"Error creating mind {name}")
        return self.get(name)

    def list(self) -> list[Mind]:
        response = self.api.get(self.mind_path())
        return [Mind.from_response(item, self) for item in response.json()]

    def get(self, name: str) -> Mind:
        response = self.api.get(self.mind_path(name))
        return Mind.from_response(response.json(), self)

    def drop(self, name: str) -> None:
        response = self.api.delete(self.mind_path(name))
        expect_status(response, 200, f"Error deleting mind {name}")
        logger.info("Dropped mind %s", name)

    # Datasource references
    def resolve_datasource(self, datasource: Any) -> str:
        """Turn a datasource reference into the name the server expects.

        Names pass through and handles give their name. A raw config is looked
        up first and created when it does not exist yet.
        """
        if isinstance(datasource, str):
            return datasource
        if isinstance(datasource, Datasource):
            return datasource.name
        if isinstance(datasource, DatabaseConfig):
            try:
                self.datasources.get(datasource.name)
            except ObjectNotFound:
                logger.info("Creating datasource %s for mind", datasource.name)
                self.datasources.create(datasource, replace=False)
            return datasource.name
        raise InvalidDatasourceReference(f"Unknown datasource type: {type(datasource).__name__}")

    # Helpers
    def mind_path(self, name: Optional[str] = None) -> str:
        path = f"projects/{self.project}/minds"
        if name is not None:
            path = f"{path}/{quote_name(name)}"
        return path
