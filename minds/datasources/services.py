from __future__ import annotations

import logging
from typing import Any

from minds.core.exceptions import ObjectNotFound
from minds.core.rest_api import RestAPI, expect_status, quote_name
from minds.datasources.exceptions import DatasourceNotSupported
from minds.datasources.schemas import DatabaseConfig, Datasource


logger = logging.getLogger(__name__)


class DatasourceManager:
    def __init__(self, api: RestAPI) -> None:
        self.api = api

    # CRUD
    def create(self, ds_config: DatabaseConfig, replace: bool = False) -> Datasource:
        if replace:
            try:
                self.get(ds_config.name)
            except ObjectNotFound:
                pass
            else:
                logger.info("Replacing existing datasource %s", ds_config.name)
                self.drop(ds_config.name)

        response = self.api.post("datasources", ds_config.model_dump(exclude_none=True))
        expect_status(response, 200, f"Error creating datasource {ds_config.name}")

        # Server normalizes some fields, so return what it stored
        return self.get(ds_config.name)

    def list(self) -> list[Datasource]:
        response = self.api.get("datasources")
        items: list[dict] = response.json()

        datasources: list[Datasource] = []
        for item in items:
            # Only SQL datasources are exposed by this client
            if not _is_supported(item):
                logger.debug("Skipping unsupported datasource %s", item.get("name"))
                continue
            datasources.append(Datasource.model_validate(item))
        return datasources

    def get(self, name: str) -> Datasource:
        response = self.api.get(f"datasources/{quote_name(name)}")
        data: dict = response.json()
        if not _is_supported(data):
            raise DatasourceNotSupported(f"Wrong type of datasource: {name}")
        return Datasource.model_validate(data)

    def drop(self, name: str) -> None:
        response = self.api.delete(f"datasources/{quote_name(name)}")
        expect_status(response, 200, f"Error deleting datasource {name}")
        logger.info("Dropped datasource %s", name)


def _is_supported(record: Any) -> bool:
    return isinstance(record, dict) and isinstance(record.get("engine"), str)
