from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationInfo, field_validator, model_validator

from minds.core.exceptions import MindsError
from minds.core.rest_api import expect_status, quote_name
from minds.datasources.schemas import Datasource
from minds.minds.exceptions import InvalidDatasourceReference
from minds.minds.utils import coerce_text, llm_base_url, merge_parameters


logger = logging.getLogger(__name__)


class Mind(BaseModel):
    """A mind as last confirmed by the server, bound to the manager that fetched it.

    Mutations go to the server first. ``add_datasource`` and ``del_datasource``
    re-fetch the mind and refresh ``datasources``; ``update`` only carries a
    rename over to the local handle.
    """

    model_config = ConfigDict(extra='ignore', protected_namespaces=())

    project: str
    name: str
    model_name: Optional[str] = None
    provider: Optional[str] = None
    prompt_template: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)
    datasources: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    _manager: Any = PrivateAttr(default=None)

    @field_validator("parameters", "datasources", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return {} if info.field_name == "parameters" else []
        return v

    @model_validator(mode="after")
    def _template_from_parameters(self) -> "Mind":
        if self.prompt_template is None and isinstance(self.parameters.get("prompt_template"), str):
            self.prompt_template = self.parameters["prompt_template"]
        return self

    @classmethod
    def from_response(cls, data: dict, manager) -> "Mind":
        mind = cls.model_validate({"project": manager.project, **data})
        mind._manager = manager
        return mind

    @property
    def manager(self):
        if self._manager is None:
            raise MindsError(f"Mind {self.name} is not bound to a manager; fetch it with MindManager.get")
        return self._manager

    # Mutations
    def update(
        self,
        name: Optional[str] = None,
        model_name: Optional[str] = None,
        provider: Optional[str] = None,
        prompt_template: Optional[str] = None,
        datasources: Optional[Sequence[Any]] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        data: dict[str, Any] = {}
        if datasources is not None:
            data["datasources"] = [self.manager.resolve_datasource(ds) for ds in datasources]
        if name:
            data["name"] = name
        if model_name:
            data["model_name"] = model_name
        if provider:
            data["provider"] = provider
        if parameters is not None or prompt_template is not None:
            base = parameters if parameters is not None else self.parameters
            data["parameters"] = merge_parameters(base, prompt_template)

        response = self.manager.api.patch(self.manager.mind_path(self.name), data)
        expect_status(response, 200, f"Error updating mind {self.name}")

        # Only the name is carried over; call MindManager.get for a full refresh
        if name and name != self.name:
            self.name = name

    def add_datasource(self, datasource: Any) -> None:
        ds_name = self.manager.resolve_datasource(datasource)
        response = self.manager.api.post(
            f"{self.manager.mind_path(self.name)}/datasources",
            {"name": ds_name},
        )
        expect_status(response, 200, f"Error adding datasource {ds_name} to mind {self.name}")
        self._refresh_datasources()

    def del_datasource(self, datasource: Any) -> None:
        if isinstance(datasource, Datasource):
            ds_name = datasource.name
        elif isinstance(datasource, str):
            ds_name = datasource
        else:
            raise InvalidDatasourceReference(f"Unknown datasource type: {type(datasource).__name__}")

        response = self.manager.api.delete(f"{self.manager.mind_path(self.name)}/datasources/{quote_name(ds_name)}")
        expect_status(response, 200, f"Error deleting datasource {ds_name} from mind {self.name}")
        self._refresh_datasources()

    # Completion
    def completion(self, message: str, stream: bool = False) -> str:
        api = self.manager.api
        chat = ChatOpenAI(
            model=self.name,
            api_key=api.api_key,
            base_url=llm_base_url(api.base_url),
        )
        messages = [HumanMessage(content=message)]
        logger.debug("Completion against mind %s (stream=%s)", self.name, stream)

        if stream:
            return "".join(coerce_text(chunk.content) for chunk in chat.stream(messages))
        return coerce_text(chat.invoke(messages).content)

    # Helpers
    def _refresh_datasources(self) -> None:
        confirmed = self.manager.get(self.name)
        self.datasources = confirmed.datasources
