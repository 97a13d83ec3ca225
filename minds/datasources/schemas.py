from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DatasourceBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(..., min_length=1)
    engine: str = Field(..., description="Backend type identifier, e.g. 'postgres'")
    description: Optional[str] = None
    connection_data: Dict[str, Any] = Field(default_factory=dict)
    tables: Optional[List[str]] = None

    @field_validator("connection_data", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class DatabaseConfig(DatasourceBase):
    """Datasource definition supplied by the caller, sent as-is on create."""


class Datasource(DatasourceBase):
    """Datasource as confirmed by the server."""
