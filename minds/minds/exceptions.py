from __future__ import annotations

from minds.core.exceptions import MindsError


class InvalidDatasourceReference(MindsError, TypeError):
    code = "INVALID_DATASOURCE_REFERENCE"

    def __init__(self, detail: str = "Unknown datasource type"):
        super().__init__(detail)
