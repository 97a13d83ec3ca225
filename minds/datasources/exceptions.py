from __future__ import annotations

from minds.core.exceptions import ObjectNotSupported


class DatasourceNotSupported(ObjectNotSupported):
    code = "DS_NOT_SUPPORTED"

    def __init__(self, detail: str = "Datasource type not supported"):
        super().__init__(detail)
