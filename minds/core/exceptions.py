from __future__ import annotations

from typing import Optional


class MindsError(Exception):
    code: str = "MINDS_ERROR"

    def __init__(self, detail: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.body = body


class ObjectNotFound(MindsError):
    code = "NOT_FOUND"

    def __init__(self, detail: str = "Object not found", status_code: Optional[int] = 404, body: Optional[str] = None):
        super().__init__(detail, status_code, body)


class ObjectNotSupported(MindsError):
    code = "NOT_SUPPORTED"

    def __init__(self, detail: str = "Object not supported", status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(detail, status_code, body)


class Forbidden(MindsError):
    code = "FORBIDDEN"

    def __init__(self, detail: str = "Forbidden", status_code: Optional[int] = 403, body: Optional[str] = None):
        super().__init__(detail, status_code, body)


class Unauthorized(MindsError):
    code = "UNAUTHORIZED"

    def __init__(self, detail: str = "Unauthorized", status_code: Optional[int] = 401, body: Optional[str] = None):
        super().__init__(detail, status_code, body)


class UnknownError(MindsError):
    code = "UNKNOWN_ERROR"

    def __init__(self, detail: str = "Unknown error", status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(detail, status_code, body)
