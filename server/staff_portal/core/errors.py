from __future__ import annotations

from fastapi import status


class StaffPortalError(Exception):
    """Base for every failure a request can end with.

    Each kind knows the HTTP status it maps to and a stable machine code, so the
    application boundary can answer with a structured error instead of crashing
    the invocation.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class ConfigError(StaffPortalError):
    code = "config_error"


class StoreUnavailable(StaffPortalError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "store_unavailable"

    @property
    def headers(self) -> dict[str, str] | None:
        return {"Retry-After": "1"}


class RouteNotMatched(StaffPortalError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "route_not_matched"

    def __init__(self, method: str, path: str, *, path_matched: bool = False) -> None:
        super().__init__(f"No route matches {method} {path}")
        if path_matched:
            self.status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class PayloadInvalid(StaffPortalError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "payload_invalid"


class RecordNotFound(StaffPortalError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "record_not_found"


class StoreError(StaffPortalError):
    code = "store_error"
