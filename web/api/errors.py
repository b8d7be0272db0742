"""API errors and validation helpers."""

import base64
import binascii

from pydantic import BaseModel

from app.services.admin import Credentials


class ErrorResponse(BaseModel):
    """Error body."""

    error: str
    detail: str | None = None


class ApiError(Exception):
    """Error with an HTTP status, body and headers."""

    status_code = 500

    def __init__(self, error: str, detail: str | None = None, headers: dict[str, str] | None = None):
        self.body = ErrorResponse(error=error, detail=detail)
        self.headers = headers or {}
        super().__init__(error)


class BadRequestError(ApiError):
    status_code = 400


class AdminUnauthorizedError(ApiError):
    status_code = 401

    def __init__(self):
        super().__init__("Access denied", headers={"WWW-Authenticate": 'Basic realm="Admin Area"'})


class UpstreamAuthError(ApiError):
    """Upstream collection needs visitor credentials; the caller should fetch directly."""

    status_code = 401

    def __init__(self):
        super().__init__(
            "UPSTREAM_401",
            detail="Collection requires visitor password; use client-side fetch fallback.",
        )


class ForbiddenError(ApiError):
    status_code = 403


class ServerError(ApiError):
    status_code = 500


def error_response(exc: ApiError) -> tuple[int, dict, dict[str, str]]:
    """Render an ``ApiError`` as (status, JSON body, headers)."""
    return exc.status_code, exc.body.model_dump(exclude_none=True), exc.headers


def parse_basic_auth(header: str | None) -> Credentials | None:
    """Decode an ``Authorization: Basic ...`` header."""
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "basic" or not token:
        return None
    try:
        decoded = base64.b64decode(token.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return Credentials(username=username, password=password)
