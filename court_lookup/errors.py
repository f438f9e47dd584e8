"""
Error taxonomy shared by the service layer and the HTTP facade.
"""

from __future__ import annotations


class CaseLookupError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    def to_dict(self) -> dict:
        body: dict = {"error": self.message}
        if self.errors:
            body["errors"] = list(self.errors)
        return body


class CaseValidationError(CaseLookupError):
    status_code = 400


class CaseNotFoundError(CaseLookupError):
    status_code = 404


class UnimplementedError(CaseLookupError):
    status_code = 501


class LookupFailedError(CaseLookupError):
    status_code = 500
