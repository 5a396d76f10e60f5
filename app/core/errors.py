from __future__ import annotations

from typing import Any


class SchemaDefinitionError(Exception):
    """
    Raised while building the party catalog when a record type definition is inconsistent
    (duplicate field names, cross-field checks pointing at unknown fields).
    Startup-only: the service refuses to start rather than serve a broken spec.
    """


class PartyServiceError(Exception):
    """
    Base for every error surfaced to API callers.
    Rendered as ErrorResponse(code, message, details) with `status_code`.
    """
    status_code: int = 400
    code: str = "error"

    def __init__(self, message: str, *, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.details = list(details or [])


class UnknownPartyType(PartyServiceError):
    status_code = 400
    code = "unknown_type"


class MalformedPayload(PartyServiceError):
    status_code = 400
    code = "malformed_payload"


class ValidationFailed(PartyServiceError):
    status_code = 400
    code = "validation_failed"


class PartyTypeNotFound(PartyServiceError):
    status_code = 404
    code = "not_found"


class TransientInjectedFailure(PartyServiceError):
    status_code = 500
    code = "transient_failure"
