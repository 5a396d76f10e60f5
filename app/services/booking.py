from __future__ import annotations

import logging
from dataclasses import dataclass
from pydantic import ValidationError

from app.core.errors import MalformedPayload, ValidationFailed
from app.core.ids import gen_booking_token
from app.schemas.party import PartySubmission
from app.services.party_catalog import PartyCatalog
from app.services.party_decode import decode_party
from app.services.party_validate import validate_party


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingConfirmation:
    booking_id: str
    party_type: str


def book_party(catalog: PartyCatalog, raw_body: bytes | str) -> BookingConfirmation:
    """
    Submission path for /bookparty. `raw_body` is decoded as JSON whatever the request content-type
    says (curl -d and browser fetch send form-urlencoded / text/plain).

    envelope -> party type lookup -> strict decode of `data` -> validation -> token.

    Each stage raises its own error (MalformedPayload, UnknownPartyType, MalformedPayload,
    ValidationFailed). Nothing is stored.
    """
    try:
        submission = PartySubmission.model_validate_json(raw_body)
    except ValidationError as e:
        raise MalformedPayload(
            "error decoding request: expected {\"party_type\": ..., \"data\": {...}}",
            details=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e

    # Type is resolved before `data` is looked at
    entry = catalog.entry_for(submission.party_type)

    record = decode_party(entry.decoder, submission.data)

    result = validate_party(entry, record)
    if not result.ok:
        log.info("booking rejected: %s failed %d check(s)", submission.party_type, len(result.errors))
        raise ValidationFailed(
            "error validating party: " + "; ".join(e["message"] for e in result.errors),
            details=result.errors,
        )

    token = gen_booking_token()
    log.info("booking accepted: %s %s", submission.party_type, token)
    return BookingConfirmation(booking_id=token, party_type=submission.party_type)
