"""
Response parsing helpers for the shifts API.

Collection endpoints answer with an envelope such as::

    {"data": [{...}, {...}], "links": {"next": "..."}}

Only the collection under ``data`` is meaningful to callers; the envelope
is a property of the wire format and is stripped here.
"""

from typing import Any, Dict, List

from .models import ShiftsApiDecodeError

ENVELOPE_FIELD = "data"


def unwrap_collection(payload: Any, field: str = ENVELOPE_FIELD) -> List[Dict[str, Any]]:
    """
    Extract the record list nested under ``field`` in a response body.

    Args:
        payload: Decoded JSON body
        field: Envelope field that holds the collection

    Returns:
        The list of record dicts

    Raises:
        ShiftsApiDecodeError: If the body is not an object, the field is
            missing, or the field does not hold a list of objects
    """
    if not isinstance(payload, dict):
        raise ShiftsApiDecodeError(
            f"Expected a JSON object envelope, got {type(payload).__name__}"
        )

    if field not in payload:
        raise ShiftsApiDecodeError(
            f"Response envelope is missing the '{field}' field "
            f"(keys: {sorted(payload.keys())})"
        )

    records = payload[field]
    if not isinstance(records, list):
        raise ShiftsApiDecodeError(
            f"Envelope field '{field}' must be a list, got {type(records).__name__}"
        )

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ShiftsApiDecodeError(
                f"Record {index} in '{field}' is {type(record).__name__}, expected object"
            )

    return records
