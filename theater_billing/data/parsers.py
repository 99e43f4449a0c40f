"""
Parsers for the plays and invoices JSON documents.

Expected formats:

    plays:    {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}
    invoices: [{"customer": "BigCo",
                "performances": [{"playID": "hamlet", "audience": 55}, ...]}]

Audience validation happens here, at the boundary, so the pricing core can
assume non-negative integer seat counts.
"""

from typing import Any, Union

import orjson

from ..errors import MalformedInputError
from .models import Invoice, Performance, Play


def parse_json_payload(raw_data: Union[str, bytes]) -> Any:
    """
    Parse raw JSON text with orjson.

    Raises:
        MalformedInputError: If the text is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}", raw_data=str(raw_data)[:200]) from e


def parse_plays(raw_data: Union[str, bytes]) -> dict[str, Play]:
    """Parse a plays document into a catalog keyed by play ID."""
    payload = parse_json_payload(raw_data)

    if not isinstance(payload, dict):
        raise MalformedInputError("Plays document must be an object keyed by play ID")

    catalog = {}
    for play_id, play_data in payload.items():
        if not isinstance(play_data, dict):
            raise MalformedInputError(f"Play '{play_id}' must be an object", field=play_id)
        catalog[play_id] = Play(
            name=_require_str(play_data, "name", f"{play_id}.name"),
            type=_require_str(play_data, "type", f"{play_id}.type"),
        )
    return catalog


def parse_invoices(raw_data: Union[str, bytes]) -> list[Invoice]:
    """Parse an invoices document (a list of invoices, or a single invoice)."""
    payload = parse_json_payload(raw_data)

    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise MalformedInputError("Invoices document must be a list of invoices")

    return [_parse_invoice(invoice_data, i) for i, invoice_data in enumerate(payload)]


def _parse_invoice(invoice_data: Any, index: int) -> Invoice:
    location = f"invoices[{index}]"
    if not isinstance(invoice_data, dict):
        raise MalformedInputError(f"{location} must be an object", field=location)

    customer = _require_str(invoice_data, "customer", f"{location}.customer")

    performances_data = invoice_data.get("performances")
    if not isinstance(performances_data, list):
        raise MalformedInputError(
            f"{location}.performances must be a list", field=f"{location}.performances"
        )

    performances = [
        _parse_performance(perf_data, f"{location}.performances[{i}]")
        for i, perf_data in enumerate(performances_data)
    ]
    return Invoice(customer=customer, performances=tuple(performances))


def _parse_performance(perf_data: Any, location: str) -> Performance:
    if not isinstance(perf_data, dict):
        raise MalformedInputError(f"{location} must be an object", field=location)

    play_id = _require_str(perf_data, "playID", f"{location}.playID")

    audience = perf_data.get("audience")
    if not isinstance(audience, int) or isinstance(audience, bool):
        raise MalformedInputError(
            f"{location}.audience must be an integer, got {audience!r}",
            field=f"{location}.audience"
        )
    if audience < 0:
        raise MalformedInputError(
            f"{location}.audience must be non-negative, got {audience}",
            field=f"{location}.audience"
        )

    return Performance(play_id=play_id, audience=audience)


def _require_str(data: dict[str, Any], key: str, location: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MalformedInputError(f"Missing or non-string '{location}'", field=location)
    return value
