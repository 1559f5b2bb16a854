"""Request/response operations returning JSON-ready payloads.

Payload keys follow the decoder's public API (``formatted_code``,
``components``, ``hasStandardValues``, ``productType``); hard failures are
reported as ``{"error": reason}`` instead of raising.
"""

from __future__ import annotations

from typing import Any

from orderkey.compare import CompareResult, compare
from orderkey.config import DecoderConfig
from orderkey.decoder import DecodedField, DecodeResult, decode_code
from orderkey.errors import OrderKeyError


def field_payload(item: DecodedField) -> dict[str, Any]:
    return {
        "index": f"{item.index:02d}",
        "name": item.name,
        "value": item.value,
        "description": item.description,
        "isStandard": item.is_defaulted,
    }


def decode_payload(result: DecodeResult) -> dict[str, Any]:
    return {
        "formatted_code": result.formatted_code,
        "components": [field_payload(item) for item in result.fields],
        "hasStandardValues": result.any_defaulted,
        "productType": result.label,
    }


def compare_payload(result: CompareResult) -> dict[str, Any]:
    if result.identical:
        return {"identical": True, "formatted_code": result.formatted_code}
    return {
        "identical": False,
        "formatted_code1": result.formatted_code1,
        "formatted_code2": result.formatted_code2,
        "differences": [diff.message for diff in result.differences],
    }


def decode_request(code: str | None, config: DecoderConfig | None = None) -> dict[str, Any]:
    try:
        result = decode_code(code or "", config)
    except OrderKeyError as exc:
        return {"error": str(exc)}
    return decode_payload(result)


def compare_request(
    code1: str | None, code2: str | None, config: DecoderConfig | None = None
) -> dict[str, Any]:
    try:
        result = compare(code1 or "", code2 or "", config)
    except OrderKeyError as exc:
        return {"error": str(exc)}
    return compare_payload(result)
