import orjson

from orderkey.config import DecoderConfig
from orderkey.service import compare_request, decode_request


def test_decode_request_payload_shape():
    payload = decode_request("DSX2Z")
    assert payload["formatted_code"] == "DSX-2-Z-S0-9005-L9005-B-N-01000-VM-E0-B0"
    assert payload["productType"] == "DSX - Schlitzdurchlass"
    assert payload["hasStandardValues"] is True
    first, second, fourth = payload["components"][0], payload["components"][1], payload["components"][3]
    assert first == {
        "index": "01",
        "name": "Typ",
        "value": "DSX",
        "description": "Schlitzdurchlass DSX",
        "isStandard": False,
    }
    assert second["isStandard"] is False
    assert fourth["isStandard"] is True
    assert payload["components"][-1]["index"] == "12"
    assert orjson.loads(orjson.dumps(payload)) == payload


def test_decode_request_errors():
    assert decode_request("") == {"error": "Code ist erforderlich"}
    assert decode_request(None) == {"error": "Code ist erforderlich"}
    assert decode_request("XYZ123")["error"] == "Unbekannter Produkttyp. Unterstützt: DSX, ASK, EW"
    incomplete = decode_request("ASK21", DecoderConfig(fill_defaults=False))
    assert incomplete["error"].startswith("Unvollständiger Code")


def test_compare_request_identical():
    payload = compare_request("DSX-2-Z-S0-9010-L9005-B-N-01000-VM-ES-B0", "dsx2zs09010l9005bn01000vmesb0")
    assert payload == {"identical": True, "formatted_code": "DSX-2-Z-S0-9010-L9005-B-N-01000-VM-ES-B0"}


def test_compare_request_differences_are_messages():
    payload = compare_request("DSX2Z", "XYZ")
    assert payload["identical"] is False
    assert payload["formatted_code2"] is None
    assert payload["differences"][0] == "Unterschiedliche Produkttypen: DSX vs XYZ"
    assert all(isinstance(item, str) for item in payload["differences"])


def test_compare_request_requires_both_codes():
    assert compare_request("DSX2Z", None) == {"error": "Beide Codes sind erforderlich"}
