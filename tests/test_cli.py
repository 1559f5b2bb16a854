import json
from pathlib import Path

from typer.testing import CliRunner

from orderkey.cli import app

runner = CliRunner()


def test_decode_json_output():
    result = runner.invoke(app, ["decode", "DSX2Z", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["formatted_code"] == "DSX-2-Z-S0-9005-L9005-B-N-01000-VM-E0-B0"
    assert payload["hasStandardValues"] is True


def test_decode_table_output_lists_fields():
    result = runner.invoke(app, ["decode", "EW-21-2-S0-ELOX-B9005-090-000-000"])
    assert result.exit_code == 0
    assert "Eckwinkel" in result.stdout
    assert "ELOX" in result.stdout


def test_decode_writes_output_file(tmp_path: Path):
    out = tmp_path / "decoded.json"
    result = runner.invoke(app, ["decode", "ASK", "--output", str(out)])
    assert result.exit_code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert len(payload["components"]) == 15


def test_decode_unknown_family_exits_with_error():
    result = runner.invoke(app, ["decode", "XYZ123"])
    assert result.exit_code == 1
    assert "Unbekannter Produkttyp" in result.stdout


def test_decode_with_strict_config(tmp_path: Path):
    cfg = tmp_path / "policy.yaml"
    cfg.write_text("validation: strict\non_invalid: skip\n", encoding="utf-8")
    result = runner.invoke(app, ["decode", "DSX9Z", "--config", str(cfg), "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["components"][1]["isStandard"] is True
    assert payload["components"][2]["value"] == "Z"


def test_decode_with_missing_config_is_usage_error(tmp_path: Path):
    result = runner.invoke(app, ["decode", "DSX", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 2


def test_compare_identical():
    result = runner.invoke(
        app, ["compare", "DSX-2-Z-S0-9010-L9005-B-N-01000-VM-ES-B0", "dsx2zs09010l9005bn01000vmesb0"]
    )
    assert result.exit_code == 0
    assert "Identisch" in result.stdout


def test_compare_json_differences():
    result = runner.invoke(app, ["compare", "DSX2Z", "DSX2", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["identical"] is False
    assert payload["differences"] == [
        "Unterschiedliche Längen: 5 vs 4 Zeichen",
        "Position 5: 'Z' vs '(fehlt)'",
    ]


def test_families_lists_all_catalogs():
    result = runner.invoke(app, ["families"])
    assert result.exit_code == 0
    for label in ("Schlitzdurchlass", "Anschlusskasten", "Eckwinkel"):
        assert label in result.stdout


def test_verbose_logs_defaulted_fields():
    result = runner.invoke(app, ["-v", "decode", "DSX", "--json"])
    assert result.exit_code == 0
    assert "filled with default" in result.output
    quiet = runner.invoke(app, ["decode", "DSX", "--json"])
    assert "filled with default" not in quiet.output
