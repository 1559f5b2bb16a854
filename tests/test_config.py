from pathlib import Path

import pytest

from orderkey.config import DEFAULT_CONFIG, DecoderConfig, load_config
from orderkey.errors import ConfigError


def test_defaults_fill_and_stay_lenient():
    assert DEFAULT_CONFIG.validation == "lenient"
    assert DEFAULT_CONFIG.on_invalid == "stall"
    assert DEFAULT_CONFIG.fill_defaults is True
    assert DEFAULT_CONFIG.max_differences == 10
    assert not DEFAULT_CONFIG.strict


def test_from_mapping_normalizes_case():
    cfg = DecoderConfig.from_mapping({"validation": "STRICT", "on_invalid": "Skip"})
    assert cfg.strict
    assert cfg.on_invalid == "skip"
    assert cfg.to_mapping()["validation"] == "strict"


@pytest.mark.parametrize(
    "payload",
    [
        {"validation": "paranoid"},
        {"on_invalid": "explode"},
        {"max_differences": 0},
        {"max_differences": "many"},
        {"fill_defaults": "false"},
        {"fill_defaults": "no"},
        {"fill_defaults": 0},
        {"unknown": True},
    ],
)
def test_from_mapping_rejects_bad_values(payload):
    with pytest.raises(ConfigError):
        DecoderConfig.from_mapping(payload)


def test_load_yaml_config(tmp_path: Path):
    path = tmp_path / "policy.yaml"
    path.write_text("validation: strict\nfill_defaults: false\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.strict
    assert cfg.fill_defaults is False


def test_load_json_config(tmp_path: Path):
    path = tmp_path / "policy.json"
    path.write_text('{"on_invalid": "skip", "max_differences": 5}', encoding="utf-8")
    cfg = load_config(path)
    assert cfg.on_invalid == "skip"
    assert cfg.max_differences == 5


def test_quoted_boolean_in_json_is_rejected(tmp_path: Path):
    path = tmp_path / "policy.json"
    path.write_text('{"fill_defaults": "false"}', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_empty_yaml_uses_defaults(tmp_path: Path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


def test_load_config_errors(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(broken)
    listing = tmp_path / "list.yaml"
    listing.write_text("- strict\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(listing)
