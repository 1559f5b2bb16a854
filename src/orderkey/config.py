from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Literal

import yaml

from orderkey.errors import ConfigError

VALIDATION_MODES = ("lenient", "strict")
INVALID_MODES = ("stall", "skip")
MAX_DIFFERENCES = 10


@dataclass(frozen=True)
class DecoderConfig:
    """Decoding policy shared by every product family.

    validation: ``lenient`` takes each field by width; ``strict`` checks it
        against the field's choices/pattern and substitutes the default on
        mismatch.
    on_invalid: under strict validation, ``stall`` keeps the cursor on the
        rejected field, ``skip`` moves past its nominal width.
    fill_defaults: complete truncated codes with default values instead of
        raising ``IncompleteCodeError``.
    """

    validation: Literal["lenient", "strict"] = "lenient"
    on_invalid: Literal["stall", "skip"] = "stall"
    fill_defaults: bool = True
    max_differences: int = MAX_DIFFERENCES

    def __post_init__(self) -> None:
        if self.validation not in VALIDATION_MODES:
            raise ConfigError(
                f"Unsupported validation '{self.validation}'. Choose from {VALIDATION_MODES}."
            )
        if self.on_invalid not in INVALID_MODES:
            raise ConfigError(
                f"Unsupported on_invalid '{self.on_invalid}'. Choose from {INVALID_MODES}."
            )
        if self.max_differences < 1:
            raise ConfigError(f"max_differences must be positive, got {self.max_differences}")

    @property
    def strict(self) -> bool:
        return self.validation == "strict"

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> DecoderConfig:
        unknown = set(payload) - set(DecoderConfig.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        try:
            max_differences = int(payload.get("max_differences", MAX_DIFFERENCES))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"max_differences must be an integer: {exc}") from exc
        fill_defaults = payload.get("fill_defaults", True)
        if not isinstance(fill_defaults, bool):
            raise ConfigError(f"fill_defaults must be true or false, got {fill_defaults!r}")
        return DecoderConfig(
            validation=str(payload.get("validation", "lenient")).lower(),  # type: ignore[arg-type]
            on_invalid=str(payload.get("on_invalid", "stall")).lower(),  # type: ignore[arg-type]
            fill_defaults=fill_defaults,
            max_differences=max_differences,
        )

    def to_mapping(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = DecoderConfig()


def load_config(path: Path) -> DecoderConfig:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        if path.suffix.lower() in {".yml", ".yaml"}:
            payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        else:
            payload = json.loads(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse config {path}: {exc}") from exc
    if payload is None:
        return DEFAULT_CONFIG
    if not isinstance(payload, dict):
        raise ConfigError(f"Config {path} must contain a mapping")
    return DecoderConfig.from_mapping(payload)
