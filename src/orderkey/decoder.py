"""Positional decoder for order codes.

One generic cursor walk over a ``FieldCatalog`` replaces per-family parsing:
literal prefixes first, then the nominal width, with defaults filled in for
fields the input no longer covers. Strictness is taken from ``DecoderConfig``
so every family decodes under the same policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from orderkey.catalog.families import find_catalog, supported_prefixes
from orderkey.catalog.fields import FieldCatalog, FieldSpec
from orderkey.config import DEFAULT_CONFIG, DecoderConfig
from orderkey.errors import (
    IncompleteCodeError,
    MissingInputError,
    UnknownFamilyError,
    WrongFamilyError,
)
from orderkey.normalize import SEPARATOR, normalize_code

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedField:
    index: int
    name: str
    value: str
    description: str
    is_defaulted: bool = False


@dataclass(frozen=True)
class DecodeResult:
    family: str
    label: str
    fields: tuple[DecodedField, ...]
    remainder: str = ""

    @property
    def formatted_code(self) -> str:
        return SEPARATOR.join(f.value for f in self.fields)

    @property
    def any_defaulted(self) -> bool:
        return any(f.is_defaulted for f in self.fields)

    @property
    def defaulted_names(self) -> list[str]:
        return [f.name for f in self.fields if f.is_defaulted]


def _read_field(
    spec: FieldSpec, code: str, cursor: int, config: DecoderConfig
) -> tuple[str, bool, int]:
    """Return (value, defaulted, new cursor) for one spec starting at ``cursor``."""
    total = len(code)
    if cursor >= total:
        if not config.fill_defaults:
            raise IncompleteCodeError(spec.name, cursor + 1)
        return spec.default, True, cursor

    literal = spec.match_literal(code, cursor)
    if literal is not None:
        return literal, False, cursor + len(literal)

    end = min(cursor + spec.width, total)
    raw = code[cursor:end]
    if end - cursor < spec.width and not config.fill_defaults:
        raise IncompleteCodeError(spec.name, cursor + 1)
    if config.strict and not spec.accepts(raw):
        logger.debug("Field %s rejected %r at position %d", spec.name, raw, cursor + 1)
        # stall keeps the cursor so the next field reads the same offset
        return spec.default, True, end if config.on_invalid == "skip" else cursor
    return raw, False, end


def decode(
    catalog: FieldCatalog, code: str, config: DecoderConfig | None = None
) -> DecodeResult:
    """Split an already normalized code into the fields of ``catalog``."""
    cfg = config or DEFAULT_CONFIG
    if not code.startswith(catalog.prefix):
        raise WrongFamilyError(catalog.prefix)

    cursor = 0
    decoded: list[DecodedField] = []
    for index, spec in enumerate(catalog.fields, start=1):
        value, defaulted, cursor = _read_field(spec, code, cursor, cfg)
        if defaulted:
            logger.debug("Field %s filled with default %r", spec.name, value)
        decoded.append(
            DecodedField(
                index=index,
                name=spec.name,
                value=value,
                description=spec.describe(value),
                is_defaulted=defaulted,
            )
        )

    remainder = code[cursor:]
    if remainder:
        logger.debug("Ignoring %d trailing characters %r", len(remainder), remainder)
    return DecodeResult(
        family=catalog.prefix,
        label=catalog.label,
        fields=tuple(decoded),
        remainder=remainder,
    )


def decode_code(raw: str, config: DecoderConfig | None = None) -> DecodeResult:
    """Normalize ``raw``, pick its family catalog and decode it."""
    code = normalize_code(raw or "")
    if not code:
        raise MissingInputError()
    catalog = find_catalog(code)
    if catalog is None:
        raise UnknownFamilyError(code, supported_prefixes())
    logger.debug("Decoding %s as %s", code, catalog.label)
    return decode(catalog, code, config)
