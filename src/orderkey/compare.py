"""Compare two order codes after normalization."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

from orderkey.catalog.families import find_catalog
from orderkey.config import DEFAULT_CONFIG, DecoderConfig
from orderkey.decoder import decode_code
from orderkey.errors import MissingInputError, OrderKeyError
from orderkey.normalize import normalize_code

logger = logging.getLogger(__name__)

MISSING_CHAR = "(fehlt)"


@dataclass(frozen=True)
class Difference:
    kind: Literal["family", "length", "position"]
    left: str
    right: str
    position: int | None = None

    @property
    def message(self) -> str:
        if self.kind == "family":
            return f"Unterschiedliche Produkttypen: {self.left} vs {self.right}"
        if self.kind == "length":
            return f"Unterschiedliche Längen: {self.left} vs {self.right} Zeichen"
        return f"Position {self.position}: '{self.left}' vs '{self.right}'"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class CompareResult:
    identical: bool
    formatted_code: str | None = None
    formatted_code1: str | None = None
    formatted_code2: str | None = None
    differences: tuple[Difference, ...] = field(default_factory=tuple)


def _formatted_or_none(code: str, config: DecoderConfig) -> str | None:
    try:
        return decode_code(code, config).formatted_code
    except OrderKeyError as exc:
        logger.debug("Cannot decode %r for comparison: %s", code, exc)
        return None


def _family_tag(code: str) -> str:
    catalog = find_catalog(code)
    return catalog.prefix if catalog else code[:3]


def iter_differences(clean1: str, clean2: str) -> Iterator[Difference]:
    """Yield family, length and per-position mismatches in report order."""
    tag1, tag2 = _family_tag(clean1), _family_tag(clean2)
    if tag1 != tag2:
        yield Difference(kind="family", left=tag1, right=tag2)
    if len(clean1) != len(clean2):
        yield Difference(kind="length", left=str(len(clean1)), right=str(len(clean2)))
    for pos in range(max(len(clean1), len(clean2))):
        left = clean1[pos] if pos < len(clean1) else MISSING_CHAR
        right = clean2[pos] if pos < len(clean2) else MISSING_CHAR
        if left != right:
            yield Difference(kind="position", left=left, right=right, position=pos + 1)


def compare(code1: str, code2: str, config: DecoderConfig | None = None) -> CompareResult:
    cfg = config or DEFAULT_CONFIG
    clean1 = normalize_code(code1 or "")
    clean2 = normalize_code(code2 or "")
    if not clean1 or not clean2:
        raise MissingInputError("Beide Codes sind erforderlich")

    if clean1 == clean2:
        return CompareResult(
            identical=True,
            formatted_code=_formatted_or_none(clean1, cfg) or clean1,
        )

    differences: list[Difference] = []
    for diff in iter_differences(clean1, clean2):
        if len(differences) >= cfg.max_differences:
            break
        differences.append(diff)
    return CompareResult(
        identical=False,
        formatted_code1=_formatted_or_none(clean1, cfg),
        formatted_code2=_formatted_or_none(clean2, cfg),
        differences=tuple(differences),
    )
