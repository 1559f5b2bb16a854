"""Declarative field layout for positional order codes.

A catalog is an ordered tuple of ``FieldSpec`` entries. Each spec carries:
- a nominal width, optionally overridden by literal prefixes (``ELOX`` in a
  two-character profile slot)
- an optional finite choice set and/or a regex shape used by strict validation
- the default value substituted for missing or rejected content
- an immutable label table plus a fallback formatter for descriptions
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

Describer = Callable[[str], str]


def as_is(raw: str) -> str:
    return raw


def templated(template: str) -> Describer:
    """Fallback that embeds the raw value, e.g. ``templated("RAL {}")``."""

    def _describe(raw: str) -> str:
        return template.format(raw)

    return _describe


def constant(text: str) -> Describer:
    def _describe(_raw: str) -> str:
        return text

    return _describe


@dataclass(frozen=True)
class FieldSpec:
    name: str
    width: int
    default: str = ""
    labels: Mapping[str, str] = field(default_factory=dict, hash=False)
    fallback: Describer = as_is
    literals: tuple[str, ...] = ()
    choices: frozenset[str] | None = None
    pattern: re.Pattern[str] | None = None

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Field {self.name!r} needs a positive width, got {self.width}")
        # longest literal wins when several share a prefix
        ordered = tuple(sorted(self.literals, key=len, reverse=True))
        object.__setattr__(self, "literals", ordered)
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def match_literal(self, code: str, cursor: int) -> str | None:
        for literal in self.literals:
            if code.startswith(literal, cursor):
                return literal
        return None

    def accepts(self, value: str) -> bool:
        if value in self.literals:
            return True
        if self.choices is None and self.pattern is None:
            return True
        if self.choices is not None and value in self.choices:
            return True
        return self.pattern is not None and self.pattern.fullmatch(value) is not None

    def describe(self, value: str) -> str:
        label = self.labels.get(value)
        if label is not None:
            return label
        return self.fallback(value)


@dataclass(frozen=True)
class FieldCatalog:
    prefix: str
    label: str
    fields: tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        if not self.fields or self.fields[0].literals != (self.prefix,):
            raise ValueError(f"Catalog {self.prefix!r} must start with its family literal")

    @property
    def nominal_width(self) -> int:
        return sum(spec.width for spec in self.fields)


def family_field(prefix: str, description: str) -> FieldSpec:
    """Leading spec holding the family literal itself."""
    return FieldSpec(
        name="Typ",
        width=len(prefix),
        default=prefix,
        labels={prefix: description},
        fallback=constant(description),
        literals=(prefix,),
    )
