"""Field catalogs for the supported product families (DSX, ASK, EW)."""

from __future__ import annotations

import re

from orderkey.catalog.fields import FieldCatalog, FieldSpec, family_field, templated
from orderkey.normalize import leading_int

DIGITS_2 = re.compile(r"[0-9]{2}")
DIGITS_3 = re.compile(r"[0-9]{3}")
DIGITS_4 = re.compile(r"[0-9]{4}")
DIGITS_5 = re.compile(r"[0-9]{5}")

SLOT_LABELS = {"1": "1-schlitzig", "2": "2-schlitzig", "3": "3-schlitzig", "4": "4-schlitzig"}
SINGLE_OR_BAND_LABELS = {"N": "Einzelausführung (Standard)", "B": "Bandausführung"}


def _millimetres(raw: str) -> str:
    return f"{leading_int(raw) or 0} mm"


def _ral_after_marker(raw: str) -> str:
    # B9005 -> RAL 9005
    return f"RAL {raw[1:]}"


def _angle(raw: str) -> str:
    degrees = leading_int(raw) or 90
    return f"{degrees}°{' (Standard)' if raw == '090' else ''}"


def _leg_length(raw: str) -> str:
    if raw == "000":
        return "Standardlänge 250 mm"
    value = leading_int(raw)
    return f"{value} mm" if value is not None else raw


def _slots() -> FieldSpec:
    return FieldSpec(
        name="Ausführung",
        width=1,
        default="2",
        labels=SLOT_LABELS,
        choices=frozenset(SLOT_LABELS),
    )


def _single_or_band() -> FieldSpec:
    return FieldSpec(
        name="Einzel-/Bandausführung",
        width=1,
        default="N",
        labels=SINGLE_OR_BAND_LABELS,
        choices=frozenset(SINGLE_OR_BAND_LABELS),
    )


def _length() -> FieldSpec:
    return FieldSpec(
        name="Länge", width=5, default="01000", fallback=_millimetres, pattern=DIGITS_5
    )


def _passage() -> FieldSpec:
    return FieldSpec(
        name="Durchlass",
        width=2,
        default="21",
        labels={"21": "für DSX (Standard)"},
        pattern=DIGITS_2,
    )


DSX = FieldCatalog(
    prefix="DSX",
    label="DSX - Schlitzdurchlass",
    fields=(
        family_field("DSX", "Schlitzdurchlass DSX"),
        _slots(),
        FieldSpec(
            name="Luftführung",
            width=1,
            default="Z",
            labels={"Z": "Zuluft", "A": "Abluft (mit Luftführungselementen)"},
            choices=frozenset({"Z", "A"}),
        ),
        FieldSpec(
            name="Rahmenprofil",
            width=2,
            default="S0",
            labels={
                "S0": "Schmales Profil, unsichtbar (Standard)",
                "P0": "Rahmenprofil P0, sichtbar",
                "PB": "Rahmenprofil PB, sichtbar",
                "ELOX": "Aluminium naturfarben eloxiert",
            },
            literals=("ELOX",),
            choices=frozenset({"S0", "P0", "PB"}),
        ),
        FieldSpec(
            name="Rahmenoberfläche",
            width=4,
            default="9005",
            labels={
                "ELOX": "Aluminium naturfarben eloxiert",
                "9005": "RAL 9005 (schwarz, Standard)",
                "9010": "RAL 9010 (weiß)",
            },
            fallback=templated("RAL {}"),
            literals=("ELOX",),
            pattern=DIGITS_4,
        ),
        FieldSpec(
            name="Lamellenfarbe",
            width=5,
            default="L9005",
            labels={"L9005": "RAL 9005 (schwarz, Standard)", "L9010": "RAL 9010 (weiß)"},
            pattern=re.compile(r"L[0-9]{4}"),
        ),
        FieldSpec(
            name="Lamellenstellung",
            width=1,
            default="B",
            labels={
                "V": "Vertikal ausblasend",
                "L": "Horizontal einseitig links",
                "R": "Horizontal einseitig rechts",
                "B": "Horizontal beidseitig (Standard)",
            },
            choices=frozenset({"V", "L", "R", "B"}),
        ),
        _single_or_band(),
        _length(),
        FieldSpec(
            name="Montage",
            width=2,
            default="VM",
            labels={
                "00": "Ohne Verbindung",
                "VM": "Verdeckte Montage (Standard)",
                "KB": "Klemmbügel",
            },
            choices=frozenset({"00", "VM", "KB"}),
        ),
        FieldSpec(
            name="Endstück",
            width=2,
            default="E0",
            labels={
                "E0": "Ohne Endstück (Standard)",
                "ES": "Mit Endstück (Paar)",
                "EB": "Beidseitig angebaut",
                "EL": "Links angebaut",
                "ER": "Rechts angebaut",
            },
            choices=frozenset({"E0", "ES", "EB", "EL", "ER"}),
        ),
        FieldSpec(
            name="Befestigungswinkel/Blindstück",
            width=2,
            default="B0",
            labels={
                "B0": "Ohne (Standard)",
                "BW": "Mit Befestigungswinkel",
                "BS": "Mit Blindstück",
            },
            choices=frozenset({"B0", "BW", "BS"}),
        ),
    ),
)

ASK = FieldCatalog(
    prefix="ASK",
    label="ASK - Anschlusskasten",
    fields=(
        family_field("ASK", "Anschlusskasten für Schlitzdurchlass"),
        _passage(),
        _slots(),
        _single_or_band(),
        _length(),
        FieldSpec(
            name="Kastenmontage",
            width=2,
            default="VM",
            labels={"00": "Ohne Verbindung", "VM": "Verdeckte Montage (Standard)"},
            choices=frozenset({"00", "VM"}),
        ),
        FieldSpec(
            name="Material",
            width=2,
            default="SV",
            labels={"SV": "Stahlblech verzinkt (Standard)"},
            pattern=re.compile(r"[A-Z]{2}"),
        ),
        FieldSpec(
            name="Drosselklappe",
            width=3,
            default="DK0",
            labels={
                "DK0": "Ohne Drosselklappe (Standard)",
                "DK2": "Mit Drosselklappe und Seilzugverstellung",
            },
            choices=frozenset({"DK0", "DK2"}),
        ),
        FieldSpec(
            name="Gummilippendichtung",
            width=3,
            default="GD0",
            labels={
                "GD0": "Ohne Gummilippendichtung (Standard)",
                "GD1": "Mit Gummilippendichtung",
            },
            choices=frozenset({"GD0", "GD1"}),
        ),
        FieldSpec(
            name="Isolierung",
            width=2,
            default="I0",
            # codes are upper-cased before decoding, so Ii/Ia arrive as II/IA
            labels={
                "I0": "Ohne Isolierung (Standard)",
                "II": "Mit Isolierung innen",
                "IA": "Mit Isolierung außen",
            },
            choices=frozenset({"I0", "II", "IA"}),
        ),
        FieldSpec(
            name="Kastenhöhe",
            width=3,
            default="KHS",
            labels={"KHS": "Kastenhöhe Standard"},
            fallback=templated("{} mm"),
            choices=frozenset({"KHS"}),
            pattern=DIGITS_3,
        ),
        FieldSpec(
            name="Kastenhals",
            width=3,
            default="KVS",
            labels={"KVS": "Kastenhals Standard (45 mm)"},
            fallback=templated("Kastenhalsverlängerung {} mm"),
            choices=frozenset({"KVS"}),
            pattern=DIGITS_3,
        ),
        FieldSpec(
            name="Stutzenlage",
            width=2,
            default="S1",
            labels={
                "S0": "Stutzen von oben",
                "S1": "Stutzen seitlich (Standard)",
                "S2": "Stutzen seitlich gegenüberliegend",
            },
            choices=frozenset({"S0", "S1", "S2"}),
        ),
        FieldSpec(
            name="Stutzendurchmesser",
            width=3,
            default="SDS",
            labels={"SDS": "Stutzendurchmesser Standard"},
            fallback=templated("{} mm"),
            choices=frozenset({"SDS"}),
            pattern=DIGITS_3,
        ),
        FieldSpec(
            name="Abhängung",
            width=2,
            default="E0",
            labels={"E0": "Ohne Einnietmutter (Standard)", "EM": "Mit Einnietmutter"},
            choices=frozenset({"E0", "EM"}),
        ),
    ),
)

EW = FieldCatalog(
    prefix="EW",
    label="EW - Eckwinkel",
    fields=(
        family_field("EW", "Eckwinkel für Schlitzdurchlass"),
        _passage(),
        _slots(),
        FieldSpec(
            name="Rahmenprofil",
            width=2,
            default="S0",
            labels={
                "S0": "Schmales Rahmenprofil (Standard)",
                "P0": "Rahmenprofil P0",
                "PB": "Rahmenprofil PB",
                "ELOX": "Aluminium naturfarben eloxiert",
            },
            literals=("ELOX",),
            choices=frozenset({"S0", "P0", "PB"}),
        ),
        FieldSpec(
            name="Rahmenoberfläche",
            width=4,
            default="ELOX",
            labels={
                "ELOX": "Aluminium naturfarben eloxiert (Standard)",
                "9005": "RAL 9005 (schwarz)",
                "9010": "RAL 9010 (weiß)",
            },
            fallback=templated("RAL {}"),
            literals=("ELOX",),
            pattern=DIGITS_4,
        ),
        FieldSpec(
            name="Farbe Blindprofil/Luftführungselemente",
            width=5,
            default="B9005",
            labels={"B9005": "RAL 9005 schwarz (Standard)", "B9010": "RAL 9010 weiß"},
            fallback=_ral_after_marker,
            pattern=re.compile(r"B[0-9]{4}"),
        ),
        FieldSpec(
            name="Winkel zwischen den Schenkeln",
            width=3,
            default="090",
            fallback=_angle,
            pattern=DIGITS_3,
        ),
        FieldSpec(
            name="Schenkellaenge links (a)",
            width=3,
            default="000",
            fallback=_leg_length,
            pattern=DIGITS_3,
        ),
        FieldSpec(
            name="Schenkellaenge rechts (b)",
            width=3,
            default="000",
            fallback=_leg_length,
            pattern=DIGITS_3,
        ),
    ),
)

# router order: longest prefix first
FAMILIES: tuple[FieldCatalog, ...] = tuple(
    sorted((DSX, ASK, EW), key=lambda catalog: len(catalog.prefix), reverse=True)
)


def supported_prefixes() -> list[str]:
    return [catalog.prefix for catalog in (DSX, ASK, EW)]


def find_catalog(code: str) -> FieldCatalog | None:
    """Select the catalog whose family literal starts ``code`` (already normalized)."""
    for catalog in FAMILIES:
        if code.startswith(catalog.prefix):
            return catalog
    return None
