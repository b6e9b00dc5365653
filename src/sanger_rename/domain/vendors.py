from __future__ import annotations

from datetime import date
from enum import Enum
from pathlib import Path
from typing import NamedTuple


class Vendor(str, Enum):
    """Sequencing vendors with a known result filename convention."""

    SANGON = "Sangon"
    RUIBIO = "Ruibio"
    GENEWIZ = "Genewiz"

    def __str__(self) -> str:
        return self.value


class Decomposition(NamedTuple):
    template_name: str
    primer_name: str
    vendor_id: str


def parse_vendor(value: str) -> Vendor:
    """Parse a vendor name into a Vendor enum (case-insensitive)."""

    normalized = value.strip().lower()
    for vendor in Vendor:
        if vendor.value.lower() == normalized:
            return vendor
    raise ValueError(f"Unknown vendor: {value}")


def file_stem(raw_filename: str) -> str:
    return Path(raw_filename).stem


def decompose(raw_filename: str, vendor: Vendor) -> Decomposition:
    """
    Split a vendor-formatted filename into template, primer and vendor id.

    Missing delimiters give an empty field instead of an error.

    Examples:
        >>> decompose("0001_31225060307072_(TXPCR)_[SP1].ab1", Vendor.SANGON)
        Decomposition(template_name='TXPCR', primer_name='SP1', vendor_id='31225060307072')
        >>> decompose("k1-2-C1_R_G04.ab1", Vendor.GENEWIZ)
        Decomposition(template_name='k1-2', primer_name='C1_R', vendor_id='G04')
    """
    if vendor is Vendor.SANGON:
        return _decompose_sangon(raw_filename)
    if vendor is Vendor.RUIBIO:
        return _decompose_ruibio(raw_filename)
    if vendor is Vendor.GENEWIZ:
        return _decompose_genewiz(raw_filename)
    raise ValueError(f"Unknown vendor: {vendor}")


def format_standardized(capture_date: date, template_name: str, primer_name: str) -> str:
    """
    Build the standardized name without its extension.

    Example:
        >>> format_standardized(date(2025, 12, 6), "K528-1", "C1")
        '251206.K528-1.C1'
    """
    date_str = f"{capture_date.year % 100:02d}{capture_date.month:02d}{capture_date.day:02d}"
    return f"{date_str}.{template_name}.{primer_name}"


def _between(text: str, opening: str, closing: str) -> str:
    start = text.find(opening)
    end = text.find(closing)
    if start == -1 or end == -1 or end <= start:
        return ""
    return text[start + 1 : end]


def _decompose_sangon(raw_filename: str) -> Decomposition:
    # 0001_31225060307072_(TXPCR)_[SP1]
    stem = file_stem(raw_filename)
    template_name = _between(raw_filename, "(", ")")
    primer_name = _between(stem, "[", "]")
    parts = stem.split("_")
    vendor_id = parts[1] if len(parts) >= 2 else ""
    return Decomposition(template_name, primer_name, vendor_id)


def _decompose_ruibio(raw_filename: str) -> Decomposition:
    # K528-1.C1.34781340.B08
    stem = file_stem(raw_filename)
    template_name, dot, _ = stem.partition(".")
    if not dot:
        template_name = ""
    parts = stem.split(".")
    primer_name = parts[1] if len(parts) >= 2 else ""
    vendor_id = f"{parts[-2]}.{parts[-1]}" if len(parts) >= 3 else ""
    return Decomposition(template_name, primer_name, vendor_id)


def _decompose_genewiz(raw_filename: str) -> Decomposition:
    # TL1-T25_A01, k1-2-C1_R_G04
    stem = file_stem(raw_filename)
    underscore_pos = stem.rfind("_")
    if underscore_pos == -1:
        return Decomposition("", "", "")
    vendor_id = stem[underscore_pos + 1 :]
    dash_pos = stem.rfind("-", 0, underscore_pos)
    if dash_pos == -1:
        return Decomposition("", "", vendor_id)
    return Decomposition(stem[:dash_pos], stem[dash_pos + 1 : underscore_pos], vendor_id)
