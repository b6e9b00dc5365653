from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path

from .vendors import Vendor, decompose


class LabelKind(str, Enum):
    PRIMER = "primer"
    TEMPLATE = "template"

    @property
    def attribute(self) -> str:
        return f"{self.value}_name"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass
class DecomposedFilename:
    full_path: str
    vendor: Vendor
    template_name: str = ""
    primer_name: str = ""
    capture_date: date | None = None
    renamed: bool = False

    @classmethod
    def from_path(cls, full_path: str, vendor: Vendor) -> DecomposedFilename:
        parts = decompose(full_path, vendor)
        return cls(
            full_path=full_path,
            vendor=vendor,
            template_name=parts.template_name,
            primer_name=parts.primer_name,
        )

    @property
    def file_name(self) -> str:
        return Path(self.full_path).name

    @property
    def stem(self) -> str:
        return Path(self.full_path).stem

    @property
    def extension(self) -> str:
        return Path(self.full_path).suffix.lstrip(".")

    @property
    def vendor_id(self) -> str:
        return decompose(self.full_path, self.vendor).vendor_id

    def set_vendor(self, vendor: Vendor) -> None:
        """Switch vendor, dropping any overridden labels."""

        parts = decompose(self.full_path, vendor)
        self.vendor = vendor
        self.template_name = parts.template_name
        self.primer_name = parts.primer_name

    def label(self, kind: LabelKind) -> str:
        return getattr(self, kind.attribute)

    def set_label(self, kind: LabelKind, value: str) -> None:
        setattr(self, kind.attribute, value)

    def set_date(self, capture_date: date) -> None:
        self.capture_date = capture_date


@dataclass
class PreviewRow:
    original_name: str
    standardized_name: str


@dataclass
class RenameOutcome:
    full_path: str
    target_path: str
    ok: bool
    error: str | None = None


@dataclass
class CommitReport:
    outcomes: list[RenameOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def failures(self) -> list[RenameOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]
