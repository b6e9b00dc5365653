from datetime import date

from sanger_rename.domain.models import (
    CommitReport,
    DecomposedFilename,
    LabelKind,
    RenameOutcome,
)
from sanger_rename.domain.vendors import Vendor


def test_from_path_extracts_labels() -> None:
    entry = DecomposedFilename.from_path("0001_31225060307072_(TXPCR)_[SP1].ab1", Vendor.SANGON)
    assert entry.template_name == "TXPCR"
    assert entry.primer_name == "SP1"
    assert entry.vendor_id == "31225060307072"
    assert entry.capture_date is None
    assert entry.renamed is False


def test_path_parts() -> None:
    entry = DecomposedFilename.from_path("/path/to/file/K528-1.C1.34781340.B08.ab1", Vendor.RUIBIO)
    assert entry.file_name == "K528-1.C1.34781340.B08.ab1"
    assert entry.stem == "K528-1.C1.34781340.B08"
    assert entry.extension == "ab1"


def test_set_vendor_redecomposes_and_drops_overrides() -> None:
    entry = DecomposedFilename.from_path("0001_31225060307072_(TXPCR)_[SP1].ab1", Vendor.SANGON)
    entry.set_label(LabelKind.PRIMER, "M13F")

    entry.set_vendor(Vendor.RUIBIO)

    assert entry.vendor is Vendor.RUIBIO
    assert entry.template_name == ""
    assert entry.primer_name == ""

    entry.set_vendor(Vendor.SANGON)
    assert entry.primer_name == "SP1"


def test_label_accessors() -> None:
    entry = DecomposedFilename.from_path("TL1-T25_A01.ab1", Vendor.GENEWIZ)
    assert entry.label(LabelKind.PRIMER) == "T25"
    assert entry.label(LabelKind.TEMPLATE) == "TL1"
    entry.set_label(LabelKind.TEMPLATE, "pUC19")
    assert entry.template_name == "pUC19"


def test_set_date() -> None:
    entry = DecomposedFilename.from_path("TL1-T25_A01.ab1", Vendor.GENEWIZ)
    entry.set_date(date(2025, 6, 1))
    assert entry.capture_date == date(2025, 6, 1)


def test_commit_report_counts() -> None:
    report = CommitReport(
        outcomes=[
            RenameOutcome(full_path="a", target_path="b", ok=True),
            RenameOutcome(full_path="c", target_path="", ok=False, error="boom"),
        ]
    )
    assert report.succeeded == 1
    assert report.failed == 1
    assert [outcome.full_path for outcome in report.failures] == ["c"]
