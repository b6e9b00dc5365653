import os
from datetime import date
from pathlib import Path
from unittest.mock import Mock

import pytest

from sanger_rename.adapters.local_filesystem import LocalFileSystemAdapter
from sanger_rename.domain.models import LabelKind
from sanger_rename.domain.registry import FilenameRegistry
from sanger_rename.domain.vendors import Vendor
from sanger_rename.services.rename_service import RenameService

SANGON_NAMES = [
    "0001_31225060307072_(TXPCR)_[SP1].ab1",
    "0002_31225060307073_(TXPCR)_[SP2].ab1",
    "0003_31225060307074_(GAPDH)_[SP1].ab1",
]


def _write_files(directory: Path, names: list[str]) -> list[str]:
    paths = []
    for name in names:
        path = directory / name
        path.write_bytes(b"ABIF")
        paths.append(str(path))
    return paths


def test_apply_rename_moves_files_in_place(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, SANGON_NAMES)
    registry = FilenameRegistry()
    registry.load(paths, Vendor.SANGON)
    registry.stamp_date(date(2025, 6, 1))

    report = RenameService(LocalFileSystemAdapter()).apply_rename(registry, today=date(2030, 1, 1))

    assert report.succeeded == 3
    assert report.failed == 0
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "250601.GAPDH.SP1.ab1",
        "250601.TXPCR.SP1.ab1",
        "250601.TXPCR.SP2.ab1",
    ]
    assert all(entry.renamed for entry in registry)
    assert [entry.full_path for entry in registry] == paths


def test_apply_rename_uses_today_when_no_date(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, ["K528-1.C1.34781340.B08.ab1"])
    registry = FilenameRegistry()
    registry.load(paths, Vendor.RUIBIO)

    report = RenameService(LocalFileSystemAdapter()).apply_rename(registry, today=date(2025, 12, 6))

    assert report.outcomes[0].target_path == str(tmp_path / "251206.K528-1.C1.ab1")
    assert (tmp_path / "251206.K528-1.C1.ab1").exists()


def test_apply_rename_continues_after_failure() -> None:
    registry = FilenameRegistry()
    registry.load(["/x/TL1-T25_A01.ab1", "/x/TL2-T25_A02.ab1", "/x/TL3-T25_A03.ab1"], Vendor.GENEWIZ)
    filesystem = Mock()
    filesystem.rename_file.side_effect = [None, PermissionError("denied"), None]

    report = RenameService(filesystem).apply_rename(registry, today=date(2025, 6, 1))

    assert filesystem.rename_file.call_count == 3
    assert [outcome.ok for outcome in report.outcomes] == [True, False, True]
    assert report.outcomes[1].error == "denied"
    assert [entry.renamed for entry in registry] == [True, False, True]


def test_apply_rename_reports_missing_source(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, ["TL1-T25_A01.ab1"])
    registry = FilenameRegistry()
    registry.load([str(tmp_path / "TL9-T25_A09.ab1")] + paths, Vendor.GENEWIZ)

    report = RenameService(LocalFileSystemAdapter()).apply_rename(registry, today=date(2025, 6, 1))

    assert [outcome.ok for outcome in report.outcomes] == [False, True]
    assert "not found" in (report.outcomes[0].error or "")
    assert (tmp_path / "250601.TL1.T25.ab1").exists()


def test_apply_rename_refuses_to_overwrite(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, ["TL1-T25_A01.ab1", "TL1-T25_B01.ab1"])
    registry = FilenameRegistry()
    registry.load(paths, Vendor.GENEWIZ)

    report = RenameService(LocalFileSystemAdapter()).apply_rename(registry, today=date(2025, 6, 1))

    assert [outcome.ok for outcome in report.outcomes] == [True, False]
    assert "already exists" in (report.outcomes[1].error or "")
    assert (tmp_path / "TL1-T25_B01.ab1").exists()


def test_apply_rename_skips_move_when_name_is_already_standard() -> None:
    registry = FilenameRegistry()
    registry.load(["/x/TL1-T25_A01.ab1"], Vendor.GENEWIZ)
    entry = registry.entries()[0]
    entry.full_path = "/x/250601.TL1.T25.ab1"
    filesystem = Mock()

    report = RenameService(filesystem).apply_rename(registry, today=date(2025, 6, 1))

    filesystem.rename_file.assert_not_called()
    assert report.succeeded == 1


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="directory permissions are not enforced for root",
)
def test_unwritable_directory_fails_only_its_file(tmp_path: Path) -> None:
    locked = tmp_path / "locked"
    locked.mkdir()
    open_dir = tmp_path / "open"
    open_dir.mkdir()
    locked_paths = _write_files(locked, ["TL1-T25_A01.ab1"])
    open_paths = _write_files(open_dir, ["TL2-T25_A02.ab1"])
    locked.chmod(0o555)
    try:
        registry = FilenameRegistry()
        registry.load(locked_paths + open_paths, Vendor.GENEWIZ)

        report = RenameService(LocalFileSystemAdapter()).apply_rename(
            registry, today=date(2025, 6, 1)
        )
    finally:
        locked.chmod(0o755)

    assert [outcome.ok for outcome in report.outcomes] == [False, True]
    assert (open_dir / "250601.TL2.T25.ab1").exists()
    assert (locked / "TL1-T25_A01.ab1").exists()


def test_os_rename_failure_fails_only_its_file(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, ["TL1-T25_A01.ab1", "TL2-T25_A02.ab1"])
    registry = FilenameRegistry()
    registry.load(paths, Vendor.GENEWIZ)
    registry.entries()[0].set_label(LabelKind.TEMPLATE, "x" * 300)

    report = RenameService(LocalFileSystemAdapter()).apply_rename(registry, today=date(2025, 6, 1))

    assert [outcome.ok for outcome in report.outcomes] == [False, True]
    assert report.outcomes[0].error
    assert (tmp_path / "TL1-T25_A01.ab1").exists()
    assert (tmp_path / "250601.TL2.T25.ab1").exists()
    assert registry.entries()[0].renamed is False
