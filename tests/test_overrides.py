import pytest

from sanger_rename.domain.models import LabelKind
from sanger_rename.domain.overrides import OverrideMap
from sanger_rename.domain.registry import FilenameRegistry
from sanger_rename.domain.vendors import Vendor

SANGON_FILES = [
    "0001_31225060307072_(TXPCR)_[SP1].ab1",
    "0002_31225060307073_(TXPCR)_[SP2].ab1",
    "0003_31225060307074_(GAPDH)_[SP1].ab1",
]


def _registry() -> FilenameRegistry:
    registry = FilenameRegistry()
    registry.load(SANGON_FILES, Vendor.SANGON)
    return registry


def _primers(registry: FilenameRegistry) -> list[str]:
    return [entry.primer_name for entry in registry]


def test_seed_collects_distinct_labels_unset() -> None:
    overrides = OverrideMap.seed(_registry(), LabelKind.PRIMER)

    assert overrides.keys() == ["SP1", "SP2"]
    assert overrides.items() == [("SP1", None), ("SP2", None)]
    assert overrides.key_at(1) == "SP2"
    assert overrides.key_at(2) is None


def test_commit_updates_every_entry_sharing_the_label() -> None:
    registry = _registry()
    overrides = OverrideMap.seed(registry, LabelKind.PRIMER)

    count = overrides.commit("SP1", "M13F")

    assert count == 2
    assert overrides.get("SP1") == "M13F"
    assert _primers(registry) == ["M13F", "SP2", "M13F"]


def test_commit_template_leaves_primers_alone() -> None:
    registry = _registry()
    overrides = OverrideMap.seed(registry, LabelKind.TEMPLATE)

    overrides.commit("TXPCR", "pUC19-insert")

    assert [entry.template_name for entry in registry] == ["pUC19-insert", "pUC19-insert", "GAPDH"]
    assert _primers(registry) == ["SP1", "SP2", "SP1"]


def test_chained_edits_follow_current_labels() -> None:
    registry = _registry()
    overrides = OverrideMap.seed(registry, LabelKind.PRIMER)

    assert overrides.commit("SP1", "SP2") == 2
    assert overrides.commit("SP2", "T7") == 3

    assert _primers(registry) == ["T7", "T7", "T7"]


def test_second_edit_of_same_key_skips_files_no_longer_carrying_it() -> None:
    registry = _registry()
    overrides = OverrideMap.seed(registry, LabelKind.PRIMER)

    overrides.commit("SP1", "M13F")
    rewritten = overrides.commit("SP1", "T7")

    assert rewritten == 0
    assert overrides.get("SP1") == "T7"
    assert _primers(registry) == ["M13F", "SP2", "M13F"]


def test_empty_commit_stores_none_and_leaves_labels() -> None:
    registry = _registry()
    overrides = OverrideMap.seed(registry, LabelKind.PRIMER)
    overrides.commit("SP1", "M13F")

    rewritten = overrides.commit("SP1", "   ")

    assert rewritten == 0
    assert overrides.get("SP1") is None
    assert _primers(registry) == ["M13F", "SP2", "M13F"]


def test_commit_sanitizes_value() -> None:
    registry = _registry()
    overrides = OverrideMap.seed(registry, LabelKind.PRIMER)

    overrides.commit("SP2", " M13/R ")

    assert overrides.get("SP2") == "M13R"
    assert _primers(registry) == ["SP1", "M13R", "SP1"]


def test_commit_unknown_key_raises() -> None:
    overrides = OverrideMap.seed(_registry(), LabelKind.PRIMER)
    with pytest.raises(KeyError):
        overrides.commit("nope", "x")


def test_reseed_uses_already_overridden_labels() -> None:
    registry = _registry()
    OverrideMap.seed(registry, LabelKind.PRIMER).commit("SP1", "M13F")

    reseeded = OverrideMap.seed(registry, LabelKind.PRIMER)

    assert reseeded.keys() == ["M13F", "SP2"]


def test_empty_label_is_a_valid_key() -> None:
    registry = FilenameRegistry()
    registry.load(["no-brackets.ab1", "0001_3122_(TXPCR)_[SP1].ab1"], Vendor.SANGON)
    overrides = OverrideMap.seed(registry, LabelKind.PRIMER)

    assert overrides.keys() == ["", "SP1"]
    overrides.commit("", "T7")
    assert _primers(registry) == ["T7", "SP1"]
