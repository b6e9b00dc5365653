from .models import CommitReport, DecomposedFilename, LabelKind, PreviewRow, RenameOutcome
from .overrides import OverrideMap
from .registry import FilenameRegistry
from .rename_logic import build_preview, sanitize_label, standardized_filename, target_path
from .vendors import Decomposition, Vendor, decompose, format_standardized, parse_vendor

__all__ = [
    "CommitReport",
    "DecomposedFilename",
    "Decomposition",
    "FilenameRegistry",
    "LabelKind",
    "OverrideMap",
    "PreviewRow",
    "RenameOutcome",
    "Vendor",
    "build_preview",
    "decompose",
    "format_standardized",
    "parse_vendor",
    "sanitize_label",
    "standardized_filename",
    "target_path",
]
