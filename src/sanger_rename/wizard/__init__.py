from .keys import Key, KeyPress
from .machine import Wizard
from .stages import (
    ConfirmRenameState,
    DateSelectionState,
    OverrideState,
    Stage,
    Transition,
    TransitionKind,
    VendorSelectionState,
)

__all__ = [
    "ConfirmRenameState",
    "DateSelectionState",
    "Key",
    "KeyPress",
    "OverrideState",
    "Stage",
    "Transition",
    "TransitionKind",
    "VendorSelectionState",
    "Wizard",
]
