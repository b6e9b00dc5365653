from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from sanger_rename.domain.models import CommitReport, LabelKind
from sanger_rename.domain.overrides import OverrideMap
from sanger_rename.domain.registry import FilenameRegistry
from sanger_rename.domain.vendors import Vendor
from sanger_rename.services.rename_service import RenameService
from sanger_rename.services.time_utils import shift_days, shift_months

from .keys import Key, KeyPress

logger = logging.getLogger(__name__)

VENDORS: tuple[Vendor, ...] = tuple(Vendor)


class Stage(Enum):
    VENDOR_SELECTION = 1
    PRIMER_RENAME = 2
    TEMPLATE_RENAME = 3
    DATE_SELECTION = 4
    CONFIRM_RENAME = 5


class TransitionKind(Enum):
    STAY = "stay"
    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"


@dataclass(frozen=True)
class Transition:
    kind: TransitionKind
    stage: Stage | None = None

    @classmethod
    def next(cls, stage: Stage) -> Transition:
        return cls(TransitionKind.NEXT, stage)

    @classmethod
    def previous(cls, stage: Stage) -> Transition:
        return cls(TransitionKind.PREVIOUS, stage)


STAY = Transition(TransitionKind.STAY)
QUIT = Transition(TransitionKind.QUIT)


class VendorSelectionState:
    stage = Stage.VENDOR_SELECTION

    def __init__(self) -> None:
        self.highlighted = 0
        self.selected: Vendor | None = None
        self.message = ""

    @property
    def highlighted_vendor(self) -> Vendor:
        return VENDORS[self.highlighted]

    def set_highlighted(self, index: int) -> None:
        if 0 <= index < len(VENDORS):
            self.highlighted = index

    def handle_key(self, key: KeyPress) -> Transition:
        if key.matches(Key.LEFT, Key.UP, chars="hk"):
            self.highlighted = (self.highlighted - 1) % len(VENDORS)
            return STAY
        if key.matches(Key.RIGHT, Key.DOWN, chars="lj"):
            self.highlighted = (self.highlighted + 1) % len(VENDORS)
            return STAY
        if key.key is Key.ENTER:
            self.selected = self.highlighted_vendor
            return Transition.next(Stage.PRIMER_RENAME)
        if key.matches(Key.ESC, chars="q"):
            return QUIT
        return STAY


class OverrideState:
    """Browse and edit one kind of label; shared by primer and template stages."""

    def __init__(
        self,
        stage: Stage,
        kind: LabelKind,
        registry: FilenameRegistry,
        next_stage: Stage,
        previous_stage: Stage,
    ) -> None:
        self.stage = stage
        self.kind = kind
        self.registry = registry
        self.overrides = OverrideMap.seed(registry, kind)
        self.next_stage = next_stage
        self.previous_stage = previous_stage
        self.highlighted = 0
        self.editing = False
        self.buffer = ""
        self.message = ""

    @property
    def highlighted_key(self) -> str | None:
        return self.overrides.key_at(self.highlighted)

    def handle_key(self, key: KeyPress) -> Transition:
        if self.editing:
            return self._handle_edit_key(key)
        if key.matches(Key.UP, Key.LEFT, chars="kh"):
            if self.highlighted > 0:
                self.highlighted -= 1
            return STAY
        if key.matches(Key.DOWN, Key.RIGHT, chars="jl"):
            if self.highlighted < len(self.overrides) - 1:
                self.highlighted += 1
            return STAY
        if key.key is Key.ENTER:
            self._start_editing()
            return STAY
        if key.matches(Key.ESC, chars="q"):
            return QUIT
        if key.matches(Key.TAB, chars="n"):
            return Transition.next(self.next_stage)
        if key.matches(Key.BACKTAB, chars="p"):
            return Transition.previous(self.previous_stage)
        return STAY

    def _start_editing(self) -> None:
        label = self.highlighted_key
        if label is None:
            return
        self.editing = True
        self.buffer = self.overrides.get(label) or ""

    def _handle_edit_key(self, key: KeyPress) -> Transition:
        if key.key is Key.ENTER:
            label = self.highlighted_key
            if label is not None:
                count = self.overrides.commit(label, self.buffer)
                replacement = self.overrides.get(label)
                shown = replacement if replacement is not None else "<not set>"
                self.message = f"{self.kind.display_name} {label!r} -> {shown} ({count} file(s))"
            self._stop_editing()
        elif key.key is Key.ESC:
            self._stop_editing()
        elif key.key is Key.BACKSPACE:
            self.buffer = self.buffer[:-1]
        elif key.key is Key.CHAR:
            self.buffer += key.char
        return STAY

    def _stop_editing(self) -> None:
        self.editing = False
        self.buffer = ""


class DateSelectionState:
    stage = Stage.DATE_SELECTION

    def __init__(self, registry: FilenameRegistry, today: date) -> None:
        self.registry = registry
        self.today = today
        self.selected_date = registry.common_date() or today
        self.message = ""

    def handle_key(self, key: KeyPress) -> Transition:
        if key.matches(Key.ESC, chars="q"):
            return QUIT
        if key.key is Key.ENTER:
            self.registry.stamp_date(self.selected_date)
            logger.info("Capture date %s set on %d file(s)", self.selected_date, len(self.registry))
            self.message = f"Date {self.selected_date.isoformat()} applied to {len(self.registry)} file(s)"
            return STAY
        if key.matches(Key.LEFT, chars="h"):
            self.selected_date = shift_days(self.selected_date, -1)
        elif key.matches(Key.RIGHT, chars="l"):
            self.selected_date = shift_days(self.selected_date, 1)
        elif key.matches(Key.UP, chars="k"):
            self.selected_date = shift_days(self.selected_date, -7)
        elif key.matches(Key.DOWN, chars="j"):
            self.selected_date = shift_days(self.selected_date, 7)
        elif key.matches(Key.PAGE_UP, chars="["):
            self.selected_date = shift_months(self.selected_date, -1)
        elif key.matches(Key.PAGE_DOWN, chars="]"):
            self.selected_date = shift_months(self.selected_date, 1)
        elif key.matches(Key.TAB, chars="n"):
            return Transition.next(Stage.CONFIRM_RENAME)
        elif key.matches(Key.BACKTAB, chars="p"):
            return Transition.previous(Stage.TEMPLATE_RENAME)
        return STAY


class ConfirmRenameState:
    stage = Stage.CONFIRM_RENAME

    def __init__(
        self, registry: FilenameRegistry, rename_service: RenameService, today: date
    ) -> None:
        self.registry = registry
        self.rename_service = rename_service
        self.today = today
        self.renamed = any(entry.renamed for entry in registry)
        self.report: CommitReport | None = None
        self.message = ""

    def handle_key(self, key: KeyPress) -> Transition:
        if key.matches(Key.ESC, chars="q"):
            return QUIT
        if key.key is Key.ENTER:
            if self.renamed:
                logger.info("Rename already applied; ignoring repeated confirm")
                return STAY
            self.report = self.rename_service.apply_rename(self.registry, self.today)
            self.renamed = True
            self.message = (
                f"Renamed {self.report.succeeded} file(s), {self.report.failed} failed"
            )
            return STAY
        if key.matches(Key.BACKTAB, chars="p"):
            return Transition.previous(Stage.DATE_SELECTION)
        return STAY


StageState = VendorSelectionState | OverrideState | DateSelectionState | ConfirmRenameState
