from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable

from sanger_rename.domain.models import LabelKind, PreviewRow
from sanger_rename.domain.registry import FilenameRegistry
from sanger_rename.domain.vendors import Vendor
from sanger_rename.services.rename_service import RenameService
from sanger_rename.services.time_utils import today_local

from .keys import Key, KeyPress
from .stages import (
    VENDORS,
    ConfirmRenameState,
    DateSelectionState,
    OverrideState,
    Stage,
    StageState,
    Transition,
    TransitionKind,
    VendorSelectionState,
)

logger = logging.getLogger(__name__)


class Wizard:
    """
    Five-stage rename session driven by one key press at a time.

    The wizard never ends on its own; the caller's loop stops once
    ``should_quit`` is set. Quitting never renames anything.
    """

    def __init__(
        self,
        paths: Iterable[str],
        rename_service: RenameService,
        today_provider: Callable[[], date] = today_local,
    ) -> None:
        self.registry = FilenameRegistry()
        self.rename_service = rename_service
        self.pending_paths: list[str] = list(dict.fromkeys(paths))
        self.selected_vendor: Vendor | None = None
        self.should_quit = False
        self._today_provider = today_provider
        self.stage = Stage.VENDOR_SELECTION
        self.state: StageState = VendorSelectionState()

    @property
    def today(self) -> date:
        return self._today_provider()

    @property
    def status(self) -> str:
        return self.state.message

    def preview_rows(self) -> list[PreviewRow]:
        return self.registry.preview_rows(self.today)

    def handle_key(self, key: KeyPress) -> None:
        if self.should_quit:
            return
        if key.key is Key.INTERRUPT:
            self._apply(Transition(TransitionKind.QUIT))
            return
        self._apply(self.state.handle_key(key))

    def select_vendor(self, vendor: Vendor) -> None:
        """Commit the vendor stage without key presses."""

        state = self.state
        if not isinstance(state, VendorSelectionState):
            raise RuntimeError(f"Vendor can only be selected from {Stage.VENDOR_SELECTION.name}")
        state.set_highlighted(VENDORS.index(vendor))
        state.selected = vendor
        self._apply(Transition.next(Stage.PRIMER_RENAME))

    def decompose_pending(self) -> int:
        if self.selected_vendor is None:
            raise RuntimeError("No vendor selected")
        added = self.registry.load(self.pending_paths, self.selected_vendor)
        logger.info(
            "Decomposed %d file(s) as %s (%d new)",
            len(self.registry),
            self.selected_vendor,
            added,
        )
        return added

    def _apply(self, transition: Transition) -> None:
        if transition.kind is TransitionKind.STAY:
            return
        if transition.kind is TransitionKind.QUIT:
            logger.info("Wizard quit at %s", self.stage.name)
            self.should_quit = True
            return
        if transition.stage is None:
            raise RuntimeError(f"{transition.kind.name} transition without a target stage")
        if transition.kind is TransitionKind.NEXT and transition.stage is Stage.PRIMER_RENAME:
            state = self.state
            self.selected_vendor = state.selected if isinstance(state, VendorSelectionState) else None
            self.decompose_pending()
        self.stage = transition.stage
        self.state = self._build_state(transition.stage)
        logger.debug("Entered stage %s", self.stage.name)

    def _build_state(self, stage: Stage) -> StageState:
        if stage is Stage.VENDOR_SELECTION:
            return VendorSelectionState()
        if stage is Stage.PRIMER_RENAME:
            return OverrideState(
                stage,
                LabelKind.PRIMER,
                self.registry,
                next_stage=Stage.TEMPLATE_RENAME,
                previous_stage=Stage.VENDOR_SELECTION,
            )
        if stage is Stage.TEMPLATE_RENAME:
            return OverrideState(
                stage,
                LabelKind.TEMPLATE,
                self.registry,
                next_stage=Stage.DATE_SELECTION,
                previous_stage=Stage.PRIMER_RENAME,
            )
        if stage is Stage.DATE_SELECTION:
            return DateSelectionState(self.registry, self.today)
        return ConfirmRenameState(self.registry, self.rename_service, self.today)
