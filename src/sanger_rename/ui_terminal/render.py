from __future__ import annotations

import calendar
from datetime import date

from rich.align import Align
from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sanger_rename.domain.models import PreviewRow
from sanger_rename.services.time_utils import shift_months
from sanger_rename.wizard.machine import Wizard
from sanger_rename.wizard.stages import (
    VENDORS,
    ConfirmRenameState,
    DateSelectionState,
    OverrideState,
    Stage,
    VendorSelectionState,
)

HIGHLIGHT = "bold yellow on grey23"
BORDER = "cyan"
NOT_SET = "<not set>"
EMPTY_LABEL = "<empty>"

HELP_TEXT: dict[Stage, str] = {
    Stage.VENDOR_SELECTION: "←/→ choose vendor · Enter select · q quit",
    Stage.PRIMER_RENAME: "↑/↓ move · Enter edit · Tab next · Shift-Tab back · q quit",
    Stage.TEMPLATE_RENAME: "↑/↓ move · Enter edit · Tab next · Shift-Tab back · q quit",
    Stage.DATE_SELECTION: "←/→ day · ↑/↓ week · [/] month · Enter apply · Tab next · Shift-Tab back · q quit",
    Stage.CONFIRM_RENAME: "Enter rename files · Shift-Tab back · q quit",
}
EDIT_HELP_TEXT = "type new name · Backspace delete · Enter save · Esc cancel"


def render_wizard(wizard: Wizard) -> Layout:
    layout = Layout(name="root")
    layout.split_column(Layout(name="body", ratio=1), Layout(name="footer", size=3))
    state = wizard.state
    if isinstance(state, VendorSelectionState):
        layout["body"].update(render_vendor_selection(state))
    else:
        layout["body"].split_row(Layout(name="stage"), Layout(name="preview"))
        layout["stage"].update(_render_stage_panel(state))
        layout["preview"].update(render_preview(wizard.preview_rows()))
    layout["footer"].update(render_footer(wizard))
    return layout


def _render_stage_panel(state: object) -> RenderableType:
    if isinstance(state, OverrideState):
        return render_override(state)
    if isinstance(state, DateSelectionState):
        return render_date_selection(state)
    if isinstance(state, ConfirmRenameState):
        return render_confirm(state)
    raise TypeError(f"No renderer for {type(state).__name__}")


def render_vendor_selection(state: VendorSelectionState) -> RenderableType:
    grid = Table.grid(expand=True, padding=(0, 1))
    for _ in VENDORS:
        grid.add_column(ratio=1)
    cells = []
    for index, vendor in enumerate(VENDORS):
        style = HIGHLIGHT if index == state.highlighted else ""
        cells.append(
            Panel(
                Align.center(Text(vendor.value, style=style), vertical="middle"),
                title=Text(vendor.value, style=style),
                border_style=style or "default",
                height=7,
            )
        )
    grid.add_row(*cells)
    header = Text(f"Selected: {state.highlighted_vendor.value}", style=BORDER)
    return Group(header, Text(""), grid)


def render_override(state: OverrideState) -> RenderableType:
    title = state.kind.display_name
    table = Table(expand=True, show_edge=False)
    table.add_column(f"{title} Name", ratio=45)
    table.add_column("-->", ratio=10)
    table.add_column("New Name", ratio=45)
    for index, (label, replacement) in enumerate(state.overrides.items()):
        is_highlighted = index == state.highlighted
        if state.editing and is_highlighted:
            new_name = f"{state.buffer}_"
        else:
            new_name = replacement if replacement is not None else NOT_SET
        table.add_row(
            label or EMPTY_LABEL,
            "-->",
            new_name,
            style=HIGHLIGHT if is_highlighted else None,
        )
    return Panel(
        table,
        title=f"{title} Names (Enter to edit, Tab to continue)",
        border_style=BORDER,
    )


def render_month(month_day: date, state: DateSelectionState, current: bool) -> Table:
    table = Table(
        title=month_day.strftime("%B %Y"),
        title_style="bold cyan" if current else "bold yellow",
        show_edge=False,
        box=None,
        style=None if current else "dim",
    )
    for weekday in ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"):
        table.add_column(weekday, justify="right", header_style="bold green")
    month_calendar = calendar.Calendar(firstweekday=calendar.SUNDAY)
    for week in month_calendar.monthdatescalendar(month_day.year, month_day.month):
        cells = []
        for day in week:
            style = ""
            if day.month != month_day.month:
                style = "dim"
            if day == state.today:
                style = "bold on blue"
            if day == state.selected_date:
                style = "bold white on red"
            cells.append(Text(str(day.day), style=style))
        table.add_row(*cells)
    return table


def render_date_selection(state: DateSelectionState) -> RenderableType:
    months = Group(
        render_month(shift_months(state.selected_date, -1), state, current=False),
        Text(""),
        render_month(state.selected_date, state, current=True),
        Text(""),
        render_month(shift_months(state.selected_date, 1), state, current=False),
    )
    return Panel(
        months,
        title=f"Date: {state.selected_date.isoformat()}",
        border_style=BORDER,
    )


def render_confirm(state: ConfirmRenameState) -> RenderableType:
    if not state.renamed:
        body: RenderableType = Align.center(
            Text("Press 'Enter' to confirm renaming"), vertical="middle"
        )
    elif state.report is None:
        body = Align.center(
            Text("Files were already renamed. Press 'q' to exit.", style="green"),
            vertical="middle",
        )
    elif state.report.failed == 0:
        body = Align.center(
            Text("Renaming completed successfully! Press 'q' to exit.", style="green"),
            vertical="middle",
        )
    else:
        failures = Table(expand=True, show_edge=False)
        failures.add_column("File")
        failures.add_column("Error", style="red")
        for outcome in state.report.failures:
            failures.add_row(outcome.full_path, outcome.error or "")
        body = Group(
            Text(
                f"{state.report.succeeded} renamed, {state.report.failed} failed. Press 'q' to exit.",
                style="yellow",
            ),
            failures,
        )
    return Panel(body, title="Confirm Rename", border_style=BORDER)


def render_preview(rows: list[PreviewRow]) -> RenderableType:
    table = Table(expand=True, show_edge=False)
    table.add_column("Original", ratio=45, overflow="fold")
    table.add_column("-->", ratio=10)
    table.add_column("Standardized", ratio=45, overflow="fold")
    for row in rows:
        table.add_row(row.original_name, "-->", row.standardized_name)
    return Panel(table, title="Rename Preview", border_style=BORDER)


def render_footer(wizard: Wizard) -> RenderableType:
    state = wizard.state
    editing = isinstance(state, OverrideState) and state.editing
    help_text = EDIT_HELP_TEXT if editing else HELP_TEXT[wizard.stage]
    line = Text(help_text, style="dim")
    if wizard.status:
        line = Text.assemble((wizard.status, "bold"), "  ", line)
    return Panel(line, border_style="dim")
