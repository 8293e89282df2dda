"""Rich renderables for the app state."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pomo_tui.app import GLOBAL_SHORTCUTS, App, PanelId
from pomo_tui.overlays import ErrorNotice, HelpOverlay, SyncOverlay, TaskInputOverlay
from pomo_tui.tasks.model import Section, SyncResolution

_RESOLUTION_STYLE: dict[SyncResolution, tuple[str, str]] = {
    SyncResolution.INCOMPLETE: ("[ ]", "blue"),
    SyncResolution.COMPLETE: ("[x]", "green"),
    SyncResolution.REMOVE: ("[~]", "red"),
}


def _border(focused: bool) -> str:
    return "cyan" if focused else "bright_black"


def render_timer(app: App) -> Panel:
    timer = app.timer
    body = Text(justify="center")
    body.append(f"{timer.minutes:02d}:{timer.seconds:02d}\n", style="bold green" if timer.is_running() else "bold")
    body.append(f"{timer.session_type.label} ({timer.state.value})\n", style="dim")
    body.append(f"Sessions completed: {timer.sessions_completed}\n", style="dim")
    active = app.active_task()
    if active is not None:
        style = "yellow" if app.is_work_session_active() else "white"
        body.append(f"\n> {active.text}", style=style)
    return Panel(
        body,
        title="Timer",
        border_style=_border(app.focused_panel == PanelId.TIMER),
    )


def render_tasks(app: App) -> Panel:
    rows: list[RenderableType] = []
    focus = app.focus
    panel_focused = app.focused_panel == PanelId.TASKS
    for section in Section:
        header_style = "bold cyan" if panel_focused and focus.section == section else "bold"
        rows.append(Text(f"{section.label} ({app.store.section_len(section)})", style=header_style))
        tasks = app.store.tasks(section)
        if not tasks:
            rows.append(Text("  (empty)", style="bright_black"))
        for idx, task in enumerate(tasks):
            selected = panel_focused and focus.section == section and focus.index == idx
            mark = "x" if section == Section.COMPLETED else " "
            line = Text(f"{'>' if selected else ' '} [{mark}] {task.text}")
            if selected:
                line.stylize("reverse")
            elif section == Section.COMPLETED:
                line.stylize("bright_black")
            rows.append(line)
        rows.append(Text(""))
    return Panel(Group(*rows), title="Tasks", border_style=_border(panel_focused))


def render_overlay(app: App) -> Panel | None:
    overlay = app.overlay
    match overlay:
        case None:
            return None
        case SyncOverlay():
            lines: list[RenderableType] = []
            if not overlay.items:
                lines.append(Text("No changes", style="bright_black"))
            for idx, item in enumerate(overlay.items):
                box, color = _RESOLUTION_STYLE[item.resolution]
                prefix = "> " if idx == overlay.focused else "  "
                style = f"bold {color}" if idx == overlay.focused else color
                lines.append(Text(f"{prefix}{box} {item.text}", style=style))
            lines.append(Text(""))
            lines.append(Text("[space] [x] [d] change state  [j/k] navigate  [enter] apply  [esc] cancel", style="yellow"))
            return Panel(Group(*lines), title="Sync", border_style="cyan")
        case TaskInputOverlay():
            text = Text(overlay.text + " ")
            text.stylize("reverse", overlay.cursor, overlay.cursor + 1)
            hint = Text("[enter] add  [esc] cancel", style="yellow")
            title = f"Add to {overlay.section.label}"
            return Panel(Group(text, hint), title=title, border_style="cyan")
        case ErrorNotice():
            body = Group(Text(overlay.message, style="red"), Text("Press any key to dismiss", style="bright_black"))
            return Panel(body, title="Error", border_style="red")
        case HelpOverlay():
            table = Table.grid(padding=(0, 2))
            table.add_row(Text(f"{overlay.panel_name} Panel", style="bold"), "")
            for key, desc in overlay.shortcuts:
                table.add_row(Text(key, style="yellow"), desc)
            table.add_row("", "")
            table.add_row(Text("Global", style="bold"), "")
            for key, desc in GLOBAL_SHORTCUTS:
                table.add_row(Text(key, style="yellow"), desc)
            return Panel(table, title="Help", border_style="cyan")


def render(app: App, width: int) -> RenderableType:
    """Full frame for *app* at terminal *width*."""
    app.update_layout(width)
    overlay = render_overlay(app)
    if overlay is not None:
        return overlay

    panels: list[RenderableType] = []
    if app.is_panel_visible(PanelId.TIMER):
        panels.append(render_timer(app))
    if app.is_panel_visible(PanelId.TASKS):
        panels.append(render_tasks(app))

    if len(panels) > 1:
        grid = Table.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(*panels)
        body: RenderableType = grid
    else:
        body = Group(*panels)
    footer = Text("  ".join(f"[{k}] {d}" for k, d in app.shortcuts()[:4]) + "  [?] help", style="bright_black")
    return Group(body, footer)
