#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TUI browser for treecopy using Textual, providing nnn-like navigation and selection.

Select entries anywhere with space, browse to a directory and paste: every selected
entry is merge-copied into the current directory the way `cp -r` would.

Default start directory:
- the first existing entry of DEFAULT_START_DIRS
- else current working directory
"""

import pathlib
import asyncio
import os
import sys
from typing import Optional, Set, List
from textual.app import App, ComposeResult
from textual.widgets import Header, Footer, DataTable, Static, Input, Button, Label
from textual.reactive import reactive
from textual import events
from textual.containers import Vertical
from textual.screen import ModalScreen
from rich.panel import Panel
from rich.text import Text
from logger_utils import get_logger
from config import DEFAULT_START_DIRS, DEFAULT_ERROR_POLICY, LOG_PATH, TUI_KEYBINDS
from core import copy_tree_merge
from entry_index import EntryKind, entry_of
from errors import CopyError
from permissions_helper import format_permissions
from policy import CollectErrors, policy_for

logger = get_logger("treecopy.tui")

KIND_LABELS = {
    EntryKind.DIRECTORY: "Dir",
    EntryKind.FILE: "File",
    EntryKind.SYMLINK: "Link",
    EntryKind.OTHER: "Other",
}


class CopierTUI(App):
    CSS_PATH = None
    BINDINGS = TUI_KEYBINDS

    current_dir = reactive(pathlib.Path.cwd())
    selected: Set[pathlib.Path] = set()
    cursor_index: int = reactive(0)
    items: list = reactive([])

    def __init__(self, start_dir: Optional[str] = None, error_policy: str = DEFAULT_ERROR_POLICY, *args, **kwargs):
        super().__init__(*args, **kwargs)

        if start_dir:
            self.current_dir = pathlib.Path(start_dir)
        else:
            found = False
            for candidate in DEFAULT_START_DIRS:
                p = pathlib.Path(candidate)
                if p.is_dir():
                    self.current_dir = p
                    found = True
                    break
            if not found:
                self.current_dir = pathlib.Path.cwd()
        # fail early on a bad policy name rather than on the first paste
        policy_for(error_policy)
        self.error_policy = error_policy
        self.selected = set()
        self.cursor_index = 0
        self.items = []
        self.last_errors: List[CopyError] = []

    def compose(self) -> ComposeResult:
        yield Static(Panel(f"Copy errors are logged to [bold]{LOG_PATH}[/bold]", style="dim"), id="log-hint")
        yield Header(show_clock=True)
        # kept on self: queries are scoped to the active screen, which may be a modal
        self.table = DataTable(id="filetable")
        yield self.table
        yield Footer()

    async def on_mount(self) -> None:
        table = self.table
        table.add_columns("#", "Name", "Type", "Mode", "Selected")
        await self.load_directory(self.current_dir)
        table.focus()

    async def load_directory(self, path: pathlib.Path, preserve_cursor_index: Optional[int] = None):
        """Loads directory contents into the DataTable, optionally preserving cursor position."""
        self.current_dir = path.resolve()
        logger.debug(f"[load_directory] Loading directory: {self.current_dir}")
        self.items = []

        try:
            entries = list(self.current_dir.iterdir())
            entries.sort(key=lambda p: (not p.is_dir(), p.name.lower()))
        except OSError as e:
            logger.error(f"Error listing directory {self.current_dir}: {e}")
            entries = []

        self.items = entries
        table = self.table
        table.clear()

        for idx, path_entry in enumerate(entries):
            try:
                entry = entry_of(path_entry)
            except OSError as e:
                logger.error(f"ERROR processing entry {path_entry.name}: {e}")
                table.add_row(str(idx + 1), Text(path_entry.name), "?", "", "")
                continue
            selected = path_entry.absolute() in self.selected
            name_text = Text(path_entry.name)
            if entry.kind is EntryKind.DIRECTORY:
                name_text.stylize("bold blue")
            elif entry.kind is EntryKind.SYMLINK:
                name_text.stylize("cyan")
            elif entry.kind is EntryKind.OTHER:
                name_text.stylize("red")
            table.add_row(
                str(idx + 1),
                name_text,
                KIND_LABELS[entry.kind],
                format_permissions(entry.mode),
                "[green]✓[/green]" if selected else "",
            )

        if preserve_cursor_index is not None and 0 <= preserve_cursor_index < len(entries):
            self.cursor_index = preserve_cursor_index
        elif self.cursor_index >= len(entries) or self.cursor_index < 0:
            self.cursor_index = 0

        if entries:
            table.move_cursor(row=self.cursor_index)

        self.sub_title = f"{self.current_dir}  ({len(self.selected)} selected)"

    async def on_key(self, event: events.Key) -> None:
        """Arrow keys are blocked in the table so only the vim bindings move the cursor."""
        table = self.table
        if table.has_focus:
            if event.key in ("up", "down", "left", "right"):
                event.prevent_default()
                event.stop()

    def action_move_up(self):
        table = self.table
        if self.cursor_index > 0:
            self.cursor_index -= 1
            table.move_cursor(row=self.cursor_index)
        self.cursor_index = table.cursor_coordinate.row

    def action_move_down(self):
        table = self.table
        if self.cursor_index < len(self.items) - 1:
            self.cursor_index += 1
            table.move_cursor(row=self.cursor_index)
        self.cursor_index = table.cursor_coordinate.row

    def action_go_up(self):
        parent = self.current_dir.parent
        if parent != self.current_dir:
            asyncio.create_task(self.load_directory(parent))

    def action_enter_dir(self):
        if not self.items:
            return
        entry = self.items[self.cursor_index]
        # symlinked directories are browsable even though copies never follow them
        if entry.is_dir():
            asyncio.create_task(self.load_directory(entry))

    def action_toggle_select(self):
        if not self.items or self.cursor_index >= len(self.items):
            return
        # absolute(), not resolve(): a selected symlink must stay a symlink
        entry = self.items[self.cursor_index].absolute()
        if entry in self.selected:
            logger.debug(f"[toggle_select] Removing from selection: {entry}")
            self.selected.remove(entry)
        else:
            logger.debug(f"[toggle_select] Adding to selection: {entry}")
            self.selected.add(entry)
        if self.cursor_index < len(self.items) - 1:
            self.cursor_index += 1
        asyncio.create_task(self.load_directory(self.current_dir, preserve_cursor_index=self.cursor_index))

    def action_deploy(self):
        """Merge-copy every selected entry into the current directory."""
        if not self.selected:
            self.bell()
            return
        destination_dir = self.current_dir
        policy = policy_for(self.error_policy)
        success_count = 0
        fail_count = 0
        items_to_copy = sorted(self.selected)
        logger.info(f"Pasting {len(items_to_copy)} selected items into: {destination_dir}")
        for source_path in items_to_copy:
            if source_path.parent == destination_dir:
                logger.warning(f"Source {source_path} is already in {destination_dir}. Skipping.")
                fail_count += 1
                continue
            try:
                errors = copy_tree_merge(source_path, destination_dir)
            except CopyError as e:
                logger.error(f"[FAIL] Copying {source_path.name}: {e}")
                policy.report(e)
                fail_count += 1
                continue
            for error in errors:
                policy.report(error)
            if errors:
                fail_count += 1
                logger.error(f"[FAIL] Copied {source_path.name} with {len(errors)} error(s)")
            else:
                success_count += 1
                logger.info(f"[OK] Copied: {source_path.name}")
        logger.info(f"Paste complete. Success: {success_count}, Failed: {fail_count}.")
        self.bell()
        self.selected = set()
        self.last_errors = list(policy.errors) if isinstance(policy, CollectErrors) else []
        if self.last_errors:
            self.push_screen(ErrorReportScreen(self.last_errors))
        asyncio.create_task(self.load_directory(self.current_dir, preserve_cursor_index=self.cursor_index))

    def action_quit(self):
        self.exit()

    def on_unmount(self) -> None:
        logger.info("treecopy TUI session ended.")

    def on_data_table_row_highlighted(self, event) -> None:
        self.cursor_index = event.cursor_row

    def action_new_dir(self):
        """Prompt for a name and create that directory here, e.g. as a paste target."""
        self.push_screen(NewDirectoryScreen(self.current_dir), self.create_directory)

    def create_directory(self, name: Optional[str]) -> None:
        if not name:
            return
        new_path = self.current_dir / name
        try:
            new_path.mkdir()
            logger.info(f"Created new directory: {new_path}")
        except OSError as e:
            logger.error(f"Failed to create directory {new_path}: {e}")
            self.bell()
            return
        asyncio.create_task(self.load_directory(self.current_dir, preserve_cursor_index=self.cursor_index))


class ErrorReportScreen(ModalScreen):
    """Lists the errors of the last paste. Any key closes it."""

    def __init__(self, errors: List[CopyError]):
        super().__init__()
        self.errors = errors

    def compose(self):
        report = Text()
        for error in self.errors:
            report.append(f"{type(error).__name__}: ", style="bold red")
            report.append(f"{error}\n")
        yield Vertical(
            Label(f"{len(self.errors)} error(s) while copying"),
            Static(report, id="error-list"),
            Button("Close", id="close"),
        )

    async def on_button_pressed(self, event):
        self.dismiss()

    async def on_key(self, event):
        self.dismiss()
        event.stop()


class NewDirectoryScreen(ModalScreen):
    """Asks for the name of a directory to create in parent_dir. Dismisses with the name, or None."""

    def __init__(self, parent_dir: pathlib.Path):
        super().__init__()
        self.parent_dir = parent_dir
        self.input = Input(placeholder="New directory name")
        self.problem = Label("")

    def compose(self):
        yield Vertical(
            Label(f"New directory in {self.parent_dir}:"),
            self.input,
            self.problem,
            Button("Create", id="ok"),
            Button("Cancel", id="cancel"),
        )

    def submit(self):
        name = self.input.value.strip()
        if not name or name in (".", "..") or "/" in name:
            self.problem.update("Enter a single directory name.")
            return
        if os.path.lexists(self.parent_dir / name):
            self.problem.update(f"'{name}' already exists.")
            return
        self.dismiss(name)

    def on_input_submitted(self, event):
        self.submit()

    def on_button_pressed(self, event):
        if event.button.id == "ok":
            self.submit()
        else:
            self.dismiss(None)

    def on_key(self, event):
        if event.key == "escape":
            self.dismiss(None)
            event.stop()


def main():
    start_dir = sys.argv[1] if len(sys.argv) > 1 else None
    app = CopierTUI(start_dir=start_dir)
    app.run()


if __name__ == "__main__":
    main()
