# -*- coding: utf-8 -*-
"""
Central configuration for treecopy.
Contains static paths, keybinds, and other constants.
"""
import getpass
import os

# Default start directories for the TUI (in order of preference)
DEFAULT_START_DIRS = [os.path.expanduser("~")]

# Error policy used by the TUI when pasting: "collect", "log" or "ignore"
DEFAULT_ERROR_POLICY = "collect"

# Keybinds for the TUI
TUI_KEYBINDS = [
    ("h", "go_up", "Go up dir"),
    ("j", "move_down", "Move down"),
    ("k", "move_up", "Move up"),
    ("l", "enter_dir", "Enter dir"),
    ("space", "toggle_select", "Select"),
    ("enter", "deploy", "Paste"),
    ("p", "deploy", "Paste"),
    ("n", "new_dir", "New directory"),
    ("q", "quit", "Quit"),
]

# Log file path (read by logger_utils.py)
LOG_PATH = os.environ.get("TREECOPY_LOG_PATH", f"/tmp/treecopy_{getpass.getuser()}.log")
