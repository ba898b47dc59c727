"""Centralized theming and typography for the Coin Catalog UI."""

from __future__ import annotations

import tkinter as tk
import ttkbootstrap as tb

APPLE_FONT_FAMILY = "SF Pro Display"  # Primary font, falls back to system default
APPLE_FONT_DEFAULT = ("SF Pro Display", 12)  # Use tuple so Tk doesn't parse family as "SF", size "Pro"
APPLE_FONT_HEADLINE = ("SF Pro Display", 14, "bold")
APPLE_SPACING_SMALL = 4
APPLE_SPACING_MEDIUM = 8
APPLE_SPACING_LARGE = 16
APPLE_PADDING = 16

COLOR_ACHIEVED = "#30D158"  # Green
COLOR_PENDING = "#888888"   # Gray
SUMMARY_VALUE_FONT = ("SF Pro Display", 14, "bold")
SUMMARY_DESC_FONT = ("SF Pro Display", 9)


def setup_styles(root: tk.Misc) -> tb.Style:
    """Configure ttk/ttkbootstrap styles for the catalog window.

    ttkbootstrap.Style is a singleton and does not take master; root is kept
    for API compatibility with callers.
    """
    style = tb.Style()
    style.configure("Vertical.TScrollbar", gripcount=0, width=8, arrowsize=0)
    style.map("Vertical.TScrollbar", background=[("active", "#404040")])
    try:
        style.configure("TButton", padding=(14, 8))
        style.configure("Coin.Treeview", font=(APPLE_FONT_FAMILY, 11), rowheight=26)
    except tk.TclError:
        # Some environments may not support style reconfiguration; fail gracefully.
        pass
    return style
