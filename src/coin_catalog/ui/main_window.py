"""Main application window for Coin Catalog."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, Sequence

import ttkbootstrap as tb
from ttkbootstrap.constants import DANGER, SUCCESS

from coin_catalog.models.core import Coin
from coin_catalog.services.collection_store import CollectionStore
from coin_catalog.theming.style import (
    APPLE_FONT_DEFAULT,
    APPLE_PADDING,
    APPLE_SPACING_MEDIUM,
    SUMMARY_DESC_FONT,
    SUMMARY_VALUE_FONT,
    setup_styles,
)
from coin_catalog.ui import dialogs as ui_dialogs
from coin_catalog.ui.utils import (
    achievement_color,
    achievement_marker,
    coin_subtitle,
    coin_title,
    format_price,
)

COIN_COLUMNS = ("Coin", "Details", "Material")


class CoinCatalogApp(tb.Window):
    """Main window: catalog, collection, wishlist, statistics and achievements tabs."""

    def __init__(self, store: CollectionStore):
        super().__init__(themename="flatly")
        self.title("Coin Catalog")
        self.geometry("900x640")
        self.minsize(720, 520)

        self.store = store
        self._tree_coins: Dict[str, Dict[str, Coin]] = {}

        setup_styles(self)
        self.create_menu_bar()
        self.create_widgets()
        self.refresh()
        self._unsubscribe = self.store.subscribe(lambda _store: self.refresh())
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _on_close(self) -> None:
        self._unsubscribe()
        self.destroy()

    def create_menu_bar(self):
        menubar = tk.Menu(self)
        self.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="Add Coin...", command=lambda: ui_dialogs.add_coin_dialog(self))
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=self._on_close)

        help_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="About", command=lambda: ui_dialogs.show_about(self))

    def _coin_tree(self, parent: tk.Misc, name: str) -> ttk.Treeview:
        """Build a scrollable coin list; double-click opens the detail dialog."""
        holder = tb.Frame(parent)
        holder.pack(fill="both", expand=True)
        tree = ttk.Treeview(holder, columns=COIN_COLUMNS, show="headings", style="Coin.Treeview")
        for col in COIN_COLUMNS:
            tree.heading(col, text=col)
            tree.column(col, width=220, anchor="w")
        scrollbar = ttk.Scrollbar(holder, orient="vertical", command=tree.yview)
        tree.configure(yscrollcommand=scrollbar.set)
        tree.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")
        tree.bind("<Double-1>", lambda _e: self._open_selected(name, tree))
        self._tree_coins[name] = {}
        return tree

    def create_widgets(self):
        self.tab_control = ttk.Notebook(self)
        self.tab_control.pack(fill="both", expand=True, padx=APPLE_PADDING, pady=APPLE_PADDING)

        catalog_tab = tb.Frame(self.tab_control, padding=APPLE_SPACING_MEDIUM)
        collection_tab = tb.Frame(self.tab_control, padding=APPLE_SPACING_MEDIUM)
        wishlist_tab = tb.Frame(self.tab_control, padding=APPLE_SPACING_MEDIUM)
        stats_tab = tb.Frame(self.tab_control, padding=APPLE_PADDING)
        achievements_tab = tb.Frame(self.tab_control, padding=APPLE_PADDING)
        self.tab_control.add(catalog_tab, text="Catalog")
        self.tab_control.add(collection_tab, text="Collection")
        self.tab_control.add(wishlist_tab, text="Wishlist")
        self.tab_control.add(stats_tab, text="Stats")
        self.tab_control.add(achievements_tab, text="Achievements")

        self.catalog_tree = self._coin_tree(catalog_tab, "catalog")

        collection_bar = tb.Frame(collection_tab)
        collection_bar.pack(side="bottom", fill="x", pady=(APPLE_SPACING_MEDIUM, 0))
        self.total_price_var = tb.StringVar()
        tk.Label(collection_bar, textvariable=self.total_price_var, font=SUMMARY_VALUE_FONT).pack(side="left")
        tb.Button(
            collection_bar, text="Remove Selected", bootstyle=DANGER,
            command=lambda: self._remove_selected("collection"),
        ).pack(side="right", padx=APPLE_SPACING_MEDIUM)
        tb.Button(
            collection_bar, text="Add Coin", bootstyle=SUCCESS,
            command=lambda: ui_dialogs.add_coin_dialog(self),
        ).pack(side="right")
        self.collection_tree = self._coin_tree(collection_tab, "collection")

        wishlist_bar = tb.Frame(wishlist_tab)
        wishlist_bar.pack(side="bottom", fill="x", pady=(APPLE_SPACING_MEDIUM, 0))
        tb.Button(
            wishlist_bar, text="Remove Selected", bootstyle=DANGER,
            command=lambda: self._remove_selected("wishlist"),
        ).pack(side="right")
        self.wishlist_tree = self._coin_tree(wishlist_tab, "wishlist")

        self.stat_vars: Dict[str, tk.StringVar] = {}
        for i, (key, title) in enumerate((
            ("collected_count", "Collected Coins"),
            ("wishlist_count", "Coins in Wishlist"),
            ("total_market_price", "Total Market Price"),
            ("unique_countries", "Unique Countries"),
        )):
            tk.Label(stats_tab, text=title, font=SUMMARY_DESC_FONT).grid(row=i * 2, column=0, sticky="w")
            var = tb.StringVar()
            tk.Label(stats_tab, textvariable=var, font=SUMMARY_VALUE_FONT).grid(
                row=i * 2 + 1, column=0, sticky="w", pady=(0, APPLE_SPACING_MEDIUM)
            )
            self.stat_vars[key] = var

        self.achievements_frame = tb.Frame(achievements_tab)
        self.achievements_frame.pack(fill="both", expand=True)

    def _fill_tree(self, name: str, tree: ttk.Treeview, coins: Sequence[Coin]) -> None:
        tree.delete(*tree.get_children())
        # Row ids are positions: one list may hold entries sharing a coin id
        rows: Dict[str, Coin] = {}
        for i, coin in enumerate(coins):
            iid = str(i)
            rows[iid] = coin
            tree.insert("", "end", iid=iid, values=(coin_title(coin), coin_subtitle(coin), coin.material))
        self._tree_coins[name] = rows

    def _selected_coins(self, name: str, tree: ttk.Treeview) -> list:
        rows = self._tree_coins.get(name, {})
        return [rows[iid] for iid in tree.selection() if iid in rows]

    def _open_selected(self, name: str, tree: ttk.Treeview) -> None:
        coins = self._selected_coins(name, tree)
        if coins:
            ui_dialogs.coin_detail_dialog(self, coins[0])

    def _remove_selected(self, name: str) -> None:
        tree = self.collection_tree if name == "collection" else self.wishlist_tree
        for coin in self._selected_coins(name, tree):
            if name == "collection":
                self.store.remove_from_collection(coin)
            else:
                self.store.remove_from_wishlist(coin)

    def refresh(self) -> None:
        """Redraw every tab from the store's current state."""
        store = self.store
        self._fill_tree("catalog", self.catalog_tree, store.catalog)
        self._fill_tree("collection", self.collection_tree, store.collection)
        self._fill_tree("wishlist", self.wishlist_tree, store.wishlist)
        self.total_price_var.set(f"Total Price: {format_price(store.total_market_price())}")

        stats = store.stats()
        self.stat_vars["collected_count"].set(str(stats["collected_count"]))
        self.stat_vars["wishlist_count"].set(str(stats["wishlist_count"]))
        self.stat_vars["total_market_price"].set(format_price(stats["total_market_price"]))
        self.stat_vars["unique_countries"].set(str(stats["unique_countries"]))

        for child in self.achievements_frame.winfo_children():
            child.destroy()
        for achievement in store.achievements():
            tk.Label(
                self.achievements_frame,
                text=f"{achievement_marker(achievement.achieved)}  {achievement.title}",
                font=APPLE_FONT_DEFAULT,
                fg=achievement_color(achievement.achieved),
            ).pack(anchor="w", pady=APPLE_SPACING_MEDIUM)
        self.title("Coin Catalog" if store.last_save_ok else "Coin Catalog (changes not saved)")
