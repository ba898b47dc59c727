"""Dialog windows for Coin Catalog: coin details, add coin, about."""

from __future__ import annotations

import tkinter as tk
from tkinter import W, EW, filedialog, messagebox

import ttkbootstrap as tb
from ttkbootstrap.constants import DANGER, PRIMARY, SUCCESS

from coin_catalog.config.constants import IMAGE_FILETYPES, IMAGES_DIR
from coin_catalog.models.core import Coin, CoinInput
from coin_catalog.services.coin_input import is_valid_input
from coin_catalog.theming.style import (
    APPLE_FONT_DEFAULT,
    APPLE_FONT_HEADLINE,
    APPLE_PADDING,
    APPLE_SPACING_LARGE,
    APPLE_SPACING_MEDIUM,
)
from coin_catalog.ui.utils import format_price, image_label, import_photo


def show_about(app) -> None:
    """Show about dialog."""
    messagebox.showinfo(
        "About",
        "Coin Catalog\n\nBrowse a reference catalog of coins, keep track of\n"
        "the coins you own and the ones you want.",
    )


def coin_detail_dialog(app, coin: Coin) -> None:
    """Show one coin's details with collection and wishlist toggles."""
    store = app.store
    dialog = tk.Toplevel(app)
    dialog.title("Coin Details")
    dialog.geometry("460x520")
    dialog.transient(app)
    dialog.grab_set()

    frame = tb.Frame(dialog, padding=APPLE_PADDING)
    frame.pack(fill="both", expand=True)

    tk.Label(frame, text=f"{coin.country} {coin.denomination}", font=APPLE_FONT_HEADLINE).grid(
        row=0, column=0, columnspan=2, sticky=W, pady=APPLE_SPACING_MEDIUM
    )
    rows = [
        ("Country", coin.country),
        ("Denomination", coin.denomination),
        ("Year", str(coin.year)),
        ("Material", coin.material),
        ("Price", format_price(coin.market_price)),
        ("Condition", coin.condition),
        ("Purchase Place", coin.purchase_place),
        ("Image", image_label(coin.image)),
    ]
    for i, (title, value) in enumerate(rows, start=1):
        tk.Label(frame, text=title, font=APPLE_FONT_DEFAULT).grid(row=i, column=0, sticky=W)
        tk.Label(frame, text=value, font=APPLE_FONT_DEFAULT).grid(row=i, column=1, sticky="e")

    desc_row = len(rows) + 1
    tk.Label(frame, text="Description", font=APPLE_FONT_HEADLINE).grid(
        row=desc_row, column=0, columnspan=2, sticky=W, pady=(APPLE_SPACING_LARGE, 0)
    )
    tk.Message(frame, text=coin.description, width=400, font=APPLE_FONT_DEFAULT).grid(
        row=desc_row + 1, column=0, columnspan=2, sticky=W
    )
    frame.grid_columnconfigure(1, weight=1)

    btn_frame = tb.Frame(frame)
    btn_frame.grid(row=desc_row + 2, column=0, columnspan=2, pady=APPLE_SPACING_LARGE)

    collection_btn = tb.Button(btn_frame)
    wishlist_btn = tb.Button(btn_frame)

    def refresh_buttons():
        if store.is_in_collection(coin):
            collection_btn.configure(text="Remove from Collection", bootstyle=DANGER)
        else:
            collection_btn.configure(text="Add to Collection", bootstyle=SUCCESS)
        if store.is_in_wishlist(coin):
            wishlist_btn.configure(text="Remove from Wishlist", bootstyle=DANGER)
        else:
            wishlist_btn.configure(text="Add to Wishlist", bootstyle=PRIMARY)

    def toggle_collection():
        store.toggle_collection(coin)
        refresh_buttons()

    def toggle_wishlist():
        store.toggle_wishlist(coin)
        refresh_buttons()

    collection_btn.configure(command=toggle_collection)
    wishlist_btn.configure(command=toggle_wishlist)
    collection_btn.pack(side="left", padx=APPLE_SPACING_MEDIUM)
    wishlist_btn.pack(side="left", padx=APPLE_SPACING_MEDIUM)
    refresh_buttons()

    tb.Button(frame, text="Close", command=dialog.destroy).grid(row=desc_row + 3, column=0, columnspan=2)


def add_coin_dialog(app) -> None:
    """Show the add-coin form; saving adds the new coin to the collection."""
    store = app.store
    dialog = tk.Toplevel(app)
    dialog.title("Add New Coin")
    dialog.geometry("440x560")
    dialog.transient(app)
    dialog.grab_set()

    frame = tb.Frame(dialog, padding=APPLE_PADDING)
    frame.pack(fill="both", expand=True)

    fields = [
        ("country", "Country"),
        ("denomination", "Denomination"),
        ("year", "Year"),
        ("material", "Material"),
        ("market_price", "Market Price"),
        ("condition", "Condition"),
        ("purchase_place", "Purchase Place"),
    ]
    variables = {}
    for i, (key, label) in enumerate(fields):
        tk.Label(frame, text=f"{label}:", font=APPLE_FONT_DEFAULT).grid(
            row=i, column=0, sticky=W, pady=APPLE_SPACING_MEDIUM
        )
        var = tb.StringVar()
        tb.Entry(frame, textvariable=var, width=28, font=APPLE_FONT_DEFAULT).grid(
            row=i, column=1, sticky=EW, pady=APPLE_SPACING_MEDIUM, padx=APPLE_SPACING_MEDIUM
        )
        variables[key] = var

    row = len(fields)
    tk.Label(frame, text="Description:", font=APPLE_FONT_DEFAULT).grid(row=row, column=0, sticky="nw")
    description_text = tk.Text(frame, height=4, width=28, font=APPLE_FONT_DEFAULT)
    description_text.grid(row=row, column=1, sticky=EW, padx=APPLE_SPACING_MEDIUM)

    chosen = {"image": None}
    photo_var = tb.StringVar(value=image_label(None))

    def select_photo():
        filename = filedialog.askopenfilename(filetypes=IMAGE_FILETYPES)
        if not filename:
            return
        try:
            chosen["image"] = import_photo(filename, IMAGES_DIR)
        except OSError as e:
            messagebox.showerror("Photo Error", f"Could not import photo: {e}")
            return
        photo_var.set(image_label(chosen["image"]))

    tb.Button(frame, text="Select Photo...", command=select_photo).grid(
        row=row + 1, column=0, sticky=W, pady=APPLE_SPACING_LARGE
    )
    tk.Label(frame, textvariable=photo_var, font=APPLE_FONT_DEFAULT).grid(row=row + 1, column=1, sticky=W)
    frame.grid_columnconfigure(1, weight=1)

    def collect_input() -> CoinInput:
        data: CoinInput = {key: var.get().strip() for key, var in variables.items()}
        data["description"] = description_text.get("1.0", "end").strip()
        data["image"] = chosen["image"]
        return data

    btn_frame = tb.Frame(frame)
    btn_frame.grid(row=row + 2, column=0, columnspan=2, pady=APPLE_SPACING_LARGE)

    def save_coin():
        coin = store.add_new_coin(collect_input())
        if coin is None:
            messagebox.showwarning("Input Error", "Please fill in all required fields.")
            return
        dialog.destroy()

    save_btn = tb.Button(btn_frame, text="Save", command=save_coin, bootstyle=SUCCESS, state="disabled")
    save_btn.pack(side="left", padx=APPLE_SPACING_MEDIUM)
    tb.Button(btn_frame, text="Cancel", command=dialog.destroy).pack(side="left", padx=APPLE_SPACING_MEDIUM)

    def update_save_state(*_):
        save_btn.configure(state="normal" if is_valid_input(collect_input()) else "disabled")

    for var in variables.values():
        var.trace_add("write", update_save_state)
