"""UI package for Coin Catalog: main window, coin detail and add-coin dialogs."""

__all__ = ["CoinCatalogApp"]


def __getattr__(name: str):
    """Lazy-load CoinCatalogApp so ui.utils can be used without creating windows."""
    if name == "CoinCatalogApp":
        from coin_catalog.ui.main_window import CoinCatalogApp
        return CoinCatalogApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
