"""ShopDesk: shop administration back end."""

__version__ = "1.0.0"
