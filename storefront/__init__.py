"""Storefront domain service: catalog, cart, checkout and profile state"""

__version__ = "1.0.0"
