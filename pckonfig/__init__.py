"""Inventory of PC components, configuration building, binary storage and console menus."""

__version__ = "0.1.0"
__all__ = ["models", "storage", "inventory", "console"]