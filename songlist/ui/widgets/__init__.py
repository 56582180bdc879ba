"""
Widgets - reusable PySide6 + Fluent Widgets components.
"""

from .location_bar import LocationBar

__all__ = ["LocationBar"]
