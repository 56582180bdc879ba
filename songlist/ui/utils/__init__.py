"""
UI utilities package for songlist.
"""

from songlist.ui.utils.notifications import NotificationHelper

__all__ = ["NotificationHelper"]
