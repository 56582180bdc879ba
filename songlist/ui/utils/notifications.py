"""
Notification helper for consistent InfoBar usage across the application.
"""

from PySide6.QtWidgets import QWidget
from qfluentwidgets import InfoBar, InfoBarPosition


class NotificationHelper:
    """
    Helper class for showing notifications using InfoBar.
    Provides a simplified interface with consistent styling.
    """

    @staticmethod
    def info(
        parent: QWidget,
        title: str,
        content: str,
        duration: int = 2000,
        position: InfoBarPosition = InfoBarPosition.TOP
    ) -> None:
        """Show an info notification."""
        InfoBar.info(
            title=title,
            content=content,
            parent=parent,
            position=position,
            duration=duration
        )

    @staticmethod
    def warning(
        parent: QWidget,
        title: str,
        content: str,
        duration: int = 3000,
        position: InfoBarPosition = InfoBarPosition.TOP
    ) -> None:
        """
        Show a warning notification.

        Used for recoverable problems such as a location that could not be
        saved for the next startup.
        """
        InfoBar.warning(
            title=title,
            content=content,
            parent=parent,
            position=position,
            duration=duration
        )

    @staticmethod
    def error(
        parent: QWidget,
        title: str,
        content: str,
        duration: int = 4000,
        position: InfoBarPosition = InfoBarPosition.TOP
    ) -> None:
        """Show an error notification."""
        InfoBar.error(
            title=title,
            content=content,
            parent=parent,
            position=position,
            duration=duration
        )
