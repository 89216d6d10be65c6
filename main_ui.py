"""
VocabLoop: Flashcard Review Application
---------------------------------------

A Flet interface for reviewing vocabulary word files.
"""

import logging
from pathlib import Path

import flet as ft

from vocabloop.config import Config, SettingsManager
from vocabloop.ui.review import ReviewView
from vocabloop.utils.logger import setup_logger

logger = logging.getLogger("vocabloop.app")


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class VocabLoopApp:
    """Main application controller."""

    def __init__(self, page: ft.Page) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self.settings = SettingsManager()
        self._setup_page()
        self.review = ReviewView(self.page)
        self.page.on_keyboard_event = self.review.handle_key
        self.page.add(self.review.container)

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = Config.APP_TITLE
        self.page.theme_mode = ft.ThemeMode.DARK
        self.page.bgcolor = "#121212"
        self.page.theme = ft.Theme(
            color_scheme_seed="#7C4DFF",
            font_family="Inter, Roboto, Segoe UI, sans-serif",
        )
        self.page.padding = 0
        self.page.spacing = 0
        self.page.window.min_width = 800
        self.page.window.min_height = 560
        self.page.window.width = self.settings.get("WINDOW_WIDTH", 1100)
        self.page.window.height = self.settings.get("WINDOW_HEIGHT", 760)


def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    settings = SettingsManager()
    log_file = None
    if settings.get("LOG_TO_FILE", False):
        log_file = str(Path(Config.LOG_DIR) / "vocabloop.log")
    setup_logger("vocabloop", settings.get("LOG_LEVEL", "INFO"), log_file)

    try:
        VocabLoopApp(page)
    except Exception:
        import traceback
        logger.exception("UI failed to start")
        error_text = traceback.format_exc()
        page.add(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text("UI failed to start", size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                        ft.Container(
                            content=ft.Text(error_text, size=11, selectable=True, color=ft.Colors.WHITE70),
                            padding=10,
                            bgcolor=ft.Colors.with_opacity(0.08, ft.Colors.WHITE),
                            border_radius=8,
                        ),
                    ],
                    spacing=10,
                ),
                padding=20,
            )
        )
        page.update()


if __name__ == "__main__":
    ft.run(main)
