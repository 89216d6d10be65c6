"""
Review View - Flashcard Review Screen
-------------------------------------

Shows the current word in three stages (word, details, status), the
progress counter and the word actions. Keyboard arrows drive the review
loop; import, export and jump go through small dialogs.
"""

import logging
from typing import Callable, Dict, Optional

import flet as ft

from vocabloop.config import SettingsManager
from vocabloop.errors import ReviewError
from vocabloop.models import EDITABLE_FIELDS, ViewStage, WordRecord
from vocabloop.services import ReviewSession, WordFileRepository

logger = logging.getLogger(__name__)


# =============================================================================
# DESIGN TOKENS
# =============================================================================
class DesignTokens:
    """Centralized design tokens for consistent styling."""
    BG_CARD = "#242426"

    TEXT_PRIMARY = "#FFFFFF"
    TEXT_SECONDARY = "#B3B3B3"
    TEXT_MUTED = "#5C5C5C"

    ACCENT_PRIMARY = "#7C4DFF"
    ACCENT_FAVORITE = "#FFB74D"
    ACCENT_MASTERED = "#FF8A65"
    ACCENT_DANGER = "#E57373"
    ACCENT_SUCCESS = "#81C784"
    ACCENT_IDLE = "#3A3A3D"

    SPACING_SM = 8
    SPACING_LG = 24

    RADIUS_MD = 12


# Logical keyboard events, mapped from Flet key names
KEY_BINDINGS: Dict[str, str] = {
    "Arrow Right": "next",
    "Arrow Left": "previous",
    "Arrow Up": "toggle_learned",
    "Arrow Down": "toggle_learned",
}


class ReviewView:
    """
    Flashcard review screen bound to a ReviewSession.

    The view keeps no review state of its own: every handler calls into
    the session and then re-renders.
    """

    def __init__(
        self,
        page: ft.Page,
        session: Optional[ReviewSession] = None,
        repository: Optional[WordFileRepository] = None,
    ) -> None:
        """
        Initialize the Review view.

        Args:
            page: Flet page instance for updates
            session: Review session to display
            repository: File storage for import and export
        """
        self.page = page
        self._settings = SettingsManager()
        self.session = session or ReviewSession(
            learn_favorites=self._settings.get("LEARN_FAVORITES", True),
        )
        self.repository = repository or WordFileRepository(
            export_dir=self._settings.get("EXPORT_DIR"),
        )

        # UI References
        self._progress_text: Optional[ft.Text] = None
        self._actions_row: Optional[ft.Row] = None
        self._card_area: Optional[ft.Container] = None
        self._dialog: Optional[ft.AlertDialog] = None

        self._container = self._build_view()
        self._render()

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    # ==================== Layout ====================

    def _build_view(self) -> ft.Container:
        """Build the review layout: header, card, footer buttons."""
        self._progress_text = ft.Text(
            "0/0",
            size=28,
            weight=ft.FontWeight.BOLD,
            color=DesignTokens.TEXT_SECONDARY,
        )
        self._actions_row = ft.Row(spacing=DesignTokens.SPACING_SM)

        header = ft.Row(
            controls=[
                ft.Container(expand=True),
                self._progress_text,
                ft.Container(content=self._actions_row, expand=True, alignment=ft.Alignment(1, 0)),
            ],
        )

        self._card_area = ft.Container(
            expand=True,
            alignment=ft.Alignment(0, 0),
        )

        footer = ft.Row(
            controls=[
                self._footer_button("Import", ft.Icons.UPLOAD_FILE, ft.Colors.BLUE_700, self._open_import_dialog),
                self._footer_button("Export", ft.Icons.DOWNLOAD, ft.Colors.GREEN_700, self._on_export_click),
                self._footer_button("Jump", ft.Icons.SHORTCUT, ft.Colors.PURPLE_700, self._open_jump_dialog),
            ],
            alignment=ft.MainAxisAlignment.END,
            spacing=DesignTokens.SPACING_SM,
        )

        return ft.Container(
            content=ft.Column(
                controls=[header, self._card_area, footer],
                expand=True,
            ),
            expand=True,
            padding=DesignTokens.SPACING_LG,
        )

    def _footer_button(self, label: str, icon: str, color: str, on_click: Callable[[], None]) -> ft.ElevatedButton:
        return ft.ElevatedButton(
            content=ft.Row(
                controls=[ft.Icon(icon, size=16), ft.Text(label, size=13)],
                spacing=5,
            ),
            style=ft.ButtonStyle(
                color=ft.Colors.WHITE,
                bgcolor=color,
                shape=ft.RoundedRectangleBorder(radius=8),
            ),
            on_click=lambda _: on_click(),
        )

    def _toggle_button(self, label: str, active: bool, color: str, on_click: Callable[[], None]) -> ft.ElevatedButton:
        return ft.ElevatedButton(
            content=ft.Text(label, size=16, weight=ft.FontWeight.W_600),
            style=ft.ButtonStyle(
                color=DesignTokens.TEXT_PRIMARY if active else DesignTokens.TEXT_SECONDARY,
                bgcolor=color if active else DesignTokens.ACCENT_IDLE,
                shape=ft.RoundedRectangleBorder(radius=8),
            ),
            on_click=lambda _: on_click(),
        )

    # ==================== Rendering ====================

    def _render(self) -> None:
        """Refresh progress, actions and card from the session."""
        session = self.session
        self._progress_text.value = session.progress.label if session.is_loaded else "0/0"

        record = session.current_record
        self._actions_row.controls = []
        if record is not None:
            self._actions_row.controls = [
                self._toggle_button(
                    "Learning favorites" if session.learn_favorites_enabled else "Skipping favorites",
                    session.learn_favorites_enabled,
                    DesignTokens.ACCENT_PRIMARY,
                    self._on_toggle_learn_favorites,
                ),
                self._toggle_button(
                    "Favorited" if record.is_favorited else "Not favorited",
                    record.is_favorited,
                    DesignTokens.ACCENT_FAVORITE,
                    self._on_toggle_favorited,
                ),
                self._toggle_button(
                    "Mastered" if record.is_mastered else "Not mastered",
                    record.is_mastered,
                    DesignTokens.ACCENT_MASTERED,
                    self._on_toggle_mastered,
                ),
            ]

        if record is None:
            self._card_area.content = self._build_message("Import a word file to start", DesignTokens.TEXT_MUTED)
        elif session.is_complete:
            self._card_area.content = self._build_message("🎉 All words are done!", DesignTokens.ACCENT_SUCCESS)
        elif session.stage is ViewStage.WORD:
            self._card_area.content = self._build_word_card(record)
        elif session.stage is ViewStage.DETAILS:
            self._card_area.content = self._build_details_card(record)
        else:
            self._card_area.content = self._build_status_card(record)

    def _refresh(self) -> None:
        self._render()
        self.page.update()

    def _build_message(self, message: str, color: str) -> ft.Text:
        return ft.Text(message, size=20, color=color)

    def _card(self, controls) -> ft.Container:
        return ft.Container(
            content=ft.Column(
                controls=controls,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=0,
                tight=True,
            ),
            bgcolor=DesignTokens.BG_CARD,
            border_radius=DesignTokens.RADIUS_MD,
            border=ft.border.all(1, ft.Colors.WHITE24),
        )

    def _build_word_card(self, record: WordRecord) -> ft.Container:
        return self._card([
            ft.Container(
                content=ft.Text(record.word, size=96, weight=ft.FontWeight.BOLD),
                padding=ft.Padding.symmetric(horizontal=80, vertical=60),
            ),
        ])

    def _build_details_card(self, record: WordRecord) -> ft.Container:
        sizes = {"meaning": 64}
        rows = []
        for field, label in EDITABLE_FIELDS.items():
            value = getattr(record, field)
            rows.append(
                ft.Container(
                    content=ft.Text(
                        value or f"Click to add {label.lower()}",
                        size=sizes.get(field, 26),
                        weight=ft.FontWeight.W_600 if field in sizes else None,
                        color=DesignTokens.TEXT_PRIMARY if value else DesignTokens.TEXT_MUTED,
                        text_align=ft.TextAlign.CENTER,
                    ),
                    padding=ft.Padding.symmetric(horizontal=24, vertical=12),
                    border=ft.border.only(bottom=ft.BorderSide(1, ft.Colors.WHITE10)),
                    tooltip=f"Click to edit {label.lower()}",
                    ink=True,
                    on_click=lambda _, f=field: self._open_edit_dialog(f),
                )
            )
        return self._card(rows)

    def _build_status_card(self, record: WordRecord) -> ft.Container:
        return self._card([
            ft.Container(
                content=ft.Text(
                    "1" if record.is_learned else "0",
                    size=72,
                    weight=ft.FontWeight.BOLD,
                    color=DesignTokens.ACCENT_SUCCESS if record.is_learned else DesignTokens.ACCENT_DANGER,
                ),
                padding=ft.Padding.symmetric(horizontal=80, vertical=60),
            ),
        ])

    # ==================== Keyboard ====================

    def handle_key(self, e: ft.KeyboardEvent) -> None:
        """Dispatch arrow keys to the review loop."""
        if self._dialog is not None:
            return

        action = KEY_BINDINGS.get(e.key)
        if action == "next":
            self.session.next()
        elif action == "previous":
            self.session.previous()
        elif action == "toggle_learned":
            self.session.toggle_learned()
        else:
            return
        self._refresh()

    # ==================== Word actions ====================

    def _on_toggle_learn_favorites(self) -> None:
        enabled = self.session.toggle_learn_favorites()
        self._settings.set("LEARN_FAVORITES", enabled)
        self._refresh()

    def _on_toggle_favorited(self) -> None:
        self.session.toggle_favorited()
        self._refresh()

    def _on_toggle_mastered(self) -> None:
        self.session.toggle_mastered()
        self._refresh()

    # ==================== Dialogs ====================

    def _open_dialog(self, title: str, field: ft.TextField, on_submit: Callable[[str], None]) -> None:
        """Show a single-field prompt dialog."""
        def submit(e):
            value = field.value or ""
            self._close_dialog()
            on_submit(value)

        def cancel(e):
            self._close_dialog()

        field.on_submit = submit
        field.autofocus = True

        self._dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text(title, weight=ft.FontWeight.W_700, size=18),
            content=field,
            actions=[
                ft.TextButton("Cancel", on_click=cancel),
                ft.ElevatedButton("OK", on_click=submit),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        self.page.overlay.append(self._dialog)
        self._dialog.open = True
        self.page.update()

    def _close_dialog(self) -> None:
        if self._dialog is None:
            return
        self._dialog.open = False
        self.page.update()
        if self._dialog in self.page.overlay:
            self.page.overlay.remove(self._dialog)
        self._dialog = None
        self.page.update()

    def _text_field(self, value: str = "", label: str = "") -> ft.TextField:
        return ft.TextField(
            value=value,
            label=label,
            border_color=ft.Colors.WHITE24,
            focused_border_color=ft.Colors.INDIGO_200,
            label_style=ft.TextStyle(color=ft.Colors.WHITE54),
            text_style=ft.TextStyle(color=ft.Colors.WHITE),
            cursor_color=ft.Colors.INDIGO_200,
            width=420,
        )

    def _open_edit_dialog(self, field: str) -> None:
        record = self.session.current_record
        if record is None:
            return

        label = EDITABLE_FIELDS[field]

        def apply(value: str) -> None:
            if self.session.edit_current_field(field, value):
                self._refresh()

        self._open_dialog(f"Edit {label}", self._text_field(getattr(record, field), label), apply)

    def _open_jump_dialog(self) -> None:
        if not self.session.is_loaded:
            self._show_snackbar("Import a word file first.", error=True)
            return

        total = self.session.store.count
        self._open_dialog(
            f"Jump to word (1-{total})",
            self._text_field(label="Index"),
            self._jump,
        )

    def _jump(self, text: str) -> None:
        try:
            self.session.jump(text)
        except ReviewError as e:
            self._show_snackbar(str(e), error=True)
            return
        self._refresh()

    def _open_import_dialog(self) -> None:
        self._open_dialog(
            "Import word file",
            self._text_field(self._settings.get("LAST_IMPORT_PATH", ""), "Path to .txt file"),
            lambda path: self.page.run_task(self._import_file_async, path.strip()),
        )

    # ==================== File I/O ====================

    async def _import_file_async(self, path: str) -> None:
        """Read a word file and load it into the session."""
        if not path:
            self._show_snackbar("Enter a file path.", error=True)
            return

        try:
            text = await self.repository.read_text_async(path)
        except OSError as e:
            logger.error("Import of %s failed: %s", path, e)
            self._show_error_dialog("Import Failed", f"Could not read {path}: {e}")
            return

        count = self.session.import_text(text)
        self._settings.set("LAST_IMPORT_PATH", path)
        self._refresh()
        self._show_snackbar(f"Imported {count} word(s).", icon=ft.Icons.CHECK_CIRCLE)

    def _on_export_click(self) -> None:
        self.page.run_task(self._export_async)

    async def _export_async(self) -> None:
        """Write the current word list to the export directory."""
        try:
            content, filename = self.session.export()
        except ReviewError as e:
            self._show_snackbar(str(e), error=True)
            return

        try:
            path = await self.repository.write_export_async(content, filename)
        except OSError as e:
            logger.error("Export of %s failed: %s", filename, e)
            self._show_error_dialog("Export Failed", f"Could not write {filename}: {e}")
            return

        self.session.store.mark_saved()
        self._show_snackbar(f"Saved {path}", icon=ft.Icons.CHECK_CIRCLE)

    # ==================== Notifications ====================

    def _show_error_dialog(self, title: str, message: str) -> None:
        """Show an error dialog."""
        def close_dialog(e):
            dialog.open = False
            self.page.update()
            if dialog in self.page.overlay:
                self.page.overlay.remove(dialog)
            self.page.update()

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.ERROR_OUTLINE, color=DesignTokens.ACCENT_DANGER, size=28),
                    ft.Text(title, weight=ft.FontWeight.W_700, size=18),
                ],
                spacing=12,
            ),
            content=ft.Text(message, size=14, color=DesignTokens.TEXT_SECONDARY),
            actions=[ft.ElevatedButton("Close", on_click=close_dialog)],
            actions_alignment=ft.MainAxisAlignment.END,
        )

        self.page.overlay.append(dialog)
        dialog.open = True
        self.page.update()

    def _show_snackbar(self, message: str, error: bool = False, icon: str = None) -> None:
        """Show a snackbar notification."""
        snackbar = ft.SnackBar(
            content=ft.Row(
                controls=[
                    ft.Icon(
                        icon or (ft.Icons.ERROR if error else ft.Icons.INFO),
                        color=ft.Colors.WHITE,
                        size=18,
                    ),
                    ft.Text(message, color=ft.Colors.WHITE),
                ],
                spacing=10,
            ),
            bgcolor=ft.Colors.RED_700 if error else ft.Colors.GREEN_700,
            duration=3000,
        )
        # Clean up old snackbars
        for ctrl in list(self.page.overlay):
            if isinstance(ctrl, ft.SnackBar):
                self.page.overlay.remove(ctrl)
        self.page.overlay.append(snackbar)
        snackbar.open = True
        self.page.update()


def create_review_view(page: ft.Page) -> ft.Container:
    """
    Factory function to create the review view.

    Args:
        page: Flet page instance

    Returns:
        Container with the review view
    """
    review = ReviewView(page)
    return review.container
