"""Main application window: a source editor with the overview beside it."""

from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gtk, Gio

from .models import OutlineDocument
from .services import OverviewMode, SourceDocument
from .services.settings_service import SettingsService
from .services.toast_service import ToastService
from .widgets import OutlineView, SourceEditor


class OutlineWindow(Adw.ApplicationWindow):
    """Window editing one document, with a toggleable marked text overview."""

    def __init__(self, file_path: str, **kwargs):
        super().__init__(**kwargs)

        self.file_path = file_path
        self.settings = SettingsService.get_instance()
        self.mode = OverviewMode(
            present=self._present_outline,
            notify_error=ToastService.show_error,
            title=self.settings.get("overview.title"),
            bullet=self.settings.get("overview.bullet"),
        )
        self._syncing_toggle = False

        self._setup_window()
        self._build_ui()
        self._setup_actions()

    def _setup_window(self):
        """Configure window properties."""
        self.set_title(Path(self.file_path).name)
        self.set_default_size(
            self.settings.get("window.width", 1100),
            self.settings.get("window.height", 750),
        )
        if self.settings.get("window.maximized", False):
            self.maximize()
        self.connect("close-request", self._on_close_request)

    def _build_ui(self):
        """Build header bar, editor and outline pane."""
        toolbar_view = Adw.ToolbarView()

        header = Adw.HeaderBar()
        self.overview_button = Gtk.ToggleButton()
        self.overview_button.set_icon_name("view-list-symbolic")
        self.overview_button.set_tooltip_text("Marked text overview (Ctrl+Shift+O)")
        self.overview_button.connect("toggled", self._on_overview_toggled)
        header.pack_start(self.overview_button)

        refresh_btn = Gtk.Button()
        refresh_btn.set_icon_name("view-refresh-symbolic")
        refresh_btn.set_tooltip_text("Refresh overview (F5)")
        refresh_btn.set_action_name("win.refresh-overview")
        header.pack_start(refresh_btn)

        save_btn = Gtk.Button()
        save_btn.set_icon_name("document-save-symbolic")
        save_btn.set_tooltip_text("Save (Ctrl+S)")
        save_btn.set_action_name("win.save")
        header.pack_end(save_btn)
        toolbar_view.add_top_bar(header)

        self.editor = SourceEditor(self.file_path)
        self.editor.connect("modified-changed", self._on_modified_changed)
        self.editor.connect("cursor-moved", self._on_cursor_moved)

        self.outline_view = OutlineView()
        self.outline_view.connect("jump-requested", self._on_jump_requested)
        self.outline_view.set_visible(False)

        self.paned = Gtk.Paned(orientation=Gtk.Orientation.HORIZONTAL)
        self.paned.set_start_child(self.editor)
        self.paned.set_end_child(self.outline_view)
        self.paned.set_resize_end_child(False)
        self.paned.set_shrink_end_child(False)

        self.toast_overlay = Adw.ToastOverlay()
        self.toast_overlay.set_child(self.paned)
        ToastService.init(self.toast_overlay)

        toolbar_view.set_content(self.toast_overlay)
        self.set_content(toolbar_view)

        self.settings.connect("changed", self._on_setting_changed)

    def _setup_actions(self):
        """Register window actions used by buttons and shortcuts."""
        for name, callback in (
            ("toggle-overview", lambda *args: self.overview_button.set_active(not self.mode.active)),
            ("refresh-overview", lambda *args: self.refresh_overview()),
            ("save", lambda *args: self.editor.save()),
        ):
            action = Gio.SimpleAction.new(name, None)
            action.connect("activate", callback)
            self.add_action(action)

    @property
    def source(self) -> SourceDocument:
        return self.editor.source

    def _present_outline(self, source: SourceDocument, outline: OutlineDocument):
        """Show the outline beside its source."""
        self.outline_view.set_outline(outline)
        self.outline_view.set_visible(True)
        width = self.get_width() or self.get_default_size()[0]
        self.paned.set_position(max(width - self.settings.get("overview.width", 320), 0))
        self._set_toggle_state(True)

    def _set_toggle_state(self, active: bool):
        self._syncing_toggle = True
        self.overview_button.set_active(active)
        self._syncing_toggle = False

    def _on_overview_toggled(self, button):
        if self._syncing_toggle:
            return
        if button.get_active() != self.mode.active:
            self.mode.toggle(self.source)
        if not self.mode.active:
            self.outline_view.clear()
            self.outline_view.set_visible(False)
            self._set_toggle_state(False)
            self.editor.grab_focus()

    def refresh_overview(self):
        """Rebuild the overview from the editor's current text."""
        if not self.mode.active:
            ToastService.show("Marked text overview is off")
            return
        if self.mode.refresh(self.source) is not None:
            ToastService.show("Overview refreshed")

    def _on_jump_requested(self, outline_view, line: int):
        self.mode.jump(line)

    def _on_cursor_moved(self, editor, offset: int):
        if self.mode.active and self.settings.get("overview.follow_cursor", True):
            self.outline_view.select_entry_for_offset(offset)

    def _on_modified_changed(self, editor, is_modified: bool):
        name = Path(self.file_path).name
        self.set_title(f"● {name}" if is_modified else name)

    def _on_setting_changed(self, settings, key, value):
        if key in ("*", "overview.title", "overview.bullet"):
            self.mode.title = settings.get("overview.title")
            self.mode.bullet = settings.get("overview.bullet")
            if self.mode.active:
                self.mode.refresh(self.source)

    def _on_close_request(self, window):
        """Save window state and drop the overview."""
        self.settings.set("window.maximized", self.is_maximized())
        if not self.is_maximized():
            self.settings.set("window.width", self.get_width())
            self.settings.set("window.height", self.get_height())
        self.editor.close()
        self.mode.disable()
        return False
