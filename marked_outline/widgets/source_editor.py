"""Editable source view for Org and Markdown files."""

from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("GtkSource", "5")

from gi.repository import Gtk, GtkSource, GLib, GObject, Gdk

from ..services import SourceDocument, get_mode_for_file
from ..services.settings_service import SettingsService
from ..services.toast_service import ToastService


class BufferSource(SourceDocument):
    """Source document backed by a SourceEditor's buffer."""

    def __init__(self, editor: "SourceEditor"):
        self._editor = editor

    @property
    def name(self) -> str:
        return Path(self._editor.file_path).name

    def get_text(self) -> str:
        buffer = self._editor.buffer
        return buffer.get_text(buffer.get_start_iter(), buffer.get_end_iter(), True)

    def get_mode(self) -> str | None:
        language = self._editor.buffer.get_language()
        if language is not None:
            return language.get_id()
        return get_mode_for_file(self._editor.file_path)

    def is_alive(self) -> bool:
        return not self._editor.closed

    def get_cursor(self) -> int:
        return self._editor.buffer.props.cursor_position

    def place_cursor(self, offset: int) -> None:
        buffer = self._editor.buffer
        offset = max(0, min(offset, buffer.get_char_count()))
        buffer.place_cursor(buffer.get_iter_at_offset(offset))

    def focus(self) -> None:
        self._editor.grab_focus()

    def reveal(self, offset: int) -> None:
        # Scroll once the view has processed the cursor move
        GLib.idle_add(self._editor.scroll_to_cursor)


class SourceEditor(Gtk.Box):
    """A widget for editing one Org or Markdown file."""

    __gsignals__ = {
        "modified-changed": (GObject.SignalFlags.RUN_FIRST, None, (bool,)),
        "cursor-moved": (GObject.SignalFlags.RUN_FIRST, None, (int,)),  # offset
        "closed": (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def __init__(self, file_path: str):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)
        self.set_vexpand(True)
        self.set_hexpand(True)

        self.file_path = file_path
        self.closed = False
        self._modified = False
        self.source = BufferSource(self)

        self._build_ui()
        self._load_file()

    def _build_ui(self):
        """Build the editor UI."""
        self.settings = SettingsService.get_instance()

        self.buffer = GtkSource.Buffer()
        self.source_view = GtkSource.View(buffer=self.buffer)

        self.source_view.set_editable(True)
        self.source_view.set_cursor_visible(True)
        self.source_view.set_show_line_numbers(True)
        self.source_view.set_monospace(True)
        self.source_view.set_auto_indent(True)
        self.source_view.set_highlight_current_line(True)

        self._apply_settings()
        self.buffer.set_max_undo_levels(10000)

        # GtkSourceView ships a markdown language but none for Org
        mode = get_mode_for_file(self.file_path)
        if mode:
            language = GtkSource.LanguageManager.get_default().get_language(mode)
            if language:
                self.buffer.set_language(language)

        self.settings.connect("changed", self._on_setting_changed)
        self.buffer.connect("changed", self._on_buffer_changed)
        self.buffer.connect("notify::cursor-position", self._on_cursor_position_changed)

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_key_pressed)
        self.source_view.add_controller(key_controller)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)
        scrolled.set_hexpand(True)
        scrolled.set_child(self.source_view)
        self.append(scrolled)

    def _apply_settings(self):
        """Apply scheme, font, tab and wrap settings to the editor."""
        scheme_id = self.settings.get("appearance.syntax_scheme", "Adwaita-dark")
        style_manager = GtkSource.StyleSchemeManager.get_default()
        scheme = style_manager.get_scheme(scheme_id) or style_manager.get_scheme("classic")
        if scheme:
            self.buffer.set_style_scheme(scheme)

        font_family = self.settings.get("editor.font_family", "Monospace")
        font_size = self.settings.get("editor.font_size", 12)
        line_height = self.settings.get("editor.line_height", 1.4)
        css_provider = Gtk.CssProvider()
        css_provider.load_from_string(f"""
            textview {{
                font-family: "{font_family}";
                font-size: {font_size}pt;
                line-height: {line_height};
            }}
        """)
        self.source_view.get_style_context().add_provider(
            css_provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )
        self._css_provider = css_provider  # Keep reference

        self.source_view.set_tab_width(self.settings.get("editor.tab_size", 4))
        self.source_view.set_insert_spaces_instead_of_tabs(self.settings.get("editor.insert_spaces", True))

        word_wrap = self.settings.get("editor.word_wrap", True)
        self.source_view.set_wrap_mode(Gtk.WrapMode.WORD_CHAR if word_wrap else Gtk.WrapMode.NONE)

    def _on_setting_changed(self, settings, key, value):
        if key == "*" or key.startswith("appearance.") or key.startswith("editor."):
            self._apply_settings()

    def _load_file(self):
        """Load file content into buffer."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.buffer.set_text(f"Error loading file: {e}")
            self.source_view.set_editable(False)
            ToastService.show_error(f"Error loading {Path(self.file_path).name}: {e}")
            return

        self.buffer.set_text(content)
        self.buffer.set_modified(False)
        self._modified = False
        self.buffer.place_cursor(self.buffer.get_start_iter())

    def _on_key_pressed(self, controller, keyval, keycode, state):
        """Handle Ctrl+S."""
        if state & Gdk.ModifierType.CONTROL_MASK and keyval == Gdk.KEY_s:
            self.save()
            return True
        return False

    def _on_buffer_changed(self, buffer):
        is_modified = buffer.get_modified()
        if is_modified != self._modified:
            self._modified = is_modified
            self.emit("modified-changed", is_modified)

    def _on_cursor_position_changed(self, buffer, pspec):
        self.emit("cursor-moved", buffer.props.cursor_position)

    def save(self) -> bool:
        """Save the file. Returns True on success."""
        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                f.write(self.source.get_text())
        except OSError as e:
            ToastService.show_error(f"Error saving file: {e}")
            return False

        self.buffer.set_modified(False)
        self._modified = False
        self.emit("modified-changed", False)
        ToastService.show("File saved")
        return True

    @property
    def is_modified(self) -> bool:
        return self._modified

    def grab_focus(self):
        """Focus the editor."""
        self.source_view.grab_focus()

    def scroll_to_cursor(self) -> bool:
        """Scroll the view so the cursor sits in its upper third."""
        self.source_view.scroll_to_mark(self.buffer.get_insert(), 0.2, True, 0.5, 0.3)
        return False  # Don't repeat

    def close(self):
        """Mark the editor closed; its source document stops being alive."""
        if not self.closed:
            self.closed = True
            self.emit("closed")
