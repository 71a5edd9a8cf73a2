"""Read-only view of the marked text overview."""

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("GtkSource", "5")

from gi.repository import Gtk, GtkSource, GLib, GObject, Gdk

from ..models import OutlineDocument
from ..services.settings_service import SettingsService


class OutlineView(Gtk.Box):
    """Shows an OutlineDocument and reports activated lines.

    Enter or a double click on a line emits "jump-requested" with the
    0-based outline line.
    """

    __gsignals__ = {
        "jump-requested": (GObject.SignalFlags.RUN_FIRST, None, (int,)),  # outline line
    }

    def __init__(self):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)
        self.set_vexpand(True)
        self._outline: OutlineDocument | None = None
        self._build_ui()

    def _build_ui(self):
        """Build the outline UI."""
        self.buffer = GtkSource.Buffer()
        self.source_view = GtkSource.View(buffer=self.buffer)
        self.source_view.set_editable(False)
        self.source_view.set_cursor_visible(True)
        self.source_view.set_monospace(True)
        self.source_view.set_highlight_current_line(True)
        self.source_view.set_wrap_mode(Gtk.WrapMode.WORD_CHAR)
        self.source_view.set_left_margin(8)
        self.source_view.set_top_margin(8)

        scheme_id = SettingsService.get_instance().get("appearance.syntax_scheme", "Adwaita-dark")
        style_manager = GtkSource.StyleSchemeManager.get_default()
        scheme = style_manager.get_scheme(scheme_id) or style_manager.get_scheme("classic")
        if scheme:
            self.buffer.set_style_scheme(scheme)

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_key_pressed)
        self.source_view.add_controller(key_controller)

        click = Gtk.GestureClick()
        click.connect("pressed", self._on_pressed)
        self.source_view.add_controller(click)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)
        scrolled.set_child(self.source_view)
        self.append(scrolled)

    @property
    def outline(self) -> OutlineDocument | None:
        return self._outline

    def set_outline(self, outline: OutlineDocument):
        """Render an outline, replacing what was shown."""
        self._outline = outline
        self.buffer.set_text(outline.text)

        language = None
        if outline.mode:
            language = GtkSource.LanguageManager.get_default().get_language(outline.mode)
        self.buffer.set_language(language)

        success, line_iter = self.buffer.get_iter_at_line(outline.cursor_line)
        if success:
            self.buffer.place_cursor(line_iter)

    def clear(self):
        """Show nothing."""
        self._outline = None
        self.buffer.set_text("")

    def get_cursor_line(self) -> int:
        """Return the 0-based line of the cursor."""
        return self.buffer.get_iter_at_mark(self.buffer.get_insert()).get_line()

    def select_entry_for_offset(self, offset: int):
        """Move the cursor to the entry of the span at or before offset."""
        if self._outline is None:
            return
        line = self._outline.line_for_offset(offset)
        if line is None:
            return
        success, line_iter = self.buffer.get_iter_at_line(line)
        if success:
            self.buffer.place_cursor(line_iter)
            GLib.idle_add(self._scroll_to_cursor)

    def _scroll_to_cursor(self) -> bool:
        self.source_view.scroll_to_mark(self.buffer.get_insert(), 0.1, False, 0, 0)
        return False  # Don't repeat

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if keyval in (Gdk.KEY_Return, Gdk.KEY_KP_Enter):
            self.emit("jump-requested", self.get_cursor_line())
            return True
        return False

    def _on_pressed(self, gesture, n_press, x, y):
        """Handle double click - jump from the clicked line."""
        if n_press != 2:
            return
        buffer_x, buffer_y = self.source_view.window_to_buffer_coords(
            Gtk.TextWindowType.WIDGET, int(x), int(y)
        )
        success, click_iter = self.source_view.get_iter_at_location(buffer_x, buffer_y)
        if success:
            self.emit("jump-requested", click_iter.get_line())
