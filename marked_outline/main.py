"""Marked Outline - GTK4/libadwaita viewer for marked text in Org and Markdown."""

import argparse
import sys
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio

from .dump import dump_outline
from .services import UnsupportedDocumentKind
from .window import OutlineWindow


class Application(Adw.Application):
    """Main application class."""

    def __init__(self, file_path: str):
        super().__init__(
            application_id="dev.markedoutline.MarkedOutline",
            flags=Gio.ApplicationFlags.NON_UNIQUE,
        )
        self.file_path = file_path

    def do_activate(self):
        """Called when the application is activated."""
        self.set_accels_for_action("win.toggle-overview", ["<Control><Shift>o"])
        self.set_accels_for_action("win.refresh-overview", ["F5"])
        self.set_accels_for_action("win.save", ["<Control>s"])

        win = OutlineWindow(application=self, file_path=self.file_path)
        win.present()
        if win.settings.get("overview.show_on_open", False):
            win.overview_button.set_active(True)


def main():
    """Application entry point."""
    parser = argparse.ArgumentParser(description="Marked Outline")
    parser.add_argument("file", type=str, help="Org or Markdown file to open")
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the marked text overview with source offsets and exit",
    )

    # Parse known args to allow GTK to handle its own args
    args, remaining = parser.parse_known_args()

    path = Path(args.file).expanduser().resolve()
    if not path.is_file():
        print(f"Error: File does not exist: {args.file}", file=sys.stderr)
        return 1

    if args.dump:
        try:
            print(dump_outline(path))
        except (OSError, UnicodeDecodeError, UnsupportedDocumentKind) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    app = Application(file_path=str(path))
    # Pass remaining args to GTK
    return app.run([sys.argv[0]] + remaining)


if __name__ == "__main__":
    sys.exit(main())
