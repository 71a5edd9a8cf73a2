"""Toast notification service for user-facing messages."""

import gi

gi.require_version("Adw", "1")

from gi.repository import Adw


class ToastService:
    """Shows toast notifications on the main window.

    Usage:
        # Initialize once in main window
        ToastService.init(toast_overlay)

        # Use anywhere in the app
        ToastService.show("Overview refreshed")
        ToastService.show_error("No marked text position on this line")

    Before init() messages are printed instead.
    """

    _overlay: Adw.ToastOverlay | None = None

    @classmethod
    def init(cls, overlay: Adw.ToastOverlay):
        """Initialize the service with a toast overlay."""
        cls._overlay = overlay

    @classmethod
    def show(cls, message: str, timeout: int = 3):
        """Show an info toast.

        Args:
            message: The message to display
            timeout: Seconds to show (0 = until dismissed)
        """
        if cls._overlay is None:
            print(f"[Toast not initialized] {message}")
            return

        toast = Adw.Toast.new(message)
        toast.set_timeout(timeout)
        cls._overlay.add_toast(toast)

    @classmethod
    def show_error(cls, message: str, timeout: int = 5):
        """Show an error toast with high priority."""
        if cls._overlay is None:
            print(f"[Toast not initialized] ERROR: {message}")
            return

        toast = Adw.Toast.new(message)
        toast.set_timeout(timeout)
        toast.set_priority(Adw.ToastPriority.HIGH)
        cls._overlay.add_toast(toast)
