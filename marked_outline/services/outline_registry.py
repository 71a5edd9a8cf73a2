"""Registry holding the named outline documents of the process."""

from ..models import OutlineDocument

OUTLINE_NAME = "*Marked Text Overview*"


class OutlineRegistry:
    """Singleton registry of named outline documents.

    Usage:
        registry = OutlineRegistry.get_instance()
        outline = registry.get_or_create(OUTLINE_NAME)
        registry.destroy(OUTLINE_NAME)
    """

    _instance: "OutlineRegistry | None" = None

    def __init__(self):
        self._documents: dict[str, OutlineDocument] = {}

    @classmethod
    def get_instance(cls) -> "OutlineRegistry":
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, name: str = OUTLINE_NAME) -> OutlineDocument | None:
        """Get a live outline by name, or None."""
        return self._documents.get(name)

    def get_or_create(self, name: str = OUTLINE_NAME) -> OutlineDocument:
        """Get the outline with this name, creating an empty one if needed."""
        outline = self._documents.get(name)
        if outline is None:
            outline = OutlineDocument(name=name)
            self._documents[name] = outline
        return outline

    def destroy(self, name: str = OUTLINE_NAME) -> bool:
        """Destroy an outline. Returns True if one existed."""
        outline = self._documents.pop(name, None)
        if outline is None:
            return False
        outline.killed = True
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._documents
