import pytest

from marked_outline.services import OutlineRegistry, TextSource


@pytest.fixture
def registry():
    """A private outline registry so tests never share the singleton."""
    return OutlineRegistry()


@pytest.fixture
def org_source():
    # "*bold*" starts at 5, "/it/" at 16
    return TextSource("Some *bold* and /it/.", mode="org", name="notes.org")
