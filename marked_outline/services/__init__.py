from .text_cleaner import clean, strip_delimiter, get_delimiter, DELIMITERS
from .org_parser import parse_org, iter_nodes, OrgNode
from .org_extractor import extract_org_spans
from .markdown_extractor import extract_markdown_spans, MARKDOWN_RULES
from .extraction import extract, resolve_dialect, get_mode_for_file, UnsupportedDocumentKind
from .source_document import SourceDocument
from .text_source import TextSource
from .outline_registry import OutlineRegistry, OUTLINE_NAME
from .overview_builder import build_overview
from .navigator import jump_to_original, NavigationError, NoPositionFound, SourceBufferNotSet, SourceBufferGone
from .overview_mode import OverviewMode

# Not re-exported: settings_service and toast_service require gi

__all__ = [
    "clean",
    "strip_delimiter",
    "get_delimiter",
    "DELIMITERS",
    "parse_org",
    "iter_nodes",
    "OrgNode",
    "extract_org_spans",
    "extract_markdown_spans",
    "MARKDOWN_RULES",
    "extract",
    "resolve_dialect",
    "get_mode_for_file",
    "UnsupportedDocumentKind",
    "SourceDocument",
    "TextSource",
    "OutlineRegistry",
    "OUTLINE_NAME",
    "build_overview",
    "jump_to_original",
    "NavigationError",
    "NoPositionFound",
    "SourceBufferNotSet",
    "SourceBufferGone",
    "OverviewMode",
]
