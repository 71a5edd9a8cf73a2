"""Marked Outline - clickable overview of marked text in Org and Markdown documents."""

__version__ = "0.1.0"
