"""Lift - generate llms.txt from a directory of Markdown and HTML files."""

__version__ = "0.3.0"
