"""Renderers turning search results into display text."""

from minigrep.renderers.text import colorize_ranges, format_file_header, format_line, render_matches

__all__ = ["colorize_ranges", "format_file_header", "format_line", "render_matches"]
