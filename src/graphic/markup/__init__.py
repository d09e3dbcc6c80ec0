"""Label markup rendering (TeX-ish source to display HTML)."""

from .html import check_markup, fallback_html, to_html

__all__ = ["to_html", "check_markup", "fallback_html"]
