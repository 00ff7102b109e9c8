"""Markup (XAML) file classification."""

from navgraph.parsers.markup.classifier import classify_markup

__all__ = ["classify_markup"]
