"""Tokenize, parse and render a compact markup language as HTML pages."""

__version__ = "0.3.0"