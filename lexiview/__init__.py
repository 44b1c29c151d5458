"""
Lexiview - Dictionary Lookup Viewer

Looks up words in an online dictionary service and renders the entries
as a navigable document grouped by language and part of speech.
"""

__version__ = "1.0.0"
__author__ = "Lexiview Contributors"
