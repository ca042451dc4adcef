"""
Utility modules for the Explore the Mournes site and migration scripts.
"""

from .text_helpers import slugify, clean_text, extract_height, extract_coordinates

__all__ = ['slugify', 'clean_text', 'extract_height', 'extract_coordinates']
