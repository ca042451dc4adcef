"""
Text Helpers

Small string utilities used when turning legacy HTML into records:
slugs, whitespace cleanup, heights and map-link coordinates.
"""

import re

_NON_ALNUM = re.compile(r'[^a-z0-9]+')
_WHITESPACE = re.compile(r'\s+')
_HEIGHT = re.compile(r'(\d+)\s*m(?:etres)?', re.IGNORECASE)
_LL_PARAM = re.compile(r'll=([0-9.-]+),([0-9.-]+)')


def slugify(text):
    """
    Convert a title or filename into a URL-safe slug.

    Args:
        text (str): Source text

    Returns:
        str: Lower-cased slug with runs of other characters collapsed to '-'
    """
    slug = _NON_ALNUM.sub('-', text.lower())
    return slug.strip('-')


def clean_text(text):
    """Collapse whitespace runs to single spaces and strip the ends."""
    return _WHITESPACE.sub(' ', text).strip()


def extract_height(text):
    """
    Extract a height in metres from text like "Height: 850m" or "850 metres".

    Returns:
        int or None: Height in metres
    """
    match = _HEIGHT.search(text)
    return int(match.group(1)) if match else None


def extract_coordinates(url):
    """
    Extract coordinates from a map link's ``ll=lat,lng`` query parameter.

    Example:
        https://maps.google.com/maps?ll=54.219725,-5.882986
        -> {'lat': 54.219725, 'lng': -5.882986}

    Args:
        url (str): Map URL

    Returns:
        dict or None: {'lat': float, 'lng': float}, None for any other URL shape
    """
    if not url:
        return None

    match = _LL_PARAM.search(url)
    if not match:
        return None

    try:
        return {
            'lat': float(match.group(1)),
            'lng': float(match.group(2)),
        }
    except ValueError:
        return None
