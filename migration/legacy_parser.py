"""
Legacy Site Parser

Extracts structured records from the static HTML pages of the old
ExploreTheMournes site: mountain profiles with their starting points, and
activity/place pages made of accordion sections and photo galleries.
"""

import logging
import re
from pathlib import Path

from bs4 import BeautifulSoup

from migration.image_pipeline import legacy_reference_to_storage_path
from utils.text_helpers import slugify, clean_text, extract_height, extract_coordinates

logger = logging.getLogger(__name__)

# Top-level pages that are not mountain profiles
MOUNTAIN_SKIP_FILES = frozenset([
    'index.html',
    'contact.html',
    'tips.html',
    'weather.html',
    'introduction.html',
    'maps.html',
    'fell-running.html',
    'hikingclubs.html',
    'mournes-triathlons.html',
    'mountaincode.html',
    'game-of-thrones.html',
    'mourne-wall.html',
    'silent-valley.html',
])

ACTIVITY_FILES = [
    'fell-running.html',
    'hikingclubs.html',
    'mournes-triathlons.html',
    'mountaincode.html',
    'tips.html',
    'introduction.html',
    'weather.html',
]

PLACE_FILES = [
    'game-of-thrones.html',
    'mourne-wall.html',
    'silent-valley.html',
    'spelga-dam.html',
    'lough-shannagh.html',
    'devils-coachroad.html',
    'windy-gap.html',
]

TITLE_SUFFIX = re.compile(r'\s*-\s*ExploreTheMournes\s*-\s*Mourne Mountains')
SUBTITLE_MAX_LENGTH = 100

# Fallback positions of the mountain accordion sections
PROFILE_SECTION_INDEX = 0
STARTING_POINTS_SECTION_INDEX = 2


def load_html(file_path):
    return BeautifulSoup(Path(file_path).read_text(encoding='utf-8'), 'html.parser')


def get_mountain_files(site_path):
    """
    Get all mountain profile pages from the legacy site.

    Args:
        site_path (Path): Root of the legacy site

    Returns:
        list: Sorted paths of top-level .html files not in the skip list
    """
    site_path = Path(site_path)
    if not site_path.is_dir():
        logger.error(f"Legacy site directory not found: {site_path}")
        return []

    return sorted(
        entry for entry in site_path.iterdir()
        if entry.is_file()
        and entry.suffix == '.html'
        and entry.name not in MOUNTAIN_SKIP_FILES
    )


# ---------------------------------------------------------------------------
# Accordion sections
# ---------------------------------------------------------------------------

def iter_accordion_sections(soup):
    """
    Yield (heading, body) pairs from the #readmore accordion.

    Each heading is a direct <a> child followed immediately by a <div>.
    Headings without a body div are skipped.
    """
    for heading in soup.select('#readmore > a'):
        body = heading.find_next_sibling()
        if body is not None and body.name == 'div':
            yield heading, body


def find_accordion_section(soup, keyword, fallback_index):
    """
    Find an accordion body by heading text, falling back to its position.

    Args:
        soup (BeautifulSoup): Parsed page
        keyword (str): Case-insensitive text expected in the heading
        fallback_index (int): Position of the section in legacy pages

    Returns:
        Tag or None: The section body
    """
    keyword = keyword.lower()
    for heading, body in iter_accordion_sections(soup):
        if keyword in heading.get_text().lower():
            return body

    bodies = soup.select('#readmore > div')
    if len(bodies) > fallback_index:
        logger.debug(f"No '{keyword}' heading, using section {fallback_index}")
        return bodies[fallback_index]
    return None


# ---------------------------------------------------------------------------
# Mountain pages
# ---------------------------------------------------------------------------

def parse_gaelic_line(text):
    """
    Split "Sliabh Dhónairt: Mountain of (St.) Domhangart" into name and meaning.

    Returns:
        tuple: (gaelic_name, meaning), both None when there is no colon
    """
    if ':' not in text:
        return None, None
    gaelic_name, meaning = text.split(':', 1)
    return gaelic_name.strip() or None, meaning.strip() or None


def parse_profile(section):
    profile = {'height': None, 'terrain': None, 'views': None, 'region': None}
    if section is None:
        return profile

    for paragraph in section.find_all('p'):
        text = paragraph.get_text()

        if 'Height:' in text:
            profile['height'] = extract_height(text)
        if 'Terrain:' in text:
            profile['terrain'] = clean_text(re.sub(r'Terrain:\s*', '', text, flags=re.IGNORECASE))
        if 'Views:' in text:
            profile['views'] = clean_text(re.sub(r'Views:\s*', '', text, flags=re.IGNORECASE))
        if 'Region:' in text or 'Location:' in text:
            profile['region'] = clean_text(
                re.sub(r'(?:Region|Location):\s*', '', text, flags=re.IGNORECASE)
            )

    return profile


def parse_starting_points(section):
    """
    Extract starting points from the map links of a section.

    Returns:
        list: Starting point dictionaries in page order
    """
    points = []
    if section is None:
        return points

    for index, link in enumerate(section.select('a[href*="maps.google"]'), start=1):
        maps_url = link.get('href', '')
        name = link.get_text().strip() or f"Starting Point {index}"
        coords = extract_coordinates(maps_url)

        parent_text = link.parent.get_text() if link.parent else ''
        description = clean_text(parent_text.replace(name, '', 1))

        points.append({
            'name': name,
            'description': description or None,
            'latitude': coords['lat'] if coords else None,
            'longitude': coords['lng'] if coords else None,
            'google_maps_url': maps_url,
            'difficulty': None,
            'display_order': index,
        })

    return points


def parse_mountain_html(file_path):
    """
    Parse a single legacy mountain page.

    Args:
        file_path (Path): Mountain HTML file, e.g. "slieve-donard.html"

    Returns:
        dict or None: {'mountain': dict, 'starting_points': list}, None if parsing failed
    """
    file_path = Path(file_path)
    try:
        soup = load_html(file_path)

        title = soup.title.get_text().strip() if soup.title else ''
        name = TITLE_SUFFIX.sub('', title).strip() or file_path.stem

        first_h2 = soup.find('h2')
        gaelic_name, meaning = parse_gaelic_line(first_h2.get_text().strip() if first_h2 else '')

        profile = parse_profile(find_accordion_section(soup, 'profile', PROFILE_SECTION_INDEX))

        meta = soup.find('meta', attrs={'name': 'description'})
        meta_description = meta.get('content') if meta else None
        meta_description = meta_description or None

        starting_points = parse_starting_points(
            find_accordion_section(soup, 'start', STARTING_POINTS_SECTION_INDEX)
        )

        mountain = {
            'slug': file_path.stem,
            'name': name,
            'gaelic_name': gaelic_name,
            'meaning': meaning,
            'height': profile['height'],
            'terrain': profile['terrain'],
            'views': profile['views'],
            'description': meta_description,
            'region': profile['region'],
            'seo_title': title or None,
            'seo_description': meta_description,
            'published': True,
        }

        return {'mountain': mountain, 'starting_points': starting_points}

    except Exception as e:
        logger.error(f"Error parsing {file_path}: {e}")
        return None


# ---------------------------------------------------------------------------
# Activity and place pages
# ---------------------------------------------------------------------------

def extract_title(soup):
    h2 = soup.find('h2')
    if h2 and h2.get_text().strip():
        return h2.get_text().strip()

    title = soup.title.get_text().strip() if soup.title else ''
    return title.replace('The Mourne Mountains', '').strip(' -')


def extract_subtitle(soup):
    h2 = soup.find('h2')
    if h2 is None:
        return None
    sibling = h2.find_next_sibling()
    text = sibling.get_text().strip() if sibling is not None else ''
    if text and len(text) < SUBTITLE_MAX_LENGTH:
        return text
    return None


def extract_background_image(soup):
    img = soup.select_one('#supersize img')
    if img is None or not img.get('src'):
        return None
    return legacy_reference_to_storage_path(img['src'])


def extract_content_sections(soup):
    """
    Extract accordion sections as {'type', 'title', 'content'} blocks.

    Content is the section's inner HTML with whitespace collapsed and
    "images/" stripped from image sources.
    """
    sections = []
    for heading, body in iter_accordion_sections(soup):
        title = heading.get_text().strip()
        content = ''.join(str(child) for child in body.contents)
        content = content.replace('src="images/', 'src="')
        content = clean_text(content)

        if title and content:
            sections.append({'type': 'section', 'title': title, 'content': content})

    return sections


def extract_gallery_images(soup):
    images = []
    for link in soup.select('a[rel^="prettyPhoto[gallery"]'):
        href = link.get('href') or ''
        if href.startswith('images/'):
            images.append(legacy_reference_to_storage_path(href))
    return images


def parse_content_page(file_path):
    """
    Parse a legacy activity or place page.

    Returns:
        dict or None: slug, title and the JSON content blob, None if parsing failed
    """
    file_path = Path(file_path)
    try:
        soup = load_html(file_path)
        subtitle = extract_subtitle(soup)

        return {
            'slug': slugify(file_path.stem),
            'title': extract_title(soup),
            'content': {
                'subtitle': subtitle,
                'sections': extract_content_sections(soup),
                'gallery_images': extract_gallery_images(soup),
                'background_image_path': extract_background_image(soup),
            },
        }
    except Exception as e:
        logger.error(f"Error parsing {file_path}: {e}")
        return None
