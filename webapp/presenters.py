"""
Page Presenters

Projects backend rows into the context the templates render: accordion
sections, gallery slides, map markers and page metadata.
"""

from migration.storage import public_url

SITE_NAME = 'Explore the Mournes'
FEATURED_COUNT = 6
HIGH_PEAK_MIN = 700
MEDIUM_PEAK_MIN = 500

# Centre of the Mourne Mountains (lat, lng)
DEFAULT_MAP_CENTER = (54.1693, -5.9193)
DEFAULT_MAP_ZOOM = 12

CONTACT_SUBJECTS = [
    'General Enquiry',
    'Mountain Information',
    'Photo Submission',
    'Correction / Update',
    'Other',
]


def image_url(storage_path):
    return public_url(storage_path) if storage_path else ''


def featured_mountains(mountains, count=FEATURED_COUNT):
    """Highest mountains first."""
    return sorted(mountains, key=lambda m: m.get('height') or 0, reverse=True)[:count]


def highest_peak(mountains):
    return max((m.get('height') or 0 for m in mountains), default=0)


def group_by_height(mountains):
    """
    Split mountains into high (700m+), medium (500-699m) and lower (<500m) peaks.

    Mountains with no recorded height are left out of every group.
    """
    groups = {'high': [], 'medium': [], 'lower': []}
    for mountain in mountains:
        height = mountain.get('height')
        if not height:
            continue
        if height >= HIGH_PEAK_MIN:
            groups['high'].append(mountain)
        elif height >= MEDIUM_PEAK_MIN:
            groups['medium'].append(mountain)
        else:
            groups['lower'].append(mountain)
    return groups


def mountain_metadata(mountain):
    return {
        'title': f"{mountain['name']} | {mountain.get('gaelic_name') or SITE_NAME}",
        'description': (
            mountain.get('meaning')
            or mountain.get('views')
            or f"Discover {mountain['name']} in the Mourne Mountains"
        ),
    }


def content_metadata(page):
    content = page.get('content') or {}
    return {
        'title': page.get('seo_title') or page['title'],
        'description': page.get('seo_description') or content.get('subtitle') or page['title'],
    }


def mountain_sections(mountain):
    """
    Build the accordion sections of a mountain page.

    Profile is always present and open; Photograph appears when the
    mountain has a photographer credit; the starting points section
    appears when the mountain has any.
    """
    sections = [{
        'title': 'Profile',
        'kind': 'profile',
        'open': True,
        'fields': [
            (label, value) for label, value in (
                ('Height', f"{mountain['height']}m" if mountain.get('height') else None),
                ('Terrain', mountain.get('terrain')),
                ('Views', mountain.get('views')),
                ('Region', mountain.get('region')),
            ) if value
        ],
    }]

    if mountain.get('photographer_credit'):
        sections.append({
            'title': 'Photograph',
            'kind': 'credit',
            'open': False,
            'text': mountain['photographer_credit'],
        })

    if mountain.get('starting_points'):
        sections.append({
            'title': 'Where can I start from?',
            'kind': 'starting_points',
            'open': False,
            'points': mountain['starting_points'],
        })

    return sections


def content_sections(page):
    """Accordion sections of an activity/place page; the first one starts open."""
    sections = (page.get('content') or {}).get('sections') or []
    return [
        {'title': s['title'], 'kind': 'html', 'open': index == 0, 'html': s['content']}
        for index, s in enumerate(sections)
    ]


def gallery_slides(images):
    """
    Convert image rows into gallery/lightbox slides.
    """
    slides = []
    for index, image in enumerate(images, start=1):
        title = image.get('title')
        slides.append({
            'src': image_url(image['storage_path']),
            'alt': image.get('alt_text') or title or f"Image {index}",
            'title': title,
            'description': image.get('caption'),
        })
    return slides


def content_gallery_images(page):
    """Turn a page's gallery storage paths into image-like rows."""
    paths = (page.get('content') or {}).get('gallery_images') or []
    return [
        {
            'id': f"gallery-{index}",
            'storage_path': path,
            'title': f"{page['title']} - Image {index + 1}",
            'caption': None,
            'photographer_credit': None,
            'alt_text': f"{page['title']} - Image {index + 1}",
        }
        for index, path in enumerate(paths)
    ]


def background_image_url(page):
    path = (page.get('content') or {}).get('background_image_path')
    return image_url(path) if path else None


def located_points(points):
    return [p for p in points if p.get('latitude') and p.get('longitude')]


def map_center(points):
    """
    Average position of the points that have coordinates.

    Returns:
        tuple: (lat, lng), DEFAULT_MAP_CENTER when no point is located
    """
    located = located_points(points)
    if not located:
        return DEFAULT_MAP_CENTER
    lat = sum(p['latitude'] for p in located) / len(located)
    lng = sum(p['longitude'] for p in located) / len(located)
    return (lat, lng)


def map_markers(points):
    """Marker payload for the map widget, one per located point."""
    return [
        {
            'lng': p['longitude'],
            'lat': p['latitude'],
            'name': p['name'],
            'description': p.get('description'),
            'difficulty': p.get('difficulty'),
            'google_maps_url': p.get('google_maps_url'),
        }
        for p in located_points(points)
    ]


def map_context(points, zoom=DEFAULT_MAP_ZOOM):
    lat, lng = map_center(points)
    return {
        'center': [lng, lat],  # Mapbox expects [lng, lat]
        'zoom': zoom,
        'markers': map_markers(points),
    }
