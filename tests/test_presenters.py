"""Unit tests for the page presenters."""

import pytest

from webapp import presenters


MOUNTAINS = [
    {'name': 'Slieve Donard', 'height': 850},
    {'name': 'Slieve Binnian', 'height': 747},
    {'name': 'Slieve Bearnagh', 'height': 739},
    {'name': 'Slieve Meelmore', 'height': 680},
    {'name': 'Slieve Martin', 'height': 500},
    {'name': 'Hen Mountain', 'height': 354},
    {'name': 'Unmeasured Hill', 'height': None},
]


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

class TestListings:
    def test_featured_highest_first(self):
        featured = presenters.featured_mountains(MOUNTAINS, count=3)
        assert [m['name'] for m in featured] == ['Slieve Donard', 'Slieve Binnian', 'Slieve Bearnagh']

    def test_highest_peak(self):
        assert presenters.highest_peak(MOUNTAINS) == 850

    def test_highest_peak_empty(self):
        assert presenters.highest_peak([]) == 0

    def test_height_groups(self):
        groups = presenters.group_by_height(MOUNTAINS)
        assert [m['name'] for m in groups['high']] == ['Slieve Donard', 'Slieve Binnian', 'Slieve Bearnagh']
        assert [m['name'] for m in groups['medium']] == ['Slieve Meelmore', 'Slieve Martin']
        assert [m['name'] for m in groups['lower']] == ['Hen Mountain']


# ---------------------------------------------------------------------------
# Metadata and accordion sections
# ---------------------------------------------------------------------------

class TestMountainPage:
    def test_metadata(self):
        meta = presenters.mountain_metadata({'name': 'Slieve Donard', 'gaelic_name': 'Sliabh Dhónairt', 'meaning': None})
        assert meta['title'] == 'Slieve Donard | Sliabh Dhónairt'
        assert meta['description'] == 'Discover Slieve Donard in the Mourne Mountains'

    def test_profile_only(self):
        sections = presenters.mountain_sections({'name': 'X', 'height': 850, 'terrain': 'Rocky', 'starting_points': []})
        assert len(sections) == 1
        assert sections[0]['open'] is True
        assert sections[0]['fields'] == [('Height', '850m'), ('Terrain', 'Rocky')]

    def test_all_sections(self):
        sections = presenters.mountain_sections({
            'name': 'X',
            'photographer_credit': 'Photo by A. Walker',
            'starting_points': [{'name': 'Car Park'}],
        })
        assert [s['kind'] for s in sections] == ['profile', 'credit', 'starting_points']
        assert [s['open'] for s in sections] == [True, False, False]


class TestContentPage:
    PAGE = {
        'title': 'Fell Running',
        'content': {
            'subtitle': 'Racing',
            'sections': [
                {'type': 'section', 'title': 'About', 'content': '<p>a</p>'},
                {'type': 'section', 'title': 'Clubs', 'content': '<p>b</p>'},
            ],
            'gallery_images': ['content-images/running/one.webp', 'content-images/running/two.webp'],
            'background_image_path': 'backgrounds/running-bg.webp',
        },
    }

    def test_metadata_falls_back_to_subtitle(self):
        assert presenters.content_metadata(self.PAGE) == {'title': 'Fell Running', 'description': 'Racing'}

    def test_first_section_open(self):
        sections = presenters.content_sections(self.PAGE)
        assert [s['open'] for s in sections] == [True, False]
        assert sections[1]['html'] == '<p>b</p>'

    def test_no_content(self):
        assert presenters.content_sections({'title': 'Empty', 'content': None}) == []
        assert presenters.background_image_url({'title': 'Empty', 'content': {}}) is None

    def test_gallery(self, supabase_url):
        slides = presenters.gallery_slides(presenters.content_gallery_images(self.PAGE))
        assert slides[1] == {
            'src': f"{supabase_url}/storage/v1/object/public/content-images/running/two.webp",
            'alt': 'Fell Running - Image 2',
            'title': 'Fell Running - Image 2',
            'description': None,
        }

    def test_background(self, supabase_url):
        assert presenters.background_image_url(self.PAGE) == \
            f"{supabase_url}/storage/v1/object/public/backgrounds/running-bg.webp"


# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------

class TestMap:
    POINTS = [
        {'name': 'A', 'latitude': 54.0, 'longitude': -6.0},
        {'name': 'B', 'latitude': 54.2, 'longitude': -5.8},
        {'name': 'C', 'latitude': None, 'longitude': None},
    ]

    def test_center_is_average_of_located_points(self):
        lat, lng = presenters.map_center(self.POINTS)
        assert lat == pytest.approx(54.1)
        assert lng == pytest.approx(-5.9)

    def test_default_center(self):
        assert presenters.map_center([{'name': 'C', 'latitude': None, 'longitude': None}]) == \
            presenters.DEFAULT_MAP_CENTER

    def test_context(self):
        context = presenters.map_context(self.POINTS)
        assert context['center'] == [pytest.approx(-5.9), pytest.approx(54.1)]
        assert context['zoom'] == presenters.DEFAULT_MAP_ZOOM
        assert [m['name'] for m in context['markers']] == ['A', 'B']
