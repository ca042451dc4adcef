"""Unit tests for legacy site parsing."""

from bs4 import BeautifulSoup

from conftest import mountain_page, content_page
from migration.legacy_parser import (
    ACTIVITY_FILES,
    MOUNTAIN_SKIP_FILES,
    PLACE_FILES,
    extract_subtitle,
    extract_title,
    find_accordion_section,
    get_mountain_files,
    parse_content_page,
    parse_gaelic_line,
    parse_mountain_html,
    parse_starting_points,
)


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------

class TestGetMountainFiles:
    def test_skips_non_mountain_pages(self, legacy_site):
        names = [p.name for p in get_mountain_files(legacy_site)]
        assert names == ["slieve-bearnagh.html", "slieve-donard.html"]

    def test_missing_directory(self, tmp_path):
        assert get_mountain_files(tmp_path / "nope") == []

    def test_content_pages_are_skipped(self):
        for name in ("fell-running.html", "mourne-wall.html", "silent-valley.html"):
            assert name in MOUNTAIN_SKIP_FILES

    def test_fixed_content_lists(self):
        assert len(ACTIVITY_FILES) == 7
        assert len(PLACE_FILES) == 7
        assert "spelga-dam.html" in PLACE_FILES


# ---------------------------------------------------------------------------
# Accordion lookup
# ---------------------------------------------------------------------------

class TestFindAccordionSection:
    def test_by_heading_text(self):
        soup = BeautifulSoup(mountain_page(), "html.parser")
        section = find_accordion_section(soup, "start", 0)
        assert "Donard Car Park" in section.get_text()

    def test_heading_found_out_of_order(self):
        html = mountain_page(sections=[
            ("Where can I start from?", "<p>start here</p>"),
            ("Profile", "<p>Height: 500m</p>"),
        ])
        soup = BeautifulSoup(html, "html.parser")
        assert "Height" in find_accordion_section(soup, "profile", 0).get_text()

    def test_positional_fallback(self):
        html = mountain_page(sections=[("One", "<p>a</p>"), ("Two", "<p>b</p>"), ("Three", "<p>c</p>")])
        soup = BeautifulSoup(html, "html.parser")
        assert find_accordion_section(soup, "start", 2).get_text() == "c"

    def test_missing(self):
        soup = BeautifulSoup(mountain_page(sections=[("One", "<p>a</p>")]), "html.parser")
        assert find_accordion_section(soup, "start", 2) is None


# ---------------------------------------------------------------------------
# Mountain pages
# ---------------------------------------------------------------------------

class TestParseGaelicLine:
    def test_split_on_first_colon(self):
        assert parse_gaelic_line("Sliabh Bearnach: Gapped: Mountain") == ("Sliabh Bearnach", "Gapped: Mountain")

    def test_no_colon(self):
        assert parse_gaelic_line("Slieve Donard") == (None, None)


class TestParseStartingPoints:
    def _section(self, html):
        return BeautifulSoup(f"<div>{html}</div>", "html.parser").div

    def test_unnamed_link_gets_default_name(self):
        points = parse_starting_points(self._section(
            '<p><a href="https://maps.google.com/maps?ll=54.1,-5.9"></a> Lay-by</p>'
        ))
        assert points[0]["name"] == "Starting Point 1"
        assert points[0]["latitude"] == 54.1

    def test_non_map_links_ignored(self):
        points = parse_starting_points(self._section('<p><a href="https://example.com">Elsewhere</a></p>'))
        assert points == []

    def test_none_section(self):
        assert parse_starting_points(None) == []


class TestParseMountainHtml:
    def test_full_page(self, legacy_site):
        parsed = parse_mountain_html(legacy_site / "slieve-donard.html")
        mountain = parsed["mountain"]

        assert mountain["slug"] == "slieve-donard"
        assert mountain["name"] == "Slieve Donard"
        assert mountain["gaelic_name"] == "Sliabh Dhónairt"
        assert mountain["meaning"] == "Mountain of (St.) Domhangart"
        assert mountain["height"] == 850
        assert mountain["terrain"] == "Rocky paths and steep slopes"
        assert mountain["views"] == "Panoramic views of the coast"
        assert mountain["region"] == "Eastern Mournes"
        assert mountain["description"] == "The highest mountain in Northern Ireland."
        assert mountain["seo_description"] == mountain["description"]
        assert mountain["seo_title"] == "Slieve Donard - ExploreTheMournes - Mourne Mountains"
        assert mountain["published"] is True

    def test_starting_points(self, legacy_site):
        points = parse_mountain_html(legacy_site / "slieve-donard.html")["starting_points"]

        assert [p["name"] for p in points] == ["Donard Car Park", "Bloody Bridge"]
        assert [p["display_order"] for p in points] == [1, 2]
        assert points[0]["latitude"] == 54.219725
        assert points[0]["longitude"] == -5.882986
        assert points[0]["description"] == "Follow the Glen River path."
        assert points[1]["latitude"] is None
        assert points[1]["longitude"] is None

    def test_missing_sections(self, legacy_site):
        parsed = parse_mountain_html(legacy_site / "slieve-bearnagh.html")
        assert parsed["mountain"]["height"] == 739
        assert parsed["mountain"]["terrain"] is None
        assert parsed["starting_points"] == []

    def test_title_falls_back_to_filename(self, tmp_path):
        page = tmp_path / "chimney-rock.html"
        page.write_text("<html><body><div id='readmore'></div></body></html>", encoding="utf-8")
        parsed = parse_mountain_html(page)
        assert parsed["mountain"]["name"] == "chimney-rock"
        assert parsed["mountain"]["gaelic_name"] is None
        assert parsed["mountain"]["seo_title"] is None

    def test_unreadable_file(self, tmp_path):
        assert parse_mountain_html(tmp_path / "missing.html") is None


# ---------------------------------------------------------------------------
# Content pages
# ---------------------------------------------------------------------------

class TestContentPageHelpers:
    def test_title_from_title_tag(self):
        soup = BeautifulSoup("<title>Weather - The Mourne Mountains</title>", "html.parser")
        assert extract_title(soup) == "Weather"

    def test_long_subtitle_dropped(self):
        soup = BeautifulSoup(f"<h2>Tips</h2><p>{'x' * 120}</p>", "html.parser")
        assert extract_subtitle(soup) is None

    def test_no_h2_subtitle(self):
        assert extract_subtitle(BeautifulSoup("<p>text</p>", "html.parser")) is None


class TestParseContentPage:
    def test_full_page(self, legacy_site):
        parsed = parse_content_page(legacy_site / "fell-running.html")

        assert parsed["slug"] == "fell-running"
        assert parsed["title"] == "Fell Running"

        content = parsed["content"]
        assert content["subtitle"] == "Racing over the Mournes"
        assert content["sections"] == [{
            "type": "section",
            "title": "About",
            "content": '<p>Runs on <img src="running/race.jpg"/> open hill.</p>',
        }]
        assert content["gallery_images"] == [
            "content-images/running/one.webp",
            "content-images/running/two.webp",
        ]
        assert content["background_image_path"] == "backgrounds/backgrounds/running-bg.webp"

    def test_no_gallery_or_background(self, legacy_site):
        content = parse_content_page(legacy_site / "mourne-wall.html")["content"]
        assert content["gallery_images"] == []
        assert content["background_image_path"] is None

    def test_unreadable_file(self, tmp_path):
        assert parse_content_page(tmp_path / "missing.html") is None
