"""
Shared fixtures.

The database URL must point at a throwaway SQLite file before any
config module is imported, because the engine is created at import time.
"""

import os
import sys
import tempfile
from pathlib import Path

_DB_DIR = tempfile.mkdtemp(prefix="mournes-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

import pytest

from config.database import engine
from config.models import Base


@pytest.fixture
def db():
    """Fresh empty schema for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def supabase_url(monkeypatch):
    from config import settings
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://example.supabase.co")
    return "https://example.supabase.co"


# ---------------------------------------------------------------------------
# Legacy HTML builders
# ---------------------------------------------------------------------------

def mountain_page(
    title="Slieve Donard - ExploreTheMournes - Mourne Mountains",
    gaelic="Sliabh Dhónairt: Mountain of (St.) Domhangart",
    description="The highest mountain in Northern Ireland.",
    sections=None,
):
    if sections is None:
        sections = [
            ("Profile", """
                <p>Height: 850m</p>
                <p>Terrain: Rocky   paths and
                   steep slopes</p>
                <p>Views: Panoramic views of the coast</p>
                <p>Region: Eastern Mournes</p>
            """),
            ("Photograph", "<p>Photo by A. Walker</p>"),
            ("Where can I start from?", """
                <p><a href="https://maps.google.com/maps?ll=54.219725,-5.882986">Donard Car Park</a>
                   Follow the Glen River path.</p>
                <p><a href="https://maps.google.com/maps?q=bloody+bridge">Bloody Bridge</a>
                   Coastal approach.</p>
            """),
        ]
    body = "".join(f'<a href="#">{heading}</a><div>{inner}</div>' for heading, inner in sections)
    return f"""<html><head><title>{title}</title>
<meta name="description" content="{description}"></head>
<body><h2>{gaelic}</h2><div id="readmore">{body}</div></body></html>"""


def content_page(
    title="Fell Running",
    subtitle="Racing over the Mournes",
    sections=(("About", '<p>Runs  on <img src="images/running/race.jpg"> open hill.</p>'),),
    gallery=("images/running/one.jpg", "images/running/two.png"),
    background="images/backgrounds/running-bg.jpg",
):
    body = "".join(f'<a href="#">{heading}</a><div>{inner}</div>' for heading, inner in sections)
    links = "".join(f'<a rel="prettyPhoto[gallery1]" href="{href}">x</a>' for href in gallery)
    supersize = f'<div id="supersize"><img src="{background}"></div>' if background else ""
    return f"""<html><head><title>{title} - The Mourne Mountains</title></head>
<body>{supersize}<h2>{title}</h2><p>{subtitle}</p>
<div id="readmore">{body}</div><div class="gallery">{links}</div></body></html>"""


@pytest.fixture
def legacy_site(tmp_path):
    """A small legacy site with two mountains, a skipped page and content pages."""
    (tmp_path / "slieve-donard.html").write_text(mountain_page(), encoding="utf-8")
    (tmp_path / "slieve-bearnagh.html").write_text(
        mountain_page(
            title="Slieve Bearnagh - ExploreTheMournes - Mourne Mountains",
            gaelic="Sliabh Bearnach: Gapped Mountain",
            sections=[("Profile", "<p>Height: 739 metres</p>")],
        ),
        encoding="utf-8",
    )
    (tmp_path / "index.html").write_text("<html><title>Home</title></html>", encoding="utf-8")
    (tmp_path / "fell-running.html").write_text(content_page(), encoding="utf-8")
    (tmp_path / "mourne-wall.html").write_text(
        content_page(title="The Mourne Wall", subtitle="A 22 mile dry stone wall", gallery=(), background=None),
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not a page", encoding="utf-8")
    return tmp_path
