"""
Flask Application Factory

Creates and configures the Flask application instance.
"""

from flask import Flask, render_template, request, abort, jsonify
import re
import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config import settings
from config.database import (
    get_all_mountains,
    get_mountain_by_slug,
    get_all_activities,
    get_activity_by_slug,
    get_all_places,
    get_place_by_slug,
    count_images,
)
from webapp import presenters
from webapp.services import email_service

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
CONTACT_FIELDS = ('name', 'email', 'subject', 'message')
MAX_MESSAGE_LENGTH = 5000

# Listing/detail configuration for the two content page kinds
CONTENT_PAGES = {
    'activities': {
        'list': get_all_activities,
        'get': get_activity_by_slug,
        'heading': 'Activities',
        'singular': 'Activity',
        'list_endpoint': 'activities',
        'detail_endpoint': 'activity_detail',
        'intro': 'Explore hiking, fell running, triathlons, and other outdoor activities in the Mournes.',
        'description': 'Discover hiking, fell running, triathlons, and other outdoor activities in the Mourne Mountains.',
    },
    'places': {
        'list': get_all_places,
        'get': get_place_by_slug,
        'heading': 'Places',
        'singular': 'Place',
        'list_endpoint': 'places',
        'detail_endpoint': 'place_detail',
        'intro': 'Landmarks, reservoirs and walls worth a visit in the Mournes.',
        'description': 'Discover places of interest in the Mourne Mountains.',
    },
}

def validate_contact_submission(data):
    """
    Validate a contact form submission.

    Args:
        data (dict): Submitted JSON with name, email, subject and message

    Returns:
        tuple: (is_valid, error_message)
    """
    if not isinstance(data, dict):
        return False, "Invalid request body"

    values = {field: str(data.get(field) or '').strip() for field in CONTACT_FIELDS}

    missing = [field for field in CONTACT_FIELDS if not values[field]]
    if missing:
        return False, f"Missing required fields: {', '.join(missing)}"

    if not EMAIL_PATTERN.match(values['email']):
        return False, "Please enter a valid email address"

    if values['subject'] not in presenters.CONTACT_SUBJECTS:
        return False, "Please select a valid subject"

    if len(values['message']) > MAX_MESSAGE_LENGTH:
        return False, f"Message must be under {MAX_MESSAGE_LENGTH} characters"

    return True, None

def create_app(config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.secret_key = settings.SECRET_KEY
    if config:
        app.config.update(config)

    if not settings.SUPABASE_URL:
        logger.warning("SUPABASE_URL not set, image URLs will be empty")

    @app.context_processor
    def inject_site():
        return {
            'site_name': presenters.SITE_NAME,
            'mapbox_token': settings.MAPBOX_TOKEN,
        }

    @app.errorhandler(404)
    def not_found(error):
        return render_template('not_found.html'), 404

    @app.route('/')
    def home():
        """Home page with featured peaks and site stats."""
        mountains = get_all_mountains()
        return render_template(
            'home.html',
            featured=presenters.featured_mountains(mountains),
            total_mountains=len(mountains),
            highest_peak=presenters.highest_peak(mountains),
            image_count=count_images(),
        )

    @app.route('/mountains')
    def mountains():
        """All mountains grouped by height."""
        all_mountains = get_all_mountains()
        groups = presenters.group_by_height(all_mountains)
        return render_template(
            'mountains.html',
            mountains=all_mountains,
            groups=groups,
            highest_peak=presenters.highest_peak(all_mountains),
        )

    @app.route('/mountains/<slug>')
    def mountain_detail(slug):
        """Mountain profile with accordion, gallery and map."""
        mountain = get_mountain_by_slug(slug)
        if not mountain:
            abort(404)

        return render_template(
            'mountain_detail.html',
            mountain=mountain,
            meta=presenters.mountain_metadata(mountain),
            sections=presenters.mountain_sections(mountain),
            slides=presenters.gallery_slides(mountain['images']),
            map=presenters.map_context(mountain['starting_points']),
        )

    def content_list(kind):
        page = CONTENT_PAGES[kind]
        return render_template(
            'content_list.html',
            kind=kind,
            page=page,
            items=page['list'](),
        )

    def content_detail(kind, slug):
        page = CONTENT_PAGES[kind]
        item = page['get'](slug)
        if not item:
            abort(404)

        return render_template(
            'content_detail.html',
            kind=kind,
            page=page,
            item=item,
            meta=presenters.content_metadata(item),
            sections=presenters.content_sections(item),
            slides=presenters.gallery_slides(presenters.content_gallery_images(item)),
            background_url=presenters.background_image_url(item),
        )

    @app.route('/activities')
    def activities():
        return content_list('activities')

    @app.route('/activities/<slug>')
    def activity_detail(slug):
        return content_detail('activities', slug)

    @app.route('/places')
    def places():
        return content_list('places')

    @app.route('/places/<slug>')
    def place_detail(slug):
        return content_detail('places', slug)

    @app.route('/contact')
    def contact():
        """Contact page; the form posts JSON to /api/contact."""
        return render_template('contact.html', subjects=presenters.CONTACT_SUBJECTS)

    @app.route('/api/contact', methods=['POST'])
    def contact_submit():
        """Accept a contact form submission and forward it by email."""
        data = request.get_json(silent=True)

        is_valid, error_msg = validate_contact_submission(data)
        if not is_valid:
            return jsonify({'error': error_msg}), 400

        if not email_service.is_configured():
            logger.error("Contact form submitted but email is not configured")
            return jsonify({'error': 'Contact form is temporarily unavailable'}), 503

        values = {field: str(data[field]).strip() for field in CONTACT_FIELDS}
        sent = email_service.send_contact_message(**values)
        if not sent:
            return jsonify({'error': 'Failed to send message'}), 500

        return jsonify({'success': True})

    return app
