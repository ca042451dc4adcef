"""
Configuration Management

Loads environment variables for the web app and the migration scripts.
Values come from `.env.local` (preferred) or `.env` in the project root.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env.local")
load_dotenv(PROJECT_ROOT / ".env")

# Hosted backend (storage API + public image URLs)
SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")

# Relational store
DATABASE_URL = os.getenv("DATABASE_URL")

# Map widget
MAPBOX_TOKEN = os.getenv("MAPBOX_TOKEN")

# Legacy static site used by the migration scripts
LEGACY_SITE_PATH = Path(os.getenv("LEGACY_SITE_PATH", str(PROJECT_ROOT / "legacy_site")))

# Flask
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

# Contact form mail
SMTP_SERVER = os.getenv("SMTP_SERVER", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SENDER_EMAIL = os.getenv("SENDER_EMAIL")
SENDER_PASSWORD = os.getenv("SENDER_PASSWORD")
CONTACT_RECIPIENT = os.getenv("CONTACT_RECIPIENT", SENDER_EMAIL)


def missing_service_settings():
    """
    Return the names of settings the migration scripts need but are unset.

    Returns:
        list: Environment variable names with no value
    """
    required = {
        "SUPABASE_URL": SUPABASE_URL,
        "SUPABASE_SERVICE_KEY": SUPABASE_SERVICE_KEY,
    }
    return [name for name, value in required.items() if not value]
