"""
Database Configuration and Management (SQLAlchemy)

Handles database setup, sessions and the thin row helpers shared by the
migration scripts and the page data-access functions.
"""

from pathlib import Path
import logging
from sqlalchemy import create_engine, select, update, delete, func
from sqlalchemy.orm import sessionmaker
from config import settings
from config.models import Base, Mountain, StartingPoint, Image, Activity, Place

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Database configuration
DB_DIR = Path(__file__).parent.parent / "data"
DB_PATH = DB_DIR / "mournes.db"

if settings.DATABASE_URL:
    DATABASE_URL = settings.DATABASE_URL
else:
    DB_DIR.mkdir(exist_ok=True)
    DATABASE_URL = f"sqlite:///{DB_PATH}"

# SQLAlchemy Engine and Session
engine = create_engine(DATABASE_URL, echo=False)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)

def get_db_session():
    """
    Get a new database session.

    Returns:
        sqlalchemy.orm.Session: Database session
    """
    return SessionLocal()

def init_database():
    """
    Initialize the database with all required tables.
    """
    logger.info("Initializing database...")

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized successfully!")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise

def row_to_dict(row):
    """Project an ORM row onto a plain dictionary of its columns."""
    if row is None:
        return None
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}

def _filtered(stmt, model, filters):
    for field, value in filters.items():
        column = getattr(model, field)
        stmt = stmt.where(column.is_(None) if value is None else column == value)
    return stmt

# ---------------------------------------------------------------------------
# Generic row helpers
# ---------------------------------------------------------------------------

def select_rows(model, order_by=None, **filters):
    """
    Select rows matching equality filters.

    A filter value of None matches NULL.

    Args:
        model: ORM model class
        order_by (str, optional): Column name to order by
        **filters: column=value equality predicates

    Returns:
        list: Rows as dictionaries (empty on error)
    """
    session = get_db_session()
    try:
        stmt = _filtered(select(model), model, filters)
        if order_by:
            stmt = stmt.order_by(getattr(model, order_by))
        return [row_to_dict(r) for r in session.execute(stmt).scalars().all()]
    except Exception as e:
        logger.error(f"Error selecting from {model.__tablename__}: {e}")
        return []
    finally:
        session.close()

def select_one(model, **filters):
    """
    Select the first row matching equality filters, or None.
    """
    session = get_db_session()
    try:
        stmt = _filtered(select(model), model, filters).limit(1)
        return row_to_dict(session.execute(stmt).scalar_one_or_none())
    except Exception as e:
        logger.error(f"Error selecting from {model.__tablename__}: {e}")
        return None
    finally:
        session.close()

def insert_row(model, values):
    """
    Insert a single row.

    Returns:
        dict or None: The inserted row, None on failure
    """
    session = get_db_session()
    try:
        row = model(**values)
        session.add(row)
        session.commit()
        return row_to_dict(row)
    except Exception as e:
        logger.error(f"Error inserting into {model.__tablename__}: {e}")
        session.rollback()
        return None
    finally:
        session.close()

def update_rows(model, values, **filters):
    """
    Update rows matching equality filters.

    Returns:
        int: Number of rows updated (0 on failure)
    """
    session = get_db_session()
    try:
        stmt = _filtered(update(model), model, filters).values(**values)
        result = session.execute(stmt)
        session.commit()
        return result.rowcount
    except Exception as e:
        logger.error(f"Error updating {model.__tablename__}: {e}")
        session.rollback()
        return 0
    finally:
        session.close()

def upsert_row(model, values, on_conflict='slug'):
    """
    Insert a row, or update the existing row sharing the conflict column.

    Args:
        model: ORM model class
        values (dict): Column values; must include the conflict column
        on_conflict (str): Unique column used to detect an existing row

    Returns:
        dict or None: The stored row, None on failure
    """
    session = get_db_session()
    try:
        key_column = getattr(model, on_conflict)
        row = session.execute(
            select(model).where(key_column == values[on_conflict])
        ).scalar_one_or_none()

        if row:
            for field, value in values.items():
                setattr(row, field, value)
        else:
            row = model(**values)
            session.add(row)

        session.commit()
        return row_to_dict(row)
    except Exception as e:
        logger.error(f"Error upserting into {model.__tablename__}: {e}")
        session.rollback()
        return None
    finally:
        session.close()

def replace_starting_points(mountain_id, points):
    """
    Replace all starting points of a mountain.

    Args:
        mountain_id (int): Owning mountain
        points (list): Starting point dictionaries (without mountain_id)

    Returns:
        int or None: Number of points written, None on failure
    """
    session = get_db_session()
    try:
        session.execute(delete(StartingPoint).where(StartingPoint.mountain_id == mountain_id))
        for point in points:
            session.add(StartingPoint(mountain_id=mountain_id, **point))
        session.commit()
        return len(points)
    except Exception as e:
        logger.error(f"Error writing starting points for mountain {mountain_id}: {e}")
        session.rollback()
        return None
    finally:
        session.close()

# ---------------------------------------------------------------------------
# Page data access
# ---------------------------------------------------------------------------

def get_all_mountains():
    """
    Get all published mountains ordered by name.
    """
    return select_rows(Mountain, order_by='name', published=True)

def get_mountain_by_slug(slug):
    """
    Get a published mountain with its starting points and images.

    Returns:
        dict or None: Mountain dictionary with 'starting_points' and 'images' lists
    """
    session = get_db_session()
    try:
        mountain = session.execute(
            select(Mountain).where(Mountain.slug == slug, Mountain.published.is_(True))
        ).scalar_one_or_none()

        if not mountain:
            logger.warning(f"Mountain not found: {slug}")
            return None

        points = session.execute(
            select(StartingPoint)
            .where(StartingPoint.mountain_id == mountain.id)
            .order_by(StartingPoint.display_order)
        ).scalars().all()

        images = session.execute(
            select(Image)
            .where(Image.mountain_id == mountain.id)
            .order_by(Image.display_order, Image.id)
        ).scalars().all()

        result = row_to_dict(mountain)
        result['starting_points'] = [row_to_dict(p) for p in points]
        result['images'] = [row_to_dict(i) for i in images]
        return result
    except Exception as e:
        logger.error(f"Error fetching mountain {slug}: {e}")
        return None
    finally:
        session.close()

def get_all_activities():
    return select_rows(Activity, order_by='title', published=True)

def get_activity_by_slug(slug):
    return select_one(Activity, slug=slug, published=True)

def get_all_places():
    return select_rows(Place, order_by='title', published=True)

def get_place_by_slug(slug):
    return select_one(Place, slug=slug, published=True)

def count_images():
    """
    Count all stored images.
    """
    session = get_db_session()
    try:
        return session.execute(select(func.count(Image.id))).scalar_one()
    except Exception as e:
        logger.error(f"Error counting images: {e}")
        return 0
    finally:
        session.close()

def get_unlinked_images():
    """
    Get images with no owning mountain, ordered by storage path.
    """
    return select_rows(Image, order_by='storage_path', mountain_id=None)

if __name__ == "__main__":
    init_database()
