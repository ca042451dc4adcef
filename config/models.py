"""
SQLAlchemy ORM Models
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class Mountain(Base):
    __tablename__ = 'mountains'

    id = Column(Integer, primary_key=True)
    slug = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    gaelic_name = Column(String)
    meaning = Column(String)
    height = Column(Integer)  # metres
    terrain = Column(Text)
    views = Column(Text)
    description = Column(Text)
    region = Column(String)
    photographer_credit = Column(String)
    seo_title = Column(String)
    seo_description = Column(Text)
    published = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    starting_points = relationship(
        "StartingPoint",
        back_populates="mountain",
        cascade="all, delete-orphan",
        order_by="StartingPoint.display_order",
    )
    images = relationship("Image", back_populates="mountain")

class StartingPoint(Base):
    __tablename__ = 'starting_points'

    id = Column(Integer, primary_key=True)
    mountain_id = Column(Integer, ForeignKey('mountains.id'), nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text)
    latitude = Column(Float)
    longitude = Column(Float)
    google_maps_url = Column(String)
    parking_available = Column(Boolean, default=False)
    difficulty = Column(String)
    display_order = Column(Integer, default=0)

    # Relationships
    mountain = relationship("Mountain", back_populates="starting_points")

class Image(Base):
    __tablename__ = 'images'

    id = Column(Integer, primary_key=True)
    storage_path = Column(String, unique=True, nullable=False)  # bucket/path
    title = Column(String)
    caption = Column(Text)
    photographer_credit = Column(String)
    alt_text = Column(String)
    width = Column(Integer)
    height = Column(Integer)
    file_size = Column(Integer)
    mime_type = Column(String)
    mountain_id = Column(Integer, ForeignKey('mountains.id'))  # nullable: orphans are repaired later
    is_featured = Column(Boolean, default=False)
    display_order = Column(Integer, default=0)
    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    mountain = relationship("Mountain", back_populates="images")

class Activity(Base):
    __tablename__ = 'activities'

    id = Column(Integer, primary_key=True)
    slug = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    content = Column(JSON, default=dict)  # subtitle, sections, gallery_images, background_image_path
    published = Column(Boolean, default=True)
    seo_title = Column(String)
    seo_description = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

class Place(Base):
    __tablename__ = 'places'

    id = Column(Integer, primary_key=True)
    slug = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    content = Column(JSON, default=dict)
    latitude = Column(Float)
    longitude = Column(Float)
    published = Column(Boolean, default=True)
    seo_title = Column(String)
    seo_description = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
