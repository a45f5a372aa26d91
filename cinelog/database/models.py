"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the User, Movie, and Review tables. Reviews belong to a
movie and are kept in insertion order on the movie's ``reviews`` list.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import (
    Integer, String, Float, Text, ForeignKey,
    CheckConstraint, Index, TIMESTAMP
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class User(Base):
    """
    User table storing sign-in credentials.

    Attributes:
        user_id: Primary key, auto-incremented
        username: Unique sign-in name
        password: bcrypt hash of the user's password
        created_at: Timestamp when record was created
    """
    __tablename__ = 'users'

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(60), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    movies: Mapped[List["Movie"]] = relationship("Movie", back_populates="owner")

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, username='{self.username}')>"


class Movie(Base):
    """
    Movie table storing catalog entries.

    Attributes:
        movie_id: Primary key, auto-incremented
        name: Movie name (required)
        year: Release year (required)
        rating: Catalog rating (required)
        created_by: Foreign key to the user who added the movie (optional)
        created_at: Timestamp when record was created
        updated_at: Timestamp when record was last updated
    """
    __tablename__ = 'movies'

    movie_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    created_by: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey('users.user_id', ondelete='SET NULL'),
        nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    # Relationships
    owner: Mapped[Optional["User"]] = relationship("User", back_populates="movies")
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        back_populates="movie",
        cascade="all, delete-orphan",
        order_by="Review.review_id"
    )

    __table_args__ = (
        Index('idx_movies_name', 'name'),
        Index('idx_movies_created_by', 'created_by'),
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id}, name='{self.name}', year={self.year})>"


class Review(Base):
    """
    Review table storing reviews attached to a movie.

    Attributes:
        review_id: Primary key, auto-incremented (also the display order)
        movie_id: Foreign key to movies table
        reviewer_id: Foreign key to the reviewing user
        content: Free-form review text
        rating: Optional reviewer score (1 to 5)
        created_at: Timestamp when review was created
    """
    __tablename__ = 'reviews'

    review_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.movie_id', ondelete='CASCADE'),
        nullable=False
    )
    reviewer_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey('users.user_id', ondelete='SET NULL'),
        nullable=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    movie: Mapped["Movie"] = relationship("Movie", back_populates="reviews")
    reviewer: Mapped[Optional["User"]] = relationship("User")

    __table_args__ = (
        CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)",
            name='check_review_rating_range'
        ),
        Index('idx_reviews_movie', 'movie_id'),
    )

    def __repr__(self) -> str:
        return f"<Review(review_id={self.review_id}, movie_id={self.movie_id}, reviewer_id={self.reviewer_id})>"
