"""
CRUD operations for User, Movie, and Review models.

Lookups return ``None`` when the record does not exist; callers are expected
to handle that branch before using the result.
"""

from typing import List, Optional, Dict, Any
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from cinelog.database.models import User, Movie, Review


MOVIE_FIELDS = ('name', 'year', 'rating')


# ==================== USER CRUD OPERATIONS ====================

def create_user(session: Session, username: str, password_hash: str) -> User:
    """
    Create a new user.

    Args:
        session: Database session
        username: Sign-in name
        password_hash: Already-hashed password

    Returns:
        Created User object

    Raises:
        ValueError: If the username is already taken
    """
    if get_user_by_username(session, username) is not None:
        raise ValueError(f"Username '{username}' is already taken")

    user = User(username=username, password=password_hash)
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        # Another sign-up claimed the name between the check and the insert
        session.rollback()
        raise ValueError(f"Username '{username}' is already taken") from e
    session.refresh(user)
    return user


def get_user(session: Session, user_id: int) -> Optional[User]:
    """
    Get a user by ID.

    Args:
        session: Database session
        user_id: User ID

    Returns:
        User object or None if not found
    """
    return session.query(User).filter(User.user_id == user_id).first()


def get_user_by_username(session: Session, username: str) -> Optional[User]:
    """
    Get a user by username.

    Args:
        session: Database session
        username: Sign-in name

    Returns:
        User object or None if not found
    """
    return session.query(User).filter(User.username == username).first()


def get_user_count(session: Session) -> int:
    """Get total count of users."""
    return session.query(func.count(User.user_id)).scalar()


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    name: str,
    year: int,
    rating: float,
    created_by: Optional[int] = None
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        name: Movie name
        year: Release year
        rating: Catalog rating
        created_by: ID of the user adding the movie (optional)

    Returns:
        Created Movie object
    """
    movie = Movie(
        name=name,
        year=year,
        rating=rating,
        created_by=created_by
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.movie_id == movie_id).first()


def get_movie_detail(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie with its owner and reviews (with reviewers) loaded.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return (
        session.query(Movie)
        .options(
            joinedload(Movie.owner),
            selectinload(Movie.reviews).joinedload(Review.reviewer),
        )
        .filter(Movie.movie_id == movie_id)
        .first()
    )


def get_movies(session: Session) -> List[Movie]:
    """
    Get all movies, oldest first.

    Args:
        session: Database session

    Returns:
        List of Movie objects
    """
    return session.query(Movie).order_by(Movie.movie_id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.movie_id)).scalar()


def update_movie(
    session: Session,
    movie_id: int,
    **kwargs
) -> Optional[Movie]:
    """
    Update movie information.

    Args:
        session: Database session
        movie_id: Movie ID
        **kwargs: Fields to update (name, year, rating)

    Returns:
        Updated Movie object or None if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        for key, value in kwargs.items():
            if key in MOVIE_FIELDS:
                setattr(movie, key, value)
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie and its reviews.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        return True
    return False


# ==================== REVIEW CRUD OPERATIONS ====================

def add_review(
    session: Session,
    movie: Movie,
    content: str,
    reviewer_id: Optional[int] = None,
    rating: Optional[float] = None
) -> Review:
    """
    Append a review to a movie and save the movie.

    Args:
        session: Database session
        movie: Movie the review belongs to
        content: Review text
        reviewer_id: ID of the reviewing user
        rating: Reviewer score (1.0 to 5.0, optional)

    Returns:
        Created Review object

    Raises:
        ValueError: If rating is not between 1 and 5
    """
    if rating is not None and not (1.0 <= rating <= 5.0):
        raise ValueError("Rating must be between 1.0 and 5.0")

    review = Review(content=content, reviewer_id=reviewer_id, rating=rating)
    movie.reviews.append(review)
    session.commit()
    session.refresh(review)
    return review


def get_movie_reviews(session: Session, movie_id: int) -> List[Review]:
    """
    Get all reviews for a movie in the order they were added.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        List of Review objects
    """
    return session.query(Review).filter(
        Review.movie_id == movie_id
    ).order_by(Review.review_id).all()


def get_catalog_stats(session: Session) -> Dict[str, Any]:
    """
    Get record counts for the catalog.

    Returns:
        Dictionary with users, movies and reviews counts
    """
    return {
        'users': get_user_count(session),
        'movies': get_movie_count(session),
        'reviews': session.query(func.count(Review.review_id)).scalar(),
    }
