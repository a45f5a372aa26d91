"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cinelog.database import crud
from cinelog.web.dependencies import get_db

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable and record counts."""
    try:
        stats = crud.get_catalog_stats(db)
    except SQLAlchemyError as e:
        db.rollback()
        return {"status": "unhealthy", "database": type(e).__name__}
    return {"status": "healthy", "database": "connected", **stats}
