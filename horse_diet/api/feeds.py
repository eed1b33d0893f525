"""Feed catalog API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from horse_diet.core.catalog import FeedCatalog
from horse_diet.core.database import get_db
from horse_diet.models.models import Feed
from horse_diet.schemas.schemas import FeedResponse

router = APIRouter(prefix="/feed", tags=["feeds"])


def get_feed_catalog(db: Session = Depends(get_db)) -> FeedCatalog:
    """Load the full feed catalog for a request."""
    return FeedCatalog.from_rows(db.query(Feed).all())


@router.get("", response_model=list[FeedResponse])
def list_feeds(db: Session = Depends(get_db)):
    """List all feeds that can be added to a diet."""
    return db.query(Feed).order_by(Feed.name).all()


@router.get("/{feed_id}", response_model=FeedResponse)
def get_feed(feed_id: str, db: Session = Depends(get_db)):
    """Get one feed's nutrient profile."""
    feed = db.query(Feed).filter(Feed.feed_id == feed_id).first()
    if not feed:
        raise HTTPException(status_code=404, detail="Feed not found")
    return feed
