"""
Seed data for the Horse Diet Evaluator database.

Loads the feed catalog data file into the feeds table. Existing feeds are
left untouched, so seeding can run on every start.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from horse_diet.core.app_logging import configure_logging
from horse_diet.core.catalog import load_catalog_file
from horse_diet.core.config import settings
from horse_diet.core.database import SessionLocal, engine, Base
from horse_diet.models.models import Feed

logger = logging.getLogger(__name__)


def seed_feeds(db, path: Optional[Union[str, Path]] = None) -> int:
    """Insert catalog feeds that are not in the database yet.

    Returns the number of feeds added.
    """
    catalog = load_catalog_file(path or settings.FEED_DATA_PATH)

    added = 0
    for record in catalog.values():
        existing = db.query(Feed).filter(Feed.feed_id == record.feed_id).first()
        if existing:
            continue
        db.add(Feed(
            feed_id=record.feed_id,
            name=record.display_name,
            digestible_energy=record.digestible_energy,
            crude_protein=record.crude_protein,
            calcium=record.calcium,
            phosphorus=record.phosphorus,
            vitamin_e=record.vitamin_e,
        ))
        added += 1

    db.commit()
    logger.info("Feeds seeded: %d added, %d already present.", added, len(catalog) - added)
    return added


def run_seed():
    """Run all seed functions."""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_feeds(db)
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    run_seed()
