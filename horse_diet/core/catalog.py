"""
Feed catalog: the read-only feed reference data used for aggregation.

The catalog is loaded completely (from the feed data file or the feeds
table) before a diet is evaluated and is handed to the calculations as an
argument.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Union

from pydantic import ValidationError

from horse_diet.core.calculations import FeedRecord
from horse_diet.schemas.schemas import FeedProfile

logger = logging.getLogger(__name__)


class FeedCatalogError(ValueError):
    """Feed data could not be read or is malformed."""


class FeedCatalog(Mapping[str, FeedRecord]):
    """Immutable mapping of feed identifier to FeedRecord."""

    def __init__(self, records: Iterable[FeedRecord] = ()):
        feeds = {}
        for record in records:
            feeds[record.feed_id] = record
        self._feeds = MappingProxyType(feeds)

    def __getitem__(self, feed_id: str) -> FeedRecord:
        return self._feeds[feed_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._feeds)

    def __len__(self) -> int:
        return len(self._feeds)

    def __repr__(self) -> str:
        return f"FeedCatalog({sorted(self._feeds)!r})"

    @classmethod
    def from_data(cls, data: Mapping[str, dict]) -> "FeedCatalog":
        """
        Build a catalog from feed data keyed by identifier.

        Args:
            data: {feed_id: {"digestibleEnergy": ..., "crudeProtein": ..., ...}}

        Returns:
            FeedCatalog

        Raises:
            FeedCatalogError: data is not an object or a record is invalid
        """
        if not isinstance(data, Mapping):
            raise FeedCatalogError("Feed data must be an object keyed by feed identifier")

        records = []
        for feed_id, raw in data.items():
            try:
                profile = FeedProfile.model_validate(raw)
            except ValidationError as e:
                raise FeedCatalogError(f"Invalid feed {feed_id!r}: {e}") from e
            records.append(FeedRecord(
                feed_id=feed_id,
                name=profile.name or feed_id,
                digestible_energy=profile.digestible_energy,
                crude_protein=profile.crude_protein,
                calcium=profile.calcium,
                phosphorus=profile.phosphorus,
                vitamin_e=profile.vitamin_e,
            ))
        return cls(records)

    @classmethod
    def from_rows(cls, rows: Iterable) -> "FeedCatalog":
        """Build a catalog from Feed table rows."""
        return cls(
            FeedRecord(
                feed_id=row.feed_id,
                name=row.name,
                digestible_energy=row.digestible_energy,
                crude_protein=row.crude_protein,
                calcium=row.calcium or 0,
                phosphorus=row.phosphorus or 0,
                vitamin_e=row.vitamin_e or 0,
            )
            for row in rows
        )


def load_catalog_file(path: Union[str, Path]) -> FeedCatalog:
    """
    Load the feed catalog from a JSON data file.

    Args:
        path: Path to the feed data file

    Returns:
        FeedCatalog with every feed in the file

    Raises:
        FeedCatalogError: file is missing, not JSON, or holds an invalid feed
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise FeedCatalogError(f"Failed to load feed database: {e}") from e
    except json.JSONDecodeError as e:
        raise FeedCatalogError(f"Feed database is not valid JSON: {e}") from e

    catalog = FeedCatalog.from_data(data)
    logger.info("Loaded %d feeds from %s", len(catalog), path)
    return catalog
