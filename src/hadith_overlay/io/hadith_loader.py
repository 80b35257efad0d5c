"""Hadith Loader - parses the bundled hadith JSON list."""

import json
from pathlib import Path
from typing import List, Optional

from hadith_overlay.core import HadithEntry
from hadith_overlay.logger_config import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "hadith_list.json"


class HadithLoader:
    """Data factory responsible for reading the content file into HadithEntry objects."""

    def __init__(self, data_path: Optional[Path] = None):
        self.data_path = Path(data_path) if data_path is not None else DEFAULT_DATA_FILE

    def load(self) -> List[HadithEntry]:
        """
        Read and parse the content file.

        The load is best-effort: a missing, unreadable or malformed file
        yields an empty list instead of raising.

        Returns:
            List of HadithEntry objects, possibly empty.
        """
        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Error loading hadith data from %s: %s", self.data_path, e)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Error loading hadith data from %s: expected a list, got %s",
                self.data_path,
                type(data).__name__,
            )
            return []

        entries = [HadithEntry.from_dict(record) for record in data if isinstance(record, dict)]
        skipped = len(data) - len(entries)
        if skipped:
            logger.debug("Skipped %d malformed hadith records", skipped)

        logger.info("Loaded %d hadiths from %s", len(entries), self.data_path)
        return entries
