import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.domain.errors import CatalogError
from mealcart.infra import paths

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _load(path: str) -> Tuple[CatalogEntry, ...]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Catalog file not found: {path}")
        raise CatalogError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in catalog file {path}: {e}")
        raise CatalogError(f"Invalid JSON in catalog file: {e}") from e

    raw_items = data.get('items', []) if isinstance(data, dict) else data
    try:
        entries = tuple(CatalogEntry.from_dict(item) for item in raw_items)
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed catalog entry in {path}: {e}")
        raise CatalogError(f"Malformed catalog entry: {e}") from e
    logger.info(f"Loaded {len(entries)} catalog entries from {path}")
    return entries


def load_catalog(path: Optional[Path] = None) -> Tuple[CatalogEntry, ...]:
    """Return the grocery catalog in declaration order.

    The file is parsed once per path and the resulting tuple is shared by every
    caller; entries are read-only.
    """
    return _load(str(Path(path or paths.CATALOG_FILE).resolve()))


def catalog_version(path: Optional[Path] = None) -> str:
    target = Path(path or paths.CATALOG_FILE)
    try:
        with open(target, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read catalog version from {target}: {e}")
        return ""
    return str(data.get('version', '')) if isinstance(data, dict) else ""


def clear_catalog_cache():
    _load.cache_clear()
