"""
Loading of the static airport seed dataset.

The seed is a JSON array of airport objects.  It is read once when the
application is built; the records are then owned by the in‑memory
directory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .errors import SeedDataError


logger = logging.getLogger(__name__)


def load_seed(path: str | Path) -> List[Dict[str, Any]]:
    """Read raw airport records from ``path``.

    A missing file yields an empty list so the service can still start
    with an empty directory.  A file that is not a JSON array of objects
    raises :class:`SeedDataError`.
    """
    seed_path = Path(path)
    if not seed_path.exists():
        logger.warning("Seed file %s not found, starting with an empty directory", seed_path)
        return []

    try:
        data = json.loads(seed_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"seed file {seed_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise SeedDataError(f"seed file {seed_path} must contain a JSON array of objects")

    logger.info("Read %d airport records from %s", len(data), seed_path)
    return data
