# serie_a_api/cache.py
from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# Loaded JSON documents only (never rankings), keyed by where they came from.
# location -> (expires_at_epoch, document)
_documents: Dict[str, Tuple[float, Any]] = {}


def document_key(location: str) -> str:
    """
    One key per document, whatever spelling the location was built with:
      "https://Host/x.json" and "https://Host/x.json " -> same key
      "data/2024-2025/JSON/data.json" and "./data/2024-2025/JSON/data.json" -> absolute path
    """
    location = (location or "").strip()
    if not location:
        raise ValueError("Document location must be non-empty")
    if location.lower().startswith(("http://", "https://")):
        return location
    return str(Path(location).expanduser().resolve())


def get_document(location: str) -> Optional[Any]:
    key = document_key(location)
    item = _documents.get(key)
    if not item:
        return None

    expires_at, doc = item
    if time.time() > expires_at:
        _documents.pop(key, None)
        return None

    return doc


def put_document(location: str, doc: Any, ttl_seconds: int) -> None:
    if ttl_seconds <= 0:
        return
    _documents[document_key(location)] = (time.time() + ttl_seconds, doc)


def clear() -> None:
    _documents.clear()
