"""Bulk import of list-like sections (portfolio, services, testimonials) from JSON or CSV."""

import csv
import io
import json
import logging
import uuid
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from artline.services import content_service

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = {"json", "csv"}


def _text(item: Dict[str, Any], key: str, default: str = "") -> str:
    value = item.get(key)
    if value is None or value == "":
        return default
    return str(value).strip()


def _rating(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 5


def _portfolio(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": _text(item, "title"),
        "description": _text(item, "description"),
        "category": _text(item, "category", "other"),
        "image": _text(item, "image"),
        "date": _text(item, "date", date.today().isoformat()),
    }


def _service(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": _text(item, "title"),
        "description": _text(item, "description"),
        "icon": _text(item, "icon", "settings"),
        "price": _text(item, "price"),
    }


def _testimonial(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "author": _text(item, "author"),
        "position": _text(item, "position"),
        "text": _text(item, "text"),
        "rating": _rating(item.get("rating")),
        "company": _text(item, "company"),
    }


# section type -> (generated key prefix, row mapper)
SECTION_MAPPERS: Dict[str, tuple] = {
    "portfolio": ("item", _portfolio),
    "services": ("service", _service),
    "testimonials": ("testimonial", _testimonial),
}


def parse_rows(fmt: str, raw: str) -> List[Dict[str, Any]]:
    fmt = (fmt or "").strip().lower()
    if fmt not in SUPPORTED_FORMATS:
        raise HTTPException(status_code=400, detail="Supported formats: json, csv")

    if fmt == "json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            raise HTTPException(status_code=400, detail="Invalid JSON format. Data must be an array of objects")
        rows = data if isinstance(data, list) else [data]
    else:
        try:
            reader = csv.DictReader(io.StringIO(raw.strip()), skipinitialspace=True)
            rows = [
                {(k or "").strip(): (v or "").strip() for k, v in row.items()}
                for row in reader
                if any((v or "").strip() for v in row.values())
            ]
        except csv.Error:
            raise HTTPException(status_code=400, detail="Invalid CSV format. The first line must contain headers")

    if any(not isinstance(row, dict) for row in rows):
        raise HTTPException(status_code=400, detail="Every imported row must be an object")
    if not rows:
        raise HTTPException(status_code=400, detail="No data to import")
    return rows


def bulk_import(
    db: Session,
    *,
    section_type: str,
    fmt: str,
    raw: str,
    language: str,
    actor_id: Optional[int],
) -> dict:
    if section_type not in SECTION_MAPPERS:
        raise HTTPException(
            status_code=400,
            detail=f"Supported section types: {', '.join(SECTION_MAPPERS)}",
        )
    rows = parse_rows(fmt, raw)
    prefix, mapper = SECTION_MAPPERS[section_type]

    imported = 0
    errors: List[str] = []
    for index, item in enumerate(rows, start=1):
        try:
            content_service.save_content(
                db,
                section_type=section_type,
                section_key=f"{prefix}-{uuid.uuid4().hex[:12]}",
                language=language,
                content=mapper(item),
                actor_id=actor_id,
            )
            imported += 1
        except Exception as exc:
            logger.warning("[content] bulk import row %d of %s failed: %s", index, section_type, exc)
            errors.append(f"Row {index}: {exc}")

    return {
        "imported_count": imported,
        "total_count": len(rows),
        "errors": errors or None,
        "success": imported > 0,
    }
