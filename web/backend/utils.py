#!/usr/bin/env python3
"""
Conversion helpers shared by the routers and services.
"""

import math
import uuid
from typing import Optional, Any, Dict
from datetime import datetime

from fastapi import HTTPException


def validate_uuid(value: str, name: str = "id") -> uuid.UUID:
    """Parse a path parameter as a UUID, or fail with HTTP 400."""
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )


def safe_float(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """Numeric (Decimal) columns to float; None and junk become ``default``."""
    if value is None:
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_str(value: Optional[Any], default: str = "") -> str:
    return default if value is None else str(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if dt is not None else None


def pagination_meta(page: int, limit: int, total: int) -> Dict[str, Any]:
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "total_pages": math.ceil(total / limit) if limit else 0,
        "has_next": page * limit < total,
        "has_prev": page > 1,
    }
