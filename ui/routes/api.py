"""Operator routes for issuance statistics."""

from fastapi import APIRouter, Depends

from utils.timestamp import format_timestamp
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# These will be set by app.py
_generator = None
_audit = None


def init(generator, audit):
    """Initialize with generator and audit logger references."""
    global _generator, _audit
    _generator = generator
    _audit = audit


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return generator and audit log statistics (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "generator": _generator.get_stats(),
        "audit": _audit.get_stats(),
    }
