"""KSUID issuance and inspection routes."""

from fastapi import APIRouter, HTTPException, Query

from service.generator import describe
from ui.models import GenerateResponse, KSUIDInfo, LoadRequest, SortRequest, SortResponse

router = APIRouter(prefix="/api/v1/ksuid", tags=["ksuid"])

# Set by app.py
_generator = None


def init(generator):
    """Initialize with the generator reference."""
    global _generator
    _generator = generator


@router.get("", response_model=GenerateResponse)
async def generate(count: int = Query(1, ge=1)):
    """Issue one or more new KSUIDs, ascending."""
    ids = _generator.generate(count)
    return {"count": len(ids), "ids": ids}


@router.post("/load", response_model=KSUIDInfo)
async def load(body: LoadRequest):
    """Build a KSUID from its raw 20 bytes."""
    try:
        raw = body.raw_bytes()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return describe(_generator.load(raw))


@router.post("/sort", response_model=SortResponse)
async def sort(body: SortRequest):
    """Order KSUIDs chronologically."""
    ids = _generator.sort(body.ids)
    return {"ids": ids, "oldest": ids[0], "newest": ids[-1]}


@router.get("/{text}", response_model=KSUIDInfo)
async def inspect(text: str):
    """Decode a KSUID into timestamp and payload."""
    return describe(_generator.inspect(text))
