"""Verse lookup endpoints."""
from fastapi import APIRouter, HTTPException, Query
from core.models.response import APIResponse
from core.services.errors.exceptions import BibleQAError
from core.services.verses.verse_service import VerseService
from core.utils.logger import logger

router = APIRouter()
verse_service = VerseService()


@router.get("", response_model=APIResponse)
def get_verse(reference: str = Query(..., description="Verse reference, e.g. 'John 3:16'")):
    """
    Fetch the King James text of a verse citation.

    Args:
        reference: Loosely formatted reference (a verse citation's title)

    Returns:
        API response with the canonical reference and cleaned verse text
    """
    try:
        verse = verse_service.lookup(reference)
    except BibleQAError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching verse: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load the verse")

    return APIResponse(
        success=True,
        message="Verse retrieved successfully",
        data=verse.model_dump()
    )


@router.get("/health")
async def verses_health():
    """Health check for verse service."""
    return {"status": "healthy", "service": "verses"}
