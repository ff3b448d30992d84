"""Q&A endpoints."""
from fastapi import APIRouter, HTTPException
from core.models.question import QuestionRequest
from core.models.response import APIResponse
from core.services.answers.answer_service import AnswerService
from core.services.errors.exceptions import BibleQAError
from core.utils.logger import logger

router = APIRouter()
answer_service = AnswerService()


@router.post("/ask", response_model=APIResponse)
def ask_question(request: QuestionRequest):
    """
    Ask a question and get an answer with allow-listed references.

    Args:
        request: Question from the user

    Returns:
        API response whose data is the answer; references carry their kind as "type"
    """
    try:
        answer = answer_service.get_answer(request.question)
    except BibleQAError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error answering question: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="Something went wrong. Please try asking your question again."
        )

    return APIResponse(
        success=True,
        message="Answer generated successfully",
        data=answer.model_dump(by_alias=True, mode="json")
    )


@router.get("/health")
async def qa_health():
    """Health check for Q&A service."""
    return {"status": "healthy", "service": "qa"}
