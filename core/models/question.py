"""Question data models."""
from pydantic import BaseModel


class QuestionRequest(BaseModel):
    """Question request model."""
    question: str
