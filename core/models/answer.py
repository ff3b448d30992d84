"""Answer and citation models."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReferenceKind(str, Enum):
    """Closed set of citation kinds the model may return."""
    VERSE = "verse"
    BOOK = "book"
    COMMENTARY = "commentary"
    ARTICLE = "article"
    SERMON = "sermon"
    DEVOTIONAL = "devotional"

    @classmethod
    def values(cls) -> List[str]:
        return [kind.value for kind in cls]


class Reference(BaseModel):
    """A citation attached to an answer.

    Serialized with the ``type`` key, which is what the model is asked to
    produce and what the UI renders.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ReferenceKind = Field(alias="type")
    title: str
    link: str
    description: Optional[str] = None


class Answer(BaseModel):
    """Structured answer rendered to the user."""
    model_config = ConfigDict(frozen=True)

    text: str
    references: List[Reference]
