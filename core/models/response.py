"""Response envelope returned by every endpoint."""
from pydantic import BaseModel
from typing import Optional, Any


class APIResponse(BaseModel):
    """Successful API response; failures are raised as HTTP errors."""
    success: bool = True
    message: str
    data: Optional[Any] = None
