"""
Conversation models: scripted narratives and chat messages.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from models.results import SearchResult

class ConversationScript(BaseModel):
    """
    A pre-authored narrowing dialogue.

    responses are the scripted system replies; result_stages are the
    progressively narrower result sets, one per conversation turn.
    """
    model_config = ConfigDict(frozen=True)

    responses: List[str]
    result_stages: List[List[SearchResult]]

class DetailScript(BaseModel):
    """Scripted replies for a person's profile screen. Has no result stages."""
    model_config = ConfigDict(frozen=True)

    responses: List[str]

class ConversationMessage(BaseModel):
    """A single message in the assistant conversation."""
    id: str
    sender: Literal["user", "system"]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    content: Optional[str] = None  # user messages
    items: List[Dict[str, Any]] = Field(default_factory=list)  # system messages
