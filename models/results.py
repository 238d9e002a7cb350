"""
Result models returned by the search backend.
"""
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class SearchResult(BaseModel):
    """A single person returned by a search. Never mutated after creation."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Union[int, str]
    name: str
    age: int
    gender: str
    marital_status: str = Field(alias="maritalStatus")
    location: str
    rating: float = Field(ge=0, le=5)
    references: int = Field(ge=0)
    companies: int = Field(ge=0)  # number of companies, not names
    contacts: int = Field(ge=0)
    image: Optional[str] = None

class SearchResponse(BaseModel):
    """One page of results from the backend."""
    query: str
    results: List[SearchResult] = Field(default_factory=list)
    total_results: int = Field(default=0, ge=0)
    has_more: bool = False

class UploadResult(BaseModel):
    """Outcome of a simulated file upload."""
    success: bool
    message: str
