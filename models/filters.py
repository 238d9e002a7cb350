"""
Filter criteria models for narrowing an in-memory result list.
"""
from typing import Any, List, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_AGE_MIN = 18
DEFAULT_AGE_MAX = 65
DEFAULT_MIN_RATING = 0
DEFAULT_SORT_BY = "relevance"
DEFAULT_SORT_ORDER = "desc"

MIN_RATING_BOUND = 0
MAX_RATING_BOUND = 5

SortField = Literal["relevance", "name", "age", "rating"]
SortOrder = Literal["asc", "desc"]

class AgeRange(BaseModel):
    """Model for age range parameters."""
    model_config = ConfigDict(frozen=True)

    min: int = DEFAULT_AGE_MIN
    max: int = DEFAULT_AGE_MAX

    @model_validator(mode="before")
    @classmethod
    def swap_inverted_bounds(cls, data: Any) -> Any:
        """Swap the bounds when min is greater than max."""
        if isinstance(data, dict):
            low = data.get("min", DEFAULT_AGE_MIN)
            high = data.get("max", DEFAULT_AGE_MAX)
            if low > high:
                return {**data, "min": high, "max": low}
        return data

    def is_default(self) -> bool:
        return self.min == DEFAULT_AGE_MIN and self.max == DEFAULT_AGE_MAX

class FilterCriteria(BaseModel):
    """
    Current filter selection.

    Values are validated on write: inverted age bounds are swapped and the
    minimum rating is clamped to [0, 5]. Defaults are the identity filter.
    """
    model_config = ConfigDict(validate_assignment=True)

    age_range: AgeRange = Field(default_factory=AgeRange)
    locations: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)
    min_rating: float = DEFAULT_MIN_RATING
    sort_by: SortField = DEFAULT_SORT_BY
    sort_order: SortOrder = DEFAULT_SORT_ORDER

    @field_validator("locations", "companies")
    @classmethod
    def drop_duplicates(cls, v: List[str]) -> List[str]:
        """Keep the first occurrence of each selection."""
        return list(dict.fromkeys(v))

    @field_validator("min_rating")
    @classmethod
    def clamp_rating(cls, v: float) -> float:
        """Clamp rating to the nearest bound."""
        if v < MIN_RATING_BOUND:
            return MIN_RATING_BOUND
        if v > MAX_RATING_BOUND:
            return MAX_RATING_BOUND
        return v

    def set_age_range(self, min_age: int, max_age: int):
        self.age_range = AgeRange(min=min_age, max=max_age)

    def add_location(self, location: str):
        if location not in self.locations:
            self.locations = [*self.locations, location]

    def remove_location(self, location: str):
        self.locations = [l for l in self.locations if l != location]

    def toggle_location(self, location: str):
        if location in self.locations:
            self.remove_location(location)
        else:
            self.add_location(location)

    def set_locations(self, locations: List[str]):
        self.locations = list(locations)

    def clear_locations(self):
        self.locations = []

    def add_company(self, company: str):
        if company not in self.companies:
            self.companies = [*self.companies, company]

    def remove_company(self, company: str):
        self.companies = [c for c in self.companies if c != company]

    def toggle_company(self, company: str):
        if company in self.companies:
            self.remove_company(company)
        else:
            self.add_company(company)

    def set_companies(self, companies: List[str]):
        self.companies = list(companies)

    def clear_companies(self):
        self.companies = []

    def set_min_rating(self, rating: float):
        self.min_rating = rating

    def set_sort_by(self, field: SortField):
        self.sort_by = field

    def set_sort_order(self, order: SortOrder):
        self.sort_order = order

    def toggle_sort_order(self):
        self.sort_order = "desc" if self.sort_order == "asc" else "asc"

    def set_sorting(self, field: SortField, order: SortOrder):
        self.sort_by = field
        self.sort_order = order

    def reset(self):
        """Restore every criterion to its default."""
        self.age_range = AgeRange()
        self.locations = []
        self.companies = []
        self.min_rating = DEFAULT_MIN_RATING
        self.sort_by = DEFAULT_SORT_BY
        self.sort_order = DEFAULT_SORT_ORDER
