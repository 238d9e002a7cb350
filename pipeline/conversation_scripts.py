"""
Scripted conversation components.

A query resolves to a fixed narrowing dialogue: three system responses and
four result stages of 8, 4, 3 and 1 people. Out-of-range access never fails:
main scripts fall back to a fixed sentence and clamp stages, detail scripts
cycle through their responses.
"""
import logging
from typing import List

from data.people import EXAMPLE_PEOPLE, JOHN_CARUSO, ROBERT_SCHMIDT, VON_MILLER
from models.conversation import ConversationScript, DetailScript
from models.results import SearchResult

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = (
    "Based on the additional information you provided I have narrowed the list "
    "of potential matches. Would you like to provide additional details, or do "
    "you see the person you're looking for?"
)
DETAIL_FALLBACK_RESPONSE = "Default search detail response"

# Positions into each family's people, one list per stage
SCRIPTS = {
    "john caruso": {
        "label": "John Caruso",
        "people": JOHN_CARUSO,
        "stages": [[0, 1, 2, 3, 4, 5, 6, 7], [0, 1, 3, 5], [0, 1, 3], [1]],
    },
    "von miller": {
        "label": "Von Miller",
        "people": VON_MILLER,
        "stages": [[0, 1, 2, 3, 4, 5, 6, 7], [0, 1, 3, 7], [1, 3, 7], [3]],
    },
    "robert schmidt": {
        "label": "Robert Schmidt",
        "people": ROBERT_SCHMIDT,
        "stages": [[0, 1, 2, 3, 4, 5, 6, 7], [0, 1, 3, 7], [0, 3, 7], [3]],
    },
}

DEFAULT_STAGES = [[0, 1, 2, 3, 4, 5, 6, 7], [0, 1, 3, 5], [0, 3, 5], [3]]

RESPONSE_COUNT = 3

def _match_key(query: str):
    """Return the first script key contained in the query, or None."""
    normalized = query.lower().strip()
    for key in SCRIPTS:
        if key in normalized:
            return key
    return None

def _select(people: List[SearchResult], stages: List[List[int]]) -> List[List[SearchResult]]:
    return [[people[i] for i in stage] for stage in stages]

def get_conversation_script(query: str) -> ConversationScript:
    """
    Resolves a query to its conversation script.

    Matching is a case-insensitive substring test; the first known key wins.
    Unknown queries get the default script.

    Args:
        query: The user's search query

    Returns:
        A script with 3 responses and 4 result stages
    """
    key = _match_key(query)
    if key is None:
        logger.debug(f"No scripted conversation for {query!r}, using default")
        return ConversationScript(
            responses=[f"Default response {n}" for n in range(1, RESPONSE_COUNT + 1)],
            result_stages=_select(EXAMPLE_PEOPLE, DEFAULT_STAGES)
        )

    script = SCRIPTS[key]
    logger.debug(f"Resolved {query!r} to the {script['label']} script")
    return ConversationScript(
        responses=[f"{script['label']} response {n}" for n in range(1, RESPONSE_COUNT + 1)],
        result_stages=_select(script["people"], script["stages"])
    )

def get_scripted_results(script: ConversationScript, stage: int) -> List[SearchResult]:
    """Return the results for a stage, clamped to the available stages."""
    if not script.result_stages:
        return []
    stage_index = max(0, min(stage, len(script.result_stages) - 1))
    return script.result_stages[stage_index]

def get_next_response(script: ConversationScript, response_index: int) -> str:
    """
    Returns the scripted response at response_index.

    Negative indexes and indexes past the end of the script return the
    fallback sentence, indefinitely.
    """
    if 0 <= response_index < len(script.responses):
        return script.responses[response_index]
    return FALLBACK_RESPONSE

def get_detail_script(query: str) -> DetailScript:
    """Resolves a query to the profile-screen detail script."""
    key = _match_key(query)
    if key is None:
        return DetailScript(
            responses=[f"Search detail response {n}" for n in range(1, RESPONSE_COUNT + 1)]
        )

    label = SCRIPTS[key]["label"]
    return DetailScript(
        responses=[f"{label} search detail response {n}" for n in range(1, RESPONSE_COUNT + 1)]
    )

def get_detail_response(script: DetailScript, response_index: int) -> str:
    """
    Returns the detail response at response_index.

    Indexes past the end cycle back to the start. Negative indexes and empty
    scripts return the detail fallback.
    """
    if not script.responses or response_index < 0:
        return DETAIL_FALLBACK_RESPONSE
    return script.responses[response_index % len(script.responses)]
