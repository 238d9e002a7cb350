"""
Main entry point for the search assistant session engine.
"""
import asyncio
import logging
import random
from typing import Any, Callable, Dict, Optional

from config import APP_CONFIG, FEATURES, get_config
from data.session import QuerySession
from models.errors import InvalidQueryError
from models.filters import FilterCriteria
from pipeline.filtering import apply_filters, filter_summary
from services.cache_service import ResultCache
from services.conversation_service import ConversationService
from services.lightbox_service import LightboxService, is_dev_environment
from services.mock_backend import MockSearchBackend
from services.search_service import SearchService
from utils.monitoring import SearchSystemMonitor

# Configure logging
logging.basicConfig(
    level=APP_CONFIG["log_level"],
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

def initialize_system(environment_guard: Callable[[], bool] = is_dev_environment,
                      rng: Optional[random.Random] = None,
                      backend: Optional[MockSearchBackend] = None) -> Dict[str, Any]:
    """
    Build one application session.

    Every component is constructed here and passed to the components that
    need it; nothing is shared through module globals.

    Args:
        environment_guard: Decides whether the lightbox may be shown
        rng: Random source shared by the backend and the lightbox
        backend: Search backend override

    Returns:
        The composed components
    """
    logger.info("Initializing search assistant session")
    config = get_config()
    rng = rng or random.Random()

    lightbox_service = None
    if FEATURES["use_lightbox"]:
        lightbox_service = LightboxService(environment_guard=environment_guard, rng=rng)

    monitor = SearchSystemMonitor()
    search_service = SearchService(
        backend=backend or MockSearchBackend(rng=rng),
        query_session=QuerySession(),
        result_cache=ResultCache(),
        lightbox_service=lightbox_service,
        monitor=monitor
    )

    logger.info(f"System configured with: page_size={config['search']['page_size']}, "
                f"Features={config['features']}")

    return {
        "search_service": search_service,
        "conversation_service": ConversationService(),
        "lightbox_service": lightbox_service,
        "filter_criteria": FilterCriteria(),
        "search_monitor": monitor,
        "config": config
    }

async def execute_search(system: Dict[str, Any], query: str) -> Dict[str, Any]:
    """
    Submit a query and, when scripting is enabled, open the conversation.

    Args:
        system: Components returned by initialize_system
        query: The user search query

    Returns:
        Results, display total, filtered results, scripted results and error
    """
    search_service: SearchService = system["search_service"]
    conversation_service: ConversationService = system["conversation_service"]
    criteria: FilterCriteria = system["filter_criteria"]

    fetched = False
    try:
        fetched = await search_service.submit(query)
    except InvalidQueryError as e:
        logger.info(f"Rejected query ({e.code}): {e.message}")

    # Only a completed fetch opens a new conversation
    scripted_results = []
    if FEATURES["use_conversation_script"] and fetched:
        scripted_results = conversation_service.start(search_service.current_query)

    return {
        "query": search_service.current_query,
        "results": search_service.results,
        "filtered_results": apply_filters(search_service.results, criteria),
        "display_total": search_service.display_total_results,
        "scripted_results": scripted_results,
        "error": search_service.error
    }

async def _demo():
    system = initialize_system(environment_guard=lambda: True, rng=random.Random(42))
    system["filter_criteria"].set_min_rating(3.5)

    for query in ["John Caruso", "<script>alert(1)</script>", "error test"]:
        result = await execute_search(system, query)
        print(f"\nQUERY: {query}")
        print(f"Results: {len(result['results'])}, Display total: {result['display_total']}")
        print(f"Filtered ({filter_summary(system['filter_criteria'])}): {len(result['filtered_results'])}")
        print(f"Scripted stage: {len(result['scripted_results'])}")
        print(f"Error: {result['error']}")
        print("-" * 80)

    conversation = system["conversation_service"]
    for follow_up in ["He lives in California", "He is married", "Over 30"]:
        response, results = conversation.reply(follow_up)
        print(f"{follow_up!r} -> {response} ({len(results)} results)")

    print("\n=== SYSTEM HEALTH METRICS ===")
    for metric, value in system["search_monitor"].get_system_health().items():
        print(f"{metric}: {value}")

if __name__ == "__main__":
    asyncio.run(_demo())
