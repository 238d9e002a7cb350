"""
Configuration settings for the search assistant session engine.
"""
import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Search session configuration
SEARCH_CONFIG = {
    "page_size": int(os.environ.get("SEARCH_PAGE_SIZE", "20")),
    "history_limit": int(os.environ.get("SEARCH_HISTORY_LIMIT", "50")),
    "recent_limit": int(os.environ.get("SEARCH_RECENT_LIMIT", "5")),
    "max_query_length": int(os.environ.get("SEARCH_MAX_QUERY_LENGTH", "500")),
}

# Mock backend configuration (latencies in seconds)
BACKEND_CONFIG = {
    "search_latency": float(os.environ.get("BACKEND_SEARCH_LATENCY", "0.5")),
    "upload_latency": float(os.environ.get("BACKEND_UPLOAD_LATENCY", "1.0")),
    "min_total_results": int(os.environ.get("BACKEND_MIN_TOTAL", "30")),
    "max_total_results": int(os.environ.get("BACKEND_MAX_TOTAL", "80")),
    "failure_query": os.environ.get("BACKEND_FAILURE_QUERY", "error test"),
}

# Promotional lightbox configuration
LIGHTBOX_CONFIG = {
    "dev_mode": os.environ.get("LIGHTBOX_DEV_MODE", "False").lower() == "true",
    "item_urls": [
        url.strip()
        for url in os.environ.get(
            "LIGHTBOX_ITEM_URLS",
            "https://youtu.be/QbC6dLG_dQY?list=RDQbC6dLG_dQY"
        ).split(",")
        if url.strip()
    ],
}

# Application configuration
APP_CONFIG = {
    "log_level": os.environ.get("LOG_LEVEL", "INFO")
}

# Feature flags
FEATURES = {
    "use_conversation_script": os.environ.get("USE_CONVERSATION_SCRIPT", "True").lower() == "true",
    "use_lightbox": os.environ.get("USE_LIGHTBOX", "True").lower() == "true"
}

def get_config() -> Dict[str, Any]:
    """Return the complete configuration dictionary."""
    return {
        "search": SEARCH_CONFIG,
        "backend": BACKEND_CONFIG,
        "lightbox": LIGHTBOX_CONFIG,
        "app": APP_CONFIG,
        "features": FEATURES
    }
