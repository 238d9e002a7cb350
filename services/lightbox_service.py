"""
Service deciding when to surface the promotional lightbox.
"""
import logging
import random
from typing import Callable, List, Optional

from config import LIGHTBOX_CONFIG
from models.state import LightboxState

logger = logging.getLogger(__name__)

def is_dev_environment() -> bool:
    """Default environment guard: the configured developer-mode flag."""
    return LIGHTBOX_CONFIG["dev_mode"]

class LightboxService:
    """
    Trigger policy for the promotional lightbox.

    Every search submission increments search_count. The lightbox fires on
    odd counts (1st, 3rd, 5th, ...) when the environment guard allows it.
    """

    def __init__(self,
                 items: Optional[List[str]] = None,
                 environment_guard: Callable[[], bool] = is_dev_environment,
                 rng: Optional[random.Random] = None):
        """
        Initialize the lightbox service.

        Args:
            items: Item URLs to choose from (default: configured URLs)
            environment_guard: Returns True when the lightbox may be shown
            rng: Random source for item selection
        """
        self.items = list(items) if items is not None else list(LIGHTBOX_CONFIG["item_urls"])
        self.environment_guard = environment_guard
        self.rng = rng or random.Random()

        self.is_visible = False
        self.current_item_url = self.items[0] if self.items else ""
        self.search_count = 0

    @property
    def state(self) -> LightboxState:
        return LightboxState(
            is_visible=self.is_visible,
            current_item_url=self.current_item_url,
            search_count=self.search_count
        )

    def show(self):
        self.is_visible = True

    def show_with_item(self, url: str):
        self.current_item_url = url
        self.is_visible = True

    def show_with_random_item(self):
        self.show_with_item(self.select_random_item())

    def hide(self):
        self.is_visible = False

    def select_random_item(self) -> str:
        """
        Pick an item uniformly at random, excluding the current one.

        Falls back to the full set when excluding the current item would
        leave nothing to choose from.
        """
        candidates = [url for url in self.items if url != self.current_item_url]
        if not candidates:
            candidates = self.items
        if not candidates:
            return ""
        return self.rng.choice(candidates)

    def handle_search_action(self) -> bool:
        """
        Record a search submission and decide whether to show the lightbox.

        Returns:
            True if the lightbox was triggered
        """
        self.search_count += 1

        if self.search_count % 2 == 1 and self.environment_guard():
            self.show_with_item(self.select_random_item())
            logger.info(f"Lightbox triggered on search {self.search_count}: {self.current_item_url}")
            return True
        return False

    def navigate_previous(self):
        """Move to the previous item, wrapping to the last."""
        if not self.items:
            return
        if self.current_item_url not in self.items:
            self.current_item_url = self.items[-1]
            return
        index = self.items.index(self.current_item_url)
        self.current_item_url = self.items[index - 1]

    def navigate_next(self):
        """Move to the next item, wrapping to the first."""
        if not self.items:
            return
        if self.current_item_url not in self.items:
            self.current_item_url = self.items[0]
            return
        index = self.items.index(self.current_item_url)
        self.current_item_url = self.items[(index + 1) % len(self.items)]

    def reset_search_count(self):
        self.search_count = 0
