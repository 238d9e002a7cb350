"""
Service for managing the assistant conversation and its scripted narrative.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from models.conversation import ConversationMessage, ConversationScript, DetailScript
from models.results import SearchResult
from pipeline.conversation_scripts import (
    FALLBACK_RESPONSE,
    get_conversation_script,
    get_detail_response,
    get_detail_script,
    get_next_response,
    get_scripted_results,
)
from utils.search import generate_results_summary

logger = logging.getLogger(__name__)

GREETING = "Good morning, Dave. How may I assist you today?"

def _greeting_message() -> ConversationMessage:
    return ConversationMessage(
        id="system-message-1",
        sender="system",
        items=[{"id": "greeting-text", "type": "text", "content": GREETING, "emphasis": "normal"}]
    )

class ConversationService:
    """
    Conversation history plus the scripted narrowing dialogue.

    Each user reply consumes one scripted response and moves the result
    stage forward by one, so the shown results narrow in lock-step with the
    conversation.
    """

    def __init__(self):
        """Initialize the conversation service."""
        logger.info("Initializing conversation service")
        self.conversation_history: List[ConversationMessage] = [_greeting_message()]

        self.current_script: Optional[ConversationScript] = None
        self.original_query = ""
        self.response_index = 0

        self.detail_script: Optional[DetailScript] = None
        self.detail_index = 0

    def add_message(self, message: ConversationMessage):
        self.conversation_history.append(message)

    def update_message(self, message_id: str, updated_message: ConversationMessage):
        """Replace a message by ID. Unknown IDs are ignored."""
        for index, message in enumerate(self.conversation_history):
            if message.id == message_id:
                self.conversation_history[index] = updated_message
                return
        logger.debug(f"No message to update with id: {message_id}")

    def remove_message(self, message_id: str):
        """Remove a message by ID. Unknown IDs are ignored."""
        self.conversation_history = [
            message for message in self.conversation_history if message.id != message_id
        ]

    def clear_conversation(self):
        """Clear all messages and the script state."""
        self.conversation_history = []
        self.reset_script()
        logger.info("Cleared conversation")

    def initialize_script(self, query: str):
        """
        Resolve the script for a query and rewind to its first stage.

        Args:
            query: The search query that opened the conversation
        """
        self.current_script = get_conversation_script(query)
        self.original_query = query
        self.response_index = 0
        logger.debug(f"Initialized conversation script for query: '{query}'")

    def reset_script(self):
        self.current_script = None
        self.original_query = ""
        self.response_index = 0

    def get_scripted_response(self) -> str:
        """
        Return the next scripted response and advance the index.

        Without a script, or past its end, the fallback sentence is returned.
        """
        if self.current_script is None:
            return FALLBACK_RESPONSE

        response = get_next_response(self.current_script, self.response_index)
        self.response_index += 1
        return response

    def current_results(self) -> List[SearchResult]:
        """Results for the current stage; one stage per response given."""
        if self.current_script is None:
            return []
        return get_scripted_results(self.current_script, self.response_index)

    def start(self, query: str) -> List[SearchResult]:
        """
        Open a scripted conversation for a search query.

        Records the query as a user message and a results summary as a
        system message.

        Args:
            query: The search query

        Returns:
            The first (widest) result stage
        """
        self.initialize_script(query)
        self.add_message(self._user_message(query))

        results = self.current_results()
        summary = generate_results_summary(results)
        self.add_message(self._system_message([{
            "type": "results-summary",
            "resultCount": summary["total"],
            "searchTerm": query,
        }]))
        return results

    def reply(self, text: str) -> Tuple[str, List[SearchResult]]:
        """
        Handle a follow-up message in the scripted conversation.

        Args:
            text: The user's follow-up

        Returns:
            The scripted response and the narrowed results
        """
        if self.current_script is None:
            self.initialize_script(text)

        self.add_message(self._user_message(text))
        response = self.get_scripted_response()
        results = self.current_results()
        self.add_message(self._system_message([{"type": "text", "content": response}]))
        return response, results

    def initialize_detail(self, query: str):
        """Resolve the profile-screen detail script for a query."""
        self.detail_script = get_detail_script(query)
        self.detail_index = 0

    def get_detail_reply(self) -> str:
        """Return the next detail response, cycling past the end."""
        if self.detail_script is None:
            self.initialize_detail(self.original_query)
        response = get_detail_response(self.detail_script, self.detail_index)
        self.detail_index += 1
        return response

    def _user_message(self, content: str) -> ConversationMessage:
        return ConversationMessage(id=f"user-{uuid.uuid4()}", sender="user", content=content)

    def _system_message(self, items: List[Dict[str, Any]]) -> ConversationMessage:
        items = [{"id": f"item-{uuid.uuid4()}", **item} for item in items]
        return ConversationMessage(id=f"system-{uuid.uuid4()}", sender="system", items=items)
