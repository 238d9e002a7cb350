"""
Integration tests for a whole search assistant session.
"""
import unittest
import random
import sys
import os
from unittest.mock import patch
import logging

# Add parent directory to path to allow imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import initialize_system, execute_search
from services.mock_backend import MockSearchBackend
from utils.search import (
    calculate_average_rating,
    generate_results_summary,
    group_results_by_location,
)
from data.people import JOHN_CARUSO

# Disable logging during tests
logging.disable(logging.CRITICAL)

async def instant_sleep(seconds):
    return None


class TestIntegrationSession(unittest.IsolatedAsyncioTestCase):
    """Integration tests for the composed session."""

    async def asyncSetUp(self):
        self.backend = MockSearchBackend(rng=random.Random(1), sleep=instant_sleep)
        self.system = initialize_system(
            environment_guard=lambda: True,
            rng=random.Random(1),
            backend=self.backend
        )

    async def test_scripted_search(self):
        result = await execute_search(self.system, "John Caruso")

        self.assertEqual(result["query"], "John Caruso")
        self.assertEqual(len(result["results"]), 20)
        self.assertEqual(result["filtered_results"], result["results"])
        self.assertTrue(30 <= result["display_total"] <= 80)
        self.assertEqual(len(result["scripted_results"]), 8)
        self.assertIsNone(result["error"])
        self.assertTrue(self.system["lightbox_service"].is_visible)

    async def test_filters_apply_to_backend_results(self):
        self.system["filter_criteria"].set_min_rating(4.0)

        result = await execute_search(self.system, "John Caruso")

        self.assertTrue(all(r.rating >= 4.0 for r in result["filtered_results"]))
        self.assertLessEqual(len(result["filtered_results"]), len(result["results"]))

    async def test_rejected_query_has_no_script(self):
        await execute_search(self.system, "John Caruso")

        result = await execute_search(self.system, "<script>alert(1)</script>")

        self.assertIn("not allowed", result["error"])
        self.assertEqual(result["scripted_results"], [])
        self.assertEqual(len(result["results"]), 20)

    async def test_empty_query_keeps_conversation_position(self):
        conversation = self.system["conversation_service"]
        await execute_search(self.system, "John Caruso")
        conversation.reply("He lives in California")
        conversation.reply("He is married")
        before = (conversation.response_index, len(conversation.conversation_history))

        result = await execute_search(self.system, "   ")

        self.assertEqual((conversation.response_index, len(conversation.conversation_history)), before)
        self.assertEqual(result["results"], [])
        self.assertEqual(result["scripted_results"], [])

    async def test_failed_search_keeps_conversation_position(self):
        conversation = self.system["conversation_service"]
        await execute_search(self.system, "Von Miller")
        conversation.reply("Over 30")
        before = (conversation.response_index, len(conversation.conversation_history))

        result = await execute_search(self.system, "error test")

        self.assertEqual((conversation.response_index, len(conversation.conversation_history)), before)
        self.assertEqual(result["query"], "Von Miller")
        self.assertEqual(result["scripted_results"], [])

    async def test_backend_failure_reported(self):
        result = await execute_search(self.system, "error test")

        self.assertEqual(result["error"], "API Error")
        self.assertEqual(result["results"], [])
        self.assertEqual(result["scripted_results"], [])

    async def test_lightbox_disabled_by_feature_flag(self):
        with patch.dict('main.FEATURES', {"use_lightbox": False}):
            system = initialize_system(backend=self.backend)

        self.assertIsNone(system["lightbox_service"])
        result = await execute_search(system, "Von Miller")
        self.assertIsNone(result["error"])

    async def test_conversation_disabled_by_feature_flag(self):
        with patch.dict('main.FEATURES', {"use_conversation_script": False}):
            result = await execute_search(self.system, "Von Miller")

        self.assertEqual(result["scripted_results"], [])

    async def test_upload(self):
        result = await self.backend.upload("report.pdf")

        self.assertTrue(result.success)
        self.assertEqual(result.message, 'File "report.pdf" uploaded successfully')


class TestSearchUtils(unittest.TestCase):
    """Tests for the result helper functions."""

    def test_summary(self):
        summary = generate_results_summary(JOHN_CARUSO)

        self.assertEqual(summary["total"], 8)
        self.assertEqual(summary["average_age"], 32)
        self.assertEqual(summary["average_rating"], calculate_average_rating(JOHN_CARUSO))
        self.assertLessEqual(len(summary["top_locations"]), 3)

    def test_empty_summary(self):
        self.assertEqual(generate_results_summary([])["total"], 0)
        self.assertEqual(calculate_average_rating([]), 0)

    def test_group_by_location(self):
        groups = group_results_by_location(JOHN_CARUSO)

        self.assertEqual(sum(len(g) for g in groups.values()), 8)


if __name__ == '__main__':
    unittest.main()
