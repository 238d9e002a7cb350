"""
Tests for query submission, pagination and the displayed total.
"""
import unittest
import asyncio
import random
import sys
import os
import logging

# Add parent directory to path to allow imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data.session import QuerySession
from models.errors import InvalidQueryError
from pipeline.input_validation import POTENTIALLY_HARMFUL_CONTENT, QUERY_TOO_LONG
from services.cache_service import ResultCache, display_total
from services.lightbox_service import LightboxService
from services.mock_backend import MockSearchBackend
from services.search_service import SearchService
from utils.monitoring import SearchSystemMonitor

# Disable logging during tests
logging.disable(logging.CRITICAL)


class TestDisplayTotal(unittest.TestCase):
    """Tests for the displayed total during refetches."""

    def test_live_total_when_not_loading(self):
        self.assertEqual(display_total(35, 60, False), 35)
        self.assertEqual(display_total(0, 60, False), 0)

    def test_last_nonzero_while_loading(self):
        self.assertEqual(display_total(0, 60, True), 60)

    def test_live_total_while_loading_if_nonzero(self):
        self.assertEqual(display_total(42, 60, True), 42)

    def test_zero_before_any_total(self):
        self.assertEqual(display_total(0, 0, True), 0)

    def test_cache_ignores_zero_totals(self):
        cache = ResultCache()

        cache.remember(45)
        cache.remember(0)

        self.assertEqual(cache.last_nonzero_total, 45)
        self.assertEqual(cache.display_total(0, True), 45)

        cache.reset()
        self.assertEqual(cache.display_total(0, True), 0)


class TestQuerySession(unittest.TestCase):
    """Tests for the query history."""

    def setUp(self):
        self.session = QuerySession()

    def test_add_to_history_trims(self):
        self.session.add_to_history("  john caruso  ")

        self.assertEqual(self.session.history, ["john caruso"])

    def test_blank_and_duplicate_queries_ignored(self):
        self.session.add_to_history("alpha")
        self.session.add_to_history("   ")
        self.session.add_to_history("beta")
        self.session.add_to_history("alpha")

        # A repeat does not move the existing entry
        self.assertEqual(self.session.history, ["alpha", "beta"])

    def test_history_is_capped(self):
        for i in range(55):
            self.session.add_to_history(f"query {i}")

        history = self.session.history
        self.assertEqual(len(history), 50)
        self.assertEqual(history[0], "query 5")
        self.assertEqual(history[-1], "query 54")

    def test_recent_queries_newest_first(self):
        for i in range(7):
            self.session.add_to_history(f"query {i}")

        self.assertEqual(
            self.session.recent_queries(),
            ["query 6", "query 5", "query 4", "query 3", "query 2"]
        )

    def test_history_copy_is_detached(self):
        self.session.add_to_history("alpha")

        self.session.history.append("mutated")

        self.assertEqual(self.session.history, ["alpha"])

    def test_zero_limits_are_respected(self):
        session = QuerySession(history_limit=0, recent_limit=0)

        session.add_to_history("alpha")

        self.assertEqual(session.history, [])
        self.assertEqual(session.recent_queries(), [])

    def test_recent_limit_zero_with_history(self):
        session = QuerySession(recent_limit=0)

        session.add_to_history("alpha")

        self.assertEqual(session.history, ["alpha"])
        self.assertEqual(session.recent_queries(), [])

    def test_clear_history(self):
        self.session.add_to_history("alpha")
        self.session.set_query("alpha")

        self.session.clear_history()

        self.assertEqual(self.session.history, [])
        self.assertTrue(self.session.has_searched)


class TestSearchService(unittest.IsolatedAsyncioTestCase):
    """Tests for the search lifecycle against the mock backend."""

    async def asyncSetUp(self):
        self.sleeps = []
        self.gate = asyncio.Event()
        self.gate.set()

        async def gated_sleep(seconds):
            self.sleeps.append(seconds)
            await self.gate.wait()

        self.backend = MockSearchBackend(rng=random.Random(7), sleep=gated_sleep)
        self.lightbox = LightboxService(
            items=["https://example.com/a", "https://example.com/b"],
            environment_guard=lambda: True,
            rng=random.Random(0)
        )
        self.monitor = SearchSystemMonitor()
        self.service = SearchService(
            backend=self.backend,
            query_session=QuerySession(),
            result_cache=ResultCache(),
            lightbox_service=self.lightbox,
            monitor=self.monitor
        )

    async def _start_in_flight(self, coro):
        """Close the gate and run coro until it is waiting on the backend."""
        self.gate.clear()
        task = asyncio.create_task(coro)
        await asyncio.sleep(0)
        return task

    async def test_submit_fetches_first_page(self):
        fetched = await self.service.submit("  John   Caruso ")

        self.assertTrue(fetched)
        self.assertEqual(self.service.current_query, "John Caruso")
        self.assertEqual(len(self.service.results), 20)
        self.assertEqual(self.service.results[0].id, 1)
        self.assertEqual(self.service.pagination["current_page"], 1)
        self.assertTrue(30 <= self.service.pagination["total_results"] <= 80)
        self.assertTrue(self.service.pagination["has_more"])
        self.assertFalse(self.service.is_loading)
        self.assertIsNone(self.service.error)
        self.assertEqual(self.service.query_session.history, ["John Caruso"])
        self.assertEqual(self.sleeps, [0.5])

    async def test_load_more_appends_next_page(self):
        await self.service.submit("John Caruso")

        fetched = await self.service.load_more_results()

        self.assertTrue(fetched)
        self.assertEqual(len(self.service.results), 40)
        self.assertEqual(self.service.results[20].id, 21)
        self.assertEqual(self.service.pagination["current_page"], 2)

    async def test_load_more_without_more_results_is_noop(self):
        self.service.update_pagination(has_more=False)

        fetched = await self.service.load_more_results()

        self.assertFalse(fetched)
        self.assertEqual(self.sleeps, [])

    async def test_empty_query_clears_results(self):
        await self.service.submit("John Caruso")
        self.service.set_error("stale")

        fetched = await self.service.submit("   ")

        self.assertFalse(fetched)
        self.assertEqual(self.service.results, [])
        self.assertIsNone(self.service.error)
        self.assertEqual(len(self.sleeps), 1)

    async def test_query_too_long_raises(self):
        with self.assertRaises(InvalidQueryError) as context:
            await self.service.submit("a" * 501)

        self.assertEqual(context.exception.code, QUERY_TOO_LONG)
        self.assertEqual(self.service.error, context.exception.message)
        self.assertEqual(self.sleeps, [])
        self.assertEqual(self.service.query_session.history, [])

    async def test_script_injection_raises(self):
        with self.assertRaises(InvalidQueryError) as context:
            await self.service.submit("<SCRIPT>alert(1)</SCRIPT>")

        self.assertEqual(context.exception.code, POTENTIALLY_HARMFUL_CONTENT)
        self.assertEqual(self.sleeps, [])

    async def test_backend_failure_keeps_previous_results(self):
        await self.service.submit("John Caruso")
        previous_results = self.service.results
        previous_total = self.service.pagination["total_results"]

        fetched = await self.service.submit("error test")

        self.assertFalse(fetched)
        self.assertEqual(self.service.error, "API Error")
        self.assertIs(self.service.results, previous_results)
        self.assertEqual(self.service.pagination["total_results"], previous_total)
        self.assertFalse(self.service.is_loading)
        self.assertEqual(self.monitor.outcome_distribution["backend_failure"], 1)

    async def test_load_more_after_failure_continues_previous_query(self):
        fetched_queries = []
        search = self.backend.search

        async def recording_search(query, page=1, page_size=None):
            fetched_queries.append((query, page))
            return await search(query, page=page, page_size=page_size)

        self.backend.search = recording_search

        await self.service.submit("John Caruso")
        await self.service.submit("error test")

        self.assertEqual(self.service.current_query, "John Caruso")

        await self.service.load_more_results()

        self.assertEqual(fetched_queries[-1], ("John Caruso", 2))
        self.assertEqual(len(self.service.results), 40)
        self.assertEqual(self.service.pagination["current_page"], 2)

    async def test_success_clears_previous_error(self):
        await self.service.submit("error test")
        self.assertEqual(self.service.error, "API Error")

        await self.service.submit("John Caruso")

        self.assertIsNone(self.service.error)

    async def test_display_total_preserved_during_refetch(self):
        await self.service.submit("first query")
        first_total = self.service.pagination["total_results"]

        task = await self._start_in_flight(self.service.submit("second query"))

        self.assertTrue(self.service.is_loading)
        self.assertEqual(self.service.pagination["total_results"], 0)
        self.assertEqual(self.service.display_total_results, first_total)

        self.gate.set()
        await task

        self.assertFalse(self.service.is_loading)
        self.assertEqual(self.service.display_total_results, self.service.pagination["total_results"])

    async def test_has_more_held_during_refetch(self):
        await self.service.submit("first query")
        self.assertTrue(self.service.pagination["has_more"])

        task = await self._start_in_flight(self.service.submit("second query"))

        self.assertTrue(self.service.pagination["has_more"])
        self.assertEqual(self.service.pagination["current_page"], 1)

        self.gate.set()
        await task

    async def test_single_fetch_in_flight(self):
        task = await self._start_in_flight(self.service.submit("first query"))

        self.assertFalse(await self.service.submit("second query"))
        self.assertFalse(await self.service.load_more_results())
        self.assertEqual(len(self.sleeps), 1)

        self.gate.set()
        self.assertTrue(await task)

        self.assertEqual(self.service.current_query, "first query")
        self.assertEqual(self.service.query_session.history, ["first query"])
        self.assertEqual(self.monitor.outcome_distribution["ignored"], 1)

    async def test_every_submission_counts_for_lightbox(self):
        shown = []

        await self.service.submit("John Caruso")
        shown.append(self.lightbox.is_visible)
        self.lightbox.hide()

        with self.assertRaises(InvalidQueryError):
            await self.service.submit("javascript:alert(1)")
        shown.append(self.lightbox.is_visible)
        self.lightbox.hide()

        await self.service.submit("")
        shown.append(self.lightbox.is_visible)
        self.lightbox.hide()

        await self.service.submit("error test")
        shown.append(self.lightbox.is_visible)
        self.lightbox.hide()

        self.assertEqual(self.lightbox.search_count, 4)
        self.assertEqual(shown, [True, False, True, False])

    async def test_load_more_does_not_count_for_lightbox(self):
        await self.service.submit("John Caruso")

        await self.service.load_more_results()

        self.assertEqual(self.lightbox.search_count, 1)

    async def test_monitor_records_outcomes(self):
        await self.service.submit("John Caruso")
        await self.service.load_more_results()
        await self.service.submit("")

        health = self.monitor.get_system_health()

        self.assertEqual(health["queries_processed"], 3)
        self.assertEqual(health["load_more_count"], 1)
        self.assertEqual(health["outcome_distribution"]["success"], 2)
        self.assertEqual(health["outcome_distribution"]["empty"], 1)
        self.assertEqual(health["error_rate"], 0)


if __name__ == '__main__':
    unittest.main()
