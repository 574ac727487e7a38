import json
import unittest

from _support import runtime_sandbox

from Wolfbot.runtime import (
    get_turn_id,
    humanize,
    load_snapshot,
    log_event,
    metrics_inc,
    metrics_observe_ms,
    metrics_reset,
    metrics_snapshot,
    recent_events,
    recent_receipts,
    record_receipt,
    set_turn_id,
)


class StructuredLogTests(unittest.TestCase):
    def test_events_carry_turn_id(self):
        with runtime_sandbox() as td:
            turn = set_turn_id("turn-1")
            self.assertEqual(get_turn_id(), "turn-1")
            self.assertTrue(log_event("wolf_query", query="2+2"))
            self.assertTrue(log_event("wolf_error", error_code="bad_status"))
            rows = [json.loads(x) for x in (td / "events.jsonl").read_text(encoding="utf-8").splitlines()]
            only_errors = recent_events(event="wolf_error")
        self.assertEqual([r["event"] for r in rows], ["wolf_query", "wolf_error"])
        self.assertEqual(rows[0]["turn_id"], turn)
        self.assertEqual(rows[0]["query"], "2+2")
        self.assertEqual([r["error_code"] for r in only_errors], ["bad_status"])

    def test_receipts(self):
        with runtime_sandbox():
            record_receipt("wolf_reply", True, files=2)
            record_receipt("wolf_error", False, ephemeral=True, error="Unknown Webhook")
            rows = recent_receipts(limit=5)
            failed = recent_receipts(failed_only=True)
        self.assertEqual([r["action"] for r in rows], ["wolf_reply", "wolf_error"])
        self.assertEqual(rows[0]["files"], 2)
        self.assertNotIn("error", rows[0])
        self.assertEqual([r["error"] for r in failed], ["Unknown Webhook"])
        self.assertTrue(failed[0]["ephemeral"])


class MetricsTests(unittest.TestCase):
    def setUp(self):
        metrics_reset()

    def test_snapshot_round_trips_through_file(self):
        with runtime_sandbox():
            metrics_inc("wolf.ok")
            metrics_inc("wolf.attachments", 3)
            for ms in (10, 20, 30):
                metrics_observe_ms("wolf.total_ms", ms)
            snap = metrics_snapshot()
            loaded = load_snapshot()
        self.assertEqual(snap["counters"], {"wolf.ok": 1, "wolf.attachments": 3})
        self.assertEqual(snap["latency_ms"]["wolf.total_ms"]["count"], 3)
        self.assertAlmostEqual(snap["latency_ms"]["wolf.total_ms"]["avg"], 20.0)
        self.assertEqual(loaded["counters"], snap["counters"])

    def test_missing_snapshot(self):
        with runtime_sandbox():
            self.assertEqual(load_snapshot(), {})


class HumanizeTests(unittest.TestCase):
    def test_known_and_unknown_codes(self):
        self.assertEqual(humanize("bad_status"), "The response' status code was incorrect")
        self.assertEqual(
            humanize("query_failed", "Try a simpler query"),
            "Could not successfully receive the result Try a simpler query",
        )
        self.assertEqual(humanize("nope"), "An unexpected error occurred.")


if __name__ == "__main__":
    unittest.main()
