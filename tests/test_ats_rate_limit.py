import os
import sys
import tempfile
import unittest
import uuid
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep the limiter database out of the working tree.
os.environ.setdefault(
    "ATS_RATE_LIMIT_DB_PATH",
    str(Path(tempfile.gettempdir()) / "resume_ats_tailor_test_rate_limit.db"),
)

from app.core.ats_rate_limit import (  # noqa: E402
    AtsRateLimitExceeded,
    clear_ats_rate_limit_events,
    enforce_ats_rate_limit,
)


class AtsRateLimitTests(unittest.TestCase):
    def setUp(self):
        clear_ats_rate_limit_events()

    def test_sliding_window_rejects_after_limit(self):
        client = f"user:{uuid.uuid4().hex}"
        self.assertEqual(enforce_ats_rate_limit(client, "/v1/ats/score", limit=2, window_seconds=60), 1)
        self.assertEqual(enforce_ats_rate_limit(client, "/v1/ats/score", limit=2, window_seconds=60), 0)
        with self.assertRaises(AtsRateLimitExceeded) as ctx:
            enforce_ats_rate_limit(client, "/v1/ats/score", limit=2, window_seconds=60)
        self.assertGreaterEqual(ctx.exception.retry_after_seconds, 1)
        self.assertLessEqual(ctx.exception.retry_after_seconds, 60)

    def test_budgets_are_per_client_and_route(self):
        first = f"user:{uuid.uuid4().hex}"
        second = f"user:{uuid.uuid4().hex}"
        enforce_ats_rate_limit(first, "/v1/ats/score", limit=1)
        with self.assertRaises(AtsRateLimitExceeded):
            enforce_ats_rate_limit(first, "/v1/ats/score", limit=1)
        self.assertEqual(enforce_ats_rate_limit(second, "/v1/ats/score", limit=1), 0)
        self.assertEqual(enforce_ats_rate_limit(first, "/v1/other", limit=1), 0)


if __name__ == "__main__":
    unittest.main()
