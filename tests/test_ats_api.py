import os
import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep the limiter database out of the working tree.
os.environ.setdefault(
    "ATS_RATE_LIMIT_DB_PATH",
    str(Path(tempfile.gettempdir()) / "resume_ats_tailor_test_rate_limit.db"),
)

from fastapi import HTTPException  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.ats_rate_limit import clear_ats_rate_limit_events  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.core.security import check_api_key  # noqa: E402
from app.main import app  # noqa: E402


class AtsApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "resume_text": (
                "Jane Doe\n"
                "Backend engineer with Python and Docker experience.\n"
                "Built Python services and Docker pipelines for payments.\n"
                "Worked in acollaborative team on payments reliability."
            ),
            "job_description_text": (
                "Backend engineer for payments. Python and Docker required. "
                "Python services, Docker images, payments APIs, Kubernetes and Kubernetes operators."
            ),
        }

    def setUp(self):
        clear_ats_rate_limit_events()

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_ats_score_contract_shape(self):
        response = self.client.post("/v1/ats/score", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertIsInstance(body["score"], int)
        self.assertGreaterEqual(body["score"], 0)
        self.assertLessEqual(body["score"], 100)
        self.assertEqual(
            len(body["matched_keywords"]) + len(body["missing_keywords"]),
            body["total_keywords"],
        )
        self.assertIn("python", body["matched_keywords"])
        self.assertIn("kubernetes", body["missing_keywords"])
        for section in ("skills", "experience", "summary"):
            self.assertIn("matched", body["analysis"][section])
            self.assertIn("missing", body["analysis"][section])
        self.assertIn("Fixed 1 specific PDF parsing issues", body["resume_cleaning"]["issues_fixed"])

    def test_ats_score_without_resume_cleaning(self):
        payload = dict(self.payload, clean_resume=False)
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["resume_cleaning"])

    def test_ats_score_accepts_empty_texts(self):
        response = self.client.post("/v1/ats/score", json={"resume_text": "", "job_description_text": ""})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["score"], 0)
        self.assertEqual(body["total_keywords"], 0)
        self.assertEqual(body["match_percentage"], 0)

    def test_ats_score_rejects_oversized_text(self):
        payload = dict(self.payload, resume_text="a" * (settings.max_text_chars + 1))
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_ats_rate_limit_is_per_user(self):
        status_codes = []
        for _ in range(settings.ats_rate_limit_per_minute + 2):
            response = self.client.post(
                "/v1/ats/score",
                json=self.payload,
                headers={"X-User-Id": "rate-limited-user"},
            )
            status_codes.append(response.status_code)
        self.assertIn(429, status_codes)

        other = self.client.post("/v1/ats/score", json=self.payload, headers={"X-User-Id": "fresh-user"})
        self.assertEqual(other.status_code, 200)

    def test_text_clean_returns_report_quality_and_stats(self):
        response = self.client.post(
            "/v1/text/clean",
            json={"text": "Worked in acollaborative team.Shipped   fast", "options": {"remove_special_chars": True}},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["cleaned_text"], "Worked in a collaborative team. Shipped fast")
        self.assertEqual(body["cleaned_length"], len(body["cleaned_text"]))
        self.assertEqual(body["issues_fixed"][-1], "Applied final cleanup")
        self.assertIn("quality_score", body["quality"])
        self.assertIn("reduction_percentage", body["stats"])

    def test_text_validate(self):
        response = self.client.post("/v1/text/validate", json={"text": "Too short to use."})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertFalse(body["is_valid"])
        self.assertTrue(body["issues"])


class ApiKeyTests(unittest.TestCase):
    def test_public_mode_accepts_missing_key(self):
        check_api_key(None)

    def test_protected_mode_requires_matching_key(self):
        protected = replace(settings, auth_mode="protected", api_key="secret-key")
        with patch("app.core.security.settings", protected):
            with self.assertRaises(HTTPException) as ctx:
                check_api_key("wrong-key")
            self.assertEqual(ctx.exception.status_code, 401)
            check_api_key("secret-key")


if __name__ == "__main__":
    unittest.main()
