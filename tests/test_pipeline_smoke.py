import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import app.main  # noqa: F401
from app.schemas.ats import ATSScoreRequest
from app.services.ats_service import clean_text_fail_open, run_ats_score


class PipelineSmokeTests(unittest.TestCase):
    def test_cleaning_failure_falls_back_to_raw_text(self):
        with patch("app.services.ats_service.clean_extracted_text", side_effect=RuntimeError("boom")):
            result = clean_text_fail_open("Raw  text")
        self.assertEqual(result.cleaned_text, "Raw  text")
        self.assertEqual(result.issues_fixed, ["Cleaning skipped: RuntimeError"])

    def test_scoring_proceeds_when_cleaning_fails(self):
        payload = ATSScoreRequest(
            resume_text="python python docker docker",
            job_description_text="python python docker docker",
        )
        with patch("app.services.ats_service.clean_extracted_text", side_effect=RuntimeError("boom")):
            response = run_ats_score(payload)
        self.assertEqual(response.score, 100)
        self.assertEqual(response.resume_cleaning.issues_fixed, ["Cleaning skipped: RuntimeError"])


if __name__ == "__main__":
    unittest.main()
