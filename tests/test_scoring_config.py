import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config.scoring import (
    get_scoring_config,
    get_scoring_float,
    get_scoring_int,
    get_scoring_value,
)


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.bonus.points"), 10)
        self.assertEqual(get_scoring_int("ats.keywords.max_keywords", 0), 50)
        self.assertEqual(get_scoring_float("text_quality.special_chars.max_ratio", 0.0), 0.1)

    def test_missing_and_non_scalar_paths_fall_back(self):
        self.assertEqual(get_scoring_value("ats.missing.key", "fallback"), "fallback")
        self.assertIsNone(get_scoring_value(""))
        self.assertEqual(get_scoring_int("ats", 7), 7)


if __name__ == "__main__":
    unittest.main()
