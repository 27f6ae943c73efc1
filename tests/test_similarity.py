"""Unit tests for Jaccard similarity scoring."""

import unittest

from resume_screener.ranking.similarity import jaccard_similarity, tokenize

SAMPLES = [
    "",
    "   ",
    "Python developer",
    "python DEVELOPER with leadership skills",
    "Looking for a Python developer with leadership skills",
    "graphic designer adobe",
]


class TestSimilarity(unittest.TestCase):
    def test_symmetric(self):
        for a in SAMPLES:
            for b in SAMPLES:
                self.assertEqual(jaccard_similarity(a, b), jaccard_similarity(b, a))

    def test_bounded(self):
        for a in SAMPLES:
            for b in SAMPLES:
                score = jaccard_similarity(a, b)
                self.assertGreaterEqual(score, 0.0)
                self.assertLessEqual(score, 1.0)

    def test_identical_text_scores_one(self):
        for text in SAMPLES:
            if text.strip():
                self.assertEqual(jaccard_similarity(text, text), 1.0)

    def test_both_empty_scores_zero(self):
        self.assertEqual(jaccard_similarity("", ""), 0.0)
        self.assertEqual(jaccard_similarity("  \n", "\t"), 0.0)

    def test_disjoint_scores_zero(self):
        self.assertEqual(jaccard_similarity("alpha beta", "gamma delta"), 0.0)
        self.assertEqual(jaccard_similarity("alpha", ""), 0.0)

    def test_case_insensitive_distinct_tokens(self):
        # {python, developer} vs {python, developer, with, leadership, skills}
        self.assertAlmostEqual(
            jaccard_similarity("Python Python developer", "python DEVELOPER with leadership skills"),
            2 / 5,
        )

    def test_no_stemming_or_punctuation_stripping(self):
        self.assertEqual(tokenize("Python, python"), {"python,", "python"})


if __name__ == "__main__":
    unittest.main()
