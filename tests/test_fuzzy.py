from __future__ import annotations

import unittest

from rats.search import FuzzyMatch, fuzzy_match, fuzzy_score, rank_candidates


class FuzzyScoreTests(unittest.TestCase):
    def test_separated_abbreviation_scores_positive(self) -> None:
        match = fuzzy_match("gto", "go_to_top")

        self.assertIsNotNone(match)
        assert match is not None
        self.assertEqual(match.matched_indices, (0, 3, 4))
        # g@0 (10+15), t after "_" (10+10), o consecutive (10+5), minus length 9
        self.assertEqual(match.score, 51)

    def test_non_subsequence_does_not_match(self) -> None:
        self.assertIsNone(fuzzy_match("xyz", "go_to_top"))
        self.assertIsNone(fuzzy_score("ba", "ab"))

    def test_empty_pattern_matches_everything_with_zero(self) -> None:
        self.assertEqual(fuzzy_match("", "anything"), FuzzyMatch(score=0))
        self.assertEqual(fuzzy_score("", ""), 0)

    def test_matching_is_case_insensitive(self) -> None:
        self.assertEqual(fuzzy_score("GTO", "Go_To_Top"), fuzzy_score("gto", "go_to_top"))

    def test_bonuses(self) -> None:
        self.assertEqual(fuzzy_score("ab", "ab"), 38)
        self.assertEqual(fuzzy_score("b", "a.b"), 17)
        self.assertEqual(fuzzy_score("b", "a-b"), 17)
        self.assertEqual(fuzzy_score("b", "acb"), 7)

    def test_long_candidates_can_score_negative_but_still_match(self) -> None:
        self.assertEqual(fuzzy_score("z", "abcdefghijklmnopqrstuvwxyz"), -16)

    def test_scan_is_greedy_left_to_right(self) -> None:
        match = fuzzy_match("aa", "aba")

        assert match is not None
        self.assertEqual(match.matched_indices, (0, 2))
        self.assertEqual(match.score, 32)

    def test_matched_indices_always_spell_the_pattern(self) -> None:
        cases = [
            ("rdm", "README.md"),
            ("cfg", "config.json"),
            ("..", ".."),
            ("tst", "tests/test_fuzzy.py"),
            ("Ab", "xAyB"),
        ]
        for pattern, candidate in cases:
            with self.subTest(pattern=pattern, candidate=candidate):
                match = fuzzy_match(pattern, candidate)
                assert match is not None
                indices = match.matched_indices
                self.assertEqual(list(indices), sorted(set(indices)))
                spelled = "".join(candidate.lower()[idx] for idx in indices)
                self.assertEqual(spelled, pattern.lower())


class RankCandidatesTests(unittest.TestCase):
    def test_sorts_by_descending_score_and_keeps_ties_in_input_order(self) -> None:
        ranked = rank_candidates("a", ["xa", "ab", "ya"])

        self.assertEqual(ranked, [(1, 23), (0, 8), (2, 8)])

    def test_empty_pattern_keeps_input_order(self) -> None:
        self.assertEqual(rank_candidates("", ["b", "a", "c"]), [(0, 0), (1, 0), (2, 0)])

    def test_drops_non_matching_candidates(self) -> None:
        self.assertEqual(rank_candidates("zz", ["a", "b"]), [])


if __name__ == "__main__":
    unittest.main()
