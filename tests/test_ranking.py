"""Ranking cascade, fuzzy subsequence scoring, and ordering guarantees."""

from __future__ import annotations

import unittest

from lazylaunch.items.types import APPLICATION_KIND, COMMAND_KIND, CandidateItem
from lazylaunch.search.ranking import rank, score_item, subsequence_score


def _item(
    name: str,
    *,
    command: str | None = None,
    description: str | None = None,
    kind: str = COMMAND_KIND,
) -> CandidateItem:
    return CandidateItem(
        name=name,
        display_name=name,
        command=name if command is None else command,
        description=description,
        kind=kind,
    )


class ScoreItemTierTests(unittest.TestCase):
    def test_empty_query_scores_zero(self) -> None:
        self.assertEqual(score_item("", _item("firefox")), 0)

    def test_name_prefix_scores_tier_three(self) -> None:
        self.assertEqual(score_item("fire", _item("firefox")), 1496)

    def test_exact_match_on_name_or_command(self) -> None:
        self.assertEqual(score_item("code", _item("code")), 2000)
        self.assertEqual(score_item("CODE", _item("Visual Code", command="code")), 2000)

    def test_application_bonus_applies_to_exact_match(self) -> None:
        app = _item("code", kind=APPLICATION_KIND)
        cmd = _item("code", kind=COMMAND_KIND)
        self.assertEqual(score_item("code", app), 2050)
        self.assertEqual(score_item("code", cmd), 2000)

    def test_command_prefix_when_name_does_not_match(self) -> None:
        item = _item("Web Browser", command="firefox --new-window")
        self.assertEqual(score_item("fire", item), 1400 - 4)

    def test_name_substring(self) -> None:
        self.assertEqual(score_item("fox", _item("firefox")), 1000 - 3)

    def test_command_substring(self) -> None:
        item = _item("Browser", command="/usr/bin/firefox")
        self.assertEqual(score_item("fox", item), 900 - 3)

    def test_description_substring_with_application_bonus(self) -> None:
        item = _item("Files", command="nautilus", description="Access and organize files", kind=APPLICATION_KIND)
        self.assertEqual(score_item("organize", item), 600 - 8 + 50)

    def test_missing_description_falls_through_to_fuzzy(self) -> None:
        item = _item("gnome-terminal")
        self.assertEqual(score_item("gtm", item), subsequence_score("gtm", "gnome-terminal"))

    def test_fuzzy_falls_back_to_command_when_name_misses(self) -> None:
        item = _item("Xaxbxc", command="abc-tool")
        self.assertIsNone(subsequence_score("atl", "xaxbxc"))
        self.assertEqual(score_item("atl", item), 193)

    def test_fuzzy_takes_better_of_name_and_command(self) -> None:
        item = _item("f-o-o", command="fxoo")
        # name scores 196, command scores 198 + 10 for the trailing run
        self.assertEqual(score_item("foo", item), 208)

    def test_no_match_returns_none(self) -> None:
        self.assertIsNone(score_item("zzz", _item("firefox", description="web browser")))

    def test_cascade_is_short_circuiting(self) -> None:
        # Name prefix and description both match; only the prefix tier counts.
        item = _item("term", description="term emulator")
        self.assertEqual(score_item("ter", item), 1500 - 3)

    def test_query_is_case_insensitive(self) -> None:
        self.assertEqual(score_item("FiRe", _item("FireFox")), 1496)


class SubsequenceScoreTests(unittest.TestCase):
    def test_fx_matches_firefox(self) -> None:
        # 'f' at 0 costs nothing, 'x' at 6 subtracts the gap of 6.
        self.assertEqual(subsequence_score("fx", "firefox"), 194)

    def test_fx_does_not_match_chrome(self) -> None:
        self.assertIsNone(subsequence_score("fx", "chrome"))

    def test_consecutive_run_bonus_grows(self) -> None:
        # 'a' at 0 (gap 0), 'b' at 1 (+10), 'c' at 2 (+20).
        self.assertEqual(subsequence_score("abc", "abcx"), 230)

    def test_first_match_at_index_one_counts_as_consecutive(self) -> None:
        self.assertEqual(subsequence_score("b", "ab"), 210)

    def test_gap_resets_run(self) -> None:
        # a@0 gap0 -> 200, b@1 run1 -> 210, c@4 gap3 -> 207, d@5 run1 -> 217.
        self.assertEqual(subsequence_score("abcd", "abxxcd"), 217)

    def test_order_matters(self) -> None:
        self.assertIsNone(subsequence_score("ba", "ab"))

    def test_empty_query_does_not_match(self) -> None:
        self.assertIsNone(subsequence_score("", "anything"))


class RankTests(unittest.TestCase):
    def test_empty_query_returns_all_in_input_order_truncated(self) -> None:
        items = [_item(f"cmd{i}") for i in range(5)]
        ranked = rank("", items, 3)
        self.assertEqual([entry.item.name for entry in ranked], ["cmd0", "cmd1", "cmd2"])
        self.assertTrue(all(entry.score == 0 for entry in ranked))

    def test_results_sorted_by_descending_score(self) -> None:
        items = [
            _item("xfirex"),
            _item("firefox"),
            _item("fire"),
            _item("f-i-r-e"),
        ]
        ranked = rank("fire", items, 10)
        self.assertEqual(
            [entry.item.name for entry in ranked],
            ["fire", "firefox", "xfirex", "f-i-r-e"],
        )

    def test_non_matching_items_are_excluded(self) -> None:
        ranked = rank("fx", [_item("firefox"), _item("chrome")], 10)
        self.assertEqual([entry.item.name for entry in ranked], ["firefox"])

    def test_ties_keep_input_order(self) -> None:
        items = [_item("alpha-one"), _item("alpha-two"), _item("alpha-three")]
        ranked = rank("alpha", items, 10)
        self.assertEqual([entry.item.name for entry in ranked], ["alpha-one", "alpha-two", "alpha-three"])
        reversed_ranked = rank("alpha", list(reversed(items)), 10)
        self.assertEqual(
            [entry.item.name for entry in reversed_ranked],
            ["alpha-three", "alpha-two", "alpha-one"],
        )

    def test_application_outranks_equal_command(self) -> None:
        cmd = _item("code", kind=COMMAND_KIND)
        app = _item("code", kind=APPLICATION_KIND)
        ranked = rank("code", [cmd, app], 10)
        self.assertEqual([(entry.item.kind, entry.score) for entry in ranked], [(APPLICATION_KIND, 2050), (COMMAND_KIND, 2000)])

    def test_rank_is_deterministic(self) -> None:
        items = [_item(name) for name in ("git", "gitk", "gimp", "grep", "gnome-terminal")]
        first = rank("gi", items, 10)
        second = rank("gi", items, 10)
        self.assertEqual(first, second)

    def test_limit_zero_returns_nothing(self) -> None:
        self.assertEqual(rank("", [_item("a")], 0), [])

    def test_empty_items(self) -> None:
        self.assertEqual(rank("anything", [], 10), [])


if __name__ == "__main__":
    unittest.main()
