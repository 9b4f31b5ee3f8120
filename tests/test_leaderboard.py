"""
Tests for leaderboard ranking.
"""

from quiz_runner.core.models import PlayerResult, QuizResult
from quiz_runner.core.services.leaderboard import Leaderboard, rank_results


def _result(name, correct, total, date):
    return PlayerResult(player_name=name, total_questions=total, correct_questions=correct, date=date)


class TestRankResults:

    def test_higher_score_first(self):
        low = _result("low", 1, 4, "2024-01-03T00:00:00")
        high = _result("high", 4, 4, "2024-01-01T00:00:00")
        middle = _result("middle", 2, 4, "2024-01-02T00:00:00")

        assert rank_results([low, high, middle]) == [high, middle, low]

    def test_equal_scores_most_recent_first(self):
        older = _result("older", 2, 4, "2024-01-01T09:00:00")
        newer = _result("newer", 2, 4, "2024-01-01T10:00:00")

        assert rank_results([older, newer]) == [newer, older]

    def test_compares_rounded_percent(self):
        # 1/3 and 33/100 both round to 33%, so recency decides.
        thirds = _result("thirds", 1, 3, "2024-01-01T00:00:00")
        hundredths = _result("hundredths", 33, 100, "2024-01-02T00:00:00")

        assert rank_results([thirds, hundredths]) == [hundredths, thirds]

    def test_full_ties_keep_stored_order(self):
        first = _result("first", 1, 2, "2024-01-01T00:00:00")
        second = _result("second", 1, 2, "2024-01-01T00:00:00")
        third = _result("third", 1, 2, "2024-01-01T00:00:00")

        assert rank_results([first, second, third]) == [first, second, third]

    def test_unreadable_date_ranks_after_dated_ties(self):
        undated = _result("undated", 1, 1, "sometime")
        dated = _result("dated", 1, 1, "2020-01-01T00:00:00")

        assert rank_results([undated, dated]) == [dated, undated]

    def test_dates_with_utc_offset_rank_alongside_local_dates(self):
        local = _result("local", 1, 2, "2024-05-01T10:00:00")
        offset = _result("offset", 1, 2, "2024-05-01T11:00:00+02:00")
        better = _result("better", 2, 2, "2020-01-01T00:00:00+00:00")

        ranked = rank_results([local, offset, better])

        assert ranked[0] is better
        assert {result.player_name for result in ranked[1:]} == {"local", "offset"}

    def test_input_is_not_mutated(self):
        results = [
            _result("a", 0, 2, "2024-01-01T00:00:00"),
            _result("b", 2, 2, "2024-01-01T00:00:00"),
        ]
        snapshot = list(results)

        rank_results(results)

        assert results == snapshot

    def test_empty_input(self):
        assert rank_results([]) == []


class TestLeaderboard:

    def _quiz_result(self, *results):
        quiz_result = QuizResult(quiz_id="capitals", name="Capitals", numeric_id="000001")
        for result in results:
            quiz_result.add_result(result)
        return quiz_result

    def test_rows_are_numbered_from_one(self):
        leaderboard = Leaderboard(
            self._quiz_result(
                _result("Ada", 1, 2, "2024-01-01T00:00:00"),
                _result("Grace", 2, 2, "2024-01-02T00:00:00"),
            )
        )

        rows = leaderboard.rows()

        assert [row.rank for row in rows] == [1, 2]
        assert rows[0].player_name == "Grace"
        assert rows[0].score_percent == 100
        assert rows[0].score_text == "2/2 (100.0%)"
        assert rows[0].percentage_text == "100%"
        assert rows[1].date == "2024-01-01T00:00:00"

    def test_rows_respect_limit(self):
        results = [_result(f"p{index}", index, 10, "2024-01-01T00:00:00") for index in range(10)]
        leaderboard = Leaderboard(self._quiz_result(*results))

        rows = leaderboard.rows(limit=3)

        assert [row.player_name for row in rows] == ["p9", "p8", "p7"]

    def test_ranking_leaves_history_order(self):
        first = _result("first", 0, 1, "2024-01-01T00:00:00")
        second = _result("second", 1, 1, "2024-01-01T00:00:00")
        quiz_result = self._quiz_result(first, second)

        Leaderboard(quiz_result).ranked_results()

        assert quiz_result.results == [first, second]

    def test_empty_leaderboard(self):
        leaderboard = Leaderboard(self._quiz_result())
        assert leaderboard.rows() == []
        assert leaderboard.quiz_name == "Capitals"
