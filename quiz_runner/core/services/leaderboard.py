"""Service for ranking stored quiz results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from quiz_runner.core.models import PlayerResult, QuizResult


@dataclass(frozen=True, slots=True)
class LeaderboardRow:
    """Immutable snapshot returned to consumers."""

    rank: int
    player_name: str
    score_percent: int
    score_text: str
    percentage_text: str
    date: str


def rank_results(results: Iterable[PlayerResult]) -> list[PlayerResult]:
    """Return results ordered best first.

    Higher ``score_percent`` wins; equal percentages put the most recent
    result first; anything still tied keeps its stored order.
    """
    ranked = sorted(results, key=lambda result: result.timestamp, reverse=True)
    ranked.sort(key=lambda result: result.score_percent, reverse=True)
    return ranked


class Leaderboard:
    """Ranked view over one quiz's result history."""

    def __init__(self, quiz_result: QuizResult) -> None:
        self._quiz_result = quiz_result

    @property
    def quiz_name(self) -> str:
        return self._quiz_result.name

    def ranked_results(self) -> list[PlayerResult]:
        return rank_results(self._quiz_result.results)

    def rows(self, limit: int | None = None) -> list[LeaderboardRow]:
        ranked = self.ranked_results()
        if limit is not None:
            ranked = ranked[:limit]
        return [
            LeaderboardRow(
                rank=position,
                player_name=result.player_name,
                score_percent=result.score_percent,
                score_text=result.score_string,
                percentage_text=result.score_percentage_text,
                date=result.date,
            )
            for position, result in enumerate(ranked, start=1)
        ]
