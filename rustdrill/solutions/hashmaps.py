"""Worked answers for the hash map exercises."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255
_GOALS = re.compile(r"\+?[0-9]+")


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 3, "grapes": 4}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add the missing kinds of fruit to ``basket`` in place.

    The fruits already present are left as they are.
    """
    basket[Fruit.BANANA] = 1
    basket[Fruit.PINEAPPLE] = 1


@dataclass
class Team:
    """A team's goal record."""

    name: str
    goals_scored: int
    goals_conceded: int


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _record(
    scores: dict[str, Team], name: str, scored: int, conceded: int
) -> None:
    team = scores.get(name)
    if team is None:
        scores[name] = Team(name, scored, conceded)
        return
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError("attempt to add with overflow")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2, goals_1, goals_2 = fields[:4]
        score_1 = _parse_goals(goals_1)
        score_2 = _parse_goals(goals_2)
        _record(scores, team_1, score_1, score_2)
        _record(scores, team_2, score_2, score_1)
    return scores