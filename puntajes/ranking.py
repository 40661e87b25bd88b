"""Ranking of users by accumulated score."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from .records import UserRecord, read_records

RANKING_SIZE = 5


@dataclass(frozen=True)
class RankingEntry:
    """A user id and the score it is ranked by."""

    id: int
    score: int


def ranking_entries(users: Iterable[UserRecord]) -> list[RankingEntry]:
    """Rank users by descending score.

    Insertion starts from the most recently inserted entry, so users with
    equal scores come out newest first when inserted one after another.
    """
    ordered: list[RankingEntry] = []
    cursor = 0
    for user in users:
        entry = RankingEntry(user.id, user.score)
        if not ordered:
            ordered.append(entry)
            cursor = 0
            continue
        pos = cursor
        while pos + 1 < len(ordered) and entry.score < ordered[pos].score:
            pos += 1
        while pos > 0 and entry.score > ordered[pos].score:
            pos -= 1
        if entry.score < ordered[pos].score:
            pos += 1
        ordered.insert(pos, entry)
        cursor = pos
    return ordered


def top_users(users_path: Union[str, Path], limit: int = RANKING_SIZE) -> list[UserRecord]:
    """Return up to ``limit`` users from the users file, highest score first."""
    users = read_records(users_path, UserRecord)
    return [users[entry.id - 1] for entry in ranking_entries(users)[:limit]]


def process_ranking(users_path: Union[str, Path]) -> str:
    """Render the top users as ``id;name;score|`` items."""
    return "".join(f"{u.id};{u.name};{u.score}|" for u in top_users(users_path))