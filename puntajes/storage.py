"""Score files: users, played matches and a name index kept in a search tree."""

from __future__ import annotations

from operator import attrgetter
from pathlib import Path
from typing import Iterable, Union

from .records import (
    IndexRecord,
    MatchRecord,
    UserRecord,
    parse_user_info,
    read_records,
)
from .tree import BinarySearchTree

PathLike = Union[str, Path]

USERS_FILE = "ArchUsuarios.dat"
MATCHES_FILE = "ArchPartidas.dat"
INDEX_FILE = "Indice.dat"

_by_id = attrgetter("id")


def balanced_tree_from_index(path: PathLike) -> BinarySearchTree:
    """Build a balanced tree, keyed by user id, from an index file in id order."""
    return BinarySearchTree.from_sorted(read_records(path, IndexRecord), key=_by_id)


def _read_or_empty(path: Path, record_type):
    if not path.exists():
        return []
    return read_records(path, record_type)


def _append(path: Path, record) -> None:
    with open(path, "ab") as stream:
        stream.write(record.pack())


class ScoreStore:
    """Keeps per-user totals, a log of every match and an index of user names."""

    def __init__(
        self,
        users_path: PathLike = USERS_FILE,
        matches_path: PathLike = MATCHES_FILE,
        index_path: PathLike = INDEX_FILE,
    ) -> None:
        self.users_path = Path(users_path)
        self.matches_path = Path(matches_path)
        self.index_path = Path(index_path)
        self.tree = BinarySearchTree(key=_by_id)

    def regenerate_tree(self) -> BinarySearchTree:
        """Reload the index tree from the index file."""
        if not self.index_path.exists():
            raise FileNotFoundError(f"index file not found: {self.index_path}")
        self.tree = balanced_tree_from_index(self.index_path)
        return self.tree

    def record_game(self, info: str) -> MatchRecord:
        """Record a game given as ``score|moves|name`` and return the stored match."""
        player = parse_user_info(info)
        try:
            self.regenerate_tree()
        except FileNotFoundError:
            pass

        users = _read_or_empty(self.users_path, UserRecord)
        if not users:
            user_id = 1
            _append(self.users_path, UserRecord(user_id, player.name, player.score, player.moves))
            entry = IndexRecord(user_id, player.name, 0)
            _append(self.index_path, entry)
            self.tree = BinarySearchTree(key=_by_id)
            self.tree.insert(entry)
        else:
            wanted = player.name.lower()
            entry = self.tree.find_where(lambda item: item.name.lower() == wanted)
            if entry is not None:
                stored = users[entry.pos]
                user_id = stored.id
                updated = UserRecord(
                    user_id,
                    player.name,
                    player.score + stored.score,
                    player.moves + stored.moves,
                )
                with open(self.users_path, "r+b") as stream:
                    stream.seek(entry.pos * UserRecord.SIZE)
                    stream.write(updated.pack())
            else:
                user_id = users[-1].id + 1
                _append(self.index_path, IndexRecord(user_id, player.name, user_id - 1))
                _append(self.users_path, UserRecord(user_id, player.name, player.score, player.moves))
                self.tree = balanced_tree_from_index(self.index_path)

        matches = _read_or_empty(self.matches_path, MatchRecord)
        match_id = matches[-1].id + 1 if matches else 1
        match = MatchRecord(match_id, user_id, player.score, player.moves)
        _append(self.matches_path, match)
        return match

    def users(self) -> list[UserRecord]:
        return read_records(self.users_path, UserRecord)

    def matches(self) -> list[MatchRecord]:
        return read_records(self.matches_path, MatchRecord)

    def index(self) -> list[IndexRecord]:
        return read_records(self.index_path, IndexRecord)

    def write_index_from_tree(self, path: PathLike) -> int:
        """Write the tree's entries in key order to ``path``; return how many."""
        count = 0
        with open(path, "wb") as stream:
            for entry in self.tree.in_order():
                stream.write(entry.pack())
                count += 1
        return count


def format_users(users: Iterable[UserRecord]) -> str:
    lines = ["id_usuario - nombres - puntuacion - movimientos"]
    lines.extend(
        f"{u.id:<10d} - {u.name:<10s} - {u.score:<10d} - {u.moves:<10d}" for u in users
    )
    return "\n".join(lines) + "\n"


def format_matches(matches: Iterable[MatchRecord]) -> str:
    lines = ["id_partida - id_usuario - puntuacion - movimientos"]
    lines.extend(
        f"{m.id:<10d} - {m.user_id:<10d} - {m.score:<10d} - {m.moves:<10d}" for m in matches
    )
    return "\n".join(lines) + "\n"


def format_index(entries: Iterable[IndexRecord]) -> str:
    lines = ["id_usuario - nombre - posicion"]
    lines.extend(f"{e.id:<10d} - {e.name:<10s} - {e.pos:<10d}" for e in entries)
    return "\n".join(lines) + "\n"