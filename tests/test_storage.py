import pytest

from puntajes.records import IndexRecord, MatchRecord, UserRecord, read_records
from puntajes.storage import (
    ScoreStore,
    balanced_tree_from_index,
    format_index,
    format_matches,
    format_users,
)


@pytest.fixture
def store(tmp_path):
    return ScoreStore(
        tmp_path / "users.dat", tmp_path / "matches.dat", tmp_path / "index.dat"
    )


def test_first_game_creates_first_user(store):
    match = store.record_game("10|3|ana")
    assert store.users() == [UserRecord(1, "ana", 10, 3)]
    assert store.index() == [IndexRecord(1, "ana", 0)]
    assert match == MatchRecord(1, 1, 10, 3)
    assert store.matches() == [match]


def test_same_name_accumulates_totals(store):
    store.record_game("10|3|ana")
    match = store.record_game("7|4|ANA")
    users = store.users()
    assert len(users) == 1
    assert users[0].score == 10 + 7
    assert users[0].moves == 3 + 4
    assert match.user_id == users[0].id
    assert match.score == 7 and match.moves == 4
    assert len(store.index()) == 1


def test_new_users_get_consecutive_ids(store):
    for name in ["ana", "bob", "carla", "dan"]:
        store.record_game(f"5|2|{name}")
    users = store.users()
    assert [u.name for u in users] == ["ana", "bob", "carla", "dan"]
    assert [u.id for u in users] == list(range(1, len(users) + 1))
    for entry in store.index():
        assert entry.pos == entry.id - 1


def test_match_ids_are_consecutive(store):
    infos = ["1|1|ana", "2|2|bob", "3|3|ana", "4|4|carla"]
    for info in infos:
        store.record_game(info)
    matches = store.matches()
    assert [m.id for m in matches] == list(range(1, len(infos) + 1))
    assert [m.score for m in matches] == [1, 2, 3, 4]


def test_state_survives_a_new_store(tmp_path, store):
    store.record_game("10|3|ana")
    store.record_game("8|1|bob")
    again = ScoreStore(store.users_path, store.matches_path, store.index_path)
    match = again.record_game("2|2|bob")
    bob = again.users()[match.user_id - 1]
    assert bob.name == "bob"
    assert bob.score == 8 + 2


def test_regenerate_tree_without_index_raises(store):
    with pytest.raises(FileNotFoundError):
        store.regenerate_tree()


def test_regenerate_tree_loads_index(store):
    for name in ["ana", "bob", "carla"]:
        store.record_game(f"1|1|{name}")
    tree = store.regenerate_tree()
    assert list(tree) == store.index()
    assert tree.find(2).name == "bob"


def test_write_index_from_tree_round_trip(store, tmp_path):
    for name in ["ana", "bob", "carla", "dan", "eva"]:
        store.record_game(f"1|1|{name}")
    out = tmp_path / "copy.dat"
    count = store.write_index_from_tree(out)
    assert count == len(store.index())
    assert read_records(out, IndexRecord) == store.index()


def test_balanced_tree_from_index_is_balanced(tmp_path):
    path = tmp_path / "index.dat"
    entries = [IndexRecord(i, f"u{i}", i - 1) for i in range(1, 16)]
    path.write_bytes(b"".join(e.pack() for e in entries))
    tree = balanced_tree_from_index(path)
    assert list(tree) == entries
    assert tree.height() == len(entries).bit_length() - 1


def test_malformed_info_raises(store):
    with pytest.raises(ValueError):
        store.record_game("not a game")


def test_format_users():
    text = format_users([UserRecord(1, "ana", 10, 3)])
    lines = text.splitlines()
    assert lines[0] == "id_usuario - nombres - puntuacion - movimientos"
    assert lines[1] == "1          - ana        - 10         - 3         "


def test_format_matches_and_index_headers():
    assert format_matches([]).splitlines() == [
        "id_partida - id_usuario - puntuacion - movimientos"
    ]
    index_lines = format_index([IndexRecord(1, "ana", 0)]).splitlines()
    assert index_lines[0] == "id_usuario - nombre - posicion"
    assert len(index_lines) == 2