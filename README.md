# puntajes

A small storage layer for a game server that keeps player scores in
fixed-size binary files:

- a **users file**: one record per player with the accumulated score and
  move count,
- a **matches file**: one record per finished game,
- an **index file**: player id, name and record position. It is loaded
  into a balanced binary search tree keyed by user id, and players are
  looked up in it by name.

It also builds the top-five ranking string the server sends to clients.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Recording games

```python
from puntajes.storage import ScoreStore, format_users

store = ScoreStore("ArchUsuarios.dat", "ArchPartidas.dat", "Indice.dat")

# "score|moves|name", the message format the clients send
store.record_game("120|35|alice")
store.record_game("80|20|bob")
store.record_game("50|10|alice")   # adds to alice's totals

print(format_users(store.users()))
for match in store.matches():
    print(match.id, match.user_id, match.score, match.moves)
```

`ScoreStore()` with no arguments uses `ArchUsuarios.dat`,
`ArchPartidas.dat` and `Indice.dat` in the current directory.

The first game for a new name creates a user record and an index entry.
Later games for the same name (compared without regard to case) add to
that user's score and moves. Every call appends one match record and
returns it as a `MatchRecord`; match ids rise by one each time.

Other members of `ScoreStore`:

- `users()`, `matches()`, `index()`: read every record of the file.
- `regenerate_tree()`: reload the index tree from the index file; raises
  `FileNotFoundError` when there is no index file.
- `write_index_from_tree(path)`: write the tree's entries in id order to
  `path` and return how many were written.

`format_users`, `format_matches` and `format_index` render records as
text tables, and `balanced_tree_from_index(path)` builds a balanced tree
from an index file.

## Ranking

```python
from puntajes.ranking import process_ranking, top_users

print(process_ranking("ArchUsuarios.dat"))   # "1;alice;170|2;bob;80|"
best = top_users("ArchUsuarios.dat", 3)
```

`process_ranking` returns up to five `id;name;score|` entries, highest
score first. `top_users` returns the `UserRecord`s themselves, at most
`limit` of them (five by default). Both raise `FileNotFoundError` when the
users file does not exist. `ranking_entries(users)` gives the full ordering
as `RankingEntry` items.

## Building blocks

- `puntajes.records`: `IndexRecord`, `UserRecord` and `MatchRecord`,
  each with `pack()` and `unpack()`, plus `read_records`, `iter_records`
  and `parse_user_info`. Names are stored in 11 bytes; longer names raise
  `ValueError` when packed.
- `puntajes.tree`: `BinarySearchTree`, ordered by a key function, with
  `insert`, `find`, `find_where`, `in_order`, `height`, `clear`,
  `is_empty` and `BinarySearchTree.from_sorted` for building a balanced
  tree.
- `puntajes.fifo`: `Queue`, a simple first-in first-out queue with `put`,
  `get`, `peek`, `is_empty` and `clear`.

## What this package does not do

There is no network server and no command to run. The package only
handles the score files and the ranking; receiving client messages and
sending replies is left to the program that uses it.