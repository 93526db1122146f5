"""Tests for the in-memory leaderboard adapter."""

from __future__ import annotations

import threading

from wall_of_shame.adapters.leaderboard import LeaderboardStore


def test_add_counts_each_offense():
    """Adding the same player N times yields a count of N."""
    store = LeaderboardStore()
    results = [store.add("Waseem") for _ in range(5)]

    assert results == [1, 2, 3, 4, 5]
    assert store.count("Waseem") == 5


def test_add_does_not_touch_other_players():
    store = LeaderboardStore()
    store.add("A")
    store.add("A")
    store.add("B")

    store.add("C")

    assert store.snapshot() == {"A": 2, "B": 1, "C": 1}


def test_names_are_case_sensitive():
    store = LeaderboardStore()
    store.add("bob")
    store.add("Bob")

    assert store.count("bob") == 1
    assert store.count("Bob") == 1


def test_worst_on_empty_store_is_none():
    assert LeaderboardStore().worst() is None


def test_worst_returns_highest_count():
    store = LeaderboardStore()
    for _ in range(3):
        store.add("A")
    store.add("B")

    assert store.worst() == ("A", 3)


def test_worst_ties_go_to_first_added_player():
    """Among equal maxima the player shamed first wins."""
    store = LeaderboardStore()
    store.add("Late")
    store.add("Early")
    store.add("Early")
    store.add("Late")

    assert store.worst() == ("Late", 2)


def test_clear_empties_and_is_idempotent():
    store = LeaderboardStore()
    store.add("A")
    store.add("B")

    store.clear()
    store.clear()

    assert store.worst() is None
    assert store.snapshot() == {}
    assert len(store) == 0


def test_remove_leaves_count_untouched():
    """Removal only produces a message; the count stays as it was."""
    store = LeaderboardStore()
    store.add("A")
    store.add("A")

    message = store.remove("A")

    assert message == (
        "Everybody deserves to have a second chance. A, "
        "try to stay out of the wall or just stop playing"
    )
    assert store.count("A") == 2
    assert store.worst() == ("A", 2)


def test_snapshot_is_a_copy():
    store = LeaderboardStore()
    store.add("A")
    snapshot = store.snapshot()
    snapshot["A"] = 99

    assert store.count("A") == 1


def test_concurrent_adds_are_not_lost():
    store = LeaderboardStore()

    def _worker() -> None:
        for _ in range(200):
            store.add("Racer")

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.count("Racer") == 1600
