from datetime import datetime, timedelta, timezone as dt_timezone

from matches.models import Match
from matches.schedule import is_upcoming, next_match, partition_matches

NOW = datetime(2026, 3, 14, 18, 0, tzinfo=dt_timezone.utc)


def _match(pk, delta_hours):
    return Match(id=pk, date=NOW + timedelta(hours=delta_hours), home_team="ALMA", guest_team=f"Adv {pk}")


def test_partition_splits_on_now_and_sorts_each_side():
    items = [_match(1, -5), _match(2, 48), _match(3, -72), _match(4, 2)]

    upcoming, past = partition_matches(items, NOW)

    assert [m.pk for m in upcoming] == [4, 2]
    assert [m.pk for m in past] == [1, 3]


def test_partition_covers_every_match_exactly_once():
    items = [_match(i, h) for i, h in enumerate([-3, 0, 7, -1, 12, -40], start=1)]

    upcoming, past = partition_matches(items, NOW)

    assert sorted(m.pk for m in upcoming + past) == [1, 2, 3, 4, 5, 6]
    assert all(m.date >= NOW for m in upcoming)
    assert all(m.date < NOW for m in past)


def test_match_at_exactly_now_is_upcoming():
    m = _match(1, 0)

    assert is_upcoming(m, NOW)
    upcoming, past = partition_matches([m], NOW)
    assert upcoming == [m] and past == []


def test_partition_keeps_input_order_on_equal_dates():
    items = [_match(1, 5), _match(2, 5), _match(3, -5), _match(4, -5)]

    upcoming, past = partition_matches(items, NOW)

    assert [m.pk for m in upcoming] == [1, 2]
    assert [m.pk for m in past] == [3, 4]


def test_partition_is_stable_across_calls_with_same_now():
    items = [_match(i, h) for i, h in enumerate([4, -4, 1, -1], start=1)]

    assert partition_matches(items, NOW) == partition_matches(items, NOW)


def test_match_moves_to_past_once_its_date_is_reached():
    m = _match(1, 1)

    assert partition_matches([m], NOW)[0] == [m]
    assert partition_matches([m], NOW + timedelta(hours=2))[1] == [m]


def test_partition_of_empty_input():
    assert partition_matches([], NOW) == ([], [])


def test_next_match_is_the_earliest_upcoming():
    items = [_match(1, 30), _match(2, -2), _match(3, 3)]

    assert next_match(items, NOW).pk == 3
    assert next_match([_match(4, -1)], NOW) is None


def test_match_result_helpers():
    played = Match(date=NOW, home_team="A", guest_team="B", score_home=1, score_guest=3)
    draw = Match(date=NOW, home_team="A", guest_team="B", score_home=2, score_guest=2)

    assert played.has_result and played.winner == "guest"
    assert draw.winner is None
    assert Match(date=NOW, home_team="A", guest_team="B").winner is None
