from teams.models import Team, TeamMember
from teams.roster import resolve_roster, sort_members


def _member(pk, team_id, name):
    return TeamMember(id=pk, team_id=team_id, name=name)


def test_roster_only_keeps_members_of_the_team_in_order():
    members = [_member(1, 1, "A"), _member(2, 2, "B"), _member(3, 1, "C")]

    roster = resolve_roster(Team(id=1, name="Séniores"), members)

    assert [m.pk for m in roster] == [1, 3]


def test_roster_accepts_a_bare_team_id():
    members = [_member(1, 1, "A"), _member(2, 2, "B")]

    assert [m.pk for m in resolve_roster(2, members)] == [2]


def test_roster_of_team_without_members_is_empty():
    assert resolve_roster(Team(id=9, name="Minis"), [_member(1, 1, "A")]) == []


def test_sort_members_ignores_case():
    members = [_member(1, 1, "rui"), _member(2, 1, "Ana"), _member(3, 1, "bruno")]

    assert [m.name for m in sort_members(members)] == ["Ana", "bruno", "rui"]


def test_sort_members_ignores_accents():
    members = [_member(1, 1, "Bruno"), _member(2, 1, "Ângelo"), _member(3, 1, "Zé"), _member(4, 1, "Élio")]

    assert [m.name for m in sort_members(members)] == ["Ângelo", "Bruno", "Élio", "Zé"]


def test_sort_members_breaks_ties_by_id():
    members = [_member(5, 1, "João"), _member(2, 1, "joao")]

    assert [m.pk for m in sort_members(members)] == [2, 5]
