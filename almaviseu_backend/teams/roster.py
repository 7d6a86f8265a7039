# teams/roster.py
import unicodedata


def _team_id(team):
    return getattr(team, "pk", team)


def resolve_roster(team, members):
    """
    Plantel d'une équipe : les membres dont team_id == team.id,
    dans l'ordre relatif d'origine (filtré à la demande, rien de précalculé).
    `team` peut être une instance Team ou directement un id.
    """
    team_id = _team_id(team)
    return [m for m in members if m.team_id == team_id]


def name_key(name):
    """"Ângelo" -> "angelo" : sans accents ni casse."""
    decomposed = unicodedata.normalize("NFKD", name or "")
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def sort_members(members):
    """Tri alphabétique par nom (accents et casse ignorés), id en départage."""
    return sorted(members, key=lambda m: (name_key(m.name), m.pk or 0))
