# matches/schedule.py
"""
Découpage "Próximos Jogos" / "Resultados".

Tout est fonction pure de (matchs, now) : rien n'est stocké, un match passe
de "à venir" à "passé" exactement à sa date, au prochain rendu.
"""
from django.utils import timezone


def is_upcoming(match, now=None):
    now = now or timezone.now()
    return match.date >= now


def partition_matches(matches, now=None):
    """
    Retourne (upcoming, past) :
      - upcoming : date >= now, tri croissant
      - past     : date <  now, tri décroissant
    Le tri est stable : à date égale, l'ordre d'entrée est conservé.
    """
    now = now or timezone.now()
    upcoming, past = [], []
    for m in matches:
        (upcoming if is_upcoming(m, now) else past).append(m)
    upcoming.sort(key=lambda m: m.date)
    past.sort(key=lambda m: m.date, reverse=True)
    return upcoming, past


def next_match(matches, now=None):
    upcoming, _ = partition_matches(matches, now)
    return upcoming[0] if upcoming else None
