# teams/models.py
from django.db import models


class Team(models.Model):
    name = models.CharField(max_length=120)
    # ex. "Séniores Masculinos", "Iniciados"
    category = models.CharField(max_length=120, blank=True)
    description = models.TextField(blank=True)  # texte riche (HTML)
    image_url = models.CharField(max_length=500, blank=True)
    coaches = models.TextField(blank=True)      # texte riche, optionnel

    class Meta:
        db_table = "teams"
        verbose_name = "equipa"
        verbose_name_plural = "equipas"

    def __str__(self):
        return self.name


class TeamMember(models.Model):
    # PROTECT : une équipe qui a encore un plantel ne peut pas être supprimée
    team = models.ForeignKey(Team, on_delete=models.PROTECT, related_name="members")
    name = models.CharField(max_length=120)
    number = models.CharField(max_length=10, blank=True)
    # Zona 4, Distribuidor, Libero, ...
    position = models.CharField(max_length=64, blank=True)
    image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "team_members"
        verbose_name = "atleta"
        verbose_name_plural = "plantel"
        indexes = [models.Index(fields=["team", "name"], name="team_members_team_name_idx")]

    def __str__(self):
        return f"{self.number} {self.name}".strip()
