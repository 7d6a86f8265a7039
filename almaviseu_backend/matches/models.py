# matches/models.py
from django.db import models
from django.core.exceptions import ValidationError


class Match(models.Model):
    date = models.DateTimeField()
    home_team = models.CharField(max_length=120)
    guest_team = models.CharField(max_length=120)
    location = models.CharField(max_length=200, blank=True)
    # ex. "Séniores Femininos"
    category = models.CharField(max_length=120, blank=True)

    # scores : renseignés seulement une fois le match joué
    score_home = models.PositiveIntegerField(null=True, blank=True)
    score_guest = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = "matches"
        ordering = ["date"]
        verbose_name = "jogo"
        verbose_name_plural = "jogos"

    def clean(self):
        super().clean()
        # les deux scores vont ensemble
        if (self.score_home is None) != (self.score_guest is None):
            raise ValidationError("Indique os dois resultados (casa e visitante) ou nenhum.")

    @property
    def has_result(self):
        return self.score_home is not None and self.score_guest is not None

    @property
    def winner(self):
        """'home', 'guest' ou None (pas de score ou égalité)."""
        if not self.has_result or self.score_home == self.score_guest:
            return None
        return "home" if self.score_home > self.score_guest else "guest"

    def __str__(self):
        return f"{self.home_team} vs {self.guest_team}"
