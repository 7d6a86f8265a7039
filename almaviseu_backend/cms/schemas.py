# cms/schemas.py
"""
Description déclarative des formulaires d'administration, une par table.
Chaque champ : clé (nom du champ du modèle), libellé, type d'entrée,
obligatoire ou non, options (pour les listes déroulantes).
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

TEXT = "text"
NUMBER = "number"
RICHTEXT = "richtext"
IMAGE = "image"
DATETIME = "datetime"
SELECT = "select"

FIELD_TYPES = {TEXT, NUMBER, RICHTEXT, IMAGE, DATETIME, SELECT}

Options = Union[Sequence[Tuple[str, str]], Callable[[], Sequence[Tuple[str, str]]]]


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    type: str = TEXT
    required: bool = False
    options: Optional[Options] = None

    def __post_init__(self):
        if self.type not in FIELD_TYPES:
            raise ValueError(f"type de champ inconnu : {self.type}")

    @property
    def is_image(self):
        return self.type == IMAGE

    def get_options(self):
        opts = self.options() if callable(self.options) else self.options
        return [(str(v), str(lbl)) for v, lbl in (opts or [])]


@dataclass(frozen=True)
class EntitySchema:
    table: str
    label: str
    fields: List[FieldSpec] = field(default_factory=list)

    def image_fields(self):
        return [f for f in self.fields if f.is_image]

    def list_columns(self):
        # volontairement : seulement les 3 premiers champs déclarés
        return self.fields[:3]


def list_columns(schema):
    return schema.list_columns()


def _team_options():
    from teams.models import Team
    return [(t.pk, t.name) for t in Team.objects.order_by("name")]


MATCH_CATEGORIES = [
    ("Séniores Masculinos", "Séniores Masculinos"),
    ("Séniores Femininos", "Séniores Femininos"),
    ("Juniores", "Juniores"),
    ("Juvenis", "Juvenis"),
    ("Cadetes", "Cadetes"),
    ("Iniciados", "Iniciados"),
    ("Infantis", "Infantis"),
    ("Minis", "Minis"),
]


SCHEMAS = {
    "news": EntitySchema("news", "Notícias", [
        FieldSpec("title", "Título", TEXT, required=True),
        FieldSpec("image_url", "Imagem", IMAGE, required=True),
        FieldSpec("content", "Conteúdo", RICHTEXT),
    ]),
    "matches": EntitySchema("matches", "Jogos", [
        FieldSpec("date", "Data e hora", DATETIME, required=True),
        FieldSpec("home_team", "Equipa da casa", TEXT, required=True),
        FieldSpec("guest_team", "Equipa visitante", TEXT, required=True),
        FieldSpec("category", "Escalão", SELECT, required=True, options=MATCH_CATEGORIES),
        FieldSpec("location", "Local", TEXT),
        FieldSpec("score_home", "Resultado (casa)", NUMBER),
        FieldSpec("score_guest", "Resultado (visitante)", NUMBER),
    ]),
    "products": EntitySchema("products", "Loja", [
        FieldSpec("name", "Nome", TEXT, required=True),
        FieldSpec("price", "Preço (€)", NUMBER, required=True),
        FieldSpec("image_url", "Imagem", IMAGE, required=True),
        FieldSpec("description", "Descrição", RICHTEXT),
    ]),
    "partners": EntitySchema("partners", "Parceiros", [
        FieldSpec("name", "Nome", TEXT, required=True),
        FieldSpec("website_url", "Website", TEXT),
        FieldSpec("logo_url", "Logótipo", IMAGE),
    ]),
    "teams": EntitySchema("teams", "Equipas", [
        FieldSpec("name", "Nome", TEXT, required=True),
        FieldSpec("category", "Escalão", TEXT),
        FieldSpec("image_url", "Imagem", IMAGE, required=True),
        FieldSpec("description", "Descrição", RICHTEXT),
        FieldSpec("coaches", "Treinadores", RICHTEXT),
    ]),
    "team_members": EntitySchema("team_members", "Plantel", [
        FieldSpec("name", "Nome", TEXT, required=True),
        FieldSpec("number", "Número", TEXT),
        FieldSpec("team_id", "Equipa", SELECT, required=True, options=_team_options),
        FieldSpec("position", "Posição", TEXT),
        FieldSpec("image_url", "Foto", IMAGE),
    ]),
    "gallery": EntitySchema("gallery", "Galeria", [
        FieldSpec("title", "Título", TEXT),
        FieldSpec("image_url", "Imagem", IMAGE, required=True),
    ]),
    "organization": EntitySchema("organization", "Organização", [
        FieldSpec("name", "Nome", TEXT, required=True),
        FieldSpec("role", "Cargo", TEXT, required=True),
        FieldSpec("image_url", "Foto", IMAGE),
    ]),
}


def get_schema(table):
    return SCHEMAS[table]
