# website/sections.py
"""
Résolution du contenu des sections : une ligne SiteContent (si présente)
surcharge titre / sous-titre / image de fond du texte par défaut.
"""
import re
from dataclasses import dataclass

# valeurs par défaut codées en dur, utilisées en l'absence de ligne SiteContent
SECTION_DEFAULTS = {
    "hero": {
        "title": "ALMA VISEU",
        "subtitle": "Paixão. Competição. Voleibol.",
        "image_url": "https://picsum.photos/1920/1080?grayscale&blur=2",
    },
    "news": {"title": "Últimas Notícias"},
    "calendar": {
        "title": "Calendário & Resultados",
        "subtitle": "Acompanha a nossa jornada jornada a jornada.",
    },
    "teams": {"title": "As Nossas Equipas"},
    "shop": {
        "title": "Loja Oficial",
        "subtitle": "Veste as cores do clube. Encomendas por email ou na secretaria.",
    },
    "partners": {"title": "Parceiros"},
    "photos": {"title": "Galeria"},
    "contacts": {
        "title": "Contactos",
        "subtitle": (
            "Escola Secundária Alves Marins<br>"
            "Avenida Infante Dom Henrique, 3514-507, Viseu"
        ),
    },
    "about": {
        "title": "Quem Somos",
        "subtitle": (
            "Promovendo o voleibol em Viseu com paixão, dedicação e espírito de equipa. "
            "Junta-te a nós e faz parte desta grande família."
        ),
    },
    "branding": {"title": "ALMA", "subtitle": "Voleibol"},
    "footer": {
        "title": "ALMA VISEU",
        "subtitle": (
            "Promovendo o voleibol em Viseu com paixão, dedicação e espírito de equipa."
        ),
    },
}

# heuristique naïve : "<lettre ... >" quelque part => on considère que c'est du HTML
HTML_TAG_RE = re.compile(r"<[a-z][\s\S]*>", re.IGNORECASE)


@dataclass(frozen=True)
class SectionContent:
    key: str
    title: str = ""
    subtitle: str = ""
    image_url: str = ""
    customized: bool = False

    @property
    def title_is_html(self):
        return looks_like_html(self.title)

    @property
    def title_parts(self):
        return split_title(self.title)


def looks_like_html(text):
    return bool(HTML_TAG_RE.search(text or ""))


def split_title(text):
    """
    "ALMA VISEU" -> ("ALMA", "VISEU") : le dernier mot est mis en avant.
    Un seul mot -> (mot, "").
    """
    words = (text or "").split()
    if len(words) <= 1:
        return (words[0] if words else "", "")
    return (" ".join(words[:-1]), words[-1])


def resolve_section(site_content, key):
    """Chaque attribut non vide de la ligne remplace la valeur par défaut."""
    defaults = SECTION_DEFAULTS.get(key, {})
    row = site_content.get(key) if site_content else None
    return SectionContent(
        key=key,
        title=(row.title if row and row.title else defaults.get("title", "")),
        subtitle=(row.subtitle if row and row.subtitle else defaults.get("subtitle", "")),
        image_url=(row.image_url if row and row.image_url else defaults.get("image_url", "")),
        customized=row is not None,
    )


def resolve_all(site_content):
    return {key: resolve_section(site_content, key) for key in SECTION_DEFAULTS}
