# cms/repository.py
"""
Accès aux données du site (tables + stockage des images).

Contrat :
  - lectures : un échec laisse la collection vide (log en warning, rien côté UI)
  - écritures : un échec lève WriteError avec le message du backend,
    rien n'est commité ; pas de retry
  - après chaque écriture réussie, SiteStore recharge TOUT (pas d'ajout local)
"""
import logging
import os
import time
from dataclasses import dataclass, field

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.db import DatabaseError, transaction
from django.db.models import ProtectedError
from django.utils.crypto import get_random_string

from teams.roster import sort_members

logger = logging.getLogger(__name__)


# table -> modèle Django
TABLES = {
    "news":         "content.NewsItem",
    "matches":      "matches.Match",
    "products":     "content.Product",
    "partners":     "content.Partner",
    "teams":        "teams.Team",
    "team_members": "teams.TeamMember",
    "gallery":      "content.GalleryItem",
    "organization": "content.OrganizationMember",
    "site_content": "content.SiteContent",
}

# tri demandé au backend ; les autres tables restent dans l'ordre de la base
TABLE_ORDERING = {
    "news": ("-created_at",),
    "matches": ("date",),
}

# valeurs attribuées par le serveur, jamais envoyées par le client
SERVER_FIELDS = ("id", "created_at")

UPLOAD_KEY_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"


class WriteError(Exception):
    """Échec d'écriture (create/update/delete/upload) à montrer à l'opérateur."""


def get_model(table):
    try:
        return apps.get_model(TABLES[table])
    except KeyError:
        raise WriteError(f"Tabela desconhecida: {table}")


def _error_text(exc):
    if isinstance(exc, ValidationError):
        if hasattr(exc, "message_dict"):
            return "; ".join(
                f"{k}: {' '.join(v)}" if k != "__all__" else " ".join(v)
                for k, v in exc.message_dict.items()
            )
        return " ".join(exc.messages)
    return str(exc) or exc.__class__.__name__


def _field_names(model):
    names = set()
    for f in model._meta.concrete_fields:
        names.add(f.name)
        names.add(f.attname)
    return names


def get_row(model, table, pk):
    """Ligne `pk` de `table` ; id absent ou mal formé -> WriteError."""
    try:
        obj = model.objects.filter(pk=pk).first()
    except (ValueError, TypeError, ValidationError):
        obj = None
    if obj is None:
        raise WriteError(f"Registo #{pk} não encontrado em {table}.")
    return obj


def clean_payload(model, record):
    """Retire id/created_at et refuse les champs inconnus du modèle."""
    data = {k: v for k, v in dict(record).items() if k not in SERVER_FIELDS}
    unknown = sorted(set(data) - _field_names(model))
    if unknown:
        raise WriteError(f"Campo(s) desconhecido(s): {', '.join(unknown)}")
    return data


# ======================================
# Lectures
# ======================================

def read_table(table):
    model = apps.get_model(TABLES[table])
    qs = model.objects.all()
    ordering = TABLE_ORDERING.get(table)
    if ordering:
        qs = qs.order_by(*ordering)
    try:
        return list(qs)
    except DatabaseError as exc:
        logger.warning("Lecture de %s impossible : %s", table, exc)
        return []


@dataclass
class SiteSnapshot:
    """Copie en mémoire de toutes les tables, remplacée en bloc à chaque rechargement."""

    news: list = field(default_factory=list)
    matches: list = field(default_factory=list)
    products: list = field(default_factory=list)
    partners: list = field(default_factory=list)
    teams: list = field(default_factory=list)
    team_members: list = field(default_factory=list)
    gallery: list = field(default_factory=list)
    organization: list = field(default_factory=list)
    site_content: dict = field(default_factory=dict)

    def collection(self, table):
        if table == "site_content":
            return list(self.site_content.values())
        return getattr(self, table)


def fetch_all():
    snapshot = SiteSnapshot()
    for table in TABLES:
        rows = read_table(table)
        if table == "site_content":
            snapshot.site_content = {row.section: row for row in rows}
        elif table == "team_members":
            snapshot.team_members = sort_members(rows)
        else:
            setattr(snapshot, table, rows)
    return snapshot


# ======================================
# Écritures
# ======================================

def create(table, record):
    model = get_model(table)
    data = clean_payload(model, record)
    try:
        with transaction.atomic():
            obj = model(**data)
            obj.full_clean()
            obj.save()
    except (ValidationError, DatabaseError, ValueError, TypeError) as exc:
        logger.exception("Création dans %s refusée", table)
        raise WriteError(_error_text(exc)) from exc
    logger.info("%s #%s criado", table, obj.pk)
    return obj


def update(table, pk, record):
    model = get_model(table)
    data = clean_payload(model, record)
    obj = get_row(model, table, pk)
    try:
        with transaction.atomic():
            for name, value in data.items():
                setattr(obj, name, value)
            obj.full_clean()
            obj.save()
    except (ValidationError, DatabaseError, ValueError, TypeError) as exc:
        logger.exception("Mise à jour de %s #%s refusée", table, pk)
        raise WriteError(_error_text(exc)) from exc
    logger.info("%s #%s atualizado", table, pk)
    return obj


def delete(table, pk, *, confirm):
    """
    Supprime la ligne `pk` si confirm() renvoie vrai.
    Sans confirmation : aucun appel au backend, renvoie False.
    """
    if not confirm():
        logger.info("Suppression de %s #%s annulée", table, pk)
        return False
    obj = get_row(get_model(table), table, pk)
    try:
        with transaction.atomic():
            obj.delete()
    except ProtectedError as exc:
        logger.warning("Suppression de %s #%s bloquée (références)", table, pk)
        raise WriteError(
            f"Não é possível apagar «{obj}»: ainda existem registos associados "
            f"({len(exc.protected_objects)})."
        ) from exc
    except DatabaseError as exc:
        logger.exception("Suppression de %s #%s refusée", table, pk)
        raise WriteError(_error_text(exc)) from exc
    logger.info("%s #%s apagado", table, pk)
    return True


# ======================================
# Stockage des images
# ======================================

def build_upload_key(filename, now=None):
    """uploads/<epoch ms>-<8 car. aléatoires><extension d'origine>"""
    ext = os.path.splitext(filename or "")[1].lower()
    stamp = int((now if now is not None else time.time()) * 1000)
    suffix = get_random_string(8, allowed_chars=UPLOAD_KEY_CHARS)
    return f"{settings.UPLOADS_DIR}/{stamp}-{suffix}{ext}"


def upload_image(file, request=None):
    """Écrit le fichier dans le stockage et renvoie son URL publique."""
    key = build_upload_key(getattr(file, "name", ""))
    try:
        name = default_storage.save(key, file)
    except OSError as exc:
        logger.exception("Upload de %s impossible", key)
        raise WriteError(f"Falha no upload da imagem: {exc}") from exc
    url = default_storage.url(name)
    logger.info("Image stockée : %s", name)
    if request is not None and not url.startswith("http"):
        return request.build_absolute_uri(url)
    return url


def upsert_site_content(section, title, subtitle, image_file=None, request=None):
    """
    Écrit LA ligne de `section` (remplace l'existante).
    Nouvelle image -> upload ; sinon on garde l'image précédente.
    """
    section = (section or "").strip()
    if not section:
        raise WriteError("A secção é obrigatória.")
    model = get_model("site_content")
    current = model.objects.filter(section=section).first()
    image_url = current.image_url if current else ""
    if image_file:
        image_url = upload_image(image_file, request=request)
    try:
        with transaction.atomic():
            obj, created = model.objects.update_or_create(
                section=section,
                defaults={
                    "title": title or "",
                    "subtitle": subtitle or "",
                    "image_url": image_url or "",
                },
            )
    except DatabaseError as exc:
        logger.exception("Upsert de la section %s refusé", section)
        raise WriteError(_error_text(exc)) from exc
    logger.info("Secção %s %s", section, "criada" if created else "atualizada")
    return obj


# ======================================
# État applicatif
# ======================================

class SiteStore:
    """
    Détient la copie en mémoire de toutes les tables.
    Chaque écriture réussie est suivie d'un rechargement complet ;
    en cas d'échec la copie n'est pas touchée.
    """

    def __init__(self, snapshot=None):
        self.snapshot = snapshot if snapshot is not None else fetch_all()

    def refresh(self):
        self.snapshot = fetch_all()
        return self.snapshot

    def create(self, table, record):
        obj = create(table, record)
        self.refresh()
        return obj

    def update(self, table, pk, record):
        obj = update(table, pk, record)
        self.refresh()
        return obj

    def delete(self, table, pk, *, confirm):
        deleted = delete(table, pk, confirm=confirm)
        if deleted:
            self.refresh()
        return deleted

    def upsert_site_content(self, section, title, subtitle, image_file=None, request=None):
        obj = upsert_site_content(section, title, subtitle, image_file, request=request)
        self.refresh()
        return obj
