# cms/forms.py
from django import forms
from django.apps import apps
from django.core.exceptions import FieldDoesNotExist
from django.db import models
from django.utils import timezone

from . import schemas
from .repository import SERVER_FIELDS, TABLES, upload_image
from .widgets import RichTextWidget

DATETIME_INPUT_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S"]


def _model_field(table, key):
    model = apps.get_model(TABLES[table])
    try:
        return model._meta.get_field(key)
    except FieldDoesNotExist:
        # team_id -> champ "team"
        for f in model._meta.concrete_fields:
            if f.attname == key:
                return f
    return None


def _number_field(spec, model_field):
    if isinstance(model_field, models.DecimalField):
        return forms.DecimalField(
            label=spec.label, required=spec.required, min_value=0,
            max_digits=model_field.max_digits, decimal_places=model_field.decimal_places,
        )
    return forms.IntegerField(label=spec.label, required=spec.required, min_value=0)


def make_field(schema, spec, editing=False):
    model_field = _model_field(schema.table, spec.key)

    if spec.type == schemas.TEXT:
        max_len = getattr(model_field, "max_length", None)
        return forms.CharField(label=spec.label, required=spec.required, max_length=max_len)

    if spec.type == schemas.NUMBER:
        return _number_field(spec, model_field)

    if spec.type == schemas.RICHTEXT:
        return forms.CharField(
            label=spec.label, required=spec.required, strip=False, widget=RichTextWidget,
        )

    if spec.type == schemas.IMAGE:
        # en édition, pas de nouveau fichier = on garde l'URL existante
        return forms.ImageField(
            label=spec.label,
            required=spec.required and not editing,
            widget=forms.ClearableFileInput(attrs={"accept": "image/*", "data-preview": spec.key}),
        )

    if spec.type == schemas.DATETIME:
        return forms.DateTimeField(
            label=spec.label,
            required=spec.required,
            input_formats=DATETIME_INPUT_FORMATS,
            widget=forms.DateTimeInput(attrs={"type": "datetime-local"}, format="%Y-%m-%dT%H:%M"),
        )

    if spec.type == schemas.SELECT:
        return forms.TypedChoiceField(
            label=spec.label,
            required=spec.required,
            choices=[("", "---------")] + spec.get_options(),
            empty_value=None,
        )

    raise ValueError(f"type de champ inconnu : {spec.type}")


def build_form_class(schema, editing=False):
    attrs = {spec.key: make_field(schema, spec, editing) for spec in schema.fields}
    name = "".join(p.title() for p in schema.table.split("_")) + ("EditForm" if editing else "CreateForm")
    return type(name, (forms.Form,), attrs)


def initial_from_instance(schema, instance):
    """Valeurs du formulaire pré-rempli (les images passent par les aperçus)."""
    initial = {}
    for spec in schema.fields:
        if spec.is_image:
            continue
        value = getattr(instance, spec.key, None)
        if spec.type == schemas.DATETIME and value is not None:
            value = timezone.localtime(value)
        if spec.type == schemas.SELECT and value is not None:
            value = str(value)
        initial[spec.key] = value
    return initial


def image_previews(schema, instance):
    if instance is None:
        return {}
    return {spec.key: getattr(instance, spec.key, "") for spec in schema.image_fields()}


def build_record(schema, cleaned_data, request=None):
    """
    Payload envoyé au backend :
      - images : upload des nouveaux fichiers un par un, URL substituée ;
        pas de nouveau fichier -> clé absente (l'URL existante est conservée)
      - autres champs : tels quels
      - id / created_at jamais envoyés
    """
    record = {}
    for spec in schema.fields:
        value = cleaned_data.get(spec.key)
        if spec.is_image:
            if value:
                record[spec.key] = upload_image(value, request=request)
            continue
        record[spec.key] = value
    return {k: v for k, v in record.items() if k not in SERVER_FIELDS}


def submit_record(store, schema, form, instance=None, request=None):
    """Un seul appel create OU update ; WriteError remonte tel quel."""
    record = build_record(schema, form.cleaned_data, request=request)
    if instance is None:
        return store.create(schema.table, record)
    return store.update(schema.table, instance.pk, record)


class SiteContentForm(forms.Form):
    section = forms.ChoiceField(label="Secção", choices=[])
    title = forms.CharField(label="Título", required=False, strip=False, widget=RichTextWidget)
    subtitle = forms.CharField(label="Subtítulo", required=False, strip=False, widget=RichTextWidget)
    image = forms.ImageField(
        label="Imagem de fundo", required=False,
        widget=forms.ClearableFileInput(attrs={"accept": "image/*", "data-preview": "image"}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        from content.models import SECTIONS
        self.fields["section"].choices = SECTIONS
