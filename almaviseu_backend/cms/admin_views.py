# cms/admin_views.py
from django.contrib import admin, messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404
from django.shortcuts import render, redirect
from django.urls import reverse

from content.models import SECTIONS
from .forms import (
    SiteContentForm,
    build_form_class,
    image_previews,
    initial_from_instance,
    submit_record,
)
from .repository import SiteStore, WriteError, get_model
from .schemas import SCHEMAS, SELECT


def _get_schema(table):
    try:
        return SCHEMAS[table]
    except KeyError:
        raise Http404(f"Tabela desconhecida: {table}")


def _find(model, raw):
    """Instance d'après un id saisi (query string / champ caché) ; None si invalide."""
    raw = (raw or "").strip()
    if not raw.isdigit():
        return None
    return model.objects.filter(pk=int(raw)).first()


def _cell_value(spec, obj, labels):
    value = getattr(obj, spec.key, "")
    if spec.key in labels and value is not None:
        # select : libellé de l'option (ex. nom de l'équipe) plutôt que l'id
        return labels[spec.key].get(str(value), value)
    return value


def _rows(schema, collection):
    """Lignes du tableau : les 3 premières colonnes déclarées + l'objet (actions)."""
    columns = schema.list_columns()
    labels = {spec.key: dict(spec.get_options()) for spec in columns if spec.type == SELECT}
    return [
        {"obj": obj, "cells": [(spec, _cell_value(spec, obj, labels)) for spec in columns]}
        for obj in collection
    ]


def _render_entity(request, store, schema, form, instance=None, status=200):
    ctx = {
        "schema": schema,
        "tables": SCHEMAS,
        "columns": schema.list_columns(),
        "rows": _rows(schema, store.snapshot.collection(schema.table)),
        "form": form,
        "instance": instance,
        "previews": image_previews(schema, instance),
        "title": schema.label,
    }
    ctx |= admin.site.each_context(request)
    return render(request, "admin/cms/entity.html", ctx, status=status)


@staff_member_required
def cms_index(request):
    store = SiteStore()
    entities = [
        {"schema": schema, "count": len(store.snapshot.collection(table))}
        for table, schema in SCHEMAS.items()
    ]
    sections = [
        {"key": key, "label": label, "row": store.snapshot.site_content.get(key)}
        for key, label in SECTIONS
    ]
    ctx = {"entities": entities, "sections": sections, "tables": SCHEMAS, "title": "Gestão de conteúdos"}
    ctx |= admin.site.each_context(request)
    return render(request, "admin/cms/index.html", ctx)


@staff_member_required
def cms_entity(request, table):
    """
    Liste + formulaire d'une table.
      - GET              -> formulaire vide ("Adicionar")
      - GET ?edit=<id>   -> formulaire pré-rempli ("Editar")
      - POST (id vide)   -> create ; POST id=<id> -> update
    En cas d'erreur le formulaire reste affiché avec les valeurs saisies.
    """
    schema = _get_schema(table)
    store = SiteStore()
    model = get_model(table)

    if request.method == "POST":
        pk = (request.POST.get("id") or "").strip()
        instance = None
        if pk:
            instance = _find(model, pk)
            if instance is None:
                messages.error(request, f"Registo #{pk} não encontrado.")
                return redirect("cms_entity", table=table)

        form = build_form_class(schema, editing=instance is not None)(request.POST, request.FILES)
        if not form.is_valid():
            messages.error(request, "Verifique os campos assinalados.")
            return _render_entity(request, store, schema, form, instance, status=400)

        try:
            obj = submit_record(store, schema, form, instance=instance, request=request)
        except WriteError as exc:
            messages.error(request, f"Erro ao guardar: {exc}")
            return _render_entity(request, store, schema, form, instance, status=400)

        messages.success(
            request,
            f"{schema.label}: registo {'criado' if instance is None else 'atualizado'} (#{obj.pk})."
        )
        return redirect("cms_entity", table=table)

    instance = None
    edit_id = (request.GET.get("edit") or "").strip()
    if edit_id:
        instance = _find(model, edit_id)
        if instance is None:
            messages.error(request, f"Registo #{edit_id} não encontrado.")
            return redirect("cms_entity", table=table)

    form_class = build_form_class(schema, editing=instance is not None)
    form = form_class(initial=initial_from_instance(schema, instance)) if instance else form_class()
    return _render_entity(request, store, schema, form, instance)


@staff_member_required
def cms_delete(request, table, pk):
    """GET : page de confirmation ; POST confirm=yes : suppression ; sinon rien."""
    schema = _get_schema(table)
    obj = get_model(table).objects.filter(pk=pk).first()
    if obj is None:
        messages.error(request, f"Registo #{pk} não encontrado.")
        return redirect("cms_entity", table=table)

    if request.method == "POST":
        store = SiteStore()
        try:
            deleted = store.delete(table, pk, confirm=lambda: request.POST.get("confirm") == "yes")
        except WriteError as exc:
            messages.error(request, f"Erro ao apagar: {exc}")
            return redirect("cms_entity", table=table)
        if deleted:
            messages.success(request, f"Registo #{pk} apagado.")
        else:
            messages.info(request, "Operação cancelada.")
        return redirect("cms_entity", table=table)

    ctx = {
        "schema": schema,
        "obj": obj,
        "cancel_url": reverse("cms_entity", kwargs={"table": table}),
        "title": f"Apagar {obj}",
    }
    ctx |= admin.site.each_context(request)
    return render(request, "admin/cms/confirm_delete.html", ctx)


@staff_member_required
def cms_site_content(request):
    """Édition des textes / images de fond par section (upsert par section)."""
    store = SiteStore()

    if request.method == "POST":
        form = SiteContentForm(request.POST, request.FILES)
        if form.is_valid():
            data = form.cleaned_data
            try:
                store.upsert_site_content(
                    data["section"], data["title"], data["subtitle"],
                    image_file=data.get("image") or None, request=request,
                )
            except WriteError as exc:
                messages.error(request, f"Erro ao guardar: {exc}")
            else:
                messages.success(request, f"Secção «{data['section']}» guardada.")
                return redirect(f"{reverse('cms_site_content')}?section={data['section']}")
        else:
            messages.error(request, "Verifique os campos assinalados.")
        section = request.POST.get("section") or ""
        status = 400
    else:
        section = request.GET.get("section") or SECTIONS[0][0]
        row = store.snapshot.site_content.get(section)
        form = SiteContentForm(initial={
            "section": section,
            "title": row.title if row else "",
            "subtitle": row.subtitle if row else "",
        })
        status = 200

    row = store.snapshot.site_content.get(section)
    ctx = {
        "form": form,
        "section": section,
        "sections": SECTIONS,
        "current_image": row.image_url if row else "",
        "tables": SCHEMAS,
        "title": "Conteúdos de secção",
    }
    ctx |= admin.site.each_context(request)
    return render(request, "admin/cms/site_content.html", ctx, status=status)
