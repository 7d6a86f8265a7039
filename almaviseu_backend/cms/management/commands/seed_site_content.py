# cms/management/commands/seed_site_content.py
from django.core.management.base import BaseCommand

from content.models import SiteContent
from cms.repository import upsert_site_content
from website.sections import SECTION_DEFAULTS


class Command(BaseCommand):
    help = "Crée les lignes site_content par défaut (une par section connue)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force", action="store_true",
            help="Réécrit aussi les sections déjà personnalisées.",
        )
        parser.add_argument(
            "--section", action="append", dest="sections", default=None,
            help="Limiter à une section (répétable).",
        )

    def handle(self, *args, **opts):
        force = opts["force"]
        keys = opts["sections"] or list(SECTION_DEFAULTS)
        existing = set(SiteContent.objects.values_list("section", flat=True))

        created, skipped = 0, 0
        for key in keys:
            defaults = SECTION_DEFAULTS.get(key)
            if defaults is None:
                self.stderr.write(self.style.WARNING(f"Section inconnue : {key}"))
                continue
            if key in existing and not force:
                skipped += 1
                continue
            upsert_site_content(key, defaults.get("title", ""), defaults.get("subtitle", ""))
            created += 1

        self.stdout.write(self.style.SUCCESS(
            f"site_content : {created} section(s) écrite(s), {skipped} conservée(s)."
        ))
