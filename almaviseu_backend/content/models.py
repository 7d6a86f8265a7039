# content/models.py
from django.db import models


# sections connues du site public ; chacune peut être surchargée par une ligne SiteContent
SECTIONS = [
    ("hero", "Início (hero)"),
    ("news", "Notícias"),
    ("calendar", "Calendário"),
    ("teams", "Equipas"),
    ("shop", "Loja"),
    ("partners", "Parceiros"),
    ("photos", "Fotos"),
    ("contacts", "Contactos"),
    ("about", "Quem Somos"),
    ("branding", "Logótipo"),
    ("footer", "Rodapé"),
]


class NewsItem(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    title = models.CharField(max_length=200)
    content = models.TextField(blank=True)  # texte riche (HTML)
    image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "news"
        ordering = ["-created_at"]
        verbose_name = "notícia"
        verbose_name_plural = "notícias"

    def __str__(self):
        return self.title


class Product(models.Model):
    name = models.CharField(max_length=160)
    price = models.DecimalField(max_digits=8, decimal_places=2)
    description = models.TextField(blank=True)
    image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "products"
        verbose_name = "produto"
        verbose_name_plural = "loja"

    def __str__(self):
        return self.name


class Partner(models.Model):
    name = models.CharField(max_length=160)
    website_url = models.CharField(max_length=500, blank=True)
    logo_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "partners"
        verbose_name = "parceiro"
        verbose_name_plural = "parceiros"

    def __str__(self):
        return self.name


class GalleryItem(models.Model):
    title = models.CharField(max_length=200, blank=True)
    image_url = models.CharField(max_length=500)

    class Meta:
        db_table = "gallery"
        verbose_name = "foto"
        verbose_name_plural = "galeria"

    def __str__(self):
        return self.title or f"Foto #{self.pk}"


class OrganizationMember(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    name = models.CharField(max_length=120)
    role = models.CharField(max_length=120)
    image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "organization"
        verbose_name = "membro da direção"
        verbose_name_plural = "organização"

    def __str__(self):
        return f"{self.name} ({self.role})"


class SiteContent(models.Model):
    # une seule ligne par section (upsert par section)
    section = models.CharField(max_length=40, unique=True)
    title = models.TextField(blank=True)     # peut contenir du HTML
    subtitle = models.TextField(blank=True)  # idem
    image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "site_content"
        ordering = ["section"]
        verbose_name = "conteúdo de secção"
        verbose_name_plural = "conteúdos de secção"

    def __str__(self):
        return self.section
