from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NewsItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField(blank=True)),
                ("image_url", models.CharField(blank=True, max_length=500)),
            ],
            options={
                "verbose_name": "notícia",
                "verbose_name_plural": "notícias",
                "db_table": "news",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=160)),
                ("price", models.DecimalField(decimal_places=2, max_digits=8)),
                ("description", models.TextField(blank=True)),
                ("image_url", models.CharField(blank=True, max_length=500)),
            ],
            options={
                "verbose_name": "produto",
                "verbose_name_plural": "loja",
                "db_table": "products",
            },
        ),
        migrations.CreateModel(
            name="Partner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=160)),
                ("website_url", models.CharField(blank=True, max_length=500)),
                ("logo_url", models.CharField(blank=True, max_length=500)),
            ],
            options={
                "verbose_name": "parceiro",
                "verbose_name_plural": "parceiros",
                "db_table": "partners",
            },
        ),
        migrations.CreateModel(
            name="GalleryItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(blank=True, max_length=200)),
                ("image_url", models.CharField(max_length=500)),
            ],
            options={
                "verbose_name": "foto",
                "verbose_name_plural": "galeria",
                "db_table": "gallery",
            },
        ),
        migrations.CreateModel(
            name="OrganizationMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("name", models.CharField(max_length=120)),
                ("role", models.CharField(max_length=120)),
                ("image_url", models.CharField(blank=True, max_length=500)),
            ],
            options={
                "verbose_name": "membro da direção",
                "verbose_name_plural": "organização",
                "db_table": "organization",
            },
        ),
        migrations.CreateModel(
            name="SiteContent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("section", models.CharField(max_length=40, unique=True)),
                ("title", models.TextField(blank=True)),
                ("subtitle", models.TextField(blank=True)),
                ("image_url", models.CharField(blank=True, max_length=500)),
            ],
            options={
                "verbose_name": "conteúdo de secção",
                "verbose_name_plural": "conteúdos de secção",
                "db_table": "site_content",
                "ordering": ["section"],
            },
        ),
    ]
