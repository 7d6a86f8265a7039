from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120)),
                ("category", models.CharField(blank=True, max_length=120)),
                ("description", models.TextField(blank=True)),
                ("image_url", models.CharField(blank=True, max_length=500)),
                ("coaches", models.TextField(blank=True)),
            ],
            options={
                "verbose_name": "equipa",
                "verbose_name_plural": "equipas",
                "db_table": "teams",
            },
        ),
        migrations.CreateModel(
            name="TeamMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120)),
                ("number", models.CharField(blank=True, max_length=10)),
                ("position", models.CharField(blank=True, max_length=64)),
                ("image_url", models.CharField(blank=True, max_length=500)),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="members",
                        to="teams.team",
                    ),
                ),
            ],
            options={
                "verbose_name": "atleta",
                "verbose_name_plural": "plantel",
                "db_table": "team_members",
                "indexes": [models.Index(fields=["team", "name"], name="team_members_team_name_idx")],
            },
        ),
    ]
