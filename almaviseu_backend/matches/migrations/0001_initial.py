from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Match",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateTimeField()),
                ("home_team", models.CharField(max_length=120)),
                ("guest_team", models.CharField(max_length=120)),
                ("location", models.CharField(blank=True, max_length=200)),
                ("category", models.CharField(blank=True, max_length=120)),
                ("score_home", models.PositiveIntegerField(blank=True, null=True)),
                ("score_guest", models.PositiveIntegerField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "jogo",
                "verbose_name_plural": "jogos",
                "db_table": "matches",
                "ordering": ["date"],
            },
        ),
    ]
