# teams/admin.py
from django.contrib import admin
from django.utils.html import format_html

from .models import Team, TeamMember


class TeamMemberInline(admin.TabularInline):
    model = TeamMember
    extra = 0
    fields = ("number", "name", "position", "image_url")


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "roster_size", "thumb")
    search_fields = ("name", "category")
    inlines = [TeamMemberInline]

    @admin.display(description="Atletas")
    def roster_size(self, obj):
        return obj.members.count()

    @admin.display(description="Imagem")
    def thumb(self, obj):
        if not obj.image_url:
            return "—"
        return format_html('<img src="{}" style="height:32px">', obj.image_url)


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ("name", "number", "position", "team")
    list_filter = ("team",)
    search_fields = ("name", "position", "team__name")
    ordering = ("team", "name")
