# cms/widgets.py
from django import forms

# commandes de la barre d'outils -> document.execCommand(<command>, false, <value>)
TOOLBAR_COMMANDS = [
    ("bold", "B", "Negrito"),
    ("italic", "I", "Itálico"),
    ("underline", "U", "Sublinhado"),
    ("justifyLeft", "⯇", "Alinhar à esquerda"),
    ("justifyCenter", "≡", "Centrar"),
    ("justifyRight", "⯈", "Alinhar à direita"),
    ("insertUnorderedList", "•", "Lista"),
    ("insertOrderedList", "1.", "Lista numerada"),
]

FONT_FAMILIES = ["Montserrat", "Arial", "Georgia", "Times New Roman", "Courier New"]

# tailles en px ; appliquées via fontSize=7 puis réécriture des <font size="7">
FONT_SIZES = [12, 14, 16, 18, 24, 32, 48, 64, 96]


class RichTextWidget(forms.Textarea):
    """
    Zone contenteditable + barre d'outils, recopiée dans le <textarea> caché
    à chaque commande / frappe. Le HTML produit n'est PAS assaini.
    """
    template_name = "cms/widgets/richtext.html"

    class Media:
        css = {"all": ["cms/richtext.css"]}
        js = ["cms/richtext.js"]

    def get_context(self, name, value, attrs):
        ctx = super().get_context(name, value, attrs)
        ctx["widget"].update({
            "commands": TOOLBAR_COMMANDS,
            "font_families": FONT_FAMILIES,
            "font_sizes": FONT_SIZES,
        })
        return ctx

    def use_required_attribute(self, initial):
        # textarea caché : la validation se fait côté serveur
        return False
