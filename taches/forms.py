from django import forms
from django.core.exceptions import ValidationError
from django.forms import ModelForm

from .models import Tache

TITRE_VIDE = "Le titre ne peut pas être vide."

VALEURS_VRAIES = {"true", "1", "on", "yes"}
VALEURS_FAUSSES = {"false", "0", "off", "no"}


class TacheForm(ModelForm):
    """Formulaire de création : expose le titre et l'échéance optionnelle.

    L'état terminé n'est pas saisi ici : une tâche naît toujours non terminée.
    """

    class Meta:
        model = Tache
        fields = ["title", "due_date"]
        labels = {
            "title": "Titre",
            "due_date": "Échéance",
        }
        widgets = {
            "title": forms.TextInput(attrs={"placeholder": "Saisir le titre de la tâche"}),
            "due_date": forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d"),
        }
        error_messages = {
            "title": {"required": TITRE_VIDE},
            "due_date": {"invalid": "Date invalide, utilisez le format AAAA-MM-JJ."},
        }


class MiseAJourTacheForm(forms.Form):
    """Charge utile partielle d'une mise à jour asynchrone.

    Chaque champ est optionnel, mais un champ présent doit être valide : un
    titre fourni ne peut pas être vide, et ``is_completed`` doit ressembler à
    un booléen. Au moins l'un des deux champs doit être présent.
    ``champs_fournis()`` ne renvoie que les clés présentes dans la requête.
    """

    title = forms.CharField(required=False, max_length=200)
    is_completed = forms.CharField(required=False)

    def clean_title(self):
        title = self.cleaned_data["title"]
        if "title" in self.data and not title:
            raise ValidationError(TITRE_VIDE, code="blank")
        return title

    def clean_is_completed(self):
        if "is_completed" not in self.data:
            return None
        valeur = self.cleaned_data["is_completed"].strip().lower()
        if valeur in VALEURS_VRAIES:
            return True
        if valeur in VALEURS_FAUSSES:
            return False
        raise ValidationError("Valeur booléenne attendue.", code="invalid")

    def clean(self):
        cleaned_data = super().clean()
        if not any(nom in self.data for nom in self.fields):
            raise ValidationError(
                "Aucun champ à mettre à jour : fournir title ou is_completed.",
                code="empty",
            )
        return cleaned_data

    def champs_fournis(self):
        return {
            nom: self.cleaned_data[nom]
            for nom in self.fields
            if nom in self.data
        }
