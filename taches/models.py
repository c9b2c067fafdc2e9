from django.core.exceptions import ValidationError
from django.db import models


def valider_titre_non_vide(valeur):
    """Refuse un titre vide ou composé uniquement d'espaces."""
    if not valeur or not valeur.strip():
        raise ValidationError("Le titre ne peut pas être vide.", code="blank")


class Tache(models.Model):
    """Représente une tâche de la liste.

    Attributes:
        title (str): Le titre de la tâche (max 200 caractères, jamais vide).
        is_completed (bool): Indique si la tâche est terminée (False par défaut).
        due_date (date | None): L'échéance, fixée à la création.
        created_at (datetime): Date de création, posée par la base.
        updated_at (datetime): Date de dernière modification, rafraîchie à chaque écriture.
    """

    title = models.CharField(max_length=200, validators=[valider_titre_non_vide])
    is_completed = models.BooleanField(default=False)
    due_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        verbose_name = "Tâche"
        verbose_name_plural = "Tâches"

    def __str__(self):
        return f"{self.title} ({'terminée' if self.is_completed else 'en cours'})"
