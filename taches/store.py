"""Accès en base aux tâches.

Toutes les lectures et écritures sur la table des tâches passent par ici. Les
fonctions lèvent des exceptions explicites plutôt que de renvoyer des booléens :
``ValidationError`` pour un titre invalide, ``TacheIntrouvable`` pour un
identifiant inconnu.
"""

from django.db import transaction
from django.utils import timezone

from .models import Tache

CHAMPS_MODIFIABLES = ("title", "is_completed")


class TacheIntrouvable(Tache.DoesNotExist):
    """Aucune tâche ne porte l'identifiant demandé."""

    def __init__(self, tache_id):
        super().__init__(f"Aucune tâche avec l'identifiant {tache_id}.")
        self.tache_id = tache_id


def creer(title, due_date=None):
    """Insérer une nouvelle tâche non terminée et la renvoyer.

    Raises:
        django.core.exceptions.ValidationError: si le titre est vide.
    """
    tache = Tache(title=title, due_date=due_date, is_completed=False)
    tache.full_clean()
    tache.save()
    return tache


def lister(predicat=None):
    """Renvoyer les tâches correspondant au prédicat ``Q``, dans l'ordre d'insertion."""
    taches = Tache.objects.all()
    if predicat is not None:
        taches = taches.filter(predicat)
    return list(taches.order_by("id"))


def obtenir(tache_id, verrouiller=False):
    taches = Tache.objects.select_for_update() if verrouiller else Tache.objects.all()
    try:
        return taches.get(pk=tache_id)
    except Tache.DoesNotExist:
        raise TacheIntrouvable(tache_id) from None


def mettre_a_jour(tache_id, **champs):
    """Appliquer un sous-ensemble de {title, is_completed} à une tâche.

    Seuls les champs fournis sont écrits ; ``updated_at`` est toujours
    rafraîchi. L'écriture est conditionnée à l'existence de la ligne : une
    suppression concurrente se traduit par ``TacheIntrouvable``.

    Raises:
        TacheIntrouvable: si l'identifiant est inconnu.
        django.core.exceptions.ValidationError: si le nouveau titre est vide.
    """
    inconnus = sorted(set(champs) - set(CHAMPS_MODIFIABLES))
    if inconnus:
        raise TypeError(f"Champs non modifiables : {', '.join(inconnus)}")

    with transaction.atomic():
        tache = obtenir(tache_id, verrouiller=True)
        for nom, valeur in champs.items():
            setattr(tache, nom, valeur)
        tache.full_clean()
        tache.updated_at = timezone.now()
        modifiees = Tache.objects.filter(pk=tache.pk).update(
            updated_at=tache.updated_at,
            **{nom: getattr(tache, nom) for nom in champs},
        )
        if not modifiees:
            raise TacheIntrouvable(tache_id)
    return tache


def supprimer(tache_id):
    """Supprimer définitivement une tâche."""
    supprimees, _ = Tache.objects.filter(pk=tache_id).delete()
    if not supprimees:
        raise TacheIntrouvable(tache_id)
