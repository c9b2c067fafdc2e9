"""Orchestration des quatre actions utilisateur sur les tâches.

Les données reçues ont la forme d'une requête (``QueryDict`` ou ``dict`` issu
d'un JSON) ; elles sont validées par les formulaires puis transmises au store.
"""

import logging

from django.core.exceptions import ValidationError

from . import store
from .filtres import FiltreTaches
from .forms import MiseAJourTacheForm, TacheForm

logger = logging.getLogger(__name__)


def creer_tache(donnees):
    """Valider puis créer une tâche.

    Args:
        donnees: champs ``title`` et ``due_date`` (optionnel, AAAA-MM-JJ).

    Returns:
        Tache: la tâche créée.

    Raises:
        ValidationError: porte les erreurs du formulaire (``message_dict``).
    """
    form = TacheForm(donnees)
    if not form.is_valid():
        logger.warning("Création refusée : %s", form.errors.get_json_data())
        raise ValidationError(form.errors.as_data())

    tache = store.creer(
        form.cleaned_data["title"],
        due_date=form.cleaned_data.get("due_date"),
    )
    logger.info("Tâche %s créée", tache.pk)
    return tache


def lister_taches(parametres):
    """Renvoyer les tâches filtrées et la sélection de filtres retenue."""
    filtre = FiltreTaches.depuis_parametres(parametres)
    return store.lister(filtre.predicat()), filtre


def modifier_tache(tache_id, donnees):
    """Appliquer une mise à jour partielle (titre et/ou état terminé).

    Seuls les champs présents dans ``donnees`` sont transmis au store ; une
    échéance éventuellement fournie est ignorée.

    Raises:
        ValidationError: titre vide ou booléen illisible.
        store.TacheIntrouvable: identifiant inconnu.
    """
    form = MiseAJourTacheForm(donnees)
    if not form.is_valid():
        logger.warning("Mise à jour de la tâche %s refusée : %s", tache_id, form.errors.get_json_data())
        raise ValidationError(form.errors.as_data())

    champs = form.champs_fournis()
    tache = store.mettre_a_jour(tache_id, **champs)
    logger.info("Tâche %s mise à jour (%s)", tache_id, ", ".join(champs) or "aucun champ")
    return tache


def supprimer_tache(tache_id):
    store.supprimer(tache_id)
    logger.info("Tâche %s supprimée", tache_id)
