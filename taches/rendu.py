"""Rendu de la liste des tâches et sérialisation JSON.

``rendre_liste`` ne lit jamais la requête : le jeton CSRF et les messages
flash lui sont passés explicitement.
"""

from django.template.loader import render_to_string
from django.utils import timezone

TEMPLATE_LISTE = "taches/index.html"

CLASSES_ECHEANCE = {
    "today": "bg-warning",
    "overdue": "bg-danger",
    "future": "bg-info",
}


def etat_echeance(tache, aujourd_hui):
    """Renvoyer ``today``, ``overdue``, ``future`` ou ``None`` sans échéance."""
    if tache.due_date is None:
        return None
    if tache.due_date == aujourd_hui:
        return "today"
    if tache.due_date < aujourd_hui:
        return "overdue"
    return "future"


def rendre_liste(taches, filtre, *, formulaire, csrf_token, messages=(), aujourd_hui=None):
    """Produire la page HTML de la liste.

    Args:
        taches: tâches déjà filtrées, dans l'ordre d'affichage.
        filtre (FiltreTaches): sélection courante, reflétée par les contrôles.
        formulaire (TacheForm): formulaire de création, lié en cas d'erreur.
        csrf_token (str): jeton à insérer dans les formulaires et la balise meta.
        messages: messages flash à afficher (objets avec ``tags``).
        aujourd_hui (date): date de référence des badges, date locale par défaut.

    Returns:
        str: le document HTML.
    """
    if aujourd_hui is None:
        aujourd_hui = timezone.localdate()

    lignes = []
    for tache in taches:
        etat = etat_echeance(tache, aujourd_hui)
        lignes.append({
            "tache": tache,
            "echeance": etat,
            "classe_echeance": CLASSES_ECHEANCE.get(etat, ""),
        })

    contexte = {
        "lignes": lignes,
        "nombre": len(lignes),
        "filtre": filtre,
        "form": formulaire,
        "csrf_token": csrf_token,
        "messages": list(messages),
        "date_du_jour": aujourd_hui,
    }
    return render_to_string(TEMPLATE_LISTE, contexte)


def tache_en_dict(tache):
    return {
        "id": tache.pk,
        "title": tache.title,
        "is_completed": tache.is_completed,
        "due_date": tache.due_date.isoformat() if tache.due_date else None,
        "created_at": tache.created_at.isoformat(),
        "updated_at": tache.updated_at.isoformat(),
    }
