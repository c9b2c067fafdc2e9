import json
import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse, JsonResponse, QueryDict
from django.middleware.csrf import get_token
from django.shortcuts import redirect
from django.views.decorators.http import require_http_methods, require_POST

from . import services
from .forms import TacheForm
from .rendu import rendre_liste, tache_en_dict
from .store import TacheIntrouvable

logger = logging.getLogger(__name__)


def _page(request, formulaire, taches, filtre):
    html = rendre_liste(
        taches,
        filtre,
        formulaire=formulaire,
        csrf_token=get_token(request),
        messages=messages.get_messages(request),
    )
    return HttpResponse(html)


class TypeDeCorpsNonSupporte(ValueError):
    """Le corps n'est ni du JSON ni un formulaire encodé."""


def _lire_corps(request):
    """Décoder le corps d'une requête (JSON ou formulaire encodé).

    Raises:
        TypeDeCorpsNonSupporte: autre type de contenu.
        ValueError: JSON illisible ou qui n'est pas un objet.
    """
    if request.content_type == "application/json":
        donnees = json.loads(request.body or b"{}")
        if not isinstance(donnees, dict):
            raise ValueError("Un objet JSON est attendu.")
        return donnees
    if request.content_type == "application/x-www-form-urlencoded":
        return QueryDict(request.body, encoding=request.encoding)
    raise TypeDeCorpsNonSupporte(f"Type de contenu non supporté : {request.content_type or 'absent'}")


def _corps_refuse(exc):
    if isinstance(exc, TypeDeCorpsNonSupporte):
        return JsonResponse({"success": False, "error": str(exc)}, status=415)
    return JsonResponse({"success": False, "error": "Corps de requête illisible."}, status=400)


def _introuvable(exc):
    return JsonResponse({"success": False, "error": str(exc)}, status=404)


@require_http_methods(["GET", "POST"])
def liste_taches(request):
    """Afficher la liste filtrée (GET) ou créer une tâche (POST).

    Les paramètres ``status`` et ``due`` de la chaîne de requête filtrent la
    liste. Un POST valide crée la tâche puis redirige vers la liste ; un POST
    invalide réaffiche la page avec les erreurs et les valeurs saisies.

    Args:
        request (django.http.HttpRequest): requête HTTP reçue par la vue.

    Returns:
        django.http.HttpResponse: la page de liste ou une redirection.
    """
    if request.method == "POST":
        return ajouter_tache(request)

    taches, filtre = services.lister_taches(request.GET)
    return _page(request, TacheForm(), taches, filtre)


def ajouter_tache(request):
    """Traiter la création d'une nouvelle tâche (POST).

    Args:
        request (django.http.HttpRequest): requête POST contenant ``title`` et
            ``due_date``, en formulaire encodé ou en JSON.

    Returns:
        django.http.HttpResponse: redirection vers la liste, ou la page
        réaffichée avec les erreurs du formulaire.
    """
    if request.content_type == "application/json":
        try:
            donnees = _lire_corps(request)
        except ValueError as exc:
            logger.warning("Corps illisible pour la création : %s", exc)
            return _corps_refuse(exc)
    else:
        donnees = request.POST

    try:
        tache = services.creer_tache(donnees)
    except ValidationError:
        formulaire = TacheForm(donnees)
        taches, filtre = services.lister_taches(request.GET)
        return _page(request, formulaire, taches, filtre)

    messages.success(request, f"Tâche « {tache.title} » ajoutée.")
    return redirect("taches:liste")


@require_http_methods(["PUT", "DELETE"])
def tache_detail(request, pk):
    """Mettre à jour (PUT) ou supprimer (DELETE) une tâche pour un appel asynchrone.

    La réponse est toujours un JSON ``{"success": ...}`` ; le client annule sa
    modification optimiste quand ``success`` est faux.
    """
    if request.method == "DELETE":
        try:
            services.supprimer_tache(pk)
        except TacheIntrouvable as exc:
            return _introuvable(exc)
        return JsonResponse({"success": True})

    try:
        donnees = _lire_corps(request)
    except ValueError as exc:
        logger.warning("Corps illisible pour la tâche %s : %s", pk, exc)
        return _corps_refuse(exc)

    try:
        tache = services.modifier_tache(pk, donnees)
    except TacheIntrouvable as exc:
        return _introuvable(exc)
    except ValidationError as exc:
        return JsonResponse({"success": False, "errors": exc.message_dict}, status=400)
    return JsonResponse({"success": True, "task": tache_en_dict(tache)})


@require_POST
def supprimer_tache(request, pk):
    """Suppression sans JavaScript : formulaire classique puis redirection."""
    try:
        services.supprimer_tache(pk)
    except TacheIntrouvable as exc:
        raise Http404(str(exc)) from exc
    messages.success(request, "Tâche supprimée.")
    return redirect("taches:liste")
