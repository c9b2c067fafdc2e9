from dataclasses import dataclass

from django.db.models import Q
from django.utils import timezone

STATUTS = ("all", "active", "completed")
ECHEANCES = ("", "today")


def _normaliser(valeur, permises, defaut):
    valeur = (valeur or "").strip().lower()
    return valeur if valeur in permises else defaut


def resoudre_filtre(status=None, due=None, aujourd_hui=None):
    """Traduire les paramètres ``status`` et ``due`` en prédicat ``Q``.

    Les valeurs inconnues se comportent comme l'absence de filtre. Les deux
    filtres se combinent par un ET logique. ``today`` désigne la date locale
    du serveur (``TIME_ZONE``) sauf si ``aujourd_hui`` est fourni.
    """
    status = _normaliser(status, STATUTS, "all")
    due = _normaliser(due, ECHEANCES, "")

    predicat = Q()
    if status == "active":
        predicat &= Q(is_completed=False)
    elif status == "completed":
        predicat &= Q(is_completed=True)

    if due == "today":
        if aujourd_hui is None:
            aujourd_hui = timezone.localdate()
        predicat &= Q(due_date=aujourd_hui)

    return predicat


@dataclass(frozen=True)
class FiltreTaches:
    """Sélection courante des filtres, déjà normalisée."""

    status: str = "all"
    due: str = ""

    @classmethod
    def depuis_parametres(cls, parametres):
        return cls(
            status=_normaliser(parametres.get("status"), STATUTS, "all"),
            due=_normaliser(parametres.get("due"), ECHEANCES, ""),
        )

    @property
    def est_actif(self):
        return self.status != "all" or bool(self.due)

    def predicat(self, aujourd_hui=None):
        return resoudre_filtre(self.status, self.due, aujourd_hui=aujourd_hui)
