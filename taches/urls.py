from django.urls import path
from .views import liste_taches, tache_detail, supprimer_tache

# Namespace de l'application pour les URLs réversibles
app_name = 'taches'

urlpatterns = [
    path('', liste_taches, name='liste'),
    path('<int:pk>/', tache_detail, name='detail'),
    path('<int:pk>/supprimer/', supprimer_tache, name='supprimer'),
]
