from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='taches:liste', permanent=False)),
    path('taches/', include('taches.urls')),
]
