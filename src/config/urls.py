"""
URL Configuration para o Cadastro de Clientes.

Estrutura:
- /admin/ - Django Admin
- /clientes/ - API JSON de Clientes
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # Clientes API
    path('clientes/', include('src.adapters.django_app.clientes.urls')),

    # Health check
    path('health/', health, name='health'),
]
