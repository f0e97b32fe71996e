"""
URL patterns para o domínio de Clientes.

Endpoints API JSON:
- GET /clientes/ - Listar clientes
- POST /clientes/ - Inserir cliente
- GET /clientes/<id>/ - Obter cliente
- PUT /clientes/<id>/ - Atualizar cliente
- DELETE /clientes/<id>/ - Remover cliente
"""

from django.urls import path
from . import api_views

app_name = 'clientes'

urlpatterns = [
    path('', api_views.ClienteAPIListView.as_view(), name='api_list'),
    path('<int:pk>/', api_views.ClienteAPIDetailView.as_view(), name='api_detail'),
]
