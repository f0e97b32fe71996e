"""
Configuração do Django App para Clientes.
"""

from django.apps import AppConfig


class ClientesConfig(AppConfig):
    """Configuração do app Clientes."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.clientes'
    label = 'clientes'
    verbose_name = 'Cadastro de Clientes'
