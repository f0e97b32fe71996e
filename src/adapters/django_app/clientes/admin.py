"""
Django Admin para o domínio de Clientes.
"""

from django.contrib import admin

from .models import ClienteModel, EnderecoModel


@admin.register(EnderecoModel)
class EnderecoAdmin(admin.ModelAdmin):
    """
    Admin para EnderecoModel.

    Somente leitura: o cache de endereços é preenchido pelo ViaCEP
    e nunca editado.
    """

    list_display = ['cep', 'logradouro', 'bairro', 'localidade', 'uf', 'criado_em']
    list_filter = ['uf']
    search_fields = ['cep', 'logradouro', 'bairro', 'localidade']
    ordering = ['cep']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(ClienteModel)
class ClienteAdmin(admin.ModelAdmin):
    """Admin para ClienteModel."""

    list_display = ['id', 'nome', 'cep', 'cidade', 'criado_em']
    list_select_related = ['endereco']
    search_fields = ['nome', 'endereco__cep', 'endereco__localidade']
    readonly_fields = ['criado_em', 'atualizado_em']
    raw_id_fields = ['endereco']
    ordering = ['id']

    def cep(self, obj):
        return obj.endereco_id
    cep.short_description = 'CEP'

    def cidade(self, obj):
        return f"{obj.endereco.localidade}/{obj.endereco.uf}"
    cidade.short_description = 'Cidade'
