"""
Django Models para o domínio de Clientes.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/clientes/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities/Use Cases do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- EnderecoModel: Cache de endereços, chaveado por CEP
- ClienteModel: Clientes, cada um apontando para um endereço
"""

from django.db import models
from django.utils import timezone


class EnderecoModel(models.Model):
    """
    Model Django para o cache de endereços.

    Um registro por CEP, gravado na primeira vez que o CEP é usado
    e nunca atualizado depois.

    Fields:
        cep: CEP normalizado (NNNNN-NNN) como primary key
        logradouro, complemento, bairro, localidade, uf: Endereço
        ibge, gia, ddd, siafi: Códigos devolvidos pelo ViaCEP
        criado_em: Momento em que o CEP foi cacheado
    """

    cep = models.CharField(
        max_length=9,
        primary_key=True,
        help_text="CEP no formato NNNNN-NNN"
    )

    logradouro = models.CharField(max_length=255, blank=True, default='')
    complemento = models.CharField(max_length=255, blank=True, default='')
    bairro = models.CharField(max_length=255, blank=True, default='')
    localidade = models.CharField(max_length=255, blank=True, default='', db_index=True)
    uf = models.CharField(max_length=2, blank=True, default='', db_index=True)
    ibge = models.CharField(max_length=20, blank=True, default='')
    gia = models.CharField(max_length=20, blank=True, default='')
    ddd = models.CharField(max_length=5, blank=True, default='')
    siafi = models.CharField(max_length=20, blank=True, default='')

    criado_em = models.DateTimeField(
        default=timezone.now,
        editable=False,
        help_text="Data/hora em que o CEP foi cacheado"
    )

    class Meta:
        db_table = 'enderecos'
        verbose_name = 'Endereço'
        verbose_name_plural = 'Endereços'
        ordering = ['cep']

    def __str__(self):
        return f"{self.cep} - {self.logradouro}, {self.localidade}/{self.uf}"


class ClienteModel(models.Model):
    """
    Model Django para persistência de Clientes.

    Fields:
        id: Auto-incremento (atribuído pelo banco na criação)
        nome: Nome do cliente
        endereco: FK para o endereço cacheado (PROTECT: endereço em uso
            não pode ser removido)
        criado_em: Timestamp de criação
        atualizado_em: Timestamp da última atualização
    """

    id = models.BigAutoField(primary_key=True)

    nome = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Nome do cliente"
    )

    endereco = models.ForeignKey(
        EnderecoModel,
        on_delete=models.PROTECT,
        related_name='clientes',
        help_text="Endereço resolvido pelo CEP"
    )

    criado_em = models.DateTimeField(
        default=timezone.now,
        editable=False,
    )

    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'clientes'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['id']

    def __str__(self):
        return f"[{self.id}] {self.nome}"

    def __repr__(self):
        return f"<ClienteModel id={self.id} cep={self.endereco_id}>"
