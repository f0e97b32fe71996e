"""
Repositórios Django para persistência de Clientes e Endereços.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar ClienteRepository e EnderecoRepository
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM (select_related para evitar N+1)

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import List, Optional
import logging

from src.core.clientes.entities import ClienteEntity, EnderecoEntity
from src.core.clientes.ports import (
    ClienteRepository as ClienteRepositoryPort,
    EnderecoRepository as EnderecoRepositoryPort,
)

from .models import ClienteModel, EnderecoModel
from .mappers import ClienteMapper, EnderecoMapper

logger = logging.getLogger(__name__)


class DjangoClienteRepository(ClienteRepositoryPort):
    """
    Implementação Django do ClienteRepository.

    Example:
        repo = DjangoClienteRepository()

        # Criar (ID atribuído pelo banco)
        cliente = repo.save(cliente_entity)

        # Buscar
        cliente = repo.get_by_id(cliente.id)
    """

    def __init__(self):
        self._mapper = ClienteMapper()

    def _queryset(self):
        return ClienteModel.objects.select_related('endereco')

    def save(self, cliente: ClienteEntity) -> ClienteEntity:
        """
        Persiste cliente (create ou replace).

        Sem ID: INSERT e o ID gerado é gravado na entidade.
        Com ID: substitui nome e endereço do registro com esse ID.
        """
        if cliente.id is None:
            model = ClienteModel.objects.create(
                nome=cliente.nome,
                endereco_id=cliente.cep,
            )
            cliente.id = model.id
            logger.info(f"Cliente criado: {cliente.id}")
        else:
            ClienteModel.objects.update_or_create(
                id=cliente.id,
                defaults={
                    'nome': cliente.nome,
                    'endereco_id': cliente.cep,
                },
            )
            logger.info(f"Cliente salvo: {cliente.id}")

        return cliente

    def get_by_id(self, cliente_id: int) -> Optional[ClienteEntity]:
        """Busca cliente por ID (None se não existir)."""
        try:
            model = self._queryset().get(id=cliente_id)
            return self._mapper.to_entity(model)
        except ClienteModel.DoesNotExist:
            logger.debug(f"Cliente not found: {cliente_id}")
            return None

    def delete(self, cliente_id: int) -> None:
        """
        Remove cliente do banco.

        Note:
            Não lança erro se cliente não existir
        """
        deleted_count, _ = ClienteModel.objects.filter(id=cliente_id).delete()

        if deleted_count > 0:
            logger.info(f"Cliente deleted: {cliente_id}")
        else:
            logger.debug(f"Cliente not found for deletion: {cliente_id}")

    def list_all(self) -> List[ClienteEntity]:
        """
        Lista todos os clientes.

        Warning:
            Use com cuidado em produção - sem paginação
        """
        return self._mapper.to_entity_list(self._queryset().order_by('id'))

    def exists(self, cliente_id: int) -> bool:
        return ClienteModel.objects.filter(id=cliente_id).exists()

    def count(self) -> int:
        return ClienteModel.objects.count()


class DjangoEnderecoRepository(EnderecoRepositoryPort):
    """
    Implementação Django do EnderecoRepository (cache por CEP).

    Gravação é insert-if-absent: um CEP já cacheado nunca é sobrescrito.
    """

    def __init__(self):
        self._mapper = EnderecoMapper()

    def get_by_cep(self, cep: str) -> Optional[EnderecoEntity]:
        try:
            model = EnderecoModel.objects.get(cep=cep)
        except EnderecoModel.DoesNotExist:
            logger.debug(f"Endereço não cacheado: {cep}")
            return None

        logger.debug(f"Endereço em cache: {cep}")
        return self._mapper.to_entity(model)

    def save(self, endereco: EnderecoEntity) -> EnderecoEntity:
        """
        Grava endereço se o CEP ainda não existir.

        get_or_create trata a corrida entre dois processos gravando o
        mesmo CEP (IntegrityError → relê o registro existente).

        Returns:
            Endereço efetivamente armazenado
        """
        model, created = EnderecoModel.objects.get_or_create(
            cep=endereco.cep,
            defaults=self._mapper.to_fields(endereco),
        )

        if created:
            logger.info(f"Endereço cacheado: {endereco.cep}")
        else:
            logger.debug(f"Endereço já cacheado, mantendo registro: {endereco.cep}")

        return self._mapper.to_entity(model)

    def exists(self, cep: str) -> bool:
        return EnderecoModel.objects.filter(cep=cep).exists()

    def count(self) -> int:
        return EnderecoModel.objects.count()
