"""
Use Cases (Application Services) do Domínio de Clientes.

ClienteService é a fachada do domínio: expõe as operações de cadastro
e esconde a integração com o serviço de CEP e o cache de endereços.

Operações:
- buscar_todos: Lista clientes
- buscar_por_id: Obtém cliente específico
- inserir: Cria cliente resolvendo o endereço pelo CEP
- atualizar: Substitui cliente existente resolvendo o endereço pelo CEP
- deletar: Remove cliente (idempotente)

Princípios:
- Dependências injetadas (DI)
- Validação de entrada antes de qualquer acesso a repositório
- Erros propagados sem tradução (a camada HTTP decide o status)
"""

from typing import List, Optional

from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.interfaces import NullUnitOfWork, UnitOfWork
from src.core.shared.locks import KeyedLock

from .entities import ClienteEntity, EnderecoEntity, normalizar_cep, validar_id
from .ports import ClienteRepository, ConsultaCepGateway, EnderecoRepository


class ClienteService:
    """
    Use Case: Cadastro de clientes com endereço resolvido por CEP.

    Fluxo de gravação (inserir/atualizar):
    1. Validar cliente e CEP
    2. Buscar CEP no cache de endereços
    3. Se ausente, consultar serviço externo e gravar no cache (transação própria, sob lock do CEP)
    4. Associar endereço resolvido ao cliente
    5. Persistir cliente (transação do cliente)

    Attributes:
        cliente_repo: Repositório de clientes
        endereco_repo: Cache persistente de endereços (CEP → endereço)
        consulta_cep: Serviço externo de CEP
        uow: Unit of Work para transações
        cep_locks: Locks por CEP, compartilhados entre instâncias

    Example:
        service = ClienteService(cliente_repo, endereco_repo, viacep)
        cliente = service.inserir(ClienteEntity.criar(nome="Ana", cep="01001-000"))
        print(cliente.endereco.logradouro)  # "Praça da Sé"
    """

    def __init__(
        self,
        cliente_repo: ClienteRepository,
        endereco_repo: EnderecoRepository,
        consulta_cep: ConsultaCepGateway,
        uow: Optional[UnitOfWork] = None,
        cep_locks: Optional[KeyedLock] = None,
    ):
        self.cliente_repo = cliente_repo
        self.endereco_repo = endereco_repo
        self.consulta_cep = consulta_cep
        self.uow = uow or NullUnitOfWork()
        self.cep_locks = cep_locks or KeyedLock()

    def buscar_todos(self) -> List[ClienteEntity]:
        """Lista todos os clientes (ordem definida pelo repositório)."""
        return self.cliente_repo.list_all()

    def buscar_por_id(self, cliente_id: int) -> ClienteEntity:
        """
        Obtém cliente por ID.

        Raises:
            ValidationError: Se ID nulo ou não positivo
            EntityNotFoundError: Se cliente não existe
        """
        validar_id(cliente_id)

        cliente = self.cliente_repo.get_by_id(cliente_id)
        if cliente is None:
            raise self._nao_encontrado(cliente_id)

        return cliente

    def inserir(self, cliente: ClienteEntity) -> ClienteEntity:
        """
        Cria novo cliente.

        O ID eventualmente presente no payload é descartado:
        o repositório atribui um novo.

        Raises:
            ValidationError: Se cliente nulo ou CEP inválido
            ConsultaCepError: Se o serviço de CEP falhar
        """
        self._validar_cliente(cliente)
        normalizar_cep(cliente.cep)

        cliente.id = None
        return self._salvar_cliente_com_cep(cliente)

    def atualizar(self, cliente_id: int, cliente: ClienteEntity) -> ClienteEntity:
        """
        Substitui integralmente o cliente com o ID informado.

        O registro gravado é sempre o de ``cliente_id``; um ID diferente
        no payload é ignorado. A existência é verificada antes de
        qualquer consulta de CEP ou gravação.

        Raises:
            ValidationError: Se ID ou cliente inválidos
            EntityNotFoundError: Se cliente não existe
            ConsultaCepError: Se o serviço de CEP falhar
        """
        validar_id(cliente_id)
        self._validar_cliente(cliente)
        normalizar_cep(cliente.cep)

        if not self.cliente_repo.exists(cliente_id):
            raise self._nao_encontrado(cliente_id)

        cliente.id = cliente_id
        return self._salvar_cliente_com_cep(cliente)

    def deletar(self, cliente_id: int) -> None:
        """
        Remove cliente. Remover ID inexistente não é erro.

        Endereços associados permanecem no cache.

        Raises:
            ValidationError: Se ID nulo ou não positivo
        """
        validar_id(cliente_id)

        with self.uow:
            self.cliente_repo.delete(cliente_id)

    def _salvar_cliente_com_cep(self, cliente: ClienteEntity) -> ClienteEntity:
        self._validar_cliente(cliente)

        cep = normalizar_cep(cliente.cep)
        endereco = self._resolver_endereco(cep)

        with self.uow:
            # Sempre o endereço resolvido, nunca o parcial enviado pelo chamador
            cliente.definir_endereco(endereco)
            return self.cliente_repo.save(cliente)

    def _resolver_endereco(self, cep: str) -> EnderecoEntity:
        """
        Devolve o endereço cacheado ou consulta o serviço de CEP.

        A gravação no cache é confirmada na sua própria transação,
        ainda com o lock do CEP, para que a releitura de quem estava
        esperando já encontre o registro.
        """
        endereco = self.endereco_repo.get_by_cep(cep)
        if endereco is not None:
            return endereco

        with self.cep_locks.acquire(cep):
            # Outra thread pode ter preenchido enquanto esperávamos o lock
            endereco = self.endereco_repo.get_by_cep(cep)
            if endereco is not None:
                return endereco

            consultado = self.consulta_cep.consultar_cep(cep)
            with self.uow:
                return self.endereco_repo.save(consultado.com_cep(cep))

    @staticmethod
    def _validar_cliente(cliente: Optional[ClienteEntity]) -> None:
        if cliente is None:
            raise ValidationError("Cliente não pode ser nulo", field="cliente")

    @staticmethod
    def _nao_encontrado(cliente_id: int) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"Cliente não encontrado para o ID: {cliente_id}",
            entity_type="Cliente",
            entity_id=cliente_id,
        )
