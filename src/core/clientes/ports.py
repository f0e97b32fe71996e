"""
Ports (Interfaces) do Domínio de Clientes.

Define os contratos que os Adapters de infraestrutura devem implementar.

Tipos de Ports:
- ClienteRepository: CRUD de clientes (id → cliente)
- EnderecoRepository: Cache de endereços (CEP → endereço, write-once)
- ConsultaCepGateway: Serviço externo de consulta de CEP

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoClienteRepository(ClienteRepository):
        def save(self, cliente: ClienteEntity) -> ClienteEntity:
            ...
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable
from dataclasses import replace
import itertools
import threading

from .entities import ClienteEntity, EnderecoEntity


@runtime_checkable
class ClienteRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoClienteRepository (PostgreSQL/SQLite via ORM)
    - InMemoryClienteRepository (para testes)
    """

    def save(self, cliente: ClienteEntity) -> ClienteEntity:
        """
        Persiste cliente.

        Sem ID: cria novo registro e atribui ID.
        Com ID: substitui integralmente o registro com esse ID.

        Returns:
            Cliente persistido (com ID)
        """
        ...

    def get_by_id(self, cliente_id: int) -> Optional[ClienteEntity]:
        """
        Busca cliente por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def delete(self, cliente_id: int) -> None:
        """
        Remove cliente.

        Não lança erro se o cliente não existir.
        """
        ...

    def list_all(self) -> List[ClienteEntity]:
        """Lista todos os clientes."""
        ...

    def exists(self, cliente_id: int) -> bool:
        """Verifica se cliente existe."""
        ...

    def count(self) -> int:
        """Conta total de clientes."""
        ...


@runtime_checkable
class EnderecoRepository(Protocol):
    """
    Interface para o cache persistente de endereços.

    Chaveado por CEP. Contém no máximo um registro por CEP
    e nunca sobrescreve um registro existente.
    """

    def get_by_cep(self, cep: str) -> Optional[EnderecoEntity]:
        """Busca endereço pelo CEP (None se não cacheado)."""
        ...

    def save(self, endereco: EnderecoEntity) -> EnderecoEntity:
        """
        Grava endereço se o CEP ainda não existir.

        Returns:
            Endereço efetivamente armazenado. Se outro processo gravou
            o mesmo CEP antes, retorna o registro já existente.
        """
        ...

    def exists(self, cep: str) -> bool:
        """Verifica se CEP está cacheado."""
        ...

    def count(self) -> int:
        """Conta endereços cacheados."""
        ...


@runtime_checkable
class ConsultaCepGateway(Protocol):
    """
    Interface para o serviço externo de consulta de CEP.

    Implementações:
    - ViaCepClient (https://viacep.com.br)
    """

    def consultar_cep(self, cep: str) -> EnderecoEntity:
        """
        Consulta endereço pelo CEP.

        Raises:
            CepNaoEncontradoError: Se o CEP não existe
            ConsultaCepError: Se o serviço falhar
        """
        ...


class InMemoryClienteRepository:
    """
    Implementação em memória do ClienteRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!
    """

    def __init__(self):
        self._clientes: Dict[int, ClienteEntity] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, cliente: ClienteEntity) -> ClienteEntity:
        """Salva cliente em memória, atribuindo ID na criação."""
        with self._lock:
            if cliente.id is None:
                cliente.id = next(self._sequence)
            self._clientes[cliente.id] = replace(cliente)
        return cliente

    def get_by_id(self, cliente_id: int) -> Optional[ClienteEntity]:
        """Busca cliente por ID (cópia, como um banco faria)."""
        cliente = self._clientes.get(cliente_id)
        return replace(cliente) if cliente is not None else None

    def delete(self, cliente_id: int) -> None:
        """Remove cliente."""
        with self._lock:
            self._clientes.pop(cliente_id, None)

    def list_all(self) -> List[ClienteEntity]:
        """Lista todos os clientes em ordem de ID."""
        return [replace(self._clientes[k]) for k in sorted(self._clientes)]

    def exists(self, cliente_id: int) -> bool:
        """Verifica existência."""
        return cliente_id in self._clientes

    def count(self) -> int:
        """Conta total."""
        return len(self._clientes)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._clientes.clear()


class InMemoryEnderecoRepository:
    """
    Implementação em memória do EnderecoRepository.

    Não usar em produção!
    """

    def __init__(self):
        self._enderecos: Dict[str, EnderecoEntity] = {}
        self._lock = threading.Lock()

    def get_by_cep(self, cep: str) -> Optional[EnderecoEntity]:
        """Busca endereço por CEP."""
        return self._enderecos.get(cep)

    def save(self, endereco: EnderecoEntity) -> EnderecoEntity:
        """Grava se ausente; retorna o registro armazenado."""
        with self._lock:
            return self._enderecos.setdefault(endereco.cep, endereco)

    def exists(self, cep: str) -> bool:
        """Verifica existência."""
        return cep in self._enderecos

    def count(self) -> int:
        """Conta total."""
        return len(self._enderecos)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._enderecos.clear()
