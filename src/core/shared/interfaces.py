"""
Interfaces (Ports) - Contratos entre Core e Adapters.

São os "Ports" da Arquitetura Hexagonal: o Core define,
os Adapters implementam. O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que as gravações de uma operação (endereço + cliente)
    sejam persistidas juntas ou descartadas juntas.

    Pattern: Context Manager
        with uow:
            endereco_repo.save(endereco)
            cliente_repo.save(cliente)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção
    """

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todas as mudanças."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class NullUnitOfWork(UnitOfWork):
    """
    Unit of Work que não faz nada.

    Usado quando o repositório não oferece transações
    (ex: implementações em memória).
    """

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass
