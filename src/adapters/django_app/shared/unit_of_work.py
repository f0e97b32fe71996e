"""
Unit of Work - Implementação Django.

Garante que as gravações de uma operação do ClienteService
(endereço cacheado + cliente) sejam confirmadas ou desfeitas juntas.

Usa django.db.transaction.atomic, que vira savepoint quando já existe
uma transação aberta (ex: ATOMIC_REQUESTS ou testes).
"""

from typing import List, Optional
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Reutilizável: cada bloco `with` abre um novo atomic.

    Example:
        uow = DjangoUnitOfWork()
        with uow:
            endereco_repo.save(endereco)
            cliente_repo.save(cliente)
        # Commit automático

    Example com rollback:
        with uow:
            cliente_repo.save(cliente)
            raise Exception("Erro!")
        # Rollback automático
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        """
        Args:
            using: Alias do banco (settings.DATABASES)
        """
        self._using = using
        self._atomics: List[transaction.Atomic] = []
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        atomic = transaction.atomic(using=self._using)
        atomic.__enter__()
        self._atomics.append(atomic)
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """Confirma o bloco atomic corrente."""
        atomic = self._pop_atomic()
        if atomic is None:
            logger.warning("Commit sem transação ativa")
            return

        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Desfaz o bloco atomic corrente."""
        atomic = self._pop_atomic()
        if atomic is None:
            return

        # atomic desfaz quando recebe uma exceção em __exit__
        error = _Rollback()
        atomic.__exit__(type(error), error, None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    def _pop_atomic(self) -> Optional[transaction.Atomic]:
        return self._atomics.pop() if self._atomics else None

    @property
    def is_committed(self) -> bool:
        """Verifica se a última transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se a última transação foi revertida."""
        return self._rolled_back


class _Rollback(Exception):
    """Sinaliza ao atomic que o bloco deve ser desfeito."""


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra commits/rollbacks.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            ...
        assert uow.committed
    """

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    @property
    def committed(self) -> bool:
        return self.commits > 0

    @property
    def rolled_back(self) -> bool:
        return self.rollbacks > 0

    def reset(self) -> None:
        """Reset para próximo teste."""
        self.commits = 0
        self.rollbacks = 0
