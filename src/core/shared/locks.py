"""
Locks por chave.

Serializa operações que compartilham a mesma chave (ex: o preenchimento
do cache de endereços para um CEP) sem bloquear chaves diferentes.
"""

from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List
import threading


class KeyedLock:
    """
    Exclusão mútua por chave.

    Cada chave ganha seu próprio lock, criado sob demanda e descartado
    quando nenhuma thread o está usando.

    Example:
        locks = KeyedLock()
        with locks.acquire("01001-000"):
            ...  # apenas uma thread por CEP aqui dentro
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, threading.Lock] = {}
        self._waiters: Dict[Hashable, int] = {}

    @contextmanager
    def acquire(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._waiters[key] = self._waiters.get(key, 0) + 1

        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                self._waiters[key] -= 1
                if self._waiters[key] == 0:
                    del self._waiters[key]
                    del self._locks[key]

    def active_keys(self) -> List[Hashable]:
        """Chaves com lock em uso (para testes/debugging)."""
        with self._guard:
            return list(self._locks)
