"""
Testes Unitários para KeyedLock.
"""

import threading
import time

import pytest

from src.core.shared.locks import KeyedLock


class TestKeyedLock:
    """Testes para locks por chave."""

    def test_lock_liberado_apos_uso(self):
        locks = KeyedLock()

        with locks.acquire("01001-000"):
            assert locks.active_keys() == ["01001-000"]

        assert locks.active_keys() == []

    def test_lock_liberado_apos_excecao(self):
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            with locks.acquire("01001-000"):
                raise RuntimeError("falha")

        assert locks.active_keys() == []

    def test_chaves_diferentes_nao_bloqueiam(self):
        """Uma thread segurando A não impede outra de pegar B."""
        locks = KeyedLock()
        entrou = threading.Event()

        def outra_chave():
            with locks.acquire("20040-020"):
                entrou.set()

        with locks.acquire("01001-000"):
            t = threading.Thread(target=outra_chave)
            t.start()
            assert entrou.wait(timeout=2)
        t.join()

    @pytest.mark.slow
    def test_mesma_chave_exclusiva(self):
        locks = KeyedLock()
        dentro = 0
        maximo = 0
        contador_lock = threading.Lock()

        def trabalho():
            nonlocal dentro, maximo
            with locks.acquire("01001-000"):
                with contador_lock:
                    dentro += 1
                    maximo = max(maximo, dentro)
                time.sleep(0.01)
                with contador_lock:
                    dentro -= 1

        threads = [threading.Thread(target=trabalho) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert maximo == 1
        assert locks.active_keys() == []
