"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Locks por chave
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ConsultaCepError,
    CepNaoEncontradoError,
)
from .interfaces import UnitOfWork, NullUnitOfWork
from .locks import KeyedLock

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConsultaCepError",
    "CepNaoEncontradoError",
    "UnitOfWork",
    "NullUnitOfWork",
    "KeyedLock",
]
