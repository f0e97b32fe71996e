"""
Domínio de Clientes - Cadastro com Endereço por CEP.

Este módulo contém toda a lógica de negócio do cadastro de clientes:
- Entidades (ClienteEntity, EnderecoEntity)
- Use Cases (ClienteService)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Repositórios e serviço de CEP)

Características do Domínio:
- Endereço resolvido a partir do CEP via serviço externo
- Endereços cacheados por CEP (gravados uma única vez)
- Exclusão de clientes idempotente
"""

from .entities import ClienteEntity, EnderecoEntity, normalizar_cep
from .dtos import (
    ClienteInputDTO,
    ClienteOutputDTO,
    EnderecoOutputDTO,
)
from .ports import (
    ClienteRepository,
    EnderecoRepository,
    ConsultaCepGateway,
    InMemoryClienteRepository,
    InMemoryEnderecoRepository,
)
from .use_cases import ClienteService

__all__ = [
    # Entities
    "ClienteEntity",
    "EnderecoEntity",
    "normalizar_cep",
    # DTOs
    "ClienteInputDTO",
    "ClienteOutputDTO",
    "EnderecoOutputDTO",
    # Ports
    "ClienteRepository",
    "EnderecoRepository",
    "ConsultaCepGateway",
    "InMemoryClienteRepository",
    "InMemoryEnderecoRepository",
    # Use Cases
    "ClienteService",
]
