"""
Data Transfer Objects (DTOs) do Domínio de Clientes.

Transportam dados entre a camada HTTP e o Core, evitando que
entidades vazem para fora.

Tipos de DTOs:
- Input DTOs: Recebem o corpo da requisição ({"nome", "endereco": {"cep"}})
- Output DTOs: Formatam clientes/endereços para resposta
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.exceptions import ValidationError

from .entities import ClienteEntity, EnderecoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class ClienteInputDTO:
    """
    DTO de entrada para inserir/atualizar cliente.

    Attributes:
        nome: Nome do cliente
        cep: CEP do endereço (o restante é resolvido pelo service)
        id: ID enviado no corpo (ignorado na atualização; vale o da URL)
    """

    nome: str
    cep: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClienteInputDTO":
        """
        Constrói DTO a partir do JSON da requisição.

        Aceita o CEP aninhado em ``endereco`` (formato do recurso)
        ou diretamente em ``cep``.

        Raises:
            ValidationError: Se o corpo não for um objeto JSON
        """
        if not isinstance(data, dict):
            raise ValidationError("Corpo da requisição deve ser um objeto JSON")

        endereco = data.get("endereco") or {}
        if not isinstance(endereco, dict):
            raise ValidationError("Campo endereco deve ser um objeto", field="endereco")

        return cls(
            nome=data.get("nome", ""),
            cep=endereco.get("cep", data.get("cep")),
            id=data.get("id"),
        )

    def to_entity(self) -> ClienteEntity:
        """Converte para entidade (valida nome)."""
        return ClienteEntity.criar(nome=self.nome, cep=self.cep, cliente_id=self.id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "endereco": {"cep": self.cep},
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class EnderecoOutputDTO:
    """DTO de saída de endereço (mesmos campos do ViaCEP)."""

    cep: str
    logradouro: str
    complemento: str
    bairro: str
    localidade: str
    uf: str
    ibge: str
    gia: str
    ddd: str
    siafi: str

    @classmethod
    def from_entity(cls, entity: EnderecoEntity) -> "EnderecoOutputDTO":
        return cls(
            cep=entity.cep,
            logradouro=entity.logradouro,
            complemento=entity.complemento,
            bairro=entity.bairro,
            localidade=entity.localidade,
            uf=entity.uf,
            ibge=entity.ibge,
            gia=entity.gia,
            ddd=entity.ddd,
            siafi=entity.siafi,
        )

    def to_dict(self) -> dict:
        return {
            "cep": self.cep,
            "logradouro": self.logradouro,
            "complemento": self.complemento,
            "bairro": self.bairro,
            "localidade": self.localidade,
            "uf": self.uf,
            "ibge": self.ibge,
            "gia": self.gia,
            "ddd": self.ddd,
            "siafi": self.siafi,
        }


@dataclass
class ClienteOutputDTO:
    """
    DTO de saída completo com dados do cliente.

    Attributes:
        id: Identificador atribuído pelo repositório
        nome: Nome do cliente
        endereco: Endereço resolvido
    """

    id: int
    nome: str
    endereco: Optional[EnderecoOutputDTO]

    @classmethod
    def from_entity(cls, entity: ClienteEntity) -> "ClienteOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade ClienteEntity

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            nome=entity.nome,
            endereco=(
                EnderecoOutputDTO.from_entity(entity.endereco)
                if entity.endereco is not None
                else None
            ),
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "endereco": self.endereco.to_dict() if self.endereco else None,
        }
