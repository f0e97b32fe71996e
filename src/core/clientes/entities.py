"""
Entidades do Domínio de Clientes.

Entidades:
- EnderecoEntity: Endereço resolvido a partir de um CEP (imutável após cacheado)
- ClienteEntity: Cliente com seu endereço associado

Regras de Negócio Encapsuladas:
- Normalização e validação de CEP
- Validação de nome do cliente
- Validação de identificadores
"""

from dataclasses import dataclass, field, replace
from typing import Optional
import re

from src.core.shared.exceptions import ValidationError


CEP_DIGITOS = 8

_NAO_DIGITO = re.compile(r"\D")
_CEP_FORMATO = re.compile(r"^\d{5}-?\d{3}$")


def normalizar_cep(cep: Optional[str]) -> str:
    """
    Normaliza CEP para o formato canônico ``NNNNN-NNN``.

    Aceita o CEP com ou sem hífen e espaços nas bordas.

    Args:
        cep: CEP informado pelo chamador

    Returns:
        CEP normalizado (mesmo formato devolvido pelo ViaCEP)

    Raises:
        ValidationError: Se CEP nulo, vazio ou sem 8 dígitos

    Example:
        >>> normalizar_cep("01001000")
        '01001-000'
    """
    if cep is None or not isinstance(cep, str) or not cep.strip():
        raise ValidationError(f"CEP inválido: {cep!r}", field="cep")

    cep = cep.strip()
    if not _CEP_FORMATO.match(cep):
        raise ValidationError(f"CEP inválido: {cep!r}", field="cep")

    digitos = _NAO_DIGITO.sub("", cep)
    return f"{digitos[:5]}-{digitos[5:]}"


def apenas_digitos(cep: str) -> str:
    """Remove tudo que não é dígito (formato usado na URL do ViaCEP)."""
    return _NAO_DIGITO.sub("", cep)


def validar_id(cliente_id) -> int:
    """
    Valida identificador de cliente.

    Raises:
        ValidationError: Se ID nulo, não inteiro, ou não positivo
    """
    # bool é subclasse de int
    if (
        cliente_id is None
        or isinstance(cliente_id, bool)
        or not isinstance(cliente_id, int)
        or cliente_id <= 0
    ):
        raise ValidationError(f"ID de cliente inválido: {cliente_id}", field="id")
    return cliente_id


@dataclass(frozen=True)
class EnderecoEntity:
    """
    Entidade de Domínio: Endereço.

    Chaveado pelo CEP. Uma vez gravado no repositório de endereços
    nunca é atualizado (cache write-once), por isso é imutável.

    Attributes:
        cep: CEP no formato NNNNN-NNN (chave primária)
        logradouro: Rua/avenida
        complemento: Complemento informado pelo serviço de CEP
        bairro: Bairro
        localidade: Cidade
        uf: Sigla do estado
        ibge: Código IBGE do município
        gia: Código GIA (SP)
        ddd: DDD da região
        siafi: Código SIAFI do município
    """

    cep: str
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""

    @classmethod
    def apenas_cep(cls, cep: str) -> "EnderecoEntity":
        """
        Cria endereço parcial contendo apenas o CEP.

        É o formato enviado pelo chamador; o endereço completo
        é resolvido pelo ClienteService.
        """
        return cls(cep=cep)

    def com_cep(self, cep: str) -> "EnderecoEntity":
        """Retorna cópia com o CEP substituído."""
        return replace(self, cep=cep)

    @property
    def esta_resolvido(self) -> bool:
        """True se possui dados além do CEP."""
        return bool(self.logradouro or self.localidade or self.uf)


@dataclass
class ClienteEntity:
    """
    Entidade de Domínio: Cliente.

    Invariantes (após persistência):
    - id é inteiro positivo atribuído pelo repositório
    - endereco não é nulo e seu CEP existe no repositório de endereços

    Attributes:
        id: Identificador (None antes da primeira gravação)
        nome: Nome do cliente
        endereco: Endereço associado

    Example:
        cliente = ClienteEntity.criar(nome="Ana", cep="01001-000")
        salvo = service.inserir(cliente)
        print(salvo.id, salvo.endereco.logradouro)
    """

    nome: str = ""
    endereco: Optional[EnderecoEntity] = None
    id: Optional[int] = field(default=None)

    NOME_MAX_LENGTH = 255

    @classmethod
    def criar(
        cls,
        nome: str,
        cep: Optional[str] = None,
        cliente_id: Optional[int] = None,
    ) -> "ClienteEntity":
        """
        Factory method para criar cliente com validações.

        Args:
            nome: Nome do cliente
            cep: CEP do endereço (resolvido depois pelo service)
            cliente_id: ID opcional (payloads de atualização)

        Raises:
            ValidationError: Se nome inválido
        """
        cls._validar_nome(nome)

        endereco = EnderecoEntity.apenas_cep(cep) if cep is not None else None
        return cls(nome=nome.strip(), endereco=endereco, id=cliente_id)

    @classmethod
    def _validar_nome(cls, nome: str) -> None:
        if not nome or not isinstance(nome, str) or not nome.strip():
            raise ValidationError("Nome do cliente é obrigatório", field="nome")

        if len(nome.strip()) > cls.NOME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve ter no máximo {cls.NOME_MAX_LENGTH} caracteres",
                field="nome",
            )

    @property
    def cep(self) -> Optional[str]:
        """CEP do endereço associado (None se sem endereço)."""
        if self.endereco is None:
            return None
        return self.endereco.cep

    def definir_endereco(self, endereco: EnderecoEntity) -> None:
        """Associa endereço resolvido ao cliente."""
        self.endereco = endereco

    def __eq__(self, other: object) -> bool:
        """Clientes persistidos são iguais se têm o mesmo ID."""
        if not isinstance(other, ClienteEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
