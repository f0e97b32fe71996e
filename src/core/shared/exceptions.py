"""
Exceções de Domínio do Cadastro de Clientes.

Permitem comunicar erros de forma tipada entre o Core e os Adapters,
que decidem como traduzi-los (ex: status HTTP).

Hierarquia:
    DomainException (base)
    ├── ValidationError (entrada inválida)
    ├── EntityNotFoundError (entidade não existe)
    └── ConsultaCepError (falha no serviço de CEP)
        └── CepNaoEncontradoError (CEP inexistente)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            service.inserir(cliente)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada antes de qualquer acesso a repositório ou serviço externo.

    Example:
        if not cep:
            raise ValidationError("CEP inválido: ''", field="cep")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Example:
        cliente = repo.get_by_id(cliente_id)
        if cliente is None:
            raise EntityNotFoundError(f"Cliente não encontrado para o ID: {cliente_id}")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class ConsultaCepError(DomainException):
    """
    Falha ao consultar o serviço externo de CEP.

    Lançada pelo adapter de consulta (ViaCEP) quando o serviço está
    indisponível, estoura o timeout ou devolve resposta inutilizável.
    O Core propaga sem tratamento.
    """

    def __init__(self, message: str, cep: str = None, code: str = "CEP_LOOKUP_FAILED"):
        self.cep = cep
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.cep:
            result["cep"] = self.cep
        return result


class CepNaoEncontradoError(ConsultaCepError):
    """O serviço de CEP respondeu, mas o CEP não existe."""

    def __init__(self, message: str, cep: str = None):
        super().__init__(message, cep=cep, code="CEP_NOT_FOUND")
