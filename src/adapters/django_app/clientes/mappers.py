"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- EnderecoEntity ↔ EnderecoModel
- ClienteEntity ↔ ClienteModel

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import Iterable, List

from src.core.clientes.entities import ClienteEntity, EnderecoEntity

from .models import ClienteModel, EnderecoModel


class EnderecoMapper:
    """Mapper entre EnderecoEntity e EnderecoModel."""

    @staticmethod
    def to_model(entity: EnderecoEntity) -> EnderecoModel:
        """
        Converte EnderecoEntity para EnderecoModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return EnderecoModel(cep=entity.cep, **EnderecoMapper.to_fields(entity))

    @staticmethod
    def to_fields(entity: EnderecoEntity) -> dict:
        """Campos persistidos (exceto a chave)."""
        return {
            'logradouro': entity.logradouro,
            'complemento': entity.complemento,
            'bairro': entity.bairro,
            'localidade': entity.localidade,
            'uf': entity.uf,
            'ibge': entity.ibge,
            'gia': entity.gia,
            'ddd': entity.ddd,
            'siafi': entity.siafi,
        }

    @staticmethod
    def to_entity(model: EnderecoModel) -> EnderecoEntity:
        """Converte EnderecoModel para EnderecoEntity."""
        return EnderecoEntity(
            cep=model.cep,
            logradouro=model.logradouro,
            complemento=model.complemento,
            bairro=model.bairro,
            localidade=model.localidade,
            uf=model.uf,
            ibge=model.ibge,
            gia=model.gia,
            ddd=model.ddd,
            siafi=model.siafi,
        )


class ClienteMapper:
    """
    Mapper para conversão entre ClienteEntity e ClienteModel.

    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_model(entity: ClienteEntity) -> ClienteModel:
        """
        Converte ClienteEntity para ClienteModel.

        O endereço é referenciado apenas pela chave (CEP).
        """
        return ClienteModel(
            id=entity.id,
            nome=entity.nome,
            endereco_id=entity.cep,
        )

    @staticmethod
    def to_entity(model: ClienteModel) -> ClienteEntity:
        """
        Converte ClienteModel para ClienteEntity.

        Note:
            Bypassa validações do factory method .criar()
            pois dados já foram validados na gravação
        """
        return ClienteEntity(
            id=model.id,
            nome=model.nome,
            endereco=EnderecoMapper.to_entity(model.endereco),
        )

    @staticmethod
    def to_entity_list(models: Iterable[ClienteModel]) -> List[ClienteEntity]:
        """Converte lista de Models para lista de Entities."""
        return [ClienteMapper.to_entity(model) for model in models]
