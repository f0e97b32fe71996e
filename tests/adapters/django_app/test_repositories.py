"""
Testes de Integração para os Adapters Django.

Testa a integração entre:
- Django Models ↔ Core Entities (via Mappers)
- Repository ↔ Database (SQLite de teste do pytest-django)
- Unit of Work ↔ Transactions
- ClienteService ↔ Repositórios Django
- Preenchimento concorrente do cache com transações reais

Fixtures:
- endereco_model: Endereço já cacheado no banco
"""

import threading
import time

import pytest
from django.db import connection

from src.adapters.django_app.clientes.mappers import ClienteMapper, EnderecoMapper
from src.adapters.django_app.clientes.models import ClienteModel, EnderecoModel
from src.adapters.django_app.clientes.repositories import (
    DjangoClienteRepository,
    DjangoEnderecoRepository,
)
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.core.clientes.entities import ClienteEntity, EnderecoEntity
from src.core.clientes.use_cases import ClienteService
from src.core.shared.exceptions import ConsultaCepError
from src.core.shared.locks import KeyedLock


pytestmark = pytest.mark.django_db


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def endereco_model(endereco_se):
    """Endereço da Praça da Sé gravado no banco."""
    return EnderecoModel.objects.create(
        cep=endereco_se.cep, **EnderecoMapper.to_fields(endereco_se)
    )


@pytest.fixture
def cliente_repo():
    return DjangoClienteRepository()


@pytest.fixture
def endereco_repo():
    return DjangoEnderecoRepository()


# =============================================================================
# Mapper Tests
# =============================================================================

class TestMappers:
    """Testes para conversões Entity ↔ Model."""

    def test_endereco_ida_e_volta(self, endereco_se):
        model = EnderecoMapper.to_model(endereco_se)

        assert model.cep == "01001-000"
        assert EnderecoMapper.to_entity(model) == endereco_se

    def test_cliente_to_model(self, endereco_se):
        entity = ClienteEntity(id=3, nome="Ana", endereco=endereco_se)

        model = ClienteMapper.to_model(entity)

        assert model.id == 3
        assert model.nome == "Ana"
        assert model.endereco_id == "01001-000"

    def test_cliente_to_entity(self, endereco_model):
        model = ClienteModel.objects.create(nome="Ana", endereco=endereco_model)

        entity = ClienteMapper.to_entity(model)

        assert entity.id == model.id
        assert entity.endereco.logradouro == "Praça da Sé"


# =============================================================================
# Repository Tests
# =============================================================================

class TestDjangoEnderecoRepository:
    """Testes para o cache de endereços no banco."""

    def test_get_by_cep_ausente(self, endereco_repo):
        assert endereco_repo.get_by_cep("01001-000") is None
        assert endereco_repo.exists("01001-000") is False

    def test_save_e_get(self, endereco_repo, endereco_se):
        salvo = endereco_repo.save(endereco_se)

        assert salvo == endereco_se
        assert endereco_repo.get_by_cep("01001-000") == endereco_se
        assert endereco_repo.count() == 1

    def test_save_nao_sobrescreve(self, endereco_repo, endereco_se):
        """Segundo save para o mesmo CEP retorna o registro original."""
        endereco_repo.save(endereco_se)

        resultado = endereco_repo.save(EnderecoEntity(cep="01001-000", logradouro="Outra rua"))

        assert resultado.logradouro == "Praça da Sé"
        assert EnderecoModel.objects.get(cep="01001-000").logradouro == "Praça da Sé"
        assert endereco_repo.count() == 1


class TestDjangoClienteRepository:
    """Testes para persistência de clientes."""

    def test_save_atribui_id(self, cliente_repo, endereco_model, endereco_se):
        cliente = ClienteEntity(nome="Ana", endereco=endereco_se)

        salvo = cliente_repo.save(cliente)

        assert salvo.id is not None
        assert ClienteModel.objects.filter(id=salvo.id).exists()

    def test_save_com_id_substitui(self, cliente_repo, endereco_model, endereco_se, endereco_rio):
        EnderecoModel.objects.create(cep=endereco_rio.cep, **EnderecoMapper.to_fields(endereco_rio))
        cliente = cliente_repo.save(ClienteEntity(nome="Ana", endereco=endereco_se))

        cliente_repo.save(ClienteEntity(id=cliente.id, nome="Ana Souza", endereco=endereco_rio))

        lido = cliente_repo.get_by_id(cliente.id)
        assert lido.nome == "Ana Souza"
        assert lido.endereco.uf == "RJ"
        assert cliente_repo.count() == 1

    def test_get_by_id_inexistente(self, cliente_repo):
        assert cliente_repo.get_by_id(999) is None

    def test_get_by_id_carrega_endereco(self, cliente_repo, endereco_model, endereco_se, django_assert_num_queries):
        cliente = cliente_repo.save(ClienteEntity(nome="Ana", endereco=endereco_se))

        with django_assert_num_queries(1):
            lido = cliente_repo.get_by_id(cliente.id)
            assert lido.endereco == endereco_se

    def test_list_all_ordenado(self, cliente_repo, endereco_model, endereco_se):
        for nome in ["Carla", "Ana", "Bruno"]:
            cliente_repo.save(ClienteEntity(nome=nome, endereco=endereco_se))

        clientes = cliente_repo.list_all()

        assert [c.nome for c in clientes] == ["Carla", "Ana", "Bruno"]
        assert [c.id for c in clientes] == sorted(c.id for c in clientes)

    def test_delete_idempotente(self, cliente_repo, endereco_model, endereco_se):
        cliente = cliente_repo.save(ClienteEntity(nome="Ana", endereco=endereco_se))

        cliente_repo.delete(cliente.id)
        cliente_repo.delete(cliente.id)

        assert cliente_repo.exists(cliente.id) is False
        # Endereço permanece no cache
        assert EnderecoModel.objects.filter(cep="01001-000").exists()


# =============================================================================
# Unit of Work Tests
# =============================================================================

class TestDjangoUnitOfWork:
    """Testes para transações Django."""

    def test_commit(self, endereco_se):
        uow = DjangoUnitOfWork()

        with uow:
            EnderecoModel.objects.create(cep=endereco_se.cep)

        assert uow.is_committed is True
        assert EnderecoModel.objects.filter(cep=endereco_se.cep).exists()

    def test_rollback_em_excecao(self, endereco_se):
        uow = DjangoUnitOfWork()

        with pytest.raises(RuntimeError):
            with uow:
                EnderecoModel.objects.create(cep=endereco_se.cep)
                raise RuntimeError("falha no meio da operação")

        assert uow.is_rolled_back is True
        assert not EnderecoModel.objects.filter(cep=endereco_se.cep).exists()

    def test_reutilizavel(self):
        uow = DjangoUnitOfWork()

        with uow:
            EnderecoModel.objects.create(cep="01001-000")
        with pytest.raises(RuntimeError):
            with uow:
                EnderecoModel.objects.create(cep="20040-020")
                raise RuntimeError("falha")

        assert list(EnderecoModel.objects.values_list('cep', flat=True)) == ["01001-000"]


# =============================================================================
# Service + Django Tests
# =============================================================================

class TestClienteServiceDjango:
    """ClienteService sobre os repositórios Django."""

    @pytest.fixture
    def service(self, cliente_repo, endereco_repo, fake_viacep):
        return ClienteService(cliente_repo, endereco_repo, fake_viacep, uow=DjangoUnitOfWork())

    def test_inserir_grava_endereco_e_cliente(self, service, fake_viacep):
        cliente = service.inserir(ClienteEntity.criar(nome="Ana", cep="01001000"))

        model = ClienteModel.objects.select_related('endereco').get(id=cliente.id)
        assert model.nome == "Ana"
        assert model.endereco.cep == "01001-000"
        assert model.endereco.logradouro == "Praça da Sé"
        assert fake_viacep.chamadas == ["01001-000"]

    def test_segundo_cliente_usa_cache_do_banco(self, service, fake_viacep):
        service.inserir(ClienteEntity.criar(nome="Ana", cep="01001-000"))
        service.inserir(ClienteEntity.criar(nome="Carla", cep="01001-000"))

        assert fake_viacep.chamadas == ["01001-000"]
        assert EnderecoModel.objects.count() == 1
        assert ClienteModel.objects.count() == 2

    def test_falha_consulta_nada_gravado(self, service, fake_viacep):
        fake_viacep.erro = ConsultaCepError("ViaCEP indisponível", cep="01001-000")

        with pytest.raises(ConsultaCepError):
            service.inserir(ClienteEntity.criar(nome="Ana", cep="01001-000"))

        assert ClienteModel.objects.count() == 0
        assert EnderecoModel.objects.count() == 0

    def test_cache_preenchido_antes_nao_consulta(self, service, fake_viacep, endereco_model):
        cliente = service.inserir(ClienteEntity.criar(nome="Ana", cep="01001-000"))

        assert fake_viacep.chamadas == []
        assert cliente.endereco == EnderecoMapper.to_entity(endereco_model)

    def test_atualizar_troca_endereco(self, service):
        cliente = service.inserir(ClienteEntity.criar(nome="Ana", cep="01001-000"))

        service.atualizar(cliente.id, ClienteEntity.criar(nome="Ana", cep="20040-020"))

        assert ClienteModel.objects.get(id=cliente.id).endereco_id == "20040-020"
        assert EnderecoModel.objects.count() == 2

    def test_falha_ao_gravar_cliente_mantem_endereco_cacheado(self, endereco_repo, fake_viacep):
        """O endereço tem transação própria; só o cliente é desfeito."""
        class FalhaClienteRepository(DjangoClienteRepository):
            def save(self, cliente):
                super().save(cliente)
                raise RuntimeError("falha depois do INSERT")

        service = ClienteService(
            FalhaClienteRepository(), endereco_repo, fake_viacep, uow=DjangoUnitOfWork()
        )

        with pytest.raises(RuntimeError):
            service.inserir(ClienteEntity.criar(nome="Ana", cep="01001-000"))

        assert ClienteModel.objects.count() == 0
        assert EnderecoModel.objects.filter(cep="01001-000").exists()


# =============================================================================
# Concorrência com transações reais
# =============================================================================

class LentoConsultaCep:
    """Fake do ViaCEP que demora a responder e conta as consultas."""

    def __init__(self, endereco, atraso):
        self.endereco = endereco
        self.atraso = atraso
        self.chamadas = []

    def consultar_cep(self, cep):
        self.chamadas.append(cep)
        time.sleep(self.atraso)
        return self.endereco


class AtrasadoClienteRepository(DjangoClienteRepository):
    """Repositório que segura a gravação do cliente por alguns instantes."""

    def __init__(self, atraso):
        super().__init__()
        self.atraso = atraso

    def save(self, cliente):
        time.sleep(self.atraso)
        return super().save(cliente)


@pytest.mark.slow
@pytest.mark.django_db(transaction=True)
class TestConcorrenciaDjango:
    """Dois requests com o mesmo CEP novo, cada um com sua transação."""

    def test_segundo_request_encontra_endereco_confirmado(self, endereco_se):
        consulta = LentoConsultaCep(endereco_se, atraso=0.3)
        locks = KeyedLock()
        erros = []

        def cadastrar(nome, cliente_repo, espera):
            time.sleep(espera)
            service = ClienteService(
                cliente_repo,
                DjangoEnderecoRepository(),
                consulta,
                uow=DjangoUnitOfWork(),
                cep_locks=locks,
            )
            try:
                service.inserir(ClienteEntity.criar(nome=nome, cep="01001-000"))
            except Exception as e:
                erros.append(e)
            finally:
                connection.close()

        # O primeiro consulta o ViaCEP e demora a gravar o cliente;
        # o segundo chega durante a consulta e espera o lock do CEP
        threads = [
            threading.Thread(target=cadastrar, args=("Ana", AtrasadoClienteRepository(0.5), 0)),
            threading.Thread(target=cadastrar, args=("Carla", DjangoClienteRepository(), 0.1)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert erros == []
        assert consulta.chamadas == ["01001-000"]
        assert EnderecoModel.objects.count() == 1
        assert sorted(ClienteModel.objects.values_list('nome', flat=True)) == ["Ana", "Carla"]
