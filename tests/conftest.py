"""
Configurações globais do Pytest para o Cadastro de Clientes.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.

Django é configurado via pytest-django (DJANGO_SETTINGS_MODULE
em pyproject.toml).
"""

import pytest

from src.core.clientes.entities import EnderecoEntity
from src.core.shared.exceptions import ConsultaCepError


class FakeConsultaCep:
    """
    Fake do serviço de CEP.

    Responde a partir de um dicionário CEP → endereço e registra
    cada chamada, para verificar quando o cache foi (ou não) usado.
    """

    def __init__(self, enderecos=None, erro: Exception = None):
        self.enderecos = dict(enderecos or {})
        self.erro = erro
        self.chamadas = []

    def consultar_cep(self, cep: str) -> EnderecoEntity:
        self.chamadas.append(cep)

        if self.erro is not None:
            raise self.erro

        if cep not in self.enderecos:
            raise ConsultaCepError(f"CEP não configurado no fake: {cep}", cep=cep)

        return self.enderecos[cep]


@pytest.fixture
def endereco_se():
    """Endereço da Praça da Sé (CEP 01001-000)."""
    return EnderecoEntity(
        cep="01001-000",
        logradouro="Praça da Sé",
        complemento="lado ímpar",
        bairro="Sé",
        localidade="São Paulo",
        uf="SP",
        ibge="3550308",
        gia="1004",
        ddd="11",
        siafi="7107",
    )


@pytest.fixture
def endereco_rio():
    """Endereço no centro do Rio (CEP 20040-020)."""
    return EnderecoEntity(
        cep="20040-020",
        logradouro="Praça Pio X",
        bairro="Centro",
        localidade="Rio de Janeiro",
        uf="RJ",
        ibge="3304557",
        ddd="21",
        siafi="6001",
    )


@pytest.fixture
def fake_viacep(endereco_se, endereco_rio):
    """Fake do ViaCEP conhecendo dois CEPs."""
    return FakeConsultaCep({
        endereco_se.cep: endereco_se,
        endereco_rio.cep: endereco_rio,
    })


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com um container DI limpo.
    """
    yield
    from src.config.container import reset_container
    reset_container()


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests that reach external services (ViaCEP)"
    )


def pytest_collection_modifyitems(config, items):
    """Modifica coleção de testes."""
    # Testes de integração acessam a rede: só rodam com --run-integration
    skip_integration = pytest.mark.skip(reason="Integration tests require network access")

    for item in items:
        if "integration" in item.keywords:
            if not config.getoption("--run-integration", default=False):
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
