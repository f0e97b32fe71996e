"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção explícita
(nenhum registro global implícito dentro do Core).

Padrões:
- Singleton: Uma instância para toda app (repositories, ViaCEP, locks)
- Factory: Nova instância por chamada (services, UoW)
"""

from dependency_injector import containers, providers
from typing import Optional


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Valores vindos do Django settings
    - Infrastructure: Cliente ViaCEP, locks por CEP
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        service = get_container().cliente_service()
        cliente = service.buscar_por_id(1)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure (Lazy - criado sob demanda)
    # =========================================================================

    consulta_cep = providers.Singleton(
        lambda base_url, timeout: __import__(
            'src.adapters.viacep',
            fromlist=['ViaCepClient']
        ).ViaCepClient(base_url=base_url, timeout=timeout),
        base_url=config.viacep.base_url,
        timeout=config.viacep.timeout,
    )

    # Compartilhado entre todas as instâncias de ClienteService
    cep_locks = providers.Singleton(
        lambda: __import__(
            'src.core.shared.locks',
            fromlist=['KeyedLock']
        ).KeyedLock()
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    cliente_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.clientes.repositories',
            fromlist=['DjangoClienteRepository']
        ).DjangoClienteRepository()
    )

    endereco_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.clientes.repositories',
            fromlist=['DjangoEnderecoRepository']
        ).DjangoEnderecoRepository()
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['DjangoUnitOfWork']
        ).DjangoUnitOfWork()
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    cliente_service = providers.Factory(
        lambda cliente_repo, endereco_repo, consulta_cep, uow, cep_locks: __import__(
            'src.core.clientes.use_cases',
            fromlist=['ClienteService']
        ).ClienteService(
            cliente_repo=cliente_repo,
            endereco_repo=endereco_repo,
            consulta_cep=consulta_cep,
            uow=uow,
            cep_locks=cep_locks,
        ),
        cliente_repo=cliente_repository,
        endereco_repo=endereco_repository,
        consulta_cep=consulta_cep,
        uow=unit_of_work,
        cep_locks=cep_locks,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), lendo a configuração
    do ViaCEP do Django settings.
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            'viacep': {
                'base_url': getattr(settings, 'VIACEP_BASE_URL', 'https://viacep.com.br/ws'),
                'timeout': getattr(settings, 'VIACEP_TIMEOUT', 5.0),
            },
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes com implementações em memória.

    O serviço de CEP não tem implementação em memória:
    deve ser sobrescrito pelo teste.

    Example:
        container = TestingContainer()
        container.consulta_cep.override(providers.Object(fake_viacep))
        service = container.cliente_service()
    """

    consulta_cep = providers.Dependency()

    cep_locks = providers.Singleton(
        lambda: __import__(
            'src.core.shared.locks',
            fromlist=['KeyedLock']
        ).KeyedLock()
    )

    cliente_repository = providers.Singleton(
        lambda: __import__(
            'src.core.clientes.ports',
            fromlist=['InMemoryClienteRepository']
        ).InMemoryClienteRepository()
    )

    endereco_repository = providers.Singleton(
        lambda: __import__(
            'src.core.clientes.ports',
            fromlist=['InMemoryEnderecoRepository']
        ).InMemoryEnderecoRepository()
    )

    unit_of_work = providers.Factory(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['InMemoryUnitOfWork']
        ).InMemoryUnitOfWork()
    )

    cliente_service = providers.Factory(
        lambda cliente_repo, endereco_repo, consulta_cep, uow, cep_locks: __import__(
            'src.core.clientes.use_cases',
            fromlist=['ClienteService']
        ).ClienteService(
            cliente_repo=cliente_repo,
            endereco_repo=endereco_repo,
            consulta_cep=consulta_cep,
            uow=uow,
            cep_locks=cep_locks,
        ),
        cliente_repo=cliente_repository,
        endereco_repo=endereco_repository,
        consulta_cep=consulta_cep,
        uow=unit_of_work,
        cep_locks=cep_locks,
    )
