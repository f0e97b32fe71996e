#!/usr/bin/env python
"""
Setup rápido do Cadastro de Clientes para desenvolvimento local.

Passos:
1. Aponta o Django para src.config.settings
2. Confere a conexão com o banco (SQLite por padrão)
3. Aplica as migrations
4. Opcionalmente cadastra clientes de exemplo (consulta o ViaCEP)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --check-only
"""

import argparse
import os
import sys

# Raiz do repositório no path (imports "src.")
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_CLIENTES = [
    ('Ana Souza', '01001-000'),
    ('Bruno Lima', '20040-020'),
    ('Carla Dias', '01001000'),  # CEP da Ana sem hífen: vem do cache
    ('Diego Alves', '30130-010'),
]

LINHA = "=" * 60


def setup_django():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    import django
    django.setup()


def check_connection() -> bool:
    """Executa SELECT 1 no banco default."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False

    print(f"✅ Conexão OK ({connection.vendor})")
    return True


def run_migrations():
    from django.core.management import call_command

    print("📦 Aplicando migrations...")
    call_command('migrate', verbosity=1)


def create_sample_data():
    """
    Cadastra SAMPLE_CLIENTES pelo ClienteService.

    Falhas de CEP (ViaCEP fora do ar, CEP inexistente) são
    reportadas e o cliente é pulado.
    """
    from src.config.container import get_container
    from src.core.clientes.entities import ClienteEntity
    from src.core.shared.exceptions import DomainException

    service = get_container().cliente_service()

    print("📝 Cadastrando clientes de exemplo...")
    criados = 0
    for nome, cep in SAMPLE_CLIENTES:
        try:
            cliente = service.inserir(ClienteEntity.criar(nome=nome, cep=cep))
        except DomainException as e:
            print(f"   ✗ {nome} ({cep}): {e}")
            continue

        criados += 1
        endereco = cliente.endereco
        print(f"   ✓ [{cliente.id}] {cliente.nome}: {endereco.logradouro}, {endereco.localidade}/{endereco.uf}")

    print(f"✅ {criados}/{len(SAMPLE_CLIENTES)} clientes cadastrados")


def show_info():
    from django.conf import settings

    db = settings.DATABASES['default']

    print("\n" + LINHA)
    print("📊 Configuração")
    print(LINHA)
    print(f"  Banco: {db['ENGINE']} ({db['NAME']})")
    print(f"  ViaCEP: {settings.VIACEP_BASE_URL} (timeout {settings.VIACEP_TIMEOUT}s)")
    print(f"  DEBUG: {settings.DEBUG}")
    print(LINHA)
    print("\n🚀 Próximos passos:")
    print("   python manage.py runserver")
    print("   curl http://localhost:8000/clientes/")
    print("   http://localhost:8000/admin/\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido do Cadastro de Clientes')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Cadastrar clientes de exemplo (requer acesso ao ViaCEP)'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar a conexão com o banco'
    )
    args = parser.parse_args()

    print("\n" + LINHA)
    print("🔧 Cadastro de Clientes - Quick Setup")
    print(LINHA + "\n")

    setup_django()

    if not check_connection():
        print("\n⚠️  Banco inacessível. Sem DATABASE_URL/DATABASE_HOST o SQLite local é usado.")
        sys.exit(1)

    if args.check_only:
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
