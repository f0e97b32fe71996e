"""
Django App de Clientes.

Adapters de persistência (models, repositórios, mappers) e de entrada
(API JSON) para o domínio de clientes.
"""
