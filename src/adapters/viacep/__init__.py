"""
Adapter do serviço ViaCEP.

Implementa o port ConsultaCepGateway do domínio de clientes.
"""

from .client import ViaCepClient

__all__ = ["ViaCepClient"]
