"""
Cliente HTTP do ViaCEP (https://viacep.com.br).

DRIVEN ADAPTER - acionado pelo ClienteService quando um CEP
não está no cache de endereços.

Responsabilidades:
- Montar a URL ``{base_url}/{cep}/json/``
- Aplicar timeout (uma chamada nunca bloqueia indefinidamente)
- Converter a resposta JSON em EnderecoEntity
- Traduzir falhas de rede/HTTP em ConsultaCepError

Sem retry nem fallback: a falha é propagada para o chamador.
"""

from typing import Any, Dict, Optional
import logging

import requests

from src.core.clientes.entities import EnderecoEntity, apenas_digitos
from src.core.shared.exceptions import CepNaoEncontradoError, ConsultaCepError

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://viacep.com.br/ws"
DEFAULT_TIMEOUT = 5.0

# Campos do ViaCEP copiados para o endereço
CAMPOS_ENDERECO = (
    "logradouro",
    "complemento",
    "bairro",
    "localidade",
    "uf",
    "ibge",
    "gia",
    "ddd",
    "siafi",
)


class ViaCepClient:
    """
    Implementação do ConsultaCepGateway usando requests.

    Attributes:
        base_url: URL base da API (sem barra final)
        timeout: Timeout em segundos (conexão e leitura)

    Example:
        client = ViaCepClient(timeout=3)
        endereco = client.consultar_cep("01001-000")
        print(endereco.logradouro)  # "Praça da Sé"
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        self._session = session or requests.Session()

    def build_url(self, cep: str) -> str:
        """Monta URL de consulta (CEP apenas com dígitos)."""
        return f"{self.base_url}/{apenas_digitos(cep)}/json/"

    def consultar_cep(self, cep: str) -> EnderecoEntity:
        """
        Consulta endereço pelo CEP.

        Args:
            cep: CEP normalizado (NNNNN-NNN)

        Returns:
            Endereço completo

        Raises:
            CepNaoEncontradoError: Se o ViaCEP responder {"erro": true}
            ConsultaCepError: Timeout, erro de rede, status != 200 ou JSON inválido
        """
        url = self.build_url(cep)
        logger.debug(f"Consultando ViaCEP: {url}")

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.Timeout as e:
            logger.error(f"Timeout ao consultar ViaCEP para {cep}: {e}")
            raise ConsultaCepError(
                f"Timeout ao consultar o CEP {cep}", cep=cep
            ) from e
        except requests.RequestException as e:
            logger.error(f"Erro de conexão com ViaCEP para {cep}: {e}")
            raise ConsultaCepError(
                f"Falha de rede ao consultar o CEP {cep}", cep=cep
            ) from e

        if response.status_code != 200:
            logger.warning(f"ViaCEP respondeu {response.status_code} para {cep}")
            raise ConsultaCepError(
                f"Erro {response.status_code} ao consultar o CEP {cep}", cep=cep
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ConsultaCepError(
                f"Resposta inválida do ViaCEP para o CEP {cep}", cep=cep
            ) from e

        if not isinstance(data, dict):
            raise ConsultaCepError(
                f"Resposta inválida do ViaCEP para o CEP {cep}", cep=cep
            )

        # O ViaCEP responde {"erro": true} ou {"erro": "true"}
        if str(data.get("erro", "")).lower() == "true":
            logger.info(f"CEP não encontrado no ViaCEP: {cep}")
            raise CepNaoEncontradoError(f"CEP não encontrado: {cep}", cep=cep)

        endereco = self._to_entity(cep, data)
        logger.info(f"CEP consultado no ViaCEP: {cep} ({endereco.localidade}/{endereco.uf})")
        return endereco

    @staticmethod
    def _to_entity(cep: str, data: Dict[str, Any]) -> EnderecoEntity:
        valores = {campo: str(data.get(campo) or "") for campo in CAMPOS_ENDERECO}
        return EnderecoEntity(cep=data.get("cep") or cep, **valores)

    def close(self) -> None:
        """Fecha a sessão HTTP."""
        self._session.close()
