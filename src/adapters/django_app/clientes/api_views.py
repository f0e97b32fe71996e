"""
API Views JSON para o domínio de Clientes.

DRIVING ADAPTER - traduz HTTP em chamadas ao ClienteService.

Endpoints:
- GET /clientes/ - Listar clientes
- POST /clientes/ - Inserir cliente
- GET /clientes/<id>/ - Obter cliente
- PUT /clientes/<id>/ - Substituir cliente
- DELETE /clientes/<id>/ - Remover cliente

Formato:
- Entrada: JSON {"nome": "...", "endereco": {"cep": "01001-000"}}
- Saída: JSON com estrutura {success, data/error, meta}
- Erros: meta traz o DomainException.to_dict() (código, mensagem, campo/CEP)

Erros de domínio → status HTTP:
- ValidationError → 400
- EntityNotFoundError → 404
- CepNaoEncontradoError → 422
- ConsultaCepError → 502 (ViaCEP indisponível)
- Qualquer outro → 500
"""

import json
import logging
from typing import Any, Dict

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.clientes.dtos import ClienteInputDTO, ClienteOutputDTO
from src.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    CepNaoEncontradoError,
    ConsultaCepError,
    DomainException,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)


# Ordem importa: subclasses antes das bases
ERROR_STATUS = (
    (ValidationError, 400),
    (EntityNotFoundError, 404),
    (CepNaoEncontradoError, 422),
    (ConsultaCepError, 502),
    (DomainException, 400),
)


def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """Monta o envelope {success, data/error, meta}; chaves None são omitidas."""
    body = {'success': success}

    for key, value in (('data', data), ('error', error), ('meta', meta)):
        if value is not None:
            body[key] = value

    return JsonResponse(body, status=status)


def parse_json_body(request: HttpRequest) -> Any:
    """
    Decodifica o corpo JSON do request (corpo vazio → {}).

    Raises:
        ValidationError: Se o corpo não for JSON válido
    """
    if not request.body:
        return {}

    try:
        return json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON inválido: {e}")


@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Os handlers (get/post/put/delete) apenas chamam o service;
    qualquer exceção é convertida em resposta por handle_exception.
    """

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def get_service(self):
        """ClienteService novo a cada request (Factory no container)."""
        return get_container().cliente_service()

    def parse_body(self, request: HttpRequest) -> ClienteInputDTO:
        return ClienteInputDTO.from_dict(parse_json_body(request))

    def handle_exception(self, e: Exception) -> JsonResponse:
        for exc_type, status in ERROR_STATUS:
            if isinstance(e, exc_type):
                if status >= 500:
                    logger.warning(f"Falha na consulta de CEP: {e}")
                return json_response(
                    success=False,
                    error=str(e),
                    status=status,
                    meta=e.to_dict(),
                )

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )


class ClienteAPIListView(BaseAPIView):
    """
    GET /clientes/ - Lista clientes
    POST /clientes/ - Insere cliente
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        clientes = self.get_service().buscar_todos()

        return json_response(
            success=True,
            data=[ClienteOutputDTO.from_entity(c).to_dict() for c in clientes],
            meta={'total': len(clientes)}
        )

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "nome": "string (obrigatório)",
            "endereco": {"cep": "string (obrigatório)"}
        }
        """
        input_dto = self.parse_body(request)

        cliente = self.get_service().inserir(input_dto.to_entity())
        logger.info(f"API: Cliente criado: {cliente.id}")

        return json_response(
            success=True,
            data=ClienteOutputDTO.from_entity(cliente).to_dict(),
            status=201
        )


class ClienteAPIDetailView(BaseAPIView):
    """
    GET /clientes/<id>/ - Obter cliente
    PUT /clientes/<id>/ - Substituir cliente (um "id" no corpo é ignorado)
    DELETE /clientes/<id>/ - Remover cliente (sucesso mesmo se não existir)
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        cliente = self.get_service().buscar_por_id(pk)

        return json_response(
            success=True,
            data=ClienteOutputDTO.from_entity(cliente).to_dict()
        )

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        input_dto = self.parse_body(request)

        cliente = self.get_service().atualizar(pk, input_dto.to_entity())
        logger.info(f"API: Cliente {pk} atualizado")

        return json_response(
            success=True,
            data=ClienteOutputDTO.from_entity(cliente).to_dict()
        )

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        self.get_service().deletar(pk)
        logger.info(f"API: Cliente {pk} removido")

        return json_response(success=True)
