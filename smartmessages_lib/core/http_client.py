"""
Cliente HTTP base para comunicacao com a API Smartmessages.
"""

from contextlib import ExitStack
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import requests

from ..config import DEFAULT_HEADERS, DEFAULT_TIMEOUT
from ..exceptions import AuthError, ParameterError, ServiceConnectionError, ServiceError
from ..models import Envelope
from ..operations import Operation
from ..utils import get_logger, mask_params
from .codec import Decoder, JsonDecoder, decode_envelope
from .session_manager import SessionManager


def encode_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Converte params para o formato de query string do servidor.

    bool vira 1/0, None e omitido, listas sao unidas por virgula e
    dicionarios sao achatados como nome[chave]=valor.
    """
    encoded: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = int(value)
        elif isinstance(value, dict):
            for sub_key, sub_value in encode_params(value).items():
                encoded[f"{key}[{sub_key}]"] = sub_value
        elif isinstance(value, (list, tuple)):
            encoded[key] = ",".join(str(item) for item in value)
        else:
            encoded[key] = value
    return encoded


class SmartmessagesHttpClient:
    """Cliente HTTP configurado para a API Smartmessages.

    Mantem a sessao (chave de acesso, endpoint, expiracao) e executa a
    unica primitiva de requisicao usada por todas as operacoes.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        decoder: Optional[Decoder] = None,
        session_manager: Optional[SessionManager] = None,
    ):
        self.timeout = timeout
        self.decoder = decoder or JsonDecoder()
        self.session_manager = session_manager or SessionManager()
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.logger = get_logger()

    @property
    def output_format(self) -> str:
        return getattr(self.decoder, "output_format", "json")

    def build_url(self, command: str) -> str:
        return f"{self.session_manager.state.endpoint.rstrip('/')}/{command}"

    def request(
        self,
        verb: str,
        command: str,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Sequence[Union[str, Path]]] = None,
        raw: bool = False,
    ) -> Union[Envelope, str]:
        """Executa uma requisicao e devolve o Envelope (ou o corpo, se raw)."""
        params = dict(params or {})
        state = self.session_manager.state

        # Todos os comandos exceto login levam a chave de acesso
        if state.access_key:
            params["accesskey"] = state.access_key
        if command != "login" and self.session_manager.is_expired():
            raise AuthError("Session has expired; Please log in again.")
        if not state.endpoint:
            raise ServiceConnectionError("Missing Smartmessages API URL")

        url = self.build_url(command)
        wire_params = encode_params(params)
        self.logger.debug(f"{verb.upper()} {command}: {url}")
        self.logger.debug(f"Params: {mask_params(wire_params)}")

        if verb == "get":
            resp = self._send(verb, url, params=wire_params)
        else:
            resp = self._post_with_files(url, wire_params, files or [])

        body = resp.text
        if raw:
            self.logger.debug(f"Resposta bruta: {len(body)} caracteres")
            return body

        envelope = decode_envelope(body, self.decoder)
        self.session_manager.update_from_envelope(envelope)
        self.logger.debug(f"Resposta: {mask_params(envelope.data)}")
        return envelope

    def call(self, operation: Operation, **arguments) -> Any:
        """Valida, envia e extrai o resultado de uma operacao declarada."""
        try:
            bound = operation.bind(arguments)
        except ParameterError as e:
            self.logger.warning(f"Parametros invalidos em {operation.name}: {e}")
            raise

        try:
            result = self.request(bound.verb, bound.command, bound.params, bound.files, bound.raw)
        except ServiceError as e:
            self.logger.error(f"Erro em {operation.name}: {e}")
            raise
        if bound.raw:
            return result
        if not result.ok:
            self.logger.error(f"Erro em {operation.name}: {result.msg} (codigo {result.errorcode})")
            raise result.error()
        return operation.extract(result)

    def _post_with_files(self, url: str, data: Dict[str, Any], files: List[Union[str, Path]]) -> requests.Response:
        if files:
            self.logger.debug(f"Arquivos: {[str(f) for f in files]}")
        with ExitStack() as stack:
            parts = []
            for file in files:
                path = Path(file)
                handle = stack.enter_context(open(path, "rb"))
                parts.append((path.name, (path.name, handle, "application/octet-stream")))
            return self._send("post", url, data=data, files=parts or None)

    def _send(self, verb: str, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        try:
            resp = self.session.request(verb.upper(), url, **kwargs)
        except requests.RequestException as e:
            raise ServiceConnectionError(f"Falha de conexao com {url}: {e}") from e
        if resp.status_code >= 400:
            raise ServiceConnectionError(resp.reason or "HTTP error", resp.status_code)
        return resp

    def close(self):
        self.session.close()
