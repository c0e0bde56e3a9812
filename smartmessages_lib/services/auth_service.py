"""
Servico de autenticacao na API Smartmessages.
"""

from .. import operations as ops
from ..config import BASE_URL
from ..core import SmartmessagesHttpClient
from ..exceptions import AuthError, ServiceError
from ..models import SessionState
from ..utils import get_logger
from ..validators import absolute_url


class AuthService:
    """Servico de login, logout e manutencao da sessao."""

    def __init__(self, http_client: SmartmessagesHttpClient):
        self.client = http_client
        self.session_manager = http_client.session_manager
        self.logger = get_logger()

    @property
    def state(self) -> SessionState:
        return self.session_manager.state

    def login(self, user: str, password: str, api_key: str, base_url: str = BASE_URL) -> bool:
        """Abre uma sessao; o servidor pode indicar outro endpoint."""
        base_url = absolute_url(base_url, "base_url")
        bound = ops.LOGIN.bind({
            "username": user,
            "password": password,
            "apikey": api_key,
            "outputformat": self.client.output_format,
        })

        self.logger.info(f"Iniciando login: {user}...")
        self.session_manager.set_endpoint(base_url)
        try:
            envelope = self.client.request(bound.verb, bound.command, bound.params)
        except ServiceError as e:
            self.logger.error(f"Erro no login: {e}")
            raise

        if not envelope.ok:
            self.logger.error(f"Login recusado: {envelope.msg}")
            # errorcode 1 = credenciais invalidas
            if envelope.errorcode == 1:
                raise envelope.error(AuthError)
            raise envelope.error(ServiceError)

        self.session_manager.start_session(envelope, base_url)
        self.logger.success(f"Login realizado: {self.state.account_name or user}")
        self.logger.debug(f"Endpoint: {self.state.endpoint}, expira em {self.state.expires}")
        return True

    def logout(self):
        """Encerra a sessao. O estado local e limpo mesmo se a chamada falhar."""
        try:
            self.client.call(ops.LOGOUT)
        finally:
            self.session_manager.clear_session()
            self.logger.info("Sessao encerrada")

    def ping(self) -> bool:
        """Mantem a sessao aberta e estende a expiracao."""
        return self.client.call(ops.PING)
