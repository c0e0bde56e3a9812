"""
Servico de configuracoes da conta.
"""

from .. import operations as ops
from ..core import SmartmessagesHttpClient
from ..utils import get_logger
from ..validators import is_valid_email


class AccountService:
    """URL de callback e validacao de enderecos."""

    def __init__(self, http_client: SmartmessagesHttpClient):
        self.client = http_client
        self.logger = get_logger()

    def get_callback_url(self) -> str:
        return self.client.call(ops.GET_CALLBACK_URL)

    def set_callback_url(self, url: str) -> bool:
        result = self.client.call(ops.SET_CALLBACK_URL, url=url)
        self.logger.info(f"Callback definido: {url}")
        return result

    def validate_address(self, address: str, remote: bool = False) -> bool:
        """Valida localmente (sem rede) ou pelas regras do servidor."""
        if not remote:
            return is_valid_email(address or "")
        return self.client.call(ops.VALIDATE_ADDRESS, address=address)
