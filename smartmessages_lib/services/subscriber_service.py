"""
Servico de assinantes.
"""

from typing import Any, Dict

from .. import operations as ops
from ..core import SmartmessagesHttpClient
from ..utils import get_logger


class SubscriberService:
    """Inscricoes, dados de destinatarios e denuncias de spam."""

    def __init__(self, http_client: SmartmessagesHttpClient):
        self.client = http_client
        self.logger = get_logger()

    def subscribe(
        self, address: str, list_id: int,
        dear: str = "", first_name: str = "", last_name: str = ""
    ) -> bool:
        """Inscreve um endereco. 'dear' e a saudacao preferida ('Mrs Smith')."""
        result = self.client.call(
            ops.SUBSCRIBE, address=address, list_id=list_id,
            dear=dear, first_name=first_name, last_name=last_name,
        )
        self.logger.info(f"Inscrito: {address.strip()} -> lista {list_id}")
        return result

    def unsubscribe(self, address: str, list_id: int) -> bool:
        result = self.client.call(ops.UNSUBSCRIBE, address=address, list_id=list_id)
        self.logger.info(f"Descadastrado: {address.strip()} <- lista {list_id}")
        return result

    def add_subscription(self, address: str, list_id: int, note: str = "") -> bool:
        """Adiciona a lista sem notificacoes nem verificacao."""
        return self.client.call(ops.ADD_SUBSCRIPTION, address=address, list_id=list_id, note=note)

    def delete_subscription(self, address: str, list_id: int) -> bool:
        """Remove da lista sem notificacoes nem supressao."""
        return self.client.call(ops.DELETE_SUBSCRIPTION, address=address, list_id=list_id)

    def get_user_info(self, address: str) -> Dict[str, Any]:
        return self.client.call(ops.GET_USER_INFO, address=address)

    def set_user_info(self, address: str, user_info: Dict[str, Any]) -> bool:
        return self.client.call(ops.SET_USER_INFO, address=address, user_info=user_info)

    def get_spam_reporters(self) -> Any:
        """Denuncias de spam (apenas alguns provedores as repassam)."""
        return self.client.call(ops.GET_SPAM_REPORTERS)
