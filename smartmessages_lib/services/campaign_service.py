"""
Servico de campanhas, mailshots e relatorios.
"""

from typing import Any, Dict, Union

from .. import operations as ops
from ..core import SmartmessagesHttpClient
from ..utils import get_logger


class CampaignService:
    """Pastas de campanha, envio de mailshots e relatorios."""

    def __init__(self, http_client: SmartmessagesHttpClient):
        self.client = http_client
        self.logger = get_logger()

    def get_campaigns(self) -> Any:
        campanhas = self.client.call(ops.GET_CAMPAIGNS)
        self.logger.info(f"Encontradas {len(campanhas or [])} campanhas")
        return campanhas

    def add_campaign(self, name: str) -> int:
        """Cria pasta de campanha (nomes nao precisam ser unicos)."""
        campaign_id = self.client.call(ops.ADD_CAMPAIGN, name=name)
        self.logger.info(f"Campanha criada: {name} (id {campaign_id})")
        return campaign_id

    def update_campaign(self, campaign_id: int, name: str) -> bool:
        return self.client.call(ops.UPDATE_CAMPAIGN, campaign_id=campaign_id, name=name)

    def delete_campaign(self, campaign_id: int) -> bool:
        """Remove a campanha e todos os seus mailshots."""
        return self.client.call(ops.DELETE_CAMPAIGN, campaign_id=campaign_id)

    def get_campaign_mailshots(self, campaign_id: int) -> Any:
        return self.client.call(ops.GET_CAMPAIGN_MAILSHOTS, campaign_id=campaign_id)

    def get_mailshot(self, mailshot_id: int) -> Dict[str, Any]:
        return self.client.call(ops.GET_MAILSHOT, mailshot_id=mailshot_id)

    # ==================== RELATORIOS ====================

    def get_mailshot_clicks(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self.client.call(ops.GET_MAILSHOT_CLICKS, mailshot_id=mailshot_id, as_csv=as_csv)

    def get_mailshot_opens(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self.client.call(ops.GET_MAILSHOT_OPENS, mailshot_id=mailshot_id, as_csv=as_csv)

    def get_mailshot_unsubs(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self.client.call(ops.GET_MAILSHOT_UNSUBS, mailshot_id=mailshot_id, as_csv=as_csv)

    def get_mailshot_bounces(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self.client.call(ops.GET_MAILSHOT_BOUNCES, mailshot_id=mailshot_id, as_csv=as_csv)

    # ==================== ENVIO ====================

    def send_mailshot(
        self,
        template_id: int,
        list_id: int,
        title: str = "",
        campaign_id: int = 0,
        subject: str = "",
        from_address: str = "",
        from_name: str = "",
        reply_to: str = "",
        when: str = "now",
        continuous: bool = False,
        inline: bool = False,
    ) -> int:
        """Cria e agenda um mailshot.

        when: 'now' (ou vazio) para envio imediato, ou data UTC ISO
        'yyyy-mm-dd hh:mm:ss'. continuous=True cria um mailshot que nunca
        termina e envia apenas para novas inscricoes.
        """
        mailshot_id = self.client.call(
            ops.SEND_MAILSHOT,
            template_id=template_id,
            list_id=list_id,
            title=title,
            campaign_id=campaign_id,
            subject=subject,
            from_address=from_address,
            from_name=from_name,
            reply_to=reply_to,
            when=when,
            continuous=continuous,
            inline=inline,
        )
        self.logger.success(f"Mailshot {mailshot_id} agendado ({when or 'now'})")
        return mailshot_id
