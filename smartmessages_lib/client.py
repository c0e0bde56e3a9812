"""
Cliente principal do Smartmessages - Interface unificada.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import DEFAULT_TIMEOUT, load_credentials
from .core import SessionManager, SmartmessagesHttpClient
from .core.codec import Decoder
from .exceptions import ParameterError, ServiceError
from .models import SessionState
from .services import (
    AccountService, AuthService, CampaignService,
    ListService, SubscriberService, TemplateService,
)
from .utils import get_logger


class SmartmessagesClient:
    """Cliente principal para a API Smartmessages.

    Uma instancia representa uma sessao; nao compartilhe entre threads
    sem serializar o acesso.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        log_dir: Optional[str] = None,
        debug: bool = False,
        decoder: Optional[Decoder] = None,
    ):
        self.logger = get_logger("smartmessages", Path(log_dir) if log_dir else None, debug)

        self._session = SessionManager()
        self._http = SmartmessagesHttpClient(timeout, decoder, self._session)

        self._auth = AuthService(self._http)
        self._lists = ListService(self._http)
        self._subscribers = SubscriberService(self._http)
        self._account = AccountService(self._http)
        self._campaigns = CampaignService(self._http)
        self._templates = TemplateService(self._http)

    def __enter__(self) -> "SmartmessagesClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ==================== SESSAO ====================

    @property
    def session(self) -> SessionState:
        return self._session.state

    @property
    def connected(self) -> bool:
        return self.session.connected

    @property
    def access_key(self) -> str:
        return self.session.access_key

    @property
    def endpoint(self) -> str:
        return self.session.endpoint

    @property
    def expires(self) -> int:
        return self.session.expires

    @property
    def account_name(self) -> str:
        return self.session.account_name

    @property
    def last_status(self) -> bool:
        return self.session.last_status

    @property
    def error_code(self) -> int:
        return self.session.error_code

    def login(
        self,
        user: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> bool:
        """Login; parametros omitidos sao lidos do ambiente (.env)."""
        credentials = load_credentials(user, password, api_key, base_url)
        if not credentials.completas:
            self.logger.error("Credenciais nao fornecidas")
            raise ParameterError("Missing credentials: user, password and API key are required")
        return self._auth.login(
            credentials.user, credentials.password, credentials.api_key, credentials.base_url
        )

    def logout(self):
        self._auth.logout()

    def ping(self) -> bool:
        return self._auth.ping()

    def close(self):
        """Faz logout se conectado e fecha a sessao HTTP."""
        if self.connected:
            try:
                self.logout()
            except ServiceError as e:
                self.logger.warning(f"Falha no logout ao fechar: {e}")
        self._http.close()

    # ==================== LISTAS ====================

    def get_lists(self, show_all: bool = False) -> Any:
        return self._lists.get_lists(show_all)

    def get_test_list(self) -> Dict[str, Any]:
        return self._lists.get_test_list()

    def get_list(self, list_id: int, as_csv: bool = True) -> Union[str, Any]:
        return self._lists.get_list(list_id, as_csv)

    def add_list(self, name: str, description: str = "", visible: bool = True) -> int:
        return self._lists.add_list(name, description, visible)

    def update_list(self, list_id: int, name: str, description: str, visible: bool) -> bool:
        return self._lists.update_list(list_id, name, description, visible)

    def delete_list(self, list_id: int) -> bool:
        return self._lists.delete_list(list_id)

    def get_list_unsubs(self, list_id: int) -> Any:
        return self._lists.get_list_unsubs(list_id)

    def upload_list(
        self, list_id: int, filename: Union[str, Path], source: str,
        definitive: bool = False, replace: bool = False, field_order_first_line: bool = False
    ) -> int:
        return self._lists.upload_list(
            list_id, filename, source, definitive, replace, field_order_first_line
        )

    def get_upload_info(self, list_id: int, upload_id: int) -> Dict[str, Any]:
        return self._lists.get_upload_info(list_id, upload_id)

    def get_uploads(self, list_id: int) -> Any:
        return self._lists.get_uploads(list_id)

    def cancel_upload(self, list_id: int, upload_id: int) -> bool:
        return self._lists.cancel_upload(list_id, upload_id)

    def get_field_order(self) -> List[str]:
        return self._lists.get_field_order()

    def set_field_order(self, fields: List[str]) -> List[str]:
        return self._lists.set_field_order(fields)

    # ==================== ASSINANTES ====================

    def subscribe(
        self, address: str, list_id: int,
        dear: str = "", first_name: str = "", last_name: str = ""
    ) -> bool:
        return self._subscribers.subscribe(address, list_id, dear, first_name, last_name)

    def unsubscribe(self, address: str, list_id: int) -> bool:
        return self._subscribers.unsubscribe(address, list_id)

    def add_subscription(self, address: str, list_id: int, note: str = "") -> bool:
        return self._subscribers.add_subscription(address, list_id, note)

    def delete_subscription(self, address: str, list_id: int) -> bool:
        return self._subscribers.delete_subscription(address, list_id)

    def get_user_info(self, address: str) -> Dict[str, Any]:
        return self._subscribers.get_user_info(address)

    def set_user_info(self, address: str, user_info: Dict[str, Any]) -> bool:
        return self._subscribers.set_user_info(address, user_info)

    def get_spam_reporters(self) -> Any:
        return self._subscribers.get_spam_reporters()

    # ==================== CONTA ====================

    def get_callback_url(self) -> str:
        return self._account.get_callback_url()

    def set_callback_url(self, url: str) -> bool:
        return self._account.set_callback_url(url)

    def validate_address(self, address: str, remote: bool = False) -> bool:
        return self._account.validate_address(address, remote)

    # ==================== CAMPANHAS ====================

    def get_campaigns(self) -> Any:
        return self._campaigns.get_campaigns()

    def add_campaign(self, name: str) -> int:
        return self._campaigns.add_campaign(name)

    def update_campaign(self, campaign_id: int, name: str) -> bool:
        return self._campaigns.update_campaign(campaign_id, name)

    def delete_campaign(self, campaign_id: int) -> bool:
        return self._campaigns.delete_campaign(campaign_id)

    def get_campaign_mailshots(self, campaign_id: int) -> Any:
        return self._campaigns.get_campaign_mailshots(campaign_id)

    def get_mailshot(self, mailshot_id: int) -> Dict[str, Any]:
        return self._campaigns.get_mailshot(mailshot_id)

    def get_mailshot_clicks(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self._campaigns.get_mailshot_clicks(mailshot_id, as_csv)

    def get_mailshot_opens(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self._campaigns.get_mailshot_opens(mailshot_id, as_csv)

    def get_mailshot_unsubs(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self._campaigns.get_mailshot_unsubs(mailshot_id, as_csv)

    def get_mailshot_bounces(self, mailshot_id: int, as_csv: bool = False) -> Union[str, Any]:
        return self._campaigns.get_mailshot_bounces(mailshot_id, as_csv)

    def send_mailshot(
        self, template_id: int, list_id: int, title: str = "", campaign_id: int = 0,
        subject: str = "", from_address: str = "", from_name: str = "", reply_to: str = "",
        when: str = "now", continuous: bool = False, inline: bool = False
    ) -> int:
        return self._campaigns.send_mailshot(
            template_id, list_id, title, campaign_id, subject,
            from_address, from_name, reply_to, when, continuous, inline
        )

    # ==================== TEMPLATES ====================

    def get_templates(self, include_global: bool = False, include_inherited: bool = True) -> Any:
        return self._templates.get_templates(include_global, include_inherited)

    def get_template(self, template_id: int) -> Dict[str, Any]:
        return self._templates.get_template(template_id)

    def add_template(
        self, name: str, html: Union[str, Path], plain: Union[str, Path], subject: str,
        description: str = "", generate_plain: bool = False, import_images: bool = False,
        convert_format: bool = False, inline: bool = False
    ) -> int:
        return self._templates.add_template(
            name, html, plain, subject, description,
            generate_plain, import_images, convert_format, inline
        )

    def update_template(
        self, template_id: int, name: str, html: Union[str, Path], plain: Union[str, Path],
        subject: str, description: str = "", generate_plain: bool = False,
        import_images: bool = False, convert_format: bool = False, inline: bool = False
    ) -> bool:
        return self._templates.update_template(
            template_id, name, html, plain, subject, description,
            generate_plain, import_images, convert_format, inline
        )

    def add_template_from_url(
        self, name: str, url: str, subject: str, description: str = "",
        import_images: bool = False, convert_format: bool = False, inline: bool = False
    ) -> int:
        return self._templates.add_template_from_url(
            name, url, subject, description, import_images, convert_format, inline
        )

    def delete_template(self, template_id: int) -> bool:
        return self._templates.delete_template(template_id)
