"""
Modelos de dados compartilhados do cliente Smartmessages.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..exceptions import DataError, ServiceError


@dataclass
class Credentials:
    """Credenciais de acesso a API."""
    user: str
    password: str
    api_key: str
    base_url: str

    @property
    def completas(self) -> bool:
        return bool(self.user and self.password and self.api_key)


@dataclass(frozen=True)
class SessionState:
    """Estado imutavel da sessao; substituido por inteiro a cada chamada."""
    endpoint: str = ""
    access_key: str = ""
    expires: int = 0
    account_name: str = ""
    connected: bool = False
    last_status: bool = True
    error_code: int = 0

    def is_expired(self, now: Optional[float] = None) -> bool:
        now = time.time() if now is None else now
        return self.expires <= now

    def with_changes(self, **changes) -> "SessionState":
        return replace(self, **changes)

    def cleared(self) -> "SessionState":
        """Estado apos logout: mantem endpoint e conta, descarta a chave."""
        return replace(self, access_key="", expires=0, connected=False)


FALSE_STRINGS = ("", "0", "false", "no", "off")


def _as_bool(value: Any) -> bool:
    """Converte status vindo do servidor; strings como "0" e "false" sao falsas."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def _as_optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class Envelope:
    """Resposta decodificada: sucesso ou erro tipado.

    from_dict levanta ValueError/TypeError se errorcode ou expires nao forem
    numericos; decode_envelope converte isso em DataError.
    """
    status: bool
    errorcode: int = 0
    msg: str = ""
    expires: Optional[int] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Envelope":
        return cls(
            status=_as_bool(data.get("status", False)),
            errorcode=_as_optional_int(data.get("errorcode")) or 0,
            msg=str(data.get("msg") or ""),
            expires=_as_optional_int(data.get("expires")),
            data=dict(data),
        )

    @property
    def ok(self) -> bool:
        return self.status

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def error(self, error_class: type = DataError) -> ServiceError:
        message = self.msg or "Operacao recusada pelo servidor"
        return error_class(message, self.errorcode)
