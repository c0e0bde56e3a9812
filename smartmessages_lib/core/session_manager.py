"""
Gerenciador de estado da sessao.
"""

import time
from typing import Callable

from ..models import Envelope, SessionState


class SessionManager:
    """Guarda o SessionState atual e o substitui de forma atomica."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def is_expired(self) -> bool:
        return self._state.is_expired(self.clock())

    def set_endpoint(self, endpoint: str):
        self._state = self._state.with_changes(endpoint=endpoint)

    def start_session(self, envelope: Envelope, fallback_endpoint: str):
        """Aplica a resposta de um login bem sucedido."""
        self._state = self._state.with_changes(
            access_key=str(envelope.get("accesskey", "")),
            endpoint=str(envelope.get("endpoint") or fallback_endpoint),
            expires=envelope.expires or 0,
            account_name=str(envelope.get("accountname", "")),
            connected=True,
        )

    def update_from_envelope(self, envelope: Envelope):
        """Atualiza status, codigo de erro e expiracao."""
        changes = {"error_code": envelope.errorcode}
        if "status" in envelope.data:
            changes["last_status"] = envelope.status
        if "expires" in envelope.data:
            changes["expires"] = envelope.expires or 0
        self._state = self._state.with_changes(**changes)

    def clear_session(self):
        """Descarta a chave de acesso (logout)."""
        self._state = self._state.cleared()
