"""
Servico de gerenciamento de listas de email e uploads.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

from .. import operations as ops
from ..core import SmartmessagesHttpClient
from ..utils import get_logger


class ListService:
    """Servico para listas, uploads e ordem de campos de importacao."""

    def __init__(self, http_client: SmartmessagesHttpClient):
        self.client = http_client
        self.logger = get_logger()

    def get_lists(self, show_all: bool = False) -> Any:
        """Listas da conta (apenas visiveis, a menos que show_all)."""
        listas = self.client.call(ops.GET_LISTS, show_all=show_all)
        self.logger.info(f"Encontradas {len(listas or [])} listas")
        return listas

    def get_test_list(self) -> Dict[str, Any]:
        return self.client.call(ops.GET_TEST_LIST)

    def get_list(self, list_id: int, as_csv: bool = True) -> Union[str, Any]:
        """Baixa uma lista completa.

        Em CSV (padrao) o corpo e devolvido sem alteracao: e menor e mais
        rapido que o formato estruturado, que pode chegar a centenas de MB
        em listas grandes. Com as_csv=False devolve apenas o campo 'list'.
        """
        self.logger.debug(f"Baixando lista {list_id} ({'csv' if as_csv else 'estruturada'})")
        return self.client.call(ops.GET_LIST, list_id=list_id, as_csv=as_csv)

    def add_list(self, name: str, description: str = "", visible: bool = True) -> int:
        list_id = self.client.call(ops.ADD_LIST, name=name, description=description, visible=visible)
        self.logger.info(f"Lista criada: {name} (id {list_id})")
        return list_id

    def update_list(self, list_id: int, name: str, description: str, visible: bool) -> bool:
        """Atualiza todas as propriedades da lista (todas obrigatorias)."""
        return self.client.call(
            ops.UPDATE_LIST, list_id=list_id, name=name, description=description, visible=visible
        )

    def delete_list(self, list_id: int) -> bool:
        """Remove a lista e todos os mailshots que a usaram."""
        result = self.client.call(ops.DELETE_LIST, list_id=list_id)
        self.logger.info(f"Lista {list_id} removida")
        return result

    def get_list_unsubs(self, list_id: int) -> Any:
        return self.client.call(ops.GET_LIST_UNSUBS, list_id=list_id)

    def upload_list(
        self,
        list_id: int,
        filename: Union[str, Path],
        source: str,
        definitive: bool = False,
        replace: bool = False,
        field_order_first_line: bool = False,
    ) -> int:
        """Envia um arquivo CSV (ou zip) para a lista; devolve o id do upload."""
        self.logger.info(f"Enviando {filename} para lista {list_id}...")
        upload_id = self.client.call(
            ops.UPLOAD_LIST,
            list_id=list_id,
            filename=filename,
            source=source,
            definitive=definitive,
            replace=replace,
            field_order_first_line=field_order_first_line,
        )
        self.logger.success(f"Upload aceito: id {upload_id}")
        return upload_id

    def get_upload_info(self, list_id: int, upload_id: int) -> Dict[str, Any]:
        return self.client.call(ops.GET_UPLOAD_INFO, list_id=list_id, upload_id=upload_id)

    def get_uploads(self, list_id: int) -> Any:
        return self.client.call(ops.GET_UPLOADS, list_id=list_id)

    def cancel_upload(self, list_id: int, upload_id: int) -> bool:
        """Cancela upload pendente; a remocao no servidor e assincrona."""
        return self.client.call(ops.CANCEL_UPLOAD, list_id=list_id, upload_id=upload_id)

    def get_field_order(self) -> List[str]:
        return self.client.call(ops.GET_FIELD_ORDER)

    def set_field_order(self, fields: List[str]) -> List[str]:
        """Define a ordem padrao de importacao; campos desconhecidos sao ignorados."""
        order = self.client.call(ops.SET_FIELD_ORDER, fields=fields)
        self.logger.debug(f"Ordem de campos: {order}")
        return order
