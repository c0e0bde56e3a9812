"""
Servico de gerenciamento de templates.
"""

from pathlib import Path
from typing import Any, Dict, Union

from .. import operations as ops
from ..core import SmartmessagesHttpClient
from ..utils import get_logger

Content = Union[str, Path]


class TemplateService:
    """Servico para templates de mensagem.

    html e plain aceitam o conteudo ou um Path para arquivo local
    (validado antes do envio). Conteudo e enviado via POST.
    """

    def __init__(self, http_client: SmartmessagesHttpClient):
        self.client = http_client
        self.logger = get_logger()

    def get_templates(self, include_global: bool = False, include_inherited: bool = True) -> Any:
        templates = self.client.call(
            ops.GET_TEMPLATES, include_global=include_global, include_inherited=include_inherited
        )
        self.logger.info(f"Encontrados {len(templates or [])} templates")
        return templates

    def get_template(self, template_id: int) -> Dict[str, Any]:
        return self.client.call(ops.GET_TEMPLATE, template_id=template_id)

    def add_template(
        self,
        name: str,
        html: Content,
        plain: Content,
        subject: str,
        description: str = "",
        generate_plain: bool = False,
        import_images: bool = False,
        convert_format: bool = False,
        inline: bool = False,
    ) -> int:
        template_id = self.client.call(
            ops.ADD_TEMPLATE,
            name=name, html=html, plain=plain, subject=subject,
            description=description, generate_plain=generate_plain,
            import_images=import_images, convert_format=convert_format, inline=inline,
        )
        self.logger.info(f"Template criado: {name} (id {template_id})")
        return template_id

    def update_template(
        self,
        template_id: int,
        name: str,
        html: Content,
        plain: Content,
        subject: str,
        description: str = "",
        generate_plain: bool = False,
        import_images: bool = False,
        convert_format: bool = False,
        inline: bool = False,
    ) -> bool:
        return self.client.call(
            ops.UPDATE_TEMPLATE,
            template_id=template_id,
            name=name, html=html, plain=plain, subject=subject,
            description=description, generate_plain=generate_plain,
            import_images=import_images, convert_format=convert_format, inline=inline,
        )

    def add_template_from_url(
        self,
        name: str,
        url: str,
        subject: str,
        description: str = "",
        import_images: bool = False,
        convert_format: bool = False,
        inline: bool = False,
    ) -> int:
        """Importa template de uma pagina web; a versao texto e gerada pelo servidor."""
        template_id = self.client.call(
            ops.ADD_TEMPLATE_FROM_URL,
            name=name, url=url, subject=subject, description=description,
            import_images=import_images, convert_format=convert_format, inline=inline,
        )
        self.logger.info(f"Template importado de {url} (id {template_id})")
        return template_id

    def delete_template(self, template_id: int) -> bool:
        """Remove o template e todos os mailshots e relatorios que o usaram."""
        return self.client.call(ops.DELETE_TEMPLATE, template_id=template_id)
