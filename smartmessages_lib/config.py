"""
Configuracoes e constantes compartilhadas do cliente Smartmessages.
"""

import os
from typing import Optional

from .models import Credentials

# URL inicial da API (o login pode indicar outro endpoint)
BASE_URL = "https://www.smartmessages.net/api/"

# Formato de resposta solicitado ao servidor
OUTPUT_FORMAT = "json"

# Headers padrão para requisições HTTP
DEFAULT_HEADERS = {
    "User-Agent": "smartmessages-lib/1.0 (+https://www.smartmessages.net/)",
    "Accept": "application/json, text/csv;q=0.9, */*;q=0.8",
}

# Configurações de tempo
DEFAULT_TIMEOUT = 30

# Menor tamanho possivel de um arquivo com um unico endereco externo
MIN_UPLOAD_SIZE = 6

# Campo obrigatorio em qualquer ordem de campos de importacao
MANDATORY_FIELD = "emailaddress"

# Variaveis de ambiente (.env)
ENV_USER = "SMARTMESSAGES_USER"
ENV_PASSWORD = "SMARTMESSAGES_PASSWORD"
ENV_APIKEY = "SMARTMESSAGES_APIKEY"
ENV_BASEURL = "SMARTMESSAGES_BASEURL"


def load_credentials(
    user: Optional[str] = None,
    password: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Credentials:
    """Completa credenciais ausentes com as variaveis de ambiente."""
    return Credentials(
        user=user or os.getenv(ENV_USER, ""),
        password=password or os.getenv(ENV_PASSWORD, ""),
        api_key=api_key or os.getenv(ENV_APIKEY, ""),
        base_url=base_url or os.getenv(ENV_BASEURL) or BASE_URL,
    )
