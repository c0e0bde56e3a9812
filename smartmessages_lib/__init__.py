"""
Smartmessages Lib - Cliente para a API de listas e campanhas Smartmessages.

Uso básico:
    from smartmessages_lib import SmartmessagesClient

    with SmartmessagesClient() as sm:
        sm.login("user@example.com", "senha", "apikey")
        sm.subscribe("fulano@example.com", 123)
        csv = sm.get_list(123)

Sem argumentos, login() usa SMARTMESSAGES_USER, SMARTMESSAGES_PASSWORD,
SMARTMESSAGES_APIKEY e SMARTMESSAGES_BASEURL do ambiente ou do .env.
"""

from pathlib import Path
from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

from .client import SmartmessagesClient
from .config import BASE_URL, DEFAULT_TIMEOUT, MIN_UPLOAD_SIZE, MANDATORY_FIELD
from .exceptions import (
    ServiceError, ParameterError, ServiceConnectionError, AuthError, DataError,
)
from .models import SessionState, Envelope, Credentials

__version__ = "1.0.0"
__all__ = [
    "SmartmessagesClient",
    "BASE_URL", "DEFAULT_TIMEOUT", "MIN_UPLOAD_SIZE", "MANDATORY_FIELD",
    "ServiceError", "ParameterError", "ServiceConnectionError", "AuthError", "DataError",
    "SessionState", "Envelope", "Credentials",
]
