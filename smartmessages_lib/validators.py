"""
Validacao local de parametros.

Cada validador recebe o valor e o nome do parametro, devolve o valor
normalizado ou levanta ParameterError. Nenhum faz acesso a rede.
"""

from pathlib import Path
from typing import Any, List, Union
from urllib.parse import urlparse

from email_validator import EmailNotValidError, validate_email

from .config import MANDATORY_FIELD, MIN_UPLOAD_SIZE
from .exceptions import ParameterError


def positive_id(value: Any, name: str = "id") -> int:
    """Identificadores (lista, campanha, template, upload, mailshot) > 0."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ParameterError(f"Invalid {name}: {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ParameterError(f"Invalid {name}: {value!r}") from None
    if number <= 0:
        raise ParameterError(f"Invalid {name}: {value!r}")
    return number


def optional_id(value: Any, name: str = "id") -> int:
    """Como positive_id, mas 0/None significa 'padrao do servidor'."""
    if not value:
        return 0
    return positive_id(value, name)


def email_address(value: Any, name: str = "address") -> str:
    """Endereco nao vazio apos remover espacos."""
    address = str(value or "").strip()
    if not address:
        raise ParameterError(f"Invalid email address for {name}")
    return address


def optional_email(value: Any, name: str = "address") -> str:
    """Vazio e aceito; caso contrario precisa ser um endereco valido."""
    address = str(value or "").strip()
    if address and not is_valid_email(address):
        raise ParameterError(f"Invalid email address for {name}: {address}")
    return address


def is_valid_email(address: str) -> bool:
    """Validacao sintatica, sem consulta de DNS."""
    try:
        validate_email(address.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def absolute_url(value: Any, name: str = "url") -> str:
    """URL absoluta com esquema http(s) e host."""
    url = str(value or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ParameterError(f"Invalid {name}: {url!r}")
    return url


def non_empty_text(value: Any, name: str = "name") -> str:
    text = str(value or "").strip()
    if not text:
        raise ParameterError(f"Missing {name}")
    return text


def secret(value: Any, name: str = "password") -> str:
    """Nao vazio; devolvido sem alteracao (senhas podem ter espacos)."""
    if not str(value or "").strip():
        raise ParameterError(f"Missing {name}")
    return str(value)


def trimmed(value: Any, name: str = "") -> str:
    return str(value or "").strip()


def field_order(value: Union[str, List[str]], name: str = "fields") -> List[str]:
    """Lista de campos nao vazia e contendo o campo obrigatorio."""
    if isinstance(value, str):
        value = value.split(",")
    fields = [str(f).strip() for f in (value or []) if str(f).strip()]
    if not fields or MANDATORY_FIELD not in fields:
        raise ParameterError(f"Invalid field order: must include '{MANDATORY_FIELD}'")
    return fields


def upload_file(value: Any, name: str = "filename") -> Path:
    """Arquivo local existente com pelo menos MIN_UPLOAD_SIZE bytes."""
    if not value:
        raise ParameterError(f"Missing {name}")
    path = Path(value)
    if not path.is_file():
        raise ParameterError(f"File does not exist: {path}")
    if path.stat().st_size < MIN_UPLOAD_SIZE:
        raise ParameterError(f"File does not contain any data: {path}")
    return path


def content_or_file(value: Any, name: str = "content") -> str:
    """Texto literal, ou conteudo de um arquivo local se for um Path."""
    if isinstance(value, Path):
        return upload_file(value, name).read_text(encoding="utf-8")
    return "" if value is None else str(value)
