"""Módulo core - componentes fundamentais."""

from .session_manager import SessionManager
from .codec import JsonDecoder, decode_envelope
from .http_client import SmartmessagesHttpClient

__all__ = ["SessionManager", "JsonDecoder", "decode_envelope", "SmartmessagesHttpClient"]
