"""
Decodificacao do corpo das respostas.
"""

import json
from typing import Any, Callable, Mapping

from ..exceptions import DataError
from ..models import Envelope

Decoder = Callable[[str], Any]


class JsonDecoder:
    """Decodificador padrao (outputformat=json)."""

    output_format = "json"

    def __call__(self, body: str) -> Any:
        return json.loads(body)


def decode_envelope(body: str, decoder: Decoder) -> Envelope:
    """Decodifica o corpo e monta o Envelope; DataError se ilegivel."""
    try:
        decoded = decoder(body)
        if not isinstance(decoded, Mapping):
            raise DataError("Failed to decode response data: not a key/value envelope", 0)
        return Envelope.from_dict(dict(decoded))
    except (ValueError, TypeError) as e:
        raise DataError(f"Failed to decode response data: {e}", 0) from e
