"""
Excecoes do cliente Smartmessages.

Hierarquia:
    ServiceError
    ├── ParameterError          parametro invalido, detectado antes da rede
    ├── ServiceConnectionError  falha de transporte ou HTTP
    ├── AuthError               login recusado ou sessao expirada
    └── DataError               resposta ilegivel ou status=false
"""


class ServiceError(Exception):
    """Erro generico reportado pelo servico ou pelo cliente."""

    def __init__(self, message: str = "", code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (codigo {self.code})"
        return self.message


class ParameterError(ServiceError):
    """Parametro invalido; nenhuma requisicao foi feita."""


class ServiceConnectionError(ServiceError):
    """Falha de conexao: DNS, timeout, resposta HTTP de erro etc."""


class AuthError(ServiceError):
    """Login recusado ou sessao expirada."""


class DataError(ServiceError):
    """Resposta nao decodificavel ou operacao recusada pelo servidor."""
