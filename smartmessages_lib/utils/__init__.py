"""
Utilitarios compartilhados do cliente Smartmessages.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


# FUNÇÕES DE TEMPO

def timestamp_str() -> str:
    """Timestamp para nomes de arquivo."""
    return datetime.now().strftime('%Y%m%d_%H%M%S')


# FUNÇÕES DE ARQUIVO

def save_text(data: str, filepath: Path) -> Path:
    """Salva texto (ex.: CSV exportado) em UTF-8."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.write(data)
    return filepath


# FUNÇÕES DE DEPURACAO

SENSITIVE_PARAMS = ("accesskey", "password", "apikey")


def mask_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Copia params ocultando chaves e senhas para o log."""
    masked = {}
    for key, value in params.items():
        if key in SENSITIVE_PARAMS and value:
            masked[key] = "***"
        else:
            masked[key] = value
    return masked


# LOGGER

class SmartmessagesLogger:
    """Logger customizado para o cliente Smartmessages."""

    _instances = {}

    def __new__(cls, name: str = "smartmessages", log_dir: Optional[Path] = None, debug: bool = False):
        # Singleton por nome
        if name not in cls._instances:
            instance = super().__new__(cls)
            cls._instances[name] = instance
        return cls._instances[name]

    def __init__(self, name: str = "smartmessages", log_dir: Optional[Path] = None, debug: bool = False):
        if hasattr(self, '_initialized'):
            if debug and not self.debug_mode:
                self.set_debug(True)
            return
        self._initialized = True

        self.name = name
        self.debug_mode = debug

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug else logging.INFO)
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler
        self.console = logging.StreamHandler(sys.stdout)
        self.console.setLevel(logging.DEBUG if debug else logging.INFO)
        self.console.setFormatter(formatter)
        self.logger.addHandler(self.console)

        # File handler
        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                log_dir / f"smartmessages_{datetime.now().strftime('%Y%m%d')}.log",
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def set_debug(self, enabled: bool):
        """Liga/desliga o modo debug (dump de requisicoes e respostas)."""
        self.debug_mode = enabled
        level = logging.DEBUG if enabled else logging.INFO
        self.logger.setLevel(level)
        self.console.setLevel(level)

    def info(self, msg: str):
        self.logger.info(msg)

    def debug(self, msg: str):
        self.logger.debug(msg)

    def warning(self, msg: str):
        self.logger.warning(msg)

    def error(self, msg: str):
        self.logger.error(msg)

    def success(self, msg: str):
        self.logger.info(f"[OK] {msg}")


def get_logger(name: str = "smartmessages", log_dir: Optional[Path] = None, debug: bool = False) -> SmartmessagesLogger:
    """Obtém instância do logger."""
    return SmartmessagesLogger(name, log_dir, debug)
