"""Error kinds raised by the stores and translated to HTTP responses by the API."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_CREDENTIALS = "invalid_credentials"
    DUPLICATE_ENTRY = "duplicate_entry"
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"


class DiarioError(Exception):
    """Base class for every expected failure.

    Callers branch on ``kind``; ``message`` is safe to show to the user.
    """

    kind: ErrorKind
    default_message = "Erro no servidor."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(DiarioError):
    kind = ErrorKind.INVALID_INPUT
    default_message = "Dados incompletos."


class InvalidCredentialsError(DiarioError):
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Credenciais inválidas."


class DuplicateEntryError(DiarioError):
    kind = ErrorKind.DUPLICATE_ENTRY
    default_message = "Email já existe."


class NotFoundError(DiarioError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Registro não encontrado."


class StoreUnavailableError(DiarioError):
    kind = ErrorKind.STORE_UNAVAILABLE
    default_message = "Banco de dados indisponível."
