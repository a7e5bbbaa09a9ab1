"""Connection use cases."""

from .begin_connection import BeginConnectionUseCase
from .cancel_connection import CancelConnectionUseCase
from .complete_connection import CompleteConnectionUseCase
from .disconnect import DisconnectUseCase
from .get_status import GetConnectionStatusUseCase

__all__ = [
    "BeginConnectionUseCase",
    "CancelConnectionUseCase",
    "CompleteConnectionUseCase",
    "DisconnectUseCase",
    "GetConnectionStatusUseCase",
]
