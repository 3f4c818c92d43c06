from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from sesmailer.application.message import Message


class Transport(Protocol):
    def send(self, message: Message) -> Any: ...
