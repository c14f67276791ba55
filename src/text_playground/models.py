from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable


class Operation(StrEnum):
    """The four transformations a user can pick."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TITLECASE = "titlecase"
    COUNT = "count"


@dataclass(frozen=True)
class DisplayResult:
    """
    What the page shows after an operation.

    Attributes
    ----------
    title:
        heading of the result panel
    content:
        body text of the result panel
    is_error:
        set when the input was refused rather than transformed
    """

    title: str
    content: str
    is_error: bool = False


@runtime_checkable
class WebSocketProtocol(Protocol):
    async def send_text(self, data: str) -> None: ...
    async def receive_text(self) -> str: ...
