from datetime import datetime
from typing import Optional, Literal, Annotated, Union

from pydantic import BaseModel, Field

from text_playground.models import Operation

# WARNING: When adding new message types,
# be sure that type is unique across all message types.


class TransformRequestMessage(BaseModel):
    type: Literal["transform_request"] = "transform_request"
    timestamp: datetime = Field(default_factory=datetime.now)
    operation: Operation
    text: str
    # Echoed on the reply; replies may arrive out of order
    request_id: Optional[int] = None


class TransformResultMessage(BaseModel):
    type: Literal["transform_result"] = "transform_result"
    timestamp: datetime = Field(default_factory=datetime.now)
    operation: Operation
    title: str
    content: str
    is_error: bool = False
    request_id: Optional[int] = None


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    timestamp: datetime = Field(default_factory=datetime.now)
    error_code: str
    message: str
    operation: Optional[Operation] = None
    request_id: Optional[int] = None


class PingMessage(BaseModel):
    type: Literal["ping"] | Literal["pong"] = "pong"
    timestamp: datetime = Field(default_factory=datetime.now)


WebSocketMessage = Union[
    TransformRequestMessage,
    TransformResultMessage,
    ErrorMessage,
    PingMessage,
]


class Envelope(BaseModel):
    message: Annotated[
        WebSocketMessage,
        Field(discriminator="type"),
    ]


#
# HTTP bodies
#


class TransformRequest(BaseModel):
    text: str


class TransformResponse(BaseModel):
    operation: Operation
    title: str
    content: str
    is_error: bool = False


class LetterCountEntry(BaseModel):
    word: str
    count: int = Field(ge=0)


class LetterCountResponse(BaseModel):
    total: int = Field(ge=0)
    words: list[LetterCountEntry]
