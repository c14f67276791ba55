import logging
from collections.abc import Callable

import anyio
import anyio.to_thread
from anyio import CapacityLimiter, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
from pydantic import ValidationError
from starlette.websockets import WebSocketDisconnect

from text_playground.messages import (
    Envelope,
    ErrorMessage,
    PingMessage,
    TransformRequestMessage,
    TransformResultMessage,
    WebSocketMessage,
)
from text_playground.models import DisplayResult, Operation, WebSocketProtocol
from text_playground.presentation import dispatch

logger = logging.getLogger(__name__)

TransformHandler = Callable[[Operation, str], DisplayResult]


class TransformSession:
    """
    One live transformation channel over an accepted websocket.

    - Every transform_request runs in its own task, in a worker thread, so a
      long text does not hold up the replies to shorter ones.
    - Replies carry the request's request_id and may arrive out of order.
    - A single writer task owns ws.send_text; other tasks hand it messages
      through a bounded memory stream.

    Usage:
        await TransformSession(ws, max_input_length=1000).serve()
    """

    def __init__(
        self,
        websocket: WebSocketProtocol,
        *,
        max_input_length: int,
        max_concurrent_transforms: int = 4,
        message_buffer_size: int = 64,
        handler: TransformHandler = dispatch,
    ):
        self._ws = websocket
        self._max_input_length = max_input_length
        self._limiter = CapacityLimiter(max_concurrent_transforms)
        self._message_buffer_size = message_buffer_size
        self._handler = handler

    async def serve(self) -> None:
        """Run until the client goes away, from either the read or write side."""
        try:
            await self.run()
        except* WebSocketDisconnect:
            logger.info(f"WebSocket client disconnected: {id(self._ws)}")

    async def run(self) -> None:
        send_stream, receive_stream = create_memory_object_stream[WebSocketMessage](
            self._message_buffer_size
        )

        async with anyio.create_task_group() as tg:
            tg.start_soon(self._writer, receive_stream)

            async with send_stream:
                while True:
                    raw = await self._ws.receive_text()
                    try:
                        message = Envelope.model_validate_json(raw).message
                    except ValidationError as e:
                        logger.warning(
                            f"Invalid WebSocket message: {e.error_count()} errors"
                        )
                        await send_stream.send(
                            ErrorMessage(error_code="invalid_message", message=str(e))
                        )
                        continue

                    if isinstance(message, TransformRequestMessage):
                        tg.start_soon(self._reply, message, send_stream.clone())
                    elif isinstance(message, PingMessage):
                        await send_stream.send(PingMessage())
                    else:
                        await send_stream.send(
                            ErrorMessage(
                                error_code="unexpected_message",
                                message=f"Clients may not send {message.type} messages",
                            )
                        )

    async def _writer(
        self, receive_stream: MemoryObjectReceiveStream[WebSocketMessage]
    ) -> None:
        async with receive_stream:
            async for msg in receive_stream:
                await self._ws.send_text(Envelope(message=msg).model_dump_json())

    async def _reply(
        self,
        message: TransformRequestMessage,
        send_stream: MemoryObjectSendStream[WebSocketMessage],
    ) -> None:
        async with send_stream:
            await send_stream.send(await self._transform(message))

    async def _transform(
        self, message: TransformRequestMessage
    ) -> TransformResultMessage | ErrorMessage:
        if len(message.text) > self._max_input_length:
            logger.warning(
                f"Rejected WebSocket input of {len(message.text)} characters"
            )
            return ErrorMessage(
                error_code="input_too_long",
                message=f"Text is longer than {self._max_input_length} characters.",
                operation=message.operation,
                request_id=message.request_id,
            )

        result = await anyio.to_thread.run_sync(
            self._handler, message.operation, message.text, limiter=self._limiter
        )
        logger.info(f"Handled {message.operation} over WebSocket")
        return TransformResultMessage(
            operation=message.operation,
            title=result.title,
            content=result.content,
            is_error=result.is_error,
            request_id=message.request_id,
        )
