import logging

from fastapi import FastAPI, HTTPException, WebSocket, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from text_playground.config import Settings
from text_playground.messages import (
    LetterCountEntry,
    LetterCountResponse,
    TransformRequest,
    TransformResponse,
)
from text_playground.models import Operation
from text_playground.page import INDEX_HTML
from text_playground.presentation import dispatch
from text_playground.text_utils import count_letters, count_letters_per_word
from text_playground.websocket_session import TransformSession

logger = logging.getLogger(__name__)

SERVICE_NAME = "Text Playground"


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title=SERVICE_NAME,
        description="Uppercase, lowercase, AP-style title case and letter counting",
        version="1.0.0",
    )

    app.add_middleware(
        # pyrefly: ignore[bad-argument-type]
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def check_length(text: str) -> None:
        if len(text) > settings.max_input_length:
            logger.warning(
                f"Rejected input of {len(text)} characters "
                f"(limit {settings.max_input_length})"
            )
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Text is longer than {settings.max_input_length} characters.",
            )

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return INDEX_HTML

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "operations": [operation.value for operation in Operation],
        }

    @app.post("/transform/{operation}", response_model=TransformResponse)
    async def transform(operation: Operation, body: TransformRequest):
        """
        Apply one operation to the submitted text.

        Blank text is not a transport error: it comes back as a normal
        response whose title is "Error", which the page shows as-is.
        """
        check_length(body.text)

        result = dispatch(operation, body.text)
        if result.is_error:
            logger.warning(f"Blank input for operation {operation}")
        else:
            logger.info(f"Handled {operation} on {len(body.text)} characters")

        return TransformResponse(
            operation=operation,
            title=result.title,
            content=result.content,
            is_error=result.is_error,
        )

    @app.post("/letters", response_model=LetterCountResponse)
    async def letters(body: TransformRequest):
        """
        Structured letter count: the total plus one entry per word.
        """
        check_length(body.text)

        words = count_letters_per_word(body.text)
        logger.info(f"Counted letters of {len(words)} words")
        return LetterCountResponse(
            total=count_letters(body.text),
            words=[
                LetterCountEntry(word=item.word, count=item.count) for item in words
            ],
        )

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        """
        Live transformation channel.

        Clients send enveloped transform_request messages and get one
        transform_result (or error) message back for each.
        """
        await websocket.accept()
        logger.info(f"WebSocket client connected: {id(websocket)}")

        session = TransformSession(
            websocket, max_input_length=settings.max_input_length
        )
        await session.serve()

    return app
