import os
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..runtime.board import SharedBoard
from ..utils.logging import get_logger
from .dependencies import get_board
from .schemas import MessageOut

logger = get_logger(__name__)

# Decimal digits with an optional leading "+"
OFFSET_PATTERN = r"^\+?[0-9]+$"

async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report undecodable request parameters as 400 Bad Request."""
    logger.warning("request_rejected", method=request.method, path=request.url.path,
                   errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

def create_app(board: Optional[SharedBoard] = None, static_dir: Optional[str] = None) -> FastAPI:
    """Build the message board app around a board (a fresh one by default)."""
    app = FastAPI(title="Message Board API", version=__version__)
    app.state.board = board if board is not None else SharedBoard()
    app.add_exception_handler(RequestValidationError, _validation_error)

    @app.get("/messages", response_model=list[MessageOut])
    async def list_messages(first_message_id: str = Query(default="0", pattern=OFFSET_PATTERN),
                            board: SharedBoard = Depends(get_board)):
        """List messages, optionally starting from a known message id."""
        msgs = await board.read_from(int(first_message_id))
        return [MessageOut.from_message(m) for m in msgs]

    @app.post("/messages")
    async def send_message(request: Request, board: SharedBoard = Depends(get_board)):
        """Post the raw request body as a new message."""
        body = await request.body()
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("request_rejected", method=request.method, path=request.url.path,
                           reason="body is not valid UTF-8")
            raise HTTPException(400, "Message body must be valid UTF-8") from None
        await board.append(text)
        return Response(status_code=200)

    # Everything else is the built client, if there is one
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="client")
    else:
        logger.info("static_dir_missing", static_dir=static_dir)

    return app
