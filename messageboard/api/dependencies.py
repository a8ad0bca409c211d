from fastapi import Request
from ..runtime.board import SharedBoard

def get_board(request: Request) -> SharedBoard:
    """The board owned by the running app."""
    return request.app.state.board
