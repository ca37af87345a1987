from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Glad to see you!"

router = APIRouter(tags=["greet"])


# PUBLIC_INTERFACE
@router.get("/greet", response_class=PlainTextResponse, summary="Greet")
def greet() -> PlainTextResponse:
    """Fixed plaintext greeting; never touches storage."""
    return PlainTextResponse(GREETING)
