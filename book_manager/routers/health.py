"""GET /health – liveness probe."""

from fastapi import APIRouter, Response, status

router = APIRouter(tags=["ops"])


@router.get(
    "/health",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def health() -> Response:
    """Return 204 with no body.  Does not check the database."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
