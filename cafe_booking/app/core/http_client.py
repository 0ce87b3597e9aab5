import httpx

from cafe_booking.app.core.config import settings

http_client: httpx.AsyncClient | None = None


async def init_http_client(transport: httpx.AsyncBaseTransport | None = None) -> None:
    """Initialise the shared outbound HTTP client."""
    global http_client
    http_client = httpx.AsyncClient(
        transport=transport,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        follow_redirects=True,
    )


async def close_http_client() -> None:
    """Close the HTTP client if it was initialised."""
    global http_client
    if http_client is not None:
        await http_client.aclose()
        http_client = None
