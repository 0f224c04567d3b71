"""HTTP client factory for connection pooling."""
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Global shared HTTP client instance
_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Get or create the shared async HTTP client.
    
    Outbound calls (GitHub API) reuse this client so keep-alive connections
    are pooled across requests.
    """
    global _shared_client
    
    if _shared_client is None:
        _shared_client = httpx.AsyncClient(
            timeout=10.0,
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=50,
                keepalive_expiry=30.0,
            ),
            http2=True,
        )
        logger.info("Created shared HTTP client")
    
    return _shared_client


async def close_shared_http_client() -> None:
    """Close shared HTTP client (call on application shutdown)."""
    global _shared_client
    
    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
