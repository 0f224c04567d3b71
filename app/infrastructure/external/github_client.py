# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class GithubClient:
    """
    Thin client for the GitHub REST API.
    
    Only the public repository listing used on developer profiles is
    exposed.
    """
    
    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.http_client = http_client
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.token = token if token is not None else settings.github_token
    
    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "devconnect-backend",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers
    
    async def list_repositories(self, username: str, limit: int) -> Optional[List[Dict[str, Any]]]:
        """
        Fetch a user's repositories, oldest first.
        
        Args:
            username: GitHub login
            limit: Maximum number of repositories to return
            
        Returns:
            Raw repository objects, or None when GitHub does not answer 200
            (unknown user, rate limit, ...)
        """
        client = self.http_client or get_shared_http_client()
        url = f"{self.base_url}/users/{username}/repos"
        params = {"per_page": limit, "sort": "created", "direction": "asc"}
        
        try:
            response = await client.get(url, params=params, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching GitHub repositories for {username}: {e}")
            raise RuntimeError(f"GitHub request timed out: {str(e)}")
        except httpx.HTTPError as e:
            logger.error(f"HTTP error fetching GitHub repositories for {username}: {e}")
            raise RuntimeError(f"GitHub request failed: {str(e)}")
        
        if response.status_code != 200:
            logger.warning(
                f"GitHub returned {response.status_code} for repositories of {username}"
            )
            return None
        return response.json()
