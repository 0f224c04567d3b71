# Standard library imports
from typing import Any, Dict, List

# Local application imports
from ....domain.exceptions import GithubProfileNotFoundError
from ....infrastructure.external.github_client import GithubClient


class ListGithubReposUseCase:
    """Use case for showing a developer's latest GitHub repositories"""
    
    def __init__(self, github_client: GithubClient, repo_limit: int = 5) -> None:
        self.github_client = github_client
        self.repo_limit = repo_limit
    
    async def execute(self, username: str) -> List[Dict[str, Any]]:
        """
        Raises:
            GithubProfileNotFoundError: If GitHub has no such user
        """
        repositories = await self.github_client.list_repositories(username, limit=self.repo_limit)
        if repositories is None:
            raise GithubProfileNotFoundError(username)
        return repositories
