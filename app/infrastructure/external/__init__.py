from .github_client import GithubClient

__all__ = ["GithubClient"]
