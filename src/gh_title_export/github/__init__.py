from .auth import load_token
from .client import GitHubClient, GitHubResponse

__all__ = ["GitHubClient", "GitHubResponse", "load_token"]
