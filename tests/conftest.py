"""
Shared pytest fixtures for DevConnect tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_devconnect",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "GITHUB_TOKEN": "",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.github_api_url = "https://api.github.test"
    mock.github_token = ""
    mock.github_repo_limit = 5

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.core.security.get_settings", return_value=mock
    ), patch("app.infrastructure.external.github_client.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def user_repo():
    """UserRepository mock with async methods."""
    return AsyncMock()


@pytest.fixture
def profile_repo():
    """ProfileRepository mock whose save echoes the profile back with an ID."""
    repo = AsyncMock()

    def _save(profile):
        if profile.id is None:
            profile.id = "prof-new"
        return profile

    repo.save.side_effect = _save
    return repo


@pytest.fixture
def post_repo():
    """PostRepository mock whose save echoes the post back with an ID."""
    repo = AsyncMock()

    def _save(post):
        if post.id is None:
            post.id = "post-new"
        return post

    repo.save.side_effect = _save
    return repo
