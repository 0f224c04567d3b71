"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify app package and settings can be imported."""
    from app.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "github_api_url")


def test_settings_read_environment(mock_env):
    from app.core.config import Settings

    settings = Settings()
    assert settings.mongo_database_name == "test_devconnect"
    assert settings.jwt_secret_key == "test_secret_key_for_testing_only"
