"""Unit tests for settings."""

from cms.config import BASE_DIR, Settings


class TestSettings:
    """Tests for the storage locations derived from settings."""

    def test_development_paths(self):
        s = Settings(environment="development")
        assert s.documents_root == BASE_DIR / "data"
        assert s.credentials_path == BASE_DIR / "user_accounts.yml"

    def test_test_environment_uses_separate_paths(self):
        s = Settings(environment="test")
        assert s.documents_root == BASE_DIR / "tests" / "data"
        assert s.credentials_path == BASE_DIR / "tests" / "user_accounts.yml"

    def test_explicit_paths_win(self, tmp_path):
        s = Settings(
            environment="test",
            data_dir=tmp_path / "docs",
            credentials_file=tmp_path / "users.yml",
        )
        assert s.documents_root == tmp_path / "docs"
        assert s.credentials_path == tmp_path / "users.yml"
