"""Tests for environment configuration interface."""

from pathlib import Path

import pytest

from common.env import Environment, env


class TestEnvironment:
    """Tests for Environment class."""

    def test_log_level_default(self, monkeypatch):
        """Test log_level returns default value."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Environment.log_level() == "INFO"

    def test_log_level_from_env_is_upper_cased(self, monkeypatch):
        """Test log_level reads and upper-cases the environment value."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Environment.log_level() == "DEBUG"

    def test_note_policy_default(self, monkeypatch):
        """Test note_policy defaults to strict."""
        monkeypatch.delenv("POCKETBOOK_NOTE_POLICY", raising=False)
        assert Environment.note_policy() == "strict"

    def test_note_policy_from_env(self, monkeypatch):
        """Test note_policy reads from environment."""
        monkeypatch.setenv("POCKETBOOK_NOTE_POLICY", " Lenient ")
        assert Environment.note_policy() == "lenient"

    def test_note_policy_rejects_unknown(self, monkeypatch):
        """Test note_policy fails loudly on a typo."""
        monkeypatch.setenv("POCKETBOOK_NOTE_POLICY", "skip")
        with pytest.raises(ValueError, match="POCKETBOOK_NOTE_POLICY"):
            Environment.note_policy()

    def test_source_tag_default(self, monkeypatch):
        """Test source_tag returns default value."""
        monkeypatch.delenv("POCKETBOOK_SOURCE_TAG", raising=False)
        assert Environment.source_tag() == "pocketbook_notes"

    def test_source_tag_from_env(self, monkeypatch):
        """Test source_tag reads from environment."""
        monkeypatch.setenv("POCKETBOOK_SOURCE_TAG", "custom")
        assert Environment.source_tag() == "custom"

    def test_output_dir_default(self, monkeypatch):
        """Test output_dir returns default value."""
        monkeypatch.delenv("POCKETBOOK_OUTPUT_DIR", raising=False)
        assert Environment.output_dir() == Path("data/export")

    def test_output_dir_from_env(self, monkeypatch):
        """Test output_dir reads from environment."""
        monkeypatch.setenv("POCKETBOOK_OUTPUT_DIR", "/tmp/highlights")
        assert Environment.output_dir() == Path("/tmp/highlights")


class TestEnvSingleton:
    """Tests for env singleton instance."""

    def test_env_is_environment_instance(self):
        """Test that env is an instance of Environment."""
        assert isinstance(env, Environment)

    def test_env_singleton_methods_work(self, monkeypatch):
        """Test that env singleton methods work."""
        monkeypatch.setenv("POCKETBOOK_SOURCE_TAG", "via_singleton")
        assert env.source_tag() == "via_singleton"
