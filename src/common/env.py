"""Environment configuration interface for pocketbook-notes.

Centralizes all environment variable access in one place. Values from a
local .env file are loaded on import.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_OUTPUT_DIR, DEFAULT_SOURCE_TAG, NOTE_POLICIES

load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level(default: str = "INFO") -> str:
        """Get the logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", default).upper()

    @staticmethod
    def note_policy() -> str:
        """Get the policy applied to malformed note elements.

        Returns:
            'strict' (abort on first malformed note) or 'lenient'
            (skip and report), defaults to 'strict'

        Raises:
            ValueError: If the variable holds an unknown policy name
        """
        policy = os.getenv("POCKETBOOK_NOTE_POLICY", "strict").strip().lower()
        if policy not in NOTE_POLICIES:
            raise ValueError(
                f"POCKETBOOK_NOTE_POLICY must be one of {sorted(NOTE_POLICIES)}, got '{policy}'"
            )
        return policy

    @staticmethod
    def source_tag() -> str:
        """Get the importer identifier written into export records.

        Returns:
            Source tag, defaults to 'pocketbook_notes'
        """
        return os.getenv("POCKETBOOK_SOURCE_TAG", DEFAULT_SOURCE_TAG)

    @staticmethod
    def output_dir() -> Path:
        """Get the directory export payloads are written to.

        Returns:
            Path, defaults to ./data/export
        """
        return Path(os.getenv("POCKETBOOK_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR)))


# Singleton instance for convenient access
env = Environment()
