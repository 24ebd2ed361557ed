"""Runtime settings — env-driven via pydantic-settings.

Reads from a .env file and REHASH_* environment variables, e.g.::

    export REHASH_HASH_FUNCTION=sha256
    export REHASH_HASH_DIGEST_LENGTH=8
    export REHASH_HASH_TYPE=contenthash
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rehash.models.config import HashConfig, HashStrategy


class RehashSettings(BaseSettings):
    """Hashing and logging settings with environment overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REHASH_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Digest parameters
    hash_function: str = "md5"
    hash_digest: str = "hex"
    hash_digest_length: int = Field(default=20, ge=1)
    hash_salt: str | None = None

    # Which embedded identifier main files carry
    hash_type: HashStrategy = HashStrategy.CHUNKHASH

    log_level: str = "INFO"

    def hash_config(self) -> HashConfig:
        """Build the frozen digest configuration."""
        return HashConfig(
            hash_function=self.hash_function,
            hash_digest=self.hash_digest,
            hash_digest_length=self.hash_digest_length,
            hash_salt=self.hash_salt,
        )
