# tfjson/models/settings.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_NESTING_DEPTH = 64


class DecoderSettings(BaseSettings):
    """
    Pydantic settings for the document decoders.
    By default, these fields map to environment variables prefixed with `TFJSON_`.
    For example, `TFJSON_MAX_NESTING_DEPTH=16`.
    """

    # Deepest allowed chain of nested block lists inside one expression.
    max_nesting_depth: int = Field(default=DEFAULT_MAX_NESTING_DEPTH, ge=1)

    model_config = SettingsConfigDict(env_prefix="TFJSON_")

    def as_context(self) -> dict:
        """Validation context handed to pydantic when decoding documents."""
        return {"max_nesting_depth": self.max_nesting_depth}


__all__ = ["DEFAULT_MAX_NESTING_DEPTH", "DecoderSettings"]
