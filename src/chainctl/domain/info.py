"""Blockchain info payload returned by ``getblockchaininfo``.

The field set is fixed: unknown keys in the node's JSON are ignored, and
``render()`` walks the declared fields rather than an arbitrary object.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field


class BlockchainInfo(BaseModel):
    """Typed view of the ``getblockchaininfo`` response."""

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    chain: str | None = Field(default=None, title="Chain")
    name: str | None = Field(
        default=None, title="Name", validation_alias=AliasChoices("name", "chainname")
    )
    description: str | None = Field(default=None, title="Description")
    protocol: str | None = Field(default=None, title="Protocol")
    setup_blocks: int | None = Field(
        default=None,
        title="SetupBlocks",
        validation_alias=AliasChoices("setup_blocks", "setupblocks"),
    )
    reindex: bool | None = Field(default=None, title="Reindex")
    height: int | None = Field(
        default=None, title="Height", validation_alias=AliasChoices("height", "blocks")
    )
    headers: int | None = Field(default=None, title="Headers")
    best_block_hash: str | None = Field(
        default=None,
        title="BestBlockHash",
        validation_alias=AliasChoices("best_block_hash", "bestblockhash"),
    )
    difficulty: float | None = Field(default=None, title="Difficulty")
    verification_progress: float | None = Field(
        default=None,
        title="VerificationProgress",
        validation_alias=AliasChoices("verification_progress", "verificationprogress"),
    )
    chain_work: str | None = Field(
        default=None, title="ChainWork", validation_alias=AliasChoices("chain_work", "chainwork")
    )

    def populated_fields(self) -> list[tuple[str, object]]:
        """Return ``(title, value)`` pairs for every populated field, in declaration order."""
        pairs: list[tuple[str, object]] = []
        for field_name, field in type(self).model_fields.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            pairs.append((field.title or field_name, value))
        return pairs

    def render(self) -> list[str]:
        """Render populated fields as ``Title: value`` lines."""
        return [f"{title}: {value}" for title, value in self.populated_fields()]
