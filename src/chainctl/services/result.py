"""CommandResult and CommandError: the uniform command contract.

INVARIANT: All client operations return CommandResult.
Exactly one of ``result`` / ``error`` is present, selected by ``ok``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class CommandError(BaseModel):
    """Structured error payload within a CommandResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseModel, Generic[T]):
    """Universal return type for all command-client operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_blockchain"``).
        result: Operation-specific payload, present only on success.
        error: Structured error, present only on failure.
        warnings: Non-fatal issues encountered during the operation.
        meta: Optional metadata (command line, return code, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    result: T | None = None
    error: CommandError | None = None
    warnings: list[str] = Field(default_factory=list)
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> CommandResult[T]:
        if self.ok:
            if self.error is not None:
                raise ValueError("successful result must not carry an error")
            if self.result is None:
                raise ValueError("successful result must carry a payload")
        else:
            if self.error is None:
                raise ValueError("failed result must carry an error")
            if self.result is not None:
                raise ValueError("failed result must not carry a payload")
        return self

    @classmethod
    def success(
        cls,
        op: str,
        result: T,
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> CommandResult[T]:
        return cls(ok=True, op=op, result=result, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> CommandResult[T]:
        return cls(
            ok=False,
            op=op,
            error=CommandError(code=code, message=message, detail=detail or {}),
            meta=meta,
        )
