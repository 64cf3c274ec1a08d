"""
Constant models — the in-memory shape of one domain's extraction.

Built fresh on every run and handed straight to the code emitter;
nothing here is persisted.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class ConstantEntry(BaseModel):
    """One named constant.

    Attributes:
        identifier: Sanitized identifier (see ``services.naming.sanitize``).
        kind:       ``"string"`` or ``"int"``.
        value:      The raw value, emitted as a literal of ``kind``.
    """

    identifier: str
    kind: Literal["string", "int"]
    value: Union[str, int]

    @classmethod
    def string(cls, identifier: str, value: str) -> ConstantEntry:
        return cls(identifier=identifier, kind="string", value=value)

    @classmethod
    def integer(cls, identifier: str, value: int) -> ConstantEntry:
        return cls(identifier=identifier, kind="int", value=value)


class ScopeGroup(BaseModel):
    """A nested class grouping the constants of one asset."""

    name: str
    entries: list[ConstantEntry] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    """Everything one extractor produced, in source order."""

    domain: str
    class_name: str
    items: list[Union[ConstantEntry, ScopeGroup]] = Field(default_factory=list)

    @property
    def constant_count(self) -> int:
        """Number of constants, counting inside nested groups."""
        total = 0
        for item in self.items:
            if isinstance(item, ScopeGroup):
                total += len(item.entries)
            else:
                total += 1
        return total

    @property
    def group_count(self) -> int:
        return sum(1 for item in self.items if isinstance(item, ScopeGroup))
