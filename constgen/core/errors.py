"""
Generation errors — every failure a domain generator can report.

Each error aborts only the domain that raised it. The use-case layer
catches ``GenerationError`` per domain and records it in the report,
so ``generate all`` keeps going after one domain fails.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for all constant-generation failures."""


class SourceUnavailable(GenerationError):
    """A domain's configuration source could not be read."""

    def __init__(self, domain: str, detail: str = "") -> None:
        self.domain = domain
        self.detail = detail
        msg = f"Source for '{domain}' is unavailable"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class EmptyIdentifier(GenerationError):
    """A raw name contains no characters usable in an identifier."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Name {raw!r} has no alphanumeric characters")


class DuplicateIdentifier(GenerationError):
    """Two declarations in one scope sanitize to the same identifier."""

    def __init__(self, identifier: str, scope: str = "") -> None:
        self.identifier = identifier
        self.scope = scope
        where = f" in scope '{scope}'" if scope else " at top level"
        super().__init__(f"Identifier '{identifier}' declared twice{where}")


class ScopeError(GenerationError):
    """Scopes were opened and closed out of LIFO order."""


class IOFailure(GenerationError):
    """Creating the output directory or writing the file failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write {path}: {cause}")


class ConstantOutOfRange(GenerationError):
    """An integer value does not fit a 32-bit ``int`` constant."""

    def __init__(self, identifier: str, value: int) -> None:
        self.identifier = identifier
        self.value = value
        super().__init__(f"Value {value} of '{identifier}' does not fit in 32 bits")
