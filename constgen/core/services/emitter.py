"""
Code emitter — write C# constant classes line by line.

The emitter owns its indentation and a stack of open scopes. Callers
only say what to declare; nesting, braces and indentation are tracked
here. Output is a single forward pass, nothing is rewritten.

    emitter = CodeEmitter()
    emitter.write_header()
    emitter.begin_scope("Tags")
    emitter.write_string_constant("Player", "Player")
    emitter.end_scope("Tags")
    text = emitter.getvalue()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from constgen.core.errors import ConstantOutOfRange, DuplicateIdentifier, ScopeError
from constgen.core.services.naming import sanitize

HEADER = "// This file is automatically generated.  Changes will be overwritten."

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def escape_string(value: str) -> str:
    """Escape a value for a C# regular string literal."""
    out = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ch in "\u0085\u2028\u2029":
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def format_int(value: int) -> str:
    """Render an int constant expression that compiles as ``int``.

    Values in the unsigned-only range keep their bit pattern through
    an unchecked cast, so ``1 << 31`` stays exactly that mask.
    """
    if _INT32_MIN <= value <= _INT32_MAX:
        return str(value)
    if _INT32_MAX < value <= _UINT32_MAX:
        return f"unchecked((int)0x{value:08X})"
    raise ValueError(f"Integer constant {value} does not fit in 32 bits")


@dataclass
class _Scope:
    name: str
    kind: str
    declared: set[str] = field(default_factory=set)


class CodeEmitter:
    """Append-only writer for nested static classes of constants.

    Args:
        indent: One indentation unit (default: 4 spaces).
    """

    def __init__(self, indent: str = "    ") -> None:
        self._unit = indent
        self._indent = ""
        self._lines: list[str] = []
        # The root frame tracks names declared outside any scope
        self._scopes: list[_Scope] = [_Scope(name="", kind="root")]

    @property
    def depth(self) -> int:
        """Number of scopes currently open."""
        return len(self._scopes) - 1

    def _write(self, text: str) -> None:
        self._lines.append(f"{self._indent}{text}")

    def _push_indent(self) -> None:
        self._indent = self._unit + self._indent

    def _pop_indent(self) -> None:
        if len(self._indent) <= len(self._unit):
            self._indent = ""
        else:
            self._indent = self._indent[: len(self._indent) - len(self._unit)]

    @staticmethod
    def _scope_identifier(name: str, kind: str) -> str:
        if kind == "namespace":
            return ".".join(sanitize(part) for part in name.split("."))
        return sanitize(name)

    def _declare(self, identifier: str) -> None:
        scope = self._scopes[-1]
        if identifier in scope.declared:
            raise DuplicateIdentifier(identifier, scope.name)
        scope.declared.add(identifier)

    # ── Structure ───────────────────────────────────────────────

    def write_header(self) -> None:
        self._write(HEADER)

    def begin_scope(
        self,
        name: str | None,
        kind: Literal["class", "namespace"] = "class",
    ) -> None:
        """Open a class (or namespace) scope. No-op for an empty name."""
        if not name:
            return

        identifier = self._scope_identifier(name, kind)
        self._declare(identifier)

        if kind == "namespace":
            self._write(f"namespace {identifier}")
        else:
            self._write(f"public static class {identifier}")
        self._write("{")
        self._push_indent()

        scope = _Scope(name=identifier, kind=kind)
        if kind == "class":
            # C# forbids a member named like its enclosing class
            scope.declared.add(identifier)
        self._scopes.append(scope)

    def end_scope(self, name: str | None) -> None:
        """Close the innermost scope, which must be ``name``.

        Raises:
            ScopeError: If ``name`` is not the innermost open scope.
        """
        if not name:
            return

        if self.depth == 0:
            raise ScopeError(f"Cannot close '{name}': no scope is open")
        current = self._scopes[-1]
        identifier = self._scope_identifier(name, current.kind)
        if current.name != identifier:
            raise ScopeError(
                f"Cannot close '{identifier}': innermost open scope is '{current.name}'"
            )

        self._scopes.pop()
        self._pop_indent()
        self._write("}")

    # ── Declarations ────────────────────────────────────────────

    def write_string_constant(self, identifier: str, value: str) -> None:
        identifier = sanitize(identifier)
        self._declare(identifier)
        self._write(f'public const string {identifier} = "{escape_string(value)}";')

    def write_integer_constant(self, identifier: str, value: int) -> None:
        """Raises ConstantOutOfRange if ``value`` needs more than 32 bits."""
        identifier = sanitize(identifier)
        try:
            literal = format_int(value)
        except ValueError as e:
            raise ConstantOutOfRange(identifier, value) from e
        self._declare(identifier)
        self._write(f"public const int {identifier} = {literal};")

    # ── Output ──────────────────────────────────────────────────

    def getvalue(self) -> str:
        """Return the emitted text.

        Raises:
            ScopeError: If any scope is still open.
        """
        if self.depth:
            open_names = ", ".join(s.name for s in self._scopes[1:])
            raise ScopeError(f"Unclosed scope(s): {open_names}")
        return "\n".join(self._lines) + "\n"
