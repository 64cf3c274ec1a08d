"""
C# generator — render an ExtractionResult as a static constants class.

Layout::

    // This file is automatically generated.  Changes will be overwritten.
    namespace Game.Constants          (only when a namespace is configured)
    {
        public static class Tags
        {
            public const string Player = "Player";
            public static class Master   (per-asset groups)
            {
                ...
            }
        }
    }
"""

from __future__ import annotations

from constgen.core.models.constants import ConstantEntry, ExtractionResult, ScopeGroup
from constgen.core.models.settings import GeneratorSettings
from constgen.core.models.template import GeneratedFile
from constgen.core.services.emitter import CodeEmitter


def _write_entry(emitter: CodeEmitter, entry: ConstantEntry) -> None:
    if entry.kind == "int":
        emitter.write_integer_constant(entry.identifier, int(entry.value))
    else:
        emitter.write_string_constant(entry.identifier, str(entry.value))


def render_constants(result: ExtractionResult, settings: GeneratorSettings) -> str:
    """Render the full file text for one domain."""
    namespace = settings.output.namespace
    emitter = CodeEmitter(indent=settings.output.indent)

    emitter.write_header()
    emitter.begin_scope(namespace, kind="namespace")
    emitter.begin_scope(result.class_name)

    for item in result.items:
        if isinstance(item, ScopeGroup):
            emitter.begin_scope(item.name)
            for entry in item.entries:
                _write_entry(emitter, entry)
            emitter.end_scope(item.name)
        else:
            _write_entry(emitter, item)

    emitter.end_scope(result.class_name)
    emitter.end_scope(namespace)
    return emitter.getvalue()


def generate_constants_file(result: ExtractionResult, settings: GeneratorSettings) -> GeneratedFile:
    """Render one domain into a GeneratedFile at its configured path.

    Raises:
        DuplicateIdentifier: If two names in one scope sanitize alike.
        EmptyIdentifier: If a group name has no usable characters.
    """
    return GeneratedFile(
        path=settings.output_path(result.domain),
        content=render_constants(result, settings),
        reason=(
            f"{result.class_name}: {result.constant_count} constant(s)"
            + (f" in {result.group_count} group(s)" if result.group_count else "")
        ),
    )
