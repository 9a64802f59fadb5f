"""Text rendering for barrel blocks and export listings."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..exports.classifier import ModuleClassification


def render_export_statement(names: Sequence[str], from_path: str, *, type_only: bool = False) -> str:
    keyword = "export type" if type_only else "export"
    lines = [f"{keyword} {{"]
    lines.extend(f"  {name}," for name in names)
    lines.append(f"}} from '{from_path}';")
    return "\n".join(lines) + "\n"


def render_module_block(
    classification: ModuleClassification, from_path: str, comment: Optional[str] = None
) -> str:
    """Render the type block then the value block re-exporting one module."""
    statements: List[str] = []
    if classification.types:
        statements.append(render_export_statement(classification.types, from_path, type_only=True))
    if classification.values:
        statements.append(render_export_statement(classification.values, from_path))
    if not statements:
        return ""
    prefix = f"// {comment}\n" if comment else ""
    return prefix + "\n".join(statements)


def render_wildcard(from_path: str) -> str:
    return f"export * from '{from_path}';\n"


def render_barrel(blocks: Sequence[str]) -> str:
    """Join module blocks with one blank line between them."""
    return "\n".join(block for block in blocks if block)


def render_export_listing(module_path: str, names: Sequence[str], from_path: str) -> str:
    """Render a single flat export block listing every name of a module."""
    return f"// {module_path}\n" + render_export_statement(names, from_path)
