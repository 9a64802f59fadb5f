"""Tests for barrelgen.exports.extractor."""

from __future__ import annotations

import textwrap

from barrelgen.exports.extractor import extract, find_export_lists, find_reexport_targets
from barrelgen.models import SELECTIVE, TYPE, VALUE, WILDCARD


def _source(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


def test_extract_named_declarations_with_kinds() -> None:
    text = _source(
        """
        export interface Email { id: string }
        export type Folder = 'inbox' | 'sent';
        export enum Theme { Light, Dark }
        export const enum Size { Small }
        export const MAX = 10;
        export function send(): void {}
        export async function fetchAll(): Promise<void> {}
        export abstract class Base {}
        export declare const injected: string;
        """
    )

    exports = extract(text, "business/email.ts")

    kinds = {symbol.name: (symbol.kind, symbol.declaration) for symbol in exports.symbols}
    assert kinds == {
        "Email": (TYPE, "interface"),
        "Folder": (TYPE, "type"),
        "Theme": (VALUE, "enum"),
        "Size": (VALUE, "enum"),
        "MAX": (VALUE, "const"),
        "send": (VALUE, "function"),
        "fetchAll": (VALUE, "function"),
        "Base": (VALUE, "class"),
        "injected": (VALUE, "const"),
    }
    assert all(symbol.module == "business/email.ts" for symbol in exports.symbols)
    assert exports.directives == []


def test_extract_wildcard_and_selective_directives() -> None:
    text = _source(
        """
        export * from './enums';
        export { Email ,  Folder, type User } from "./email";
        """
    )

    exports = extract(text, "business/index.ts")

    wildcard = [d for d in exports.directives if d.kind == WILDCARD]
    selective = [d for d in exports.directives if d.kind == SELECTIVE]
    assert [(d.target, d.names) for d in wildcard] == [("./enums", [])]
    assert [d.name for d in selective] == ["Email", "Folder", "User"]
    assert {d.target for d in selective} == {"./email"}
    assert [d.type_only for d in selective] == [False, False, True]
    assert exports.symbols == []


def test_extract_ignores_trailing_commas_and_local_export_lists() -> None:
    text = _source(
        """
        const helper = 1;
        export { helper };
        export type {
          A,
          B,
        } from './a';
        """
    )

    exports = extract(text, "index.ts")

    assert [d.name for d in exports.directives] == ["A", "B"]
    assert all(d.type_only for d in exports.directives)


def test_extract_ignores_malformed_exports() -> None:
    exports = extract("export { broken from './x'\nexport interface\n", "x.ts")

    assert exports.symbols == []
    assert exports.directives == []


def test_find_export_lists_resolves_aliases() -> None:
    entries = find_export_lists("export { internal as publicName, type Shape as Form } from './m';")

    assert [(e.source_name, e.name, e.type_only) for e in entries] == [
        ("internal", "publicName", False),
        ("Shape", "Form", True),
    ]
    assert {e.target for e in entries} == {"./m"}


def test_find_export_lists_strips_comments_inside_blocks() -> None:
    text = _source(
        """
        export {
          // shapes
          type Shape,
          /* helpers */ helper,
        } from './shapes';
        """
    )

    entries = find_export_lists(text)

    assert [(e.name, e.type_only) for e in entries] == [("Shape", True), ("helper", False)]


def test_symbol_kind_agrees_with_merged_declaration() -> None:
    exports = extract("export type Money = number;\nexport const Money = 0;\n", "money.ts")

    assert [(symbol.name, symbol.kind) for symbol in exports.symbols] == [("Money", VALUE)]


def test_find_reexport_targets_preserves_source_order_without_duplicates() -> None:
    text = _source(
        """
        // Email types
        export type { Email } from './email';
        export * from './enums';
        export { send } from './email';
        export { local };
        export * from '../shared';
        """
    )

    assert find_reexport_targets(text) == ["./email", "./enums", "../shared"]
