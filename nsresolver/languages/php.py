"""PHP language analyser."""

from __future__ import annotations

import tree_sitter
import tree_sitter_php as ts_php

from nsresolver.config import TypeDeclaration, TypeKind

_DECLARATION_KINDS = {
    "class_declaration": TypeKind.CLASS,
    "interface_declaration": TypeKind.INTERFACE,
    "trait_declaration": TypeKind.TRAIT,
    "enum_declaration": TypeKind.ENUM,
}


class PhpAnalyser:
    extensions = [".php"]
    language_name = "php"
    declares_namespace = True
    case_sensitive = False

    def get_language(self) -> tree_sitter.Language:
        return tree_sitter.Language(ts_php.language_php())

    def extract_types(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str
    ) -> list[TypeDeclaration]:
        types: list[TypeDeclaration] = []
        self._walk_statements(tree.root_node, file_path, types, namespace="")
        return types

    def _walk_statements(self, node, file_path, types, namespace):
        # `namespace Foo;` applies to every following sibling, while
        # `namespace Foo { ... }` only applies to its body.
        for child in node.children:
            if child.type == "namespace_definition":
                name_node = child.child_by_field_name("name")
                name = name_node.text.decode("utf-8") if name_node else ""
                body = child.child_by_field_name("body")
                if body is not None:
                    self._walk_statements(body, file_path, types, namespace=name)
                else:
                    namespace = name

            elif child.type in _DECLARATION_KINDS:
                name_node = child.child_by_field_name("name")
                if name_node is None:
                    continue
                name = name_node.text.decode("utf-8")
                qualified = f"{namespace}\\{name}" if namespace else name
                types.append(TypeDeclaration(
                    name=name,
                    qualified_name=qualified,
                    kind=_DECLARATION_KINDS[child.type],
                    file=file_path,
                    line=child.start_point[0] + 1,
                ))
