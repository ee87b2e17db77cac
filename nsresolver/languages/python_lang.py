"""Python language analyser."""

from __future__ import annotations

import tree_sitter
import tree_sitter_python as ts_python

from nsresolver.config import TypeDeclaration, TypeKind


class PythonAnalyser:
    extensions = [".py"]
    language_name = "py"
    declares_namespace = False
    case_sensitive = True

    def get_language(self) -> tree_sitter.Language:
        return tree_sitter.Language(ts_python.language())

    def extract_types(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str
    ) -> list[TypeDeclaration]:
        types: list[TypeDeclaration] = []
        for child in tree.root_node.children:
            node = child
            if child.type == "decorated_definition":
                node = child.child_by_field_name("definition")
            if node is None or node.type != "class_definition":
                continue
            name = self._get_name(node)
            if name:
                types.append(TypeDeclaration(
                    name=name,
                    qualified_name=name,
                    kind=self._kind(node),
                    file=file_path,
                    line=node.start_point[0] + 1,
                ))
        return types

    def _get_name(self, node) -> str | None:
        for child in node.children:
            if child.type == "identifier":
                return child.text.decode("utf-8")
        return None

    def _kind(self, node) -> TypeKind:
        superclasses = node.child_by_field_name("superclasses")
        if superclasses is None:
            return TypeKind.CLASS
        bases = superclasses.text.decode("utf-8")
        if "Enum" in bases:
            return TypeKind.ENUM
        if "Protocol" in bases:
            return TypeKind.INTERFACE
        return TypeKind.CLASS
