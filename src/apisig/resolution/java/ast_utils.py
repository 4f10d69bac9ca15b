"""Java AST utility functions.

This module provides utility functions for extracting information
from tree-sitter AST nodes for Java source code.
"""

from __future__ import annotations

from tree_sitter import Node

from apisig.parser.tokenizer import MODIFIERS, strip_type_parameters


class JavaAstUtils:
    """Java AST utility functions for tree-sitter nodes."""

    @staticmethod
    def get_node_text(node: Node, content: bytes) -> str:
        """Get the text content of a node.

        Args:
            node: The AST node
            content: Source file content

        Returns:
            The text content of the node
        """
        return content[node.start_byte:node.end_byte].decode("utf-8")

    @staticmethod
    def get_type_text(type_node: Node, content: bytes) -> str:
        """Get a type as signature text, without type arguments or whitespace.

        Args:
            type_node: The type AST node
            content: Source file content

        Returns:
            Type text such as "String", "java.util.List" or "int[][]"
        """
        if type_node.type == "void_type":
            return "void"
        text = strip_type_parameters(JavaAstUtils.get_node_text(type_node, content))
        return "".join(text.split())

    @staticmethod
    def extract_package(root: Node, content: bytes) -> str:
        """Extract package name from the AST.

        Args:
            root: Root node of the AST
            content: Source file content

        Returns:
            Package name or empty string if no package declaration
        """
        for child in root.children:
            if child.type == "package_declaration":
                for node in child.children:
                    if node.type in ("scoped_identifier", "identifier"):
                        return JavaAstUtils.get_node_text(node, content)
        return ""

    @staticmethod
    def extract_imports(root: Node, content: bytes) -> list[str]:
        """Extract non-static import statements from the AST.

        Args:
            root: Root node of the AST
            content: Source file content

        Returns:
            List of imports, wildcard imports ending in ".*"
        """
        imports: list[str] = []
        for child in root.children:
            if child.type == "import_declaration":
                if any(c.type == "static" for c in child.children):
                    continue
                for node in child.children:
                    if node.type in ("scoped_identifier", "identifier"):
                        import_text = JavaAstUtils.get_node_text(node, content)
                        if any(c.type == "asterisk" for c in child.children):
                            import_text += ".*"
                        imports.append(import_text)
                        break
        return imports

    @staticmethod
    def extract_modifiers(node: Node) -> list[str]:
        """Extract modifiers from a declaration node.

        Args:
            node: The declaration AST node

        Returns:
            List of modifier strings
        """
        modifiers: list[str] = []
        for child in node.children:
            if child.type == "modifiers":
                for mod in child.children:
                    if mod.type in MODIFIERS:
                        modifiers.append(mod.type)
        return modifiers

    @staticmethod
    def extract_supertypes(type_node: Node, content: bytes) -> list[str]:
        """Extract extended and implemented types in declaration order.

        Covers class `extends`/`implements` clauses and interface `extends`.

        Args:
            type_node: The class/interface/enum/record declaration node
            content: Source file content

        Returns:
            List of supertype text without type arguments
        """
        supertypes: list[str] = []
        for child in type_node.children:
            if child.type not in ("superclass", "super_interfaces", "extends_interfaces"):
                continue
            for type_ref in child.children:
                if type_ref.type == "type_list":
                    supertypes.extend(
                        JavaAstUtils.get_type_text(t, content)
                        for t in type_ref.named_children
                    )
                elif type_ref.is_named:
                    supertypes.append(JavaAstUtils.get_type_text(type_ref, content))
        return supertypes

    @staticmethod
    def extract_parameter_types(callable_node: Node, content: bytes) -> list[str]:
        """Extract parameter types of a method declaration.

        Varargs parameters keep their "..." suffix; C-style array dimensions on
        the parameter name are folded into the type.

        Args:
            callable_node: The method declaration node
            content: Source file content

        Returns:
            List of parameter type text in declaration order
        """
        params_node = callable_node.child_by_field_name("parameters")
        if params_node is None:
            return []

        param_types: list[str] = []
        for child in params_node.named_children:
            if child.type == "formal_parameter":
                type_node = child.child_by_field_name("type")
                if type_node is None:
                    continue
                type_text = JavaAstUtils.get_type_text(type_node, content)
                dims_node = child.child_by_field_name("dimensions")
                if dims_node is not None:
                    type_text += "".join(JavaAstUtils.get_node_text(dims_node, content).split())
                param_types.append(type_text)
            elif child.type == "spread_parameter":
                for subchild in child.named_children:
                    if subchild.type not in ("modifiers", "variable_declarator"):
                        param_types.append(
                            JavaAstUtils.get_type_text(subchild, content) + "..."
                        )
                        break
        return param_types
