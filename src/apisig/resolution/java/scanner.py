"""Java source scanner for type catalog construction.

This module scans Java source files with tree-sitter and records every
declared type with its file scope, supertypes and method declarations.
"""

from __future__ import annotations

import logging
from pathlib import Path

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser

from apisig.resolution.catalog import TypeCatalog
from apisig.resolution.java.ast_utils import JavaAstUtils

logger = logging.getLogger(__name__)

_TYPE_DECLARATIONS = (
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
)

_TYPE_BODIES = ("class_body", "interface_body", "enum_body", "enum_body_declarations")


class JavaSourceScanner:
    """Scan Java sources into a TypeCatalog.

    Collects type and method declarations only; method bodies are ignored.
    """

    def __init__(self, parser: Parser | None = None) -> None:
        """Initialize the scanner.

        Args:
            parser: Configured tree-sitter parser for Java (created if omitted)
        """
        self._parser = parser if parser is not None else Parser(Language(tsjava.language()))

    def scan_directory(
        self,
        source_path: Path,
        catalog: TypeCatalog | None = None,
        pattern: str | None = None,
    ) -> TypeCatalog:
        """Scan all Java files below a directory.

        Args:
            source_path: Root directory of Java source code
            catalog: Catalog to populate (a core-types catalog if omitted)
            pattern: File glob (defaults to the configured source glob)

        Returns:
            TypeCatalog containing all declarations
        """
        if pattern is None:
            from apisig.core.config import get_config

            pattern = get_config().source_glob
        if catalog is None:
            catalog = TypeCatalog.with_core_types()

        for java_file in sorted(source_path.rglob(pattern)):
            try:
                self.scan_source(java_file.read_bytes(), catalog)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to scan {java_file}: {e}")

        return catalog

    def scan_source(self, source: str | bytes, catalog: TypeCatalog | None = None) -> TypeCatalog:
        """Scan one Java compilation unit.

        Args:
            source: Java source text
            catalog: Catalog to populate (a core-types catalog if omitted)

        Returns:
            The populated catalog
        """
        if catalog is None:
            catalog = TypeCatalog.with_core_types()
        content = source.encode("utf-8") if isinstance(source, str) else source
        root = self._parser.parse(content).root_node

        package_name = JavaAstUtils.extract_package(root, content)
        imports = JavaAstUtils.extract_imports(root, content)
        self._scan_type_declarations(root, content, package_name, imports, catalog)
        return catalog

    def _scan_type_declarations(
        self,
        node: Node,
        content: bytes,
        package_name: str,
        imports: list[str],
        catalog: TypeCatalog,
        parent_type: str | None = None,
    ) -> None:
        """Recursively scan for type declarations.

        Args:
            node: Current AST node
            content: Source file content
            package_name: Current package name
            imports: Imports of the current file
            catalog: Catalog to populate
            parent_type: Enclosing type's qualified name (for nested types)
        """
        for child in node.children:
            if child.type in _TYPE_DECLARATIONS:
                name_node = child.child_by_field_name("name")
                if name_node is None:
                    continue

                type_name = JavaAstUtils.get_node_text(name_node, content)
                if parent_type:
                    qualified_name = f"{parent_type}.{type_name}"
                elif package_name:
                    qualified_name = f"{package_name}.{type_name}"
                else:
                    qualified_name = type_name

                catalog.add_type(
                    qualified_name,
                    package=package_name,
                    imports=imports,
                    supertypes=JavaAstUtils.extract_supertypes(child, content),
                    is_interface=child.type == "interface_declaration",
                )
                logger.debug(f"Catalogued type {qualified_name}")

                body_node = child.child_by_field_name("body")
                if body_node:
                    self._scan_method_declarations(body_node, content, qualified_name, catalog)
                    self._scan_type_declarations(
                        body_node, content, package_name, imports, catalog, qualified_name
                    )

            elif child.type in _TYPE_BODIES:
                self._scan_type_declarations(
                    child, content, package_name, imports, catalog, parent_type
                )

    def _scan_method_declarations(
        self,
        body_node: Node,
        content: bytes,
        owner_qualified_name: str,
        catalog: TypeCatalog,
    ) -> None:
        """Scan for method declarations in a type body.

        Args:
            body_node: The class/interface/enum body node
            content: Source file content
            owner_qualified_name: The owning type's qualified name
            catalog: Catalog to populate
        """
        for child in body_node.children:
            if child.type == "enum_body_declarations":
                self._scan_method_declarations(child, content, owner_qualified_name, catalog)
                continue
            if child.type != "method_declaration":
                continue

            name_node = child.child_by_field_name("name")
            type_node = child.child_by_field_name("type")
            if name_node is None or type_node is None:
                continue

            catalog.add_method(
                owner_qualified_name,
                JavaAstUtils.get_node_text(name_node, content),
                parameter_types=JavaAstUtils.extract_parameter_types(child, content),
                return_type=JavaAstUtils.get_type_text(type_node, content),
                modifiers=JavaAstUtils.extract_modifiers(child),
            )
