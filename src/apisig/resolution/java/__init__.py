"""Java source support for building type catalogs with tree-sitter."""

from apisig.resolution.java.ast_utils import JavaAstUtils
from apisig.resolution.java.scanner import JavaSourceScanner

__all__ = ["JavaAstUtils", "JavaSourceScanner"]
