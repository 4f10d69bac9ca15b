"""Core platform types known to every type catalog.

These are the types API signatures routinely mention without shipping their
sources. Only their names matter, except for java.lang.Object whose public
members every class inherits.
"""

from __future__ import annotations

CORE_TYPES: frozenset[str] = frozenset(
    {
        # java.lang
        "java.lang.Boolean",
        "java.lang.Byte",
        "java.lang.CharSequence",
        "java.lang.Character",
        "java.lang.Class",
        "java.lang.Double",
        "java.lang.Enum",
        "java.lang.Exception",
        "java.lang.Float",
        "java.lang.Integer",
        "java.lang.Iterable",
        "java.lang.Long",
        "java.lang.Number",
        "java.lang.Object",
        "java.lang.Runnable",
        "java.lang.RuntimeException",
        "java.lang.Short",
        "java.lang.String",
        "java.lang.StringBuilder",
        "java.lang.Throwable",
        "java.lang.Void",
        # java.util
        "java.util.Collection",
        "java.util.Date",
        "java.util.Iterator",
        "java.util.List",
        "java.util.Locale",
        "java.util.Map",
        "java.util.Optional",
        "java.util.Properties",
        "java.util.Set",
        "java.util.UUID",
        # java.io
        "java.io.File",
        "java.io.InputStream",
        "java.io.OutputStream",
        "java.io.Reader",
        "java.io.Writer",
        # java.math, java.net, java.nio
        "java.math.BigDecimal",
        "java.math.BigInteger",
        "java.net.URI",
        "java.net.URL",
        "java.nio.ByteBuffer",
        "java.nio.file.Path",
    }
)


OBJECT_TYPE = "java.lang.Object"

# (name, parameter types, return type, modifiers)
OBJECT_METHODS: tuple[tuple[str, tuple[str, ...], str, tuple[str, ...]], ...] = (
    ("equals", ("Object",), "boolean", ("public",)),
    ("getClass", (), "Class", ("public", "final", "native")),
    ("hashCode", (), "int", ("public", "native")),
    ("notify", (), "void", ("public", "final", "native")),
    ("notifyAll", (), "void", ("public", "final", "native")),
    ("toString", (), "String", ("public",)),
    ("wait", (), "void", ("public", "final")),
    ("wait", ("long",), "void", ("public", "final", "native")),
    ("wait", ("long", "int"), "void", ("public", "final")),
)


def package_of(qualified_name: str) -> str:
    """Return the package part of a qualified type name."""
    return qualified_name.rsplit(".", 1)[0] if "." in qualified_name else ""
