"""Type catalog used as the default resolution context.

A TypeCatalog records declared types with their imports, supertypes and
method declarations. CatalogContext resolves type names against it and binds
signatures to declared members, resolving each member's parameter types in
the scope of the file that declared it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from functools import partial

from pydantic import BaseModel, Field

from apisig.core.models import MemberHandle, TypeDescriptor, TypeKind
from apisig.resolution.base import ResolutionContext, TypeResolver
from apisig.resolution.core_types import CORE_TYPES, OBJECT_METHODS, OBJECT_TYPE, package_of

logger = logging.getLogger(__name__)


class MethodDecl(BaseModel):
    """A method declaration as written in source."""

    name: str = Field(..., description="Method name")
    parameter_types: list[str] = Field(
        default_factory=list, description="Parameter type text in declaration order"
    )
    return_type: str = Field("void", description="Declared return type text")
    modifiers: list[str] = Field(default_factory=list, description="Method modifiers")

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers


class TypeDecl(BaseModel):
    """A declared type together with the file scope it was declared in."""

    qualified_name: str = Field(..., description="Fully qualified name")
    package: str = Field("", description="Declaring package")
    imports: list[str] = Field(default_factory=list, description="Imports of the declaring file")
    supertypes: list[str] = Field(
        default_factory=list, description="Extended/implemented type text in declaration order"
    )
    is_interface: bool = False
    methods: list[MethodDecl] = Field(default_factory=list)

    def is_accessible(self, method: MethodDecl) -> bool:
        """Whether a method is part of the type's public API."""
        if self.is_interface:
            return "private" not in method.modifiers
        return "public" in method.modifiers


class TypeCatalog(BaseModel):
    """Registry of declared types keyed by qualified name."""

    types: dict[str, TypeDecl] = Field(default_factory=dict)

    @classmethod
    def with_core_types(cls) -> TypeCatalog:
        """Create a catalog that already knows the core platform types."""
        catalog = cls()
        for qualified_name in sorted(CORE_TYPES):
            catalog.add_type(qualified_name)
        for name, parameter_types, return_type, modifiers in OBJECT_METHODS:
            catalog.add_method(
                OBJECT_TYPE, name, list(parameter_types), return_type, list(modifiers)
            )
        return catalog

    def add_type(
        self,
        qualified_name: str,
        *,
        package: str | None = None,
        imports: list[str] | None = None,
        supertypes: list[str] | None = None,
        is_interface: bool = False,
    ) -> TypeDecl:
        """Register a type, replacing any previous declaration with the same name."""
        decl = TypeDecl(
            qualified_name=qualified_name,
            package=package_of(qualified_name) if package is None else package,
            imports=list(imports or []),
            supertypes=list(supertypes or []),
            is_interface=is_interface,
        )
        self.types[qualified_name] = decl
        return decl

    def add_method(
        self,
        owner: str,
        name: str,
        parameter_types: list[str] | None = None,
        return_type: str = "void",
        modifiers: list[str] | None = None,
    ) -> MethodDecl:
        """Register a method on an already registered type.

        Raises:
            KeyError: If the owner type is not in the catalog.
        """
        decl = self.types[owner]
        method = MethodDecl(
            name=name,
            parameter_types=list(parameter_types or []),
            return_type=return_type,
            modifiers=list(modifiers if modifiers is not None else ["public"]),
        )
        decl.methods.append(method)
        return method

    def get(self, qualified_name: str) -> TypeDecl | None:
        return self.types.get(qualified_name)

    def merge(self, other: TypeCatalog) -> TypeCatalog:
        """Merge two catalogs; declarations from other win on name clashes."""
        return TypeCatalog(types={**self.types, **other.types})

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self.types

    def __len__(self) -> int:
        return len(self.types)


class CatalogContext(ResolutionContext):
    """Resolution context backed by a TypeCatalog."""

    def __init__(
        self,
        catalog: TypeCatalog | None = None,
        default_namespace: str | None = None,
    ) -> None:
        if default_namespace is None:
            from apisig.core.config import get_config

            default_namespace = get_config().default_namespace
        self._catalog = catalog if catalog is not None else TypeCatalog.with_core_types()
        self._default_namespace = default_namespace

    @property
    def catalog(self) -> TypeCatalog:
        return self._catalog

    @property
    def default_namespace(self) -> str:
        return self._default_namespace

    def resolve(self, name: str) -> TypeDescriptor | None:
        qualified_name = name.replace("$", ".")
        if qualified_name in self._catalog:
            return TypeDescriptor.named(qualified_name)
        return None

    def bind(
        self,
        target: TypeDescriptor,
        name: str,
        parameter_types: Sequence[TypeDescriptor],
    ) -> MemberHandle | None:
        if target.kind != TypeKind.CLASS:
            return None

        wanted = tuple(parameter_types)
        for decl in self._type_and_supertypes(target.name):
            scope = self._scope_resolver(decl)
            for method in decl.methods:
                if method.name != name or len(method.parameter_types) != len(wanted):
                    continue
                if not decl.is_accessible(method):
                    continue
                declared = tuple(scope.try_resolve(text) for text in method.parameter_types)
                if declared == wanted:
                    return MemberHandle(
                        owner=decl.qualified_name,
                        name=method.name,
                        parameter_types=wanted,
                        return_type=method.return_type,
                        is_static=method.is_static,
                    )
        return None

    def _type_and_supertypes(self, qualified_name: str) -> Iterator[TypeDecl]:
        """Yield a type and then its supertypes breadth first, each once.

        Classes end with java.lang.Object even when no declared supertype
        leads there; interfaces do not inherit its members.
        """
        seen: set[str] = set()
        pending = [qualified_name]
        while pending:
            current = pending.pop(0)
            if current in seen:
                continue
            seen.add(current)
            decl = self._catalog.get(current)
            if decl is None:
                continue
            yield decl

            scope = self._scope_resolver(decl)
            for supertype_text in decl.supertypes:
                supertype = scope.try_resolve(supertype_text)
                if supertype is None or supertype.kind != TypeKind.CLASS:
                    logger.debug(f"Skipping unresolved supertype {supertype_text} of {current}")
                    continue
                pending.append(supertype.name)

        root = self._catalog.get(qualified_name)
        if root is not None and not root.is_interface and OBJECT_TYPE not in seen:
            object_decl = self._catalog.get(OBJECT_TYPE)
            if object_decl is not None:
                yield object_decl

    def _scope_resolver(self, decl: TypeDecl) -> TypeResolver:
        return TypeResolver(partial(self._resolve_in_scope, decl), self._default_namespace)

    def _resolve_in_scope(self, decl: TypeDecl, name: str) -> TypeDescriptor | None:
        """Resolve a name as written inside the file that declared decl."""
        direct = self.resolve(name)
        if direct is not None:
            return direct

        head, _, rest = name.partition(".")
        for candidate in self._scope_candidates(decl, head):
            qualified_name = f"{candidate}.{rest}" if rest else candidate
            if qualified_name in self._catalog:
                return TypeDescriptor.named(qualified_name)
        return None

    def _scope_candidates(self, decl: TypeDecl, simple_name: str) -> Iterator[str]:
        """Candidate qualified names for a simple name, in Java scoping order.

        1. Member types of the declaring type and its enclosing types
        2. Single-type imports
        3. Same package
        4. On-demand (wildcard) imports
        """
        enclosing = decl.qualified_name
        while enclosing in self._catalog:
            yield f"{enclosing}.{simple_name}"
            if "." not in enclosing:
                break
            enclosing = enclosing.rsplit(".", 1)[0]

        for imp in decl.imports:
            if imp.endswith(f".{simple_name}"):
                yield imp

        yield f"{decl.package}.{simple_name}" if decl.package else simple_name

        for imp in decl.imports:
            if imp.endswith(".*"):
                yield f"{imp[:-2]}.{simple_name}"
