"""API method parser.

Compiles a batch of method signatures for one target type into canonically
ordered, uniquely named method models:

1. Tokenize each signature
2. Resolve types and bind each signature to a member of the target type
3. Run the post-processing hook
4. Check argument name/type consistency across the batch
5. Sort and assign unique names
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from apisig.core.config import ApisigConfig, get_config
from apisig.core.models import MethodModel, TypeDescriptor
from apisig.parser.builder import ModelBuilder, check_argument_consistency
from apisig.parser.canonicalizer import canonicalize
from apisig.parser.hooks import ProcessResults, identity
from apisig.parser.tokenizer import tokenize_signature
from apisig.resolution.base import ResolutionContext, TypeResolver
from apisig.resolution.catalog import CatalogContext

logger = logging.getLogger(__name__)


class ApiMethodParser:
    """Parse method signatures of one target type.

    Each parse() call builds its batch from scratch; nothing is shared
    between calls except the immutable primitive table.
    """

    def __init__(
        self,
        target: str | TypeDescriptor,
        *,
        context: ResolutionContext | None = None,
        process_results: ProcessResults | None = None,
        config: ApisigConfig | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            target: Target type, as a qualified name or a resolved descriptor
            context: Resolution context (a core-types catalog if omitted)
            process_results: Hook applied to the bound batch before validation
            config: Settings (the cached global configuration if omitted)
        """
        self._config = config if config is not None else get_config()
        self._context = (
            context
            if context is not None
            else CatalogContext(default_namespace=self._config.default_namespace)
        )
        self._resolver = TypeResolver.for_context(self._context)
        self._target = (
            target if isinstance(target, TypeDescriptor) else self._resolver.resolve(target)
        )
        self._process_results = process_results if process_results is not None else identity
        self._signatures: list[str] = []

    @property
    def target(self) -> TypeDescriptor:
        return self._target

    @property
    def context(self) -> ResolutionContext:
        return self._context

    @property
    def signatures(self) -> list[str]:
        return list(self._signatures)

    @signatures.setter
    def signatures(self, signatures: Iterable[str]) -> None:
        self._signatures = list(signatures)

    def parse(self, signatures: Iterable[str] | None = None) -> list[MethodModel]:
        """Compile signatures into a finished batch.

        Args:
            signatures: Signatures to parse (the stored signatures if omitted)

        Returns:
            Method models sorted canonically, each with a unique name

        Raises:
            MalformedSignatureError: If a signature does not match the grammar
            TypeResolutionError: If a type name cannot be resolved
            MemberBindingError: If a signature matches no member of the target
            ArgumentConsistencyError: If an argument name has two types
            DuplicateSignatureError: For duplicates when configured as errors
        """
        if signatures is not None:
            self.signatures = signatures

        builder = ModelBuilder(self._target, self._context, self._resolver)
        models: list[MethodModel] = []
        for signature in self._signatures:
            logger.debug(f"Processing {signature}")
            models.append(builder.build(tokenize_signature(signature)))

        models = list(self._process_results(models))
        check_argument_consistency(models)
        return canonicalize(models, self._config.duplicate_policy)
