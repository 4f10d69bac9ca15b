"""Model builder: resolves tokenized signatures and binds them to members."""

from __future__ import annotations

import logging

from apisig.core.errors import ArgumentConsistencyError, MemberBindingError
from apisig.core.models import Argument, MethodModel, TypeDescriptor
from apisig.parser.tokenizer import SignatureTokens
from apisig.resolution.base import ResolutionContext, TypeResolver

logger = logging.getLogger(__name__)


class ModelBuilder:
    """Build MethodModels for one target type."""

    def __init__(
        self,
        target: TypeDescriptor,
        context: ResolutionContext,
        resolver: TypeResolver | None = None,
    ) -> None:
        self._target = target
        self._context = context
        self._resolver = resolver if resolver is not None else TypeResolver.for_context(context)

    @property
    def target(self) -> TypeDescriptor:
        return self._target

    def build(self, tokens: SignatureTokens) -> MethodModel:
        """Resolve all types of a signature and bind it to a target member.

        Raises:
            TypeResolutionError: If the result type or an argument type is unknown
            MemberBindingError: If no member has this name and exact parameter types
        """
        result_type = self._resolver.resolve(tokens.result_type)
        arguments = tuple(
            Argument(name=name, type=self._resolver.resolve(type_text))
            for type_text, name in tokens.arguments
        )

        argument_types = [argument.type for argument in arguments]
        member = self._context.bind(self._target, tokens.name, argument_types)
        if member is None:
            raise MemberBindingError(tokens.signature, self._target.name)

        logger.debug(f"Bound {tokens.signature} to {member}")
        return MethodModel(
            name=tokens.name,
            result_type=result_type,
            arguments=arguments,
            member=member,
        )


def check_argument_consistency(models: list[MethodModel]) -> None:
    """Check that each argument name has one type across the whole batch.

    Raises:
        ArgumentConsistencyError: Naming the argument and both types
    """
    argument_types: dict[str, TypeDescriptor] = {}
    for model in models:
        for argument in model.arguments:
            known = argument_types.setdefault(argument.name, argument.type)
            if known != argument.type:
                raise ArgumentConsistencyError(argument.name, known.name, argument.type.name)
