"""Signature parsing pipeline: tokenizer, model builder, hooks and canonicalizer."""

from apisig.parser.api_parser import ApiMethodParser
from apisig.parser.builder import ModelBuilder, check_argument_consistency
from apisig.parser.canonicalizer import (
    assign_unique_names,
    canonicalize,
    sort_key,
    sort_models,
    upper_case,
)
from apisig.parser.hooks import ProcessResults, chain, identity
from apisig.parser.tokenizer import (
    SignatureTokens,
    clean_signature,
    strip_type_parameters,
    tokenize_arguments,
    tokenize_signature,
)

__all__ = [
    "ApiMethodParser",
    "ModelBuilder",
    "ProcessResults",
    "SignatureTokens",
    "assign_unique_names",
    "canonicalize",
    "chain",
    "check_argument_consistency",
    "clean_signature",
    "identity",
    "sort_key",
    "sort_models",
    "strip_type_parameters",
    "tokenize_arguments",
    "tokenize_signature",
    "upper_case",
]
