"""Signature tokenizer.

Splits one raw signature line into return type text, method name and
(type text, argument name) pairs. Type parameters and declaration modifiers
are removed before matching.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from apisig.core.errors import MalformedSignatureError
from apisig.core.models import IDENTIFIER_PATTERN

MODIFIERS = frozenset(
    {
        "public", "protected", "private", "static", "final", "abstract",
        "synchronized", "native", "strictfp", "default",
    }
)

_TYPE_PARAMETERS_PATTERN = re.compile(r"<[^<>]*>")
# "$" is an identifier character, so "native$" is a name and not a modifier
_MODIFIERS_PATTERN = re.compile(
    r"(?<![\w$])(?:" + "|".join(sorted(MODIFIERS)) + r")(?![\w$])"
)
_METHOD_PATTERN = re.compile(r"\s*(\S+)\s+(\S+?)\s*\(\s*([^()]*?)\s*\)\s*;?\s*")
_ARG_PATTERN = re.compile(r"\s*(\S+)\s+([^\s,]+)\s*(?:,|$)")


@dataclass(frozen=True)
class SignatureTokens:
    """Textual pieces of one signature, before any type resolution."""

    signature: str
    result_type: str
    name: str
    arguments: tuple[tuple[str, str], ...]


def strip_type_parameters(text: str) -> str:
    """Remove every <...> group, innermost first, so nested generics vanish."""
    previous = None
    while previous != text:
        previous = text
        text = _TYPE_PARAMETERS_PATTERN.sub("", text)
    return text


def clean_signature(signature: str) -> str:
    """Strip type parameters and modifiers and collapse whitespace."""
    text = strip_type_parameters(signature)
    text = _MODIFIERS_PATTERN.sub(" ", text)
    return " ".join(text.split())


def tokenize_signature(signature: str) -> SignatureTokens:
    """Tokenize one signature line.

    Args:
        signature: Raw text such as "public String get(int id, String... keys);"

    Returns:
        SignatureTokens with argument pairs in declaration order

    Raises:
        MalformedSignatureError: If the line does not match the grammar
    """
    cleaned = clean_signature(signature)
    method_match = _METHOD_PATTERN.fullmatch(cleaned)
    if not method_match:
        raise MalformedSignatureError(signature)

    result_type, name, arg_text = method_match.groups()
    if not IDENTIFIER_PATTERN.match(name):
        raise MalformedSignatureError(signature, details=f"Invalid method name {name!r}")

    return SignatureTokens(
        signature=cleaned,
        result_type=result_type,
        name=name,
        arguments=tokenize_arguments(arg_text, signature),
    )


def tokenize_arguments(arg_text: str, signature: str | None = None) -> tuple[tuple[str, str], ...]:
    """Split an argument list into (type text, name) pairs.

    Every character of the list must belong to some argument; the last
    argument needs no trailing comma.

    Raises:
        MalformedSignatureError: If the list contains anything else
    """
    arguments: list[tuple[str, str]] = []
    position = 0
    arg_text = arg_text.strip()
    while position < len(arg_text):
        arg_match = _ARG_PATTERN.match(arg_text, position)
        if arg_match is None or arg_match.end() == position:
            raise MalformedSignatureError(
                signature or arg_text,
                details=f"Unexpected argument text {arg_text[position:]!r}",
            )
        type_text, name = arg_match.groups()
        if not IDENTIFIER_PATTERN.match(name):
            raise MalformedSignatureError(
                signature or arg_text, details=f"Invalid argument name {name!r}"
            )
        arguments.append((type_text, name))
        position = arg_match.end()
    return tuple(arguments)
