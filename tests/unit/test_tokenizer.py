"""Unit tests for the signature tokenizer."""

import pytest

from apisig.core.errors import MalformedSignatureError
from apisig.parser.tokenizer import (
    clean_signature,
    strip_type_parameters,
    tokenize_arguments,
    tokenize_signature,
)


class TestCleanSignature:
    """Tests for type parameter and modifier removal."""

    def test_strips_modifiers(self) -> None:
        assert clean_signature("public final String get(int id)") == "String get(int id)"

    def test_strips_nested_type_parameters(self) -> None:
        text = "Map<String, List<Integer>> lookup(Set<Map<String, Long>> keys)"
        assert clean_signature(text) == "Map lookup(Set keys)"

    def test_keeps_names_containing_modifier_words(self) -> None:
        """Modifiers are removed as whole words only."""
        assert clean_signature("void finalize(String nativeName)") == (
            "void finalize(String nativeName)"
        )

    def test_keeps_dollar_names_starting_with_modifier_words(self) -> None:
        """A "$" after a modifier word makes it part of an identifier."""
        assert clean_signature("void put(int native$, long final$id, char $static)") == (
            "void put(int native$, long final$id, char $static)"
        )

    def test_collapses_whitespace(self) -> None:
        assert clean_signature("  void \t run ( )  ;") == "void run ( ) ;"

    def test_strip_type_parameters_without_generics(self) -> None:
        assert strip_type_parameters("int[] ids") == "int[] ids"


class TestTokenizeSignature:
    """Tests for whole-line signature matching."""

    def test_no_arguments(self) -> None:
        tokens = tokenize_signature("void ping()")
        assert tokens.result_type == "void"
        assert tokens.name == "ping"
        assert tokens.arguments == ()

    def test_arguments_in_declaration_order(self) -> None:
        tokens = tokenize_signature("Message get(String id, int version);")
        assert tokens.name == "get"
        assert tokens.result_type == "Message"
        assert tokens.arguments == (("String", "id"), ("int", "version"))

    def test_array_types(self) -> None:
        tokens = tokenize_signature("int[] fetchAll(int[] ids)")
        assert tokens.result_type == "int[]"
        assert tokens.arguments == (("int[]", "ids"),)

    def test_varargs_type_text_kept(self) -> None:
        tokens = tokenize_signature("void flag(String... flags)")
        assert tokens.arguments == (("String...", "flags"),)

    def test_whitespace_is_insignificant(self) -> None:
        tokens = tokenize_signature("  Message   get (  String   id ,int version )  ; ")
        assert tokens.name == "get"
        assert tokens.arguments == (("String", "id"), ("int", "version"))

    def test_generic_arguments_removed(self) -> None:
        tokens = tokenize_signature(
            "public List<Message> search(String query, Map<String, List<String>> filters)"
        )
        assert tokens.result_type == "List"
        assert tokens.arguments == (("String", "query"), ("Map", "filters"))

    def test_signature_is_cleaned_text(self) -> None:
        tokens = tokenize_signature("public void ping();")
        assert tokens.signature == "void ping();"

    def test_dollar_suffixed_argument_name(self) -> None:
        tokens = tokenize_signature("void put(int native$)")
        assert tokens.arguments == (("int", "native$"),)

    def test_unicode_names(self) -> None:
        tokens = tokenize_signature("int größe(String straße, long \u00e9t\u00e9)")
        assert tokens.name == "größe"
        assert tokens.arguments == (("String", "straße"), ("long", "\u00e9t\u00e9"))

    @pytest.mark.parametrize(
        "signature",
        [
            "",
            "ping()",
            "void ping",
            "void ping(",
            "void (int x)",
            "void 1ping()",
            "void ping() extra",
        ],
    )
    def test_malformed_signatures(self, signature: str) -> None:
        with pytest.raises(MalformedSignatureError) as exc_info:
            tokenize_signature(signature)
        assert exc_info.value.signature == signature

    def test_missing_argument_name(self) -> None:
        with pytest.raises(MalformedSignatureError):
            tokenize_signature("void send(Message)")

    def test_invalid_argument_name(self) -> None:
        with pytest.raises(MalformedSignatureError) as exc_info:
            tokenize_signature("void send(Message 2message)")
        assert "2message" in (exc_info.value.details or "")


class TestTokenizeArguments:
    """Tests for argument list splitting."""

    def test_empty(self) -> None:
        assert tokenize_arguments("") == ()
        assert tokenize_arguments("   ") == ()

    def test_no_trailing_comma_required(self) -> None:
        assert tokenize_arguments("int a, long b") == (("int", "a"), ("long", "b"))

    def test_trailing_comma_accepted(self) -> None:
        assert tokenize_arguments("int a,") == (("int", "a"),)

    def test_comma_without_space(self) -> None:
        assert tokenize_arguments("int a,long b") == (("int", "a"), ("long", "b"))

    def test_extra_word_rejected(self) -> None:
        with pytest.raises(MalformedSignatureError):
            tokenize_arguments("int a b")
