"""Property-based tests for the serialize → parse contract.

The serialized format is the file format: whatever the serializer writes,
the parser must read back to an equal document, and a second pass must be
byte-identical.
"""

from __future__ import annotations

from hypothesis import example, given
from hypothesis import strategies as st

from tests.strategies import translation_documents, translation_keys
from transync import SyncConfig, merge_keys, parse_document, serialize_document, synchronize
from transync.enums import QuoteStyle
from transync.model import TranslationDocument


class TestSerializeParseRoundtrip:
    """Round-trip properties of the document format."""

    def test_quote_and_backslash_in_value(self) -> None:
        """A value with an embedded quote and backslash survives unchanged."""
        document = TranslationDocument({"en": {"path": 'C:\\dir\\"quoted" it\'s'}})

        for style in QuoteStyle:
            parsed = parse_document(serialize_document(document, quote_style=style))

            assert parsed == document

    def test_backslash_in_language_code(self) -> None:
        """A language code with a backslash keeps its length across passes."""
        existing = "<?php\n\nreturn [\n    'e\\x' => [\n        'a' => 'A',\n    ]\n];\n"

        once = synchronize("{{ __('a') }}", existing)

        assert "    'e\\x' => [\n" in once
        assert parse_document(once) == TranslationDocument({"e\\x": {"a": "A"}})
        assert synchronize("{{ __('a') }}", once) == once

    @given(translation_documents(min_languages=1), st.sampled_from(list(QuoteStyle)))
    @example(TranslationDocument({"en": {"]": "],", "//": "#"}}), QuoteStyle.DOUBLE)
    @example(TranslationDocument({"e\\x": {"a": "A"}, "\\": {}}), QuoteStyle.SINGLE)
    def test_parse_inverts_serialize(
        self, document: TranslationDocument, style: QuoteStyle
    ) -> None:
        """Property: parse(serialize(d)) == d, language order included."""
        parsed = parse_document(serialize_document(document, quote_style=style, validate=True))

        assert parsed is not None
        assert parsed == document
        assert parsed.language_codes == document.language_codes

    @given(translation_documents(min_languages=1))
    def test_serialize_is_stable(self, document: TranslationDocument) -> None:
        """Property: serialize(parse(serialize(d))) == serialize(d)."""
        text = serialize_document(document)
        parsed = parse_document(text)

        assert parsed is not None
        assert serialize_document(parsed) == text


class TestSyncProperties:
    """Properties of the full synchronization pass."""

    @given(
        st.lists(translation_keys(), min_size=1, max_size=6),
        translation_documents(),
        st.sampled_from(list(QuoteStyle)),
    )
    def test_sync_is_idempotent(
        self, keys: list[str], document: TranslationDocument, style: QuoteStyle
    ) -> None:
        """Property: syncing the output again is a no-op."""
        markup = " ".join(
            "{{ __('" + key.replace("\\", "\\\\").replace("'", "\\'") + "') }}" for key in keys
        )
        config = SyncConfig(quote_style=style)
        existing = serialize_document(document) if not document.is_empty else ""

        once = synchronize(markup, existing, config=config)

        assert synchronize(markup, once, config=config) == once

    @given(st.lists(translation_keys(), min_size=1, max_size=6))
    def test_merged_document_survives_roundtrip(self, keys: list[str]) -> None:
        """Property: a merged document parses back to itself."""
        merged = merge_keys(None, keys)

        assert parse_document(serialize_document(merged)) == merged
