"""Tests for config.SyncConfig."""

from __future__ import annotations

import dataclasses

import pytest

from transync import SyncConfig
from transync.constants import DEFAULT_LANGUAGE, IDENTITY_LANGUAGES, MAX_SOURCE_SIZE
from transync.enums import QuoteStyle


class TestSyncConfigDefaults:
    """Test default policy."""

    def test_defaults(self) -> None:
        """Defaults come from transync.constants."""
        config = SyncConfig()

        assert config.default_language == DEFAULT_LANGUAGE == "ar"
        assert config.identity_languages == IDENTITY_LANGUAGES == frozenset({"ar"})
        assert config.quote_style is QuoteStyle.DOUBLE
        assert config.max_source_size == MAX_SOURCE_SIZE

    def test_components_follow_config(self) -> None:
        """The extractor and serializer reflect the config."""
        config = SyncConfig(functions=["t"], directives=[])

        assert config.extractor.functions == ("t",)
        assert config.extractor.directives == ()
        assert config.extractor.extract("{{ t('a') }} @lang('b')") == ["a"]

    def test_iterables_normalized(self) -> None:
        """Lists and sets passed in are normalized to tuples and frozensets."""
        config = SyncConfig(identity_languages={"fr"}, functions=["t"])  # type: ignore[arg-type]

        assert config.identity_languages == frozenset({"fr"})
        assert config.functions == ("t",)

    def test_frozen(self) -> None:
        """SyncConfig is immutable."""
        config = SyncConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.default_language = "en"  # type: ignore[misc]

    def test_equality_ignores_components(self) -> None:
        """Configs with equal fields compare equal."""
        assert SyncConfig(default_language="en") == SyncConfig(default_language="en")


class TestSyncConfigValidation:
    """Test rejected configurations."""

    @pytest.mark.parametrize("language", ["", "e'n", 'e"n', "e`n", "e\\n"])
    def test_bad_default_language(self, language: str) -> None:
        """The default language must be writable as a block header."""
        with pytest.raises(ValueError, match="default_language"):
            SyncConfig(default_language=language)

    def test_bad_default_language_message(self) -> None:
        """The message names both rejected character classes."""
        with pytest.raises(ValueError, match="quote characters and backslashes"):
            SyncConfig(default_language="e\\n")

    def test_same_suffixes(self) -> None:
        """Markup and document suffixes must differ."""
        with pytest.raises(ValueError, match="must differ"):
            SyncConfig(markup_suffix=".php", document_suffix=".php")

    def test_empty_suffix(self) -> None:
        """Suffixes must be non-empty."""
        with pytest.raises(ValueError, match="non-empty"):
            SyncConfig(document_suffix="")

    def test_negative_size(self) -> None:
        """max_source_size must not be negative."""
        with pytest.raises(ValueError, match="max_source_size"):
            SyncConfig(max_source_size=-1)

    def test_no_call_names(self) -> None:
        """At least one function or directive name is needed."""
        with pytest.raises(ValueError, match="At least one"):
            SyncConfig(functions=(), directives=())
