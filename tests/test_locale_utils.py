"""Tests for locale_utils and core.babel_compat (display names via Babel)."""

from __future__ import annotations

import pytest

from transync.core import BabelImportError, is_babel_available, require_babel
from transync.core import babel_compat
from transync.locale_utils import (
    describe_language,
    get_babel_locale,
    language_display_name,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale()."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("pt-BR", "pt_BR"), ("en", "en"), ("zh_CN", "zh_CN")],
    )
    def test_bcp47_to_posix(self, code: str, expected: str) -> None:
        """Hyphens become underscores."""
        assert normalize_locale(code) == expected


class TestBabelCompat:
    """Test the optional dependency layer."""

    def test_babel_available_in_test_env(self) -> None:
        """The test extra installs Babel."""
        assert is_babel_available()
        require_babel("test")

    def test_require_babel_when_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A missing Babel raises BabelImportError naming the feature."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)

        with pytest.raises(BabelImportError, match="language names") as exc_info:
            require_babel("language names")

        assert exc_info.value.feature == "language names"
        assert "transync[babel]" in str(exc_info.value)

    def test_describe_without_babel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without Babel, codes are shown as-is."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        monkeypatch.setattr("transync.locale_utils.is_babel_available", lambda: False)

        assert describe_language("ar") == "ar"


class TestDisplayNames:
    """Test display names from CLDR data."""

    def setup_method(self) -> None:
        """Start every test with an empty locale cache."""
        get_babel_locale.cache_clear()

    def test_known_languages(self) -> None:
        """Known codes get English names."""
        assert language_display_name("ar") == "Arabic"
        assert language_display_name("en") == "English"

    def test_bcp47_code(self) -> None:
        """BCP-47 codes are accepted."""
        name = language_display_name("pt-BR")

        assert name is not None
        assert name.startswith("Portuguese")

    def test_display_locale(self) -> None:
        """Names can be rendered in another language."""
        assert language_display_name("en", display_locale="fr") == "anglais"

    @pytest.mark.parametrize("code", ["xx", "not a code", ""])
    def test_unknown_codes(self, code: str) -> None:
        """Unknown or malformed codes have no display name."""
        assert language_display_name(code) is None

    def test_describe_language(self) -> None:
        """describe_language() pairs the code with its name."""
        assert describe_language("ar") == "ar (Arabic)"
        assert describe_language("xx") == "xx"

    def test_locale_cached(self) -> None:
        """get_babel_locale() caches Locale objects."""
        assert get_babel_locale("en") is get_babel_locale("en")
