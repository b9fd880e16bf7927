"""Tests for infrastructure.i18n.content module."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import (
    LocaleTag,
    LocalizedContentResolver,
    resolve_localized_content,
)
from tests.factories.i18n import make_locale


@pytest.fixture
def content_resolver():
    return LocalizedContentResolver(default_locale=make_locale("en"))


@pytest.mark.unit
class TestLocalizedContentResolver:
    """Tests for LocalizedContentResolver.resolve_content()."""

    def test_returns_best_match_content(self, content_resolver):
        """Content for the best matching key is returned."""
        content = {"en": "Hello", "fr": "Bonjour", "en_GB": "Hello, mate"}
        assert content_resolver.resolve_content(make_locale("en_GB"), content) == (
            "Hello, mate"
        )

    def test_language_fallback(self, content_resolver):
        """en_US falls back to the first en entry."""
        content = {"en": "Hello", "fr": "Bonjour", "en_GB": "Hello, mate"}
        assert content_resolver.resolve_content(make_locale("en_US"), content) == "Hello"

    def test_default_locale_fallback(self, content_resolver):
        """Unmatched language returns the default locale's content."""
        content = {"fr": "Bonjour", "en": "Hello"}
        assert content_resolver.resolve_content(make_locale("ja"), content) == "Hello"

    def test_root_key_fallback(self, content_resolver):
        """The empty key acts as the root locale."""
        content = {"fr": "Bonjour", "": "Hi"}
        assert content_resolver.resolve_content(make_locale("ja"), content) == "Hi"

    def test_unresolved_returns_none(self, content_resolver):
        """No match, no default and no root yields None."""
        content = {"fr": "Bonjour", "de": "Hallo"}
        assert content_resolver.resolve_content(make_locale("en_US"), content) is None

    def test_none_desired_uses_default_locale(self, content_resolver):
        """A missing desired locale is replaced by the default locale."""
        content = {"fr": "Bonjour", "en_US": "Howdy"}
        assert content_resolver.resolve_content(None, content) == "Howdy"

    @pytest.mark.parametrize("mapping", [{}, None])
    def test_empty_mapping_skips_resolver(self, mapping):
        """Empty input returns None without invoking the resolver."""
        resolver = MagicMock()
        content_resolver = LocalizedContentResolver(
            default_locale=make_locale("en"), resolver=resolver
        )

        assert content_resolver.resolve_content(make_locale("en"), mapping) is None
        resolver.resolve.assert_not_called()

    def test_mapping_order_is_pool_order(self):
        """Keys are passed to the resolver in mapping order."""
        resolver = MagicMock()
        resolver.resolve.return_value = LocaleTag("de")
        content_resolver = LocalizedContentResolver(
            default_locale=make_locale("en"), resolver=resolver
        )

        result = content_resolver.resolve_content(
            make_locale("de"), {"fr": "Bonjour", "de": "Hallo", "en": "Hello"}
        )

        assert result == "Hallo"
        desired, pool, default = resolver.resolve.call_args.args
        assert list(pool) == [LocaleTag("fr"), LocaleTag("de"), LocaleTag("en")]
        assert default == LocaleTag("en")

    def test_duplicate_keys_keep_last_value(self, content_resolver):
        """Keys differing only in case collapse to one candidate."""
        content = {"en_GB": "first", "EN_gb": "second"}
        assert content_resolver.resolve_content(make_locale("en_GB"), content) == (
            "second"
        )

    def test_malformed_key_raises(self, content_resolver):
        """Non-string keys are a caller contract violation."""
        with pytest.raises(ValueError):
            content_resolver.resolve_content(make_locale("en"), {None: "x"})


@pytest.mark.unit
class TestConfiguredDefaultLocale:
    """Default locale is read from settings when not passed in."""

    def test_uses_settings_default_locale(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LOCALE", "fr_CA")

        resolver = LocalizedContentResolver()

        assert resolver.default_locale == LocaleTag("fr", "CA")
        assert (
            resolver.resolve_content(make_locale("ja"), {"en": "Hi", "fr_CA": "Allo"})
            == "Allo"
        )

    def test_module_helper(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LOCALE", "en")

        result = resolve_localized_content(
            make_locale("es_MX"), {"fr": "Bonjour", "en": "Hello"}
        )

        assert result == "Hello"
