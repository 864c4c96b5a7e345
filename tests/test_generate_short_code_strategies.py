"""
Tests for short code generation strategies and input validation.
"""
import re

import pytest

from tinyurl_app.config import Settings
from tinyurl_app.services.short_code_strategies import (
    HexShortCodeStrategy,
    RandomShortCodeStrategy
)
from tinyurl_app.services.short_code_factory import (
    ShortCodeFactory,
    ShortCodeStrategyType
)
from tinyurl_app.services.validators import (
    is_valid_custom_code,
    is_valid_url,
    normalize_custom_code
)


class TestHexStrategy:
    """Test random-bytes hex strategy"""

    def test_generates_six_lowercase_hex_chars(self):
        strategy = HexShortCodeStrategy(num_bytes=3)

        code = strategy.generate()

        assert len(code) == 6
        assert re.fullmatch(r"[0-9a-f]{6}", code)

    def test_length_follows_byte_count(self):
        strategy = HexShortCodeStrategy(num_bytes=4)
        assert strategy.length == 8
        assert len(strategy.generate()) == 8

    def test_codes_vary(self):
        """Random codes should practically never repeat in a small sample"""
        strategy = HexShortCodeStrategy(num_bytes=3)

        codes = {strategy.generate() for _ in range(50)}

        assert len(codes) > 45

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            HexShortCodeStrategy(num_bytes=0)


class TestRandomStrategy:
    """Test alphanumeric strategy"""

    def test_generates_correct_length(self):
        strategy = RandomShortCodeStrategy(length=7)

        code = strategy.generate()

        assert len(code) == 7
        assert code.isalnum()
        assert code.isascii()

    def test_generated_codes_pass_custom_code_rules(self):
        strategy = RandomShortCodeStrategy(length=8)
        for _ in range(20):
            assert is_valid_custom_code(strategy.generate())[0]


class TestShortCodeFactory:
    """Test strategy factory"""

    def test_creates_hex_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.HEX)
        assert isinstance(strategy, HexShortCodeStrategy)

    def test_creates_random_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.RANDOM)
        assert isinstance(strategy, RandomShortCodeStrategy)

    def test_caches_instances(self):
        first = ShortCodeFactory.create_strategy(ShortCodeStrategyType.HEX)
        second = ShortCodeFactory.create_strategy(ShortCodeStrategyType.HEX)
        assert first is second

    def test_creates_default_from_settings(self, monkeypatch):
        """Factory uses settings when no type specified"""
        from tinyurl_app.services import short_code_factory

        monkeypatch.setattr(short_code_factory.settings, "short_code_strategy", "random")
        strategy = ShortCodeFactory.create_strategy()

        assert isinstance(strategy, RandomShortCodeStrategy)

    def test_uses_passed_settings(self):
        app_settings = Settings(short_code_strategy="random", short_code_length=8, _env_file=None)
        strategy = ShortCodeFactory.create_strategy(app_settings=app_settings)

        assert isinstance(strategy, RandomShortCodeStrategy)
        assert len(strategy.generate()) == 8

    def test_caches_per_size(self):
        six = ShortCodeFactory.create_strategy(
            app_settings=Settings(short_code_strategy="random", short_code_length=6, _env_file=None)
        )
        eight = ShortCodeFactory.create_strategy(
            app_settings=Settings(short_code_strategy="random", short_code_length=8, _env_file=None)
        )

        assert six is not eight
        assert len(six.generate()) == 6
        assert len(eight.generate()) == 8


class TestValidators:

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "http://localhost:3000/path?q=1",
        "https://sub.example.co.uk/a/b#frag",
    ])
    def test_valid_urls(self, url):
        assert is_valid_url(url) == (True, "")

    @pytest.mark.parametrize("url", [None, "", "   ", "example.com", "ftp://example.com", "javascript:alert(1)"])
    def test_invalid_urls(self, url):
        valid, message = is_valid_url(url)
        assert valid is False
        assert message

    def test_long_url_is_valid(self):
        assert is_valid_url("https://example.com/" + "a" * 2100) == (True, "")

    def test_normalize_custom_code(self):
        assert normalize_custom_code("  abc123 ") == "abc123"
        assert normalize_custom_code("   ") is None
        assert normalize_custom_code(None) is None

    @pytest.mark.parametrize("code, expected", [
        ("abc123", True),
        ("ABCdef12", True),
        ("abc12", False),
        ("abcdefghi", False),
        ("abc_123", False),
        ("abc123\n", False),
        ("healthz", False),
        ("dbtest", False),
    ])
    def test_custom_code_rules(self, code, expected):
        assert is_valid_custom_code(code)[0] is expected

    def test_reserved_code_message(self):
        assert is_valid_custom_code("healthz") == (False, "customCode 'healthz' is reserved")
