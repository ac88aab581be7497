"""
Tests for short id generation strategies.
"""

import re

import pytest

from shortener_app.services.short_id_strategies import (
    RandomShortIdStrategy,
    UuidShortIdStrategy
)
from shortener_app.services import short_id_factory
from shortener_app.services.short_id_factory import (
    ShortIdFactory,
    ShortIdStrategyType
)

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


class TestUuidStrategy:
    """Test UUID/base64 strategy"""

    def test_generates_eight_url_safe_chars_by_default(self):
        """Test that the default id is 8 URL-safe characters"""
        code = UuidShortIdStrategy().generate()

        assert len(code) == 8
        assert URL_SAFE.match(code)

    def test_custom_length(self):
        strategy = UuidShortIdStrategy(length=12)

        assert len(strategy.generate()) == 12

    def test_full_length_uses_all_bits(self):
        strategy = UuidShortIdStrategy(length=22)

        code = strategy.generate()
        assert len(code) == 22
        assert "=" not in code

    @pytest.mark.parametrize("length", [0, -1, 23])
    def test_rejects_out_of_range_length(self, length):
        with pytest.raises(ValueError):
            UuidShortIdStrategy(length=length)

    def test_ids_do_not_repeat(self):
        """Test that a batch of ids has no duplicates"""
        strategy = UuidShortIdStrategy()

        codes = {strategy.generate() for _ in range(1000)}

        assert len(codes) == 1000


class TestRandomStrategy:
    """Test alphanumeric random strategy"""

    def test_generates_alphanumeric(self):
        strategy = RandomShortIdStrategy(length=10)

        code = strategy.generate()

        assert len(code) == 10
        assert code.isalnum()

    def test_rejects_zero_length(self):
        with pytest.raises(ValueError):
            RandomShortIdStrategy(length=0)


class TestShortIdFactory:
    """Test strategy factory"""

    def test_creates_uuid_strategy(self):
        strategy = ShortIdFactory.create_strategy(ShortIdStrategyType.UUID)
        assert isinstance(strategy, UuidShortIdStrategy)

    def test_creates_random_strategy(self):
        strategy = ShortIdFactory.create_strategy(ShortIdStrategyType.RANDOM, length=6)
        assert isinstance(strategy, RandomShortIdStrategy)
        assert strategy.length == 6

    def test_creates_default_from_settings(self):
        """Test factory uses settings when no type specified"""
        strategy = ShortIdFactory.create_strategy()
        assert isinstance(strategy, (UuidShortIdStrategy, RandomShortIdStrategy))

    def test_unknown_strategy_name(self):
        with pytest.raises(ValueError):
            ShortIdStrategyType("md5")

    def test_factory_rejects_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown strategy type"):
            ShortIdFactory.create_strategy("md5")

    def test_factory_rejects_unknown_strategy_from_settings(self, monkeypatch):
        monkeypatch.setattr(short_id_factory.settings, "short_id_strategy", "md5")

        with pytest.raises(ValueError):
            ShortIdFactory.create_strategy()

    def test_factory_rejects_bad_length(self):
        with pytest.raises(ValueError):
            ShortIdFactory.create_strategy(ShortIdStrategyType.UUID, length=0)
