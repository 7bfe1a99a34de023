"""Tests for GameConfig defaults and startup validation."""

from __future__ import annotations

import dataclasses
import unittest

from geocoin.config import GameConfig
from geocoin.core.errors import ConfigurationError
from geocoin.core.models import LatLng


class TestDefaults(unittest.TestCase):

    def test_defaults(self):
        cfg = GameConfig()
        self.assertEqual(cfg.tile_degrees, 1e-4)
        self.assertEqual(cfg.neighborhood_size, 8)
        self.assertEqual(cfg.cache_spawn_probability, 0.1)
        self.assertEqual(cfg.max_coins_per_cache, 3)
        self.assertFalse(cfg.randomize_coin_count)

    def test_start_point(self):
        cfg = GameConfig()
        self.assertEqual(cfg.start_point, LatLng(36.98949379578401, -122.06277128548504))

    def test_frozen(self):
        cfg = GameConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.tile_degrees = 1.0  # type: ignore[misc]


class TestValidation(unittest.TestCase):

    def test_non_positive_tile_width(self):
        for value in (0.0, -1e-4, float("inf"), float("nan")):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError):
                    GameConfig(tile_degrees=value)

    def test_negative_radius(self):
        with self.assertRaises(ConfigurationError):
            GameConfig(neighborhood_size=-1)

    def test_probability_out_of_range(self):
        for value in (-0.01, 1.01):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError):
                    GameConfig(cache_spawn_probability=value)

    def test_non_numeric_values_are_configuration_errors(self):
        for field, value in (
            ("tile_degrees", "0.1"),
            ("tile_degrees", None),
            ("tile_degrees", True),
            ("cache_spawn_probability", "x"),
            ("cache_spawn_probability", None),
        ):
            with self.subTest(field=field, value=value):
                with self.assertRaises(ConfigurationError) as ctx:
                    GameConfig(**{field: value})
                self.assertEqual(ctx.exception.param_name, field)

    def test_probability_edges_allowed(self):
        GameConfig(cache_spawn_probability=0.0)
        GameConfig(cache_spawn_probability=1.0)

    def test_max_coins(self):
        with self.assertRaises(ConfigurationError):
            GameConfig(max_coins_per_cache=0)

    def test_unknown_log_level(self):
        with self.assertRaises(ConfigurationError) as ctx:
            GameConfig(log_level="LOUD")
        self.assertEqual(ctx.exception.param_name, "log_level")
        GameConfig(log_level="debug")

    def test_error_names_parameter(self):
        with self.assertRaises(ConfigurationError) as ctx:
            GameConfig(neighborhood_size=-2)
        self.assertEqual(ctx.exception.param_name, "neighborhood_size")
        self.assertIn("non-negative", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
