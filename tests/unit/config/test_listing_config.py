"""Tests for listing config merging and stored-defaults sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtable import config
from dirtable.cli import build_parser
from dirtable.config import ListingConfig, ListingDefaults
from dirtable.terminal import ColorMode


class ListingConfigTests(unittest.TestCase):
    def test_show_all_enables_every_column_without_rewriting_flags(self) -> None:
        cfg = ListingConfig(show_all=True)

        self.assertTrue(cfg.wants_size())
        self.assertTrue(cfg.wants_created())
        self.assertTrue(cfg.wants_updated())
        self.assertFalse(cfg.show_size)
        self.assertFalse(cfg.show_created)
        self.assertFalse(cfg.show_updated)

    def test_defaults_to_current_directory_and_no_columns(self) -> None:
        cfg = ListingConfig.from_args(build_parser().parse_args([]))

        self.assertEqual(cfg.path, "./")
        self.assertFalse(cfg.wants_metadata())
        self.assertIs(cfg.color, ColorMode.AUTO)

    def test_short_flags_map_to_columns(self) -> None:
        cfg = ListingConfig.from_args(build_parser().parse_args(["-s", "-u", "some/dir"]))

        self.assertEqual(cfg.path, "some/dir")
        self.assertTrue(cfg.show_size)
        self.assertTrue(cfg.show_updated)
        self.assertFalse(cfg.show_created)
        self.assertFalse(cfg.show_all)

    def test_stored_columns_are_added_to_cli_flags(self) -> None:
        defaults = ListingDefaults(columns=frozenset({"created"}))
        cfg = ListingConfig.from_args(build_parser().parse_args(["--size"]), defaults)

        self.assertTrue(cfg.show_size)
        self.assertTrue(cfg.show_created)
        self.assertFalse(cfg.show_updated)

    def test_cli_color_wins_over_stored_color(self) -> None:
        defaults = ListingDefaults(color=ColorMode.ALWAYS)

        from_store = ListingConfig.from_args(build_parser().parse_args([]), defaults)
        from_cli = ListingConfig.from_args(build_parser().parse_args(["--color", "never"]), defaults)
        no_color = ListingConfig.from_args(build_parser().parse_args(["--no-color"]), defaults)

        self.assertIs(from_store.color, ColorMode.ALWAYS)
        self.assertIs(from_cli.color, ColorMode.NEVER)
        self.assertIs(no_color.color, ColorMode.NEVER)


class StoredDefaultsTests(unittest.TestCase):
    def test_load_defaults_reads_columns_and_color(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"columns": ["size", "updated"], "color": "Always"}), encoding="utf-8")
            with mock.patch("dirtable.config.CONFIG_PATH", config_path):
                defaults = config.load_defaults()

        self.assertEqual(defaults.columns, frozenset({"size", "updated"}))
        self.assertIs(defaults.color, ColorMode.ALWAYS)

    def test_load_defaults_ignores_unknown_and_mistyped_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({"columns": ["size", "owner", 3, None], "color": "sometimes"}),
                encoding="utf-8",
            )
            with mock.patch("dirtable.config.CONFIG_PATH", config_path):
                defaults = config.load_defaults()

        self.assertEqual(defaults.columns, frozenset({"size"}))
        self.assertIsNone(defaults.color)

    def test_missing_or_malformed_file_means_no_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.json"
            malformed = Path(tmp) / "bad.json"
            malformed.write_text("{not json", encoding="utf-8")
            not_object = Path(tmp) / "list.json"
            not_object.write_text("[1, 2]", encoding="utf-8")

            for path in (missing, malformed, not_object):
                with mock.patch("dirtable.config.CONFIG_PATH", path):
                    self.assertEqual(config.load_config(), {})
                    self.assertEqual(config.load_defaults(), ListingDefaults())

    def test_columns_must_be_a_list(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"columns": "size"}), encoding="utf-8")
            with mock.patch("dirtable.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_defaults().columns, frozenset())


if __name__ == "__main__":
    unittest.main()
