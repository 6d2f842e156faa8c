from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from vc_core.config import DATA_ENV, DEFAULT_OPTIONS, env_data_path, resolve_options  # noqa: E402
from vc_core.loader import load_descriptor, read_json, split_descriptor  # noqa: E402


class OptionTests(unittest.TestCase):
    def _write(self, tmp: str, payload) -> str:
        cfg_path = Path(tmp) / "cfg.json"
        cfg_path.write_text(json.dumps(payload))
        return str(cfg_path)

    def test_defaults(self):
        self.assertEqual(resolve_options(), DEFAULT_OPTIONS)

    def test_config_file_merged(self):
        with tempfile.TemporaryDirectory() as tmp:
            options = resolve_options(self._write(tmp, {"refresh_seconds": 0, "log_level": "debug", "layout": "wide"}))
        self.assertEqual(options["refresh_seconds"], 1)
        self.assertEqual(options["log_level"], "DEBUG")
        self.assertEqual(options["layout"], "wide")

    def test_overrides_beat_config_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            options = resolve_options(self._write(tmp, {"refresh_seconds": 30}), refresh_seconds=2, layout=None)
        self.assertEqual(options["refresh_seconds"], 2)
        self.assertIsNone(options["layout"])

    def test_invalid_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            for payload in ({"layout": "huge"}, {"log_level": "loud"}, {"refresh_seconds": "soon"}, ["not", "an", "object"]):
                with self.assertRaises(ValueError):
                    resolve_options(self._write(tmp, payload))

    def test_missing_and_malformed_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                resolve_options(str(Path(tmp) / "missing.json"))
            broken = Path(tmp) / "broken.json"
            broken.write_text("{")
            with self.assertRaises(ValueError):
                resolve_options(str(broken))

    def test_env_data_path(self):
        with mock.patch.dict(os.environ, {DATA_ENV: "/tmp/console.json"}):
            self.assertEqual(env_data_path(), Path("/tmp/console.json"))
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(env_data_path())


class DescriptorLoaderTests(unittest.TestCase):
    def test_load_descriptor(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "console.json"
            path.write_text(json.dumps({"console": {"id": 1}, "items": [{"type": 5}]}))
            console, items = load_descriptor(path)
        self.assertEqual(console, {"id": 1})
        self.assertEqual(items, [{"type": 5}])

    def test_items_default_to_empty(self):
        self.assertEqual(split_descriptor({"console": {}}), ({}, []))

    def test_invalid_descriptors(self):
        for payload in ([], {"items": []}, {"console": [], "items": []}, {"console": {}, "items": {}}):
            with self.assertRaises(ValueError):
                split_descriptor(payload)

    def test_missing_and_malformed_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.json"
            with self.assertRaises(ValueError):
                load_descriptor(missing)
            self.assertIsNone(read_json(missing))
            broken = Path(tmp) / "broken.json"
            broken.write_text("not json")
            with self.assertRaises(ValueError):
                load_descriptor(broken)
            self.assertIsNone(read_json(broken))


if __name__ == "__main__":
    unittest.main()
