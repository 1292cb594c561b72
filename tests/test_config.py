import json
import unittest

import pytest

from fret_log.core.config import ConfigManager, ValidationConfig


class TestValidationConfig(unittest.TestCase):
    def test_defaults(self):
        config = ValidationConfig()
        self.assertEqual(config.pitch_tolerance, 50.0)
        self.assertEqual(config.minimum_note_duration, 0.2)
        self.assertEqual(config.timing_tolerance, 2.0)
        self.assertEqual(config.confidence_threshold, 0.6)
        self.assertEqual(config.passing_accuracy, 0.75)

    def test_partial_override(self):
        config = ValidationConfig().with_overrides(passing_accuracy=0.5)
        self.assertEqual(config.passing_accuracy, 0.5)
        self.assertEqual(config.confidence_threshold, 0.6)

    def test_unknown_override_rejected(self):
        with self.assertRaises(ValueError):
            ValidationConfig().with_overrides(tempo=120)

    def test_out_of_range_values_rejected(self):
        with self.assertRaises(ValueError):
            ValidationConfig(confidence_threshold=1.5)
        with self.assertRaises(ValueError):
            ValidationConfig(passing_accuracy=-0.1)
        with self.assertRaises(ValueError):
            ValidationConfig(minimum_note_duration=-1)

    def test_from_dict_ignores_unknown_keys(self):
        config = ValidationConfig.from_dict({"passing_accuracy": 0.9, "legacy": True})
        self.assertEqual(config.passing_accuracy, 0.9)

    def test_immutable(self):
        config = ValidationConfig()
        with self.assertRaises(AttributeError):
            config.passing_accuracy = 0.1


def test_missing_profile_is_created(tmp_path):
    manager = ConfigManager(str(tmp_path))
    config = manager.get_config("default")

    assert config == ValidationConfig()
    assert json.loads((tmp_path / "default.json").read_text()) == ValidationConfig().to_dict()


def test_update_persists(tmp_path):
    manager = ConfigManager(str(tmp_path))
    assert manager.update_config("strict", {"passing_accuracy": 1.0})

    reloaded = ConfigManager(str(tmp_path)).get_config("strict")
    assert reloaded.passing_accuracy == 1.0
    assert reloaded.confidence_threshold == 0.6


def test_invalid_update_is_rejected(tmp_path):
    manager = ConfigManager(str(tmp_path))
    assert not manager.update_config("default", {"passing_accuracy": 3.0})
    assert not manager.update_config("default", {"bogus": 1})
    assert manager.get_config("default") == ValidationConfig()


def test_missing_keys_filled_from_defaults(tmp_path):
    (tmp_path / "old.json").write_text(json.dumps({"minimum_note_duration": 0.3}))

    config = ConfigManager(str(tmp_path)).get_config("old")
    assert config.minimum_note_duration == 0.3
    assert config.passing_accuracy == 0.75


def test_corrupt_profile_falls_back_to_defaults(tmp_path):
    (tmp_path / "broken.json").write_text("{not json")

    assert ConfigManager(str(tmp_path)).get_config("broken") == ValidationConfig()


def test_reset(tmp_path):
    manager = ConfigManager(str(tmp_path))
    manager.update_config("default", {"confidence_threshold": 0.9})
    assert manager.reset_config("default")
    assert manager.get_config("default") == ValidationConfig()


@pytest.mark.parametrize("field", ValidationConfig.field_names())
def test_every_field_round_trips(tmp_path, field):
    manager = ConfigManager(str(tmp_path))
    assert manager.update_config("profile", {field: 0.5})
    assert getattr(ConfigManager(str(tmp_path)).get_config("profile"), field) == 0.5


def test_null_value_falls_back_to_defaults(tmp_path):
    (tmp_path / "nulls.json").write_text(json.dumps({"confidence_threshold": None}))

    assert ConfigManager(str(tmp_path)).get_config("nulls") == ValidationConfig()


def test_list_shaped_profile_falls_back_to_defaults(tmp_path):
    (tmp_path / "listy.json").write_text("[1, 2]")

    assert ConfigManager(str(tmp_path)).get_config("listy") == ValidationConfig()


def test_out_of_range_profile_falls_back_to_defaults(tmp_path):
    (tmp_path / "loose.json").write_text(json.dumps({"passing_accuracy": 7}))

    assert ConfigManager(str(tmp_path)).get_config("loose") == ValidationConfig()


def test_non_numeric_update_is_rejected(tmp_path):
    manager = ConfigManager(str(tmp_path))
    assert not manager.update_config("default", {"passing_accuracy": "high"})
    assert not manager.update_config("default", {"confidence_threshold": None})
    assert manager.get_config("default") == ValidationConfig()


def test_from_dict_rejects_non_numeric_values():
    with pytest.raises(ValueError):
        ValidationConfig.from_dict({"minimum_note_duration": None})
    with pytest.raises(ValueError):
        ValidationConfig.from_dict({"minimum_note_duration": "long"})


def test_non_numeric_field_rejected():
    with pytest.raises(ValueError):
        ValidationConfig(passing_accuracy="high")
    with pytest.raises(ValueError):
        ValidationConfig(confidence_threshold=True)
