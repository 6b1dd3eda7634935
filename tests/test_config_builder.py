import logging
from typing import NamedTuple, Dict
from unittest import TestCase

from nrel.transport.config.config_builder import ConfigBuilder


class TestConfigBuilder(TestCase):
    def test_build_using_defaults(self):
        defaults = {
            "a": 1,
            "b": "string",
        }

        test_class = ConfigBuilder.build(
            default_config=defaults,
            required_config=(),
            config_constructor=TestConfigBuilderAssets.constructor,
            config=None,
        )

        self.assertIsInstance(test_class, TestConfigBuilderAssets.TestClass)
        self.assertEqual(test_class.a, defaults["a"])
        self.assertEqual(test_class.b, defaults["b"])

    def test_build_overrides_defaults(self):
        test_class = ConfigBuilder.build(
            default_config={"a": 1, "b": "string"},
            required_config=(),
            config_constructor=TestConfigBuilderAssets.constructor,
            config={"a": 2},
        )

        self.assertEqual(test_class.a, 2)
        self.assertEqual(test_class.b, "string")

    def test_build_missing_required_field(self):
        with self.assertRaises(AttributeError):
            ConfigBuilder.build(
                default_config={},
                required_config=("a", "b"),
                config_constructor=TestConfigBuilderAssets.constructor,
                config={"a": 6},
            )

    def test_build_ignores_extra_fields(self):
        config = {
            "a": 6,
            "b": "foo",
            "extra": "will be ignored",
        }

        test_class = ConfigBuilder.build(
            default_config={},
            required_config=(),
            config_constructor=TestConfigBuilderAssets.constructor,
            config=config,
        )

        self.assertEqual(test_class.a, config["a"])
        self.assertEqual(test_class.b, config["b"])

    def test_build_names_every_missing_field(self):
        with self.assertRaises(AttributeError) as cm:
            ConfigBuilder.build(
                default_config={},
                required_config=("a", "b"),
                config_constructor=TestConfigBuilderAssets.constructor,
                config={},
            )

        self.assertIn("a, b", str(cm.exception))

    def test_build_warns_on_unknown_fields(self):
        with self.assertLogs("nrel.transport.config.config_builder", level=logging.WARNING) as log_cm:
            test_class = ConfigBuilder.build(
                default_config={"a": 1, "b": "string"},
                required_config=(),
                config_constructor=TestConfigBuilderAssets.constructor,
                config={"c": "typo"},
            )

        self.assertEqual(test_class.a, 1)
        self.assertIn("unknown config key(s): c", log_cm.output[0])


class TestConfigBuilderAssets:
    class TestClass(NamedTuple):
        a: int
        b: str

    @classmethod
    def constructor(cls, d: Dict):
        return TestConfigBuilderAssets.TestClass(d["a"], d["b"])
