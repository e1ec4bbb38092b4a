import unittest

from member_cache.domain.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from member_cache.infrastructure.config.config_manager import ConfigManager
from member_cache.infrastructure.files.file_url_resolver import FileUrlResolver
from member_cache.shared.constants import DEFAULT_API_URL, DEFAULT_AUTUMN_URL


class TestConfigManager(unittest.TestCase):

    def test_defaults(self):
        config = ConfigManager()
        self.assertEqual(config.get_api_url(), DEFAULT_API_URL)
        self.assertEqual(config.get_autumn_url(), DEFAULT_AUTUMN_URL)
        self.assertIsNone(config.get_token())
        self.assertFalse(config.is_bot())
        self.assertTrue(config.get_emit_join_events())
        config.validate()

    def test_grouped_values(self):
        config = ConfigManager({
            "api": {"base_url": "https://api.example/", "timeout_seconds": 5},
            "files": {"autumn_url": "https://files.example/"},
            "cache": {"emit_join_events": False},
        })
        self.assertEqual(config.get_api_url(), "https://api.example")
        self.assertEqual(config.get_autumn_url(), "https://files.example")
        self.assertEqual(config.get_timeout_seconds(), 5)
        self.assertFalse(config.get_emit_join_events())
        self.assertEqual(config.to_dict()["api"]["base_url"], "https://api.example")

    def test_set_token_creates_group(self):
        config = ConfigManager({})
        config.set_token("secret", bot=True)
        self.assertEqual(config.get_token(), "secret")
        self.assertTrue(config.is_bot())

    def test_validate_missing_base_url(self):
        with self.assertRaises(MissingConfigurationException) as ctx:
            ConfigManager({"api": {"base_url": ""}}).validate()
        self.assertEqual(ctx.exception.key, "api.base_url")

    def test_validate_timeout(self):
        for timeout in (0, -1, "10", True):
            with self.assertRaises(InvalidConfigurationException):
                ConfigManager({"api": {"timeout_seconds": timeout}}).validate()


class TestFileUrlResolver(unittest.TestCase):

    def test_urls(self):
        resolver = FileUrlResolver("https://files.example/")
        attachment = {"_id": "F1", "tag": "avatars"}
        self.assertEqual(resolver.generate_file_url(attachment), "https://files.example/avatars/F1")
        self.assertEqual(
            resolver.generate_file_url(attachment, max_side=64, size=32),
            "https://files.example/avatars/F1?max_side=64&size=32",
        )
        self.assertEqual(resolver.generate_file_url(None, fallback="x.png"), "x.png")
        self.assertIsNone(resolver.generate_file_url(None))


if __name__ == "__main__":
    unittest.main()
