# SPDX-License-Identifier: MIT

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from cordauth import BASE_TOKEN_URI, InvalidArgument, OAuth2Config

console = Console()


class OAuth2ConfigTestSuite(unittest.TestCase):
    """Tests for loading application credentials from the environment."""

    def setUp(self):
        console.print(Panel(Text(f"Running: {self._testMethodName}", style="bold cyan")))
        self.test_dir = Path(tempfile.mkdtemp())
        self.env_file = self.test_dir / ".env"

    def tearDown(self):
        self.env_file.unlink(missing_ok=True)
        self.test_dir.rmdir()

    def test_from_env_file(self):
        self.env_file.write_text(
            "DISCORD_CLIENT_ID=123\n"
            "DISCORD_CLIENT_SECRET=secret\n"
            "DISCORD_REDIRECT_URI=https://app.test/cb\n"
            "DISCORD_REVOKE_URI=https://example.test/revoke\n"
        )
        with mock.patch.dict(os.environ, {}, clear=True):
            config = OAuth2Config.from_env(self.env_file)

        self.assertEqual(config.client_id, "123")
        self.assertEqual(config.client_secret, "secret")
        self.assertEqual(config.redirect_uri, "https://app.test/cb")
        self.assertEqual(config.token_uri, BASE_TOKEN_URI)
        self.assertEqual(config.revoke_uri, "https://example.test/revoke")

    def test_environment_wins_over_file(self):
        self.env_file.write_text("DISCORD_CLIENT_ID=from-file\n")
        env = {
            "DISCORD_CLIENT_ID": "from-env",
            "DISCORD_CLIENT_SECRET": "secret",
            "DISCORD_REDIRECT_URI": "https://app.test/cb",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = OAuth2Config.from_env(self.env_file)
        self.assertEqual(config.client_id, "from-env")

    def test_from_env_searches_working_directory(self):
        self.env_file.write_text(
            "DISCORD_CLIENT_ID=456\n"
            "DISCORD_CLIENT_SECRET=secret\n"
            "DISCORD_REDIRECT_URI=https://app.test/cb\n"
        )
        cwd = os.getcwd()
        os.chdir(self.test_dir)
        try:
            with mock.patch.dict(os.environ, {}, clear=True):
                config = OAuth2Config.from_env()
        finally:
            os.chdir(cwd)

        self.assertEqual(config.client_id, "456")
        self.assertEqual(config.redirect_uri, "https://app.test/cb")

    def test_missing_variable(self):
        self.env_file.write_text("DISCORD_CLIENT_ID=123\n")
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(InvalidArgument):
                OAuth2Config.from_env(self.env_file)


if __name__ == "__main__":
    unittest.main()
