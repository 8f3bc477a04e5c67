# SPDX-License-Identifier: MIT

import unittest
from urllib.parse import parse_qsl, urlsplit

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from cordauth import (
    BASE_AUTHORIZE_URI,
    BOT_AUTHORIZATION,
    EmptyScopeSet,
    InvalidArgument,
    Prompt,
    ResponseType,
    Scope,
    authorization_code_grant_url,
    bot_authorization_url,
    build_authorization_url,
)

console = Console()

BASE = "https://discord.com/oauth2/authorize"


class AuthorizationURLTestSuite(unittest.TestCase):
    """Tests for building authorization URLs."""

    def setUp(self):
        console.print(Panel(Text(f"Running: {self._testMethodName}", style="bold cyan")))

    def test_scenario(self):
        url = build_authorization_url(BASE, "123", "https://app.test/cb", "code", [Scope.bot, Scope.identify])
        self.assertEqual(
            url,
            BASE + "?client_id=123&redirect_uri=https%3A%2F%2Fapp.test%2Fcb&response_type=code&scope=bot%20identify",
        )

    def test_deterministic(self):
        args = (BASE, 42, "https://app.test/cb", ResponseType.code, [Scope.guilds_join, Scope.identify])
        kwargs = {"state": "abc", "permissions": 2112}
        self.assertEqual(build_authorization_url(*args, **kwargs), build_authorization_url(*args, **kwargs))

    def test_parameter_order(self):
        url = build_authorization_url(
            BASE, "1", "https://app.test/cb", "code", [Scope.bot], state="s", permissions=8
        )
        keys = [key for key, _ in parse_qsl(urlsplit(url).query)]
        self.assertEqual(keys, ["client_id", "redirect_uri", "response_type", "scope", "state", "permissions"])

        url = build_authorization_url(
            BASE, "1", "https://app.test/cb", "code", [Scope.bot],
            permissions=8, prompt=Prompt.none, guild_id=99, disable_guild_select=True,
        )
        self.assertTrue(url.endswith("&scope=bot&permissions=8&prompt=none&guild_id=99&disable_guild_select=true"))

    def test_optional_parameters_omitted(self):
        url = build_authorization_url(BASE, "1", "https://app.test/cb", "code", [Scope.identify])
        self.assertNotIn("state", url)
        self.assertNotIn("permissions", url)

    def test_redirect_uri_with_query_is_single_value(self):
        url = build_authorization_url(BASE, "1", "https://example.com/cb?x=1&y=2", "code", [Scope.identify])
        self.assertIn("redirect_uri=https%3A%2F%2Fexample.com%2Fcb%3Fx%3D1%26y%3D2&", url)

        params = parse_qsl(urlsplit(url).query)
        self.assertEqual(len(params), 4)
        self.assertEqual(dict(params)["redirect_uri"], "https://example.com/cb?x=1&y=2")

    def test_state_is_encoded(self):
        url = build_authorization_url(BASE, "1", "https://app.test/cb", "code", [Scope.identify], state="a b&c")
        self.assertTrue(url.endswith("&state=a%20b%26c"))

    def test_scopes_keep_order_and_duplicates(self):
        url = build_authorization_url(
            BASE, "1", "https://app.test/cb", "code", [Scope.identify, Scope.email, Scope.identify]
        )
        self.assertIn("scope=identify%20email%20identify", url)

    def test_empty_scope_set(self):
        with self.assertRaises(EmptyScopeSet):
            build_authorization_url(BASE, "1", "https://app.test/cb", "code", [])

    def test_invalid_arguments(self):
        with self.assertRaises(InvalidArgument):
            build_authorization_url(BASE, "", "https://app.test/cb", "code", [Scope.bot])
        with self.assertRaises(InvalidArgument):
            build_authorization_url(BASE, "1", "", "code", [Scope.bot])
        with self.assertRaises(InvalidArgument):
            build_authorization_url(BASE, "1", "https://app.test/cb", "id_token", [Scope.bot])
        with self.assertRaises(InvalidArgument):
            build_authorization_url(BASE, "1", "https://app.test/cb", "code", ["bot"])
        with self.assertRaises(InvalidArgument):
            build_authorization_url(BASE, "1", "https://app.test/cb", "code", [Scope.bot], prompt="always")

    def test_invalid_permissions(self):
        for permissions in (True, "8", 8.0, -1):
            with self.subTest(permissions=permissions):
                with self.assertRaises(InvalidArgument):
                    build_authorization_url(
                        BASE, "1", "https://app.test/cb", "code", [Scope.bot], permissions=permissions
                    )

        url = build_authorization_url(BASE, "1", "https://app.test/cb", "code", [Scope.bot], permissions=0)
        self.assertTrue(url.endswith("&permissions=0"))

    def test_endpoint_with_existing_query(self):
        url = build_authorization_url(
            "https://example.test/auth?lang=en", "1", "https://app.test/cb", "code", [Scope.identify]
        )
        self.assertTrue(url.startswith("https://example.test/auth?lang=en&client_id=1&redirect_uri="))
        self.assertEqual(url.count("?"), 1)

    def test_bot_authorization_url(self):
        url = bot_authorization_url(249608697955745802, "https://app.test/cb", permissions=2112)
        self.assertEqual(
            url,
            BASE_AUTHORIZE_URI
            + "?client_id=249608697955745802&redirect_uri=https%3A%2F%2Fapp.test%2Fcb"
            + "&response_type=code&scope=bot&permissions=2112",
        )
        self.assertEqual(BOT_AUTHORIZATION.scopes, (Scope.bot,))

    def test_authorization_code_grant_url(self):
        url = authorization_code_grant_url(
            "249608697955745802",
            "https://myapplication.website",
            [Scope.guilds_join, Scope.identify],
            state="15773059ghq9183habn",
        )
        self.assertEqual(
            url,
            BASE_AUTHORIZE_URI
            + "?client_id=249608697955745802&redirect_uri=https%3A%2F%2Fmyapplication.website"
            + "&response_type=code&scope=guilds.join%20identify&state=15773059ghq9183habn",
        )

    def test_preset_base_endpoint_override(self):
        url = BOT_AUTHORIZATION.url("1", "https://app.test/cb", base_authorize_endpoint="https://example.test/auth")
        self.assertTrue(url.startswith("https://example.test/auth?client_id=1&"))


if __name__ == "__main__":
    unittest.main()
