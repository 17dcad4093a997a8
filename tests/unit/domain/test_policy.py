import unittest

from colon_whitespace_linter.domain.policy import (
    InvalidPolicyError,
    PolicyResolver,
    WhitespacePolicy,
)


class TestPolicyResolver(unittest.TestCase):
    def test_recognised_names_resolve(self) -> None:
        self.assertEqual(PolicyResolver.resolve("nospace"), WhitespacePolicy.NOSPACE)
        self.assertEqual(PolicyResolver.resolve("onespace"), WhitespacePolicy.ONESPACE)
        self.assertEqual(PolicyResolver.resolve("space"), WhitespacePolicy.SPACE)

    def test_unrecognised_values_disable(self) -> None:
        for option in ("foo", "", "OneSpace", " onespace", "disabled", None, 1, True, {"policy": "space"}):
            with self.subTest(option=option):
                self.assertEqual(PolicyResolver.resolve(option), WhitespacePolicy.DISABLED)

    def test_rule_argument_list_uses_first_element(self) -> None:
        self.assertEqual(PolicyResolver.resolve(["onespace"]), WhitespacePolicy.ONESPACE)
        self.assertEqual(PolicyResolver.resolve(("nospace", "extra")), WhitespacePolicy.NOSPACE)
        self.assertEqual(PolicyResolver.resolve([]), WhitespacePolicy.DISABLED)
        self.assertEqual(PolicyResolver.resolve(["bogus", "space"]), WhitespacePolicy.DISABLED)

    def test_policy_instance_passes_through(self) -> None:
        self.assertIs(PolicyResolver.resolve(WhitespacePolicy.SPACE), WhitespacePolicy.SPACE)

    def test_strict_raises_on_unrecognised(self) -> None:
        with self.assertRaises(InvalidPolicyError) as ctx:
            PolicyResolver.resolve("foo", strict=True)
        self.assertIn("'foo'", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_strict_accepts_recognised(self) -> None:
        self.assertEqual(PolicyResolver.resolve("space", strict=True), WhitespacePolicy.SPACE)


class TestWhitespacePolicy(unittest.TestCase):
    def test_required_length(self) -> None:
        self.assertEqual(WhitespacePolicy.NOSPACE.required_length, 0)
        self.assertEqual(WhitespacePolicy.ONESPACE.required_length, 1)
        self.assertEqual(WhitespacePolicy.SPACE.required_length, 1)

    def test_is_enabled(self) -> None:
        self.assertFalse(WhitespacePolicy.DISABLED.is_enabled)
        self.assertTrue(WhitespacePolicy.NOSPACE.is_enabled)
