import unittest

from main import build_parser


class ParserTests(unittest.TestCase):
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        self.assertFalse(args.no_constraints)
        self.assertIsNone(args.max_candidates)
        self.assertEqual(args.oracle, "backtracking")
        self.assertEqual(args.log_level, "INFO")

    def test_flags(self) -> None:
        args = build_parser().parse_args(
            ["--no-constraints", "--max-candidates", "5", "--oracle", "cpsat"]
        )
        self.assertTrue(args.no_constraints)
        self.assertEqual(args.max_candidates, 5)
        self.assertEqual(args.oracle, "cpsat")

    def test_unknown_oracle_rejected(self) -> None:
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["--oracle", "guess"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
