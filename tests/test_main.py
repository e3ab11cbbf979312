import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from intinf.main import binary, evaluate, main


class TestMain(unittest.TestCase):
    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            main(list(argv))
        return out.getvalue(), err.getvalue()

    def test_demo(self):
        out, _ = self._run("demo")
        self.assertEqual(out.splitlines(), [
            "18446744073709551615 + 1 = 18446744073709551616",
            "18446744073709551615 * 71 = 1309718829233378164665",
        ])

    def test_binary_commands(self):
        self.assertEqual(self._run("add", "9", "1")[0], "9 + 1 = 10\n")
        self.assertEqual(self._run("sub", "3", "5")[0], "3 - 5 = -2\n")
        self.assertEqual(self._run("mul", "-4", "6")[0], "-4 * 6 = -24\n")

    def test_operands_are_normalized_in_output(self):
        self.assertEqual(binary('+', "007", "-0"), "7 + 0 = 7")

    def test_eval(self):
        out, _ = self._run("eval", "(2-7)*12")
        self.assertEqual(out, "(2 - 7) * 12 = -60\n")

    def test_evaluate_helper(self):
        self.assertEqual(evaluate("1+2*3"), "1 + 2 * 3 = 7")

    def test_invalid_digit_exits_with_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run("add", "12a", "1")
        self.assertEqual(ctx.exception.code, 1)

    def test_error_message_goes_to_stderr(self):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit):
                main(["eval", "1 +"])
        self.assertEqual(out.getvalue(), "")
        self.assertTrue(err.getvalue().startswith("Error: Syntax error"))

    def test_missing_command(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run()
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
