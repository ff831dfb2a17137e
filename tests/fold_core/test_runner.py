"""
tests/fold_core/test_runner.py
Tests del driver de demostración.
"""
import io
import unittest
from contextlib import redirect_stdout

from sympy import Function, Symbol

from fold_core import runner


class TestRunner(unittest.TestCase):

    def run_main(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = runner.main()
        return code, buf.getvalue().splitlines()

    def test_exit_code_is_zero(self):
        code, _ = self.run_main()
        self.assertEqual(code, 0)

    def test_reported_values(self):
        _, lines = self.run_main()
        self.assertIn("Lista: 1 2 3 4 5", lines)
        self.assertIn("fold_right(Cons): 1 2 3", lines)
        self.assertIn("Length: 5", lines)
        self.assertIn("Sum: 15", lines)
        self.assertIn("Product: 120", lines)
        self.assertIn("Length (fold_left): 5", lines)
        self.assertIn("Reverse: 5 4 3 2 1", lines)

    def test_right_folds_are_identical(self):
        _, lines = self.run_main()
        self.assertIn("Fold right: 1 2 3", lines)
        self.assertIn("Fold right using fold left: 1 2 3", lines)
        self.assertIn("Simbólico fold_right: f(1, f(2, f(3, z)))", lines)
        self.assertIn("Simbólico fold_right_via_fold_left: f(1, f(2, f(3, z)))", lines)
        self.assertIn("Simbólico fold_left: f(f(f(z, 1), 2), 3)", lines)

    def test_show_folds_symbolic(self):
        f = Function('f')
        z = Symbol('z')
        right, right2, left = runner.show_folds_symbolic()
        self.assertEqual(right, right2)
        self.assertEqual(left, f(f(f(z, 1), 2), 3))


if __name__ == '__main__':
    unittest.main()
