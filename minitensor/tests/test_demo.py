"""
Tests for the demo.py driver.
"""

import contextlib
import importlib.util
import io
import pathlib
import unittest
from unittest import mock

DEMO_PATH = pathlib.Path(__file__).resolve().parents[2] / "demo.py"


def _load_demo():
    spec = importlib.util.spec_from_file_location("demo", DEMO_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestDemo(unittest.TestCase):

    def test_output(self):
        demo = _load_demo()
        out = io.StringIO()
        with mock.patch.object(demo, "setup_logging"), contextlib.redirect_stdout(out):
            self.assertEqual(demo.main([]), 0)
        self.assertEqual(out.getvalue().splitlines(), [
            "Dot product: 6.0",
            "Tensor (device: CPU, shape: [2, 3]): [10, 5, 5, 5, 5, 5]",
            "Tensor (device: CPU, shape: [2, 3]): [12, 7, 7, 7, 7, 7]",
            "Tensor (device: CPU, shape: [2, 3]): [36, 21, 21, 21, 21, 21]",
            "Tensor (device: CPU, shape: [3, 2]): [36, 21, 21, 21, 21, 21]",
            "Tensor (device: GPU, shape: [2, 2]): [1.0, 1.0, 1.0, 1.0]",
        ])


if __name__ == '__main__':
    unittest.main()
