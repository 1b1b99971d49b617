import importlib.util
import os

import pytest

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "examples")

EXAMPLES = [
    "mlkernels_example01_kernel_matrix.py",
    "mlkernels_example02_composite_derivatives.py",
]


def load_example(filename):
    path = os.path.abspath(os.path.join(EXAMPLES_DIR, filename))
    spec = importlib.util.spec_from_file_location(filename[:-3], path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("filename", EXAMPLES)
def test_example_runs(filename, capsys):
    module = load_example(filename)
    module.main()
    assert capsys.readouterr().out
