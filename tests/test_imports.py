import importlib
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.mark.parametrize(
    "attr_path",
    [
        "__version__",
        "encode",
        "render",
        "rasterize",
        "evaluate_all_masks",
        "DataTooLarge",
        "renderer.ImageReference",
        "matrix.Matrix",
    ],
)
def test_public_names(attr_path):
    sub_mod_path, _, attr_name = attr_path.rpartition(".")
    mod = importlib.import_module("qrsymbol" + (f".{sub_mod_path}" if sub_mod_path else ""))
    assert getattr(mod, attr_name) is not None


def test_library_does_not_import_flask():
    """Flask belongs to the preview app only, the package itself never loads it."""
    code = (
        "import sys, qrsymbol, qrsymbol.renderer; "
        "sys.exit(1 if 'flask' in sys.modules else 0)"
    )
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, cwd=Path(__file__).resolve().parents[1])
    assert result.returncode == 0, result.stderr.decode()
