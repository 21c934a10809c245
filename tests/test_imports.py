import subprocess
import sys

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "template_service.infrastructure.database.repositories",
        "template_service.modules.templates",
        "template_service.domain.templates",
        "template_service.main",
    ],
)
def test_module_imports_in_a_fresh_interpreter(module: str) -> None:
    result = subprocess.run([sys.executable, "-c", f"import {module}"], capture_output=True, text=True)

    assert result.returncode == 0, result.stderr
