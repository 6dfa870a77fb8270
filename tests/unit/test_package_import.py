import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[2] / "src"


def _run(code: str, **env: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-c", code],
        env={**os.environ, "PYTHONPATH": str(SRC), **env},
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.mark.parametrize(
    "env",
    [{"CORS_ORIGIN_REGEX": "([bad"}, {"CORS_ORIGIN": '["https://app.example",]'}],
)
def test_import_ignores_environment(env: dict[str, str]) -> None:
    """Importing the library never reads CORS settings from the environment."""
    result = _run(
        "from microcors import CorsPolicyEvaluator, cors\n"
        "decision = CorsPolicyEvaluator().evaluate('GET', 'https://a.example')\n"
        "print(decision.headers['Access-Control-Allow-Origin'])",
        **env,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "*"


def test_settings_error_surfaces_from_get_config() -> None:
    result = _run(
        "from microcors.core.config import get_config\nget_config()",
        CORS_ORIGIN_REGEX="([bad",
    )

    assert result.returncode != 0
    assert "CorsConfigurationError" in result.stderr
