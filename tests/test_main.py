"""Tests running prsize as a separate process."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _run(args: list[str], env: dict[str, str], cwd: Path) -> subprocess.CompletedProcess:
    """Run `python -m prsize` in a fresh interpreter."""
    full_env = {**os.environ, **env}
    full_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), os.environ.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "prsize", *args],
        env=full_env,
        cwd=cwd,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_label_invalid_pr_number_reports_error(tmp_path: Path):
    """Test that a malformed PR_NUMBER exits with status 1 through the CLI error path."""
    result = _run(
        ["label"],
        {"TOKEN": "test_token", "REPO_OWNER": "octo", "REPO_NAME": "repo", "PR_NUMBER": "abc"},
        tmp_path,
    )

    assert result.returncode == 1
    assert "Error:" in result.stderr
    assert "Traceback" not in result.stderr


def test_label_missing_configuration_reports_error(tmp_path: Path):
    """Test that missing variables exit with status 1 and name the variable."""
    result = _run(["label"], {"TOKEN": "test_token", "REPO_OWNER": "octo", "REPO_NAME": "repo"}, tmp_path)

    assert result.returncode == 1
    assert "PR_NUMBER" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.parametrize("bad_env", [{"PR_NUMBER": "abc"}, {"GITHUB_TIMEOUT": "0"}, {"DEBUG": "maybe"}])
def test_classify_ignores_malformed_environment(tmp_path: Path, bad_env: dict[str, str]):
    """Test that offline classification does not depend on labeling settings."""
    result = _run(["classify", "1", "1"], bad_env, tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "tiny"


def test_version_ignores_malformed_environment(tmp_path: Path):
    """Test that the version command does not depend on labeling settings."""
    result = _run(["version"], {"PR_NUMBER": "abc"}, tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("prsize - ")
