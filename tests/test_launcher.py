from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from runscript.launcher import launch, popen_kwargs
from runscript.staging import create_script_file
from runscript.types import IoOptions, ScriptIOError, ScriptOptions


@pytest.mark.parametrize(
    "policy,mode",
    [
        (IoOptions.NULL, subprocess.DEVNULL),
        (IoOptions.INHERIT, None),
        (IoOptions.PIPE, subprocess.PIPE),
    ],
)
def test_io_policy_mapping(policy, mode):
    kwargs = popen_kwargs(ScriptOptions(capture_input=policy, capture_output=policy))
    assert kwargs["stdin"] == mode
    assert kwargs["stdout"] == mode
    assert kwargs["stderr"] == mode


def test_input_and_output_are_independent():
    kwargs = popen_kwargs(
        ScriptOptions(capture_input=IoOptions.NULL, capture_output=IoOptions.PIPE)
    )
    assert kwargs["stdin"] == subprocess.DEVNULL
    assert kwargs["stdout"] == subprocess.PIPE


def test_defaults_have_no_cwd_or_env():
    kwargs = popen_kwargs(ScriptOptions())
    assert "cwd" not in kwargs
    assert "env" not in kwargs


def test_env_vars_merged_over_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("RUNSCRIPT_TEST_KEEP", "1")
    kwargs = popen_kwargs(
        ScriptOptions(env_vars={"RUNSCRIPT_TEST_NEW": "2"}, working_directory=tmp_path)
    )
    assert kwargs["env"]["RUNSCRIPT_TEST_KEEP"] == "1"
    assert kwargs["env"]["RUNSCRIPT_TEST_NEW"] == "2"
    assert kwargs["cwd"] == str(tmp_path)


def test_launch_failure_removes_staged_file(tmp_path: Path):
    staged = create_script_file("exit 0", temp_root=tmp_path)
    options = ScriptOptions(runner=str(tmp_path / "no-such-runner"))

    with pytest.raises(ScriptIOError) as exc_info:
        launch(staged, [], options)

    assert isinstance(exc_info.value.error, OSError)
    assert not staged.path.exists()


def test_invalid_argument_removes_staged_file(tmp_path: Path):
    staged = create_script_file("exit 0", temp_root=tmp_path)

    with pytest.raises(ValueError):
        launch(staged, ["bad\0arg"], ScriptOptions())

    assert not staged.path.exists()
