"""Test cases for the __main__ module."""
import json
import pathlib
import shlex
from typing import (
    IO,
    Any,
    Callable,
    Dict,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    Union,
)

import pytest
from _pytest.monkeypatch import MonkeyPatch
from click.testing import Result
from typer import testing
from typer.testing import CliRunner

import nbview
from nbview.__main__ import app


class RunCli(Protocol):
    """Typing protocol for run_cli."""

    def __call__(
        self,
        cell: Optional[Dict[str, Any]] = None,
        args: Optional[Union[str, Iterable[str]]] = None,
        input: Optional[Union[bytes, str, IO[Any]]] = None,
        env: Optional[Mapping[str, str]] = None,
        catch_exceptions: bool = True,
        **extra: Any,
    ) -> Result:
        """Callable types."""
        ...


@pytest.fixture(autouse=True)
def patch_env(monkeypatch: MonkeyPatch) -> None:
    """Patch environmental variables that affect tests."""
    for environment_variable in (
        "NBVIEW_BACKEND",
        "NBVIEW_THEME",
        "NBVIEW_STRICT",
        "NBVIEW_VERBOSE",
    ):
        monkeypatch.delenv(environment_variable, raising=False)


@pytest.fixture
def runner() -> CliRunner:
    """Fixture for invoking command-line interfaces."""
    return testing.CliRunner()


@pytest.fixture
def write_file(tmp_path: pathlib.Path) -> Callable[[str], str]:
    """Fixture that returns a function writing text to a file."""

    def _write_file(text: str) -> str:
        """Write the text and return the file path."""
        file_path = tmp_path / "notebook.ipynb"
        file_path.write_text(text, encoding="utf-8")
        return str(file_path)

    return _write_file


@pytest.fixture
def write_notebook(
    make_notebook_dict: Callable[[Optional[Dict[str, Any]]], Dict[str, Any]],
    write_file: Callable[[str], str],
) -> Callable[[Optional[Dict[str, Any]]], str]:
    """Fixture for generating notebook files."""

    def _write_notebook(cell: Optional[Dict[str, Any]]) -> str:
        """Writes a notebook file.

        Args:
            cell (Optional[Dict[str, Any]]): The cell of the notebook
                to render

        Returns:
            str: The path of the notebook file.
        """
        return write_file(json.dumps(make_notebook_dict(cell)))

    return _write_notebook


@pytest.fixture
def run_cli(
    runner: CliRunner,
    write_notebook: Callable[[Optional[Dict[str, Any]]], str],
) -> RunCli:
    """Fixture for running the cli against a notebook file."""

    def _run_cli(
        cell: Optional[Dict[str, Any]] = None,
        args: Optional[Union[str, Iterable[str]]] = None,
        input: Optional[Union[bytes, str, IO[Any]]] = None,
        env: Optional[Mapping[str, str]] = None,
        catch_exceptions: bool = True,
        **extra: Any,
    ) -> Result:
        """Runs the CLI against a notebook file.

        Args:
            cell (Optional[Dict[str, Any]], optional): The cell to add
                to the notebook file. Defaults to None.
            args (Optional[Union[str, Iterable[str]]]): The extra
                arguments to invoke.
            input (Optional[Union[bytes, Text, IO[Any]]]): The input
                data. By default None.
            env (Optional[Mapping[str, str]]): The environmental
                overrides. By default None.
            catch_exceptions (bool): Whether to catch exceptions.
            **extra (Any): Extra arguments to pass.

        Returns:
            Result: The result from running the CLI command against the
                notebook.
        """
        notebook_path = write_notebook(cell)
        if isinstance(args, str):
            args = shlex.split(args)
        full_args = [*args, notebook_path] if args is not None else [notebook_path]
        result = runner.invoke(
            app,
            args=full_args,
            input=input,
            env=env,
            catch_exceptions=catch_exceptions,
            **extra,
        )
        return result

    return _run_cli


def test_main_succeeds(run_cli: RunCli) -> None:
    """It exits with a status code of zero with a valid file."""
    result = run_cli()
    assert result.exit_code == 0


@pytest.mark.parametrize("option", ("--version", "-V"))
def test_version(runner: CliRunner, option: str) -> None:
    """It returns the version number."""
    result = runner.invoke(app, [option])
    assert result.stdout == f"nbview {nbview.__version__}\n"


def test_list_themes(runner: CliRunner) -> None:
    """It lists the available themes."""
    result = runner.invoke(app, ["--list-themes"])
    assert result.exit_code == 0
    assert "dark / monokai" in result.stdout
    assert "solarized-dark" in result.stdout


@pytest.mark.parametrize("text", ["", "{not json", '{"cells": "nope"}'])
def test_exit_invalid_file_status(
    text: str, runner: CliRunner, write_file: Callable[[str], str]
) -> None:
    """It exits with a usage error when fed an invalid file."""
    invalid_path = write_file(text)
    result = runner.invoke(app, [invalid_path])
    assert result.exit_code == 2
    assert "<html" not in result.stdout


def test_render_code_cell(run_cli: RunCli) -> None:
    """It renders a code cell as an HTML page."""
    code_cell = {
        "cell_type": "code",
        "execution_count": 2,
        "id": "emotional-amount",
        "metadata": {},
        "outputs": [{"output_type": "stream", "name": "stdout", "text": ["3\n"]}],
        "source": "def foo(x: float, y: float) -> float:\n    return x + y",
    }
    result = run_cli(code_cell)
    assert result.stdout.startswith("<!DOCTYPE html>")
    assert '<div class="jupyter-notebook">' in result.stdout
    assert '<pre class="language-python"><code>def foo(x: float' in result.stdout
    assert '<pre class="jupyter-output-stream">3\n</pre>' in result.stdout


def test_render_markdown_cell(run_cli: RunCli) -> None:
    """It renders a markdown cell."""
    markdown_cell = {
        "cell_type": "markdown",
        "id": "academic-bride",
        "metadata": {},
        "source": "Lorep",
    }
    result = run_cli(markdown_cell)
    assert "<p>Lorep</p>" in result.stdout


@pytest.mark.parametrize(
    "args, env",
    (
        ("--backend host-delegated", None),
        ("-b HOST-DELEGATED", None),
        (None, {"NBVIEW_BACKEND": "host-delegated"}),
    ),
)
def test_host_delegated_backend(
    args: Optional[str], env: Optional[Mapping[str, str]], run_cli: RunCli
) -> None:
    """It renders code through the rich-text renderer when asked."""
    code_cell = {
        "cell_type": "code",
        "metadata": {},
        "outputs": [],
        "source": "x = 1",
    }
    result = run_cli(code_cell, args=args, env=env)
    assert result.exit_code == 0
    assert '<code class="language-python">' in result.stdout


def test_theme_css(run_cli: RunCli) -> None:
    """It emits highlighting styles for the chosen theme."""
    result = run_cli(args="--theme light")
    assert result.exit_code == 0
    assert ".jupyter-cell pre" in result.stdout


def test_write_output_file(run_cli: RunCli, tmp_path: pathlib.Path) -> None:
    """It writes the page to the output file."""
    output_path = tmp_path / "notebook.html"
    result = run_cli(args=["--output", str(output_path)])
    assert result.exit_code == 0
    assert result.stdout == ""
    assert '<div class="jupyter-notebook">' in output_path.read_text(encoding="utf-8")


def test_read_stdin(
    runner: CliRunner,
    make_notebook_dict: Callable[[Optional[Dict[str, Any]]], Dict[str, Any]],
) -> None:
    """It reads a notebook from standard input."""
    markdown_cell = {"cell_type": "markdown", "metadata": {}, "source": "From stdin"}
    notebook_text = json.dumps(make_notebook_dict(markdown_cell))
    result = runner.invoke(app, ["-"], input=notebook_text)
    assert result.exit_code == 0
    assert "<p>From stdin</p>" in result.stdout
    assert "<title>&lt;stdin&gt;</title>" in result.stdout


def test_render_multiple_files(
    runner: CliRunner,
    tmp_path: pathlib.Path,
    make_notebook_dict: Callable[[Optional[Dict[str, Any]]], Dict[str, Any]],
) -> None:
    """It renders one titled section per file, including invalid ones."""
    valid_path = tmp_path / "valid.ipynb"
    valid_path.write_text(json.dumps(make_notebook_dict(None)), encoding="utf-8")
    invalid_path = tmp_path / "invalid.ipynb"
    invalid_path.write_text("", encoding="utf-8")
    result = runner.invoke(app, [str(valid_path), str(invalid_path)])
    assert result.exit_code == 0
    assert result.stdout.count('<section class="nbview-file">') == 2
    assert "valid.ipynb</h2>" in result.stdout
    assert "Error loading Jupyter notebook: File content is empty" in result.stdout


def test_strict_option(
    runner: CliRunner, write_file: Callable[[str], str]
) -> None:
    """It rejects notebooks that break the schema with --strict."""
    notebook_path = write_file(
        json.dumps(
            {
                "cells": [{"cell_type": "code", "source": "x = 1"}],
                "metadata": {},
                "nbformat": 4,
                "nbformat_minor": 4,
            }
        )
    )
    assert runner.invoke(app, [notebook_path]).exit_code == 0
    assert runner.invoke(app, ["--strict", notebook_path]).exit_code == 2
