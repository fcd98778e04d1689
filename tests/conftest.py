# topmark:header:start
#
#   project      : VarExport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the VarExport test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `varexport.config.MutableExportConfig` (mutable), then
      `freeze()` into a `varexport.config.ExportConfig` for **public API** calls.
    - Do **not** mutate a frozen `ExportConfig`. If you need to tweak one,
      call `ExportConfig.thaw()`, edit the returned `MutableExportConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from varexport.config import MutableExportConfig
from varexport.config import logging as varexport_logging

if TYPE_CHECKING:
    from pathlib import Path

    from varexport.config import ExportConfig

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_api: DecoratorType[Any] = as_typed_mark(pytest.mark.api)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_exporter: DecoratorType[Any] = as_typed_mark(pytest.mark.exporter)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_varexport_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure VarExport's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(varexport_logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    varexport_logging.setup_logging(level=varexport_logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory.

    Config discovery walks up from the working directory; starting from a
    fresh temporary directory keeps the repository's own ``pyproject.toml``
    out of reach.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> ExportConfig:
    """Return a frozen `ExportConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field values, as accepted by
            `MutableExportConfig.apply_overrides`.

    Returns:
        ExportConfig: The frozen configuration.
    """
    return MutableExportConfig.from_defaults().apply_overrides(overrides).freeze()


def evaluate(source: str) -> Any:
    """Evaluate generated source in a fresh namespace.

    Args:
        source (str): Expression returned by `varexport.export`.

    Returns:
        Any: The rebuilt value.
    """
    return eval(source, {})  # noqa: S307
