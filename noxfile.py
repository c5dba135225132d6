"""Nox configuration for marina quality assurance tasks."""

import nox  # pyright: ignore[reportMissingImports] # noqa: I001

# Python versions to test
PYTHON_VERSIONS = ["3.12", "3.13"]

# Centralized tool configurations
LINT_PATHS = ["marina/", "tests/", "noxfile.py"]
FORMAT_PATHS = ["marina/", "tests/", "noxfile.py"]
TYPECHECK_PATHS = ["marina/"]


def get_lint_command(fix: bool = False) -> list[str]:
    """Build the ruff check command, optionally applying fixes."""
    cmd = ["ruff", "check", *LINT_PATHS]
    if fix:
        cmd.append("--fix")
    return cmd


def get_format_command(check: bool = False) -> list[str]:
    """Build the ruff format command shared by the format sessions."""
    cmd = ["ruff", "format", *FORMAT_PATHS]
    if check:
        cmd.extend(["--check", "--diff"])
    return cmd


@nox.session(python=PYTHON_VERSIONS)
def lint(session: nox.Session) -> None:
    """Run linting with ruff check."""
    session.install("-e", ".[dev]")
    session.run(*get_lint_command())


@nox.session(python=PYTHON_VERSIONS)
def mypy(session: nox.Session) -> None:
    """Run type checking with mypy."""
    session.install("-e", ".[dev]")
    session.run("mypy", *TYPECHECK_PATHS)


@nox.session(python=PYTHON_VERSIONS)
def format_check(session: nox.Session) -> None:
    """Check code formatting with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*get_format_command(check=True))


@nox.session(python=PYTHON_VERSIONS)
def format(session: nox.Session) -> None:
    """Format code with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*get_format_command())


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run tests with pytest."""
    session.install("-e", ".[dev]")
    session.run("pytest", "--verbose", *session.posargs)
