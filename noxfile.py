import nox

nox.needs_version = ">= 2024.4.15"

LINT_PYTHON_VERSION = "3.12"
TEST_PYTHON_VERSIONS = ["3.9", "3.12"]

RUFF_VERSION = "~=0.6.2"


@nox.session(python=False)
def verify(session: nox.Session) -> None:
    """Run all verification tasks, including linting and tests."""

    # Meta-session with no virtual environment.
    session.notify("ruff")
    session.notify("mypy")
    session.notify("tests")


@nox.session(python=LINT_PYTHON_VERSION)
def ruff(session: nox.Session) -> None:
    """Run the ruff linter."""
    session.install(f"ruff{RUFF_VERSION}")
    session.run("ruff", "check")


@nox.session(python=LINT_PYTHON_VERSION)
def mypy(session: nox.Session) -> None:
    """Run the mypy type checker."""
    session.install(".[dev]")
    session.run("mypy")


@nox.session(python=TEST_PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run all the tests with coverage."""
    session.install(".[test]")
    session.run("pytest", "--cov=video_timecode", "--cov-report=term-missing")
