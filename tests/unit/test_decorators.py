#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for dependency checking and timing helpers."""

import logging

import pytest

from blogrender.exceptions import DependencyError
from blogrender.utils.decorators import check_dependencies, debug_timer, requires_dependencies
from blogrender.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_missing_package_raises_dependency_error(self):
        """Test that a missing module raises before the method runs."""
        calls = []

        @requires_dependencies("markdown", [("no-such-dist", "no_such_module_for_blogrender", ">=1.0")])
        def parse():
            calls.append(True)

        with pytest.raises(DependencyError) as exc_info:
            parse()

        error = exc_info.value
        assert calls == []
        assert error.missing_packages == [("no-such-dist", ">=1.0")]
        assert "markdown requires the following packages: 'no-such-dist>=1.0'" in error.message
        assert 'pip install --upgrade "no-such-dist>=1.0"' in error.message
        assert isinstance(error.original_error, ImportError)

    def test_available_package_runs_method(self):
        """Test that the wrapped method runs when imports succeed."""

        @requires_dependencies("markdown", [("packaging", "packaging", "")])
        def parse(value):
            return value * 2

        assert parse(21) == 42

    def test_version_mismatch(self):
        """Test that an unsatisfiable version spec is reported."""

        @requires_dependencies("markdown", [("packaging", "packaging", "<0.1")])
        def parse():
            return None

        with pytest.raises(DependencyError) as exc_info:
            parse()

        assert exc_info.value.version_mismatches[0][:2] == ("packaging", "<0.1")
        assert "version mismatches" in exc_info.value.message


@pytest.mark.unit
class TestCheckDependencies:
    """Tests for the dependency check used by the decorator."""

    def test_satisfied_returns_none(self):
        """Test that importable, recent enough packages produce no error."""
        assert check_dependencies("markdown", [("packaging", "packaging", ">=1")]) is None

    def test_missing_and_mismatched_together(self):
        """Test that both kinds of problem are collected into one error."""
        error = check_dependencies(
            "markdown",
            [("packaging", "packaging", "<0.1"), ("no-such-dist", "no_such_module_for_blogrender", "")],
        )

        assert error is not None
        assert error.missing_packages == [("no-such-dist", "")]
        assert [name for name, _, _ in error.version_mismatches] == ["packaging"]


@pytest.mark.unit
class TestPackages:
    """Tests for installed version lookups."""

    def test_unknown_distribution(self):
        """Test that an unknown distribution has no version."""
        assert get_package_version("no-such-dist-for-blogrender") is None
        assert check_version_requirement("no-such-dist-for-blogrender", ">=1") == (False, None)

    def test_installed_distribution(self):
        """Test a distribution that is always installed alongside blogrender."""
        meets, installed = check_version_requirement("packaging", ">=1")
        assert meets is True
        assert installed


@pytest.mark.unit
class TestDebugTimer:
    """Tests for the debug_timer context manager."""

    def test_logs_elapsed_time_at_debug(self, caplog):
        """Test that the operation name is logged when DEBUG is enabled."""
        logger = logging.getLogger("blogrender.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="blogrender.tests.timer"):
            with debug_timer(logger, "Transpiling"):
                pass

        assert "Transpiling completed in" in caplog.text

    def test_silent_above_debug(self, caplog):
        """Test that nothing is logged at higher levels."""
        logger = logging.getLogger("blogrender.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="blogrender.tests.timer_quiet"):
            with debug_timer(logger, "Transpiling"):
                pass

        assert caplog.text == ""
