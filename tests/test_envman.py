"""Tests for exporting pipeline variables through envman."""

from unittest.mock import call, patch

from bump_android.envman import export_variable, export_versions
from bump_android.versioning import VersionPair


def test_export_variable_passes_value_on_stdin():
    with patch("bump_android.envman.run_command") as run:
        export_variable("BUMP_VERSION_NAME", "1.5.0")
    run.assert_called_once_with(["envman", "add", "--key", "BUMP_VERSION_NAME"], stdin="1.5.0")


def test_export_versions_exports_code_and_name():
    with patch("bump_android.envman.export_variable") as export:
        export_versions(VersionPair(42, "1.5.0"))
    assert export.call_args_list == [
        call("BUMP_VERSION_CODE", "42"),
        call("BUMP_VERSION_NAME", "1.5.0"),
    ]
