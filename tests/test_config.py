"""Tests for BumpConfig construction and validation."""

from pathlib import Path

import pytest

from bump_android.config import BumpConfig


class TestFromEnv:
    def test_defaults_when_environment_is_empty(self):
        config = BumpConfig.from_env({})
        assert config.bump_type == ""
        assert config.source_dir == Path(".")
        assert config.build_file == "build.gradle"
        assert config.git_remote == "origin"
        assert config.develop_branch == "develop"
        assert config.release_branch == "master"
        assert config.tag_format == "{version}"
        assert config.log_level == "INFO"

    def test_step_inputs_are_read_and_normalised(self):
        config = BumpConfig.from_env(
            {
                "bump_type": "  Minor ",
                "source_dir": "android",
                "build_file": "build.gradle.kts",
                "tag_format": "v{version}",
                "log_level": "debug",
            }
        )
        assert config.bump_type == "minor"
        assert config.source_dir == Path("android")
        assert config.build_file == "build.gradle.kts"
        assert config.tag_format == "v{version}"
        assert config.log_level == "DEBUG"

    def test_blank_values_fall_back_to_defaults(self):
        config = BumpConfig.from_env({"bump_type": "   ", "git_remote": ""})
        assert config.bump_type == ""
        assert config.git_remote == "origin"

    @pytest.mark.parametrize("environ", [{}, {"bump_type": ""}, {"bump_type": "  "}])
    def test_missing_bump_type_fails_validation(self, environ):
        with pytest.raises(ValueError, match="missing bump type"):
            BumpConfig.from_env(environ).validate()

    def test_release_branch_can_be_disabled(self):
        assert BumpConfig.from_env({"release_branch": ""}).release_branch == ""


class TestValidate:
    @pytest.mark.parametrize("bump_type", ["major", "minor", "patch", "none"])
    def test_accepts_known_strategies(self, bump_type):
        BumpConfig(bump_type=bump_type).validate()

    def test_rejects_unknown_strategy(self):
        with pytest.raises(ValueError, match="invalid bump type 'huge'"):
            BumpConfig(bump_type="huge").validate()

    def test_rejects_empty_build_file(self):
        with pytest.raises(ValueError, match="build file name"):
            BumpConfig(bump_type="patch", build_file=" ").validate()

    def test_rejects_tag_format_without_placeholder(self):
        with pytest.raises(ValueError, match="placeholder"):
            BumpConfig(bump_type="patch", tag_format="release").validate()

    def test_rejects_tag_format_with_unknown_field(self):
        with pytest.raises(ValueError, match="invalid tag format"):
            BumpConfig(bump_type="patch", tag_format="{version}-{build}").validate()


def test_describe_lists_inputs():
    details = dict(BumpConfig(bump_type="major", release_branch="").describe())
    assert details["BumpType"] == "major"
    assert details["ReleaseBranch"] == "(skip)"


def test_format_tag():
    assert BumpConfig(tag_format="v{version}").format_tag("2.0.0") == "v2.0.0"
