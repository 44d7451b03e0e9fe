"""
Pytest configuration and shared fixtures for bump-android tests.
"""

import sys
from pathlib import Path

import pytest

_repo_root = Path(__file__).resolve().parents[1]
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))


BUILD_GRADLE = """\
apply plugin: 'com.android.application'

android {
    compileSdkVersion 28
    defaultConfig {
        applicationId "com.example.app"
        minSdkVersion 21
        versionCode 41
        versionName "1.4.2"
    }
}
"""


@pytest.fixture
def build_gradle(tmp_path):
    """Write a minimal app/build.gradle under tmp_path and return its path."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    path = app_dir / "build.gradle"
    path.write_text(BUILD_GRADLE, encoding="utf-8")
    return path
