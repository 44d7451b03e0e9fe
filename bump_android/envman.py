"""
通过 envman 将结果导出为流水线环境变量。
"""
from __future__ import annotations

import logging

from .commands import run_command
from .versioning import VersionPair

VERSION_CODE_KEY = 'BUMP_VERSION_CODE'
VERSION_NAME_KEY = 'BUMP_VERSION_NAME'


def export_variable(key: str, value: str) -> None:
  """调用 `envman add --key <key>`，值经 stdin 传入。"""
  run_command(['envman', 'add', '--key', key], stdin=value)
  logging.debug('exported %s=%s', key, value)


def export_versions(pair: VersionPair) -> None:
  export_variable(VERSION_CODE_KEY, str(pair.code))
  export_variable(VERSION_NAME_KEY, pair.name)
