"""
版本号计算：versionName 交给 semver 递增，versionCode 每次加一。
"""
from __future__ import annotations

from dataclasses import dataclass

import semver

BUMP_TYPES = ('major', 'minor', 'patch', 'none')
# versionCode 在 Android 中是 32 位有符号整数
MAX_VERSION_CODE = 2 ** 31 - 1


@dataclass(frozen=True)
class VersionPair:
  """构建文件中的一组版本号：整数 versionCode 与点分 versionName。"""

  code: int
  name: str


def parse_version_name(name: str) -> semver.Version:
  """按 主.次.修订 三段数字解析 versionName，允许前导零（如 2024.05.1）。"""
  parts = name.split('.')
  if len(parts) != 3 or not all(part.isdigit() for part in parts):
    raise ValueError(f'failed to parse `versionName` {name!r}: expected MAJOR.MINOR.PATCH')
  major, minor, patch = (int(part) for part in parts)
  return semver.Version(major=major, minor=minor, patch=patch)


def bump_version_name(name: str, bump_type: str) -> str:
  """按策略递增 versionName，低位归零；none 仅做规范化。"""
  if bump_type not in BUMP_TYPES:
    raise ValueError(f'invalid bump type {bump_type!r}')
  version = parse_version_name(name)
  if bump_type == 'major':
    version = version.bump_major()
  elif bump_type == 'minor':
    version = version.bump_minor()
  elif bump_type == 'patch':
    version = version.bump_patch()
  return str(version)


def next_versions(current: VersionPair, bump_type: str) -> VersionPair:
  """versionCode 加一并递增 versionName；越过 32 位上限时抛出 ValueError。"""
  code = current.code + 1
  if code > MAX_VERSION_CODE:
    raise ValueError(f'`versionCode` {current.code} cannot be incremented past {MAX_VERSION_CODE}')
  return VersionPair(code=code, name=bump_version_name(current.name, bump_type))
