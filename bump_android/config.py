"""
配置对象定义，集中管理版本号递增步骤的输入参数。
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Optional, Tuple

from .versioning import BUMP_TYPES

DEFAULT_BUILD_FILE = 'build.gradle'
DEFAULT_REMOTE = 'origin'
DEFAULT_DEVELOP_BRANCH = 'develop'
DEFAULT_RELEASE_BRANCH = 'master'
DEFAULT_TAG_FORMAT = '{version}'


@dataclass
class BumpConfig:
  """封装版本号递增步骤的可配置项。"""

  bump_type: str = ''
  source_dir: Path = Path('.')
  build_file: str = DEFAULT_BUILD_FILE
  git_remote: str = DEFAULT_REMOTE
  develop_branch: str = DEFAULT_DEVELOP_BRANCH
  release_branch: str = DEFAULT_RELEASE_BRANCH
  tag_format: str = DEFAULT_TAG_FORMAT
  log_level: str = 'INFO'

  @classmethod
  def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'BumpConfig':
    """从步骤输入（环境变量）构建配置，空值回退到默认值。"""
    env = os.environ if environ is None else environ

    def _get(key: str, default: str) -> str:
      value = (env.get(key) or '').strip()
      return value or default

    return cls(
      # 递增策略没有默认值，缺失时由 validate() 拒绝
      bump_type=_get('bump_type', '').lower(),
      source_dir=Path(_get('source_dir', '.')),
      build_file=_get('build_file', DEFAULT_BUILD_FILE),
      git_remote=_get('git_remote', DEFAULT_REMOTE),
      develop_branch=_get('develop_branch', DEFAULT_DEVELOP_BRANCH),
      # 允许显式置空以跳过合并到发布分支
      release_branch=(env.get('release_branch', DEFAULT_RELEASE_BRANCH) or '').strip(),
      tag_format=_get('tag_format', DEFAULT_TAG_FORMAT),
      log_level=_get('log_level', 'INFO').upper()
    )

  def validate(self) -> None:
    """校验输入，非法时抛出 ValueError。"""
    if not self.bump_type:
      raise ValueError(f'missing bump type, expected one of: {", ".join(BUMP_TYPES)}')
    if self.bump_type not in BUMP_TYPES:
      raise ValueError(
        f'invalid bump type {self.bump_type!r}, expected one of: {", ".join(BUMP_TYPES)}'
      )
    if not self.build_file.strip():
      raise ValueError('build file name cannot be empty')
    if '{version}' not in self.tag_format:
      raise ValueError(f'tag format {self.tag_format!r} must contain the {{version}} placeholder')
    try:
      self.format_tag('0.0.0')
    except (IndexError, KeyError, ValueError) as exc:
      raise ValueError(f'invalid tag format {self.tag_format!r}: {exc}') from exc

  def describe(self) -> Iterator[Tuple[str, object]]:
    """返回用于打印的配置明细。"""
    yield ('BumpType', self.bump_type)
    yield ('SourceDir', self.source_dir)
    yield ('BuildFile', self.build_file)
    yield ('Remote', self.git_remote)
    yield ('DevelopBranch', self.develop_branch)
    yield ('ReleaseBranch', self.release_branch or '(skip)')
    yield ('TagFormat', self.tag_format)

  def format_tag(self, version_name: str) -> str:
    return self.tag_format.format(version=version_name)
