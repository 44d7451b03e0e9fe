"""
步骤主流程：读取配置、递增版本号、写回文件、导出变量并执行 git 发布流程。
"""
from __future__ import annotations

import logging

from .config import BumpConfig
from .envman import export_versions
from .git import GitWorkflow
from .gradle import locate_build_file, read_versions, write_versions
from .logging_utils import log_section
from .versioning import VersionPair, next_versions


def _version_details(pair: VersionPair):
  return (('versionCode', pair.code), ('versionName', pair.name))


def run_bump(config: BumpConfig) -> VersionPair:
  """执行一次完整的版本递增，返回写入文件的新版本号。"""
  log_section('Configs:', config.describe())
  config.validate()

  logging.info('Find %s file...', config.build_file)
  build_file = locate_build_file(config.source_dir, config.build_file)

  current = read_versions(build_file)
  log_section('Current versions:', _version_details(current))

  bumped = next_versions(current, config.bump_type)
  log_section('New versions:', _version_details(bumped))

  write_versions(build_file, bumped)
  export_versions(bumped)

  workflow = GitWorkflow(
    remote=config.git_remote,
    develop_branch=config.develop_branch,
    release_branch=config.release_branch,
    tag_format=config.tag_format
  )
  workflow.publish(build_file, bumped.name)
  logging.info('bumped %s to %s (%s)', build_file, bumped.name, bumped.code)
  return bumped
