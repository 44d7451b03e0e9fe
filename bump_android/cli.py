"""
命令行入口：读取 .env 与步骤输入，命令行参数优先。
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from .config import BumpConfig
from .logging_utils import configure_logging
from .runner import run_bump
from .versioning import BUMP_TYPES


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
  """解析 CLI 参数，未提供时沿用环境变量中的步骤输入。"""
  parser = argparse.ArgumentParser(
    description='递增 build.gradle 中的 versionCode/versionName 并提交、打标签、推送。'
  )
  parser.add_argument('--bump-type', choices=BUMP_TYPES, default=None, help='递增策略 (默认: $bump_type，必填)')
  parser.add_argument('--source-dir', default=None, help='查找构建文件的目录 (默认: .)')
  parser.add_argument('--build-file', default=None, help='构建文件名 (默认: build.gradle)')
  parser.add_argument(
    '--log-level',
    choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
    default=None,
    help='日志级别 (默认: INFO)'
  )
  return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BumpConfig:
  config = BumpConfig.from_env()
  if args.bump_type:
    config.bump_type = args.bump_type
  if args.source_dir:
    config.source_dir = Path(args.source_dir)
  if args.build_file:
    config.build_file = args.build_file
  if args.log_level:
    config.log_level = args.log_level
  return config


def main(argv: Optional[Sequence[str]] = None) -> int:
  """脚本入口：配置日志、构建配置并执行版本递增。"""
  load_dotenv(find_dotenv(usecwd=True), override=False)
  args = parse_args(argv)
  config = build_config(args)
  configure_logging(config.log_level)
  try:
    run_bump(config)
  except ValueError as exc:
    logging.error('Issue with input: %s', exc)
    return 1
  except (RuntimeError, OSError) as exc:
    logging.error('bump failed: %s', exc)
    return 1
  except KeyboardInterrupt:
    print('\ninterrupted by user, exiting...')
    return 130
  return 0


__all__ = ['build_config', 'main', 'parse_args']
