#!/usr/bin/env python3
"""
流水线步骤入口：递增 Android 版本号并推送。
"""
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
  sys.path.insert(0, str(ROOT_DIR))

from bump_android.cli import main


if __name__ == '__main__':
  sys.exit(main())
