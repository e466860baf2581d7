#!filepath: wolves_cli_helper/config/app_config.py
from __future__ import annotations

import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .verbose_config import VerboseConfig
from wolves_cli_helper import logs
from wolves_cli_helper.utils.errors import UserInputError

CONFIG_ENV = "WOLVES_CONFIG"
LOG_LEVEL_ENV = "WOLVES_LOG_LEVEL"


def default_config_file() -> str:
    """
    包内自带的默认配置:
    wolves_cli_helper/config/app_config.py → wolves_cli_helper/config/base.yml
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    verbose: VerboseConfig = VerboseConfig()
    # 实际加载的文件（announce 里展示）
    config_file: Optional[str] = None

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 路径优先级：参数 > $WOLVES_CONFIG > 包内 base.yml
        - 显式指定的文件不存在 → FileNotFoundError
        - $WOLVES_LOG_LEVEL 覆盖 log.level
        """
        # 1) .env（当前工作目录）
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = os.getenv(CONFIG_ENV) or default_config_file()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise UserInputError(f"Invalid YAML in {path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise UserInputError(f"Config root must be a mapping: {path}")

        level = os.getenv(LOG_LEVEL_ENV)
        if level:
            raw.setdefault("log", {})
            raw["log"] = {**(raw["log"] or {}), "level": level}

        raw["config_file"] = os.path.abspath(path)
        logs.debug(f"[Config] loaded {raw['config_file']}")
        return cls(**raw)

    def apply(self) -> "AppConfig":
        """按 log 配置重新初始化全局 logs。"""
        logs.configure(
            log_dir=self.log.dir,
            rotation=self.log.rotation,
            retention=self.log.retention,
            log_level=self.log.level,
        )
        return self
