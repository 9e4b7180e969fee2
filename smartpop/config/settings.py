"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    # 应用配置
    APP_TITLE: str = "SmartPOP 生产实绩系统"
    APP_DESCRIPTION: str = "作业指示与生产实绩集计API"
    APP_VERSION: str = "1.0.0"

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./smartpop.db"
    ECHO_SQL: bool = False  # 是否打印SQL日志
    # 快照在 snapshots 表中的键
    SNAPSHOT_KEY: str = "smart_pop_db"

    # 日志级别
    LOG_LEVEL: str = "INFO"

    # 集计报表默认查询窗口（天）
    REPORT_WINDOW_DAYS: int = 30

    # AI 分析配置
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
    INSIGHT_MODEL: str = "gemini-3-flash-preview"
    INSIGHT_TIMEOUT_SECONDS: float = 30
    INSIGHT_TEMPERATURE: float = 0.7
    INSIGHT_ERROR_MESSAGE: str = "生产数据分析时发生错误。"
    INSIGHT_EMPTY_MESSAGE: str = "没有分析结果。"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# 创建全局配置实例
settings = Settings()
