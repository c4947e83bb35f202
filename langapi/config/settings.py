import os
from dataclasses import dataclass
from typing import Optional

import dotenv

dotenv.load_dotenv()

# ========= 项目基本路径 =========
BASE_DIR = os.path.dirname(os.path.abspath(os.path.dirname(__file__)))
PROJECT_DIR = os.path.dirname(BASE_DIR)
LOG_DIR = os.getenv("LOG_DIR", os.path.join(PROJECT_DIR, "logs"))

# ========= 配置区 =========
CONFIG = {
    "TEXT_ANALYTICS": {},
    "WEB": {},
    "LOGGING": {},
}

# ========= text analytics (Azure AI Language) =========
TEXT_ANALYTICS = {
    # 原服务沿用的变量名：API_ENDPOINT / API_KEY
    "endpoint": os.getenv("API_ENDPOINT", ""),
    "api_key": os.getenv("API_KEY", ""),
    # 情感分析默认开启观点挖掘
    "include_opinion_mining": True,
}

# ========= web =========
WEB = {
    "title": "Language Analysis API",
    "description": "API for language analysis leveraging Azure AI Language.",
    "version": "1.0.0",
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "3000")),
    "cors_origins": [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ],
}

# ========= logging =========
LOGGING = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    # 为空则不写文件日志
    "log_dir": LOG_DIR,
}

# ========= 重载配置 =========
CONFIG["TEXT_ANALYTICS"] = TEXT_ANALYTICS
CONFIG["WEB"] = WEB
CONFIG["LOGGING"] = LOGGING


class ConfigurationError(RuntimeError):
    """Raised when the remote service settings are incomplete."""


@dataclass(frozen=True)
class TextAnalyticsConfig:
    """
    远程 NLP 服务的只读配置，进程启动时读取一次
    """

    endpoint: str
    api_key: str
    include_opinion_mining: bool = True

    @classmethod
    def from_config(cls, config: Optional[dict] = None) -> "TextAnalyticsConfig":
        config = CONFIG.get("TEXT_ANALYTICS", {}) if config is None else config
        return cls(
            endpoint=config.get("endpoint", ""),
            api_key=config.get("api_key", ""),
            include_opinion_mining=config.get("include_opinion_mining", True),
        )

    def check(self) -> "TextAnalyticsConfig":
        missing = [
            name
            for name, value in (("API_ENDPOINT", self.endpoint), ("API_KEY", self.api_key))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing text analytics settings: {', '.join(missing)}"
            )
        return self
