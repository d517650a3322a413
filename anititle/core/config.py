import os
import yaml
from pathlib import Path
from typing import Any, Dict, Tuple

from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

# 1. 为配置的不同部分创建 Pydantic 模型，提供类型提示和默认值
class LogConfig(BaseModel):
    level: str = "INFO"

class ParserConfig(BaseModel):
    cache_size: int = 4096              # parse_cached 的 LRU 容量
    max_batch_size: int = 500           # 批量解析接口单次最多标题数

# 2. 创建一个自定义的配置源，用于从 YAML 文件加载设置
class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    def __init__(self, settings_cls: type[BaseSettings]):
        super().__init__(settings_cls)
        # 默认读取当前目录下的 config/config.yml，可通过 ANITITLE_CONFIG_FILE 指定
        self.yaml_file = Path(os.getenv("ANITITLE_CONFIG_FILE", "config/config.yml"))

    def get_field_value(self, field, field_name):
        return None, None, False

    def __call__(self) -> Dict[str, Any]:
        if not self.yaml_file.is_file():
            return {}
        with open(self.yaml_file, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


# 3. 定义主设置类，它将聚合所有配置
class Settings(BaseSettings):
    log: LogConfig = LogConfig()
    parser: ParserConfig = ParserConfig()

    class Config:
        # 为环境变量设置前缀，避免与系统变量冲突
        # 例如 ANITITLE_PARSER__CACHE_SIZE=1024
        env_prefix = "ANITITLE_"
        case_sensitive = False
        env_nested_delimiter = '__'

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # 加载源的优先级:
        # 1. 环境变量 (最高)
        # 2. .env 文件
        # 3. YAML 文件
        # 4. 文件密钥
        # 5. Pydantic 模型中的默认值 (最低)
        return (
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
            init_settings,
        )


settings = Settings()
