# weatherprobe/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenWeatherMap，base url 以 data/2.5/ 结尾
    openweather_base_url: str = Field(
        "https://api.openweathermap.org/data/2.5/",
        alias="OPENWEATHER_BASE_URL",
    )
    openweather_api_key: str = Field("", alias="OPENWEATHER_API_KEY")

    # 默认查询坐标
    latitude: float = Field(-20.272967, alias="WEATHER_LATITUDE")
    longitude: float = Field(30.934364, alias="WEATHER_LONGITUDE")

    # 单次请求超时（秒）
    request_timeout: float = Field(30.0, alias="WEATHER_REQUEST_TIMEOUT")

    log_level: str = Field("WARNING", alias="LOG_LEVEL")


def get_settings() -> Settings:
    return Settings()
