# weatherprobe/schemas/weather_schemas.py
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

# 标量字段一律 strict：字符串当数字、小数当整数都算解析失败（int 可以当 float）
Int = StrictInt
Float = StrictFloat
Str = StrictStr


class WireModel(BaseModel):
    """
    OpenWeatherMap 原始结构的公共基类：
    - 多余字段忽略，缺失字段取零值
    - 构造后不可修改
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null 等同于字段缺失，落到默认零值；顶层 null 得到全零记录
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Coordinates(WireModel):
    lat: Float = 0.0
    lon: Float = 0.0


class WeatherParams(BaseModel):
    """一次调用的请求参数，由 CLI 构造后显式传给 client。"""

    model_config = ConfigDict(frozen=True)

    base_url: str
    app_id: str = ""
    coord: Coordinates


# -------- 当前天气 /weather --------

class Condition(WireModel):
    id: Int = 0
    main: Str = ""
    description: Str = ""
    icon: Str = ""


class Reading(WireModel):
    temp: Float = 0.0
    pressure: Int = 0
    humidity: Int = 0
    temp_min: Float = 0.0
    temp_max: Float = 0.0


class Wind(WireModel):
    speed: Float = 0.0
    deg: Float = 0.0


class Clouds(WireModel):
    all: Int = 0


class CurrentSys(WireModel):
    type: Int = 0
    id: Int = 0
    message: Float = 0.0
    country: Str = ""
    sunrise: Int = 0
    sunset: Int = 0


class CurrentWeather(WireModel):
    coord: Coordinates = Field(default_factory=Coordinates)
    weather: List[Condition] = Field(default_factory=list)
    base: Str = ""
    main: Reading = Field(default_factory=Reading)
    visibility: Int = 0
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    dt: Int = 0
    sys: CurrentSys = Field(default_factory=CurrentSys)
    id: Int = 0
    name: Str = ""
    cod: Int = 0


# -------- 预报 /forecast（5 天 / 3 小时） --------

class ForecastMain(WireModel):
    temp: Float = 0.0
    temp_min: Float = 0.0
    temp_max: Float = 0.0
    pressure: Float = 0.0
    sea_level: Float = 0.0
    grnd_level: Float = 0.0
    humidity: Int = 0
    temp_kf: Float = 0.0


class ForecastSys(WireModel):
    pod: Str = ""


class Rain(WireModel):
    three_h: Float = Field(0.0, alias="3h")  # 过去3小时降水量 (mm)


class ForecastItem(WireModel):
    dt: Int = 0
    main: ForecastMain = Field(default_factory=ForecastMain)
    weather: List[Condition] = Field(default_factory=list)
    clouds: Clouds = Field(default_factory=Clouds)
    wind: Wind = Field(default_factory=Wind)
    sys: ForecastSys = Field(default_factory=ForecastSys)
    dt_txt: Str = ""
    # 没有 rain 字段 ≠ 降水为 0，保持 None
    rain: Optional[Rain] = None


class City(WireModel):
    id: Int = 0
    name: Str = ""
    coord: Coordinates = Field(default_factory=Coordinates)
    country: Str = ""
    population: Int = 0


class Forecast(WireModel):
    cod: Str = ""
    message: Float = 0.0
    cnt: Int = 0
    items: List[ForecastItem] = Field(default_factory=list, alias="list")
    city: City = Field(default_factory=City)
