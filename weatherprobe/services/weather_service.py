# weatherprobe/services/weather_service.py
from __future__ import annotations

import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from weatherprobe.clients.weather_client import OpenWeatherClient
from weatherprobe.core.errors import DecodeError
from weatherprobe.schemas.weather_schemas import CurrentWeather, Forecast

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode_response(raw: bytes, model: Type[T]) -> T:
    """把响应体解析成指定的记录类型；JSON 非法或类型不符都抛 DecodeError。"""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"cannot decode {model.__name__}: {e}") from e


class WeatherService:
    def __init__(self, client: OpenWeatherClient) -> None:
        self.client = client

    def current_weather(self) -> CurrentWeather:
        raw = self.client.fetch("weather")
        return decode_response(raw, CurrentWeather)

    def forecast(self) -> Forecast:
        raw = self.client.fetch("forecast")
        data = decode_response(raw, Forecast)
        logger.debug("forecast for %r: %d items", data.city.name, len(data.items))
        return data
