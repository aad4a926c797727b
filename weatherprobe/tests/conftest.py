from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from weatherprobe.clients.weather_client import OpenWeatherClient
from weatherprobe.schemas.weather_schemas import Coordinates, WeatherParams

BASE_URL = "https://api.example.com/data/2.5/"


CURRENT_PAYLOAD = {
    "coord": {"lon": 30.93, "lat": -20.27},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
        "temp": 299.15,
        "feels_like": 298.9,
        "pressure": 1017,
        "humidity": 39,
        "temp_min": 298.71,
        "temp_max": 299.82,
    },
    "visibility": 10000,
    "wind": {"speed": 4.63, "deg": 110},
    "clouds": {"all": 0},
    "dt": 1560350645,
    "sys": {
        "type": 1,
        "id": 2005,
        "message": 0.0074,
        "country": "ZW",
        "sunrise": 1560313784,
        "sunset": 1560353671,
    },
    "timezone": 7200,
    "id": 878549,
    "name": "Masvingo",
    "cod": 200,
}


def _forecast_item(dt: int, dt_txt: str, temp: float, rain: float | None = None) -> dict:
    item = {
        "dt": dt,
        "main": {
            "temp": temp,
            "temp_min": temp - 1.5,
            "temp_max": temp,
            "pressure": 1018.2,
            "sea_level": 1018.2,
            "grnd_level": 899.1,
            "humidity": 40,
            "temp_kf": 1.5,
        },
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "clouds": {"all": 20},
        "wind": {"speed": 3.1, "deg": 95.5},
        "sys": {"pod": "d"},
        "dt_txt": dt_txt,
        "pop": 0.2,
    }
    if rain is not None:
        item["rain"] = {"3h": rain}
    return item


FORECAST_PAYLOAD = {
    "cod": "200",
    "message": 0.0068,
    "cnt": 3,
    "list": [
        _forecast_item(1560362400, "2019-06-12 18:00:00", 295.2, rain=0.31),
        _forecast_item(1560373200, "2019-06-12 21:00:00", 291.7),
        _forecast_item(1560384000, "2019-06-13 00:00:00", 289.4, rain=1.0),
    ],
    "city": {
        "id": 878549,
        "name": "Masvingo",
        "coord": {"lat": -20.273, "lon": 30.9344},
        "country": "ZW",
        "population": 76803,
    },
}


@pytest.fixture
def params() -> WeatherParams:
    return WeatherParams(
        base_url=BASE_URL,
        app_id="abc",
        coord=Coordinates(lat=-20.272967, lon=30.934364),
    )


@pytest.fixture
def current_payload() -> dict:
    return json.loads(json.dumps(CURRENT_PAYLOAD))


@pytest.fixture
def forecast_payload() -> dict:
    return json.loads(json.dumps(FORECAST_PAYLOAD))


@pytest.fixture
def make_client(params) -> Callable[..., OpenWeatherClient]:
    """
    用 httpx.MockTransport 构造 client：
    - handler 接收 httpx.Request，返回 httpx.Response
    - 每个测试自己决定假接口的行为
    """
    clients: list[httpx.Client] = []

    def _make(handler, p: WeatherParams | None = None) -> OpenWeatherClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return OpenWeatherClient(p or params, http_client=http_client)

    yield _make

    for c in clients:
        c.close()
