# weatherprobe/main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import BaseModel, ValidationError

from weatherprobe.clients.weather_client import OpenWeatherClient
from weatherprobe.core.config import Settings, get_settings
from weatherprobe.core.errors import WeatherError
from weatherprobe.core.log import setup_logging
from weatherprobe.schemas.weather_schemas import Coordinates, WeatherParams
from weatherprobe.services.weather_service import WeatherService

logger = logging.getLogger("weatherprobe")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weatherprobe",
        description="Fetch current weather and forecast from OpenWeatherMap",
    )
    parser.add_argument("-baseurl", default=settings.openweather_base_url, help="Base URL for weather service")
    parser.add_argument("-appid", default=settings.openweather_api_key, help="APPID token")
    parser.add_argument("-latitude", type=float, default=settings.latitude, help="latitude")
    parser.add_argument("-longitude", type=float, default=settings.longitude, help="longitude")
    parser.add_argument("-timeout", type=float, default=settings.request_timeout, help="request timeout in seconds")
    parser.add_argument("-loglevel", default=settings.log_level, help="DEBUG / INFO / WARNING / ERROR")
    return parser


def _print_record(record: BaseModel) -> None:
    print(record.model_dump_json(indent=2, by_alias=True))


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.critical("invalid configuration: %s", e)
        return 1

    args = build_parser(settings).parse_args(argv)
    setup_logging(args.loglevel)

    params = WeatherParams(
        base_url=args.baseurl,
        app_id=args.appid,
        coord=Coordinates(lat=args.latitude, lon=args.longitude),
    )
    if not params.app_id:
        logger.warning("APPID 未配置，OpenWeatherMap 大概率返回 401")

    with OpenWeatherClient(params, timeout=args.timeout) as client:
        service = WeatherService(client)
        try:
            _print_record(service.current_weather())
            _print_record(service.forecast())
        except WeatherError as e:
            logger.critical("%s", e)
            return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
