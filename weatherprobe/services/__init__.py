# weatherprobe/services/__init__.py
"""服务层模块"""

from .weather_service import WeatherService, decode_response

__all__ = ["WeatherService", "decode_response"]
