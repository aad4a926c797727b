# weatherprobe/core/errors.py
from __future__ import annotations


class WeatherError(Exception):
    """所有请求/解析错误的基类，对一次运行来说都是致命的。"""


class MalformedURLError(WeatherError):
    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        msg = f"malformed base URL {url!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class NetworkError(WeatherError):
    pass


class UnexpectedStatusError(WeatherError):
    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"Got {status!r}")


class ReadError(WeatherError):
    pass


class DecodeError(WeatherError):
    pass
