# weatherprobe/clients/weather_client.py
from __future__ import annotations

import logging
from typing import Optional

import httpx

from weatherprobe.core.errors import (
    MalformedURLError,
    NetworkError,
    ReadError,
    UnexpectedStatusError,
)
from weatherprobe.schemas.weather_schemas import Coordinates, WeatherParams

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def build_url(base_url: str, path: str, app_id: str, coord: Coordinates) -> str:
    """
    拼出完整请求地址：base_url + path，并设置 APPID / lat / lon。

    经纬度按定点小数输出（6 位，与 %f 一致）；base_url 已有的同名参数会被覆盖，
    其它参数保留。
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise MalformedURLError(base_url, str(e)) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise MalformedURLError(base_url, "expected an absolute http(s) URL")

    # 补齐末尾的 /，".../2.5" 和 ".../2.5/" 效果一样（不是简单的 base_url + path 拼接）
    base_path = url.path if url.path.endswith("/") else url.path + "/"
    url = url.copy_with(path=base_path + path.lstrip("/"))

    url = url.copy_merge_params(
        {
            "APPID": app_id,
            "lat": f"{coord.lat:f}",
            "lon": f"{coord.lon:f}",
        }
    )
    return str(url)


def _mask_key(url: str) -> str:
    # 日志里不出现 API key
    return str(httpx.URL(url).copy_set_param("APPID", "***"))


class OpenWeatherClient:
    """
    同步调用 OpenWeatherMap，一次 GET 对应一个 endpoint，不重试。

    传入的 http_client 由调用方负责关闭；没传就自己建一个，用 with 或 close() 释放。
    """

    def __init__(
        self,
        params: WeatherParams,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.params = params
        self.timeout = timeout
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def fetch(self, path: str) -> bytes:
        url = build_url(
            self.params.base_url, path, self.params.app_id, self.params.coord
        )
        logger.debug("GET %s", _mask_key(url))

        request = self.http_client.build_request("GET", url, timeout=self.timeout)
        try:
            resp = self.http_client.send(request, stream=True)
        except httpx.DecodingError as e:
            # 传输层预先读取了 body 时，解压失败也在这里冒出来
            raise ReadError(f"reading {path} response body failed: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"GET {path} failed: {e}") from e

        try:
            if resp.status_code != httpx.codes.OK:
                logger.warning("GET %s -> %s %s", path, resp.status_code, resp.reason_phrase)
                raise UnexpectedStatusError(resp.status_code, resp.reason_phrase)

            try:
                raw = resp.read()
            except (httpx.RequestError, httpx.StreamError) as e:
                raise ReadError(f"reading {path} response body failed: {e}") from e
        finally:
            resp.close()

        logger.debug("GET %s -> 200, %d bytes", path, len(raw))
        return raw
