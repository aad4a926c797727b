"""OpenWeatherMap 当前天气 + 预报命令行客户端"""

__version__ = "0.1.0"
