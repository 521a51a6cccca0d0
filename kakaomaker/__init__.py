"""Kakao Maker - Kakao screen generator for Android layouts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kakaomaker")
except PackageNotFoundError:
    __version__ = "(local)"
