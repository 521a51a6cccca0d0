"""Kakao screen generator."""

from .driver import run as run
from .parser import LayoutParseError as LayoutParseError
from .parser import parse as parse
from .parser import parse_string as parse_string
from .screens import IncludeResolutionError as IncludeResolutionError
from .screens import ScreenNameError as ScreenNameError
from .screens import build as build
from .screens import walk as walk
from .sources import find_layouts as find_layouts
from .types import *
from .wrappers import TypeResolver as TypeResolver
