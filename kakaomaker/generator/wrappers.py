"""Mapping of Android widget tags to Kakao wrapper types."""

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .config import ConfigError
from .types import WrapperType

KAKAO = "com.agoda.kakao"

SCREEN = WrapperType("Screen", f"{KAKAO}.screen")
KVIEW = WrapperType("KView", f"{KAKAO}.common.views")

_WRAPPERS = {
    "KButton": f"{KAKAO}.text",
    "KCheckBox": f"{KAKAO}.check",
    "KDatePicker": f"{KAKAO}.picker.date",
    "KEditText": f"{KAKAO}.edit",
    "KImageView": f"{KAKAO}.image",
    "KNavigationView": f"{KAKAO}.navigation",
    "KBottomNavigationView": f"{KAKAO}.bottomnav",
    "KProgressBar": f"{KAKAO}.progress",
    "KRatingBar": f"{KAKAO}.rating",
    "KScrollView": f"{KAKAO}.scroll",
    "KSeekBar": f"{KAKAO}.progress",
    "KSwipeRefreshLayout": f"{KAKAO}.swiperefresh",
    "KSwitch": f"{KAKAO}.switch",
    "KTabLayout": f"{KAKAO}.tabs",
    "KTextInputLayout": f"{KAKAO}.edit",
    "KTextView": f"{KAKAO}.text",
    "KTimePicker": f"{KAKAO}.picker.time",
    "KToolbar": f"{KAKAO}.toolbar",
    "KViewPager": f"{KAKAO}.pager",
    "KWebView": f"{KAKAO}.web",
}

# Tag name (as written in the layout) -> wrapper simple name
_TAGS = {
    # Framework widgets
    "Button": "KButton",
    "CheckBox": "KCheckBox",
    "DatePicker": "KDatePicker",
    "EditText": "KEditText",
    "ImageButton": "KImageView",
    "ImageView": "KImageView",
    "ProgressBar": "KProgressBar",
    "RatingBar": "KRatingBar",
    "ScrollView": "KScrollView",
    "SeekBar": "KSeekBar",
    "Switch": "KSwitch",
    "TextView": "KTextView",
    "TimePicker": "KTimePicker",
    "Toolbar": "KToolbar",
    "WebView": "KWebView",
    # AppCompat
    "androidx.appcompat.widget.AppCompatButton": "KButton",
    "androidx.appcompat.widget.AppCompatCheckBox": "KCheckBox",
    "androidx.appcompat.widget.AppCompatEditText": "KEditText",
    "androidx.appcompat.widget.AppCompatImageButton": "KImageView",
    "androidx.appcompat.widget.AppCompatImageView": "KImageView",
    "androidx.appcompat.widget.AppCompatRatingBar": "KRatingBar",
    "androidx.appcompat.widget.AppCompatSeekBar": "KSeekBar",
    "androidx.appcompat.widget.AppCompatTextView": "KTextView",
    "androidx.appcompat.widget.SwitchCompat": "KSwitch",
    "androidx.appcompat.widget.Toolbar": "KToolbar",
    # AndroidX
    "androidx.core.widget.NestedScrollView": "KScrollView",
    "androidx.swiperefreshlayout.widget.SwipeRefreshLayout": "KSwipeRefreshLayout",
    "androidx.viewpager.widget.ViewPager": "KViewPager",
    # Material components
    "com.google.android.material.bottomnavigation.BottomNavigationView": "KBottomNavigationView",
    "com.google.android.material.button.MaterialButton": "KButton",
    "com.google.android.material.checkbox.MaterialCheckBox": "KCheckBox",
    "com.google.android.material.navigation.NavigationView": "KNavigationView",
    "com.google.android.material.switchmaterial.SwitchMaterial": "KSwitch",
    "com.google.android.material.tabs.TabLayout": "KTabLayout",
    "com.google.android.material.textfield.TextInputEditText": "KEditText",
    "com.google.android.material.textfield.TextInputLayout": "KTextInputLayout",
}

DEFAULT_TYPES: Mapping[str, WrapperType] = MappingProxyType(
    {tag: WrapperType(wrapper, _WRAPPERS[wrapper]) for tag, wrapper in _TAGS.items()}
)


class TypeResolver:
    """Resolve widget tags to wrapper types.

    Lookup is exact on the tag as written in the layout. Unknown tags
    resolve to ``default`` so that generation never fails on custom views.
    """

    def __init__(
        self,
        table: Mapping[str, WrapperType] = DEFAULT_TYPES,
        default: WrapperType = KVIEW,
    ):
        self.table = MappingProxyType(dict(table))
        self.default = default

    def resolve(self, tag: str) -> WrapperType:
        return self.table.get(tag, self.default)

    def extended(self, extra: Mapping[str, WrapperType]) -> "TypeResolver":
        """Return a resolver whose table also contains ``extra`` (which wins)."""
        return TypeResolver({**self.table, **extra}, self.default)


def load_types(path: str | Path) -> dict[str, WrapperType]:
    """Load extra tag mappings from a JSON object of tag -> qualified wrapper name."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read type table {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Type table {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Type table {path} must be a JSON object")

    table: dict[str, WrapperType] = {}
    for tag, wrapper in data.items():
        if not isinstance(wrapper, str) or not wrapper.strip():
            raise ConfigError(f"Type table {path}: wrapper for {tag} must be a non-empty string")
        table[tag] = WrapperType.parse(wrapper)
    return table
