"""Tests for the tag to wrapper type table."""

import json

import pytest

from kakaomaker.generator.config import ConfigError
from kakaomaker.generator.types import WrapperType
from kakaomaker.generator.wrappers import DEFAULT_TYPES, KVIEW, TypeResolver, load_types


def describe_type_resolver():
    def resolves_framework_widgets(expect):
        resolver = TypeResolver()
        expect(resolver.resolve("EditText").name) == "KEditText"
        expect(resolver.resolve("Button").name) == "KButton"
        expect(resolver.resolve("TextView").qualified_name) == "com.agoda.kakao.text.KTextView"

    def resolves_fully_qualified_tags(expect):
        resolver = TypeResolver()
        tag = "com.google.android.material.textfield.TextInputEditText"
        expect(resolver.resolve(tag).name) == "KEditText"
        expect(resolver.resolve("androidx.appcompat.widget.Toolbar").name) == "KToolbar"

    def falls_back_for_unknown_tags(expect):
        resolver = TypeResolver()
        expect(resolver.resolve("com.example.FancyChart")) == KVIEW
        expect(resolver.resolve("")) == KVIEW
        expect(resolver.resolve("LinearLayout")) == KVIEW

    def matches_tags_exactly(expect):
        resolver = TypeResolver()
        expect(resolver.resolve("button")) == KVIEW
        expect(resolver.resolve("widget.Button")) == KVIEW

    def uses_injected_table(expect):
        custom = WrapperType("KChart", "com.example.kakao")
        resolver = TypeResolver({"Chart": custom}, default=WrapperType("KFallback"))
        expect(resolver.resolve("Chart")) == custom
        expect(resolver.resolve("Button").name) == "KFallback"

    def extends_without_mutating(expect):
        base = TypeResolver()
        custom = WrapperType("KMaterialButton", "com.example.kakao")
        extended = base.extended({"Button": custom, "Chart": custom})
        expect(extended.resolve("Button")) == custom
        expect(extended.resolve("EditText").name) == "KEditText"
        expect(base.resolve("Button").name) == "KButton"
        expect("Chart" in DEFAULT_TYPES) == False

    def table_is_read_only(expect):
        resolver = TypeResolver()
        with pytest.raises(TypeError):
            resolver.table["Button"] = KVIEW  # type: ignore[index]


def describe_load_types():
    def loads_qualified_names(expect, tmp_path):
        path = tmp_path / "types.json"
        path.write_text(json.dumps({"com.example.Chart": "com.example.kakao.KChart"}))
        table = load_types(path)
        expect(table["com.example.Chart"]) == WrapperType("KChart", "com.example.kakao")

    def accepts_names_without_package(expect, tmp_path):
        path = tmp_path / "types.json"
        path.write_text(json.dumps({"Chart": "KChart"}))
        expect(load_types(path)["Chart"]) == WrapperType("KChart", None)

    def rejects_invalid_json(expect, tmp_path):
        path = tmp_path / "types.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError) as exc:
            load_types(path)
        expect("not valid JSON" in str(exc.value)) == True

    def rejects_non_object(expect, tmp_path):
        path = tmp_path / "types.json"
        path.write_text("[]")
        with pytest.raises(ConfigError):
            load_types(path)

    def rejects_empty_wrapper(expect, tmp_path):
        path = tmp_path / "types.json"
        path.write_text(json.dumps({"Chart": ""}))
        with pytest.raises(ConfigError):
            load_types(path)

    def rejects_missing_file(expect, tmp_path):
        with pytest.raises(ConfigError):
            load_types(tmp_path / "missing.json")
