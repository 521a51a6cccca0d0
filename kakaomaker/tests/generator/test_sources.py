"""Tests for layout discovery."""

from kakaomaker.generator.sources import find_layouts, is_layout_dir


def describe_find_layouts():
    def finds_layouts_in_resource_tree(expect, tmp_path):
        res = tmp_path / "src" / "main" / "res"
        (res / "layout").mkdir(parents=True)
        (res / "values").mkdir()
        (res / "layout" / "b_screen.xml").write_text("<FrameLayout/>")
        (res / "layout" / "a_screen.xml").write_text("<FrameLayout/>")
        (res / "layout" / "notes.txt").write_text("not a layout")
        (res / "values" / "strings.xml").write_text("<resources/>")

        layouts = find_layouts([res])
        expect([layout.name for layout in layouts]) == ["a_screen", "b_screen"]

    def skips_qualified_layout_dirs(expect, tmp_path):
        (tmp_path / "layout").mkdir()
        (tmp_path / "layout-land").mkdir()
        (tmp_path / "layout" / "main.xml").write_text("<FrameLayout/>")
        (tmp_path / "layout-land" / "main.xml").write_text("<FrameLayout/>")

        layouts = find_layouts([tmp_path])
        expect(len(layouts)) == 1
        expect(layouts.find("main").path) == tmp_path / "layout" / "main.xml"

    def accepts_layout_dir_itself(expect, tmp_path):
        (tmp_path / "layout").mkdir()
        (tmp_path / "layout" / "main.xml").write_text("<FrameLayout/>")
        expect(len(find_layouts([tmp_path / "layout"]))) == 1

    def accepts_single_file(expect, tmp_path):
        path = tmp_path / "custom.xml"
        path.write_text("<FrameLayout/>")
        layouts = find_layouts([path])
        expect([layout.name for layout in layouts]) == ["custom"]

    def returns_empty_set_for_empty_dir(expect, tmp_path):
        expect(len(find_layouts([tmp_path]))) == 0


def describe_is_layout_dir():
    def matches_only_default_layout_dir(expect, tmp_path):
        expect(is_layout_dir(tmp_path / "layout")) == True
        expect(is_layout_dir(tmp_path / "layout-land")) == False
        expect(is_layout_dir(tmp_path / "drawable")) == False
