"""Tests for source map rewriting."""

import json

import pytest

from core.exceptions import ToolExecutionError
from providers.transforms.path_flatten import PathFlattenTransform
from providers.transforms.source_map import rewrite_source_map_file, rewrite_sources


class TestRewriteSources:
    """Test rewrite_sources."""

    def test_sources_restored(self):
        transform = PathFlattenTransform(sep="/")
        map_data = {
            "version": 3,
            "sources": [
                "core/renderers-slash-common-slash-block.js",
                "blocks/logic.js",
                "blocks/odd-slash-name.js",
            ],
            "mappings": "AAAA",
        }

        result = rewrite_sources(map_data, transform.reverse)

        assert result["sources"] == [
            "core/renderers/common/block.js",
            "blocks/logic.js",
            "blocks/odd-slash-name.js",
        ]
        assert result["mappings"] == "AAAA"
        assert map_data["sources"][0] == "core/renderers-slash-common-slash-block.js"

    def test_map_without_sources_unchanged(self):
        assert rewrite_sources({"version": 3}, str.upper) == {"version": 3}


class TestRewriteSourceMapFile:
    """Test rewrite_source_map_file."""

    def test_rewrites_in_place(self, temp_dir):
        map_path = temp_dir / "A_compressed.js.map"
        map_path.write_text(json.dumps({
            "version": 3,
            "file": "A.js",
            "sources": ["core/utils-slash-dom.js"],
            "mappings": "",
        }))

        rewrite_source_map_file(
            map_path,
            PathFlattenTransform(sep="/").reverse,
            source_root="./",
            output_name="A_compressed.js",
        )

        data = json.loads(map_path.read_text())
        assert data["sources"] == ["core/utils/dom.js"]
        assert data["sourceRoot"] == "./"
        assert data["file"] == "A_compressed.js"

    def test_unreadable_map(self, temp_dir):
        map_path = temp_dir / "broken.map"
        map_path.write_text("not json")

        with pytest.raises(ToolExecutionError):
            rewrite_source_map_file(map_path, str)
