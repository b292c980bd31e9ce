"""Tests for building and reading Figma variables documents."""

from __future__ import annotations

import copy
import json

import pytest

from ramplab.core import config as c
from ramplab.core.color import parse
from ramplab.core.errors import ExportFormatError
from ramplab.logic.export.engine import (
    Collection,
    CollectionEntry,
    build_export,
    build_export_from_pairs,
    dumps_export,
    normalize_format,
)
from ramplab.logic.export.importer import load_export
from ramplab.logic.ramp.pipeline import build_ramp_pair


@pytest.fixture(scope="module")
def collection() -> Collection:
    return Collection(
        name="Brand",
        entries=(
            CollectionEntry("primary", "#3B82F6"),
            CollectionEntry("neutral", "#808080", default_mode=c.DARK),
        ),
    )


@pytest.fixture(scope="module")
def themed(collection: Collection) -> dict:
    return build_export(collection, "figma-themed")


@pytest.fixture(scope="module")
def primary_pair():
    return build_ramp_pair(parse("#3B82F6"), c.LIGHT)


class TestFormats:
    """Tests for export format names."""

    @pytest.mark.parametrize(
        "given,expected",
        [("themed", "themed"), ("figma-paired", "paired"), ("Light Ramp", "light ramp"), ("figma-dark ramp", "dark ramp")],
    )
    def test_normalize(self, given: str, expected: str) -> None:
        assert normalize_format(given) == expected

    def test_unknown_format(self) -> None:
        with pytest.raises(ExportFormatError):
            normalize_format("svg")

    def test_unknown_format_fails_before_pipeline(self, collection: Collection) -> None:
        with pytest.raises(ExportFormatError):
            build_export(collection, "css")


class TestBuildExport:
    """Tests for the exported document shapes."""

    def test_themed_layout(self, themed: dict) -> None:
        assert themed["format"] == "themed"
        assert themed["collectionName"] == "Brand"
        for theme in (c.THEME_LIGHT, c.THEME_DARK):
            assert list(themed["themes"][theme]) == ["primary", "neutral"]
            for ramp in themed["themes"][theme].values():
                assert len(ramp) == 11
                assert sum(key.endswith("*") for key in ramp) == 1

    def test_themed_hexes_match_pipeline(self, themed: dict, primary_pair) -> None:
        light = themed["themes"][c.THEME_LIGHT]["primary"]
        anchor = primary_pair.anchor_scale_light
        assert light[f"{anchor}*"] == "#3B82F6"
        for scale in c.SCALES:
            key = f"{scale}*" if scale == anchor else str(scale)
            assert light[key] == primary_pair.light[scale].hex

    def test_paired_layout(self, primary_pair) -> None:
        doc = build_export_from_pairs("Brand", [("primary", primary_pair)], "figma-paired")
        cell = doc["colors"]["primary"]["500"]
        assert cell == {"Light": primary_pair.light[500].hex, "Dark": primary_pair.dark[500].hex}
        assert list(doc["colors"]["primary"]) == [str(s) for s in c.SCALES]

    @pytest.mark.parametrize("fmt,mode", [("light ramp", c.LIGHT), ("dark ramp", c.DARK)])
    def test_single_ramp_layout(self, primary_pair, fmt: str, mode: str) -> None:
        doc = build_export_from_pairs("Brand", [("primary", primary_pair)], fmt)
        assert doc["colors"]["primary"] == {str(k): v for k, v in primary_pair.ramp(mode).as_dict().items()}

    def test_unparseable_entry_is_skipped(self, capsys: pytest.CaptureFixture[str]) -> None:
        collection = Collection("Brand", (CollectionEntry("broken", "not a color"), CollectionEntry("red", "#FF0000")))
        doc = build_export(collection, "paired")
        assert list(doc["colors"]) == ["red"]
        assert "skipping 'broken'" in capsys.readouterr().err

    def test_dumps_uses_two_space_indent(self, themed: dict) -> None:
        assert dumps_export(themed).startswith('{\n  "format": "themed"')


class TestLoadExport:
    """Tests for reading documents back."""

    def test_themed_round_trip(self, themed: dict, primary_pair) -> None:
        colors = load_export(dumps_export(themed))
        assert set(colors) == {"primary", "neutral"}
        primary = colors["primary"]
        assert primary[c.LIGHT] == primary_pair.light.as_dict()
        assert primary[c.DARK] == primary_pair.dark.as_dict()
        assert primary["anchors"][c.LIGHT] == primary_pair.anchor_scale_light

    def test_paired_round_trip(self, primary_pair) -> None:
        doc = build_export_from_pairs("Brand", [("primary", primary_pair)], "paired")
        colors = load_export(doc)
        assert colors["primary"][c.DARK] == primary_pair.dark.as_dict()
        assert colors["primary"]["anchors"] == {}

    def test_short_and_lowercase_hex(self) -> None:
        doc = {
            "format": "light ramp",
            "collectionName": "X",
            "colors": {"a": {str(s): "#abc" for s in c.SCALES}},
        }
        colors = load_export(json.dumps(doc))
        assert set(colors["a"][c.LIGHT].values()) == {"#AABBCC"}
        assert colors["a"][c.DARK] == {}

    def test_invalid_json(self) -> None:
        with pytest.raises(ExportFormatError, match="not valid JSON"):
            load_export("{")

    def test_missing_format(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        del doc["format"]
        with pytest.raises(ExportFormatError):
            load_export(doc)

    def test_collection_name_must_be_text(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        doc["collectionName"] = 7
        with pytest.raises(ExportFormatError):
            load_export(doc)

    def test_missing_scale(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        ramp = doc["themes"][c.THEME_DARK]["primary"]
        ramp.pop("50", None) or ramp.pop("50*")
        with pytest.raises(ExportFormatError, match="missing scales"):
            load_export(doc)

    def test_two_stars(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        ramp = doc["themes"][c.THEME_LIGHT]["primary"]
        plain = next(key for key in ramp if not key.endswith("*"))
        ramp[plain + "*"] = ramp.pop(plain)
        with pytest.raises(ExportFormatError, match="exactly one"):
            load_export(doc)

    def test_bad_hex_value(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        ramp = doc["themes"][c.THEME_LIGHT]["neutral"]
        key = next(iter(ramp))
        ramp[key] = "red"
        with pytest.raises(ExportFormatError):
            load_export(doc)

    def test_unknown_scale(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        doc["themes"][c.THEME_LIGHT]["primary"]["975"] = "#000000"
        with pytest.raises(ExportFormatError, match="unknown scale"):
            load_export(doc)

    def test_themes_must_match(self, themed: dict) -> None:
        doc = copy.deepcopy(themed)
        del doc["themes"][c.THEME_DARK]["neutral"]
        with pytest.raises(ExportFormatError, match="same colors"):
            load_export(doc)

    def test_paired_cell_needs_both_themes(self, primary_pair) -> None:
        doc = build_export_from_pairs("Brand", [("primary", primary_pair)], "paired")
        del doc["colors"]["primary"]["500"]["Dark"]
        with pytest.raises(ExportFormatError):
            load_export(doc)
