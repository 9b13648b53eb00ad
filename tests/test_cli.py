"""End-to-end tests for the penitential-act command line."""

from __future__ import annotations

import json

import pytest
from docx import Document
from typer.testing import CliRunner

from penitential_act.config.loader import clear_cache
from penitential_act.domain.rules.constants import (
    DEFAULT_PRIEST_CLOSING,
    DEFAULT_PRIEST_OPENING,
)
from penitential_act.presentation.cli.app import CONFIG_ENV, app

runner = CliRunner()

INVOCATIONS = [
    "Lord Jesus, you are the shepherd promised from Bethlehem:",
    "Christ Jesus, your hidden presence stirs joy in faithful hearts:",
    "Lord Jesus, you bless all who believe your promises:",
]

CUSTOM_OPENING = (
    "Dear friends, as we prepare to celebrate these sacred mysteries, "
    "let us acknowledge our need for God's mercy."
)
CUSTOM_CLOSING = (
    "May God in his infinite mercy forgive us our sins and lead us to eternal life."
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    clear_cache()
    yield
    clear_cache()


def _invoke(out, celebration, season, year, *extra, invocations=INVOCATIONS):
    return runner.invoke(app, [str(out), celebration, season, year, *invocations, *extra])


def _paragraphs(path) -> list[str]:
    return [p.text for p in Document(str(path)).paragraphs]


# ---------------------------------------------------------------------------
# Successful runs
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_sunday(self, tmp_path):
        result = _invoke(tmp_path, "1st", "Advent", "A")
        expected = tmp_path / "Penitential Act_1st Sunday of Advent_A.docx"
        assert result.exit_code == 0, result.output
        assert expected.exists()
        assert expected.read_bytes()[:2] == b"PK"
        assert result.output.strip().splitlines() == [
            f"Generated: {expected}",
            "Font size: 24pt",
        ]

    def test_named_feast_comma_removed(self, tmp_path):
        result = _invoke(
            tmp_path,
            "Solemnity of Mary, Mother of God",
            "",
            "C",
            invocations=[
                "Lord Jesus, born of the Virgin Mary to make us children of God:",
                "Christ Jesus, your name means salvation for all who call on you:",
                "Lord Jesus, you hear your people through your Mother's prayers:",
            ],
        )
        expected = tmp_path / "Penitential Act_Solemnity of Mary Mother of God_C.docx"
        assert result.exit_code == 0, result.output
        assert expected.exists()
        assert expected.read_bytes()[:2] == b"PK"
        assert _paragraphs(expected)[0] == (
            "Penitential Act – Solemnity of Mary, Mother of God, Year C"
        )

    @pytest.mark.parametrize(
        "celebration,season,year,filename",
        [
            ("Ascension of the Lord", "", "B", "Penitential Act_Ascension of the Lord_B.docx"),
            ("Nativity of the Lord", "", "A", "Penitential Act_Nativity of the Lord_A.docx"),
            ("14th", "Ordinary Time", "A", "Penitential Act_14th Sunday of Ordinary Time_A.docx"),
            ("2nd", "Lent", "b", "Penitential Act_2nd Sunday of Lent_B.docx"),
            (
                "Feast of St. John the Baptist",
                "",
                "A",
                "Penitential Act_Feast of St. John the Baptist_A.docx",
            ),
        ],
    )
    def test_file_names(self, tmp_path, celebration, season, year, filename):
        result = _invoke(tmp_path, celebration, season, year)
        assert result.exit_code == 0, result.output
        assert (tmp_path / filename).exists()

    def test_custom_opening_only(self, tmp_path):
        result = _invoke(tmp_path, "3rd", "Advent", "B", CUSTOM_OPENING)
        path = tmp_path / "Penitential Act_3rd Sunday of Advent_B.docx"
        assert result.exit_code == 0, result.output
        texts = _paragraphs(path)
        assert texts[2] == CUSTOM_OPENING
        assert texts[-1] == DEFAULT_PRIEST_CLOSING

    def test_custom_closing_only(self, tmp_path):
        result = _invoke(tmp_path, "4th", "Lent", "C", "", CUSTOM_CLOSING)
        path = tmp_path / "Penitential Act_4th Sunday of Lent_C.docx"
        assert result.exit_code == 0, result.output
        texts = _paragraphs(path)
        assert texts[2] == DEFAULT_PRIEST_OPENING
        assert texts[-1] == CUSTOM_CLOSING

    def test_custom_both(self, tmp_path):
        result = _invoke(tmp_path, "Epiphany of the Lord", "", "A", CUSTOM_OPENING, CUSTOM_CLOSING)
        path = tmp_path / "Penitential Act_Epiphany of the Lord_A.docx"
        assert result.exit_code == 0, result.output
        texts = _paragraphs(path)
        assert texts[2] == CUSTOM_OPENING
        assert texts[-1] == CUSTOM_CLOSING

    def test_long_texts_shrink_font(self, tmp_path):
        opening = (
            "Beloved brothers and sisters in Christ, as we gather here today in the "
            "presence of the Lord to celebrate these most sacred and holy mysteries, "
            "let us pause for a moment to acknowledge before God and one another our "
            "sins, our failings, and our deep need for divine mercy and forgiveness."
        )
        closing = (
            "May almighty God, in his infinite wisdom, boundless compassion, and "
            "unfailing love, have mercy on us, forgive us all our sins both known and "
            "unknown, heal the wounds of our past transgressions, and bring us safely "
            "to the joy of everlasting life in his heavenly kingdom."
        )
        result = _invoke(tmp_path, "5th", "Easter", "C", opening, closing)
        assert result.exit_code == 0, result.output
        size_line = result.output.strip().splitlines()[-1]
        points = float(size_line.removeprefix("Font size: ").removesuffix("pt"))
        assert 12 <= points < 24

    def test_extra_arguments_ignored(self, tmp_path):
        result = _invoke(tmp_path, "1st", "Advent", "A", CUSTOM_OPENING, CUSTOM_CLOSING, "extra")
        path = tmp_path / "Penitential Act_1st Sunday of Advent_A.docx"
        assert result.exit_code == 0, result.output
        texts = _paragraphs(path)
        assert texts[-1] == CUSTOM_CLOSING
        assert "extra" not in texts

    def test_dash_prefixed_text_is_a_value(self, tmp_path):
        invocations = ["-Lord Jesus, you came to call sinners:", *INVOCATIONS[1:]]
        result = _invoke(tmp_path, "1st", "Advent", "A", invocations=invocations)
        path = tmp_path / "Penitential Act_1st Sunday of Advent_A.docx"
        assert result.exit_code == 0, result.output
        assert _paragraphs(path)[4] == "-Lord Jesus, you came to call sinners:"

    def test_creates_nested_output_dir(self, tmp_path):
        out = tmp_path / "a" / "b" / "c"
        result = _invoke(out, "1st", "Advent", "A")
        assert result.exit_code == 0, result.output
        assert (out / "Penitential Act_1st Sunday of Advent_A.docx").exists()

    def test_config_from_environment(self, tmp_path, monkeypatch):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"typography": {"font_name": "Garamond"}}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV, str(config))
        result = _invoke(tmp_path / "out", "1st", "Advent", "A")
        assert result.exit_code == 0, result.output
        docx = Document(str(tmp_path / "out" / "Penitential Act_1st Sunday of Advent_A.docx"))
        assert docx.paragraphs[0].runs[0].font.name == "Garamond"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_missing_season(self, tmp_path):
        out = tmp_path / "out"
        result = _invoke(out, "1st", "", "A")
        assert result.exit_code == 1
        assert "require a season" in result.output
        assert not out.exists()

    def test_invalid_year(self, tmp_path):
        out = tmp_path / "out"
        result = _invoke(out, "1st", "Advent", "D")
        assert result.exit_code == 1
        assert "Year must be A, B, or C" in result.output
        assert not out.exists()

    def test_missing_arguments(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path), "1st", "Advent"])
        assert result.exit_code == 1
        assert "Usage" in result.output
        assert "[priest_opening]" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_no_arguments(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Usage" in result.output

    def test_bad_config_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "missing.json"))
        result = _invoke(tmp_path / "out", "1st", "Advent", "A")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "OUTPUT_DIR" in result.output
