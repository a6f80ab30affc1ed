"""End-to-end tests for the per-file pipeline and directory runs."""

import logging

import pytest

from beatmap_simplifier.config import ProcessOptions
from beatmap_simplifier.line_store import LineStore
from beatmap_simplifier.processor import ChartSimplifier, Outcome, RunMode, run_directory

from conftest import (
    ATTACKS_INDEX,
    BEGINNER_BODY,
    BEGINNER_BODY_INDEX,
    SAMPLE_SM,
    SIMPLIFIED_BEGINNER_BODY,
)


def test_extract_from_store(replace_options):
    results = ChartSimplifier(replace_options).extract(LineStore.from_text(SAMPLE_SM))
    assert len(results) == 1
    assert results[0].content == BEGINNER_BODY


def test_replace_file(chart_file, replace_options):
    report = ChartSimplifier(replace_options).process_file(chart_file)

    assert not report.failed
    assert report.outcomes == [Outcome.REPLACED]
    lines = chart_file.read_text(encoding="utf-8").split("\n")
    end = BEGINNER_BODY_INDEX + len(SIMPLIFIED_BEGINNER_BODY)
    assert lines[BEGINNER_BODY_INDEX:end] == SIMPLIFIED_BEGINNER_BODY
    assert len(lines) == len(SAMPLE_SM.split("\n"))

    backup = chart_file.with_name("All Honor and Glory.mp3.bak")
    assert backup.read_text(encoding="utf-8") == SAMPLE_SM


def test_second_replace_run_changes_nothing(chart_file, replace_options):
    simplifier = ChartSimplifier(replace_options)
    simplifier.process_file(chart_file)
    first = chart_file.read_text(encoding="utf-8")

    simplifier.process_file(chart_file)
    assert chart_file.read_text(encoding="utf-8") == first
    # the backup still holds the untouched chart
    assert chart_file.with_suffix(".bak").read_text(encoding="utf-8") == SAMPLE_SM


def test_insert_file(chart_file, insert_before_options):
    report = ChartSimplifier(insert_before_options).process_file(chart_file)

    assert report.outcomes == [Outcome.INSERTED]
    lines = chart_file.read_text(encoding="utf-8").split("\n")
    block = ["", "//", "dance-single:", "", "Novice:", "1:", *SIMPLIFIED_BEGINNER_BODY, ";"]
    assert lines[ATTACKS_INDEX:ATTACKS_INDEX + len(block)] == block
    assert lines[ATTACKS_INDEX + len(block)] == "#ATTACKS:;"
    # the original Beginner chart is left alone
    assert "\n".join(BEGINNER_BODY) in "\n".join(lines)


def test_missing_chart_leaves_file_alone(chart_file):
    options = ProcessOptions(section_to_extract="Challenge:10", action="Replace", new_section_name="Challenge:10")
    report = ChartSimplifier(options).process_file(chart_file, backup=False)

    assert report.outcomes == [Outcome.NOT_FOUND]
    assert not report.changed
    assert chart_file.read_text(encoding="utf-8") == SAMPLE_SM
    assert not chart_file.with_suffix(".bak").exists()


def test_insert_without_anchor(tmp_path, insert_before_options):
    path = tmp_path / "song.sm"
    path.write_text(SAMPLE_SM.replace("#ATTACKS:;\n", ""), encoding="utf-8")

    report = ChartSimplifier(insert_before_options).process_file(path, backup=False)
    assert report.outcomes == [Outcome.NO_ANCHOR]
    assert path.read_text(encoding="utf-8") == SAMPLE_SM.replace("#ATTACKS:;\n", "")


def test_crlf_lines_outside_body_are_kept(tmp_path, replace_options):
    path = tmp_path / "song.sm"
    path.write_bytes(SAMPLE_SM.replace("\n", "\r\n").encode("utf-8"))

    report = ChartSimplifier(replace_options).process_file(path, backup=False)
    assert report.outcomes == [Outcome.REPLACED]

    data = path.read_bytes()
    assert data.startswith(b"#TITLE:All Honor and Glory;\r\n#ARTIST:Test Artist;\r\n")
    assert b"     Easy:\r\n" in data
    assert b"\r\n3000\r\n" in data


def test_unreadable_file_is_reported(tmp_path, replace_options, caplog):
    caplog.set_level(logging.ERROR)
    path = tmp_path / "broken.sm"
    path.write_bytes(b"#NOTES:\n\xff\xfe\xfa\n")

    report = ChartSimplifier(replace_options).process_file(path, backup=False)
    assert report.failed
    assert report.outcomes == []
    assert "Error processing" in caplog.text


def test_extract_file_never_writes(chart_file, replace_options, caplog):
    caplog.set_level(logging.INFO)
    report = ChartSimplifier(replace_options).extract_file(chart_file)

    assert report.outcomes == [Outcome.FOUND]
    assert chart_file.read_text(encoding="utf-8") == SAMPLE_SM
    assert not chart_file.with_suffix(".bak").exists()
    assert "2: 1000" in caplog.text


def test_run_directory_continues_after_failure(tmp_path, chart_file, replace_options):
    broken = tmp_path / "songs" / "aaa.sm"
    broken.write_bytes(b"\xff\xfe\n")

    reports = run_directory(tmp_path / "songs", RunMode.PROCESS, replace_options)

    by_name = {r.path.name: r for r in reports}
    assert set(by_name) == {"aaa.sm", "All Honor and Glory.mp3.sm"}
    assert by_name["aaa.sm"].failed
    assert by_name["All Honor and Glory.mp3.sm"].changed
    assert chart_file.read_text(encoding="utf-8") != SAMPLE_SM


def test_run_directory_extract_mode(tmp_path, chart_file, replace_options):
    reports = run_directory(str(tmp_path), "extract", replace_options)

    assert len(reports) == 1
    assert reports[0].outcomes == [Outcome.FOUND]
    assert chart_file.read_text(encoding="utf-8") == SAMPLE_SM


def test_run_directory_missing_root(tmp_path, replace_options):
    with pytest.raises(FileNotFoundError):
        run_directory(tmp_path / "nope", RunMode.PROCESS, replace_options)

    with pytest.raises(ValueError):
        run_directory("  ", RunMode.PROCESS, replace_options)


def test_replace_with_unknown_note_character(tmp_path, replace_options):
    path = tmp_path / "song.sm"
    path.write_text(SAMPLE_SM.replace("\n0010\n", "\n0005\n", 1), encoding="utf-8")

    report = ChartSimplifier(replace_options).process_file(path, backup=False)

    assert not report.failed
    assert report.outcomes == [Outcome.REPLACED]
    lines = path.read_text(encoding="utf-8").split("\n")
    start = BEGINNER_BODY_INDEX + 1
    assert lines[start:start + 4] == ["0000", "0100", "0005", "0000"]


def test_empty_chart_body(tmp_path, replace_options, caplog):
    caplog.set_level(logging.INFO)
    text = "\n".join([
        "#TITLE:Empty;",
        "#ATTACKS:;",
        "#NOTES:",
        "     dance-single:",
        "     :",
        "     Beginner:",
        "     2:",
        "     Easy:",
        "     4:",
        "1000",
        ";",
        "",
    ])
    path = tmp_path / "song.sm"
    path.write_text(text, encoding="utf-8")

    report = ChartSimplifier(replace_options).process_file(path, backup=False)

    assert report.outcomes == [Outcome.EMPTY]
    assert not report.changed
    assert path.read_text(encoding="utf-8") == text
    assert "found but empty" in caplog.text
    assert "No Beginner:2 chart found" not in caplog.text
