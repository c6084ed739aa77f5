from __future__ import annotations

import pytest

from loog.adapters.colors import rich_colorizer
from loog.domain.levels import METHODS, LogLevel
from loog.logger import PREFIX_TABLES


def test_default_info_writes_coloured_prefix_space_message(make_logger, recording_sink) -> None:
    log = make_logger()

    log.info("Hi")

    assert recording_sink.lines == [f"{rich_colorizer('bold green')('[INF]')} Hi"]


@pytest.mark.parametrize("method", [method for method in METHODS if method != "log"])
def test_every_method_writes_its_text_prefix(make_logger, recording_sink, method: str) -> None:
    log = make_logger(log_level="all", color=False)

    getattr(log, method)("Hi")

    assert recording_sink.lines == [f"{PREFIX_TABLES['text'][method]} Hi"]


def test_log_method_has_no_prefix_and_no_colour(make_logger, recording_sink) -> None:
    make_logger().log("plain", "words")

    assert recording_sink.lines == ["plain words"]


def test_warn_level_scenario(make_logger, recording_sink) -> None:
    log = make_logger(color=False).set_log_level("warn")

    log.error("a").warn("b").info("c")

    assert recording_sink.lines == ["[ERR] a", "[WRN] b"]


@pytest.mark.parametrize("style", ["text", "emoji"])
def test_prefix_style_only_changes_the_glyph(make_logger, recording_sink, style: str) -> None:
    make_logger(prefix_style=style, color=False).info("Hi")

    (line,) = recording_sink.lines
    assert line == f"{PREFIX_TABLES[style]['info']} Hi"
    assert line.endswith("Hi")


def test_prefix_style_none_colours_the_whole_line(make_logger, recording_sink) -> None:
    make_logger(prefix_style="none").info("Hi")

    assert recording_sink.lines == [rich_colorizer("bold green")("Hi")]


def test_prefix_style_none_without_colour_is_plain(make_logger, recording_sink) -> None:
    make_logger(prefix_style="none", color=False).info("Hi")

    assert recording_sink.lines == ["Hi"]


def test_process_label_is_prepended(make_logger, recording_sink) -> None:
    make_logger(color=False, process="[worker-1]").indent().info("ready")

    assert recording_sink.lines == ["[worker-1]   [INF] ready"]


def test_set_log_level_recomputes_flags(make_logger) -> None:
    log = make_logger(log_level="all")
    assert log.is_enabled("silly")

    log.set_log_level("error")

    assert not log.is_enabled("silly")
    assert not log.is_enabled("warn")
    assert log.is_enabled("error")
    assert log.is_enabled("log")
    assert log.level is LogLevel.ERROR


def test_invalid_level_falls_back_to_info(make_logger) -> None:
    log = make_logger().set_log_level("loud")

    assert log.level is LogLevel.INFO
    assert log.is_enabled("info")
    assert not log.is_enabled("notice")


def test_is_enabled_rejects_unknown_methods(make_logger) -> None:
    assert make_logger().is_enabled("shout") is False


def test_silent_mutes_everything_including_control_sequences(make_logger, recording_sink) -> None:
    log = make_logger(log_level="silent")

    log.error("a").log("b").clear().clear_line()

    assert recording_sink.writes == []
    assert log.muted is True


def test_leaving_silent_keeps_the_mute_until_unmute(make_logger, recording_sink) -> None:
    log = make_logger(log_level="silent", color=False)

    log.set_log_level("info").info("still muted")
    log.unmute().info("audible")

    assert recording_sink.lines == ["[INF] audible"]


def test_mute_and_unmute_restore_behaviour(make_logger, recording_sink) -> None:
    log = make_logger(color=False)

    log.mute().info("hidden").clear().clear_line()
    log.unmute().info("shown").clear().clear_line()

    assert recording_sink.writes == ["[INF] shown", "\x1bc", "\x1b[A\x1b[K"]


def test_clear_between_lines_keeps_write_order(make_logger, recording_sink) -> None:
    make_logger().log("hi").clear().log("bye")

    assert recording_sink.writes == ["hi", "\x1bc", "bye"]


def test_indentation_round_trip(make_logger, recording_sink) -> None:
    log = make_logger(color=False)
    for _ in range(3):
        log.indent()
    log.log("deep")
    for _ in range(4):
        log.outdent()
    log.log("root")

    assert recording_sink.lines == ["    deep", "root"]
    assert log.indentation == 0


def test_pause_and_resume_indentation(make_logger, recording_sink) -> None:
    log = make_logger(color=False).indent().indent()

    log.pause_indentation().log("root").resume_indentation().log("nested")

    assert recording_sink.lines == ["root", "   nested"]


def test_reset_indentation_drops_saved_depth(make_logger) -> None:
    log = make_logger().indent().pause_indentation().indent().reset_indentation().resume_indentation()

    assert log.indentation == 0


def test_count_reports_successive_values(make_logger, recording_sink) -> None:
    log = make_logger()

    log.count("x").count("x").count("x")

    assert recording_sink.lines == ["x: 1", "x: 2", "x: 3"]


def test_anonymous_count_uses_its_own_bucket(make_logger, recording_sink) -> None:
    log = make_logger()

    log.count().count("x").count()

    assert recording_sink.lines == ["1", "x: 1", "2"]


def test_count_can_emit_through_another_method(make_logger, recording_sink) -> None:
    make_logger(color=False).count("jobs", emit_as="warn")

    assert recording_sink.lines == ["[WRN] jobs: 1"]


def test_count_emission_respects_level_gating(make_logger, recording_sink) -> None:
    log = make_logger(log_level="error")

    log.count("x", emit_as="info")

    assert recording_sink.lines == []
    assert dict(log.counters) == {"x": 1}


def test_count_can_be_silent(make_logger, recording_sink) -> None:
    log = make_logger().count("x", emit_as=None).count("x", emit_as=None)

    assert recording_sink.lines == []
    assert dict(log.counters) == {"x": 2}


def test_unknown_emit_as_falls_back_to_log(make_logger, recording_sink) -> None:
    make_logger().count("x", emit_as="shout")

    assert recording_sink.lines == ["x: 1"]


def test_clear_count_restarts_a_label(make_logger, recording_sink) -> None:
    log = make_logger()

    log.count("x").count("x").clear_count("x").count("x").clear_count("missing")

    assert recording_sink.lines == ["x: 1", "x: 2", "x: 1"]


def test_report_joins_sorted_trackers(make_logger, recording_sink) -> None:
    log = make_logger()

    log.track("a").track("a").track("b").report()
    log.untrack("a").report()

    assert recording_sink.lines == ["a: 2, b: 1", "b: 1"]


def test_report_single_label(make_logger, recording_sink) -> None:
    make_logger(color=False).track("b").track("a").report("a", emit_as="info")

    assert recording_sink.lines == ["[INF] a: 1"]


def test_report_without_trackers_emits_nothing(make_logger, recording_sink) -> None:
    make_logger().track("").untrack("nothing").report().report("a")

    assert recording_sink.lines == []


def test_counters_and_trackers_do_not_collide(make_logger, recording_sink) -> None:
    log = make_logger().track("x").count("x").report()

    assert recording_sink.lines == ["x: 1", "x: 1"]
    assert dict(log.trackers) == {"x": 1}
    assert dict(log.counters) == {"x": 1}


def test_json_writes_one_line_per_text_line(make_logger, recording_sink) -> None:
    make_logger().json({"a": 1, "b": [True, None]})

    assert recording_sink.lines == [
        "{",
        '    "a": 1,',
        '    "b": [',
        "        true,",
        "        null",
        "    ]",
        "}",
    ]


def test_json_honours_indent_width_and_emit_as(make_logger, recording_sink) -> None:
    make_logger(color=False).json({"k": "v"}, indent_width=2, emit_as="debug")
    assert recording_sink.lines == []

    make_logger(color=False, log_level="debug").json({"k": "v"}, indent_width=2, emit_as="debug")
    assert recording_sink.lines == ["[DBG] {", '[DBG]   "k": "v"', "[DBG] }"]


def test_json_stringifies_unserialisable_values(make_logger, recording_sink) -> None:
    make_logger().json({"level": LogLevel.INFO}, indent_width=0)

    assert recording_sink.lines == ["{", '"level": "LogLevel.INFO"', "}"]


def test_json_stringifies_keys_json_rejects(make_logger, recording_sink) -> None:
    make_logger().json({(1, 2): "x", 3: [{None: True}]}, indent_width=0)

    assert recording_sink.lines == ["{", '"(1, 2)": "x",', '"3": [', "{", '"null": true', "}", "]", "}"]


def test_json_logs_the_repr_of_self_referencing_values(make_logger, recording_sink) -> None:
    looped: list[object] = []
    looped.append(looped)

    make_logger().json(looped)

    assert recording_sink.lines == ["[[...]]"]


def test_emit_routes_by_method_name(make_logger, recording_sink) -> None:
    make_logger(color=False).emit("WARNING", "x").emit("nonsense", "y")

    assert recording_sink.lines == ["[WRN] x", "y"]


def test_every_public_mutator_returns_the_instance(make_logger) -> None:
    log = make_logger()
    calls = [
        log.indent,
        log.outdent,
        log.pause_indentation,
        log.resume_indentation,
        log.reset_indentation,
        log.mute,
        log.unmute,
        log.clear,
        log.clear_line,
        log.count,
        log.clear_count,
        log.report,
        lambda: log.track("a"),
        lambda: log.untrack("a"),
        lambda: log.json([]),
        lambda: log.set_log_level("debug"),
    ]
    for call in calls:
        assert call() is log
