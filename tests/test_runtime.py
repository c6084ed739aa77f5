from __future__ import annotations

import pytest

import loog
from loog import runtime
from loog.logger import Loog


def test_get_builds_the_default_lazily_and_reuses_it() -> None:
    first = loog.get()
    assert isinstance(first, Loog)
    assert loog.get() is first


def test_create_does_not_touch_the_default(recording_sink) -> None:
    default = loog.get()
    isolated = loog.create(prefix_style="emoji", sink=recording_sink)

    assert isolated is not default
    assert loog.get() is default


def test_configure_replaces_the_default(recording_sink) -> None:
    before = loog.get()
    after = loog.configure(log_level="debug", sink=recording_sink)

    assert after is not before
    assert loog.get() is after


def test_configure_merges_over_defaults_not_previous_config(recording_sink) -> None:
    loog.configure(prefix_style="emoji", log_level="debug", sink=recording_sink)
    second = loog.configure(process="p", sink=recording_sink)

    assert second.settings.prefix_style.value == "text"
    assert second.level.value == "info"


def test_bound_methods_keep_their_instance_after_reconfiguration(recording_sink) -> None:
    first = loog.configure(prefix_style="text", color=False, sink=recording_sink)
    info = loog.info
    first.indent()

    loog.configure(prefix_style="npm", color=False, sink=recording_sink)
    info("old")
    loog.info("new")

    assert recording_sink.lines == ["  [INF] old", "info new"]


def test_reconfiguration_leaves_previous_state_alone(recording_sink) -> None:
    first = loog.configure(color=False, sink=recording_sink)
    first.indent().count("a", emit_as=None).track("t")

    second = first(color=False, sink=recording_sink)

    assert second is not first
    assert loog.get() is second
    assert second.indentation == 0
    assert dict(second.counters) == {}
    assert dict(second.trackers) == {}
    assert first.indentation == 1
    assert dict(first.counters) == {"a": 1}


def test_calling_an_instance_accepts_a_config_mapping(recording_sink) -> None:
    log = loog.create(sink=recording_sink)
    emoji = log({"prefixStyle": "emoji", "color": False}, sink=recording_sink)

    emoji.info("Hi")

    assert recording_sink.lines == [f"{loog.PREFIXES['emoji']['info']} Hi"]


def test_replace_default_returns_previous_handle(recording_sink) -> None:
    previous = loog.get()
    replacement = loog.create(sink=recording_sink)

    assert loog.replace_default(replacement) is previous
    assert loog.get() is replacement


def test_replace_default_rejects_other_objects() -> None:
    with pytest.raises(TypeError, match="expected a Loog instance"):
        loog.replace_default(object())  # type: ignore[arg-type]


def test_reset_drops_the_default() -> None:
    first = loog.get()
    runtime.reset()

    assert loog.get() is not first


def test_create_rejects_objects_that_are_not_sinks() -> None:
    with pytest.raises(TypeError, match="sink must implement"):
        loog.create(sink=object())


def test_module_exposes_vocabulary_tables() -> None:
    assert loog.LEVELS[0] == "all"
    assert loog.LEVELS[-1] == "silent"
    assert "warning" in loog.METHODS
    assert set(loog.PREFIXES) == {"text", "ascii", "emoji", "npm", "none"}
    assert loog.PREFIXES["text"]["info"] == "[INF]"
    assert loog.COLORS["error"] == "bold red"
    assert "log" not in loog.COLORS


def test_module_rejects_unknown_attributes() -> None:
    with pytest.raises(AttributeError):
        loog.not_a_method  # noqa: B018


def test_module_level_methods_chain_on_the_default(capsys: pytest.CaptureFixture[str]) -> None:
    loog.configure(color=False)

    result = loog.info("Hi")

    assert result is loog.get()
    assert capsys.readouterr().out == "[INF] Hi\n"
