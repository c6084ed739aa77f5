"""Mutable display state owned by exactly one logger instance.

Purpose
-------
Track indentation, the single saved indentation slot, the mute flag and the
two label-keyed counting namespaces (counters and trackers).

Contents
--------
* :class:`LoggerState` dataclass with its mutators.

System Role
-----------
The logger serialises access to this object with its own lock; the state
itself performs no locking and no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class LoggerState:
    """Indentation, mute and counting state for one :class:`~loog.logger.Loog`.

    Attributes
    ----------
    indentation:
        Current depth; never negative.
    saved_indentation:
        Depth stored by :meth:`pause_indentation`; a single slot, not a stack.
    muted:
        When ``True`` nothing is written, including control sequences.
    counters:
        Label to count for :meth:`increment_counter`. ``None`` keys the
        anonymous bucket.
    trackers:
        Label to count for :meth:`track`; separate from ``counters``.
    """

    indentation: int = 0
    saved_indentation: int | None = None
    muted: bool = False
    counters: dict[str | None, int] = field(default_factory=dict)
    trackers: dict[str, int] = field(default_factory=dict)

    def indent(self) -> None:
        self.indentation += 1

    def outdent(self) -> None:
        if self.indentation > 0:
            self.indentation -= 1

    def pause_indentation(self) -> None:
        """Save the current depth and continue at the root level."""

        self.saved_indentation = self.indentation
        self.indentation = 0

    def resume_indentation(self) -> None:
        """Restore the saved depth (``0`` when nothing was saved) and drop the slot."""

        self.indentation = self.saved_indentation or 0
        self.saved_indentation = None

    def reset_indentation(self) -> None:
        self.indentation = 0
        self.saved_indentation = None

    def increment_counter(self, label: str | None = None) -> int:
        """Increment ``label`` (or the anonymous bucket) and return the new count."""

        count = self.counters.get(label, 0) + 1
        self.counters[label] = count
        return count

    def clear_counter(self, label: str | None = None) -> None:
        self.counters.pop(label, None)

    def track(self, label: str) -> None:
        if not label:
            return
        self.trackers[label] = self.trackers.get(label, 0) + 1

    def untrack(self, label: str) -> None:
        self.trackers.pop(label, None)

    def tracker_report(self, label: str | None = None) -> str | None:
        """Return the report line for ``label`` or for every tracker.

        A tracked ``label`` yields ``"<label>: <count>"``. Any other call joins
        all trackers sorted by label with ``", "``; ``None`` when nothing is
        tracked.

        Examples
        --------
        >>> state = LoggerState()
        >>> state.track("b"); state.track("a"); state.track("a")
        >>> state.tracker_report()
        'a: 2, b: 1'
        >>> state.tracker_report("b")
        'b: 1'
        """

        if label and label in self.trackers:
            return f"{label}: {self.trackers[label]}"
        if not self.trackers:
            return None
        return ", ".join(f"{name}: {self.trackers[name]}" for name in sorted(self.trackers, key=str))


def format_count(label: str | None, count: int) -> str:
    """Return ``"<label>: <count>"`` or the bare count for the anonymous bucket."""

    if label is None:
        return str(count)
    return f"{label}: {count}"


__all__ = ["LoggerState", "format_count"]
