"""Issue model shared by every detector."""

from __future__ import annotations

from dataclasses import dataclass

from unsnarl.enums import IssueKind


@dataclass(frozen=True)
class Position:
    """Zero-based (row, column) point in the source."""
    row: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"row": self.row, "column": self.column}


@dataclass(frozen=True)
class Span:
    start: Position
    end: Position

    @classmethod
    def of(cls, node) -> "Span":
        """Build a span from a syntax node's start/end points."""
        return cls(Position(*node.start_point), Position(*node.end_point))

    def contains(self, other: "Span") -> bool:
        return (
            (self.start.row, self.start.column) <= (other.start.row, other.start.column)
            and (other.end.row, other.end.column) <= (self.end.row, self.end.column)
        )

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class Issue:
    """One located finding produced by a detector.

    ``span`` is the primary range. ``locations`` is empty unless the issue
    groups several occurrences (duplicate function bodies). ``metric`` holds
    the number embedded in ``message`` when the detector measures one.
    """
    kind: IssueKind
    message: str
    span: Span
    locations: tuple[Span, ...] = ()
    metric: int | None = None

    @property
    def start(self) -> Position:
        return self.span.start

    @property
    def end(self) -> Position:
        return self.span.end

    @property
    def line(self) -> int:
        """1-based line of the primary range, for display."""
        return self.span.start.row + 1

    def to_dict(self) -> dict:
        payload: dict = {
            "type": str(self.kind),
            "message": self.message,
            **self.span.to_dict(),
        }
        if self.locations:
            payload["locations"] = [loc.to_dict() for loc in self.locations]
        if self.metric is not None:
            payload["metric"] = self.metric
        return payload


def make_issue(
    kind: IssueKind,
    node,
    message: str,
    *,
    locations: tuple[Span, ...] = (),
    metric: int | None = None,
) -> Issue:
    """Create an issue located at *node*'s full range."""
    return Issue(kind, message, Span.of(node), locations, metric)


__all__ = ["Issue", "Position", "Span", "make_issue"]
