"""Line diff between an agent's original and current system prompt.

Lines are compared by position, not aligned: an inserted line shows every
following line as changed. Good enough for reviewing small prompt edits.
"""

from enum import Enum

from pydantic import BaseModel


class DiffLineType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class DiffLine(BaseModel):
    type: DiffLineType
    content: str
    line_number: int


class DiffStats(BaseModel):
    added: int = 0
    removed: int = 0
    unchanged: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


def diff_prompts(original: str | None, current: str | None) -> list[DiffLine]:
    """Positional line diff of two prompts; both empty gives no lines."""
    if not original and not current:
        return []

    original_lines = (original or "").split("\n")
    current_lines = (current or "").split("\n")

    result: list[DiffLine] = []

    def emit(line_type: DiffLineType, content: str) -> None:
        result.append(DiffLine(type=line_type, content=content, line_number=len(result) + 1))

    for index in range(max(len(original_lines), len(current_lines))):
        if index >= len(original_lines):
            emit(DiffLineType.ADDED, current_lines[index])
        elif index >= len(current_lines):
            emit(DiffLineType.REMOVED, original_lines[index])
        elif original_lines[index] == current_lines[index]:
            emit(DiffLineType.UNCHANGED, current_lines[index])
        else:
            emit(DiffLineType.REMOVED, original_lines[index])
            emit(DiffLineType.ADDED, current_lines[index])

    return result


def diff_stats(lines: list[DiffLine]) -> DiffStats:
    stats = DiffStats()
    for line in lines:
        if line.type is DiffLineType.ADDED:
            stats.added += 1
        elif line.type is DiffLineType.REMOVED:
            stats.removed += 1
        else:
            stats.unchanged += 1
    return stats
