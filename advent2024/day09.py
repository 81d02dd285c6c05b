"""Day 9: compacting files on a disk."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .helpers import micros, read_stdin, timed
from .iterutils import pairs

_DIGITS = "0123456789"


@dataclass(frozen=True)
class _Run:
    start: int
    end: int
    value: int | None

    def __len__(self) -> int:
        return self.end - self.start + 1


def _runs(blocks: list[int | None]) -> Iterator[_Run]:
    """Contiguous stretches of equal blocks, left to right."""
    start = 0
    while start < len(blocks):
        value = blocks[start]
        end = start
        while end + 1 < len(blocks) and blocks[end + 1] == value:
            end += 1
        yield _Run(start, end, value)
        start = end + 1


@dataclass
class DiskMap:
    """Disk blocks holding a file id, or None when free."""

    blocks: list[int | None] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> DiskMap:
        """Expand a dense map of alternating file and free lengths."""
        lengths = (int(ch) for ch in text if ch in _DIGITS)
        blocks: list[int | None] = []
        for file_id, (length, free) in enumerate(pairs(lengths)):
            blocks.extend([file_id] * length)
            if free is not None:
                blocks.extend([None] * free)
        return cls(blocks)

    def __str__(self) -> str:
        return "".join("." if block is None else str(block) for block in self.blocks)

    def shrink(self) -> DiskMap:
        """Move blocks one at a time from the end into the leftmost gaps."""
        blocks = list(self.blocks)
        head, tail = 0, len(blocks) - 1
        while head <= tail:
            if blocks[head] is not None:
                head += 1
            elif blocks[tail] is None:
                tail -= 1
            else:
                blocks[head], blocks[tail] = blocks[tail], blocks[head]
                head += 1
        return DiskMap(blocks)

    def shrink_whole_files(self) -> DiskMap:
        """Move whole files, last first, into the leftmost gap that fits."""
        blocks = list(self.blocks)
        files = [run for run in _runs(blocks) if run.value is not None]

        for file in reversed(files):
            size = len(file)
            gap = next(
                (run for run in _runs(blocks) if run.value is None and len(run) >= size),
                None,
            )
            if gap is None or file.start <= gap.start:
                continue
            for offset in range(size):
                a, b = file.start + offset, gap.start + offset
                blocks[a], blocks[b] = blocks[b], blocks[a]

        return DiskMap(blocks)

    def checksum(self) -> int:
        return sum(i * block for i, block in enumerate(self.blocks) if block is not None)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Compact a disk map read from stdin.").parse_args(argv)
    disk = DiskMap.from_text(read_stdin())

    elapsed, checksum = timed(lambda: disk.shrink().checksum())
    print(f"Part 1: {checksum} in {micros(elapsed)}μs")

    elapsed, checksum = timed(lambda: disk.shrink_whole_files().checksum())
    print(f"Part 2: {checksum} in {int(elapsed * 1000)}ms")