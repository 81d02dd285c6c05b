from advent2024.day09 import DiskMap

EXAMPLE = "2333133121414131402"


def test_expand():
    assert str(DiskMap.from_text("12345")) == "0..111....22222"
    assert str(DiskMap.from_text(EXAMPLE)) == "00...111...2...333.44.5555.6666.777.888899"


def test_expand_ignores_non_digits():
    assert DiskMap.from_text("12345\n") == DiskMap.from_text("12345")


def test_shrink():
    assert str(DiskMap.from_text("12345").shrink()) == "022111222......"
    assert (
        str(DiskMap.from_text(EXAMPLE).shrink())
        == "0099811188827773336446555566.............."
    )


def test_shrink_does_not_modify_original():
    disk = DiskMap.from_text("12345")
    disk.shrink()
    assert str(disk) == "0..111....22222"


def test_shrink_whole():
    assert (
        str(DiskMap.from_text(EXAMPLE).shrink_whole_files())
        == "00992111777.44.333....5555.6666.....8888.."
    )


def test_checksum():
    assert DiskMap.from_text(EXAMPLE).shrink().checksum() == 1928
    assert DiskMap.from_text(EXAMPLE).shrink_whole_files().checksum() == 2858


def test_shrink_keeps_block_count():
    disk = DiskMap.from_text(EXAMPLE)
    shrunk = disk.shrink_whole_files()
    assert sorted(b for b in shrunk.blocks if b is not None) == sorted(
        b for b in disk.blocks if b is not None
    )
    assert len(shrunk.blocks) == len(disk.blocks)