import io

import pytest

from krtools.bufio import (
    BUFFER_SIZE,
    MAX_NR_OF_OPEN_FILES,
    SEEK_END,
    SEEK_SET,
    BufferedFile,
    FileTable,
    TooManyOpenFilesError,
    copy_file,
    main,
)

SAMPLE = b"#include <fcntl.h>\n#include \"syscalls.h\"\n"


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(SAMPLE)
    return path


def test_read_all_bytes(sample):
    table = FileTable()
    with table.open(str(sample), "r") as f:
        assert bytes(f) == SAMPLE


def test_getc_returns_none_at_end_and_stays(sample):
    table = FileTable()
    with table.open(str(sample), "r") as f:
        data = bytes(f)
        assert data == SAMPLE
        assert f.getc() is None
        assert f.eof is True
        assert f.getc() is None


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    table = FileTable()
    with table.open(str(path), "w") as f:
        for byte in SAMPLE:
            assert f.putc(byte) == byte
    with table.open(str(path), "r") as f:
        assert bytes(f) == SAMPLE


def test_output_is_buffered_until_flush(tmp_path):
    path = tmp_path / "out.txt"
    table = FileTable()
    f = table.open(str(path), "w")
    for byte in b"abc":
        f.putc(byte)
    assert path.read_bytes() == b""
    f.flush()
    assert path.read_bytes() == b"abc"
    f.close()
    assert path.read_bytes() == b"abc"


def test_full_buffer_is_written_when_next_byte_arrives(tmp_path):
    path = tmp_path / "out.txt"
    table = FileTable()
    f = table.open(str(path), "w")
    for _ in range(BUFFER_SIZE + 1):
        f.putc(ord("z"))
    assert len(path.read_bytes()) == BUFFER_SIZE
    f.close()
    assert len(path.read_bytes()) == BUFFER_SIZE + 1


def test_write_mode_truncates(sample):
    table = FileTable()
    with table.open(str(sample), "w") as f:
        f.putc(ord("x"))
    assert sample.read_bytes() == b"x"


def test_append_mode_appends(sample):
    table = FileTable()
    with table.open(str(sample), "a") as f:
        for byte in b"tail":
            f.putc(byte)
    assert sample.read_bytes() == SAMPLE + b"tail"


def test_append_mode_creates_missing_file(tmp_path):
    path = tmp_path / "new.txt"
    table = FileTable()
    with table.open(str(path), "a") as f:
        f.putc(ord("q"))
    assert path.read_bytes() == b"q"


def test_invalid_mode_raises(sample):
    with pytest.raises(ValueError):
        FileTable().open(str(sample), "x")


def test_missing_file_for_reading_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileTable().open(str(tmp_path / "absent.txt"), "r")


def test_table_runs_out_of_slots_and_close_frees_one(sample):
    table = FileTable()
    opened = [table.open(str(sample), "r") for _ in range(MAX_NR_OF_OPEN_FILES - 3)]
    try:
        assert len(table) == MAX_NR_OF_OPEN_FILES
        with pytest.raises(TooManyOpenFilesError):
            table.open(str(sample), "r")
        opened[0].close()
        assert len(table) == MAX_NR_OF_OPEN_FILES - 1
        opened[0] = table.open(str(sample), "r")
        assert opened[0].getc() == SAMPLE[0]
    finally:
        for f in opened:
            f.close()


def test_standard_streams_occupy_first_slots():
    table = FileTable()
    assert (table.stdin.fd, table.stdout.fd, table.stderr.fd) == (0, 1, 2)
    assert table.stdin.readable and table.stdout.writable
    assert table.stderr.unbuffered and not table.stdout.unbuffered


def test_seek_set_on_read_file(sample):
    table = FileTable()
    with table.open(str(sample), "r") as f:
        assert f.getc() == SAMPLE[0]
        assert f.seek(5, SEEK_SET) == 5
        assert bytes(f) == SAMPLE[5:]


def test_seek_after_end_allows_reading_again(sample):
    table = FileTable()
    with table.open(str(sample), "r") as f:
        assert bytes(f) == SAMPLE
        f.seek(0)
        assert bytes(f) == SAMPLE


def test_seek_on_write_file_flushes_pending(tmp_path):
    path = tmp_path / "out.txt"
    table = FileTable()
    with table.open(str(path), "w") as f:
        for byte in b"hello":
            f.putc(byte)
        assert f.seek(0, SEEK_END) == 5
        assert path.read_bytes() == b"hello"


def test_putc_on_read_file_raises(sample):
    table = FileTable()
    with table.open(str(sample), "r") as f:
        with pytest.raises(io.UnsupportedOperation):
            f.putc(ord("a"))


def test_flush_on_read_file_raises_and_marks_error(sample):
    table = FileTable()
    with table.open(str(sample), "r") as f:
        with pytest.raises(io.UnsupportedOperation):
            f.flush()
        assert f.error is True


def test_getc_on_write_file_returns_none(tmp_path):
    table = FileTable()
    with table.open(str(tmp_path / "out.txt"), "w") as f:
        assert f.getc() is None


def test_getc_on_closed_file_raises(sample):
    f = FileTable().open(str(sample), "r")
    f.close()
    assert f.closed is True
    with pytest.raises(ValueError):
        f.getc()


def test_putc_rejects_out_of_range_byte(tmp_path):
    with FileTable().open(str(tmp_path / "out.txt"), "w") as f:
        with pytest.raises(ValueError):
            f.putc(256)


def test_unbuffered_file_reads_one_byte_at_a_time(sample):
    table = FileTable()
    reader = table.open(str(sample), "r")
    with BufferedFile(reader.fd, "r", unbuffered=True) as f:
        assert f.buffer_size == 1
        assert bytes(f) == SAMPLE


def test_copy_file_with_offset(sample, tmp_path):
    target = tmp_path / "copy.txt"
    count = copy_file(str(sample), str(target), 5)
    assert target.read_bytes() == SAMPLE[5:]
    assert count == len(SAMPLE) - 5


def test_copy_file_whole(sample, tmp_path):
    target = tmp_path / "copy.txt"
    assert copy_file(str(sample), str(target)) == len(SAMPLE)
    assert target.read_bytes() == SAMPLE


def test_main_copies_to_target(sample, tmp_path):
    target = tmp_path / "out.txt"
    assert main([str(sample), str(target), "5"]) == 0
    assert target.read_bytes() == SAMPLE[5:]


def test_main_writes_to_standard_output(sample, capfd):
    assert main([str(sample)]) == 0
    assert capfd.readouterr().out.encode() == SAMPLE


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 1
    assert capsys.readouterr().out == "Error: could not open the file.\n"


def test_main_rejects_bad_arguments(capsys):
    assert main([]) == 1
    assert main(["a", "b", "not-a-number"]) == 1
    assert "invalid offset" in capsys.readouterr().err