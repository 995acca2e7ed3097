"""
CLI tests: argument handling, exit codes and the exact report format.
"""
import io
import os
import sys
from unittest import mock
import pytest
from dupfinder import cli
from dupfinder.cli import CLIApplication, EXIT_USAGE, EXIT_PATH_NOT_FOUND
from dupfinder.core import comparator as comparator_module


def run_cli(argv):
    with mock.patch.object(sys, 'argv', ['dupfinder'] + [str(a) for a in argv]):
        CLIApplication().run()


class TestArgumentHandling:
    """Test argument count validation and exit codes."""

    def test_root_directory_positional(self):
        args = CLIApplication.parse_args(['/tmp/test'])

        assert args.root_directory == '/tmp/test'
        assert args.verbose is False
        assert args.dump_index is False

    def test_optional_flags(self):
        args = CLIApplication.parse_args(['/tmp/test', '-v', '--dump-index', '--debug'])

        assert args.verbose is True
        assert args.dump_index is True
        assert args.debug is True

    def test_missing_argument_exits_with_usage(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_cli([])

        assert exc_info.value.code == EXIT_USAGE
        assert "usage: dupfinder" in capsys.readouterr().err

    def test_extra_argument_exits_with_usage(self, capsys, temp_dir):
        with pytest.raises(SystemExit) as exc_info:
            run_cli([temp_dir, temp_dir])

        assert exc_info.value.code == EXIT_USAGE
        assert "usage: dupfinder" in capsys.readouterr().err

    def test_missing_root_exits_with_distinct_code(self, capsys, temp_dir):
        with pytest.raises(SystemExit) as exc_info:
            run_cli([temp_dir / "does_not_exist"])

        assert exc_info.value.code == EXIT_PATH_NOT_FOUND
        assert EXIT_PATH_NOT_FOUND != EXIT_USAGE
        captured = capsys.readouterr()
        assert "does not exist" in captured.err
        assert captured.out == ""

    def test_file_root_exits_with_distinct_code(self, make_file, capsys):
        path = make_file("plain.txt", b"x")

        with pytest.raises(SystemExit) as exc_info:
            run_cli([path])

        assert exc_info.value.code == EXIT_PATH_NOT_FOUND

    def test_main_returns_normally_on_success(self, temp_dir, capsys):
        with mock.patch.object(sys, 'argv', ['dupfinder', str(temp_dir)]):
            cli.main()

        assert "-- Stats --" in capsys.readouterr().out

    def test_main_maps_keyboard_interrupt(self, temp_dir):
        with mock.patch.object(sys, 'argv', ['dupfinder', str(temp_dir)]), \
                mock.patch.object(CLIApplication, 'run', side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli.main()

        assert exc_info.value.code == 130


class TestReportFormat:
    """Test the exact standard output layout."""

    def test_identical_files_report(self, make_file, temp_dir, capsys):
        a = make_file("a.txt", b"hello world")
        b = make_file("b.txt", b"hello world")

        run_cli([temp_dir])

        assert capsys.readouterr().out == (
            "Matching Files:\n"
            f"[ {a},\n"
            f"  {b} ]\n"
            "\n"
            "-- Stats --\n"
            "Number of files scanned: 2\n"
            "Total data compared: 0.00MB\n"
        )

    def test_no_cluster_for_same_size_different_content(self, make_file, temp_dir, capsys):
        make_file("a.txt", b"aaaaaaaaaa")
        make_file("b.txt", b"bbbbbbbbbb")

        run_cli([temp_dir])

        assert capsys.readouterr().out == (
            "Matching Files:\n"
            "-- Stats --\n"
            "Number of files scanned: 2\n"
            "Total data compared: 0.00MB\n"
        )

    def test_three_way_cluster_report(self, make_file, temp_dir, capsys):
        content = b"z" * 5000
        paths = [make_file(name, content) for name in ("a.txt", "b.txt", "c.txt")]

        run_cli([temp_dir])

        out = capsys.readouterr().out
        assert f"[ {paths[0]},\n  {paths[1]},\n  {paths[2]} ]\n\n" in out
        assert out.count("[ ") == 1

    def test_total_data_in_megabytes(self, make_file, temp_dir, capsys):
        make_file("big.bin", b"\x00" * (3 * 1024 * 1024 // 2))

        run_cli([temp_dir])

        assert "Total data compared: 1.50MB\n" in capsys.readouterr().out

    def test_nested_duplicates_in_same_cluster(self, make_file, temp_dir, capsys):
        x = make_file("x/dup.txt", b"same bytes")
        z = make_file("y/z/dup.txt", b"same bytes")

        run_cli([temp_dir])

        out = capsys.readouterr().out
        assert f"[ {x},\n  {z} ]" in out

    def test_unreadable_file_reported_on_stderr(self, make_file, temp_dir, capsys, monkeypatch):
        make_file("a.txt", b"identical")
        locked = make_file("b.txt", b"identical")
        real_open = open

        def guarded_open(path, *args, **kwargs):
            if str(path) == str(locked):
                raise PermissionError(13, "Permission denied", str(path))
            return real_open(path, *args, **kwargs)

        monkeypatch.setattr(comparator_module, "open", guarded_open, raising=False)

        run_cli([temp_dir])

        captured = capsys.readouterr()
        assert "Could not open" in captured.err
        assert str(locked) in captured.err
        assert "[ " not in captured.out
        assert "Number of files scanned: 2" in captured.out

    def test_dump_index_lists_buckets(self, make_file, temp_dir, capsys):
        a = make_file("a.txt", b"12")
        b = make_file("b.txt", b"34")
        c = make_file("c.txt", b"567")

        run_cli([temp_dir, "--dump-index"])

        out = capsys.readouterr().out
        assert out.startswith(f"Potential dup!\nKey 2: \n{a}\n{b}\nKey 3: \n{c}\n\nMatching Files:\n")

    def test_verbose_summary_goes_to_stderr(self, test_files, temp_dir, capsys):
        run_cli([temp_dir, "--verbose"])

        captured = capsys.readouterr()
        assert "Search Statistics:" in captured.err
        assert "Comparisons performed:        5" in captured.err
        assert "Search Statistics:" not in captured.out
        assert "Number of files scanned: 10" in captured.out


@pytest.mark.skipif(not sys.platform.startswith("linux"),
                    reason="Needs a filesystem accepting arbitrary byte names")
class TestUndecodableFileNames:
    """File names that are not valid UTF-8 still make it into the report."""

    def test_cluster_printed_with_original_bytes(self, make_file, temp_dir, monkeypatch):
        a = make_file(os.fsdecode(b"a\xff.txt"), b"same content")
        b = make_file(os.fsdecode(b"b\xff.txt"), b"same content")
        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding="utf-8")
        monkeypatch.setattr(sys, "stdout", stdout)

        with mock.patch.object(sys, 'argv', ['dupfinder', str(temp_dir)]):
            cli.main()

        stdout.flush()
        out = buffer.getvalue()
        assert b"[ " + os.fsencode(str(a)) + b",\n  " + os.fsencode(str(b)) + b" ]\n" in out
        assert b"Number of files scanned: 2\n" in out
