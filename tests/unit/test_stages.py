"""
test_stages.py
--------------
Unit tests for pathmorph.core.stages.
"""
import re
import pytest
from pathlib import Path

from pathmorph.core import (
    Change,
    EngineConfig,
    compose,
    format_,
    replace,
    set_,
    substitute,
)


def c(path):
    return Change.from_path(path)


class TestSet:
    """Test set_ stage."""

    def test_predicate_on_whole_change(self):
        """Test predicate sees the change and the full path is written."""
        stage = set_(lambda ch: ch.old.name.startswith("tmp"), "/x/y.txt")
        assert stage(c("/d/tmp1.txt")).new == Path("/x/y.txt")
        assert stage(c("/d/keep.txt")).new == Path("/d/keep.txt")

    def test_predicate_on_part(self):
        """Test predicate sees the part value and writes the same part."""
        stage = set_(lambda ext: ext == "", ".bin", get="ext")
        assert stage(c("/d/blob")).new == Path("/d/blob.bin")
        assert stage(c("/d/blob.dat")).new == Path("/d/blob.dat")

    def test_put_other_part(self):
        """Test writing a different part than the one read."""
        stage = set_(lambda ext: ext == ".sh", "/opt/bin", get="ext", put="parent")
        assert stage(c("/d/run.sh")).new == Path("/opt/bin/run.sh")

    def test_callable_value_gets_change(self):
        """Test a function value receives the whole change."""
        stage = set_(lambda _: True, lambda ch: ch.old.parent.name, get="name")
        assert stage(c("/d/photos/a.jpg")).new == Path("/d/photos/photos.jpg")


class TestSubstitute:
    """Test substitute stage."""

    def test_match_sets_value(self):
        """Test matching ext is replaced."""
        stage = substitute("ext", r"png", "jpg")
        assert stage(c("/d/img.png")).new == Path("/d/img.jpg")

    def test_no_match_passes_through(self):
        """Test non-matching change is returned unchanged."""
        stage = substitute("ext", r"png", "jpg")
        original = c("/d/img.gif")
        assert stage(original) == original

    def test_put_parent(self):
        """Test moving matching files to another directory."""
        stage = substitute("ext", r"\.pdf$", "/docs", put="parent")
        assert stage(c("/d/paper.pdf")).new == Path("/docs/paper.pdf")

    def test_compiled_pattern(self):
        """Test compiled patterns with flags."""
        stage = substitute("name", re.compile(r"^image", re.IGNORECASE), "pic")
        assert stage(c("/d/IMAGE001.jpg")).new == Path("/d/pic.jpg")


class TestReplace:
    """Test replace stage."""

    def test_replace_ext(self):
        """Test md -> txt on the extension."""
        stage = replace("ext", r"md", "txt")
        assert stage(c("notes.md")).new == Path("notes.txt")

    def test_zero_matches_is_noop(self):
        """Test value without matches is unchanged."""
        stage = replace("ext", r"md", "txt")
        assert stage(c("/d/notes.rst")).new == Path("/d/notes.rst")

    def test_only_matches_change(self):
        """Test unmatched text is kept and every match is replaced."""
        stage = replace("name", r"_", " ")
        assert stage(c("/d/my_holiday_pics.jpg")).new == Path("/d/my holiday pics.jpg")

    def test_back_references(self):
        """Test back-references in a string replacement."""
        stage = replace("name", r"(\d+)-(\d+)", r"\2-\1")
        assert stage(c("/d/a 1-2.txt")).new == Path("/d/a 2-1.txt")

    def test_callable_literal_for_all_matches(self):
        """Test a function value is inserted literally at every match."""
        stage = replace("name", r"x", lambda ch: r"\1")
        assert stage(c("/d/axbx.txt")).new == Path(r"/d/a\1b\1.txt")

    def test_reads_current_value(self):
        """Test replace works on the proposal left by earlier stages."""
        stage = compose(replace("name", "a", "b"), replace("name", "b", "c"))
        assert stage(c("/d/a.txt")).new == Path("/d/c.txt")

    def test_old_key_writes_new(self):
        """Test replacing on the original name writes the proposed name."""
        stage = replace("old-name", r"x", "y")
        result = stage(c("/d/x(1).txt"))
        assert result.old == Path("/d/x(1).txt")
        assert result.new == Path("/d/y(1).txt")


class TestFormat:
    """Test format_ stage."""

    def test_groups(self):
        """Test capture groups in the template."""
        stage = format_("name", r"(f)(o)(o)", "%3%2%1")
        assert stage(c("/d/foo.txt")).new == Path("/d/oof.txt")

    def test_whole_match_and_literal(self):
        """Test %0 and literal text."""
        stage = format_("name", r"\d+", "scan-%0")
        assert stage(c("/d/IMG_0042.jpg")).new == Path("/d/scan-0042.jpg")

    def test_no_match_passes_through(self):
        """Test non-matching change is unchanged."""
        stage = format_("name", r"^image", "x")
        original = c("/d/photo.jpg")
        assert stage(original) == original

    def test_put_other_part(self):
        """Test rendering into another part."""
        stage = format_("file", r"^[^.]+$", "%n.txt", put="file")
        assert stage(c("/d/README")).new == Path("/d/README.txt")

    def test_uses_config(self, tmp_dir):
        """Test checksum algorithm comes from the config."""
        path = tmp_dir / "image.bin"
        path.write_bytes(b"hello")
        stage = format_("name", r"^image", "%x", config=EngineConfig(hash_algorithm="MD5"))
        result = stage(Change.from_path(path))
        assert result.new == tmp_dir / "5d41402abc4b2a76b9719d911017c592.bin"


class TestCompose:
    """Test composition of stages."""

    def test_left_to_right(self):
        """Test later stages see earlier results."""
        stage = compose(substitute("ext", "png", "jpg"), replace("ext", "jpg", "jpeg"))
        assert stage(c("/d/a.png")).new == Path("/d/a.jpeg")

    def test_old_never_changes(self):
        """Test no stage touches the original path."""
        stage = compose(
            set_(lambda _: True, "/x/y.z"),
            replace("old-name", "a", "b"),
            format_("old-file", r".*", "%0"),
        )
        original = c("/d/a(1).png")
        assert stage(original).old == original.old

    def test_empty_compose_is_identity(self):
        """Test no stages leaves the change alone."""
        original = c("/d/a(1).png")
        assert compose()(original) == original
