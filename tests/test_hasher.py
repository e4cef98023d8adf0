"""Tests for ContentHasher."""

import hashlib

import pytest

from prettymd.utils.hasher import ContentHasher


@pytest.fixture
def hasher():
    return ContentHasher()


def test_hash_is_sha256_hex(hasher):
    assert hasher.hash("hello") == hashlib.sha256(b"hello").hexdigest()
    assert len(hasher.hash("")) == 64


def test_hash_is_stable(hasher):
    text = "# Title\n\nBody text.\n" * 100
    assert hasher.hash(text) == hasher.hash(text)


def test_distinct_inputs_have_distinct_hashes(hasher):
    assert hasher.hash("# Title\n") != hasher.hash("# Title \n")


def test_hash_handles_unicode(hasher):
    assert hasher.hash("café ☕") == hashlib.sha256("café ☕".encode("utf-8")).hexdigest()


def test_fingerprint_is_hash_prefix(hasher):
    text = "some content"
    assert hasher.fingerprint(text) == hasher.hash(text)[:8]
    assert len(hasher.fingerprint(text)) == 8


def test_has_changed(hasher):
    assert hasher.has_changed("a\n", "b\n") is True
    assert hasher.has_changed("same\n", "same\n") is False


def test_files_are_identical(hasher, tmp_path):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    c = tmp_path / "c.md"
    a.write_text("# Same\n", encoding="utf-8")
    b.write_text("# Same\n", encoding="utf-8")
    c.write_text("# Other\n", encoding="utf-8")

    assert hasher.files_are_identical(a, b) is True
    assert hasher.files_are_identical(str(a), str(c)) is False


def test_files_are_identical_missing_file(hasher, tmp_path):
    a = tmp_path / "a.md"
    a.write_text("x", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        hasher.files_are_identical(a, tmp_path / "missing.md")
