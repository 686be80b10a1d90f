"""Unit tests for CallSite."""

import os

import pytest

from deprecatable.core.call_site import CallSite


@pytest.mark.unit
class TestCallSite:
    """Tests for CallSite identity and counting."""

    def test_initializes_with_file_and_line(self, make_source_file):
        """Test attributes captured at construction."""
        path = make_source_file()
        call_site = CallSite(str(path), 9, 1)

        assert call_site.file == os.path.abspath(str(path))
        assert call_site.line_number == 9
        assert call_site.context_padding == 1
        assert call_site.invocation_count == 0

    def test_key_matches_gen_key(self, make_source_file):
        """Test the instance key and gen_key agree."""
        path = str(make_source_file())
        call_site = CallSite(path, 42, 2)

        assert call_site.key == CallSite.gen_key(path, 42)
        assert call_site.key == f"{os.path.abspath(path)}:42"

    def test_key_is_the_same_for_relative_paths(self, make_source_file, monkeypatch):
        """Test relative and absolute spellings of a file share a key."""
        path = make_source_file()
        monkeypatch.chdir(path.parent)

        assert CallSite.gen_key(path.name, 3) == CallSite(path.name, 3, 2).key
        assert CallSite.gen_key(path.name, 3) == CallSite.gen_key(
            os.path.abspath(path.name), 3
        )

    def test_different_lines_have_different_keys(self):
        """Test keys differ by line."""
        assert CallSite.gen_key("/a.py", 1) != CallSite.gen_key("/a.py", 2)

    def test_increment_returns_new_total(self):
        """Test increment_invocation_count accumulates."""
        call_site = CallSite("/nowhere.py", 1, 2)

        assert call_site.increment_invocation_count() == 1
        assert call_site.increment_invocation_count() == 2
        assert call_site.increment_invocation_count(10) == 12
        assert call_site.invocation_count == 12


@pytest.mark.unit
class TestCallSiteContext:
    """Tests for the lazily extracted context."""

    def test_captures_the_call_site_context(self, make_source_file):
        """Test formatted context around the call site."""
        call_site = CallSite(str(make_source_file()), 9, 1)

        assert call_site.formatted_context_lines() == [
            "      8: # Context line 8\n",
            "--->  9: # Context line 9\n",
            "     10: # Context line 10\n",
        ]

    def test_context_is_cached(self, make_source_file):
        """Test the source is read once per call site."""
        path = make_source_file(5)
        call_site = CallSite(str(path), 3, 0)
        first = call_site.formatted_context_lines()

        path.write_text("changed\n" * 5)

        assert call_site.formatted_context_lines() == first
        assert call_site.context is call_site.context

    def test_missing_file_gives_no_context(self, tmp_path):
        """Test an unreadable file does not raise."""
        call_site = CallSite(str(tmp_path / "gone.py"), 3, 2)

        assert call_site.formatted_context_lines() == []
