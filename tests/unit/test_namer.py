"""Unit tests for document naming rules."""

import pytest

from cms.kernel.documents.namer import (
    derive_indexed_name,
    generate_unique_duplicate_name,
    is_safe_basename,
    is_valid_new_name,
    split_name,
)


class TestIsValidNewName:
    """Tests for is_valid_new_name."""

    def test_new_name_is_valid(self):
        assert is_valid_new_name("about.md", {"changes.txt"}) is True

    def test_empty_name_is_invalid(self):
        assert is_valid_new_name("", set()) is False

    def test_taken_name_is_invalid(self):
        assert is_valid_new_name("changes.txt", {"changes.txt"}) is False

    def test_comparison_is_case_sensitive(self):
        """Listing semantics are exact, so a different case is a different name."""
        assert is_valid_new_name("Changes.txt", {"changes.txt"}) is True

    def test_accepts_any_collection(self):
        assert is_valid_new_name("a.txt", ["b.txt", "c.txt"]) is True
        assert is_valid_new_name("b.txt", ("b.txt",)) is False


class TestDeriveIndexedName:
    """Tests for derive_indexed_name."""

    def test_appends_index_before_extension(self):
        assert derive_indexed_name("changes.txt", 1) == "changes_1.txt"

    def test_existing_suffix_is_replaced(self):
        assert derive_indexed_name("report_3.md", 5) == "report_5.md"

    def test_no_extension(self):
        assert derive_indexed_name("notes", 2) == "notes_2"
        assert derive_indexed_name("notes_7", 2) == "notes_2"

    def test_only_last_extension_is_split(self):
        assert derive_indexed_name("archive.tar.gz", 1) == "archive.tar_1.gz"

    def test_zero_suffix_is_not_an_index(self):
        assert derive_indexed_name("draft_0.md", 1) == "draft_0_1.md"

    def test_non_numeric_suffix_is_kept(self):
        assert derive_indexed_name("my_notes.md", 1) == "my_notes_1.md"

    def test_only_last_numeric_suffix_is_stripped(self):
        assert derive_indexed_name("v_2_3.txt", 9) == "v_2_9.txt"

    def test_dotfile_has_no_extension(self):
        assert derive_indexed_name(".env", 1) == ".env_1"

    @pytest.mark.parametrize("filename,expected", [
        ("a.md", ("a", ".md")),
        ("a", ("a", "")),
        (".hidden", (".hidden", "")),
    ])
    def test_split_name(self, filename, expected):
        assert split_name(filename) == expected


class TestGenerateUniqueDuplicateName:
    """Tests for generate_unique_duplicate_name."""

    def test_first_duplicate(self):
        assert generate_unique_duplicate_name("changes.txt", set()) == "changes_1.txt"

    def test_second_duplicate_of_the_original(self):
        """The base is always the original, so the second copy takes index 2."""
        listing = {"changes.txt", "changes_1.txt"}
        assert generate_unique_duplicate_name("changes.txt", listing) == "changes_2.txt"

    def test_fills_first_gap(self):
        listing = {"changes.txt", "changes_1.txt", "changes_3.txt"}
        assert generate_unique_duplicate_name("changes.txt", listing) == "changes_2.txt"

    def test_duplicating_a_duplicate_does_not_stack(self):
        listing = {"changes.txt", "changes_1.txt"}
        assert generate_unique_duplicate_name("changes_1.txt", listing) == "changes_2.txt"

    def test_result_is_never_in_listing(self):
        listing = {f"doc_{i}.md" for i in range(1, 50)}
        name = generate_unique_duplicate_name("doc.md", listing)
        assert name == "doc_50.md"
        assert name not in listing


class TestIsSafeBasename:
    """Tests for is_safe_basename."""

    @pytest.mark.parametrize("name", ["about.md", "changes.txt", ".env", "a b.txt"])
    def test_plain_names(self, name):
        assert is_safe_basename(name) is True

    @pytest.mark.parametrize("name", ["", ".", "..", "../secret", "a/b.txt", "a\\b.txt", "/etc/passwd"])
    def test_rejects_paths(self, name):
        assert is_safe_basename(name) is False
