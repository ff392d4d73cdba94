"""Tests for the chunking module."""

from zidian.chunking import generate_chunkings, iter_subdivisions


class TestGenerateChunkings:
    """Tests for generate_chunkings."""

    def test_order(self):
        """Test the exact enumeration order."""
        assert list(generate_chunkings("共同话题")) == [
            ["共同话", "题"],
            ["共同", "话题"],
            ["共同", "话", "题"],
            ["共", "同话题"],
            ["共", "同话", "题"],
            ["共", "同", "话题"],
            ["共", "同", "话", "题"],
        ]

    def test_three_chars(self):
        """Test a short word."""
        assert list(generate_chunkings("abc")) == [
            ["ab", "c"],
            ["a", "bc"],
            ["a", "b", "c"],
        ]

    def test_excludes_whole_word(self):
        """Test the word itself is never a chunking."""
        for word in ("ab", "abc", "共同话题"):
            assert [word] not in list(generate_chunkings(word))

    def test_single_char(self):
        """Test a single character has no chunkings."""
        assert list(generate_chunkings("共")) == []

    def test_empty(self):
        """Test the empty string has no chunkings."""
        assert list(generate_chunkings("")) == []

    def test_chunks_cover_word(self):
        """Test every chunking joins back to the word."""
        word = "一氧化二氮"
        for chunking in generate_chunkings(word):
            assert "".join(chunking) == word
            assert all(chunking)

    def test_count(self):
        """Test the number of chunkings."""
        for word in ("a", "ab", "abcde", "共同话题"):
            assert len(list(generate_chunkings(word))) == 2 ** (len(word) - 1) - 1
        assert len(list(generate_chunkings("abcde"))) == 15

    def test_unique(self):
        """Test no chunking is produced twice."""
        chunkings = [tuple(c) for c in generate_chunkings("abcdef")]
        assert len(chunkings) == len(set(chunkings))

    def test_lazy(self):
        """Test long words do not enumerate everything up front."""
        word = "话" * 40
        first = next(generate_chunkings(word))
        assert first == ["话" * 39, "话"]


class TestIterSubdivisions:
    """Tests for iter_subdivisions."""

    def test_starts_with_whole_word(self):
        """Test the first subdivision is the word itself."""
        assert next(iter_subdivisions("共同")) == ["共同"]

    def test_ends_with_characters(self):
        """Test the last subdivision is one piece per character."""
        assert list(iter_subdivisions("共同话"))[-1] == ["共", "同", "话"]

    def test_empty(self):
        """Test the empty string has one empty subdivision."""
        assert list(iter_subdivisions("")) == [[]]
