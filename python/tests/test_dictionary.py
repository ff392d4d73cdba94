"""Tests for the dictionary store and builder."""

import pytest

from zidian.builder import DictionaryBuilder
from zidian.dictionary import CEDict, UnresolvedWordError
from zidian.ingest.cedict import ingest, ingest_text
from zidian.schema import Reading, Word


class TestCEDict:
    """Tests for CEDict lookups."""

    def test_len(self, cedict):
        """Test duplicate lines merge into one form."""
        assert len(cedict) == 11
        assert "题" in cedict
        assert "猫" not in cedict

    def test_lookup(self, cedict):
        """Test direct lookup."""
        word = cedict.lookup("话题")
        assert word is not None
        assert word.traditional == {"話題"}
        assert cedict.lookup("猫") is None

    def test_polyphonic(self, cedict):
        """Test a form with two readings."""
        word = cedict.lookup("行")
        assert list(word.readings) == [Reading.parse("hang2"), Reading.parse("xing2")]

    def test_resolve_direct(self, cedict):
        """Test a direct hit returns one entry."""
        (word,) = cedict.resolve("共同")
        assert word.simplified == "共同"

    def test_resolve_chunked(self, cedict):
        """Test the first fully covered chunking wins."""
        words = cedict.resolve("共同话题")
        assert [w.simplified for w in words] == ["共同", "话题"]

    def test_resolve_prefers_longer_first_chunk(self, cedict):
        """Test longer leading chunks are tried first."""
        words = cedict.resolve("我们有")
        assert [w.simplified for w in words] == ["我们", "有"]

    def test_resolve_falls_back_to_characters(self, cedict):
        """Test single characters are used when nothing longer matches."""
        words = cedict.resolve("题共")
        assert [w.simplified for w in words] == ["题", "共"]

    def test_resolve_unknown(self, cedict):
        """Test an unknown character is fatal."""
        with pytest.raises(UnresolvedWordError) as exc_info:
            cedict.resolve("猫")
        assert exc_info.value.word == "猫"
        assert "didn't contain" in str(exc_info.value)

    def test_resolve_partly_unknown(self, cedict):
        """Test one unknown character fails the whole word."""
        with pytest.raises(LookupError):
            cedict.resolve("共同猫")

    def test_resolve_empty(self, cedict):
        """Test the empty string cannot be resolved."""
        with pytest.raises(UnresolvedWordError):
            cedict.resolve("")

    def test_get_alias(self, cedict):
        """Test get is resolve."""
        assert cedict.get("共同话题") == cedict.resolve("共同话题")

    def test_words_read_only(self, cedict):
        """Test the mapping cannot be changed after construction."""
        with pytest.raises(TypeError):
            cedict.words["猫"] = Word(simplified="猫")

    def test_iter(self, cedict):
        """Test iteration yields written forms."""
        assert set(cedict) == set(cedict.keys())
        assert "一氧化二氮" in set(cedict)

    def test_from_lines(self, sample_cedict_content):
        """Test loading from lines, skipping comments."""
        store = CEDict.from_lines(sample_cedict_content.splitlines())
        assert len(store) == 11
        assert store.resolve("共同话题") == [store.lookup("共同"), store.lookup("话题")]

    def test_from_file(self, cedict_file):
        """Test loading from a file."""
        store = CEDict.from_file(cedict_file)
        assert store.name == "cedict"
        assert len(store) == 11
        assert "11 words" in repr(store)

    def test_from_results_merges(self):
        """Test later sources extend earlier ones."""
        first = ingest_text("長 长 [chang2] /long/\n")
        second = ingest_text("長 长 [zhang3] /chief/\n")

        store = CEDict.from_results(first, second)
        word = store.lookup("长")
        assert list(word.readings) == [Reading.parse("chang2"), Reading.parse("zhang3")]
        assert store.name == "memory+memory"

    def test_from_results_idempotent(self, cedict_file):
        """Test merging a source with itself changes nothing."""
        store = CEDict.from_results(ingest(cedict_file), ingest(cedict_file))
        word = store.lookup("题")
        assert len(word.readings) == 1
        assert word.glosses(Reading.parse("ti2")) == [
            "problem for discussion", "surname Ti", "topic"
        ]

    def test_download_uses_cache(self, tmp_path, sample_cedict_content):
        """Test building from a cached release."""
        (tmp_path / "cedict_ts.u8").write_text(sample_cedict_content, encoding="utf-8")
        store = CEDict.download(tmp_path)
        assert len(store) == 11


class TestDictionaryBuilder:
    """Tests for DictionaryBuilder."""

    def test_build_stats(self, cedict_file):
        """Test statistics after a build."""
        builder = DictionaryBuilder()
        builder.add_words(ingest(cedict_file))
        store = builder.build()

        assert len(store) == 11
        assert builder.stats.total_words == 11
        assert builder.stats.total_readings == 13
        assert builder.stats.polyphonic == 2
        assert builder.stats.merged_lines == 3
        assert builder.stats.by_length == {1: 7, 2: 3, 5: 1}
        assert builder.stats.by_source == {"cedict": 11}

    def test_empty_build(self):
        """Test building with no sources."""
        builder = DictionaryBuilder()
        store = builder.build()
        assert len(store) == 0
        assert store.name == "empty"
        assert builder.stats.total_words == 0
