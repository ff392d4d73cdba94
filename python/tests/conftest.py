"""Pytest configuration and fixtures."""

import json
import pytest
import sqlite3
import sys
import zipfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from zidian.dictionary import CEDict


SAMPLE_CEDICT = """# CC-CEDICT
# Test sample in the MDBG format
共同 共同 [gong4 tong2] /common/joint/jointly/together/
話題 话题 [hua4 ti2] /subject (of a talk or conversation)/topic/
共 共 [gong4] /common/general/to share/
同 同 [tong2] /like/same/similar/
話 话 [hua4] /dialect/language/spoken words/
題 题 [ti2] /surname Ti/
題 题 [ti2] /topic/problem for discussion/
一氧化二氮 一氧化二氮 [yi1 yang3 hua4 er4 dan4] /nitrous oxide N2O/laughing gas/
行 行 [hang2] /row/line/commercial firm/
行 行 [xing2] /to walk/to go/capable/
長 长 [chang2] /long/length/
長 长 [zhang3] /chief/head/elder/
我們 我们 [wo3 men5] /we/us/
有 有 [you3] /to have/there is/
"""


@pytest.fixture
def sample_cedict_content():
    """Sample CC-CEDICT dictionary content."""
    return SAMPLE_CEDICT


@pytest.fixture
def cedict_file(tmp_path, sample_cedict_content):
    """Sample dictionary written to a file."""
    path = tmp_path / "cedict_ts.u8"
    path.write_text(sample_cedict_content, encoding="utf-8")
    return path


@pytest.fixture
def cedict(sample_cedict_content):
    """Store built from the sample dictionary."""
    return CEDict.from_text(sample_cedict_content)


@pytest.fixture
def sample_tier_content():
    """Sample tier list."""
    return """# HSK levels
共同 1
有 1
我们 1
话题 4
"""


def read_apkg_notes(path):
    """Fields of every note in an .apkg, in the order they were added."""
    with zipfile.ZipFile(path) as z:
        data = z.read("collection.anki2")

    collection = Path(path).with_suffix(".anki2")
    collection.write_bytes(data)
    conn = sqlite3.connect(collection)
    try:
        rows = conn.execute("SELECT flds FROM notes ORDER BY id").fetchall()
    finally:
        conn.close()
    return [row[0].split("\x1f") for row in rows]


@pytest.fixture
def apkg_notes():
    """Reader for the notes of a written deck."""
    return read_apkg_notes


def read_apkg_collection(path):
    """Models and decks of an .apkg, as stored in its collection table."""
    with zipfile.ZipFile(path) as z:
        data = z.read("collection.anki2")

    collection = Path(path).with_suffix(".anki2")
    collection.write_bytes(data)
    conn = sqlite3.connect(collection)
    try:
        models, decks = conn.execute("SELECT models, decks FROM col").fetchone()
    finally:
        conn.close()
    return json.loads(models), json.loads(decks)


@pytest.fixture
def apkg_collection():
    """Reader for the models and decks of a written deck."""
    return read_apkg_collection
