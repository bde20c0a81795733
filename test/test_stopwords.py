from ftsearch.core import config
from ftsearch.utils import StopwordFilter, load_stopwords


def test_membership(stopwords):
    assert stopwords.is_stopword("的")
    assert "the" in stopwords
    assert not stopwords.is_stopword("老鼠")
    assert len(stopwords) == 3


def test_load_stopwords_from_file(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text("的\n\n  了  \nthe\n", encoding="utf-8")

    loaded = load_stopwords(path)

    assert set(loaded) == {"的", "了", "the"}


def test_bundled_list_loads():
    bundled = load_stopwords(config.STOPWORDS_PATH)

    assert bundled.is_stopword("的")
    assert bundled.is_stopword("，")
    assert not bundled.is_stopword("老鼠")


def test_empty_filter_matches_nothing():
    assert not StopwordFilter().is_stopword("")
