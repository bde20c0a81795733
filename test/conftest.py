import pytest
from ftsearch.utils import StopwordFilter, get_tokenizer


@pytest.fixture
def whitespace():
    return get_tokenizer("whitespace")


@pytest.fixture
def stopwords():
    return StopwordFilter({"的", "了", "the"})


@pytest.fixture
def corpus_dir(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "a.txt").write_text(
        "1_!_101_!_news_!_猫 追 老鼠_!_猫,老鼠\n"
        "broken line without fields\n"
        "2_!_102_!_news_!_老鼠 躺 地上_!_\n",
        encoding="utf-8",
    )
    (tmp_path / "nested" / "b.txt").write_text(
        "3_!_103_!_news_!_狗 的 骨头_!_狗\n", encoding="utf-8"
    )
    (tmp_path / "ignored.csv").write_text("4_!_1_!_x_!_猫_!_\n", encoding="utf-8")
    return tmp_path
