import pytest
from ftsearch.utils import Tokenizer
from ftsearch.services.internal import QueryEngine, build_inverted_index, query


@pytest.fixture
def index(whitespace, stopwords):
    return build_inverted_index(
        ["猫 追 老鼠", "老鼠 躺 地上"], tokenizer=whitespace, stopwords=stopwords
    )


def test_term_in_both_documents_returns_both_in_order(index):
    docs = query(index, "老鼠")

    assert [doc.id for doc in docs] == [0, 1]
    assert [doc.text for doc in docs] == ["猫 追 老鼠", "老鼠 躺 地上"]


def test_term_in_one_document(index):
    assert [doc.id for doc in query(index, "猫")] == [0]


def test_absent_term_returns_empty(index):
    assert query(index, "狗") == []
    assert query(index, "") == []


def test_union_is_deduplicated_in_discovery_order(index):
    engine = QueryEngine(index)

    assert engine.search_ids("地上 老鼠 猫") == [1, 0]
    assert engine.search_ids("猫 老鼠 老鼠") == [0, 1]
    assert engine.search_ids("狗 躺") == [1]


def test_stopword_in_text_yields_no_postings(whitespace, stopwords):
    index = build_inverted_index(
        ["猫 的 老鼠", "的"], tokenizer=whitespace, stopwords=stopwords
    )

    assert query(index, "的") == []
    assert [doc.id for doc in query(index, "的 猫")] == [0]


def test_query_is_idempotent(index):
    engine = QueryEngine(index)

    assert engine.search("老鼠 猫") == engine.search("老鼠 猫")


def test_same_tokenizer_identity_is_accepted(index):
    engine = QueryEngine(index, tokenizer=Tokenizer("whitespace", "1", str.split))

    assert engine.search_ids("猫") == [0]


def test_mismatched_tokenizer_is_rejected(index):
    with pytest.raises(ValueError):
        QueryEngine(index, tokenizer=Tokenizer("whitespace", "2", str.split))
