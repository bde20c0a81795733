import pytest
from pydantic import ValidationError
from ftsearch import schemas
from ftsearch.repo.local import drop_index, list_collections, load_index
from ftsearch.services.public import ingest_corpus, retrieve_documents


@pytest.fixture
def stopwords_file(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text("的\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def collection(corpus_dir, stopwords_file):
    name = "test-collection"
    response = ingest_corpus(
        schemas.IngestionRequest(
            file_dir=str(corpus_dir),
            collection_name=name,
            tokenizer="whitespace",
            stopwords_path=stopwords_file,
        )
    )
    assert response.success, response.message
    yield name
    drop_index(name)


def test_ingest_reports_stats(collection):
    index = load_index(collection)

    assert collection in list_collections()
    assert index.stats() == schemas.IndexStats(
        doc_count=3, vocab_size=7, tokenizer="whitespace@1"
    )
    assert "的" not in index


def test_retrieve_one_result_list_per_query(collection):
    response = retrieve_documents(
        schemas.RetrievalRequest(
            queries=["老鼠", "猫", "狗", "的"], collection_name=collection
        )
    )

    assert response.success
    assert [[doc.id for doc in docs] for docs in response.results] == [
        [0, 1],
        [0],
        [2],
        [],
    ]
    assert response.results[0][1].text == "老鼠 躺 地上"


def test_ingest_respects_max_documents(corpus_dir, stopwords_file):
    response = ingest_corpus(
        schemas.IngestionRequest(
            file_dir=str(corpus_dir),
            collection_name="capped",
            tokenizer="whitespace",
            stopwords_path=stopwords_file,
            max_documents=2,
        )
    )
    try:
        assert response.success
        assert response.stats.doc_count == 2
    finally:
        drop_index("capped")


def test_ingest_without_source_fails_softly():
    response = ingest_corpus(schemas.IngestionRequest(collection_name="empty"))

    assert not response.success
    assert "No file paths" in response.message
    assert "empty" not in list_collections()


def test_ingestion_request_rejects_unknown_tokenizer(corpus_dir):
    with pytest.raises(ValidationError):
        schemas.IngestionRequest(file_dir=str(corpus_dir), tokenizer="klingon")


def test_retrieve_from_unknown_collection_fails_softly():
    response = retrieve_documents(
        schemas.RetrievalRequest(queries=["猫"], collection_name="nope")
    )

    assert not response.success
    assert response.results == []
    assert response.message == "No index has been built for collection 'nope'"


def test_retrieve_without_queries_fails_softly(collection):
    response = retrieve_documents(
        schemas.RetrievalRequest(queries=[], collection_name=collection)
    )

    assert not response.success
