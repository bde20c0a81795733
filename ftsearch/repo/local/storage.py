from ftsearch.services.internal import Index

_index_cache: dict[str, Index] = {}


def store_index(collection_name: str, index: Index) -> None:
    _index_cache[collection_name] = index


def load_index(collection_name: str) -> Index:
    if collection_name not in _index_cache:
        raise ValueError(f"No index has been built for collection '{collection_name}'")
    return _index_cache[collection_name]


def drop_index(collection_name: str) -> None:
    _index_cache.pop(collection_name, None)


def list_collections() -> list[str]:
    return list(_index_cache)
