from .corpus import iter_corpus, parse_line
from .storage import store_index, load_index, drop_index, list_collections
