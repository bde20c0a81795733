import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

_package_dir = Path(__file__).resolve().parent.parent

# indexing limits
MAX_DOCUMENTS = int(os.getenv("MAX_DOCUMENTS", "10000"))
if not MAX_DOCUMENTS > 0:
    raise ValueError("MAX_DOCUMENTS must be a positive integer.")
INDEX_WORKERS = int(os.getenv("INDEX_WORKERS", "1"))
if not INDEX_WORKERS > 0:
    raise ValueError("INDEX_WORKERS must be a positive integer.")

# text processing
TOKENIZER = os.getenv("TOKENIZER", "jieba")
STOPWORDS_PATH = os.getenv(
    "STOPWORDS_PATH", str(_package_dir / "utils" / "chinese-stopwords.txt")
)

# corpus
CORPUS_DIR = os.getenv("CORPUS_DIR", "./data")
CORPUS_FILE_EXT = os.getenv("CORPUS_FILE_EXT", ".txt")
RECORD_SEPARATOR = os.getenv("RECORD_SEPARATOR", "_!_")

# sessions
DEFAULT_COLLECTION = os.getenv("DEFAULT_COLLECTION", "documents")

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
