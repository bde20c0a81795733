from .logging import logger
from .tokenizer import Tokenizer, TokenizerName, get_tokenizer, tokenize
from .stopwords import StopwordFilter, load_stopwords
