import logging
from ftsearch.core import config


class TermFrequencyFilter(logging.Filter):
    def filter(self, record):
        # one record per (document, term) pair; shown only at DEBUG
        if getattr(record, "term_frequency", False):
            return logger.isEnabledFor(logging.DEBUG)
        return True


logger = logging.getLogger("ftsearch")
logger.setLevel(config.LOG_LEVEL)

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(_handler)

for h in list(logger.handlers):
    h.addFilter(TermFrequencyFilter())
