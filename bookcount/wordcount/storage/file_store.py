from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from wordcount.models.schemas import CountsDocument, FactRecord
from wordcount.models.storage import CountStore, Fact
from wordcount.utils.validation import require_text

logger = logging.getLogger("wordcount")


def encode_facts(facts: tuple[Fact, ...] | list[Fact]) -> bytes:
    document = CountsDocument(facts=[FactRecord(word=f.word, book=f.book, count=f.count) for f in facts])
    return document.model_dump_json().encode("utf-8")


def decode_facts(data: bytes) -> list[Fact]:
    document = CountsDocument.model_validate_json(data)
    return [Fact(word=r.word, book=r.book, count=r.count) for r in document.facts]


def save(store: CountStore, path: str) -> bool:
    """Write every fact in ``store`` to ``path``, replacing any existing file."""
    require_text(path, "path")
    facts = store.snapshot()
    target = Path(path)
    tmp_name = None
    try:
        data = encode_facts(facts)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_name, target)
        tmp_name = None
    except (OSError, ValueError) as exc:
        logger.warning("counts.save_failed path=%s error=%s", path, exc)
        return False
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    logger.info("counts.saved path=%s facts=%s", path, len(facts))
    return True


def load(store: CountStore, path: str) -> bool:
    """Replace the contents of ``store`` with the facts saved at ``path``."""
    require_text(path, "path")
    try:
        data = Path(path).read_bytes()
        facts = decode_facts(data)
    except OSError as exc:
        logger.warning("counts.load_failed path=%s error=%s", path, exc)
        return False
    except ValidationError as exc:
        logger.warning("counts.load_invalid path=%s errors=%s", path, exc.error_count())
        return False
    except ValueError as exc:
        logger.warning("counts.load_failed path=%s error=%s", path, exc)
        return False
    store.replace(facts)
    logger.info("counts.loaded path=%s facts=%s", path, len(facts))
    return True
