"""
Lazily parsed, process-wide corpus.

Each work is read from `<html_dir>/<file_name>.html`, parsed by its visitor
and checked against the expected record count on first access. Results are
immutable and shared by every caller afterwards.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from writings_core.errors import NotFoundError
from writings_core.models.enums import WritingsType
from writings_core.settings import settings
from writings_core.visitors import (
    CDBVisitor,
    GleaningsVisitor,
    HiddenWordsVisitor,
    MeditationsVisitor,
    PrayersVisitor,
    WritingsVisitor,
)
from writings_core.writings import Writings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Work:
    file_name: str
    visitor: type[WritingsVisitor]

    @property
    def writings_type(self) -> WritingsType:
        return self.visitor.WRITINGS_TYPE

    @property
    def url(self) -> str:
        return self.visitor.URL

    @property
    def expected_count(self) -> int:
        return self.visitor.EXPECTED_COUNT


WORKS: tuple[Work, ...] = (
    Work("prayers", PrayersVisitor),
    Work("hidden_words", HiddenWordsVisitor),
    Work("gleanings", GleaningsVisitor),
    Work("meditations", MeditationsVisitor),
    Work("call_divine_beloved", CDBVisitor),
)

WORKS_BY_TYPE: Mapping[WritingsType, Work] = MappingProxyType({w.writings_type: w for w in WORKS})
WORKS_BY_NAME: Mapping[str, Work] = MappingProxyType({w.file_name: w for w in WORKS})


def html_path(work: Work, html_dir: Path | None = None) -> Path:
    return (html_dir or settings.html_dir) / f"{work.file_name}.html"


def load_html(work: Work, html_dir: Path | None = None) -> str:
    return html_path(work, html_dir).read_text(encoding="utf-8")


def parse_work(visitor_cls: type[WritingsVisitor], html: str, *, verify: bool = True) -> tuple:
    """Run a fresh visitor over `html`; optionally enforce the expected count."""
    records = visitor_cls().parse_and_traverse(html)
    if verify:
        visitor_cls.verify_count(records)
    return records


Loader = Callable[[Work], str]


class CorpusCache:
    """
    Per-type record cache. Parsing happens at most once per type; a failure
    is raised to the caller and leaves the type unparsed.
    """

    def __init__(
        self,
        html_dir: Path | None = None,
        loader: Loader | None = None,
        *,
        verify: bool = True,
    ) -> None:
        self.html_dir = html_dir
        self.verify = verify
        self._loader = loader or (lambda work: load_html(work, self.html_dir))
        self._lock = threading.Lock()
        self._records: dict[WritingsType, tuple[Writings, ...]] = {}
        self._maps: dict[WritingsType, Mapping[str, Writings]] = {}
        self._everything: tuple[Writings, ...] | None = None
        self._everything_map: Mapping[str, Writings] | None = None

    def all(self, writings_type: WritingsType) -> tuple[Writings, ...]:
        with self._lock:
            return self._load(writings_type)

    def all_map(self, writings_type: WritingsType) -> Mapping[str, Writings]:
        with self._lock:
            if writings_type not in self._maps:
                records = self._load(writings_type)
                self._maps[writings_type] = MappingProxyType({r.ref_id: r for r in records})
            return self._maps[writings_type]

    def everything(self) -> tuple[Writings, ...]:
        with self._lock:
            if self._everything is None:
                combined: list[Writings] = []
                for work in WORKS:
                    combined.extend(self._load(work.writings_type))
                self._everything = tuple(combined)
            return self._everything

    def everything_map(self) -> Mapping[str, Writings]:
        records = self.everything()
        with self._lock:
            if self._everything_map is None:
                self._everything_map = MappingProxyType({r.ref_id: r for r in records})
            return self._everything_map

    def get(self, ref_id: str) -> Writings:
        try:
            return self.everything_map()[ref_id]
        except KeyError:
            raise NotFoundError(f"No record with ref_id {ref_id!r}") from None

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
            self._maps.clear()
            self._everything = None
            self._everything_map = None

    def _load(self, writings_type: WritingsType) -> tuple[Writings, ...]:
        cached = self._records.get(writings_type)
        if cached is not None:
            return cached
        work = WORKS_BY_TYPE[writings_type]
        logger.info("parsing %s", work.file_name)
        records = parse_work(work.visitor, self._loader(work), verify=self.verify)
        self._records[writings_type] = records
        return records


corpus = CorpusCache()
