from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Definition:
    text: str | list[str]  # list only in legacy stored data
    attribution_text: str = ""
    source_dictionary: str = ""
    source_url: str = ""
    id: str | None = None
    part_of_speech: str | None = None
    examples: list[str] | None = None
    synonyms: list[str] | None = None
    antonyms: list[str] | None = None

    def to_dict(self) -> dict:
        d: dict = {}
        if self.id is not None:
            d["id"] = self.id
        if self.part_of_speech is not None:
            d["partOfSpeech"] = self.part_of_speech
        d["text"] = self.text
        d["attributionText"] = self.attribution_text
        d["sourceDictionary"] = self.source_dictionary
        d["sourceUrl"] = self.source_url
        for key in ("examples", "synonyms", "antonyms"):
            value = getattr(self, key)
            if value:
                d[key] = list(value)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Definition:
        return cls(
            text=d.get("text", ""),
            attribution_text=d.get("attributionText") or "",
            source_dictionary=d.get("sourceDictionary") or "",
            source_url=d.get("sourceUrl") or "",
            id=d.get("id"),
            part_of_speech=d.get("partOfSpeech") or None,
            examples=d.get("examples") or None,
            synonyms=d.get("synonyms") or None,
            antonyms=d.get("antonyms") or None,
        )


@dataclass
class ResponseMeta:
    source: str
    attribution: str
    url: str


@dataclass
class DictionaryResponse:
    word: str
    definitions: list[Definition]
    meta: ResponseMeta

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "definitions": [d.to_dict() for d in self.definitions],
            "meta": {
                "source": self.meta.source,
                "attribution": self.meta.attribution,
                "url": self.meta.url,
            },
        }


@dataclass
class FetchResult:
    response: DictionaryResponse
    adapter_name: str


@dataclass
class WordData:
    word: str
    date: str  # YYYYMMDD
    adapter: str
    data: list[Definition] = field(default_factory=list)
    preserve_case: bool = False
    raw_data: DictionaryResponse | None = None  # audit copy, never persisted

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "date": self.date,
            "adapter": self.adapter,
            "preserveCase": self.preserve_case,
            "data": [d.to_dict() for d in self.data],
        }

    @classmethod
    def from_dict(cls, d: dict) -> WordData:
        raw_defs = d.get("data")
        return cls(
            word=d.get("word", ""),
            date=d.get("date", ""),
            adapter=d.get("adapter", ""),
            data=[Definition.from_dict(x) for x in raw_defs] if isinstance(raw_defs, list) else [],
            preserve_case=bool(d.get("preserveCase", False)),
        )


@dataclass
class DisplayMeta:
    attribution_text: str
    source_dictionary: str | None
    source_url: str


@dataclass
class WordDisplay:
    part_of_speech: str
    definition: str
    meta: DisplayMeta | None

    @classmethod
    def empty(cls) -> WordDisplay:
        return cls(part_of_speech="", definition="", meta=None)

    def to_dict(self) -> dict:
        meta = None
        if self.meta is not None:
            meta = {
                "attributionText": self.meta.attribution_text,
                "sourceDictionary": self.meta.source_dictionary,
                "sourceUrl": self.meta.source_url,
            }
        return {"partOfSpeech": self.part_of_speech, "definition": self.definition, "meta": meta}
