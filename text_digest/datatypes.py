from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Dict

@dataclass
class Sentence:
    idx: int  # position in the segmented sequence
    text: str
    tokens: List[str] = field(default_factory=list)

@dataclass
class Document:
    raw_text: str
    sanitized_text: str
    sentences: List[Sentence]

    @property
    def texts(self) -> List[str]:
        return [s.text for s in self.sentences]

@dataclass
class Summary:
    title_suggestion: str
    thesis: str
    key_points: List[str]
    call_to_action: str

    def to_dict(self) -> Dict[str, object]:
        # camelCase keys, as served to the upload page
        return {
            "titleSuggestion": self.title_suggestion,
            "thesis": self.thesis,
            "keyPoints": list(self.key_points),
            "callToAction": self.call_to_action,
        }

FrequencyTable = Counter  # token -> occurrences across the whole document
ScoreMap = Dict[int, float]  # sentence idx -> mean token frequency
