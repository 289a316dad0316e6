from __future__ import annotations
from collections import Counter
from .datatypes import Document, FrequencyTable, ScoreMap

def build_frequency_table(doc: Document) -> FrequencyTable:
    # document-wide counts: a token seen twice in one sentence counts twice
    freq: FrequencyTable = Counter()
    for s in doc.sentences:
        freq.update(s.tokens)
    return freq

def score_sentences(doc: Document, freq: FrequencyTable) -> ScoreMap:
    """
    Score each sentence by the mean document frequency of its tokens.

    score(Si) = sum(freq[t] for t in Si) / |Si|

    Dividing by the token count keeps long sentences from winning on length
    alone. Sentences without tokens get no entry and are never selected.
    """
    scores: ScoreMap = {}
    for s in doc.sentences:
        if not s.tokens:
            continue
        total = sum(freq.get(t, 0) for t in s.tokens)
        scores[s.idx] = total / len(s.tokens)
    return scores
