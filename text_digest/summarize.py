from __future__ import annotations
import logging
import re
from typing import List, Optional
from .datatypes import Document, ScoreMap, Sentence, Summary
from .preprocessing import DigestConfig, RE_WHITESPACE, preprocess_text
from .scoring import build_frequency_table, score_sentences

logger = logging.getLogger(__name__)

RE_TITLE_STOP = re.compile(r"[:.!?]")


def pick_top_sentences(doc: Document, scores: ScoreMap, limit: int = 6) -> List[Sentence]:
    # sorted() is stable: equal scores keep document order
    candidates = [s for s in doc.sentences if s.idx in scores]
    ranked = sorted(candidates, key=lambda s: scores[s.idx], reverse=True)
    selected = [s.idx for s in ranked[:limit]]
    selected.sort()  # restore original order
    return [doc.sentences[i] for i in selected]


def build_title(key_sentences: List[str], cfg: Optional[DigestConfig] = None) -> str:
    cfg = cfg or DigestConfig()
    if not key_sentences:
        return cfg.fallback_title
    snippet = RE_TITLE_STOP.split(key_sentences[0], maxsplit=1)[0].strip()
    return snippet or cfg.fallback_title


def build_thesis(sentences: List[str]) -> str:
    return RE_WHITESPACE.sub(" ", " ".join(sentences[:2])).strip()


def build_call_to_action(sentences: List[str], cfg: Optional[DigestConfig] = None) -> str:
    cfg = cfg or DigestConfig()
    last = sentences[-1] if sentences else ""
    if not last:
        return cfg.fallback_call_to_action
    return f"{cfg.call_to_action_lead} {last}"


def generate_summary(doc: Document, scores: ScoreMap, cfg: Optional[DigestConfig] = None) -> Summary:
    cfg = cfg or DigestConfig()
    all_sentences = doc.texts
    key_sentences = [s.text for s in pick_top_sentences(doc, scores, limit=cfg.max_key_points)]
    return Summary(
        title_suggestion=build_title(key_sentences, cfg),
        thesis=build_thesis(all_sentences),
        key_points=key_sentences,
        call_to_action=build_call_to_action(all_sentences, cfg),
    )


def summarize(text: str, cfg: Optional[DigestConfig] = None) -> Summary:
    """Distill ``text`` into a title, a thesis, key points and a call to action.

    Raises ``EmptyDocumentError`` when no sentence survives segmentation.
    """
    cfg = cfg or DigestConfig()
    doc = preprocess_text(text, cfg)
    freq = build_frequency_table(doc)
    scores = score_sentences(doc, freq)
    logger.debug("vocabulary=%d scored=%d/%d", len(freq), len(scores), len(doc.sentences))

    summary = generate_summary(doc, scores, cfg)
    logger.info("digest ready: %d sentences, %d key points", len(doc.sentences), len(summary.key_points))
    return summary
