from __future__ import annotations
import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import List, Optional
from .datatypes import Document, Sentence
from .errors import EmptyDocumentError

logger = logging.getLogger(__name__)

RE_WHITESPACE = re.compile(r"\s+")
RE_CONTROL    = re.compile(r"[\x00-\x1f\x7f]")
# anything that is not a folded latin letter, whitespace or hyphen
RE_NON_WORD   = re.compile(r"[^a-zà-ÿ\s-]")

SENTENCE_END = ".!?"


@dataclass(frozen=True)
class DigestConfig:
    min_sentence_length: int = 40
    max_sentences: int = 180   # bounds scoring cost on very large documents
    max_key_points: int = 6
    fallback_title: str = "Essentiel du chapitre"
    call_to_action_lead: str = "Poursuivez le chapitre en développant:"
    fallback_call_to_action: str = (
        "Concluez en soulignant la portée pratique de ces enseignements pour le lecteur."
    )


def strip_diacritics(text: str) -> str:
    """NFD-decompose ``text`` and drop the combining marks ("é" -> "e")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


_RAW_STOPWORDS = [
    # articles, determiners
    'le','la','les','l','un','une','des','du','de','d','au','aux',
    'ce','cet','cette','ces','ceci','cela','ça',
    'mon','ma','mes','ton','ta','tes','son','sa','ses',
    'notre','nos','votre','vos','leur','leurs',
    'chaque','aucun','aucune','autre','autres','quel','quelle','quels','quelles',
    'tout','toute','tous','toutes',
    # pronouns
    'je','j','tu','il','elle','on','nous','vous','ils','elles',
    'me','m','te','t','se','s','lui','moi','toi','eux','ceux','celle','celles','celui',
    'y','en','qui','que','qu','quoi','dont','où',
    # conjunctions, prepositions, adverbs
    'et','ou','mais','donc','or','ni','car','si','comme','comment','lorsque','quand',
    'dans','par','pour','sur','sous','avec','sans','entre','chez','vers','contre',
    'avant','après','pendant','depuis','afin','ainsi','alors','aussi','encore',
    'ici','là','tandis','puis','plus','moins','peu','très','trop','bien','bon',
    'toujours','jamais','déjà','ne','n','pas','c',
    # être
    'être','suis','es','est','sommes','êtes','sont','été',
    'étais','était','étions','étiez','étaient','sera','seront','serait','soit',
    # avoir
    'avoir','ai','as','a','avons','avez','ont','eu','avait','avaient','aura','auront',
    # faire
    'fait','faites','fais','font','faire',
]

# folded the same way tokens are, so "être" matches the token "etre"
STOPWORDS = frozenset(strip_diacritics(w) for w in _RAW_STOPWORDS)


def sanitize_text(text: str) -> str:
    text = RE_WHITESPACE.sub(" ", text)
    text = RE_CONTROL.sub(" ", text)
    return text.strip()


def _starts_sentence(ch: str) -> bool:
    # A-Z plus the Latin-1 capitals (À-Ö, Ø-Þ)
    return ("A" <= ch <= "Z") or ("À" <= ch <= "Ö") or ("Ø" <= ch <= "Þ")


def _scan_boundaries(text: str) -> List[str]:
    """Cut ``text`` after a terminal mark followed by whitespace and a capital.

    The terminal mark stays with the sentence it closes; the whitespace run
    between the two sentences is dropped.
    """
    parts: List[str] = []
    start = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] in SENTENCE_END:
            j = i + 1
            while j < n and text[j].isspace():
                j += 1
            if j > i + 1 and j < n and _starts_sentence(text[j]):
                parts.append(text[start:i + 1])
                start = j
                i = j
                continue
        i += 1
    parts.append(text[start:])
    return parts


def split_sentences(text: str, cfg: Optional[DigestConfig] = None) -> List[str]:
    cfg = cfg or DigestConfig()
    parts = [p.strip() for p in _scan_boundaries(text)]
    parts = [p for p in parts if len(p) >= cfg.min_sentence_length]
    return parts[:cfg.max_sentences]


def tokenize(sentence: str) -> List[str]:
    text = strip_diacritics(sentence.lower())
    text = RE_NON_WORD.sub(" ", text)
    return [t for t in text.split() if t and t not in STOPWORDS]


def preprocess_text(text: str, cfg: Optional[DigestConfig] = None) -> Document:
    cfg = cfg or DigestConfig()
    sanitized = sanitize_text(text)
    sents_raw = split_sentences(sanitized, cfg)
    if not sents_raw:
        raise EmptyDocumentError()

    sentences = [Sentence(idx=i, text=s, tokens=tokenize(s)) for i, s in enumerate(sents_raw)]
    logger.debug("segmented %d chars into %d sentences", len(sanitized), len(sentences))
    return Document(raw_text=text, sanitized_text=sanitized, sentences=sentences)
