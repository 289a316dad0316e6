import pytest

from text_digest.errors import EmptyDocumentError
from text_digest.preprocessing import (
    DigestConfig,
    STOPWORDS,
    preprocess_text,
    sanitize_text,
    split_sentences,
    strip_diacritics,
    tokenize,
)

FIRST = "Voici une première phrase assez longue pour compter."
SECOND = "Et voici une deuxième phrase tout aussi longue!"


def test_sanitize_collapses_whitespace_runs():
    assert sanitize_text("  un\n\n\tdeux   trois \r\n") == "un deux trois"


def test_sanitize_replaces_control_characters():
    assert sanitize_text("a\x00b\x7fc") == "a b c"
    assert "\x1b" not in sanitize_text("début\x1b[0mfin")


def test_sanitize_empty():
    assert sanitize_text("") == ""
    assert sanitize_text(" \n\t ") == ""


def test_split_keeps_terminal_punctuation():
    assert split_sentences(f"{FIRST} {SECOND}") == [FIRST, SECOND]


def test_split_needs_uppercase_after_boundary():
    text = FIRST + " " + SECOND[0].lower() + SECOND[1:]
    assert split_sentences(text) == [text]


def test_split_needs_whitespace_after_punctuation():
    text = "Le fichier config.Json est chargé au démarrage du service web."
    assert split_sentences(text) == [text]


def test_split_on_accented_capital():
    second = "Étape suivante: relire chaque section avec beaucoup de soin."
    assert split_sentences(f"{FIRST} {second}") == [FIRST, second]


def test_split_handles_question_and_exclamation():
    a = "Pourquoi cette méthode fonctionne-t-elle si bien en pratique?"
    b = "Parce que les mots fréquents décrivent le sujet principal!"
    assert split_sentences(f"{a}   {b}") == [a, b]


def test_split_drops_short_fragments():
    text = f"Chapitre un. {FIRST} Fin. {SECOND}"
    assert split_sentences(text) == [FIRST, SECOND]


def test_split_without_punctuation():
    long_text = "un texte sans ponctuation finale mais suffisamment long pour rester"
    assert split_sentences(long_text) == [long_text]
    assert split_sentences("trop court") == []


def test_split_truncates_to_max_sentences():
    text = " ".join([FIRST] * 5)
    cfg = DigestConfig(max_sentences=3)
    assert split_sentences(text, cfg) == [FIRST] * 3


def test_strip_diacritics():
    assert strip_diacritics("éàçôüÉ") == "eacouE"


def test_tokenize_folds_case_and_accents():
    assert tokenize("Les Élèves étudient l'économie") == ["eleves", "etudient", "economie"]


def test_tokenize_keeps_hyphenated_words_and_drops_digits():
    assert tokenize("Le porte-parole a cité 2024 : bilan.") == ["porte-parole", "cite", "bilan"]


def test_tokenize_drops_accented_stopwords():
    assert "etre" in STOPWORDS
    assert tokenize("Après être venus") == ["venus"]


def test_tokenize_only_stopwords():
    assert tokenize("Mais il est encore avec nous et pour vous tous.") == []


def test_preprocess_text_builds_indexed_sentences():
    doc = preprocess_text(f"{FIRST}\n\n{SECOND}")
    assert doc.texts == [FIRST, SECOND]
    assert [s.idx for s in doc.sentences] == [0, 1]
    assert doc.sentences[0].tokens == tokenize(FIRST)
    assert doc.sanitized_text == f"{FIRST} {SECOND}"


@pytest.mark.parametrize("text", ["", "   ", "Trop court.", "Un. Deux. Trois. Quatre."])
def test_preprocess_text_rejects_documents_without_sentences(text):
    with pytest.raises(EmptyDocumentError):
        preprocess_text(text)
