from .datatypes import Sentence, Document, Summary, FrequencyTable, ScoreMap
from .errors import DigestError, EmptyDocumentError, FileTooLargeError, UnsupportedFileTypeError, ExtractionError, InsufficientTextError
from .preprocessing import DigestConfig, STOPWORDS, sanitize_text, split_sentences, strip_diacritics, tokenize, preprocess_text
from .scoring import build_frequency_table, score_sentences
from .summarize import summarize, generate_summary, pick_top_sentences, build_title, build_thesis, build_call_to_action
from .ingest import IngestConfig, load_text_from_bytes, extract_pdf_text, extract_rtf_text, extract_markdown_text
