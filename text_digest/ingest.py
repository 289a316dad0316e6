from __future__ import annotations
import io
import logging
import re
from dataclasses import dataclass
from typing import Optional

import pdfplumber

from .errors import (
    ExtractionError,
    FileTooLargeError,
    InsufficientTextError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "txt", "md", "rtf")


@dataclass(frozen=True)
class IngestConfig:
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    min_text_length: int = 200


def extract_pdf_text(data: bytes) -> str:
    """Join the text layer of every page of a PDF payload."""
    text_parts = []
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
    except Exception as e:
        raise ExtractionError("Impossible de lire ce PDF.") from e
    return "\n".join(text_parts)


def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content."""
    # Remove RTF control words and groups
    text = re.sub(r'\\\*.*?;', '', rtf_content)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def extract_markdown_text(md_content: str) -> str:
    """Extract plain text from Markdown content."""
    # code blocks go first so their backticks don't leak into inline rules
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()


def load_text_from_bytes(filename: str, data: bytes, cfg: Optional[IngestConfig] = None) -> str:
    """Turn an uploaded file into the raw text handed to ``summarize``."""
    cfg = cfg or IngestConfig()
    if len(data) > cfg.max_file_size:
        raise FileTooLargeError(len(data), cfg.max_file_size)

    extension = filename.lower().rsplit('.', 1)[-1] if '.' in filename else ''
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileTypeError(extension)

    if extension == 'pdf':
        text = extract_pdf_text(data)
    else:
        content = data.decode("utf-8", errors="replace")
        if extension == 'rtf':
            text = extract_rtf_text(content)
        elif extension == 'md':
            text = extract_markdown_text(content)
        else:
            text = content

    length = len(text.strip())
    if length < cfg.min_text_length:
        raise InsufficientTextError(length, cfg.min_text_length)

    logger.info("extracted %d chars from %s", length, filename)
    return text
