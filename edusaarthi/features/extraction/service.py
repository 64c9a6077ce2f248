"""
Text Extractor
PDF and plain text extraction for task source documents
"""

import asyncio
import io
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import aiofiles
from pypdf import PdfReader

from edusaarthi.core.config import settings
from edusaarthi.core.logging import get_logger
from edusaarthi.core.utils.trace import log_process
from edusaarthi.features.scheduler.exceptions import (
    EmptyOrUnreadableError,
    ExtractionFailedError,
    TaskFileNotFoundError,
)

logger = get_logger(__name__)

EXTRACTION_SKIPPED = "[extraction skipped: unsupported file type {mimetype}]"


class DocumentKind(str, Enum):
    """Declared source document kind"""
    PDF = "pdf"
    TEXT = "text"

    @classmethod
    def from_file_name(cls, file_name: str) -> "DocumentKind":
        """PDF when the name ends in .pdf (any case), plain text otherwise"""
        return cls.PDF if file_name.lower().endswith(".pdf") else cls.TEXT


def _read_pdf_text(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


class TextExtractor:
    """
    Turns a stored document into plain text

    PDF parsing is CPU bound and runs in the default thread pool.
    """

    def __init__(self, base_path: Optional[str] = None):
        """
        Args:
            base_path: directory relative task paths are resolved against
        """
        self.base_path = Path(base_path or settings.upload_base_path)

    def resolve_path(self, file_path: Union[str, Path]) -> Path:
        """Absolute path of a stored document"""
        path = Path(file_path)
        if not path.is_absolute():
            path = self.base_path / path
        return path.resolve()

    @log_process(step="Extract Text", desc="source document text extraction")
    async def extract(self, path: Union[str, Path], kind: DocumentKind) -> str:
        """
        Extract text from a file

        Args:
            path: document path (relative paths use base_path)
            kind: declared document kind

        Returns:
            str: extracted text

        Raises:
            TaskFileNotFoundError: path does not exist
            ExtractionFailedError: file could not be read or parsed
            EmptyOrUnreadableError: PDF has no extractable text
        """
        full_path = self.resolve_path(path)
        if not full_path.is_file():
            raise TaskFileNotFoundError(str(full_path))

        try:
            async with aiofiles.open(full_path, "rb") as f:
                data = await f.read()
        except OSError as e:
            raise ExtractionFailedError(str(e), path=str(full_path)) from e

        if DocumentKind(kind) == DocumentKind.PDF:
            text = await self._extract_pdf(data, str(full_path))
        else:
            text = data.decode("utf-8", errors="replace")

        logger.info(
            "Text extracted",
            path=os.path.basename(full_path),
            kind=DocumentKind(kind).value,
            chars=len(text),
        )
        return text

    async def extract_upload(self, data: bytes, mimetype: str) -> str:
        """
        Extract text from uploaded bytes

        Unsupported mimetypes return a placeholder instead of failing.
        """
        mimetype = (mimetype or "").lower()
        if mimetype == "application/pdf":
            return await self._extract_pdf(data)
        if mimetype.startswith("text/"):
            return data.decode("utf-8", errors="replace")

        logger.warning("Extraction skipped for unsupported upload", mimetype=mimetype)
        return EXTRACTION_SKIPPED.format(mimetype=mimetype or "unknown")

    async def _extract_pdf(self, data: bytes, path: Optional[str] = None) -> str:
        loop = asyncio.get_running_loop()
        try:
            text = await loop.run_in_executor(None, _read_pdf_text, data)
        except Exception as e:
            raise ExtractionFailedError(str(e) or e.__class__.__name__, path=path) from e

        if not text.strip():
            raise EmptyOrUnreadableError(path)
        return text
