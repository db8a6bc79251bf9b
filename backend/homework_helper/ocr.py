from __future__ import annotations
import logging
import re
from io import BytesIO
from typing import Iterable, Optional, Tuple

import pymupdf
import pytesseract
from PIL import Image


logger = logging.getLogger(__name__)

# a dash run in a filename would end the marker early when it is stripped
_DASH_RUN_RE = re.compile(r"-{3,}")

PDF_CONTENT_TYPE = "application/pdf"


class ExtractionError(Exception):
	pass


class UnsupportedFileType(ExtractionError):
	pass


def _is_pdf(content_type: Optional[str], filename: str) -> bool:
	return content_type == PDF_CONTENT_TYPE or filename.lower().endswith(".pdf")


def _is_image(content_type: Optional[str]) -> bool:
	return bool(content_type) and content_type.startswith("image/")


def extract_pdf_text(data: bytes) -> str:
	try:
		with pymupdf.open(stream=data, filetype="pdf") as doc:
			return "\n".join(page.get_text() for page in doc).strip()
	except (RuntimeError, ValueError) as e:
		raise ExtractionError(f"Failed to read PDF: {e}") from e


def extract_image_text(data: bytes) -> str:
	try:
		img = Image.open(BytesIO(data))
		return pytesseract.image_to_string(img).strip()
	except pytesseract.TesseractNotFoundError as e:
		raise ExtractionError("OCR unavailable: install the system package 'tesseract-ocr'") from e
	except (OSError, RuntimeError) as e:
		raise ExtractionError(f"Failed to OCR image: {e}") from e


def extract_text(data: bytes, content_type: Optional[str], filename: str = "") -> str:
	"""Text of one uploaded image or PDF."""
	if _is_pdf(content_type, filename):
		return extract_pdf_text(data)
	if _is_image(content_type):
		return extract_image_text(data)
	raise UnsupportedFileType("Only image files and PDFs are allowed")


def source_marker(filename: str) -> str:
	name = _DASH_RUN_RE.sub("-", " ".join((filename or "upload").split()))
	return f"--- From {name} ---"


def combine_captures(captures: Iterable[Tuple[str, str]]) -> str:
	"""Join (filename, text) captures, each preceded by its source marker."""
	return "\n\n".join(f"{source_marker(name)}\n{text}" for name, text in captures)
