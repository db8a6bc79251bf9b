"""
Tests for ocr

Test Coverage:
- extract_text(): PDF text layer, image OCR, unsupported types
- combine_captures(): source-marker framing that the normalizer strips
- source_marker(): filenames containing dash runs cannot leak into the text
"""
from io import BytesIO

import pymupdf
import pytest
from PIL import Image

from homework_helper import ocr
from homework_helper.analysis import normalize_text


def make_pdf(text):
    doc = pymupdf.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def make_png():
    buf = BytesIO()
    Image.new("RGB", (40, 20), color="white").save(buf, format="PNG")
    return buf.getvalue()


def test_extract_pdf_text():
    text = ocr.extract_text(make_pdf("What is 2x + 3 = 7?"), "application/pdf", "q.pdf")

    assert text == "What is 2x + 3 = 7?"


def test_pdf_detected_by_extension():
    text = ocr.extract_text(make_pdf("Solve 3y = 9"), "application/octet-stream", "HOMEWORK.PDF")

    assert text == "Solve 3y = 9"


def test_corrupt_pdf_raises_extraction_error():
    with pytest.raises(ocr.ExtractionError):
        ocr.extract_text(b"not a pdf at all", "application/pdf", "broken.pdf")


def test_extract_image_text(monkeypatch):
    seen = []

    def fake_image_to_string(img):
        seen.append(img.size)
        return "  Step 1: 2x = 4\n"

    monkeypatch.setattr(ocr.pytesseract, "image_to_string", fake_image_to_string)

    assert ocr.extract_text(make_png(), "image/png", "work.png") == "Step 1: 2x = 4"
    assert seen == [(40, 20)]


def test_unreadable_image_raises_extraction_error():
    with pytest.raises(ocr.ExtractionError):
        ocr.extract_text(b"garbage", "image/png", "work.png")


def test_missing_tesseract_binary(monkeypatch):
    def missing(img):
        raise ocr.pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(ocr.pytesseract, "image_to_string", missing)

    with pytest.raises(ocr.ExtractionError, match="tesseract-ocr"):
        ocr.extract_text(make_png(), "image/jpeg", "work.jpg")


def test_unsupported_type():
    with pytest.raises(ocr.UnsupportedFileType):
        ocr.extract_text(b"hello", "text/plain", "notes.txt")


def test_combine_captures_frames_each_source():
    combined = ocr.combine_captures([("p1.png", "What is 2x + 3 = 7?"), ("p2.png", "Step 1: 2x = 4")])

    assert combined == "--- From p1.png ---\nWhat is 2x + 3 = 7?\n\n--- From p2.png ---\nStep 1: 2x = 4"
    # marker lines go, the newlines around them stay
    assert normalize_text(combined) == "What is 2x + 3 = 7?\n\n\nStep 1: 2x = 4"


def test_source_marker_flattens_whitespace_in_names():
    assert ocr.source_marker("my\nscan.png") == "--- From my scan.png ---"
    assert ocr.source_marker("") == "--- From upload ---"


def test_source_marker_collapses_dash_runs():
    assert ocr.source_marker("a --- b.png") == "--- From a - b.png ---"
    assert ocr.source_marker("x-----y.png") == "--- From x-y.png ---"


def test_dashed_filename_is_fully_stripped_by_normalizer():
    combined = ocr.combine_captures([("a --- b.png", "What is 2x + 3 = 7?")])

    cleaned = normalize_text(combined)

    assert cleaned == "What is 2x + 3 = 7?"
    assert "b.png" not in cleaned
