from __future__ import annotations
import re


# Screenshot/OCR captures are framed as "--- From img1.png ---"
SOURCE_MARKER_RE = re.compile(r"--- From .*? ---")
_HSPACE_RE = re.compile(r"[ \t]+")


def _normalize_once(text: str) -> str:
	text = SOURCE_MARKER_RE.sub("", text)
	text = text.replace("\r\n", "\n").replace("\r", "\n")
	text = _HSPACE_RE.sub(" ", text)
	return text.strip()


def normalize_text(text: str) -> str:
	"""Strip source markers and whitespace noise from extracted text.

	Marker removal and space collapsing can expose a new marker
	("---  From a ---" only becomes one after collapsing), so passes repeat
	until the text stops changing.
	"""
	current = text or ""
	while True:
		cleaned = _normalize_once(current)
		if cleaned == current:
			return cleaned
		current = cleaned
