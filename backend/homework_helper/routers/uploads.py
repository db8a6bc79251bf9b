from __future__ import annotations
import logging
from typing import List

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from ..ocr import ExtractionError, UnsupportedFileType, combine_captures, extract_text
from ..settings import settings


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/upload-file")
async def upload_file(files: List[UploadFile] = File(...)):
	captures = []
	described = []
	for upload in files:
		content = await upload.read()
		name = upload.filename or "upload"
		if len(content) > settings.max_upload_bytes:
			raise HTTPException(status_code=400, detail=f"{name} exceeds the {settings.max_upload_bytes} byte limit")
		try:
			# OCR is CPU bound
			text = await run_in_threadpool(extract_text, content, upload.content_type, name)
		except UnsupportedFileType as e:
			raise HTTPException(status_code=400, detail=f"{name}: {e}")
		except ExtractionError as e:
			logger.warning("text extraction failed for %s: %s", name, e)
			raise HTTPException(status_code=422, detail=str(e))
		captures.append((name, text))
		described.append({"fileName": name, "fileType": upload.content_type, "fileSize": len(content)})
	return {
		"success": True,
		"files": described,
		"extractedText": combine_captures(captures),
	}
