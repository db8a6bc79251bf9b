from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

from .settings import Settings, settings as default_settings


logger = logging.getLogger(__name__)

ANSWER_POD_TITLES = ("Solution", "Result", "Answer")


class WolframAlphaClient:
	def __init__(
		self,
		app_id: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		config: Optional[Settings] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		config = config or default_settings
		self.app_id = app_id or config.wolfram_app_id
		if not self.app_id:
			raise ValueError("WOLFRAM_APP_ID is not configured")
		self.base_url = base_url or config.wolfram_base_url
		self._client = httpx.AsyncClient(timeout=config.wolfram_timeout_seconds, transport=transport)

	async def solve(self, query: str) -> Optional[str]:
		"""Plaintext of the first Solution/Result/Answer pod, or None."""
		q = (query or "").strip()
		if not q:
			return None
		params = {"input": q, "format": "plaintext", "output": "JSON", "appid": self.app_id}
		try:
			r = await self._client.get(self.base_url, params=params)
			r.raise_for_status()
			data = r.json()
		except (httpx.HTTPError, ValueError) as err:
			logger.warning("Wolfram Alpha query failed: %s", err)
			return None
		return pick_answer(data)

	async def aclose(self) -> None:
		await self._client.aclose()


def pick_answer(data: Dict[str, Any]) -> Optional[str]:
	result = data.get("queryresult") if isinstance(data, dict) else None
	if not isinstance(result, dict):
		return None
	pods = result.get("pods")
	if not isinstance(pods, list):
		return None
	for pod in pods:
		if not isinstance(pod, dict):
			continue
		title = str(pod.get("title", ""))
		if not any(t in title for t in ANSWER_POD_TITLES):
			continue
		subpods = pod.get("subpods")
		if isinstance(subpods, list) and subpods and isinstance(subpods[0], dict):
			text = subpods[0].get("plaintext")
			if isinstance(text, str) and text.strip():
				return text.strip()
		return None
	return None
