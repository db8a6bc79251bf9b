from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, List, Optional
from .settings import Settings, settings as default_settings


logger = logging.getLogger(__name__)


class LLMError(RuntimeError):
	pass


class LLMClient:
	"""Chat-completions client with an optional OpenRouter fallback.

	One instance is created at startup and shared by all requests; call
	aclose() on shutdown.
	"""

	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		config: Optional[Settings] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		config = config or default_settings
		self.api_key = api_key or config.openai_api_key
		if not self.api_key:
			raise ValueError("OPENAI_API_KEY is not configured")
		self.model = model or config.openai_model
		self.base_url = base_url or config.openai_base_url
		self.temperature = config.llm_temperature
		self._client = httpx.AsyncClient(timeout=config.llm_timeout_seconds, transport=transport)
		self._fallback_client: Optional[httpx.AsyncClient] = None
		self._openrouter_api_key = config.openrouter_api_key
		self._fallback_enabled = bool(self._openrouter_api_key)
		self._openrouter_model = config.openrouter_model
		self._openrouter_base_url = config.openrouter_base_url
		self._openrouter_headers = {
			"Authorization": f"Bearer {self._openrouter_api_key}" if self._openrouter_api_key else "",
			"Content-Type": "application/json",
			"HTTP-Referer": config.openrouter_referer,
			"X-Title": config.openrouter_title,
		}
		if self._fallback_enabled:
			self._fallback_client = httpx.AsyncClient(timeout=config.llm_timeout_seconds, transport=transport)

	async def generate(self, prompt: str, *, temperature: Optional[float] = None) -> str:
		messages = [{"role": "user", "content": prompt}]
		return await self._post_messages(messages, temperature=temperature)

	async def _post_messages(self, messages: List[Dict[str, Any]], *, temperature: Optional[float]) -> str:
		payload: Dict[str, Any] = {
			"model": self.model,
			"messages": messages,
			"temperature": self.temperature if temperature is None else temperature,
		}
		headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
		last_error: Optional[Exception] = None
		try:
			r = await self._client.post(self.base_url, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			last_error = http_err
		except httpx.RequestError as net_err:
			last_error = net_err
		if last_error is None:
			try:
				return _message_content(r.json())
			except (ValueError, KeyError, IndexError, TypeError):
				last_error = LLMError(f"Unexpected LLM response: {r.text}")
		logger.warning("primary LLM call failed: %s", last_error)
		if not self._fallback_enabled:
			raise LLMError(str(last_error)) from last_error
		return await self._fallback_generate(messages, last_error)

	async def aclose(self) -> None:
		await self._client.aclose()
		if self._fallback_client is not None:
			await self._fallback_client.aclose()

	async def _fallback_generate(self, messages: List[Dict[str, Any]], primary_error: Optional[Exception]) -> str:
		if not self._fallback_client or not self._openrouter_api_key:
			raise LLMError("Fallback requested but OpenRouter is not configured") from primary_error
		headers = {k: v for k, v in self._openrouter_headers.items() if v}
		payload: Dict[str, Any] = {
			"model": self._openrouter_model,
			"messages": messages,
		}
		try:
			r = await self._fallback_client.post(
				self._openrouter_base_url,
				headers=headers,
				json=payload,
			)
			r.raise_for_status()
			return _message_content(r.json())
		except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as fallback_err:
			raise LLMError(
				f"LLM primary call failed ({primary_error}); fallback via OpenRouter also failed"
			) from fallback_err


def _message_content(data: Dict[str, Any]) -> str:
	content = data["choices"][0]["message"]["content"]
	if not isinstance(content, str):
		raise TypeError("message content is not a string")
	return content
