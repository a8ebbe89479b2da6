"""LLMService: the configured handle to the Gemini model.

Wraps ``ChatGoogleGenerativeAI`` behind a single ``generate(contents)`` call:
- a plain string is sent as one text part;
- a list mixes text parts (``str``) and inline attachments
  (:class:`~gemini_relay.schemas.InlineContent`) in order.

Any failure from the SDK surfaces as ``ModelClientError``. The app factory
receives an instance explicitly, so tests can pass any object with the same
``generate`` method.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from gemini_relay.config import Config
from gemini_relay.errors import ModelClientError
from gemini_relay.schemas import InlineContent

ModelInput = Union[str, Sequence[Union[str, InlineContent]]]


def _to_parts(contents: ModelInput) -> List[Dict[str, Any]]:
    if isinstance(contents, str):
        return [{"type": "text", "text": contents}]
    parts: List[Dict[str, Any]] = []
    for item in contents:
        if isinstance(item, InlineContent):
            parts.append({"type": "media", "data": item.data, "mime_type": item.mime_type})
        else:
            parts.append({"type": "text", "text": str(item)})
    return parts


def _response_text(resp: Any) -> str:
    content = resp.content if hasattr(resp, "content") else resp
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks = []
        for part in content:
            if isinstance(part, str):
                chunks.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                chunks.append(part.get("text") or "")
        return "".join(chunks)
    raise ModelClientError("Model response did not contain text.")


class LLMService:
    def __init__(self, cfg: Config = Config):
        self.cfg = cfg
        self.model_name = getattr(cfg, "LLM_MODEL", "gemini-2.5-flash")
        kwargs: Dict[str, Any] = {"model": self.model_name}
        api_key = getattr(cfg, "GEMINI_API_KEY", None)
        if api_key:
            kwargs["google_api_key"] = api_key
        temperature = getattr(cfg, "LLM_TEMPERATURE", None)
        if temperature is not None:
            kwargs["temperature"] = temperature
        self.llm = ChatGoogleGenerativeAI(**kwargs)

    def generate(self, contents: ModelInput) -> str:
        message = HumanMessage(content=_to_parts(contents))
        try:
            resp = self.llm.invoke([message])
        except Exception as e:
            raise ModelClientError(str(e)) from e
        return _response_text(resp)
