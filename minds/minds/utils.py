from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import urlparse, urlunparse


DEFAULT_PROMPT_TEMPLATE = "{{input}}"


def merge_parameters(
    parameters: Optional[Mapping[str, Any]],
    prompt_template: Optional[str] = None,
    *,
    default_template: Optional[str] = None,
) -> dict[str, Any]:
    """Fold a prompt template into a copy of the free-form parameters mapping.

    An explicit ``prompt_template`` always wins. ``default_template`` only
    fills the key when neither the template nor the mapping provides one.
    """
    merged = dict(parameters or {})
    if prompt_template is not None:
        merged["prompt_template"] = prompt_template
    elif default_template is not None:
        merged.setdefault("prompt_template", default_template)
    return merged


def llm_base_url(api_base_url: str) -> str:
    parsed = urlparse(api_base_url)
    if parsed.netloc == "mdb.ai":
        host = "llm.mdb.ai"
    else:
        host = f"ai.{parsed.netloc}"
    return urlunparse((parsed.scheme, host, "", "", "", ""))


def coerce_text(content: Any) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            text_val = getattr(item, "text", None)
            if text_val is None and isinstance(item, dict):
                text_val = item.get("text")
            if isinstance(text_val, str):
                parts.append(text_val)
            elif isinstance(item, str):
                parts.append(item)
        return "".join(parts)
    return str(content)
