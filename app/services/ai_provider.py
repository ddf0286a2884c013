"""
Model id -> chat provider routing.

Public helpers for request code that lives outside this package: callers
pick a target with `get_model` and pass `target.options(...)` along with
`target.model` to the client.
"""

import importlib
from dataclasses import dataclass
from typing import Any, Dict, Optional

from openai import OpenAI

from app.services.request_options import build_generation_options


@dataclass(frozen=True)
class ChatTarget:
    client: OpenAI
    model: str

    def options(self, temperature: Optional[float] = None, max_output_tokens: Optional[int] = None) -> Dict[str, Any]:
        return build_generation_options(self.model, temperature=temperature, max_output_tokens=max_output_tokens)


def get_model(model_id: str) -> ChatTarget:
    """Pick the chat provider that serves `model_id`.

    gpt-* goes to OpenAI, everything else to xAI except claude-*, which has no
    provider here. Provider modules are imported here so only the credential
    for the chosen route is required.
    """
    model_id = (model_id or "").strip()
    if not model_id:
        raise ValueError("model_id is required")
    if model_id.startswith("claude-"):
        raise ValueError(f"no provider configured for claude models: {model_id}")
    if model_id.startswith("gpt-"):
        gpt = importlib.import_module("app.clients.gpt")
        return ChatTarget(client=gpt.openai_client, model=model_id)
    grok = importlib.import_module("app.clients.grok")
    return ChatTarget(client=grok.xai, model=model_id)
