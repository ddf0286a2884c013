"""Per-model request option normalization, used through `ChatTarget.options`."""

from typing import Any, Dict, Optional


def build_generation_options(
    model_id: str,
    temperature: Optional[float] = None,
    max_output_tokens: Optional[int] = None,
) -> Dict[str, Any]:
    """Drop sampling controls a model family rejects."""
    options: Dict[str, Any] = {}
    if max_output_tokens is not None:
        options["max_output_tokens"] = max_output_tokens
    # GPT-5 family only accepts the provider default temperature.
    if temperature is not None and not model_id.startswith("gpt-5"):
        options["temperature"] = temperature
    return options
