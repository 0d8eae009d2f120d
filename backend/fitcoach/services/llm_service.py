import json
import logging
import re
from typing import Dict, List, Optional, Any

# LangChain Imports
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage, SystemMessage, AIMessage, BaseMessage

from fitcoach.config import LLM_PROVIDER, LLM_API_KEY, LLM_MODEL as OVERRIDE_MODEL, OLLAMA_URL

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """The model produced no usable result."""


# LLM_MODEL, when set, wins over the provider default
DEFAULT_MODELS = {
    "ollama": "gpt-oss:120b-cloud",
    "openrouter": "google/gemini-2.0-flash-001",
    "openai": "gpt-4o",
}

MODEL_NAME = OVERRIDE_MODEL if OVERRIDE_MODEL else DEFAULT_MODELS.get(LLM_PROVIDER, "gpt-4o")

# None means the client library default
PROVIDER_URLS = {
    "openrouter": "https://openrouter.ai/api/v1",
    "openai": None,
}


def get_llm(temperature: float = 0.7, max_tokens: int = 2000, json_mode: bool = False):
    """
    Chat model for the configured provider. OpenRouter and OpenAI go
    through ChatOpenAI, anything else falls back to a local Ollama.
    """
    if LLM_PROVIDER in ["openrouter", "openai"]:
        if not LLM_API_KEY:
            logger.error(f"[LLM Service] Missing API key for provider {LLM_PROVIDER}")

        model_kwargs = {}
        if json_mode:
            model_kwargs["response_format"] = {"type": "json_object"}

        return ChatOpenAI(
            model=MODEL_NAME,
            api_key=LLM_API_KEY,
            base_url=PROVIDER_URLS.get(LLM_PROVIDER),
            temperature=temperature,
            max_tokens=max_tokens,
            model_kwargs=model_kwargs,
            timeout=60.0
        )

    if LLM_PROVIDER != "ollama":
        logger.warning(f"[LLM Service] Unknown provider '{LLM_PROVIDER}'. Defaulting to Ollama.")

    return ChatOllama(
        base_url=OLLAMA_URL,
        model=MODEL_NAME,
        temperature=temperature,
        num_predict=max_tokens,
        format="json" if json_mode else "",
        timeout=120.0
    )


def _log_usage(response) -> None:
    metadata = getattr(response, "response_metadata", None)
    if not metadata:
        return

    # Ollama reports counts at the top level, OpenAI-compatible providers under 'usage'
    input_tokens = metadata.get("prompt_eval_count") or 0
    output_tokens = metadata.get("eval_count") or 0
    if input_tokens == 0 and output_tokens == 0:
        usage = metadata.get("usage", {}) or {}
        input_tokens = usage.get("prompt_tokens") or usage.get("input_tokens") or 0
        output_tokens = usage.get("completion_tokens") or usage.get("output_tokens") or 0

    logger.debug(f"[LLM Stats] Input: {input_tokens}, Output: {output_tokens}, Total: {input_tokens + output_tokens}")


def call_llm_json(
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.1,
    max_tokens: int = 20000
) -> Optional[Dict[str, Any]]:
    """
    Executes a structured JSON request.
    Returns the parsed object, or None if the model produced nothing usable.
    """
    logger.info(f"[LLM Service] Calling Model (JSON): {MODEL_NAME}")

    try:
        llm = get_llm(temperature=temperature, max_tokens=max_tokens, json_mode=True)
        response = llm.invoke([
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt)
        ])
    except Exception as e:
        logger.error(f"[LLM Service] JSON Call Error: {e}")
        return None

    if not response.content:
        logger.warning("[LLM Service] Empty content received.")
        return None

    _log_usage(response)
    return _parse_json_from_text(response.content)


def call_llm(
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.7,
    max_tokens: int = 2000,
    history: Optional[List[Dict[str, str]]] = None
) -> Optional[str]:
    """
    Executes a standard chat request. `history` is a list of
    {"role": "user"|"assistant", "content": ...} turns placed before the prompt.
    """
    logger.info(f"[LLM Service] Calling Model (Text): {MODEL_NAME}")

    messages: List[BaseMessage] = [SystemMessage(content=system_prompt)]
    for turn in history or []:
        if turn.get("role") == "assistant":
            messages.append(AIMessage(content=turn["content"]))
        else:
            messages.append(HumanMessage(content=turn["content"]))
    messages.append(HumanMessage(content=user_prompt))

    try:
        response = get_llm(temperature=temperature, max_tokens=max_tokens).invoke(messages)
    except Exception as e:
        logger.error(f"[LLM Service] Text Call Error: {e}")
        return None

    if not response.content:
        logger.warning("[LLM Service] Empty content received.")
        return None

    _log_usage(response)
    return response.content.strip()


_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)

# Trailing commas before a closing bracket, and single-quoted keys
_REPAIRS = (
    (re.compile(r",\s*([}\]])"), r"\1"),
    (re.compile(r"(?<=[{,\[])\s*'([^']+)'\s*:"), r'"\1":'),
)


def _outer_object(text: str) -> str:
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1)
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end < start:
        return text.strip()
    return text[start:end + 1]


def _parse_json_from_text(text: str) -> Optional[Dict]:
    """
    Tolerant JSON extraction for model output: takes the fenced block (if
    any), trims to the outer braces and retries once after repairing
    trailing commas and single-quoted keys.
    """
    candidate = _outer_object(text)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning(f"[LLM Service] Initial JSON parse failed: {e}. Attempting repair...")

    for pattern, replacement in _REPAIRS:
        candidate = pattern.sub(replacement, candidate)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError:
        logger.error("[LLM Service] JSON repair failed.")
        return None
