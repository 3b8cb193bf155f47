"""LLM provider selection with a one-hop fallback that always ends in the demo responder"""
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional

import httpx

from app.core.config import settings, is_configured
from app.core.enums import AIProvider
from app.core.errors import ExternalServiceError
from app.core.metrics import ai_responses, ai_response_duration
from app.services.demo_chat import get_demo_response

logger = logging.getLogger(__name__)

PROVIDER_PRIORITY = [AIProvider.GEMINI, AIProvider.HUGGINGFACE, AIProvider.OPENAI, AIProvider.GROQ]

API_KEY_SETTINGS = {
    AIProvider.GEMINI: "GEMINI_API_KEY",
    AIProvider.HUGGINGFACE: "HUGGINGFACE_API_KEY",
    AIProvider.OPENAI: "OPENAI_API_KEY",
    AIProvider.GROQ: "GROQ_API_KEY",
}

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
HUGGINGFACE_URL = "https://api-inference.huggingface.co/models/{model}"
OPENAI_URL = "https://api.openai.com/v1/chat/completions"
GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"


@dataclass
class ProviderConfig:
    provider: AIProvider
    fallback_provider: Optional[AIProvider] = None


@dataclass
class AIResponse:
    text: str
    provider: AIProvider
    is_demo: bool
    error: Optional[str] = None


def _api_key(provider: AIProvider) -> Optional[str]:
    return getattr(settings, API_KEY_SETTINGS[provider])


def provider_configured(provider: AIProvider) -> bool:
    if provider == AIProvider.DEMO:
        return True
    return is_configured(_api_key(provider))


def _parse_provider(value: Optional[str], setting: str) -> Optional[AIProvider]:
    if not value:
        return None
    try:
        return AIProvider(value.strip().lower())
    except ValueError:
        logger.warning(f"Ignoring unknown {setting}={value!r}")
        return None


def get_provider_config() -> ProviderConfig:
    configured = [p for p in PROVIDER_PRIORITY if provider_configured(p)]
    preferred = _parse_provider(settings.AI_PROVIDER, "AI_PROVIDER")

    if preferred == AIProvider.DEMO or (not configured and preferred is None):
        return ProviderConfig(provider=AIProvider.DEMO)

    primary = configured[0] if configured else AIProvider.DEMO
    if preferred is not None and provider_configured(preferred):
        primary = preferred
    if primary == AIProvider.DEMO:
        return ProviderConfig(provider=AIProvider.DEMO)

    fallback = AIProvider.DEMO
    designated = _parse_provider(settings.AI_FALLBACK_PROVIDER, "AI_FALLBACK_PROVIDER")
    if designated is not None and designated != primary and provider_configured(designated):
        fallback = designated

    return ProviderConfig(provider=primary, fallback_provider=fallback)


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.AI_TIMEOUT)


async def call_gemini(prompt: str) -> str:
    url = GEMINI_URL.format(model=settings.GEMINI_MODEL)
    body = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": settings.AI_TEMPERATURE,
            "maxOutputTokens": settings.AI_MAX_TOKENS,
        },
    }
    async with _client() as client:
        response = await client.post(url, params={"key": settings.GEMINI_API_KEY}, json=body)
        response.raise_for_status()
        data = response.json()

    candidates = data.get("candidates") or []
    if not candidates:
        raise ExternalServiceError("gemini", "no candidates returned")
    parts = candidates[0].get("content", {}).get("parts", [])
    return "".join(part.get("text", "") for part in parts)


async def call_huggingface(prompt: str) -> str:
    url = HUGGINGFACE_URL.format(model=settings.HUGGINGFACE_MODEL)
    body = {
        "inputs": prompt,
        "parameters": {
            "max_new_tokens": settings.AI_MAX_TOKENS,
            "temperature": settings.AI_TEMPERATURE,
            "top_p": 0.9,
            "return_full_text": False,
        },
    }
    headers = {"Authorization": f"Bearer {settings.HUGGINGFACE_API_KEY}"}
    async with _client() as client:
        response = await client.post(url, json=body, headers=headers)
        response.raise_for_status()
        data = response.json()

    result = data[0] if isinstance(data, list) and data else data
    if isinstance(result, dict) and result.get("error"):
        raise ExternalServiceError("huggingface", str(result["error"]))
    return result.get("generated_text", "") if isinstance(result, dict) else ""


async def _chat_completion(url: str, api_key: str, model: str, prompt: str) -> str:
    body = {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "max_tokens": settings.AI_MAX_TOKENS,
        "temperature": settings.AI_TEMPERATURE,
    }
    headers = {"Authorization": f"Bearer {api_key}"}
    async with _client() as client:
        response = await client.post(url, json=body, headers=headers)
        response.raise_for_status()
        data = response.json()

    choices = data.get("choices") or []
    if not choices:
        return ""
    return choices[0].get("message", {}).get("content") or ""


async def call_openai(prompt: str) -> str:
    return await _chat_completion(OPENAI_URL, settings.OPENAI_API_KEY, settings.OPENAI_MODEL, prompt)


async def call_groq(prompt: str) -> str:
    return await _chat_completion(GROQ_URL, settings.GROQ_API_KEY, settings.GROQ_MODEL, prompt)


PROVIDER_CALLERS: Dict[AIProvider, Callable[[str], Awaitable[str]]] = {
    AIProvider.GEMINI: call_gemini,
    AIProvider.HUGGINGFACE: call_huggingface,
    AIProvider.OPENAI: call_openai,
    AIProvider.GROQ: call_groq,
}


def _demo(message: str, history: List[dict]) -> AIResponse:
    ai_responses.labels(provider=AIProvider.DEMO.value, status="success").inc()
    return AIResponse(text=get_demo_response(message, history), provider=AIProvider.DEMO, is_demo=True)


async def _generate(
    prompt: str,
    provider: AIProvider,
    fallback: Optional[AIProvider],
    message: str,
    history: List[dict],
) -> AIResponse:
    if provider == AIProvider.DEMO:
        return _demo(message, history)

    start = time.perf_counter()
    try:
        if not provider_configured(provider):
            raise ExternalServiceError(provider.value, "API key not configured")
        text = await PROVIDER_CALLERS[provider](prompt)
        if not text or not text.strip():
            raise ExternalServiceError(provider.value, "empty response")
    except Exception as e:
        ai_response_duration.labels(provider=provider.value).observe(time.perf_counter() - start)
        ai_responses.labels(provider=provider.value, status="error").inc()
        next_provider = fallback if fallback is not None and fallback != provider else AIProvider.DEMO
        logger.warning(f"AI provider {provider} failed ({e}), falling back to {next_provider}")
        result = await _generate(prompt, next_provider, AIProvider.DEMO, message, history)
        if result.error is None:
            result.error = f"{provider.value} unavailable"
        return result

    ai_response_duration.labels(provider=provider.value).observe(time.perf_counter() - start)
    ai_responses.labels(provider=provider.value, status="success").inc()
    return AIResponse(text=text.strip(), provider=provider, is_demo=False)


async def generate_ai_response(
    prompt: str,
    config: Optional[ProviderConfig] = None,
    message: Optional[str] = None,
    history: Optional[List[dict]] = None,
) -> AIResponse:
    """Ask the configured provider; any failure drops to the fallback, then to demo.

    The demo responder matches keywords on `message` (defaults to the prompt).
    """
    config = config or get_provider_config()
    logger.info(f"Generating AI response with {config.provider} (fallback: {config.fallback_provider})")
    return await _generate(
        prompt,
        config.provider,
        config.fallback_provider,
        message if message is not None else prompt,
        history or [],
    )
