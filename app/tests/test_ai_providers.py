import json

import httpx
import pytest

from app.core.enums import AIProvider, ChatRole
from app.core.errors import ExternalServiceError
from app.schemas.chat import ChatMessage, ChatRequest
from app.services import ai_providers
from app.services import demo_chat
from app.services.advisor import FIRST_TURN, build_chat_prompt, chat
from app.services.ai_providers import (
    PROVIDER_CALLERS,
    ProviderConfig,
    generate_ai_response,
    get_provider_config,
)


def use_transport(monkeypatch, handler):
    """Route vendor calls through an in-process handler."""
    monkeypatch.setattr(
        ai_providers, "_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestProviderSelection:

    def test_nothing_configured_is_demo(self):
        config = get_provider_config()
        assert config.provider == AIProvider.DEMO
        assert config.fallback_provider is None

    def test_single_key(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "real-key")
        config = get_provider_config()
        assert config.provider == AIProvider.GEMINI
        assert config.fallback_provider == AIProvider.DEMO

    def test_priority_order(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GROQ_API_KEY", "g")
        monkeypatch.setattr(ai_providers.settings, "OPENAI_API_KEY", "o")
        assert get_provider_config().provider == AIProvider.OPENAI

    @pytest.mark.parametrize("placeholder", [
        "", "   ", "placeholder-key", "your_gemini_api_key_here",
    ])
    def test_placeholder_keys_do_not_count(self, monkeypatch, placeholder):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", placeholder)
        assert get_provider_config().provider == AIProvider.DEMO

    def test_explicit_provider_wins_when_configured(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k1")
        monkeypatch.setattr(ai_providers.settings, "GROQ_API_KEY", "k2")
        monkeypatch.setattr(ai_providers.settings, "AI_PROVIDER", "groq")
        assert get_provider_config().provider == AIProvider.GROQ

    def test_explicit_provider_without_key_is_skipped(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "HUGGINGFACE_API_KEY", "k")
        monkeypatch.setattr(ai_providers.settings, "AI_PROVIDER", "openai")
        assert get_provider_config().provider == AIProvider.HUGGINGFACE

    def test_demo_can_be_forced(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k")
        monkeypatch.setattr(ai_providers.settings, "AI_PROVIDER", "demo")
        config = get_provider_config()
        assert config.provider == AIProvider.DEMO
        assert config.fallback_provider is None

    def test_unknown_provider_name_is_ignored(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GROQ_API_KEY", "k")
        monkeypatch.setattr(ai_providers.settings, "AI_PROVIDER", "mistral")
        assert get_provider_config().provider == AIProvider.GROQ

    def test_designated_fallback(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k1")
        monkeypatch.setattr(ai_providers.settings, "GROQ_API_KEY", "k2")
        monkeypatch.setattr(ai_providers.settings, "AI_FALLBACK_PROVIDER", "groq")
        config = get_provider_config()
        assert config.provider == AIProvider.GEMINI
        assert config.fallback_provider == AIProvider.GROQ

    def test_unconfigured_fallback_becomes_demo(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k1")
        monkeypatch.setattr(ai_providers.settings, "AI_FALLBACK_PROVIDER", "openai")
        assert get_provider_config().fallback_provider == AIProvider.DEMO


class TestFallbackChain:

    @pytest.mark.asyncio
    async def test_primary_success(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k")

        async def ok(prompt):
            return "  Bienvenue au Sénégal !  "

        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.GEMINI, ok)
        result = await generate_ai_response("prompt")

        assert result.text == "Bienvenue au Sénégal !"
        assert result.provider == AIProvider.GEMINI
        assert result.is_demo is False
        assert result.error is None

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_demo(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k")

        async def boom(prompt):
            raise httpx.ConnectError("unreachable")

        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.GEMINI, boom)
        result = await generate_ai_response("prompt", message="bonjour")

        assert result.provider == AIProvider.DEMO
        assert result.is_demo is True
        assert result.text == demo_chat.GREETING
        assert result.error == "gemini unavailable"

    @pytest.mark.asyncio
    async def test_empty_answer_counts_as_failure(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "OPENAI_API_KEY", "k")

        async def blank(prompt):
            return "   "

        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.OPENAI, blank)
        result = await generate_ai_response("prompt")

        assert result.is_demo is True
        assert result.error == "openai unavailable"

    @pytest.mark.asyncio
    async def test_designated_fallback_answers(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k1")
        monkeypatch.setattr(ai_providers.settings, "GROQ_API_KEY", "k2")
        monkeypatch.setattr(ai_providers.settings, "AI_FALLBACK_PROVIDER", "groq")

        async def boom(prompt):
            raise RuntimeError("quota")

        async def ok(prompt):
            return "Réponse Groq"

        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.GEMINI, boom)
        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.GROQ, ok)
        result = await generate_ai_response("prompt")

        assert result.provider == AIProvider.GROQ
        assert result.text == "Réponse Groq"
        assert result.is_demo is False
        assert result.error == "gemini unavailable"

    @pytest.mark.asyncio
    async def test_every_vendor_failing_still_answers(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "k1")
        monkeypatch.setattr(ai_providers.settings, "GROQ_API_KEY", "k2")
        monkeypatch.setattr(ai_providers.settings, "AI_FALLBACK_PROVIDER", "groq")

        async def boom(prompt):
            raise RuntimeError("down")

        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.GEMINI, boom)
        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.GROQ, boom)
        result = await generate_ai_response("prompt", message="Quel budget prévoir ?", history=[{"role": "user"}])

        assert result.provider == AIProvider.DEMO
        assert result.text == demo_chat.BUDGET
        assert result.error is not None

    @pytest.mark.asyncio
    async def test_missing_key_never_reaches_vendor(self, monkeypatch):
        called = []

        async def spy(prompt):
            called.append(prompt)
            return "should not happen"

        monkeypatch.setitem(PROVIDER_CALLERS, AIProvider.OPENAI, spy)
        config = ProviderConfig(provider=AIProvider.OPENAI, fallback_provider=AIProvider.DEMO)
        result = await generate_ai_response("prompt", config=config)

        assert called == []
        assert result.is_demo is True


class TestVendorCalls:

    @pytest.mark.asyncio
    async def test_gemini_payload_and_parsing(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "GEMINI_API_KEY", "gem-key")
        seen = {}

        def handler(request):
            seen["key"] = request.url.params["key"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "candidates": [{"content": {"parts": [{"text": "Salut "}, {"text": "voyageur"}]}}]
            })

        use_transport(monkeypatch, handler)
        text = await ai_providers.call_gemini("Bonjour")

        assert text == "Salut voyageur"
        assert seen["key"] == "gem-key"
        assert seen["body"]["contents"][0]["parts"][0]["text"] == "Bonjour"

    @pytest.mark.asyncio
    async def test_gemini_without_candidates(self, monkeypatch):
        use_transport(monkeypatch, lambda request: httpx.Response(200, json={"candidates": []}))
        with pytest.raises(ExternalServiceError):
            await ai_providers.call_gemini("Bonjour")

    @pytest.mark.asyncio
    async def test_openai_chat_completion(self, monkeypatch):
        monkeypatch.setattr(ai_providers.settings, "OPENAI_API_KEY", "sk-test")
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["authorization"]
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"choices": [{"message": {"content": "Dakar vous attend"}}]})

        use_transport(monkeypatch, handler)
        text = await ai_providers.call_openai("Bonjour")

        assert text == "Dakar vous attend"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["url"] == ai_providers.OPENAI_URL

    @pytest.mark.asyncio
    async def test_huggingface_error_payload(self, monkeypatch):
        use_transport(monkeypatch, lambda request: httpx.Response(200, json={"error": "Model is loading"}))
        with pytest.raises(ExternalServiceError):
            await ai_providers.call_huggingface("Bonjour")

    @pytest.mark.asyncio
    async def test_http_error_is_raised(self, monkeypatch):
        use_transport(monkeypatch, lambda request: httpx.Response(500, json={}))
        with pytest.raises(httpx.HTTPStatusError):
            await ai_providers.call_groq("Bonjour")


class TestDemoResponder:

    def test_first_message_gets_greeting(self):
        assert demo_chat.get_demo_response("Je veux voir la plage", []) == demo_chat.GREETING

    @pytest.mark.parametrize("message,expected", [
        ("Salut !", "GREETING"),
        ("Mon budget est de 1000 euros", "BUDGET"),
        ("Environ deux semaines", "DURATION"),
        ("J'aime la culture et l'histoire", "INTERESTS"),
        ("GO pour le programme", "CONFIRMATION"),
        ("C'est parfait", "CONFIRMATION"),
        ("Que faire à Dakar ?", "DAKAR"),
        ("Et Saint Louis ?", "SAINT_LOUIS"),
        ("La Casamance me tente", "CASAMANCE"),
        ("Je ne sais pas", "DEFAULT"),
    ])
    def test_keyword_rules(self, message, expected):
        history = [{"role": "user", "content": "Bonjour"}]
        assert demo_chat.get_demo_response(message, history) == getattr(demo_chat, expected)

    def test_go_matches_whole_word_only(self):
        history = [{"role": "user", "content": "Bonjour"}]
        assert demo_chat.get_demo_response("Une escale à Gorée", history) == demo_chat.DEFAULT


class TestAdvisorPrompt:

    def test_first_turn(self):
        prompt = build_chat_prompt("Bonjour", [])
        assert FIRST_TURN in prompt
        assert '"Bonjour"' in prompt
        assert "DONNÉES DISTANCES RÉELLES" not in prompt

    def test_history_and_distance_context(self):
        history = [
            ChatMessage(role=ChatRole.USER, content="Je pars une semaine"),
            ChatMessage(role=ChatRole.ASSISTANT, content="Super, où voulez-vous aller ?"),
        ]
        prompt = build_chat_prompt("Dakar puis Saint-Louis", history)

        assert "CONTEXTE DE LA CONVERSATION PRÉCÉDENTE" in prompt
        assert "Voyageur: Je pars une semaine" in prompt
        assert "Conseiller: Super, où voulez-vous aller ?" in prompt
        assert "Dakar ↔ Saint-Louis: 270km" in prompt
        assert FIRST_TURN not in prompt

    @pytest.mark.asyncio
    async def test_chat_in_demo_mode(self):
        response = await chat(ChatRequest(message="Bonjour"))

        assert response.is_demo is True
        assert response.provider == AIProvider.DEMO
        assert response.response == demo_chat.GREETING
        assert response.error is None
        assert len(response.conversation_id) == 36
