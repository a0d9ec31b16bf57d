"""
Tests de la chaîne de résolution des réponses
"""
import asyncio

import pytest

from core.completion import NO_ANSWER_FALLBACK
from core.faq_store import FAQEntry
from core.resolvers import (
    ExactMatchResolver,
    FuzzyMatchResolver,
    ResolverChain,
    build_resolver_chain,
    keyword_score,
)
from conftest import FakeCompletionClient


FAQS = (
    FAQEntry("What services do you offer?", "Websites and apps."),
    FAQEntry("What are your business hours?", "Monday to Friday, 9am to 6pm."),
    FAQEntry("How much does a website cost?", "From $500."),
    FAQEntry("what services do you offer?", "Duplicate, never returned."),
)


def run(coro):
    return asyncio.run(coro)


def test_exact_match_ignores_case_and_whitespace():
    resolver = ExactMatchResolver(FAQS)
    assert run(resolver.resolve("  WHAT ARE YOUR BUSINESS HOURS?  ")) == "Monday to Friday, 9am to 6pm."


def test_exact_match_first_entry_wins():
    resolver = ExactMatchResolver(FAQS)
    assert run(resolver.resolve("what services do you offer?")) == "Websites and apps."


def test_exact_match_miss():
    resolver = ExactMatchResolver(FAQS)
    assert run(resolver.resolve("What are your business hours")) is None


def test_fuzzy_match_tolerates_typos():
    resolver = FuzzyMatchResolver(FAQS)
    assert run(resolver.resolve("what are you busines hours")) == "Monday to Friday, 9am to 6pm."


def test_fuzzy_match_picks_best_candidate():
    resolver = FuzzyMatchResolver(FAQS)
    assert run(resolver.resolve("how much does a web site cost")) == "From $500."


def test_fuzzy_match_rejects_unrelated_input():
    resolver = FuzzyMatchResolver(FAQS)
    assert run(resolver.resolve("zzzz qqqq")) is None
    assert run(resolver.resolve("")) is None


def test_fuzzy_threshold_zero_requires_identical_question():
    resolver = FuzzyMatchResolver(FAQS, threshold=0.0)
    assert resolver.score_cutoff == 100
    assert run(resolver.resolve("what are you busines hours")) is None
    assert run(resolver.resolve("What are your business hours")) == "Monday to Friday, 9am to 6pm."


def test_fuzzy_threshold_out_of_range():
    with pytest.raises(ValueError):
        FuzzyMatchResolver(FAQS, threshold=1.5)


def test_chain_exact_match_skips_fallback():
    fallback = FakeCompletionClient()
    chain = build_resolver_chain(FAQS, fallback)

    assert run(chain.resolve("how much does a website cost?")) == "From $500."
    assert fallback.calls == []


def test_chain_fuzzy_match_skips_fallback():
    fallback = FakeCompletionClient()
    chain = build_resolver_chain(FAQS, fallback)

    assert run(chain.resolve("What are your business hours")) == "Monday to Friday, 9am to 6pm."
    assert fallback.calls == []


def test_chain_falls_back_once_with_raw_message():
    fallback = FakeCompletionClient(answer="Generated answer")
    chain = build_resolver_chain(FAQS, fallback)

    assert run(chain.resolve("  zzzz qqqq ")) == "Generated answer"
    assert fallback.calls == ["  zzzz qqqq "]


def test_chain_without_fallback_returns_default():
    chain = build_resolver_chain(FAQS, None)
    assert run(chain.resolve("zzzz qqqq")) == NO_ANSWER_FALLBACK


def test_empty_chain():
    assert run(ResolverChain([]).resolve("anything")) == NO_ANSWER_FALLBACK


def test_fuzzy_match_finds_keyword_inside_question():
    resolver = FuzzyMatchResolver(FAQS)
    assert run(resolver.resolve("services")) == "Websites and apps."
    assert run(resolver.resolve("Business Hours")) == "Monday to Friday, 9am to 6pm."


def test_keyword_score_takes_best_of_full_and_partial():
    assert keyword_score("services", "what services do you offer") == 100
    assert keyword_score("what services do you offer", "what services do you offer") == 100
    assert keyword_score("zzzz", "what services do you offer") < 60
