"""SupaLLM installer engine: fetch, questionnaire, env rewrite, launch."""

__version__ = "0.2.0"
