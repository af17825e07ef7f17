"""Google Gemini provider adapter package."""

from .client import GeminiProvider, format_gemini_tools

__all__ = ["GeminiProvider", "format_gemini_tools"]
