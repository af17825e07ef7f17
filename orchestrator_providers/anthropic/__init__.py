"""Anthropic Claude provider adapter package."""

from .client import ClaudeProvider, format_claude_tools

__all__ = ["ClaudeProvider", "format_claude_tools"]
