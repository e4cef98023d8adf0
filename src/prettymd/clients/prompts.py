"""Prompt construction shared by the live model clients."""

from prettymd.models import Style

BASE_SYSTEM_PROMPT = """You are an expert Markdown formatter. Your task is to improve Markdown \
documents while preserving their meaning and structure.

Focus on:
- Fixing grammar and spelling errors
- Improving clarity and readability
- Ensuring consistent formatting
- Maintaining proper Markdown syntax
- Preserving code blocks and technical content exactly as-is

Important rules:
- Do not change the meaning or intent of the content
- Preserve all code blocks, commands, and technical specifications exactly
- Maintain the original document structure
- Keep the same heading hierarchy
- Return only the improved Markdown content without explanations"""

STYLE_MODIFIERS: dict[Style, str] = {
    Style.CONCISE: "Be concise and direct. Remove unnecessary words while maintaining clarity.",
    Style.FRIENDLY: "Use a friendly, approachable tone while maintaining professionalism.",
    Style.TECHNICAL: "Use precise technical language. Be thorough and accurate.",
    Style.DEFAULT: "Professional and clear technical documentation style.",
}


def build_system_prompt(style: str) -> str:
    return f"{BASE_SYSTEM_PROMPT}\n\nStyle: {STYLE_MODIFIERS[Style.parse(style)]}"


def build_user_prompt(content: str) -> str:
    return f"Please improve the following Markdown content:\n\n{content}"
