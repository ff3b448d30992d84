"""Prompt builder for the answer pipeline - fills the system prompt template."""
from pathlib import Path
from typing import List

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from core.models.answer import ReferenceKind
from core.services.citations.verified_resources import (
    PROMPT_TEACHERS,
    VERIFIED_BOOKS,
    VERIFIED_SOURCES,
)
from core.utils.logger import logger


class PromptBuilder:
    """Simple prompt builder - renders the system instruction."""

    def __init__(self):
        """Initialize prompt builder with prompts directory."""
        self._prompts_dir = Path(__file__).parent / "templates"

    def _load_prompt(self, filename: str) -> str:
        """Load prompt text from .promptly file, extracting content after YAML frontmatter."""
        prompt_path = self._prompts_dir / filename
        try:
            content = prompt_path.read_text(encoding="utf-8")
            # Extract content after YAML frontmatter (after ---\n---\n)
            if "---\n" in content:
                parts = content.split("---\n", 2)
                if len(parts) >= 3:
                    return parts[2].strip()
            return content.strip()
        except Exception as e:
            logger.warning(f"Failed to load prompt {filename}: {str(e)}")
            return ""

    def build_system_prompt(self) -> str:
        """Build the system prompt with the curated books and sources listed in it."""
        template = self._load_prompt("system_prompt.promptly")
        return template.format(
            reference_kinds=" | ".join(f'"{kind}"' for kind in ReferenceKind.values()),
            verified_books="\n".join(f"- {title}" for title in VERIFIED_BOOKS),
            verified_sources="\n".join(f"- {source}" for source in VERIFIED_SOURCES),
            verified_teachers="\n".join(f"   - {name} ({url})" for name, url in PROMPT_TEACHERS),
        )

    def build_messages(self, question: str) -> List[BaseMessage]:
        """Build the (system, user) message pair; the question is the only variable input."""
        return [
            SystemMessage(content=self.build_system_prompt()),
            HumanMessage(content=question),
        ]
