"""Catalog data models."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class DisplayModel:
    """A selectable model as shown to users.

    Only the performance field changes after the catalog is loaded.
    """
    id: str
    label: str
    is_available: bool = True
    tokens_per_second: Optional[float] = None
    rank: Optional[int] = None

    @property
    def provider(self) -> str:
        return self.id.split('/')[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "isAvailable": self.is_available,
            "tokensPerSecond": self.tokens_per_second,
            "rank": self.rank,
        }


STATIC_CATALOG: List[tuple] = [
    ("xai/grok-3-beta", "Grok 3 Beta"),
    ("xai/grok-3-fast-beta", "Grok 3 Fast Beta"),
    ("anthropic/claude-3-7-sonnet", "Claude 3.7 Sonnet"),
    ("groq/llama-3.1-70b-versatile", "Llama 3.1 70B"),
    ("google/gemini-2.0-flash-002", "Gemini 2.0 Flash"),
    ("google/gemini-2.0-pro-002", "Gemini 2.0 Pro"),
    ("openai/gpt-4o", "GPT-4o"),
    ("openai/gpt-4o-mini", "GPT-4o Mini"),
    ("mistral/mistral-large-2", "Mistral Large 2"),
    ("mistral/mistral-small", "Mistral Small"),
]
