"""Stand-in for the Gemini client."""

from __future__ import annotations

from typing import List


class StubLLM:
    def __init__(self, readme: str = "# Widget") -> None:
        self.readme = readme
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.readme
