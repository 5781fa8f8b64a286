from __future__ import annotations

from typing import List, Union


SCENARIO_RESPONSE = (
    "happy | adjective\n"
    "uk /ˈhæpi/ us /ˈhæpi/\n"
    "Definition: feeling pleasure.\n"
    "- I am happy.\n"
    "\n\n"
    "joyful | adjective\n"
    "Definition: full of joy.\n"
    "- She felt joyful."
)


class FakeClient:
    """Completion client that replays canned responses or errors."""

    def __init__(self, *responses: Union[str, Exception]) -> None:
        self.responses: List[Union[str, Exception]] = list(responses)
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
