"""Offline generation client.

Returns a fixed reply with an empty conflicts array. Useful for local
development without credentials and as a template for new provider adapters.
"""

import json
from typing import ClassVar

from app.llm.client_base import BaseGenerationClient


class ExampleClientAdapter(BaseGenerationClient):
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {"conflicts": []}

    def generate(self, *, model: str, prompt: str, temperature: float = 0.0) -> str:
        _ = model, prompt, temperature
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE) + "\n```"
