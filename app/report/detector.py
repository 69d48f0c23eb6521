"""Conflict detection over extracted document text using a generation client."""

from app.extraction.models import ExtractedText
from app.llm.client_base import BaseGenerationClient
from app.logging.logger import Log
from app.report.models import ConflictReport
from app.report.parser import parse_report
from app.report.prompt import build_prompt
from app.report.validator import build_report


class ConflictDetector:
    """Builds the prompt, calls the model once, and parses its report."""

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        temperature: float = 0.0,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature

    def detect(self, documents: list[ExtractedText]) -> ConflictReport:
        prompt = build_prompt(documents)
        Log.debug(f"Conflict prompt:\n{prompt}")

        Log.info(f"Sending prompt for {len(documents)} documents to model {self._model}")
        raw_response = self._client.generate(
            model=self._model,
            prompt=prompt,
            temperature=self._temperature,
        )
        Log.info("Received response from model")
        Log.debug(f"Model raw response:\n{raw_response}")

        report = build_report(parse_report(raw_response), raw_response)
        Log.info(f"Parsed conflict report: {len(report.conflicts)} conflicts")
        return report
