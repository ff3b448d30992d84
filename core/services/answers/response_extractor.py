"""Pull a JSON object out of free-form model output."""
import json
import re
from typing import Any

from core.services.errors.exceptions import MalformedResponseError, ModelRefusedError
from core.utils.logger import logger


class ResponseExtractor:
    """
    Turn raw completion text into a parsed JSON value.

    Parsing is a bounded two-attempt process: a strict parse of the extracted
    object, then one retry after a fixed set of syntactic repairs.
    """

    CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)
    CONTROL_CHARS = re.compile(r"[\x00-\x1f]+")
    OBJECT_SPAN = re.compile(r"\{.*\}", re.DOTALL)

    # Repairs, applied in order
    BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*:)")
    SINGLE_QUOTE_OPEN = re.compile(r"([{\[,:]\s*)'")
    SINGLE_QUOTE_CLOSE = re.compile(r"'(\s*[,}\]:])")
    TRAILING_COMMA = re.compile(r",\s*([}\]])")
    TEXT_VALUE = re.compile(
        r'("text"\s*:\s*")(.*?)("\s*(?:,\s*"[A-Za-z_][A-Za-z0-9_]*"\s*:|\}))',
        re.DOTALL,
    )
    UNESCAPED_QUOTE = re.compile(r'(?<!\\)"')

    def extract(self, raw_text: str) -> str:
        """
        Extract the JSON object text from a raw response.

        Args:
            raw_text: Completion content exactly as the model returned it

        Returns:
            The first-to-last brace span, fences and control characters removed

        Raises:
            ModelRefusedError: The response is prose rather than a JSON object
            MalformedResponseError: No object span could be found
        """
        unfenced = self.CODE_FENCE.sub("", raw_text.strip()).strip()
        if not unfenced.startswith("{"):
            raise ModelRefusedError(raw_text)

        flattened = self.CONTROL_CHARS.sub(" ", unfenced)
        match = self.OBJECT_SPAN.search(flattened)
        if not match:
            logger.error(f"No JSON object found in AI response: {raw_text}")
            raise MalformedResponseError()
        return match.group(0).strip()

    def parse(self, raw_text: str) -> Any:
        """Extract and parse the response, repairing it at most once."""
        candidate = self.extract(raw_text)
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            pass

        repaired = self.repair(candidate)
        try:
            return json.loads(repaired)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse AI response: {str(e)}\nResponse: {raw_text}")
            raise MalformedResponseError() from e

    def repair(self, candidate: str) -> str:
        """Apply the fixed set of syntactic repairs to an object span."""
        fixed = self.BARE_KEY.sub(r'\1"\2"\3', candidate)
        fixed = self.SINGLE_QUOTE_OPEN.sub(r'\1"', fixed)
        fixed = self.SINGLE_QUOTE_CLOSE.sub(r'"\1', fixed)
        fixed = self.TRAILING_COMMA.sub(r"\1", fixed)
        return self.TEXT_VALUE.sub(self._escape_text_value, fixed, count=1)

    def _escape_text_value(self, match: "re.Match[str]") -> str:
        body = self.UNESCAPED_QUOTE.sub(r'\\"', match.group(2))
        return f"{match.group(1)}{body}{match.group(3)}"
