"""Validate parsed model output against the answer shape, repairing where possible."""
from typing import Any, Dict, List, Optional

from core.models.answer import Answer, Reference, ReferenceKind
from core.services.errors.exceptions import IncompleteAnswerError, InvalidSchemaError
from core.services.utils.url_utils import is_valid_url
from core.utils.logger import logger


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _reference_kind(raw: Dict[str, Any]) -> Any:
    # The prompt asks for "type"; accept "kind" as well
    return raw.get("type", raw.get("kind"))


class SchemaValidator:
    """
    Two-tier validation of a parsed response.

    A fully valid payload is decoded as-is. When only individual references
    are bad, those references are dropped and the answer is kept. Anything
    worse is an error.
    """

    def collect_issues(self, payload: Any) -> List[str]:
        """
        Enumerate every schema violation in a parsed response.

        Args:
            payload: Value produced by the response extractor

        Returns:
            Human-readable issues; empty when the payload is valid
        """
        if not isinstance(payload, dict):
            return ["Response must be an object"]

        issues = []
        if not _is_non_empty_string(payload.get("text")):
            issues.append("Missing or invalid text field")

        references = payload.get("references")
        if not isinstance(references, list):
            issues.append("Missing or invalid references array")
            return issues

        for index, raw in enumerate(references):
            issues.extend(self._reference_issues(raw, index))
        return issues

    def _reference_issues(self, raw: Any, index: int) -> List[str]:
        if not isinstance(raw, dict):
            return [f"Invalid reference object at index {index}"]

        issues = []
        kind = _reference_kind(raw)
        if kind not in ReferenceKind.values():
            issues.append(f"Invalid reference type at index {index}: {kind}")
        if not _is_non_empty_string(raw.get("title")):
            issues.append(f"Missing title at index {index}")
        if not is_valid_url(raw.get("link")):
            issues.append(f"Missing link at index {index}")
        if "description" in raw and not _is_non_empty_string(raw.get("description")):
            issues.append(f"Invalid description at index {index}")
        return issues

    def validate(self, payload: Any) -> Answer:
        """
        Decode a parsed response into a candidate answer.

        Args:
            payload: Value produced by the response extractor

        Returns:
            Answer whose references still need resolving

        Raises:
            InvalidSchemaError: Top-level shape is wrong
            IncompleteAnswerError: Text is empty or no reference survives repair
        """
        issues = self.collect_issues(payload)
        if not issues:
            if not payload["references"]:
                raise IncompleteAnswerError()
            return self._decode(payload["text"], payload["references"])

        if not isinstance(payload, dict) or not isinstance(payload.get("text"), str) \
                or not isinstance(payload.get("references"), list):
            logger.error(f"Invalid response schema: {issues}")
            raise InvalidSchemaError(issues)

        logger.warning(f"Repairing response with schema issues: {issues}")
        kept = [raw for raw in payload["references"] if self._is_salvageable(raw)]
        dropped = len(payload["references"]) - len(kept)
        if dropped:
            logger.warning(f"Dropped {dropped} invalid reference(s)")

        if not payload["text"].strip() or not kept:
            raise IncompleteAnswerError()

        logger.info("Fixed response validation issues")
        return self._decode(payload["text"], kept)

    @staticmethod
    def _is_salvageable(raw: Any) -> bool:
        """A reference survives repair if its kind, title and link type are usable."""
        return (
            isinstance(raw, dict)
            and _reference_kind(raw) in ReferenceKind.values()
            and _is_non_empty_string(raw.get("title"))
            and isinstance(raw.get("link"), str)
        )

    def _decode(self, text: str, references: List[Dict[str, Any]]) -> Answer:
        return Answer(
            text=text,
            references=[self._decode_reference(raw) for raw in references],
        )

    @staticmethod
    def _decode_reference(raw: Dict[str, Any]) -> Reference:
        description: Optional[str] = raw.get("description")
        if not _is_non_empty_string(description):
            description = None
        return Reference(
            kind=ReferenceKind(_reference_kind(raw)),
            title=raw["title"].strip(),
            link=raw["link"].strip(),
            description=description,
        )
