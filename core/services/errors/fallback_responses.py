"""User-facing messages for every error kind."""


class FallbackResponses:
    """Predefined display messages for common error scenarios."""

    RESPONSES = {
        "malformed_response": (
            "The AI provided an invalid response format. Please try again."
        ),
        "invalid_schema": (
            "Could not process the response. Please try rephrasing your question."
        ),
        "incomplete_answer": (
            "Could not generate a complete answer. Please try rephrasing your question."
        ),
        "no_response": (
            "No response received. Please try your question again."
        ),
        "completion_failed": (
            "Something went wrong. Please try asking your question again."
        ),
        "empty_question": (
            "Please type a question first."
        ),
        "invalid_reference_format": (
            "Invalid verse reference format.\n"
            "Please use one of these formats:\n"
            "- Single verse: \"John 3:16\"\n"
            "- Verse range: \"Romans 8:28-29\"\n"
            "- Multiple verses: \"Psalm 23:1-6\""
        ),
        "verse_fetch_failed": (
            "Failed to fetch verse"
        ),
        "verse_not_found": (
            "Verse content not found"
        ),
        "verse_lookup_failed": (
            "Failed to load the verse"
        ),
    }

    DEFAULT_RESPONSE = "Something went wrong. Please try again."

    @classmethod
    def get_response(cls, error_type: str) -> str:
        """
        Get the display message for an error type.

        Args:
            error_type: Error kind (malformed_response, verse_not_found, etc.)

        Returns:
            Message shown to the user
        """
        return cls.RESPONSES.get(error_type, cls.DEFAULT_RESPONSE)
