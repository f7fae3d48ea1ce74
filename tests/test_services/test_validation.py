# tests/test_services/test_validation.py
import pytest

from tonewise.domain.exceptions import InvalidInput
from tonewise.services.validation import validate_analysis_request, validate_comparison_request


class TestValidateAnalysisRequest:

    def test_valid_message_with_context(self):
        request = validate_analysis_request("hey, you free tonight?", "coworker")

        assert request.message == "hey, you free tonight?"
        assert request.context == "coworker"

    def test_missing_context_becomes_empty(self):
        assert validate_analysis_request("hello").context == ""

    @pytest.mark.parametrize("message", [None, "", 42, ["hi"], {"text": "hi"}, True])
    def test_missing_or_non_string_message(self, message):
        with pytest.raises(InvalidInput) as exc_info:
            validate_analysis_request(message)

        assert exc_info.value.message == "Message is required and must be a string"

    def test_message_at_limit_is_accepted(self):
        assert len(validate_analysis_request("a" * 5000).message) == 5000

    def test_message_over_limit(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_analysis_request("a" * 5001)

        assert exc_info.value.message == "Message is too long (max 5000 characters)"

    def test_non_string_context(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_analysis_request("hello", {"who": "boss"})

        assert exc_info.value.message == "Context must be a string"

    @pytest.mark.parametrize("context", [None, "", 0, False, {}, []])
    def test_empty_context_values_become_empty(self, context):
        assert validate_analysis_request("hello", context).context == ""
        assert validate_comparison_request(["a", "b"], context).context == ""


class TestValidateComparisonRequest:

    def test_valid_messages_keep_order(self):
        request = validate_comparison_request(["one", "two", "three"])

        assert request.messages == ["one", "two", "three"]
        assert request.context == ""

    @pytest.mark.parametrize("messages", [None, "hi there", {"a": "b"}, [], ["only one"]])
    def test_not_a_list_or_too_few(self, messages):
        with pytest.raises(InvalidInput) as exc_info:
            validate_comparison_request(messages)

        assert exc_info.value.message == "At least 2 messages are required for comparison"

    def test_ten_messages_accepted(self):
        assert len(validate_comparison_request(["m"] * 10).messages) == 10

    def test_too_many_messages(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_comparison_request(["m"] * 11)

        assert exc_info.value.message == "Too many messages (max 10 for comparison)"

    @pytest.mark.parametrize("bad_entry", ["", None, 7, ["nested"]])
    def test_invalid_entry(self, bad_entry):
        with pytest.raises(InvalidInput) as exc_info:
            validate_comparison_request(["fine", bad_entry])

        assert exc_info.value.message == "All messages must be non-empty strings"

    def test_entry_over_limit(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_comparison_request(["fine", "x" * 2001])

        assert exc_info.value.message == "Each message must be under 2000 characters"

    def test_first_violation_wins(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_comparison_request(["x" * 2001, ""])

        assert exc_info.value.message == "Each message must be under 2000 characters"
