"""
🧪 Text helper tests
Tests for: truncate, validate_email, password_strength
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from bbskit.text import truncate
from bbskit.validators import PasswordRules, validate_email, password_strength


# =============================================================================
# TRUNCATE
# =============================================================================

class TestTruncate:
    """Test truncate()"""

    def test_shortens_text(self):
        assert truncate("Hello world", 5) == "Hello..."

    def test_long_sentence(self):
        assert truncate("Hello world, this is a test.", 10) == "Hello worl..."

    def test_word_safe(self):
        assert truncate("Hello world", 8, word_safe=True) == "Hello..."
        assert truncate("Hello world, this is a test.", 10, word_safe=True) == "Hello..."

    def test_word_safe_without_space(self):
        assert truncate("Supercalifragilistic", 10, word_safe=True) == "Supercalif..."

    def test_word_safe_leading_space_not_used(self):
        assert truncate(" abcdefgh", 5, word_safe=True) == " abcd..."

    def test_custom_ellipsis(self):
        assert truncate("abcdef", 4, ellipsis=">>>") == "abcd>>>"
        assert truncate("One word and two words.", 10, word_safe=True, ellipsis="---") == "One word---"

    def test_trailing_whitespace_trimmed(self):
        assert truncate("Hello    world", 8) == "Hello..."

    @pytest.mark.parametrize("text", ["", "Hi", "exactly10!", "x" * 10])
    def test_short_text_unchanged(self, text):
        assert truncate(text, 10) == text

    @pytest.mark.parametrize("value", [None, 12345, ["a"]])
    def test_non_string(self, value):
        assert truncate(value, 3) == ""

    @pytest.mark.parametrize("length", [0, -1, None])
    def test_non_positive_length(self, length):
        assert truncate("Hello world", length) == ""


# =============================================================================
# EMAIL
# =============================================================================

class TestValidateEmail:
    """Test validate_email()"""

    @pytest.mark.parametrize("email", [
        "user@example.com",
        "USER.NAME@Example.CO",
        "   space@example.com",
        "first+tag@sub.domain.org\n",
        "a_b%c-d@x-y.io",
    ])
    def test_valid(self, email):
        assert validate_email(email) is True

    @pytest.mark.parametrize("email", [
        "user@",
        "userexample.com",
        "user@@example.com",
        "user!@example.com",
        "user@example.c",
        "user@example",
        "",
        "us er@example.com",
        "\u017fam@example.com",
        "\u0131van@example.com",
        "user@example.\u212aom",
        "user@\u0661\u0662.com",
    ])
    def test_invalid(self, email):
        assert validate_email(email) is False

    @pytest.mark.parametrize("value", [None, 1234, b"user@example.com"])
    def test_non_string(self, value):
        assert validate_email(value) is False


# =============================================================================
# PASSWORD STRENGTH
# =============================================================================

class TestPasswordStrength:
    """Test password_strength()"""

    def test_weak_short_password(self):
        result = password_strength("abc")
        assert result.label == "weak"
        assert "too_short" in result.reasons

    def test_mixed_password(self):
        result = password_strength("Abc123!1")
        assert result.score == 4
        assert result.label == "very_strong"
        assert result.reasons == []
        assert result.is_acceptable

    def test_missing_character_types(self):
        result = password_strength("abcdefg")
        assert result.reasons == [
            "too_short",
            "missing_uppercase",
            "missing_number",
            "missing_symbol",
        ]

    def test_too_long(self):
        result = password_strength("a" * 200)
        assert "too_long" in result.reasons
        assert result.label == "weak"
        assert result.score == 3

    def test_length_bonuses(self):
        assert password_strength("abcdefgh").score == 1
        assert password_strength("abcdefghijkl").score == 2
        assert password_strength("abcdefghijklmnop").score == 3

    @pytest.mark.parametrize("password,label", [
        ("abcdefgh", "fair"),
        ("abcdEFGH", "good"),
        ("abcdEF12", "strong"),
        ("abcdEF1!", "very_strong"),
    ])
    def test_labels(self, password, label):
        assert password_strength(password).label == label

    def test_rule_overrides(self):
        result = password_strength("abc", min_length=2, require_symbol=False)
        assert result.label != "invalid"
        assert "missing_symbol" not in result.reasons
        assert "too_short" not in result.reasons

    def test_rules_mapping_and_object(self):
        relaxed = PasswordRules(require_uppercase=False, require_number=False, require_symbol=False)
        assert password_strength("abcdefgh", relaxed).reasons == []
        assert password_strength("abcdefgh", {"min_length": 10}).reasons[0] == "too_short"
        assert password_strength("abcdefgh", relaxed, min_length=10).reasons == ["too_short"]

    def test_negative_length_rule_rejected(self):
        with pytest.raises(PydanticValidationError):
            PasswordRules(min_length=-1)

    @pytest.mark.parametrize("value", [1234, None, ["pw"]])
    def test_invalid_for_non_string(self, value):
        result = password_strength(value)
        assert result.label == "invalid"
        assert result.score == 0
        assert result.reasons == ["not_a_string"]
        assert not result.is_acceptable
