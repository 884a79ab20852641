"""
Тесты для общих проверок строк и email
"""

import pytest

from storefront.core.validation import MAX_STRING_LENGTH, is_valid_email, is_valid_string


class TestIsValidString:
    """Тесты для is_valid_string"""

    def test_valid(self) -> None:
        assert is_valid_string("test") is True
        assert is_valid_string("a") is True
        assert is_valid_string("x" * MAX_STRING_LENGTH) is True

    @pytest.mark.parametrize("value", [None, "", "x" * 51, 123, ["a"], b"bytes"])
    def test_invalid(self, value) -> None:
        assert is_valid_string(value) is False

    def test_custom_max_length(self) -> None:
        assert is_valid_string("abcdef", max_length=5) is False
        assert is_valid_string("abcde", max_length=5) is True


class TestIsValidEmail:
    """Тесты для is_valid_email"""

    @pytest.mark.parametrize("value", ["john@example.com", "@", "a@b"])
    def test_valid(self, value) -> None:
        """Достаточно '@' в валидной строке"""
        assert is_valid_email(value) is True

    @pytest.mark.parametrize("value", ["john.example.com", "", None, 5, "x" * 50 + "@"])
    def test_invalid(self, value) -> None:
        assert is_valid_email(value) is False
