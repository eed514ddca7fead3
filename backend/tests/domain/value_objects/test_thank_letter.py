"""Unit tests for ThankLetter value object."""

from datetime import date

import pytest
from domain.value_objects import ThankLetter, format_letter_date


class TestThankLetter:
    """Test letter construction from submissions."""

    def test_from_submission_splits_paragraphs(self):
        """Test that each line of the content becomes a stripped paragraph."""
        letter = ThankLetter.from_submission(
            "综合优秀奖学金",
            {"salutation": "尊敬的捐赠人：", "content": "  感谢您的资助。\n我会继续努力。 "},
            department="清华大学电子工程系",
            class_name="无61",
            issued_on=date(2018, 5, 16),
        )
        assert letter.title == "综合优秀奖学金感谢信"
        assert letter.salutation == "尊敬的捐赠人："
        assert letter.paragraphs == ("感谢您的资助。", "我会继续努力。")
        assert letter.formatted_date == "2018年5月16日"

    def test_missing_salutation_is_empty(self):
        letter = ThankLetter.from_submission("助学金", {"content": "谢谢"}, department="电子系")
        assert letter.salutation == ""

    def test_empty_title_raises_error(self):
        with pytest.raises(ValueError, match="Letter title cannot be empty"):
            ThankLetter(title="")

    def test_date_has_no_leading_zeros(self):
        assert format_letter_date(date(2019, 1, 2)) == "2019年1月2日"
