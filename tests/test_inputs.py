"""
5K Time Predictor - Input Validation Tests
"""
import pytest
import sys
import os

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.predictor.errors import InvalidInput
from src.predictor.inputs import Gender, PredictionInput, parse_prediction_input


class TestGender:
    """Genderのテスト"""

    def test_parse(self):
        assert Gender.parse("male") is Gender.MALE
        assert Gender.parse(" Female ") is Gender.FEMALE
        assert Gender.parse("FEMALE") is Gender.FEMALE

    def test_parse_unknown(self):
        assert Gender.parse("other") is None


class TestParsePredictionInput:
    """parse_prediction_input関数のテスト"""

    def test_valid_input(self):
        result = parse_prediction_input("58", "30", "male")
        assert result == PredictionInput(vo2_max=58.0, gender="male", age=30)

    def test_whitespace_and_decimal(self):
        result = parse_prediction_input(" 42.5 ", " 45 ", "Female")
        assert result.vo2_max == 42.5
        assert result.age == 45
        assert result.gender == "female"

    def test_numeric_values(self):
        result = parse_prediction_input(50.0, 35, Gender.FEMALE)
        assert result == PredictionInput(vo2_max=50.0, gender="female", age=35)

    def test_unknown_gender_kept(self):
        """未登録の性別は検証エラーにしない"""
        result = parse_prediction_input("58", "30", "Other")
        assert result.gender == "other"

    @pytest.mark.parametrize("raw", ["", "abc", "nan", "inf", "0", "-5", None])
    def test_invalid_vo2_max(self, raw):
        with pytest.raises(InvalidInput) as exc_info:
            parse_prediction_input(raw, "30", "male")
        assert exc_info.value.field == "vo2_max"

    @pytest.mark.parametrize("raw", ["", "abc", "30.5", "-1", None])
    def test_invalid_age(self, raw):
        """小数は切り捨てず拒否する（parseIntのように30.5を30にはしない）"""
        with pytest.raises(InvalidInput) as exc_info:
            parse_prediction_input("58", raw, "male")
        assert exc_info.value.field == "age"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_invalid_gender(self, raw):
        with pytest.raises(InvalidInput) as exc_info:
            parse_prediction_input("58", "30", raw)
        assert exc_info.value.field == "gender"

    def test_huge_age(self):
        """桁数の大きい年齢もそのまま受け付ける"""
        result = parse_prediction_input("58", "1" + "0" * 400, "male")
        assert result.age == 10 ** 400

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            parse_prediction_input("abc", "30", "male")
