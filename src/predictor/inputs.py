"""
5K Time Predictor - Inputs
フォーム入力値の検証と入力モデル
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import InvalidInput

logger = logging.getLogger(__name__)


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: str) -> Optional["Gender"]:
        """大文字小文字を無視して変換（該当なしはNone）"""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class PredictionInput:
    """検証済みの予測入力"""

    vo2_max: float
    gender: str
    age: int


def _parse_vo2_max(raw: Union[str, float, None]) -> float:
    if raw is None:
        raise InvalidInput("VO2 Max is required", field="vo2_max")

    try:
        vo2_max = float(str(raw).strip())
    except ValueError:
        raise InvalidInput(f"VO2 Max is not a number: {raw!r}", field="vo2_max")

    if not math.isfinite(vo2_max) or vo2_max <= 0:
        raise InvalidInput(f"VO2 Max must be a positive number: {raw!r}", field="vo2_max")

    return vo2_max


def _parse_age(raw: Union[str, int, None]) -> int:
    if raw is None:
        raise InvalidInput("Age is required", field="age")

    try:
        age = int(str(raw).strip())
    except ValueError:
        raise InvalidInput(f"Age is not an integer: {raw!r}", field="age")

    if age < 0:
        raise InvalidInput(f"Age must not be negative: {raw!r}", field="age")

    return age


def _parse_gender(raw: Union[str, Gender, None]) -> str:
    if isinstance(raw, Gender):
        return raw.value

    if raw is None or not str(raw).strip():
        raise InvalidInput("Gender is required", field="gender")

    gender = Gender.parse(str(raw))
    if gender is not None:
        return gender.value

    # 未登録の性別は補正なしで計算する
    return str(raw).strip().lower()


def parse_prediction_input(raw_vo2_max, raw_age, raw_gender) -> PredictionInput:
    """フォームの生の入力値を検証して PredictionInput を生成

    Args:
        raw_vo2_max: VO2maxの入力値（数値として解釈できること）
        raw_age: 年齢の入力値（整数として解釈できること）
        raw_gender: 性別の入力値（空でないこと）

    Returns:
        PredictionInput

    Raises:
        InvalidInput: いずれかの入力が不正な場合
    """
    try:
        return PredictionInput(
            vo2_max=_parse_vo2_max(raw_vo2_max),
            gender=_parse_gender(raw_gender),
            age=_parse_age(raw_age),
        )
    except InvalidInput as e:
        logger.info("Rejected input (%s): %s", e.field, e)
        raise
