"""
5K Time Predictor - Errors
予測処理で発生する例外
"""
from typing import Optional


class PredictorError(Exception):
    """予測処理の基底例外"""


class InvalidInput(PredictorError, ValueError):
    """入力値の検証エラー

    Args:
        message: エラーメッセージ
        field: 不正だった入力項目名（"vo2_max", "age", "gender"）
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DegenerateComputation(PredictorError, ArithmeticError):
    """補正後VO2maxが正の有限値にならず、タイムを計算できない"""

    def __init__(self, adjusted_vo2: float):
        super().__init__(f"補正後VO2maxが不正です: {adjusted_vo2}")
        self.adjusted_vo2 = adjusted_vo2
