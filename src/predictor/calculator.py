"""
5K Time Predictor - Calculator
VO2max・性別・年齢から5kmの予想タイムを計算するロジック
"""
import logging
import math

from ..config import (
    GENDER_MULTIPLIER,
    DEFAULT_GENDER_MULTIPLIER,
    AGE_ADJUSTMENT_THRESHOLD,
    AGE_DECLINE_PER_YEAR,
    MIN_AGE_FACTOR,
    VO2_AT_5K_PACE,
    BASE_5K_TIME_SECONDS,
)
from .errors import DegenerateComputation

logger = logging.getLogger(__name__)


def get_gender_multiplier(gender: str) -> float:
    """性別による補正倍率を返す（大文字小文字は区別しない）

    Args:
        gender: 性別 ("male", "female" 等)

    Returns:
        補正倍率（未登録の値は1.0）
    """
    return GENDER_MULTIPLIER.get(gender.lower(), DEFAULT_GENDER_MULTIPLIER)


def get_age_factor(age: int) -> float:
    """年齢による補正係数を返す

    30歳を超えた場合のみ、1年ごとに0.3%低下させる。下限は0.85。
    30歳以下は補正なし（1.0）。
    """
    if age <= AGE_ADJUSTMENT_THRESHOLD:
        return 1.0

    # 下限に達する年数を超えたらfloat変換の前に打ち切る（巨大なintはfloatにできない）
    years = age - AGE_ADJUSTMENT_THRESHOLD
    if years >= (1 - MIN_AGE_FACTOR) / AGE_DECLINE_PER_YEAR:
        return MIN_AGE_FACTOR

    return max(1 - years * AGE_DECLINE_PER_YEAR, MIN_AGE_FACTOR)


def adjust_vo2(vo2_max: float, gender: str, age: int) -> float:
    """性別・年齢で補正したVO2maxを返す"""
    return vo2_max * get_gender_multiplier(gender) * get_age_factor(age)


def _seconds_for_adjusted_vo2(adjusted_vo2: float) -> float:
    predicted_seconds = math.nan
    # NaNもここで弾く
    if adjusted_vo2 > 0 and math.isfinite(adjusted_vo2):
        predicted_seconds = BASE_5K_TIME_SECONDS * (VO2_AT_5K_PACE / adjusted_vo2)

    # 極端に小さいVO2maxでは秒数がinfになる
    if not math.isfinite(predicted_seconds):
        logger.warning("Degenerate adjusted VO2: %s", adjusted_vo2)
        raise DegenerateComputation(adjusted_vo2)

    return predicted_seconds


def predict_5k_seconds(vo2_max: float, gender: str, age: int) -> float:
    """5kmの予想タイムを秒で返す

    Raises:
        DegenerateComputation: 補正後VO2maxが正の有限値でない場合、
            または予想タイムが有限値にならない場合
    """
    return _seconds_for_adjusted_vo2(adjust_vo2(vo2_max, gender, age))


def format_duration(seconds: float) -> str:
    """秒を HH:MM:SS 形式に変換

    時・分・秒はそれぞれ独立に計算する。秒は四捨五入するため "60" になる
    ことがあるが、分への繰り上げはしない。時間は24で折り返さない。

    Args:
        seconds: 秒数

    Returns:
        時間文字列 (例: "00:22:45", "100:00:00")
    """
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    # round()は偶数丸めなので使わない
    secs = math.floor(seconds % 60 + 0.5)

    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def predict_5k_time(vo2_max: float, gender: str, age: int) -> str:
    """VO2max・性別・年齢から5kmの予想タイムを計算

    Args:
        vo2_max: VO2max (ml/kg/min)
        gender: 性別 ("male" / "female"、その他は補正なし)
        age: 年齢

    Returns:
        予想タイム (例: "00:22:45")

    Raises:
        DegenerateComputation: vo2_maxが0以下・NaN・無限大、または小さすぎて
            予想タイムが有限値にならない場合
    """
    predicted_seconds = predict_5k_seconds(vo2_max, gender, age)
    predicted_time = format_duration(predicted_seconds)

    logger.debug(
        "Predicted 5K: vo2_max=%s gender=%s age=%s -> %.2fs (%s)",
        vo2_max, gender, age, predicted_seconds, predicted_time,
    )
    return predicted_time


def explain_prediction(vo2_max: float, gender: str, age: int) -> dict:
    """予想タイムと計算過程を返す

    Returns:
        dict: {
            "gender_multiplier": 性別補正,
            "age_factor": 年齢補正,
            "adjusted_vo2": 補正後VO2max,
            "predicted_seconds": 予想タイム（秒）,
            "predicted_time": 予想タイム文字列,
            "calculation_log": 計算過程の説明
        }
    """
    gender_multiplier = get_gender_multiplier(gender)
    age_factor = get_age_factor(age)
    adjusted_vo2 = vo2_max * gender_multiplier * age_factor
    predicted_seconds = _seconds_for_adjusted_vo2(adjusted_vo2)
    predicted_time = format_duration(predicted_seconds)

    if age > AGE_ADJUSTMENT_THRESHOLD:
        age_line = (
            f"年齢補正: max(1 - ({age} - {AGE_ADJUSTMENT_THRESHOLD}) × {AGE_DECLINE_PER_YEAR}, "
            f"{MIN_AGE_FACTOR}) = {age_factor:.3f}\n"
        )
    else:
        age_line = f"年齢補正: なし（{AGE_ADJUSTMENT_THRESHOLD}歳以下）\n"

    calculation_log = (
        f"【計算過程】\n"
        f"入力: VO2max {vo2_max}, 性別 {gender}, 年齢 {age}\n"
        f"性別補正: × {gender_multiplier}\n"
        f"{age_line}"
        f"補正後VO2max: {adjusted_vo2:.2f}\n"
        f"計算式: {BASE_5K_TIME_SECONDS} × ({VO2_AT_5K_PACE} / {adjusted_vo2:.2f})\n"
        f"= {predicted_seconds:.2f}秒 → {predicted_time}"
    )

    return {
        "gender_multiplier": gender_multiplier,
        "age_factor": age_factor,
        "adjusted_vo2": round(adjusted_vo2, 2),
        "predicted_seconds": round(predicted_seconds, 2),
        "predicted_time": predicted_time,
        "calculation_log": calculation_log,
    }
