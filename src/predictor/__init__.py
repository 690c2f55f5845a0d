"""
5K Time Predictor - Predictor Package
5km予想タイムの計算と入力検証
"""
from .calculator import (
    get_gender_multiplier,
    get_age_factor,
    adjust_vo2,
    predict_5k_seconds,
    format_duration,
    predict_5k_time,
    explain_prediction,
)
from .errors import PredictorError, InvalidInput, DegenerateComputation
from .inputs import Gender, PredictionInput, parse_prediction_input
