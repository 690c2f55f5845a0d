"""
5K Time Predictor - Configuration
アプリケーション全体の設定値を管理
"""

# =============================================
# アプリ情報
# =============================================
APP_NAME = "5K Time Predictor"
APP_VERSION = "1.0.0"

# =============================================
# 予測モデル（ジャック・ダニエルズ式をベースに調整）
# =============================================
# 性別による補正倍率（未登録の値は1.0扱い）
GENDER_MULTIPLIER = {
    "male": 1.0,
    "female": 0.94,
}
DEFAULT_GENDER_MULTIPLIER = 1.0

# 年齢補正: 30歳を超えると1年ごとに0.3%低下、下限は85%
AGE_ADJUSTMENT_THRESHOLD = 30
AGE_DECLINE_PER_YEAR = 0.003
MIN_AGE_FACTOR = 0.85

# 基準値: VO2max 58 の鍛えたランナーで 22:45
VO2_AT_5K_PACE = 58
BASE_5K_TIME_SECONDS = 1365

# =============================================
# UIメッセージ
# =============================================
RESULT_PREFIX = "Predicted 5K Time: "
INVALID_INPUT_MESSAGE = "Please enter valid inputs for VO2 Max, age, and gender."

# =============================================
# ログ設定
# =============================================
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
