"""
5K Time Predictor - UI Components
再利用可能なUIコンポーネント
"""
import pandas as pd
import streamlit as st

from ..config import (
    APP_NAME,
    APP_VERSION,
    RESULT_PREFIX,
    INVALID_INPUT_MESSAGE,
    VO2_AT_5K_PACE,
    BASE_5K_TIME_SECONDS,
)
from ..predictor import Gender


def render_header() -> None:
    """アプリヘッダーを表示"""
    st.title(f"🏃 {APP_NAME}")
    st.caption(f"Version {APP_VERSION}")


def render_input_form() -> dict:
    """入力フォームを表示し、生の入力値を返す

    Returns:
        dict: {"vo2_max": str, "age": str, "gender": str, "submitted": bool}
    """
    vo2_max = st.text_input("VO2 Max:", placeholder="Enter VO2 Max", key="vo2_max")
    age = st.text_input("Age:", placeholder="Enter Age", key="age")
    gender = st.selectbox("Gender:", [g.value for g in Gender], key="gender")
    submitted = st.button("Predict 5K Time", key="predict", use_container_width=True)

    return {
        "vo2_max": vo2_max,
        "age": age,
        "gender": gender,
        "submitted": submitted,
    }


def breakdown_to_frame(breakdown: dict) -> pd.DataFrame:
    """計算過程の辞書を表示用のDataFrameに変換"""
    rows = [
        ("Gender multiplier", breakdown["gender_multiplier"]),
        ("Age factor", breakdown["age_factor"]),
        ("Adjusted VO2", breakdown["adjusted_vo2"]),
        ("Predicted seconds", breakdown["predicted_seconds"]),
        ("Predicted time", breakdown["predicted_time"]),
    ]
    return pd.DataFrame(
        {"Item": [name for name, _ in rows], "Value": [str(value) for _, value in rows]}
    )


def render_prediction(breakdown: dict) -> None:
    """予想タイムと計算過程を表示"""
    st.success(f"{RESULT_PREFIX}{breakdown['predicted_time']}")

    with st.expander("計算過程", expanded=False):
        st.table(breakdown_to_frame(breakdown))
        st.text(breakdown["calculation_log"])


def render_invalid_input() -> None:
    """入力エラーを表示"""
    st.error(INVALID_INPUT_MESSAGE)


def render_footer() -> None:
    """フッターを表示（モデルの説明）"""
    st.markdown("---")
    st.caption(
        f"ジャック・ダニエルズ式をベースに、VO2max {VO2_AT_5K_PACE} = "
        f"{BASE_5K_TIME_SECONDS // 60}:{BASE_5K_TIME_SECONDS % 60:02d} を基準にスケーリング。"
        "女性は×0.94、30歳を超えると1年ごとに0.3%低下（下限85%）。"
    )
    st.caption(f"{APP_NAME} v{APP_VERSION}")
