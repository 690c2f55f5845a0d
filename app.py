"""
5K Time Predictor - Streamlit App
VO2max・性別・年齢から5kmの予想タイムを表示
"""
import logging
import sys

import streamlit as st

from src.config import APP_NAME, APP_VERSION, LOG_LEVEL, LOG_FORMAT
from src.predictor import (
    InvalidInput,
    DegenerateComputation,
    parse_prediction_input,
    explain_prediction,
)
from src.ui.components import (
    render_header,
    render_input_form,
    render_prediction,
    render_invalid_input,
    render_footer,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# =============================================
# ページ設定
# =============================================
st.set_page_config(
    page_title=f"{APP_NAME} v{APP_VERSION}",
    page_icon="🏃",
    layout="centered",
)


def main():
    render_header()

    form = render_input_form()

    if form["submitted"]:
        try:
            prediction_input = parse_prediction_input(form["vo2_max"], form["age"], form["gender"])
            breakdown = explain_prediction(
                prediction_input.vo2_max,
                prediction_input.gender,
                prediction_input.age,
            )
        except (InvalidInput, DegenerateComputation):
            render_invalid_input()
        else:
            logger.debug("Prediction: %s -> %s", prediction_input, breakdown["predicted_time"])
            render_prediction(breakdown)

    render_footer()


if __name__ == "__main__":
    main()
