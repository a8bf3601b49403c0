"""
Roman Numeral Converter: Streamlit UI entry point.

Run the API first (`python server.py`), then `streamlit run app.py`.
"""

import streamlit as st

# Load .env first so ROMAN_API_URL and logging settings are picked up
from roman_numeral.utils.config import api_base_url, load_config, log_level
load_config()

from roman_numeral.infrastructure.client.roman_api import RomanApiClient
from roman_numeral.ui.converter_view import render_converter
from roman_numeral.utils.logger import setup_logger, get_logger

setup_logger(level=log_level())
log = get_logger()

st.set_page_config(page_title="Roman Numeral Converter", layout="centered")
st.title("Roman Numeral Converter")
st.write("Convert integers between 1 and 3999 to their Roman numeral representation.")


@st.cache_resource
def get_api_client():
    return RomanApiClient()


with st.sidebar:
    st.header("Settings")
    st.caption(f"API: `{api_base_url()}`")

render_converter(get_api_client())
