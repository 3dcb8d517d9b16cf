# streamlit_app.py
import streamlit as st

from stock_balance import settings
from stock_balance.logger import setup_logger
from stock_balance.ui import render_ui

setup_logger("stock_balance")

st.set_page_config(page_title=settings.APP_TITLE, layout="wide")

st.title(settings.APP_TITLE)
st.markdown("لطفا فایل اکسل گزارش اسناد انبار را بارگذاری نمایید. ستون‌های لازم: `" + "، ".join(settings.REQUIRED_COLUMNS) + "`")

render_ui()
