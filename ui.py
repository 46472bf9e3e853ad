import math

import streamlit as st

from config import CURRENCY


def inject_css():
    try:
        with open("assets/styles.css", "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except OSError:
        pass


def header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def helptext(text: str):
    st.caption(text)


def format_money(value: float) -> str:
    # Whole units, halves away from zero; es-ES only groups from five digits up
    units = math.floor(abs(value) + 0.5)
    sign = "-" if value < 0 and units else ""
    digits = f"{units:,}".replace(",", ".") if units >= 10_000 else str(units)
    return f"{sign}{digits} {CURRENCY}"


def kpi_card(caption: str, value: str, note: str = "", tone: str = ""):
    extra = f"<div class='caption'>{note}</div>" if note else ""
    st.markdown(
        f"<div class='card {tone}'><div class='caption'>{caption}</div>"
        f"<div class='kpi'>{value}</div>{extra}</div>",
        unsafe_allow_html=True,
    )
