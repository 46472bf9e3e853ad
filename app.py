# app.py
import logging

import pandas as pd
import streamlit as st

from config import APP_NAME, SUBTITLE, DEFAULTS, PARAM_BOUNDS
from ui import inject_css, header, helptext, kpi_card, format_money
from curves import SimParams, generate_curve
from balance import aggregate, verdict, breakeven_ages
from charts import lifecycle_figure
from scenarios import compare
from exporters import export_curve, export_params

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="📊", layout="wide")
inject_css()
header(APP_NAME, SUBTITLE)

with st.expander("How this model works"):
    st.write("""
- Each age from 0 to 100 gets a yearly amount of public spending: **education**, **healthcare**, **pensions**, **long-term care** and **other** transfers.
- **Taxes** are what a person pays in at that age, drawn below zero.
- The **net balance** is spending minus taxes for that age. Summed over the whole lifecycle it tells you whether the system runs a deficit or a surplus.
- The curves are hand-tuned shapes, not fitted to real data.
    """)

# ------------- Sidebar (inputs) -------------
SLIDERS = {
    "retirement_age": ("Retirement age", "Pensions start and working-age transfers stop at this age."),
    "pension_level_pct": ("Pension level (%)", "Pension generosity, 100 = today."),
    "tax_pressure_pct": ("Tax pressure (%)", "Taxes paid over working life, 100 = today."),
    "education_spend_pct": ("Education spend (%)", "Education budget per child, 100 = today."),
}

for key in SLIDERS:
    st.session_state.setdefault(key, DEFAULTS[key])


def reset_params():
    for key in SLIDERS:
        st.session_state[key] = DEFAULTS[key]


st.sidebar.header("Policy levers")
for key, (label, tip) in SLIDERS.items():
    lo, hi, step = PARAM_BOUNDS[key]
    st.sidebar.slider(label, lo, hi, step=step, key=key, help=tip)

st.sidebar.button("Reset", on_click=reset_params, width="stretch")

params = SimParams.from_percent(
    st.session_state["retirement_age"],
    st.session_state["tax_pressure_pct"],
    st.session_state["pension_level_pct"],
    st.session_state["education_spend_pct"],
).clamped()


@st.cache_data(show_spinner=False)
def run_cached(p: SimParams):
    logger.info("Recomputing lifecycle curve for %s", p)
    records = generate_curve(p)
    return records, aggregate(records)


records, result = run_cached(params)

# ------------- Summary -------------
tone = "good" if result.is_sustainable else "bad"
status = "sustainable" if result.is_sustainable else "not sustainable"
with st.sidebar:
    kpi_card("Lifecycle net balance", verdict(result),
             note=f"{format_money(result.total_net_balance)} • {status}", tone=tone)

# ------------- Chart -------------
st.markdown("### Fiscal lifecycle")
fig = lifecycle_figure(records, retirement_age=params.retirement_age)
st.plotly_chart(fig, width="stretch")

crossings = breakeven_ages(records)
if crossings:
    helptext("Net balance changes sign at age " + ", ".join(str(a) for a in crossings) + ".")
st.info("The dark red line is the net balance: above zero the person receives more than they pay in that year.")

# ------------- Quick what-ifs -------------
st.markdown("### Quick what-ifs")
helptext("Each variant changes one lever from your current settings.")
if st.button("Run what-ifs"):
    rows = []
    for name, (p, _, agg) in compare(params).items():
        rows.append({
            "Scenario": name,
            "Retirement age": p.retirement_age,
            "Net balance": format_money(agg.total_net_balance),
            "Verdict": verdict(agg),
        })
    st.dataframe(pd.DataFrame(rows), hide_index=True, width="stretch")

# ------------- Export -------------
st.markdown("### Export")
name_csv, data_csv = export_curve(records)
st.download_button("⬇️ Download curve (CSV)", data_csv, file_name=name_csv, mime="text/csv")
name_cfg, data_cfg = export_params(params, result)
st.download_button("⬇️ Download parameters (JSON)", data_cfg, file_name=name_cfg, mime="application/json")

st.markdown("---")
st.caption("Illustrative model. Figures are per person per year and are not calibrated forecasts.")
