import plotly.graph_objects as go

from curves import curve_frame
from ui import format_money

# (column, legend name, colour), bottom of the stack first
SPEND_SERIES = [
    ("other", "Other", "#9CA3AF"),
    ("long_term_care", "Long-term care", "#F59E0B"),
    ("education", "Education", "#10B981"),
    ("healthcare", "Healthcare", "#EF4444"),
    ("pension", "Pensions", "#3B82F6"),
]
TAX_SERIES = ("tax_contribution", "Taxes", "#94A3B8")
NET_SERIES = ("net_balance", "Net balance", "#7F1D1D")


def lifecycle_figure(records, retirement_age: int = None) -> go.Figure:
    """
    Stacked per-age expenditure with taxes below zero and the net balance
    drawn as a line on top.
    """
    df = curve_frame(records)
    fig = go.Figure()
    for col, name, color in SPEND_SERIES + [TAX_SERIES]:
        fig.add_trace(go.Bar(
            x=df["age"], y=df[col], name=name, marker_color=color,
            customdata=[format_money(v) for v in df[col]],
            hovertemplate=f"{name}: %{{customdata}}<extra></extra>",
        ))
    col, name, color = NET_SERIES
    fig.add_trace(go.Scatter(
        x=df["age"], y=df[col], name=name, mode="lines",
        line=dict(color=color, width=2),
        customdata=[format_money(v) for v in df[col]],
        hovertemplate=f"<b>{name}: %{{customdata}}</b><extra></extra>",
    ))
    fig.add_hline(y=0, line_color="#000000", line_width=1)
    if retirement_age is not None:
        fig.add_vline(x=retirement_age, line_dash="dash", line_color="green")
    fig.update_layout(
        barmode="relative", bargap=0.1,
        xaxis_title="Age", yaxis_title="Per person per year",
        hovermode="x unified", legend=dict(orientation="h", y=-0.2),
        margin=dict(l=30, r=20, t=30, b=30),
    )
    fig.update_xaxes(dtick=10)
    fig.update_yaxes(tickformat="~s")
    return fig
