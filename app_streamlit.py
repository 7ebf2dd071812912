"""Streamlit UI for the Groei compound-interest calculator."""

import os
# Forceer de Streamlit theme instellingen
os.environ.setdefault("STREAMLIT_THEME_PRIMARY_COLOR", "#1FB8CD")

import streamlit as st
import altair as alt

from groei_rekenmodel import NOT_REACHED, ProjectionInput, project_over_horizon, seek_goal
from groei_rekenmodel.analysis import GoalStatus, composition, goal_status, metrics
from groei_rekenmodel.config import load_settings
from groei_rekenmodel.formatting import fmt_compact, fmt_currency, fmt_duration, fmt_number, fmt_pct, status_text, ui_text
from groei_rekenmodel.inputs import DEFAULT_BOUNDS, build_input, parse_number
from groei_rekenmodel.logsetup import get_logger, setup_logging
from groei_rekenmodel.views import composition_frame, monthly_frame, sample_points, yearly_frame

# Huisstijlkleuren
COLOR_TOTAL = "#1FB8CD"
COLOR_CONTRIBUTIONS = "#FFC185"
COLOR_RETURNS = "#B4413C"
COLOR_RETURNS_LINE = "#964325"

SETTINGS = load_settings()
LOCALE = SETTINGS.locale
setup_logging(SETTINGS.log_level)
logger = get_logger("groei.app")

_INPUT_DEFAULTS = {
    "initial": SETTINGS.default_initial,
    "monthly": SETTINGS.default_monthly,
    "rate": SETTINGS.default_rate,
    "goal": SETTINGS.default_goal,
}

STATUS_ICON = {
    GoalStatus.REACHED: "🎯",
    GoalStatus.REACHABLE: "✓",
    GoalStatus.UNREACHABLE: "⚠️",
    GoalStatus.DISTANT: "📊",
}


def _t(key: str, **fields) -> str:
    return ui_text(key, LOCALE, **fields)


def _sync_amount_input(display_key: str, value_key: str, min_value: float, max_value: float, decimals: int) -> None:
    try:
        value = parse_number(st.session_state[display_key], locale=LOCALE)
        if value < min_value or value > max_value:
            raise ValueError("Buiten bereik")
        st.session_state[value_key] = value
        st.session_state[display_key] = fmt_number(value, decimals, LOCALE)
        st.session_state[f"{display_key}_error"] = ""
    except ValueError:
        st.session_state[f"{display_key}_error"] = (
            _t("out_of_range", low=fmt_number(min_value, 0, LOCALE), high=fmt_number(max_value, 0, LOCALE))
        )


def amount_text_input(
    label: str,
    *,
    key: str,
    default: float,
    min_value: float,
    max_value: float,
    decimals: int = 2,
) -> float:
    display_key = f"{key}_display"
    value_key = f"{key}_value"
    error_key = f"{display_key}_error"

    if value_key not in st.session_state:
        st.session_state[value_key] = float(default)
    if display_key not in st.session_state:
        st.session_state[display_key] = fmt_number(default, decimals, LOCALE)
    if error_key not in st.session_state:
        st.session_state[error_key] = ""

    st.text_input(
        label,
        key=display_key,
        on_change=_sync_amount_input,
        args=(display_key, value_key, min_value, max_value, decimals),
    )

    if st.session_state[error_key]:
        st.error(st.session_state[error_key])

    return float(st.session_state[value_key])


def _reset_inputs() -> None:
    for key, default in _INPUT_DEFAULTS.items():
        decimals = 2 if key == "rate" else 0
        st.session_state[f"{key}_value"] = float(default)
        st.session_state[f"{key}_display"] = fmt_number(default, decimals, LOCALE)
        st.session_state[f"{key}_display_error"] = ""
    st.session_state["years"] = SETTINGS.default_years
    st.session_state["log_scale"] = False


st.set_page_config(
    page_title=_t("page_title"),
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ==========================================
# SIDEBAR: Input Parameters
# ==========================================
bounds = DEFAULT_BOUNDS

if "log_scale" not in st.session_state:
    st.session_state["log_scale"] = False

with st.sidebar:
    st.title(_t("sidebar_title"))

    initial_raw = amount_text_input(
        _t("initial"),
        key="initial",
        default=_INPUT_DEFAULTS["initial"],
        min_value=bounds.initial_min,
        max_value=bounds.initial_max,
        decimals=0,
    )
    monthly_raw = amount_text_input(
        _t("monthly"),
        key="monthly",
        default=_INPUT_DEFAULTS["monthly"],
        min_value=bounds.monthly_min,
        max_value=bounds.monthly_max,
        decimals=0,
    )
    rate_raw = amount_text_input(
        _t("rate"),
        key="rate",
        default=_INPUT_DEFAULTS["rate"],
        min_value=bounds.rate_min,
        max_value=bounds.rate_max,
    )
    goal_raw = amount_text_input(
        _t("goal"),
        key="goal",
        default=_INPUT_DEFAULTS["goal"],
        min_value=bounds.goal_min,
        max_value=bounds.goal_max,
        decimals=0,
    )
    if "years" not in st.session_state:
        st.session_state["years"] = SETTINGS.default_years
    years_raw = st.slider(_t("years"), min_value=bounds.years_min, max_value=bounds.years_max, key="years")

    with st.expander(_t("chart")):
        goal_mode = st.toggle(_t("goal_mode"), value=False)
        log_scale = st.checkbox(_t("log_scale"), key="log_scale")

    st.divider()
    st.button(_t("reset"), use_container_width=True, on_click=_reset_inputs)

# ==========================================
# MAIN CONTENT: Calculations & Results
# ==========================================
st.title(_t("page_title"))

inp = build_input(
    initial_investment=initial_raw,
    monthly_contribution=monthly_raw,
    annual_rate=rate_raw,
    years=years_raw,
    target_goal=goal_raw,
    bounds=bounds,
)


@st.cache_data(show_spinner=False)
def get_projection(projection_inp: ProjectionInput):
    logger.info("projection input=%s", projection_inp)
    return project_over_horizon(projection_inp), seek_goal(projection_inp)


result, goal_path = get_projection(inp)
months_needed = goal_path.months_to_goal
comp = composition(result)
kpi = metrics(result, inp.annual_rate)
years = inp.horizon_months // 12

# Top Metrics
st.subheader(_t("projected"))
col1, col2, col3, col4 = st.columns(4)

with col1:
    st.metric(_t("final_value"), fmt_currency(result.final_value, 2, LOCALE))
    if kpi.roi_pct is not None:
        st.caption(_t("roi_caption", roi=fmt_pct(kpi.roi_pct, 1, LOCALE)))
with col2:
    st.metric(_t("total_invested"), fmt_currency(result.total_contributions, 2, LOCALE))
    st.caption(_t("invested_caption"))
with col3:
    st.metric(_t("total_returns"), fmt_currency(result.total_returns, 2, LOCALE))
    st.caption(_t("returns_caption", returns=fmt_compact(result.total_returns, LOCALE), invested=fmt_compact(result.total_contributions, LOCALE)))
with col4:
    st.metric(_t("time_to_goal"), fmt_duration(months_needed, LOCALE))
    if months_needed is NOT_REACHED:
        st.caption(_t("adjust"))

status = goal_status(result, inp.target_goal, months_needed)
needed = fmt_duration(months_needed, LOCALE) if months_needed is not NOT_REACHED else ""
title, message = status_text(
    status.value, LOCALE, goal=fmt_currency(inp.target_goal, 2, LOCALE), years=years, needed=needed
)
st.info(f"{STATUS_ICON[status]} **{title}**. {message}")

st.divider()

df = monthly_frame(goal_path if goal_mode else result)
df_chart = sample_points(df)
df_chart["tooltip_balance"] = df_chart["balance"].map(lambda x: fmt_currency(x, 2, LOCALE))
df_chart["tooltip_contributions"] = df_chart["contributions"].map(lambda x: fmt_currency(x, 2, LOCALE))
df_chart["tooltip_returns"] = df_chart["returns"].map(lambda x: fmt_currency(x, 2, LOCALE))

tab_evolution, tab_composition, tab_annual, tab_table = st.tabs([
    _t("tab_evolution"), _t("tab_composition"), _t("tab_annual"), _t("tab_table")
])

with tab_evolution:
    if len(df) <= 1:
        st.info(_t("no_timeline"))
    else:
        long_df = df_chart.melt(
            id_vars=["year", "tooltip_balance", "tooltip_contributions", "tooltip_returns"],
            value_vars=["balance", "contributions", "returns"],
            var_name="series",
            value_name="amount",
        )
        if log_scale:
            long_df = long_df[long_df["amount"] > 0]
        y_scale = alt.Scale(type="log") if log_scale else alt.Scale(zero=True)

        evolution_chart = alt.Chart(long_df).mark_line(strokeWidth=3).encode(
            x=alt.X("year:Q", title=_t("axis_years"), axis=alt.Axis(grid=False)),
            y=alt.Y("amount:Q", title=_t("axis_value"), scale=y_scale, axis=alt.Axis(format="~s")),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(
                    domain=["balance", "contributions", "returns"],
                    range=[COLOR_TOTAL, COLOR_CONTRIBUTIONS, COLOR_RETURNS_LINE],
                ),
                legend=alt.Legend(title=None, orient="top"),
            ),
            tooltip=[
                alt.Tooltip("year:Q", title=_t("year"), format=".1f"),
                alt.Tooltip("tooltip_balance:N", title=_t("total")),
                alt.Tooltip("tooltip_contributions:N", title=_t("invested")),
                alt.Tooltip("tooltip_returns:N", title=_t("returns")),
            ],
        ).properties(height=450).configure_view(strokeWidth=0)
        st.altair_chart(evolution_chart, use_container_width=True)

with tab_composition:
    comp_df = composition_frame(comp, labels=(_t("comp_initial"), _t("comp_contributions"), _t("comp_returns")))
    comp_df["tooltip_amount"] = comp_df["amount"].map(lambda x: fmt_currency(x, 2, LOCALE))
    comp_df["tooltip_share"] = comp_df["share_pct"].map(lambda x: fmt_pct(x, 1, LOCALE))
    donut = alt.Chart(comp_df).mark_arc(innerRadius=80).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "component:N",
            scale=alt.Scale(
                domain=list(comp_df["component"]),
                range=[COLOR_TOTAL, COLOR_CONTRIBUTIONS, COLOR_RETURNS],
            ),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("component:N", title=_t("component")),
            alt.Tooltip("tooltip_amount:N", title=_t("amount")),
            alt.Tooltip("tooltip_share:N", title=_t("share")),
        ],
    ).properties(height=400)
    st.altair_chart(donut, use_container_width=True)

    a_col1, a_col2, a_col3 = st.columns(3)
    a_col1.metric(_t("monthly_growth"), fmt_pct(kpi.monthly_rate_pct, 2, LOCALE))
    a_col2.metric(_t("roi"), fmt_pct(kpi.roi_pct, 1, LOCALE) if kpi.roi_pct is not None else "-")
    a_col3.metric(
        _t("multiplier"),
        f"{fmt_number(kpi.capital_multiplier, 2, LOCALE)}x" if kpi.capital_multiplier is not None else "-",
    )

df_year = yearly_frame(result)

with tab_annual:
    if df_year.empty:
        st.info(_t("no_year"))
    else:
        bars = df_year.melt(id_vars=["year"], value_vars=["contributions", "returns"], var_name="component", value_name="amount")
        bars["amount"] = bars["amount"].clip(lower=0.0)
        bars["label"] = _t("year") + " " + bars["year"].astype(str)
        bars["tooltip_amount"] = bars["amount"].map(lambda x: fmt_currency(x, 2, LOCALE))
        annual_chart = alt.Chart(bars).mark_bar().encode(
            x=alt.X("label:N", title=None, sort=list(dict.fromkeys(bars["label"])), axis=alt.Axis(labelAngle=0)),
            y=alt.Y("amount:Q", title=None, stack=True, axis=alt.Axis(format="~s")),
            color=alt.Color(
                "component:N",
                scale=alt.Scale(domain=["contributions", "returns"], range=[COLOR_CONTRIBUTIONS, COLOR_RETURNS]),
                legend=alt.Legend(title=None, orient="top"),
            ),
            tooltip=[
                alt.Tooltip("label:N", title=_t("year")),
                alt.Tooltip("component:N", title=_t("component")),
                alt.Tooltip("tooltip_amount:N", title=_t("amount")),
            ],
        ).properties(height=450).configure_view(strokeWidth=0)
        st.altair_chart(annual_chart, use_container_width=True)

with tab_table:
    if df_year.empty:
        st.info(_t("no_table"))
    else:
        table = df_year.copy()
        for col in ["start_balance", "contributions", "returns", "end_balance", "cumulative_contributions", "cumulative_returns"]:
            table[col] = table[col].map(lambda x: fmt_currency(x, 0, LOCALE))
        st.dataframe(
            table.rename(columns={col: _t(col) for col in table.columns}),
            hide_index=True,
            use_container_width=True,
        )