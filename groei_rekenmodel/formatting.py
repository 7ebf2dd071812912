"""Locale-aware text for amounts, percentages and goal durations."""

from __future__ import annotations

from typing import Optional

from groei_rekenmodel.domain import MAX_MONTHS, NOT_REACHED, MonthsToGoal

SUPPORTED_LOCALES = ("en", "pt")

_CURRENCY_SYMBOL = {"en": "$", "pt": "R$"}

_DURATION_TEXT = {
    "en": {
        "reached": "Already reached",
        "not_reached": f"Not reachable within {MAX_MONTHS // 12} years",
        "no_goal": "-",
        "year": ("year", "years"),
        "month": ("month", "months"),
        "join": " ",
    },
    "pt": {
        "reached": "Já atingido",
        "not_reached": f"Não atinge em até {MAX_MONTHS // 12} anos",
        "no_goal": "-",
        "year": ("ano", "anos"),
        "month": ("mês", "meses"),
        "join": " e ",
    },
}


def _check_locale(locale: str) -> str:
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"locale moet een van {SUPPORTED_LOCALES} zijn.")
    return locale


def fmt_number(amount: float, decimals: int = 2, locale: str = "en") -> str:
    us = f"{float(amount):,.{decimals}f}"
    if _check_locale(locale) == "en":
        return us
    return us.replace(",", "_").replace(".", ",").replace("_", ".")


def fmt_currency(amount: float, decimals: int = 2, locale: str = "en") -> str:
    symbol = _CURRENCY_SYMBOL[_check_locale(locale)]
    if amount < 0:
        return f"-{symbol} {fmt_number(-amount, decimals, locale)}"
    return f"{symbol} {fmt_number(amount, decimals, locale)}"


def fmt_pct(value: float, decimals: int = 2, locale: str = "en") -> str:
    return f"{fmt_number(value, decimals, locale)}%"


def fmt_compact(amount: float, locale: str = "en") -> str:
    """Short axis label: 950, 1.2k, 3.4M, 1.0B."""
    magnitude = abs(float(amount))
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "k")):
        if magnitude >= threshold:
            return f"{fmt_number(amount / threshold, 1, locale)}{suffix}"
    return fmt_number(amount, 0, locale)


def fmt_duration(months_to_goal: Optional[MonthsToGoal], locale: str = "en") -> str:
    """Render a goal duration; the NOT_REACHED sentinel gets its own text."""
    text = _DURATION_TEXT[_check_locale(locale)]
    if months_to_goal is None:
        return text["no_goal"]
    if months_to_goal is NOT_REACHED:
        return text["not_reached"]
    if months_to_goal == 0:
        return text["reached"]

    years, months = divmod(int(months_to_goal), 12)
    parts = []
    if years > 0:
        parts.append(f"{years} {text['year'][years != 1]}")
    if months > 0:
        parts.append(f"{months} {text['month'][months != 1]}")
    return text["join"].join(parts)


_YEARS_CAP = MAX_MONTHS // 12

UI_TEXT = {
    "en": {
        "page_title": "Groei calculator",
        "sidebar_title": "Parameters",
        "initial": "Initial investment",
        "monthly": "Monthly contribution",
        "rate": "Annual return (%)",
        "goal": "Target goal",
        "years": "Horizon (years)",
        "chart": "Chart",
        "goal_mode": "Chart the path to the goal",
        "log_scale": "Logarithmic scale",
        "reset": "Reset",
        "out_of_range": "Use a number between {low} and {high}.",
        "projected": "Projected result",
        "final_value": "Final value",
        "roi_caption": "+{roi} over the amount invested",
        "total_invested": "Total invested",
        "invested_caption": "Initial investment plus contributions",
        "total_returns": "Total returns",
        "returns_caption": "{returns} earned on {invested} invested",
        "time_to_goal": "Time to goal",
        "adjust": "Adjust the parameters",
        "status.reached": "Goal reached|You reach your goal of {goal} within {years} years.",
        "status.reachable": "Goal reachable|You need about {needed} to reach your goal. Keep investing!",
        "status.unreachable": (
            f"Goal not reachable|With the current parameters the goal is not reached within {_YEARS_CAP} years. "
            "Consider raising the contributions or the horizon."
        ),
        "status.distant": "Goal distant|Your goal is ambitious. Consider raising the monthly contribution or the horizon.",
        "tab_evolution": "Portfolio evolution",
        "tab_composition": "Composition",
        "tab_annual": "Annual growth",
        "tab_table": "Yearly table",
        "no_timeline": "No timeline to show.",
        "no_year": "No full year to show.",
        "no_table": "No yearly table, horizon is shorter than one month.",
        "axis_years": "Years",
        "axis_value": "Value",
        "year": "Year",
        "total": "Total",
        "invested": "Invested",
        "returns": "Returns",
        "component": "Component",
        "amount": "Amount",
        "share": "Share",
        "comp_initial": "Initial investment",
        "comp_contributions": "Monthly contributions",
        "comp_returns": "Returns",
        "monthly_growth": "Monthly growth",
        "roi": "ROI",
        "multiplier": "Capital multiplier",
        "months": "Months",
        "start_balance": "Start balance",
        "contributions": "Contributions",
        "end_balance": "End balance",
        "cumulative_contributions": "Cumul. invested",
        "cumulative_returns": "Cumul. returns",
    },
    "pt": {
        "page_title": "Calculadora Groei",
        "sidebar_title": "Parâmetros",
        "initial": "Investimento inicial",
        "monthly": "Aporte mensal",
        "rate": "Rentabilidade anual (%)",
        "goal": "Meta",
        "years": "Período (anos)",
        "chart": "Gráfico",
        "goal_mode": "Mostrar o caminho até a meta",
        "log_scale": "Escala logarítmica",
        "reset": "Redefinir",
        "out_of_range": "Use um número entre {low} e {high}.",
        "projected": "Resultado projetado",
        "final_value": "Valor final",
        "roi_caption": "+{roi} sobre o valor investido",
        "total_invested": "Total investido",
        "invested_caption": "Investimento inicial mais aportes",
        "total_returns": "Total em juros",
        "returns_caption": "{returns} de juros sobre {invested} investidos",
        "time_to_goal": "Tempo até a meta",
        "adjust": "Ajuste os parâmetros",
        "status.reached": "Meta atingida|Você atinge sua meta de {goal} em {years} anos.",
        "status.reachable": "Meta alcançável|Você precisa de cerca de {needed} para atingir sua meta. Continue investindo!",
        "status.unreachable": (
            f"Meta não alcançável|Com os parâmetros atuais a meta não é atingida em até {_YEARS_CAP} anos. "
            "Considere aumentar os aportes ou o período."
        ),
        "status.distant": "Meta distante|Sua meta é ambiciosa. Considere aumentar o aporte mensal ou o período.",
        "tab_evolution": "Evolução do patrimônio",
        "tab_composition": "Composição",
        "tab_annual": "Crescimento anual",
        "tab_table": "Tabela anual",
        "no_timeline": "Nenhuma evolução para mostrar.",
        "no_year": "Nenhum ano completo para mostrar.",
        "no_table": "Sem tabela anual, o período é menor que um mês.",
        "axis_years": "Anos",
        "axis_value": "Valor",
        "year": "Ano",
        "total": "Total",
        "invested": "Investido",
        "returns": "Juros",
        "component": "Componente",
        "amount": "Valor",
        "share": "Participação",
        "comp_initial": "Investimento inicial",
        "comp_contributions": "Aportes mensais",
        "comp_returns": "Juros",
        "monthly_growth": "Crescimento mensal",
        "roi": "ROI",
        "multiplier": "Multiplicador de capital",
        "months": "Meses",
        "start_balance": "Saldo inicial",
        "contributions": "Aportes",
        "end_balance": "Saldo final",
        "cumulative_contributions": "Investido acum.",
        "cumulative_returns": "Juros acum.",
    },
}


def ui_text(key: str, locale: str = "en", **fields) -> str:
    """Look up a UI label; ``fields`` fill its ``{placeholders}``."""
    text = UI_TEXT[_check_locale(locale)][key]
    return text.format(**fields) if fields else text


def status_text(status_value: str, locale: str = "en", **fields) -> tuple[str, str]:
    """Title and message of a goal status card."""
    title, message = ui_text(f"status.{status_value}", locale).split("|", 1)
    return title, message.format(**fields)
