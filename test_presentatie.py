"""Tests for the layers around the engine: inputs, text, analysis and frames."""

import logging
import math
import unittest

from groei_rekenmodel import NOT_REACHED, ProjectionInput, months_to_reach_goal, project_over_horizon, seek_goal
from groei_rekenmodel.analysis import GoalStatus, composition, goal_status, metrics
from groei_rekenmodel.config import load_settings
from groei_rekenmodel.formatting import UI_TEXT, fmt_compact, fmt_currency, fmt_duration, fmt_number, fmt_pct, status_text, ui_text
from groei_rekenmodel.inputs import InputBounds, build_input, clamp, parse_number
from groei_rekenmodel.logsetup import setup_logging
from groei_rekenmodel.views import composition_frame, monthly_frame, sample_points, yearly_frame


class InputTests(unittest.TestCase):
    def test_parse_decimal_comma_locale(self) -> None:
        self.assertEqual(parse_number("R$ 1.000.000,50", locale="pt"), 1000000.5)
        self.assertEqual(parse_number("€ 100.000,00", locale="nl"), 100000.0)

    def test_parse_single_dot_is_decimal_in_comma_locale(self) -> None:
        self.assertEqual(parse_number("1000.50", locale="pt"), 1000.5)
        self.assertEqual(parse_number("7.5", locale="pt"), 7.5)
        self.assertEqual(parse_number("1.000.000", locale="pt"), 1000000.0)
        self.assertEqual(parse_number("1.000,5", locale="nl"), 1000.5)

    def test_parse_decimal_point_locale(self) -> None:
        self.assertEqual(parse_number("$1,234.5"), 1234.5)
        self.assertEqual(parse_number(" 10 % "), 10.0)

    def test_parse_rejects_empty_and_garbage(self) -> None:
        with self.assertRaises(ValueError):
            parse_number("  ")
        with self.assertRaises(ValueError):
            parse_number("abc")

    def test_clamp(self) -> None:
        self.assertEqual(clamp(-5.0, 0.0, 30.0), 0.0)
        self.assertEqual(clamp(45.0, 0.0, 30.0), 30.0)
        self.assertEqual(clamp(math.nan, 0.0, 30.0), 0.0)
        self.assertEqual(clamp(math.inf, 0.0, 30.0), 30.0)

    def test_build_input_clamps_to_ui_bounds(self) -> None:
        inp = build_input(
            initial_investment=-10.0,
            monthly_contribution=80000.0,
            annual_rate=55.0,
            years=70,
            target_goal=500000.0,
        )
        self.assertEqual(inp.initial_investment, 0.0)
        self.assertEqual(inp.monthly_contribution, 50000.0)
        self.assertEqual(inp.annual_rate, 30.0)
        self.assertEqual(inp.horizon_months, 600)
        self.assertEqual(inp.target_goal, 500000.0)

    def test_build_input_without_years_is_goal_mode(self) -> None:
        inp = build_input(initial_investment=100.0, monthly_contribution=10.0, annual_rate=5.0, target_goal=1000.0)
        self.assertIsNone(inp.horizon_months)
        self.assertIsInstance(months_to_reach_goal(inp), int)

    def test_custom_bounds(self) -> None:
        bounds = InputBounds(rate_max=12.0, years_min=2)
        inp = build_input(initial_investment=0.0, monthly_contribution=0.0, annual_rate=20.0, years=0, bounds=bounds)
        self.assertEqual(inp.annual_rate, 12.0)
        self.assertEqual(inp.horizon_months, 24)


class FormattingTests(unittest.TestCase):
    def test_number_locales(self) -> None:
        self.assertEqual(fmt_number(1234567.891), "1,234,567.89")
        self.assertEqual(fmt_number(1234567.891, locale="pt"), "1.234.567,89")
        self.assertEqual(fmt_number(1500, 0, locale="pt"), "1.500")

    def test_currency_and_percent(self) -> None:
        self.assertEqual(fmt_currency(23540.5), "$ 23,540.50")
        self.assertEqual(fmt_currency(-12.0, 0, locale="pt"), "-R$ 12")
        self.assertEqual(fmt_pct(0.797, 2, locale="pt"), "0,80%")

    def test_compact(self) -> None:
        self.assertEqual(fmt_compact(950), "950")
        self.assertEqual(fmt_compact(1200), "1.2k")
        self.assertEqual(fmt_compact(3400000, locale="pt"), "3,4M")

    def test_unknown_locale_raises(self) -> None:
        with self.assertRaises(ValueError):
            fmt_number(1.0, locale="de")

    def test_duration_texts(self) -> None:
        self.assertEqual(fmt_duration(0), "Already reached")
        self.assertEqual(fmt_duration(NOT_REACHED), "Not reachable within 50 years")
        self.assertEqual(fmt_duration(None), "-")
        self.assertEqual(fmt_duration(1), "1 month")
        self.assertEqual(fmt_duration(12), "1 year")
        self.assertEqual(fmt_duration(27), "2 years 3 months")

    def test_duration_texts_pt(self) -> None:
        self.assertEqual(fmt_duration(13, locale="pt"), "1 ano e 1 mês")
        self.assertEqual(fmt_duration(26, locale="pt"), "2 anos e 2 meses")
        self.assertEqual(fmt_duration(NOT_REACHED, locale="pt"), "Não atinge em até 50 anos")

    def test_ui_text_covers_both_locales(self) -> None:
        self.assertEqual(set(UI_TEXT["en"]), set(UI_TEXT["pt"]))
        for status in GoalStatus:
            for locale in ("en", "pt"):
                title, message = status_text(status.value, locale, goal="$ 1", years=10, needed="1 year")
                self.assertTrue(title)
                self.assertTrue(message)
        self.assertEqual(ui_text("tab_table", "pt"), "Tabela anual")
        with self.assertRaises(ValueError):
            ui_text("tab_table", "de")

    def test_status_text_fills_placeholders(self) -> None:
        title, message = status_text("reached", "en", goal="$ 1,000.00", years=10, needed="")
        self.assertEqual(title, "Goal reached")
        self.assertEqual(message, "You reach your goal of $ 1,000.00 within 10 years.")
        _, unreachable = status_text("unreachable", "pt")
        self.assertIn("50 anos", unreachable)
        self.assertEqual(ui_text("out_of_range", "en", low="0", high="30"), "Use a number between 0 and 30.")


class AnalysisTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = project_over_horizon(ProjectionInput(10000.0, 1000.0, 10.0, horizon_months=120))

    def test_composition_adds_up_to_final_value(self) -> None:
        comp = composition(self.result)
        self.assertEqual(comp.initial, 10000.0)
        self.assertEqual(comp.contributions, 120000.0)
        self.assertAlmostEqual(comp.total, self.result.final_value, places=6)

    def test_metrics(self) -> None:
        m = metrics(self.result, 10.0)
        self.assertAlmostEqual(m.monthly_rate_pct, 0.797414, places=5)
        self.assertAlmostEqual(m.roi_pct, self.result.total_returns / 130000.0 * 100.0)
        self.assertAlmostEqual(m.capital_multiplier, self.result.final_value / 130000.0)

    def test_metrics_without_investment_have_no_ratios(self) -> None:
        empty = project_over_horizon(ProjectionInput(0.0, 0.0, 10.0, horizon_months=12))
        m = metrics(empty, 10.0)
        self.assertIsNone(m.roi_pct)
        self.assertIsNone(m.capital_multiplier)

    def test_goal_status(self) -> None:
        result = project_over_horizon(ProjectionInput(0.0, 100.0, 0.0, horizon_months=12))
        self.assertEqual(goal_status(result, 1000.0, 10), GoalStatus.REACHED)
        self.assertEqual(goal_status(result, 1800.0, 18), GoalStatus.REACHABLE)
        self.assertEqual(goal_status(result, 5000.0, 50), GoalStatus.DISTANT)
        self.assertEqual(goal_status(result, 5000.0, NOT_REACHED), GoalStatus.UNREACHABLE)


class ViewTests(unittest.TestCase):
    def test_monthly_frame(self) -> None:
        result = project_over_horizon(ProjectionInput(1000.0, 100.0, 6.0, horizon_months=30))
        df = monthly_frame(result)
        self.assertEqual(len(df), 31)
        self.assertEqual(list(df.columns), ["month", "year", "balance", "contributions", "returns"])
        self.assertEqual(df["year"].iloc[12], 1.0)
        self.assertEqual(df["balance"].iloc[-1], result.final_value)

    def test_yearly_frame_cumulative_columns(self) -> None:
        result = project_over_horizon(ProjectionInput(1000.0, 100.0, 6.0, horizon_months=30))
        df = yearly_frame(result)
        self.assertEqual(list(df["months"]), [12, 12, 6])
        self.assertAlmostEqual(df["cumulative_contributions"].iloc[-1], result.total_contributions, places=6)
        self.assertAlmostEqual(df["cumulative_returns"].iloc[-1], result.total_returns, places=6)

    def test_yearly_frame_empty_for_zero_horizon(self) -> None:
        result = project_over_horizon(ProjectionInput(1000.0, 100.0, 6.0, horizon_months=0))
        self.assertTrue(yearly_frame(result).empty)

    def test_goal_seek_path_frames(self) -> None:
        result = seek_goal(ProjectionInput(1000.0, 100.0, 6.0, target_goal=5000.0))
        self.assertEqual(len(monthly_frame(result)), result.months_to_goal + 1)

    def test_composition_frame_shares(self) -> None:
        result = project_over_horizon(ProjectionInput(1000.0, 100.0, 0.0, horizon_months=10))
        df = composition_frame(composition(result))
        self.assertEqual(list(df["component"]), ["Initial", "Contributions", "Returns"])
        self.assertEqual(list(df["share_pct"]), [50.0, 50.0, 0.0])

    def test_composition_frame_all_zero(self) -> None:
        result = project_over_horizon(ProjectionInput(0.0, 0.0, 0.0, horizon_months=10))
        df = composition_frame(composition(result))
        self.assertEqual(list(df["share_pct"]), [0.0, 0.0, 0.0])

    def test_sample_points_keeps_last_row(self) -> None:
        result = project_over_horizon(ProjectionInput(1000.0, 100.0, 6.0, horizon_months=250))
        df = monthly_frame(result)
        sampled = sample_points(df, max_points=100)
        self.assertLess(len(sampled), len(df))
        self.assertEqual(sampled["month"].iloc[0], 0)
        self.assertEqual(sampled["month"].iloc[-1], 250)
        self.assertEqual(len(sample_points(df.head(50))), 50)


class ConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = load_settings({})
        self.assertEqual(settings.locale, "en")
        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(settings.default_initial, 10000.0)
        self.assertEqual(settings.default_goal, 1000000.0)
        self.assertEqual(settings.default_years, 10)

    def test_overrides_and_blank_values(self) -> None:
        settings = load_settings({"GROEI_LOCALE": "PT", "GROEI_DEFAULT_RATE": "7.5", "GROEI_LOG_LEVEL": " "})
        self.assertEqual(settings.locale, "pt")
        self.assertEqual(settings.default_rate, 7.5)
        self.assertEqual(settings.log_level, "INFO")

    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(ValueError):
            load_settings({"GROEI_DEFAULT_YEARS": "ten"})
        with self.assertRaises(ValueError):
            load_settings({"GROEI_LOCALE": "fr"})


class LoggingTests(unittest.TestCase):
    def test_setup_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug")
            setup_logging("debug")
            self.assertEqual(len(root.handlers), 1)
            self.assertEqual(root.level, logging.DEBUG)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


if __name__ == "__main__":
    unittest.main()
