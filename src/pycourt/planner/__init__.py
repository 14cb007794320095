"""Compose engine components into comparable strategy plans."""

from .service import PlanReport, StrategyPlan, build_plan_report, build_strategy_plans, select_plan

__all__ = ["PlanReport", "StrategyPlan", "build_plan_report", "build_strategy_plans", "select_plan"]
