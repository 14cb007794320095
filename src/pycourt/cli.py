"""Command-line interface for comparing strategy plans from a scenario profile."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from pydantic import ValidationError

from pycourt.analytics import detect_game_anomalies, estimate_playoff_odds, net_rating, team_momentum
from pycourt.config import default_simulation_runs, iter_formations, max_pool_size
from pycourt.config_loader import ScenarioProfile
from pycourt.ingest import find_contender, load_team_csv, rank_teams_by_contender_score
from pycourt.planner import build_plan_report


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare basketball strategy plans for a scenario profile")
    parser.add_argument("profile", type=Path, help="Path to a scenario profile JSON")
    parser.add_argument("--opponents", type=Path, default=None, help="Optional opponent teams CSV")
    parser.add_argument(
        "--opponent",
        default=None,
        help="Opponent name from the opponents CSV (league average when omitted)",
    )
    parser.add_argument(
        "--formation",
        choices=[formation.key for formation in iter_formations()],
        default=None,
        help="Formation to use instead of the profile formation",
    )
    parser.add_argument("--plan", default=None, help="Plan id to explain instead of the best-scoring plan")
    parser.add_argument("--runs", type=int, default=None, help="Monte Carlo iterations per plan")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible simulations")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write the plan report JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args()


def _load_profile(path: Path) -> ScenarioProfile:
    try:
        return ScenarioProfile.load(path)
    except FileNotFoundError as exc:
        raise SystemExit(f"Profile {path} not found") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid profile {path}: {exc}") from exc


def _resolve_opponent(args: argparse.Namespace) -> float:
    if args.opponents is None:
        if args.opponent:
            raise SystemExit("--opponent requires --opponents")
        return 0.0

    ranked = rank_teams_by_contender_score(load_team_csv(args.opponents))
    if not ranked:
        print(f"No valid team rows in {args.opponents}; using league average opponent")
        return 0.0

    print("Contender board:")
    for index, row in enumerate(ranked[:8], start=1):
        print(f"  {index}. {row.name:<20} net {row.net:+.1f}  score {row.contender_score:.2f}")

    if not args.opponent:
        return 0.0
    match = find_contender(ranked, args.opponent)
    if match is None:
        raise SystemExit(f"Opponent {args.opponent!r} not found in {args.opponents}")
    return match.net


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    profile = _load_profile(args.profile)
    limit = max_pool_size()
    if len(profile.players) > limit:
        raise SystemExit(f"Player pool has {len(profile.players)} players; at most {limit} are supported")

    opponent_net = _resolve_opponent(args)
    team = profile.team
    print(
        f"{team.name}: net {net_rating(team):+.1f}, playoff odds {estimate_playoff_odds(team)}%, "
        f"momentum {team_momentum(profile.games):+.1f}"
    )
    for anomaly in detect_game_anomalies(profile.games):
        print(f"  {anomaly.game} vs {anomaly.opponent}: {anomaly.label} ({anomaly.anomaly_score:.1f})")

    runs = args.runs or profile.simulation_runs or default_simulation_runs()
    seed = args.seed if args.seed is not None else profile.seed

    try:
        report = build_plan_report(
            team,
            profile.players,
            profile.budget,
            plan_id=args.plan,
            opponent_net_rating=opponent_net,
            formation=args.formation or profile.formation,
            priority=profile.priority,
            intensity=profile.intensity,
            min_minutes=profile.min_minutes,
            excluded_player_ids=profile.injured_player_ids,
            iterations=runs,
            seed=seed,
        )
    except KeyError as exc:
        raise SystemExit(str(exc.args[0])) from exc

    for plan in report.plans:
        marker = "*" if plan.plan_id == report.selected.plan_id else " "
        print(
            f"{marker} {plan.label:<18} score {plan.score:7.2f}  win {plan.win_probability:5.1f}%  "
            f"monte {plan.monte_carlo.win_rate:5.1f}%  margin {plan.monte_carlo.average_margin:+.2f}  "
            f"risk {plan.risk_index:.1f}"
        )

    selected = report.selected
    if selected.lineup.is_feasible:
        names = ", ".join(f"{p.name} ({p.position.value})" for p in selected.lineup.lineup)
        print(f"Lineup (${selected.lineup.total_salary}): {names}")
    else:
        print("No feasible lineup for the chosen formation and budget")
    for impact in report.sensitivity:
        print(f"  {impact.factor:<10} {impact.delta_win_probability:+.2f} win %")
    for rec in report.recommendations:
        print(f"  [{rec.impact:.1f}] {rec.title}: {rec.detail}")

    if args.output:
        args.output.write_text(json.dumps(asdict(report), indent=2, default=_json_default), encoding="utf-8")
        print(f"Wrote plan report to {args.output}")


def _json_default(value):
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


if __name__ == "__main__":
    main()
