"""Lightweight REST client for the pycourt API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_profile(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid profile JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pycourt REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("profile", type=Path, nargs="?", help="Scenario profile JSON")
    parser.add_argument("--opponents", type=Path, help="Opponent teams CSV to rank")
    parser.add_argument("--opponent", help="Opponent name from the ranked board")
    parser.add_argument("--runs", type=int, default=None, help="Monte Carlo iterations per plan")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible simulations")
    parser.add_argument("--rank-only", action="store_true", help="Rank the opponents CSV and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        opponent_net = 0.0
        if args.opponents:
            files = {"teams_csv": (args.opponents.name, args.opponents.read_bytes(), "text/csv")}
            resp = client.post("/teams/rank", files=files)
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            board = resp.json()
            print("Contender board:", json.dumps(board[:8], indent=2))
            if args.opponent:
                match = next((row for row in board if row["name"] == args.opponent), None)
                if match is None:
                    raise SystemExit(f"opponent {args.opponent} not found")
                opponent_net = match["net"]

        if args.rank_only:
            return
        if args.profile is None:
            raise SystemExit("profile is required unless using --rank-only")

        profile = load_profile(args.profile)
        plan_request = {
            "team": profile["team"],
            "players": profile["players"],
            "budget": profile.get("budget", 36_000),
            "formation": profile.get("formation", "balanced"),
            "priority": profile.get("priority", "balanced"),
            "intensity": profile.get("intensity", 6),
            "min_minutes": profile.get("min_minutes", 22),
            "injured_player_ids": profile.get("injured_player_ids", []),
            "opponent_net_rating": opponent_net,
            "simulation_runs": args.runs,
            "seed": args.seed,
        }
        resp = client.post("/plans", json=plan_request)
        resp.raise_for_status()
        payload = resp.json()
        for plan in payload["plans"]:
            print(f"{plan['label']}: score {plan['score']} (win {plan['win_probability']}%)")
        print("Selected plan:", json.dumps(payload["selected"], indent=2))
        print("Sensitivity:", json.dumps(payload["sensitivity"], indent=2))


if __name__ == "__main__":
    main()
