"""
Standalone CLI for the score leaderboard.

Usage:
    python -m src.scores submit alice 95
    python -m src.scores list --period week --limit 20
    python -m src.scores list --store results/scores.json --offset 10
"""

import argparse
import sys

from .leaderboard import ScoreStorage, ScoreSubmissionError


DEFAULT_STORE = "results/scores.json"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Submit and list hex word-search scores",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.scores submit alice 95
  python -m src.scores list --period today
        """
    )
    parser.add_argument(
        "--store",
        default=DEFAULT_STORE,
        help=f"Path to the scores JSON file (default: {DEFAULT_STORE})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit = subparsers.add_parser("submit", help="Record a completion time")
    submit.add_argument("username", help="Player name")
    submit.add_argument("score", help="Completion time in seconds")

    listing = subparsers.add_parser("list", help="Show the leaderboard")
    listing.add_argument(
        "--period",
        choices=["today", "week", "month", "all"],
        default="all",
        help="Time window to show (default: all)"
    )
    listing.add_argument("--limit", type=int, default=10, help="Page size (default: 10)")
    listing.add_argument("--offset", type=int, default=0, help="Scores to skip (default: 0)")

    args = parser.parse_args(argv)

    try:
        storage = ScoreStorage(path=args.store)
    except Exception as e:
        print(f"Error loading scores from {args.store}: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "submit":
            score = storage.create_score({"username": args.username, "score": args.score})
            print(f"Saved score #{score.id}: {score.username} {score.score}s")
            return 0

        scores = storage.get_top_scores(limit=args.limit, offset=args.offset, period=args.period)
    except ScoreSubmissionError as e:
        where = f" ({e.field})" if e.field else ""
        print(f"Error{where}: {e.message}", file=sys.stderr)
        return 1

    if not scores:
        print("No scores yet")
        return 0

    for rank, score in enumerate(scores, start=args.offset + 1):
        print(f"{rank:>3}. {score.username:<32} {score.score:>6}s  {score.created_at:%Y-%m-%d %H:%M}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
