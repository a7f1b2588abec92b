"""Entry point for swish package."""

import argparse
import logging
import random


def main() -> None:
    """Main entry point for the Swish command line."""
    parser = argparse.ArgumentParser(
        description="Swish - Basketball Player Modeling",
        prog="swish",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Generate a batch of players and print them",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of players to generate (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: unseeded)",
    )
    parser.add_argument(
        "--names",
        type=str,
        default=None,
        help="JSON file of name tables (default: built-in names)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.demo:
        parser.print_help()
        return

    from swish.core.enums import TeamSlot
    from swish.core.league import LeagueSettings
    from swish.generators import PlayerGenerator, load_name_tables

    settings = LeagueSettings()
    rng = random.Random(args.seed)
    names = load_name_tables(args.names) if args.names else None
    generate = PlayerGenerator(settings, rng=rng, names=names)

    print("Swish - Basketball Player Modeling (Demo Mode)")
    print("=" * 50)

    for _ in range(args.count):
        age = rng.randint(19, 34)
        tid = rng.randint(int(TeamSlot.FREE_AGENT), settings.num_teams - 1)
        player = generate(tid, age, settings.season - max(age - 19, 0), rng.randint(1, settings.num_teams))
        r = player.latest_ratings
        skills = " ".join(s.value for s in r.skills) or "-"
        print(
            f"{player.full_name:<24} {r.pos:<3} age {age:<3} "
            f"{r.ovr:>3}/{r.pot:<3} skills {skills:<14} "
            f"value {player.values.value:5.1f}  "
            f"${player.contract.amount}K thru {player.contract.exp}"
        )


if __name__ == "__main__":
    main()
