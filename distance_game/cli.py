"""
Command Line Interface for the Distance Game

Usage:
    python -m distance_game.cli rank
    python -m distance_game.cli rank --csv players.csv
    python -m distance_game.cli plot --output field.png
    python -m distance_game.cli report --output-dir ./reports
"""

import argparse
import logging
import sys

from .config import DistanceGameConfig
from .data.adapters import SAMPLE_DATA_CSV, DataLoadError
from .orchestrator import DistanceGame
from .utils.logging import setup_logging, get_logger


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--csv',
        type=str,
        default=None,
        help='CSV file with Name,X,Y columns (default: built-in sample)'
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        default=None,
        help='Path to config YAML file'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Distance Game - the most isolated player wins",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Rank the built-in sample
    python -m distance_game.cli rank

    # Rank your own players
    python -m distance_game.cli rank --csv players.csv

    # Interactive chart with hover circles
    python -m distance_game.cli plot --show

    # HTML/JSON/CSV report with chart
    python -m distance_game.cli report --output-dir reports
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    rank_parser = subparsers.add_parser('rank', help='Print the ranked table')
    _add_common_arguments(rank_parser)

    plot_parser = subparsers.add_parser('plot', help='Draw the scatter chart')
    _add_common_arguments(plot_parser)
    plot_parser.add_argument(
        '--output', '-o',
        type=str,
        default='distance_game.png',
        help='Image file to write'
    )
    plot_parser.add_argument(
        '--show',
        action='store_true',
        help='Open an interactive window instead of only saving'
    )

    report_parser = subparsers.add_parser('report', help='Write a full report')
    _add_common_arguments(report_parser)
    report_parser.add_argument(
        '--output-dir', '-o',
        type=str,
        default=None,
        help='Output directory for reports'
    )

    subparsers.add_parser('sample', help='Print the built-in sample CSV')

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'sample':
        print(SAMPLE_DATA_CSV)
        return 0

    config = DistanceGameConfig.from_yaml(args.config) if args.config else DistanceGameConfig()
    if args.verbose:
        config.verbose = True
    if getattr(args, 'output_dir', None):
        config.report.output_dir = args.output_dir

    log_level = logging.DEBUG if config.verbose else logging.INFO
    setup_logging(level=log_level, log_file=config.log_file)
    logger = get_logger()

    game = DistanceGame(config=config)

    try:
        if args.csv:
            standings = game.load_csv(args.csv)
        else:
            standings = game.load()
    except DataLoadError as e:
        logger.error(f"Could not load players: {e}")
        return 1

    if args.command == 'rank':
        run_rank(game, standings)
    elif args.command == 'plot':
        run_plot(game, args)
    elif args.command == 'report':
        run_report(game)

    return 0


def run_rank(game, standings):
    """Print the ranked table and the headline result."""
    print(game.render_table())

    winner = standings.winner
    if winner is None:
        return

    print()
    print(f"Winner: {winner.name} ({winner.nearest_distance:.2f} from nearest player)")
    rival = standings.nearest_to_winner
    if rival is not None:
        print(f"Nearest rival: {rival[0].name}")


def run_plot(game, args):
    game.render_chart(path=args.output, show=args.show)
    print(f"Chart saved to: {args.output}")


def run_report(game):
    report = game.generate_report()
    print(f"Report saved to: {report.output_dir}/")


if __name__ == '__main__':
    sys.exit(main())
