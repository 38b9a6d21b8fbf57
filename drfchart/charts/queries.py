"""Read-only lookups over a parsed chart."""

from typing import Optional

from drfchart.models.chart import ChartFile, ChartRace, ChartStarter


def get_chart_race(chart: ChartFile, race_number: int) -> Optional[ChartRace]:
    """Get race by number, None if the chart has no such race."""
    for race in chart.races:
        if race.race_number == race_number:
            return race
    return None


def get_active_starters(race: ChartRace) -> list[ChartStarter]:
    """Non-scratched starters, in finish order."""
    return [s for s in race.starters if not s.is_scratched]


def get_winner(race: ChartRace) -> Optional[ChartStarter]:
    """The starter that finished first, None if nobody did."""
    for starter in race.starters:
        if starter.finish_position == 1 and not starter.is_scratched:
            return starter
    return None


def get_top_finishers(race: ChartRace, count: int = 3) -> list[ChartStarter]:
    """First ``count`` starters in finish order.

    Scratches sort last, so they only show up when ``count`` exceeds the
    number of finishers. Filter with get_active_starters() to exclude them.
    """
    if count <= 0:
        return []
    return race.starters[:count]


def get_race_payoffs(race: ChartRace) -> dict[str, Optional[float]]:
    """Win payoff of the winner, place payoff of 2nd, show payoff of 3rd."""
    by_position: dict[int, ChartStarter] = {}
    for starter in get_active_starters(race):
        # Dead heats: first listed starter at a position wins
        if starter.finish_position in (1, 2, 3):
            by_position.setdefault(starter.finish_position, starter)
    winner = by_position.get(1)
    second = by_position.get(2)
    third = by_position.get(3)
    return {
        "win": winner.win_payoff if winner else None,
        "place": second.place_payoff if second else None,
        "show": third.show_payoff if third else None,
    }
