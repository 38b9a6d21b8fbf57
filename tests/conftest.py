"""Shared test fixtures for the DRF chart parser.

Sample lines come from the Saratoga 2006-07-27 chart (SAR20060727.chart.txt).
"""

from types import SimpleNamespace

import pytest

from drfchart.charts.diagnostics import WarningCollector
from drfchart.config import get_settings

SAMPLE_HEADER = '"H","USA","SAR","20060727","9","D","Saratoga"'

SAMPLE_RACE = (
    '"R","1","TB","AOC"," "," ","4U"," ","51000","0","51000","0"," ","0"," ","0"," ","0"," ","0"," ","0"," ","0"," ","0","30000","30000"," ","1650","F","T","M","11"," "," "," ","0100","0135","0100"," ","OC 30k/N1X -N","Firm","","",""," ","","","83","342.58","0","0","0","0","0"," ","","150542","Good","Cloudy","","","Y"'
)

SAMPLE_STARTER_1 = (
    '"S","1","000006217149TB","Langburg","20010217","ON","TB","Gelding","Bay","Marienburg","1995","TB","Langfuhr","1992","TB","Conquistador Cielo","1979","TB","Danzig","1977","TB","156","0","L","","30600","Murphy","Cyril"," "," ","Voss","Thomas","H.","Blackwoods Stable"," "," ","210","N","B","0","N","4","2","0","2","3","4","4","2","1","1","100","10","150","150","150","10","10","250","260","350","10","0","N","0","dug in gamely inside","close up in hand, inside rally, dug in gamely inside, driving","6.20","6.40","4.10","N","","","","","","","","","","","","N","0","N","","0","","","Gustav Schickendanz","000000003939TE","000000084353JE"'
)

SAMPLE_STARTER_2 = (
    '"S","1","000004477877TB","Malagash","19980414","NY","TB","Gelding","Bay","Senorita Constanza","1989","TB","Signal Tap","1991","TB","His Majesty","1968","TB","Fappiano","1977","TB","152","0","L","","9180","Massey","Robert"," "," ","Voss","Thomas","H.","Voss","Mrs. Thomas","H.","210","N","B","0","N","6","2B","0","1","1","1","1","1","2","2","10","100","50","50","10","225","0","0","0","0","0","10","N","30000","came again again","speed in hand, made pace, dropped back, came again again","6.20","6.40","4.10","N","","","","","","","","","","","","N","0","N","","0","","","John R. Michelotti","000000003939TE","000000084355JE"'
)

SAMPLE_SCRATCH = (
    '"S","2","000007125665TB","Indian Love Call","20040303","KY","TB","Filly","Bay","Mood Music","1998","TB","Cherokee Run","1990","TB","Kingmambo","1990","TB","Runaway Groom","1979","TB","118","0","","","0","Smith","Mike","E."," ","McGaughey III","Claude","R.","Phipps","Cynthia"," ","0","N"," ","0"," ","99","SCR","0","0","0","0","0","0","0","0","0","0","0","0","0","0","0","0","0","0","0","0","N","0"," "," ","0.00","0.00","0.00","N","","","","","","","","","","","Trainer","N","0","N","","0","","","Cynthia Phipps","000000001217TE","000000001770JE"'
)

SAMPLE_RACE_2 = (
    '"R","2","TB","MSW"," ","F","02"," ","47000","0","47000","0"," ","0"," ","0"," ","0"," ","0"," ","0"," ","0"," ","0","0","0"," ","550","F","D","D","11"," "," "," ","0135","0207","0138"," ","Md Sp Wt 47k","Fast","","17","89"," ","","","83","106.09","2173","4582","5924","0","0"," ","","401768","Good","Cloudy","","","Y"'
)


def build_chart(*lines: str) -> str:
    """Join chart lines the way they appear on disk."""
    return "\n".join(lines)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; make env overrides in one test invisible to the next."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sink() -> WarningCollector:
    return WarningCollector(source="test.chart.txt")


@pytest.fixture
def sample_chart() -> str:
    """Header, race 1 and its two starters, with the runner-up listed first."""
    return build_chart(SAMPLE_HEADER, SAMPLE_RACE, SAMPLE_STARTER_2, SAMPLE_STARTER_1)


@pytest.fixture
def scratch_chart() -> str:
    """Header and race 2 holding only a scratched starter."""
    return build_chart(SAMPLE_HEADER, SAMPLE_RACE_2, SAMPLE_SCRATCH)


@pytest.fixture
def lines() -> SimpleNamespace:
    """The raw sample lines, for tests that assemble their own charts."""
    return SimpleNamespace(
        header=SAMPLE_HEADER,
        race=SAMPLE_RACE,
        race_2=SAMPLE_RACE_2,
        starter_1=SAMPLE_STARTER_1,
        starter_2=SAMPLE_STARTER_2,
        scratch=SAMPLE_SCRATCH,
    )
