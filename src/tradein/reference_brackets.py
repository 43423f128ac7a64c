"""Built-in outboard trade value brackets (CAD).

Used when the caller cannot supply a bracket table. Rows are
(horsepower, excellent, good, fair, poor) per brand and year range.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple

from tradein.data_models import TradeValuationBracket

BracketRow = Tuple[int, int, int, int, int]

REFERENCE_TABLE: Dict[str, Dict[str, Tuple[BracketRow, ...]]] = {
    "Mercury": {
        "2020-2024": (
            (5, 800, 650, 500, 300),
            (10, 1400, 1150, 900, 550),
            (15, 2000, 1650, 1300, 800),
            (20, 2600, 2150, 1700, 1000),
            (25, 3200, 2600, 2000, 1200),
            (40, 4500, 3700, 2900, 1800),
            (50, 5200, 4300, 3400, 2100),
            (60, 6000, 4900, 3800, 2300),
            (75, 7200, 5900, 4600, 2800),
            (90, 8500, 7000, 5500, 3300),
            (115, 11000, 9000, 7000, 4200),
            (150, 14500, 12000, 9500, 5700),
            (200, 18000, 14800, 11600, 7000),
            (250, 22000, 18000, 14000, 8400),
            (300, 26000, 21000, 16500, 9900),
        ),
        "2015-2019": (
            (5, 700, 550, 425, 250),
            (10, 1200, 950, 750, 450),
            (15, 1700, 1350, 1050, 650),
            (20, 2200, 1750, 1400, 850),
            (25, 2800, 2200, 1700, 1000),
            (40, 3900, 3100, 2400, 1500),
            (50, 4500, 3600, 2800, 1700),
            (60, 5200, 4100, 3200, 1900),
            (75, 6200, 4900, 3800, 2300),
            (90, 7300, 5800, 4500, 2700),
            (115, 9500, 7500, 5800, 3500),
            (150, 12500, 10000, 7800, 4700),
            (200, 15500, 12400, 9600, 5800),
            (250, 19000, 15200, 11800, 7100),
            (300, 22500, 18000, 14000, 8400),
        ),
        "2010-2014": (
            (5, 600, 475, 375, 225),
            (10, 1050, 825, 650, 400),
            (15, 1500, 1175, 925, 575),
            (20, 1950, 1525, 1200, 750),
            (25, 2450, 1900, 1500, 900),
            (40, 3400, 2700, 2100, 1300),
            (50, 3900, 3100, 2400, 1500),
            (60, 4500, 3600, 2800, 1700),
            (75, 5400, 4300, 3300, 2000),
            (90, 6400, 5100, 3900, 2400),
            (115, 8300, 6600, 5100, 3100),
            (150, 10900, 8700, 6800, 4100),
            (200, 13500, 10800, 8400, 5100),
            (250, 16600, 13300, 10300, 6200),
            (300, 19700, 15800, 12200, 7400),
        ),
        "2005-2009": (
            (5, 500, 400, 300, 180),
            (10, 900, 700, 550, 325),
            (15, 1300, 1000, 800, 475),
            (20, 1700, 1300, 1025, 625),
            (25, 2100, 1650, 1300, 775),
            (40, 2900, 2300, 1800, 1100),
            (50, 3400, 2700, 2100, 1300),
            (60, 3900, 3100, 2400, 1450),
            (75, 4700, 3700, 2900, 1750),
            (90, 5500, 4400, 3400, 2050),
            (115, 7200, 5700, 4400, 2650),
            (150, 9500, 7600, 5900, 3550),
            (200, 11700, 9400, 7300, 4400),
            (250, 14400, 11500, 8900, 5400),
            (300, 17000, 13600, 10600, 6400),
        ),
    },
    "Yamaha": {
        "2020-2024": (
            (5, 750, 600, 475, 285),
            (10, 1300, 1050, 825, 500),
            (15, 1850, 1500, 1175, 725),
            (20, 2400, 1950, 1525, 925),
            (25, 3000, 2400, 1800, 1100),
            (40, 4200, 3400, 2600, 1600),
            (50, 4800, 3900, 3000, 1800),
            (60, 5500, 4400, 3400, 2000),
            (75, 6600, 5300, 4100, 2500),
            (90, 7800, 6200, 4800, 2900),
            (115, 10000, 8000, 6200, 3700),
            (150, 13200, 10600, 8200, 4900),
            (200, 16400, 13100, 10200, 6100),
            (250, 20000, 16000, 12400, 7400),
            (300, 23600, 18900, 14700, 8800),
        ),
        "2015-2019": (
            (5, 650, 525, 400, 240),
            (10, 1100, 900, 700, 425),
            (15, 1575, 1275, 1000, 600),
            (20, 2050, 1650, 1300, 800),
            (25, 2600, 2100, 1600, 950),
            (40, 3600, 2900, 2200, 1350),
            (50, 4100, 3300, 2500, 1500),
            (60, 4700, 3800, 2900, 1750),
            (75, 5700, 4600, 3500, 2100),
            (90, 6700, 5400, 4100, 2500),
            (115, 8600, 6900, 5300, 3200),
            (150, 11400, 9100, 7000, 4200),
            (200, 14100, 11300, 8700, 5200),
            (250, 17200, 13800, 10600, 6400),
            (300, 20300, 16200, 12600, 7600),
        ),
        "2010-2014": (
            (5, 550, 450, 350, 210),
            (10, 950, 775, 600, 375),
            (15, 1375, 1100, 875, 525),
            (20, 1800, 1425, 1125, 700),
            (25, 2275, 1800, 1400, 850),
            (40, 3150, 2500, 1950, 1200),
            (50, 3600, 2850, 2200, 1350),
            (60, 4100, 3300, 2550, 1550),
            (75, 5000, 4000, 3100, 1900),
            (90, 5850, 4700, 3600, 2200),
            (115, 7500, 6000, 4650, 2800),
            (150, 10000, 8000, 6200, 3700),
            (200, 12350, 9900, 7650, 4600),
            (250, 15000, 12000, 9300, 5600),
            (300, 17800, 14200, 11000, 6650),
        ),
        "2005-2009": (
            (5, 475, 375, 300, 175),
            (10, 825, 650, 500, 300),
            (15, 1175, 925, 725, 450),
            (20, 1550, 1225, 950, 575),
            (25, 1950, 1550, 1200, 725),
            (40, 2700, 2150, 1650, 1000),
            (50, 3100, 2450, 1900, 1150),
            (60, 3550, 2800, 2175, 1300),
            (75, 4275, 3400, 2625, 1600),
            (90, 5050, 4025, 3100, 1875),
            (115, 6450, 5150, 4000, 2400),
            (150, 8550, 6850, 5300, 3175),
            (200, 10600, 8475, 6550, 3950),
            (250, 12900, 10300, 8000, 4800),
            (300, 15250, 12200, 9450, 5700),
        ),
    },
    "Honda": {
        "2020-2024": (
            (5, 725, 575, 450, 275),
            (10, 1250, 1000, 800, 475),
            (15, 1775, 1425, 1125, 700),
            (20, 2300, 1850, 1475, 900),
            (25, 2900, 2300, 1800, 1100),
            (40, 4000, 3200, 2500, 1500),
            (50, 4600, 3700, 2900, 1750),
            (60, 5300, 4200, 3300, 2000),
            (75, 6300, 5000, 3900, 2350),
            (90, 7400, 5900, 4600, 2750),
            (115, 9600, 7700, 6000, 3600),
            (150, 12600, 10100, 7800, 4700),
            (200, 15600, 12500, 9700, 5800),
            (250, 19000, 15200, 11800, 7100),
        ),
        "2015-2019": (
            (5, 625, 500, 375, 225),
            (10, 1075, 850, 650, 400),
            (15, 1525, 1225, 950, 575),
            (20, 1975, 1575, 1225, 750),
            (25, 2500, 2000, 1500, 900),
            (40, 3400, 2700, 2100, 1300),
            (50, 3900, 3100, 2400, 1450),
            (60, 4500, 3600, 2800, 1700),
            (75, 5400, 4300, 3300, 2000),
            (90, 6300, 5000, 3900, 2350),
            (115, 8200, 6600, 5100, 3100),
            (150, 10800, 8600, 6700, 4000),
            (200, 13400, 10700, 8300, 5000),
            (250, 16300, 13000, 10100, 6100),
        ),
        "2010-2014": (
            (5, 525, 425, 325, 200),
            (10, 925, 725, 575, 350),
            (15, 1325, 1050, 825, 500),
            (20, 1700, 1350, 1050, 650),
            (25, 2150, 1700, 1325, 800),
            (40, 2950, 2350, 1825, 1100),
            (50, 3375, 2700, 2100, 1275),
            (60, 3900, 3100, 2425, 1475),
            (75, 4675, 3725, 2875, 1750),
            (90, 5475, 4350, 3375, 2050),
            (115, 7100, 5675, 4400, 2675),
            (150, 9350, 7475, 5800, 3500),
            (200, 11600, 9275, 7200, 4350),
            (250, 14100, 11275, 8750, 5300),
        ),
        "2005-2009": (
            (5, 450, 350, 275, 165),
            (10, 800, 625, 500, 300),
            (15, 1150, 900, 700, 425),
            (20, 1475, 1175, 900, 550),
            (25, 1850, 1475, 1150, 700),
            (40, 2550, 2025, 1575, 950),
            (50, 2925, 2325, 1800, 1100),
            (60, 3375, 2700, 2100, 1275),
            (75, 4050, 3225, 2500, 1500),
            (90, 4750, 3775, 2925, 1775),
            (115, 6150, 4900, 3800, 2300),
            (150, 8100, 6475, 5025, 3025),
            (200, 10050, 8025, 6225, 3750),
            (250, 12225, 9775, 7575, 4575),
        ),
    },
    "Suzuki": {
        "2020-2024": (
            (5, 675, 550, 425, 250),
            (10, 1150, 925, 725, 450),
            (15, 1650, 1325, 1050, 650),
            (20, 2150, 1750, 1375, 850),
            (25, 2700, 2200, 1700, 1000),
            (40, 3700, 3000, 2300, 1400),
            (50, 4200, 3400, 2600, 1600),
            (60, 4800, 3900, 3000, 1800),
            (75, 5700, 4600, 3500, 2100),
            (90, 6700, 5400, 4100, 2500),
            (115, 8700, 7000, 5400, 3250),
            (150, 11400, 9100, 7000, 4200),
            (200, 14100, 11300, 8700, 5200),
            (250, 17200, 13800, 10600, 6400),
        ),
        "2015-2019": (
            (5, 575, 475, 375, 225),
            (10, 1000, 800, 625, 400),
            (15, 1425, 1150, 900, 575),
            (20, 1875, 1500, 1175, 725),
            (25, 2350, 1900, 1475, 875),
            (40, 3200, 2575, 2000, 1225),
            (50, 3650, 2950, 2275, 1400),
            (60, 4175, 3375, 2600, 1575),
            (75, 4950, 4000, 3050, 1850),
            (90, 5825, 4700, 3575, 2175),
            (115, 7575, 6100, 4700, 2850),
            (150, 9900, 7925, 6100, 3675),
            (200, 12275, 9825, 7575, 4550),
            (250, 14950, 11975, 9225, 5575),
        ),
        "2010-2014": (
            (5, 500, 400, 325, 200),
            (10, 875, 700, 550, 350),
            (15, 1250, 1000, 800, 500),
            (20, 1625, 1300, 1025, 625),
            (25, 2050, 1650, 1275, 775),
            (40, 2800, 2250, 1750, 1075),
            (50, 3200, 2575, 2000, 1225),
            (60, 3650, 2950, 2275, 1375),
            (75, 4325, 3475, 2675, 1625),
            (90, 5100, 4100, 3125, 1900),
            (115, 6625, 5325, 4100, 2500),
            (150, 8650, 6925, 5350, 3225),
            (200, 10700, 8575, 6625, 4000),
            (250, 13050, 10450, 8050, 4875),
        ),
        "2005-2009": (
            (5, 425, 350, 275, 165),
            (10, 750, 600, 475, 300),
            (15, 1075, 850, 675, 425),
            (20, 1400, 1125, 875, 525),
            (25, 1775, 1425, 1100, 675),
            (40, 2425, 1950, 1500, 925),
            (50, 2775, 2225, 1725, 1050),
            (60, 3175, 2550, 1975, 1200),
            (75, 3750, 3000, 2325, 1400),
            (90, 4425, 3550, 2725, 1650),
            (115, 5750, 4600, 3550, 2150),
            (150, 7500, 6000, 4650, 2800),
            (200, 9300, 7450, 5750, 3475),
            (250, 11325, 9075, 7000, 4225),
        ),
    },
    "Evinrude": {
        "2015-2019": (
            (5, 550, 450, 350, 210),
            (10, 950, 775, 600, 375),
            (15, 1350, 1100, 875, 525),
            (20, 1750, 1425, 1125, 700),
            (25, 2200, 1800, 1400, 850),
            (40, 3000, 2400, 1900, 1150),
            (50, 3400, 2700, 2100, 1300),
            (60, 3900, 3100, 2400, 1450),
            (75, 4600, 3700, 2900, 1750),
            (90, 5400, 4300, 3300, 2000),
            (115, 7000, 5600, 4300, 2600),
            (150, 9200, 7400, 5700, 3400),
            (200, 11400, 9100, 7000, 4200),
            (250, 13900, 11100, 8600, 5200),
        ),
        "2010-2014": (
            (5, 475, 375, 300, 175),
            (10, 825, 650, 500, 325),
            (15, 1175, 925, 750, 450),
            (20, 1525, 1200, 950, 600),
            (25, 1900, 1525, 1200, 725),
            (40, 2600, 2075, 1625, 1000),
            (50, 2950, 2350, 1825, 1125),
            (60, 3375, 2700, 2075, 1250),
            (75, 4000, 3200, 2500, 1525),
            (90, 4700, 3750, 2875, 1750),
            (115, 6075, 4875, 3750, 2275),
            (150, 8000, 6400, 4950, 2975),
            (200, 9900, 7925, 6100, 3675),
            (250, 12075, 9675, 7475, 4525),
        ),
        "2005-2009": (
            (5, 400, 325, 250, 150),
            (10, 700, 550, 425, 275),
            (15, 1000, 800, 625, 375),
            (20, 1300, 1025, 800, 500),
            (25, 1650, 1300, 1025, 625),
            (40, 2250, 1800, 1400, 850),
            (50, 2550, 2025, 1575, 950),
            (60, 2925, 2325, 1800, 1100),
            (75, 3475, 2775, 2150, 1300),
            (90, 4075, 3250, 2500, 1525),
            (115, 5275, 4225, 3250, 1975),
            (150, 6925, 5550, 4275, 2575),
            (200, 8575, 6875, 5300, 3200),
            (250, 10450, 8375, 6475, 3925),
        ),
    },
}


@lru_cache(maxsize=1)
def builtin_brackets() -> Tuple[TradeValuationBracket, ...]:
    rows = []
    for brand, ranges in REFERENCE_TABLE.items():
        for year_range, entries in ranges.items():
            for hp, excellent, good, fair, poor in entries:
                rows.append(
                    TradeValuationBracket(
                        brand=brand,
                        year_range=year_range,
                        horsepower=float(hp),
                        excellent=float(excellent),
                        good=float(good),
                        fair=float(fair),
                        poor=float(poor),
                    )
                )
    return tuple(rows)
