import os
from dataclasses import dataclass
from datetime import date, time

@dataclass(frozen=True)
class LotterySpec:
    name: str
    n_universe: int
    n_pick: int
    max_games_per_ticket: int
    game_labels: tuple[str, ...]
    price_per_game: int
    comb_target: int

PRICE_PER_GAME_KRW = 1000

DHLOTTERY_BASE_URL = "https://www.dhlottery.co.kr"
LOTTO_NUMBER_URL = DHLOTTERY_BASE_URL + "/common.do?method=getLottoNumber&drwNo={}"

# round 1 was drawn on this Saturday, one draw per week since
FIRST_DRAW_DATE = date(2002, 12, 7)
DRAW_TIME = time(20, 45)

HTTP_TIMEOUT = float(os.getenv("LOTTO_HTTP_TIMEOUT", "10"))
HTTP_RETRIES = int(os.getenv("LOTTO_HTTP_RETRIES", "3"))
LOG_LEVEL = os.getenv("LOTTO_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOTTO_LOG_FILE", "")

def get_spec() -> LotterySpec:
    import math
    return LotterySpec(
        name="Lotto 6/45",
        n_universe=45,
        n_pick=6,
        max_games_per_ticket=5,
        game_labels=("A", "B", "C", "D", "E"),
        price_per_game=PRICE_PER_GAME_KRW,
        comb_target=math.comb(45, 6),
    )
