from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Iterator, Optional

from .config import get_spec


@dataclass(frozen=True)
class LottoTicketInfo:
    """
    Round number plus the games read from one ticket.

    Games are kept exactly as given (no sorting, no dedup). Lists passed in are
    snapshotted into tuples, so later changes to them do not leak in and the
    record stays hashable.
    """
    round: int
    games: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "games", tuple(tuple(g) for g in self.games))

    def get_round(self) -> int:
        return self.round

    def get_games(self) -> list[list[int]]:
        return [list(g) for g in self.games]

    def component1(self) -> int:
        return self.get_round()

    def component2(self) -> list[list[int]]:
        return self.get_games()

    def __iter__(self) -> Iterator:
        # round_, games = info
        yield self.component1()
        yield self.component2()

    def copy(
        self,
        *,
        round: Optional[int] = None,
        games: Optional[Iterable[Iterable[int]]] = None,
    ) -> LottoTicketInfo:
        changes: dict = {}
        if round is not None:
            changes["round"] = round
        if games is not None:
            changes["games"] = games
        return replace(self, **changes)


_GAME_TYPE_NAMES = {"A": "자동", "B": "수동"}


class GameType(Enum):
    AUTO = "A"
    MANUAL = "B"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _GAME_TYPE_NAMES[self.value]

    @classmethod
    def from_code(cls, code: str) -> GameType:
        for gt in cls:
            if gt.value == code:
                return gt
        return cls.AUTO


@dataclass(frozen=True)
class LottoGame:
    numbers: tuple[int, ...]
    game_type: GameType = GameType.AUTO
    label: str = ""
    game_id: int = 0
    winning_rank: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", tuple(self.numbers))


@dataclass(frozen=True)
class LottoTicket:
    round: int
    registered_date: datetime
    games: tuple[LottoGame, ...] = ()
    ticket_id: int = 0
    is_checked: bool = False
    qr_url: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "games", tuple(self.games))

    @classmethod
    def from_info(
        cls,
        info: LottoTicketInfo,
        registered_date: datetime | None = None,
        game_types: list[GameType] | None = None,
    ) -> LottoTicket:
        labels = get_spec().game_labels
        games = []
        for i, numbers in enumerate(info.games):
            gt = game_types[i] if game_types and i < len(game_types) else GameType.AUTO
            label = labels[i] if i < len(labels) else str(i + 1)
            games.append(LottoGame(numbers=numbers, game_type=gt, label=label))
        return cls(
            round=info.round,
            registered_date=registered_date or datetime.now(),
            games=tuple(games),
        )

    def to_info(self) -> LottoTicketInfo:
        return LottoTicketInfo(self.round, [g.numbers for g in self.games])


@dataclass(frozen=True)
class FirstPrizeInfo:
    win_amount: int
    winner_count: int
    total_sales_amount: int


@dataclass(frozen=True)
class LottoResult:
    round: int
    draw_date: date
    numbers: tuple[int, ...]
    bonus_number: int
    first_prize: FirstPrizeInfo

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", tuple(sorted(self.numbers)))


@dataclass(frozen=True)
class WinningCheckResult:
    round: int
    user_numbers: tuple[int, ...]
    winning_numbers: tuple[int, ...]
    bonus_number: int
    matched_numbers: tuple[int, ...]
    bonus_matched: bool
    rank: int

    @property
    def is_winner(self) -> bool:
        return self.rank in WinningStatistics.VALID_WINNING_RANKS


@dataclass(frozen=True)
class WinningStatistics:
    total_games_played: int
    checked_games_count: int
    winning_games_count: int
    winning_rate: float
    rank_breakdown: dict[int, int] = field(hash=False)
    total_tickets: int

    # 1st..5th place
    VALID_WINNING_RANKS = range(1, 6)

    @property
    def formatted_winning_rate(self) -> str:
        return f"{self.winning_rate:.1f}%"

    @property
    def has_data(self) -> bool:
        return self.checked_games_count > 0

    @property
    def has_wins(self) -> bool:
        return self.winning_games_count > 0

    @classmethod
    def empty(cls) -> WinningStatistics:
        return cls(
            total_games_played=0,
            checked_games_count=0,
            winning_games_count=0,
            winning_rate=0.0,
            rank_breakdown={r: 0 for r in cls.VALID_WINNING_RANKS},
            total_tickets=0,
        )


class TicketSortType(Enum):
    REGISTERED_DATE_DESC = "최신 등록순"
    REGISTERED_DATE_ASC = "오래된 등록순"
    ROUND_DESC = "최신 회차순"
    ROUND_ASC = "오래된 회차순"

    @property
    def display_name(self) -> str:
        return self.value


DEFAULT_TICKET_SORT = TicketSortType.REGISTERED_DATE_DESC


@dataclass(frozen=True)
class SyncResult:
    success_count: int
    failed_count: int
    total_count: int

    @property
    def is_full_success(self) -> bool:
        return self.failed_count == 0

    @property
    def is_partial_success(self) -> bool:
        return self.success_count > 0 and self.failed_count > 0

    @property
    def is_full_failure(self) -> bool:
        return self.success_count == 0 and self.total_count > 0
