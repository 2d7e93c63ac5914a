from __future__ import annotations

import math
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Iterable

from .config import DRAW_TIME, FIRST_DRAW_DATE, LotterySpec
from .errors import InvalidTicketError, RoundMismatchError
from .models import (
    DEFAULT_TICKET_SORT,
    LottoResult,
    LottoTicket,
    LottoTicketInfo,
    TicketSortType,
    WinningCheckResult,
    WinningStatistics,
)

def format_game(numbers: Iterable[int]) -> str:
    return " - ".join(f"{d:02d}" for d in sorted(numbers))

def validate_numbers(numbers: Iterable[int], spec: LotterySpec, name: str = "game") -> None:
    nums = list(numbers)
    for d in nums:
        if isinstance(d, bool) or not isinstance(d, int):
            raise InvalidTicketError(f"{name}: non-integer number {d!r}.")
    if len(nums) != spec.n_pick:
        raise InvalidTicketError(f"{name}: expected {spec.n_pick} numbers, got {len(nums)}.")
    if len(set(nums)) != len(nums):
        raise InvalidTicketError(f"{name}: repeated numbers.")
    if any((d < 1 or d > spec.n_universe) for d in nums):
        raise InvalidTicketError(f"{name}: numbers outside 1–{spec.n_universe}.")

def validate_ticket_info(info: LottoTicketInfo, spec: LotterySpec) -> None:
    if info.round < 0:
        raise InvalidTicketError(f"negative round: {info.round}")
    if len(info.games) > spec.max_games_per_ticket:
        raise InvalidTicketError(
            f"too many games: {len(info.games)} (max {spec.max_games_per_ticket} per ticket)"
        )
    for i, game in enumerate(info.games):
        label = spec.game_labels[i] if i < len(spec.game_labels) else str(i + 1)
        validate_numbers(game, spec, name=f"game {label}")

def rank_for(matched_count: int, bonus_matched: bool) -> int:
    if matched_count == 6:
        return 1
    if matched_count == 5:
        return 2 if bonus_matched else 3
    if matched_count == 4:
        return 4
    if matched_count == 3:
        return 5
    return 0

def check_winning(result: LottoResult, user_numbers: Iterable[int]) -> WinningCheckResult:
    user = tuple(user_numbers)
    winning = set(result.numbers)
    matched = tuple(n for n in user if n in winning)
    bonus_matched = result.bonus_number in user
    return WinningCheckResult(
        round=result.round,
        user_numbers=user,
        winning_numbers=result.numbers,
        bonus_number=result.bonus_number,
        matched_numbers=matched,
        bonus_matched=bonus_matched,
        rank=rank_for(len(matched), bonus_matched),
    )

def check_ticket(ticket: LottoTicket, result: LottoResult) -> LottoTicket:
    if ticket.round != result.round:
        raise RoundMismatchError(f"ticket round {ticket.round} != result round {result.round}")
    games = tuple(
        replace(g, winning_rank=check_winning(result, g.numbers).rank) for g in ticket.games
    )
    return replace(ticket, games=games, is_checked=True)

def winning_statistics(tickets: list[LottoTicket]) -> WinningStatistics:
    if not tickets:
        return WinningStatistics.empty()

    valid = WinningStatistics.VALID_WINNING_RANKS
    total = checked = wins = 0
    ranks = {r: 0 for r in valid}

    for t in tickets:
        total += len(t.games)
        if not t.is_checked:
            continue
        for g in t.games:
            checked += 1
            if g.winning_rank in valid:
                wins += 1
                ranks[g.winning_rank] += 1

    rate = (wins / checked) * 100.0 if checked > 0 else 0.0
    return WinningStatistics(
        total_games_played=total,
        checked_games_count=checked,
        winning_games_count=wins,
        winning_rate=rate,
        rank_breakdown=ranks,
        total_tickets=len(tickets),
    )

def sort_tickets(tickets: list[LottoTicket], sort_type: TicketSortType = DEFAULT_TICKET_SORT) -> list[LottoTicket]:
    if sort_type is TicketSortType.REGISTERED_DATE_ASC:
        return sorted(tickets, key=lambda t: t.registered_date)
    if sort_type is TicketSortType.ROUND_DESC:
        return sorted(tickets, key=lambda t: (t.round, t.registered_date), reverse=True)
    if sort_type is TicketSortType.ROUND_ASC:
        return sorted(tickets, key=lambda t: (t.round, t.registered_date))
    return sorted(tickets, key=lambda t: t.registered_date, reverse=True)

def estimate_latest_round(now: datetime | None = None) -> int:
    """Latest round already drawn at `now` (local time)."""
    if now is None:
        now = datetime.now()
    day = now.date()
    # Saturday before the draw: this week's round is not out yet
    if day.weekday() == 5 and now.time() < DRAW_TIME:
        day -= timedelta(days=7)
    weeks = (day - FIRST_DRAW_DATE).days // 7
    return max(weeks + 1, 0)

def draw_date_for_round(round: int) -> date:
    return FIRST_DRAW_DATE + timedelta(weeks=round - 1)

def ticket_cost(info: LottoTicketInfo, spec: LotterySpec) -> int:
    return len(info.games) * spec.price_per_game

def prob_first_prize(info: LottoTicketInfo, spec: LotterySpec) -> float:
    prob_miss = 1.0
    for g in info.games:
        distinct = len(set(g))
        if distinct < spec.n_pick:
            continue
        p = min(math.comb(distinct, spec.n_pick) / spec.comb_target, 1.0)
        prob_miss *= (1.0 - p)
    return 1.0 - prob_miss
