import dataclasses
from datetime import date, datetime

import pytest

from lotto_assist.models import (
    GameType,
    LottoGame,
    LottoResult,
    LottoTicket,
    LottoTicketInfo,
    FirstPrizeInfo,
    SyncResult,
    TicketSortType,
    DEFAULT_TICKET_SORT,
    WinningStatistics,
)

GAMES = [[3, 11, 22, 28, 33, 40], [5, 9, 14, 21, 30, 44]]


# construction and field access
def test_accessors_return_constructor_values():
    info = LottoTicketInfo(37, GAMES)
    assert info.round == 37
    assert info.get_round() == 37
    assert info.get_games() == GAMES
    assert len(info.games) == 2
    assert all(len(g) == 6 for g in info.games)
    assert info.games[0] == (3, 11, 22, 28, 33, 40)


def test_games_keep_given_order_without_sorting_or_dedup():
    games = [[40, 3, 3], [], [9, 1]]
    info = LottoTicketInfo(1, games)
    assert info.get_games() == [[40, 3, 3], [], [9, 1]]


def test_empty_games_allowed():
    info = LottoTicketInfo(0, [])
    assert info.get_games() == []
    assert info.games == ()


def test_caller_lists_are_snapshotted():
    games = [[1, 2]]
    info = LottoTicketInfo(1, games)
    games[0].append(3)
    games.append([4])
    assert info.get_games() == [[1, 2]]
    # get_games hands out fresh lists
    info.get_games()[0].append(99)
    assert info.get_games() == [[1, 2]]


def test_fields_cannot_be_reassigned():
    info = LottoTicketInfo(1, [[1, 2]])
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.round = 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.games = ()


# positional unpacking
def test_components_and_unpacking():
    info = LottoTicketInfo(37, GAMES)
    assert info.component1() == 37
    assert info.component2() == GAMES
    round_, games = info
    assert round_ == 37
    assert games == GAMES


# structural equality and hashing
def test_structural_equality():
    a = LottoTicketInfo(1, [[1, 2]])
    b = LottoTicketInfo(1, [[1, 2]])
    c = LottoTicketInfo(1, ((1, 2),))
    assert a == b
    assert b == a
    assert a == a
    assert b == c and a == c
    assert a != LottoTicketInfo(2, [[1, 2]])
    assert a != LottoTicketInfo(1, [[2, 1]])
    assert a != LottoTicketInfo(1, [[1], [2]])


def test_equality_against_other_types_is_false():
    a = LottoTicketInfo(1, [[1, 2]])
    assert (a == None) is False  # noqa: E711
    assert a != "LottoTicketInfo(1, [[1, 2]])"
    assert a != (1, ((1, 2),))


def test_hash_consistent_with_equality():
    a = LottoTicketInfo(37, GAMES)
    b = LottoTicketInfo(37, [list(g) for g in GAMES])
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


# copy
def test_copy_without_overrides_is_equal_but_distinct():
    a = LottoTicketInfo(1, [[1, 2]])
    b = a.copy()
    assert a == b
    assert a is not b


def test_copy_with_round_override():
    a = LottoTicketInfo(1, [[1, 2]])
    assert a.copy(round=5) == LottoTicketInfo(5, [[1, 2]])
    assert a == LottoTicketInfo(1, [[1, 2]])


def test_copy_with_games_override():
    a = LottoTicketInfo(1, [[1, 2]])
    b = a.copy(games=[[7, 8, 9]])
    assert b == LottoTicketInfo(1, [[7, 8, 9]])
    assert a.get_games() == [[1, 2]]


def test_copy_round_zero_is_an_override():
    assert LottoTicketInfo(3, []).copy(round=0).round == 0


def test_repr_shows_both_fields():
    text = repr(LottoTicketInfo(37, [[3, 11]]))
    assert "LottoTicketInfo" in text
    assert "37" in text
    assert "3, 11" in text
    assert str(LottoTicketInfo(37, [[3, 11]])) == text


# domain models
def test_game_type_codes():
    assert GameType.from_code("A") is GameType.AUTO
    assert GameType.from_code("B") is GameType.MANUAL
    assert GameType.from_code("Z") is GameType.AUTO
    assert GameType.MANUAL.code == "B"
    assert GameType.AUTO.display_name == "자동"


def test_ticket_from_info_labels_games_and_maps_back():
    info = LottoTicketInfo(1100, GAMES)
    reg = datetime(2024, 1, 6, 10, 0)
    ticket = LottoTicket.from_info(info, registered_date=reg, game_types=[GameType.MANUAL])
    assert ticket.round == 1100
    assert ticket.registered_date == reg
    assert [g.label for g in ticket.games] == ["A", "B"]
    assert ticket.games[0].game_type is GameType.MANUAL
    assert ticket.games[1].game_type is GameType.AUTO
    assert ticket.is_checked is False
    assert ticket.to_info() == info


def test_lotto_result_numbers_sorted():
    res = LottoResult(1, date(2002, 12, 7), [40, 10, 23, 29, 33, 37], 16, FirstPrizeInfo(0, 0, 0))
    assert res.numbers == (10, 23, 29, 33, 37, 40)


def test_lotto_game_numbers_tuple():
    g = LottoGame(numbers=[1, 2, 3])
    assert g.numbers == (1, 2, 3)
    assert g.winning_rank == 0


def test_winning_statistics_empty():
    s = WinningStatistics.empty()
    assert s.total_tickets == 0
    assert s.rank_breakdown == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert s.has_data is False
    assert s.has_wins is False
    assert s.formatted_winning_rate == "0.0%"


def test_sync_result_flags():
    assert SyncResult(3, 0, 3).is_full_success
    assert SyncResult(2, 1, 3).is_partial_success
    assert SyncResult(0, 3, 3).is_full_failure
    assert not SyncResult(0, 0, 0).is_full_failure


def test_default_sort():
    assert DEFAULT_TICKET_SORT is TicketSortType.REGISTERED_DATE_DESC
    assert TicketSortType.ROUND_ASC.display_name == "오래된 회차순"
