from __future__ import annotations

from typing import TypedDict

import pandas as pd

from .config import get_spec
from .domain_lotto import check_winning
from .models import LottoResult, LottoTicketInfo


class GameRow(TypedDict, total=False):
    round: int
    game: str
    total: int
    evens: int
    odds: int
    matched: int
    rank: int
    # d1..dN added per game (total=False)


def ticket_info_to_df(info: LottoTicketInfo, result: LottoResult | None = None) -> pd.DataFrame:
    labels = get_spec().game_labels
    rows: list[GameRow] = []
    max_numbers = 0

    for i, game in enumerate(info.games):
        max_numbers = max(max_numbers, len(game))
        label = labels[i] if i < len(labels) else str(i + 1)

        r: GameRow = {"round": int(info.round), "game": label}

        # keep ticket order, the record never sorts
        for k, d in enumerate(game, start=1):
            r[f"d{k}"] = int(d)  # type: ignore[literal-required]

        evens = sum(1 for d in game if d % 2 == 0)
        r.update({"total": int(sum(game)), "evens": evens, "odds": len(game) - evens})

        if result is not None:
            check = check_winning(result, game)
            r.update({"matched": len(check.matched_numbers), "rank": check.rank})

        rows.append(r)

    df = pd.DataFrame(rows)

    # minimum schema, even for a ticket without games
    base_cols: list[tuple[str, str]] = [
        ("round", "int64"),
        ("game", "object"),
        ("total", "int64"),
        ("evens", "int64"),
        ("odds", "int64"),
    ]
    if result is not None:
        base_cols += [("matched", "int64"), ("rank", "int64")]

    for col, dtype in base_cols:
        if col not in df.columns:
            df[col] = pd.Series(dtype=dtype)

    for k in range(1, max_numbers + 1):
        col = f"d{k}"
        if col not in df.columns:
            df[col] = pd.Series(dtype="int64")

    d_cols = [f"d{k}" for k in range(1, max_numbers + 1)]
    ordered = ["round", "game", *d_cols, "total", "evens", "odds", "matched", "rank"]
    df = df.reindex(columns=[c for c in ordered if c in df.columns])

    return df
