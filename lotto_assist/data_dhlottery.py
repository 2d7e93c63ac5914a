"""Draw results from the dhlottery JSON endpoint."""
from __future__ import annotations

from datetime import date
from typing import Any, Iterable

import numpy as np
import pandas as pd
import requests

from .config import LOTTO_NUMBER_URL
from .errors import DrawResultError
from .http_client import get_json, get_session
from .logger import logger
from .models import FirstPrizeInfo, LottoResult, SyncResult

NUMBER_KEYS = [f"drwtNo{i}" for i in range(1, 7)]


def parse_lotto_result(payload: dict[str, Any]) -> LottoResult:
    try:
        return LottoResult(
            round=int(payload["drwNo"]),
            draw_date=date.fromisoformat(str(payload["drwNoDate"])),
            numbers=tuple(int(payload[k]) for k in NUMBER_KEYS),
            bonus_number=int(payload["bnusNo"]),
            first_prize=FirstPrizeInfo(
                win_amount=int(payload.get("firstWinamnt", 0)),
                winner_count=int(payload.get("firstPrzwnerCo", 0)),
                total_sales_amount=int(payload.get("totSellamnt", 0)),
            ),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DrawResultError(f"Invalid draw payload: {e}") from e


def fetch_lotto_result(round: int, session: requests.Session | None = None) -> LottoResult | None:
    """
    Fetches one round. Returns None when the round has not been drawn yet
    (the API answers returnValue=fail). HTTP errors propagate.
    """
    try:
        data = get_json(LOTTO_NUMBER_URL.format(round), session=session or get_session())
    except ValueError as e:
        raise DrawResultError(f"Round {round}: response is not JSON") from e
    if not isinstance(data, dict):
        raise DrawResultError(f"Round {round}: unexpected payload type {type(data).__name__}")

    if data.get("returnValue") == "fail":
        logger.info(f"Round {round}: no draw data yet")
        return None
    if data.get("returnValue") != "success":
        raise DrawResultError(f"Round {round}: unexpected returnValue {data.get('returnValue')!r}")

    result = parse_lotto_result(data)
    logger.info(f"Round {round}: fetched {list(result.numbers)} + {result.bonus_number}")
    return result


def sync_lotto_results(
    rounds: Iterable[int],
    session: requests.Session | None = None,
) -> tuple[list[LottoResult], SyncResult]:
    results: list[LottoResult] = []
    total = failed = 0
    for rnd in rounds:
        total += 1
        try:
            res = fetch_lotto_result(rnd, session=session)
        except (requests.RequestException, DrawResultError) as e:
            logger.warning(f"Round {rnd}: sync failed: {e}")
            failed += 1
            continue
        if res is None:
            failed += 1
            continue
        results.append(res)
    return results, SyncResult(success_count=len(results), failed_count=failed, total_count=total)


def results_to_df(results: list[LottoResult]) -> pd.DataFrame:
    number_cols = [f"d{i}" for i in range(1, 7)]
    cols = ["round", "draw_date"] + number_cols + ["bonus"]
    if not results:
        return pd.DataFrame(columns=cols)

    df = pd.DataFrame(
        [
            {"round": r.round, "draw_date": pd.Timestamp(r.draw_date), **dict(zip(number_cols, r.numbers)), "bonus": r.bonus_number}
            for r in results
        ]
    )
    df[number_cols] = np.sort(df[number_cols].values, axis=1)
    df = df.sort_values("round").drop_duplicates(subset=["round"], keep="last")
    return df[cols].reset_index(drop=True)
