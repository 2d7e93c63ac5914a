from __future__ import annotations

import json
from typing import Literal

import pandas as pd

from .config import get_spec
from .domain_lotto import format_game, ticket_cost
from .games_export import ticket_info_to_df
from .models import LottoResult, LottoTicketInfo

ReportFormat = Literal["csv", "json", "md"]


def df_to_csv_bytes(df: pd.DataFrame | None) -> bytes:
    if df is None:
        df = pd.DataFrame()
    # BOM keeps Excel happy with Hangul headers
    return df.to_csv(index=False).encode("utf-8-sig")


def df_to_json_bytes(df: pd.DataFrame | None) -> bytes:
    if df is None:
        return json.dumps([]).encode("utf-8")
    return df.to_json(orient="records", force_ascii=False).encode("utf-8")


def df_to_md_bytes(title: str, sections: list[tuple[str, pd.DataFrame | None]]) -> bytes:
    """
    Note: DataFrame.to_markdown needs tabulate installed.
    """
    out = [f"# {title}", ""]
    for name, df in sections:
        out += [f"## {name}", ""]
        if df is None or df.empty:
            out.append("*No data.*")
        else:
            out.append(df.to_markdown(index=False, tablefmt="pipe"))
        out.append("")
    return "\n".join(out).encode("utf-8")


def ticket_report_bytes(
    info: LottoTicketInfo,
    result: LottoResult | None = None,
    fmt: ReportFormat = "md",
) -> bytes:
    df = ticket_info_to_df(info, result)
    if fmt == "csv":
        return df_to_csv_bytes(df)
    if fmt == "json":
        return df_to_json_bytes(df)
    if fmt != "md":
        raise ValueError(f"unknown report format: {fmt!r}")

    spec = get_spec()
    title = f"{spec.name} round {info.round}"
    summary = pd.DataFrame(
        [{"games": len(info.games), "cost_krw": ticket_cost(info, spec)}]
    )
    sections = [("Summary", summary), ("Games", df)]
    if result is not None:
        draw = pd.DataFrame(
            [{"numbers": format_game(result.numbers), "bonus": result.bonus_number, "draw_date": result.draw_date.isoformat()}]
        )
        sections.insert(1, ("Draw", draw))
    return df_to_md_bytes(title, sections)
