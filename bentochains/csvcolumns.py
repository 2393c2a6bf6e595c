"""Column names for option chain CSV output in side-by-side and stacked layouts."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from bentochains.apputils import to_upper

SYMBOL = "Symbol"
DATE = "Date"
TIME = "Time"
RATE = "Rate"
TYPE = "Type"
STRIKE = "Strike"
BID = "bid"
MID = "mid"
ASK = "ask"
PREFIX_CALL = "C_"
PREFIX_PUT = "P_"
EXP_DATE = "ExpDate"
RECV_TIME = "RecvTime"
LAST_TRADE = "LastTrade"
LAST_TRADE_TIME = "LastTradeTime"
LAST_TRADE_SIZE = "LastTradeSize"
BID_SIZE = "BidSize"
ASK_SIZE = "AskSize"
PRECISION = "Precision"
COMMENT = "Comment"


class OptionType(str, Enum):
    """Option type labels written in the stacked layout."""

    PUT = "Put"
    CALL = "Call"


def _call(name: str) -> str:
    return PREFIX_CALL + name


def _put(name: str) -> str:
    return PREFIX_PUT + name


def side_by_side_columns() -> list[str]:
    """Columns with call and put quotes of a strike on one row."""
    return [
        SYMBOL,
        DATE,
        TIME,
        RATE,
        STRIKE,
        _call(BID),
        _call(MID),
        _call(ASK),
        _put(BID),
        _put(MID),
        _put(ASK),
        EXP_DATE,
        _call(BID_SIZE),
        _call(ASK_SIZE),
        _call(RECV_TIME),
        _call(LAST_TRADE),
        _call(LAST_TRADE_TIME),
        _call(LAST_TRADE_SIZE),
        _call(COMMENT),
        _put(BID_SIZE),
        _put(ASK_SIZE),
        _put(RECV_TIME),
        _put(LAST_TRADE),
        _put(LAST_TRADE_TIME),
        _put(LAST_TRADE_SIZE),
        _put(COMMENT),
        PRECISION,
    ]


def stacked_columns() -> list[str]:
    """Columns with puts and calls on separate rows."""
    return [
        SYMBOL,
        DATE,
        TIME,
        RATE,
        TYPE,
        STRIKE,
        BID,
        MID,
        ASK,
        EXP_DATE,
        BID_SIZE,
        ASK_SIZE,
        RECV_TIME,
        LAST_TRADE,
        LAST_TRADE_TIME,
        LAST_TRADE_SIZE,
        COMMENT,
        PRECISION,
    ]


def capitalize_first(columns: Iterable[str]) -> list[str]:
    """Upper-case the first character of each column name."""
    return [to_upper(column[:1]) + column[1:] for column in columns]