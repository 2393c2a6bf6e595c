from bentochains.csvcolumns import (
    OptionType,
    capitalize_first,
    side_by_side_columns,
    stacked_columns,
)

EXPECTED_SIDE_BY_SIDE = (
    "Symbol,Date,Time,Rate,Strike,C_bid,C_mid,C_ask,P_bid,P_mid,P_ask,"
    "ExpDate,C_BidSize,C_AskSize,C_RecvTime,C_LastTrade,C_LastTradeTime,C_LastTradeSize,C_Comment,"
    "P_BidSize,P_AskSize,P_RecvTime,P_LastTrade,P_LastTradeTime,P_LastTradeSize,P_Comment,Precision"
)

EXPECTED_STACKED = (
    "Symbol,Date,Time,Rate,Type,Strike,Bid,Mid,Ask,ExpDate,BidSize,AskSize,"
    "RecvTime,LastTrade,LastTradeTime,LastTradeSize,Comment,Precision"
)


def test_side_by_side_header():
    assert ",".join(capitalize_first(side_by_side_columns())) == EXPECTED_SIDE_BY_SIDE


def test_stacked_header():
    assert ",".join(capitalize_first(stacked_columns())) == EXPECTED_STACKED


def test_raw_columns_keep_lower_case_quotes():
    assert stacked_columns()[6:9] == ["bid", "mid", "ask"]
    assert side_by_side_columns()[5] == "C_bid"


def test_capitalize_first_handles_empty_and_non_letters():
    assert capitalize_first(["", "x", "1a", "Already"]) == ["", "X", "1a", "Already"]


def test_capitalize_first_preserves_length():
    cols = side_by_side_columns()
    assert len(capitalize_first(cols)) == len(cols)


def test_option_type_labels():
    assert OptionType.PUT.value == "Put"
    assert OptionType("Call") is OptionType.CALL