import pytest

from waterbot.commands import (
    CommandArgumentError,
    DonationSelection,
    DrinkConfirmation,
    parse_add,
    parse_donation,
    parse_drink,
    parse_set,
    parse_setbmi,
    parse_stats,
    parse_suggest,
)


def test_parse_set():
    request = parse_set("30 250")
    assert (request.timer, request.amount) == (30, 250)


@pytest.mark.parametrize("args", ["0 250", "30 0", "-5 250", "30 -1"])
def test_parse_set_rejects_non_positive(args):
    with pytest.raises(CommandArgumentError, match="positive"):
        parse_set(args)


@pytest.mark.parametrize("args", [None, "", "30", "30 250 1", "thirty 250", "30.5 250"])
def test_parse_set_usage(args):
    with pytest.raises(CommandArgumentError, match="Usage"):
        parse_set(args)


def test_parse_setbmi_accepts_decimal_comma():
    request = parse_setbmi("72,5 180")
    assert request.weight == 72.5
    assert request.height == 180.0


@pytest.mark.parametrize("args", ["0 180", "70 0", "-70 180", "70 -1"])
def test_parse_setbmi_rejects_non_positive(args):
    with pytest.raises(CommandArgumentError, match="valid weight and height"):
        parse_setbmi(args)


@pytest.mark.parametrize("args", [None, "70", "nan 180", "inf 180", "abc 180"])
def test_parse_setbmi_usage(args):
    with pytest.raises(CommandArgumentError, match="Usage"):
        parse_setbmi(args)


def test_parse_add():
    assert parse_add("300").amount == 300
    with pytest.raises(CommandArgumentError, match="positive"):
        parse_add("0")
    with pytest.raises(CommandArgumentError, match="Usage"):
        parse_add(None)


def test_parse_stats_defaults_to_today():
    assert parse_stats(None).period == "today"
    assert parse_stats("Week").period == "week"
    with pytest.raises(CommandArgumentError):
        parse_stats("decade")


def test_parse_suggest():
    request = parse_suggest("Issue the chart is   blank ")
    assert request.kind == "issue"
    assert request.content == "the chart is   blank"
    with pytest.raises(CommandArgumentError):
        parse_suggest("idea more charts")
    with pytest.raises(CommandArgumentError):
        parse_suggest("suggestion")


def test_drink_confirmation_callback_data():
    data = DrinkConfirmation(user_id="42", amount=250).pack()
    assert data == "drink:42:250"
    assert parse_drink(data) == DrinkConfirmation(user_id="42", amount=250)


@pytest.mark.parametrize("data", ["drink:42", "drink::250", "drink:42:abc", "drink:42:0", "crypto:42:250"])
def test_parse_drink_rejects_malformed(data):
    with pytest.raises(CommandArgumentError):
        parse_drink(data)


def test_donation_selection_callback_data():
    data = DonationSelection(key="usdt_trc20").pack()
    assert parse_donation(data).key == "usdt_trc20"
    with pytest.raises(CommandArgumentError):
        parse_donation("crypto:")


@pytest.mark.parametrize("args", ["20000 250", "30 20000", "99999999999999999999 250"])
def test_parse_set_rejects_oversized_values(args):
    with pytest.raises(CommandArgumentError, match="at most 10080 minutes and amount at most 10000ml"):
        parse_set(args)


def test_parse_add_rejects_oversized_amount():
    assert parse_add("10000").amount == 10000
    with pytest.raises(CommandArgumentError, match="at most 10000ml"):
        parse_add("10001")
    with pytest.raises(CommandArgumentError, match="at most 10000ml"):
        parse_add("100000000000000000000")


@pytest.mark.parametrize("args", ["1e308 100", "1001 170", "70 301", "70 1e300"])
def test_parse_setbmi_rejects_implausible_metrics(args):
    with pytest.raises(CommandArgumentError, match="valid weight and height"):
        parse_setbmi(args)


def test_parse_setbmi_accepts_upper_limits():
    request = parse_setbmi("1000 300")
    assert (request.weight, request.height) == (1000.0, 300.0)


def test_parse_drink_rejects_oversized_amount():
    with pytest.raises(CommandArgumentError):
        parse_drink("drink:42:100000000000000000000")
