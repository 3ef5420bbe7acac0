from __future__ import annotations

import pytest

from skirmish.errors import UnknownVariantError
from skirmish.game import Archer, Character, Ghost, Goblin
from skirmish.game.roster import build_roster, default_roster, parse_roster
from skirmish.ui.logsink import LogSink


def test_default_roster_order_and_unset_names():
    roster = default_roster(LogSink())

    assert [type(e) for e in roster] == [Character, Goblin, Ghost]
    assert all(e.name == "" for e in roster)


def test_build_roster_shares_one_sink():
    sink = LogSink()
    roster = build_roster(["archer", "Ghost"], sink)

    assert [type(e) for e in roster] == [Archer, Ghost]
    assert all(e.out is sink for e in roster)


def test_build_roster_rejects_unknown_variant():
    with pytest.raises(UnknownVariantError):
        build_roster(["dragon"], LogSink())


def test_parse_roster_normalises_tokens():
    assert parse_roster(" Character, GOBLIN ,,ghost ") == ["character", "goblin", "ghost"]


def test_parse_roster_reports_every_unknown_key():
    with pytest.raises(UnknownVariantError) as excinfo:
        parse_roster("ghost,dragon,wyrm")

    message = str(excinfo.value)
    assert "dragon" in message and "wyrm" in message


def test_unknown_variant_is_a_value_error():
    assert issubclass(UnknownVariantError, ValueError)
