"""Tests for arbiter_core.transcript."""

import dataclasses

import pytest

from arbiter_core.transcript import ROLE_COORDINATOR, ROLE_USER, Transcript


class TestAppend:
    def test_ids_increase(self):
        t = Transcript()
        a = t.add_user("one")
        b = t.add_coordinator("two")
        assert (a.id, b.id) == (1, 2)

    def test_order_is_production_order(self):
        t = Transcript()
        t.add_user("q")
        t.add_coordinator("a")
        t.add_user("q2")
        assert [m.content for m in t] == ["q", "a", "q2"]
        assert [m.role for m in t.messages] == [ROLE_USER, ROLE_COORDINATOR, ROLE_USER]

    def test_options_kept_in_order(self):
        t = Transcript()
        msg = t.add_coordinator("pick", ["b", "a"])
        assert msg.options == ("b", "a")

    def test_multiline_content(self):
        t = Transcript()
        assert t.add_coordinator("1. a\n2. b").content == "1. a\n2. b"

    def test_timestamp_set(self):
        msg = Transcript().add_user("x")
        assert msg.timestamp.endswith("+00:00")

    def test_messages_are_immutable(self):
        msg = Transcript().add_user("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.content = "y"

    def test_unknown_role(self):
        with pytest.raises(ValueError):
            Transcript().append("system", "x")

    def test_last_and_by_role(self):
        t = Transcript()
        assert t.last is None
        t.add_user("q")
        t.add_coordinator("a")
        assert t.last.content == "a"
        assert [m.content for m in t.by_role(ROLE_USER)] == ["q"]


class TestSubscribe:
    def test_listener_sees_each_message(self):
        t = Transcript()
        seen = []
        t.subscribe(seen.append)
        t.add_user("q")
        t.add_coordinator("a")
        assert [m.content for m in seen] == ["q", "a"]

    def test_unsubscribe(self):
        t = Transcript()
        seen = []
        unsubscribe = t.subscribe(seen.append)
        t.add_user("q")
        unsubscribe()
        unsubscribe()
        t.add_user("q2")
        assert len(seen) == 1
