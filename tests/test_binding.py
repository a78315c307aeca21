from protodemo.core.host import HostEnvironment
from protodemo.core.objects import call, lookup
from protodemo.domain.binding import build_receiver_chain


def test_dynamic_receivers_follow_the_call_chain() -> None:
    boris = build_receiver_chain(HostEnvironment())

    assert boris.describe() == [
        "describe() receiver is Boris",
        "describe() receiver is Natasha",
        "describe() receiver is Fearless Leader",
    ]


def test_lexical_receivers_stay_on_the_global_object() -> None:
    boris = build_receiver_chain(HostEnvironment(global_name="window"))

    assert boris.describe_lexical() == ["describe_lexical() receiver is window"] * 3
    assert boris.child.child.describe_lexical() == ["describe_lexical() receiver is window"]


def test_borrowed_method_reports_the_borrower() -> None:
    boris = build_receiver_chain(HostEnvironment())
    inner = boris.child.child

    assert inner.whoami() == "Fearless Leader"
    assert call(lookup(inner, "whoami"), boris) == "Boris"


def test_arrow_inside_method_captures_method_receiver() -> None:
    boris = build_receiver_chain(HostEnvironment())

    assert boris.report_later() == "arrow defined inside a method sees Boris"


def test_only_the_outermost_level_defers_a_report() -> None:
    boris = build_receiver_chain(HostEnvironment())

    assert boris.has_own("report_later")
    assert not boris.child.has_own("report_later")
    assert boris.child.child.get("child") is None
