"""Units about how an operation's receiver is resolved."""
from __future__ import annotations

from protodemo.core.objects import Method, ProtoObject, call, lookup
from protodemo.domain.binding import build_receiver_chain
from protodemo.domain.demo_models import DemoContext
from protodemo.presentation.cli.render import render_bullet_lines, render_lines


def run_function_invocation(ctx: DemoContext) -> None:
    host = ctx.host

    def fn_invocation(this: ProtoObject) -> ProtoObject:
        host.alert(this)
        return this

    receiver = host.invoke(Method(fn_invocation))
    print(f"Plain invocation received the host global object: {receiver is host.global_object}")


def run_receiver_binding(ctx: DemoContext) -> None:
    boris = build_receiver_chain(ctx.host)
    inner = boris.child.child

    print("Dynamic receivers, called from boris down:")
    render_bullet_lines(boris.describe())
    print("Lexical receivers, called from boris down:")
    render_bullet_lines(boris.describe_lexical())
    render_lines(
        [
            f"inner.whoami() -> {inner.whoami()}",
            f"inner's whoami called on boris -> {call(lookup(inner, 'whoami'), boris)}",
            boris.report_later(),
        ]
    )
    ctx.bindings["boris"] = boris
