"""
Tables — explicit type nodes, no reflection.

Each TypeNode owns its own table and a parent link. Useful when the
"types" are data: schema versions, plugin kinds, message families.

Level 3: vstatic.TypeNode
Level 2: kungfu.LazyCoroResult
"""

from kungfu import Ok, Error
import vstatic as V
from vstatic import lift as L
from examples._infra import Failure, banner, run


# ═══════════════════════════════════════════════════════════════════════════════
# Message families
# ═══════════════════════════════════════════════════════════════════════════════

message = V.TypeNode("Message")
event = message.child("Event")
click = event.child("Click")
audit = V.TypeNode("Audit")


@message.operation
def render(payload: dict) -> str:
    return f"<message {payload}>"


def render_click(payload: dict) -> str:
    return f"<click at {payload['x']},{payload['y']}>"


# The decorator names the operation after the function; register explicitly instead.
click.register("render", (dict,), str, render_click)
event.register("render", (dict,), str, lambda payload: f"<event {payload['name']}>")


async def store(payload: dict) -> str:
    if "id" not in payload:
        raise Failure("missing id")
    return f"stored {payload['id']}"


message.register("store", (dict,), str, store)

renderers = V.virtual(message).build()


async def main() -> None:
    banner("Tables: explicit type nodes")

    print("\n1. Render along the chain:")
    for node in (message, event, click):
        print(f"   {node.name:<8} → {renderers.call(node, render, {'name': 'n', 'x': 1, 'y': 2})}")

    print("\n2. Outside the family:")
    match renderers.resolve(audit, render):
        case Ok(r):
            print(f"   found on {r.owner}")
        case Error(e):
            print(f"   {e.kind.name}: {e}")

    print("\n3. Async operation, failures mapped:")
    sig = V.Signature("store", (dict,), str)
    for payload in ({"id": 7}, {}):
        result = await L.lazy_catching(renderers, click, sig, payload, on_error=str)
        match result:
            case Ok(msg):
                print(f"   → {msg}")
            case Error(e):
                print(f"   → error: {e}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
