"""
Classes — virtual behaviour for staticmethods.

Python resolves `Shape.describe(...)` statically: the call names the class.
When the class is only known at runtime (a registry value, a config entry),
vstatic walks its bases and calls the most-derived override.

Level 3: vstatic.virtual
Level 2: kungfu.Result
"""

from kungfu import Ok, Error
import vstatic as V
from examples._infra import banner, run


# ═══════════════════════════════════════════════════════════════════════════════
# Domain — factories declared as staticmethods
# ═══════════════════════════════════════════════════════════════════════════════


class Shape:
    @staticmethod
    def describe(label: str) -> str:
        return f"a shape called {label}"

    @staticmethod
    def sides() -> int:
        return 0


class Polygon(Shape):
    @staticmethod
    def sides() -> int:
        return 3


class Square(Polygon):
    @staticmethod
    def describe(label: str) -> str:
        return f"a square called {label}"

    @staticmethod
    def sides() -> int:
        return 4


class Circle(Shape):
    pass


class Unrelated:
    pass


shapes = V.virtual(Shape).build()


async def main() -> None:
    banner("Classes: most-derived staticmethod wins")

    print("\n1. describe() from each shape:")
    for cls in (Shape, Polygon, Square, Circle):
        print(f"   {cls.__name__:<8} → {shapes.call(cls, Shape.describe, 'x')}")

    print("\n2. sides() resolves per class:")
    for cls in (Shape, Polygon, Square, Circle):
        owner = shapes.find(cls, Shape.sides).owner
        print(f"   {cls.__name__:<8} → {shapes.call(cls, Shape.sides)} (from {owner.__name__})")

    print("\n3. Non-raising resolution:")
    match shapes.resolve(Unrelated, Shape.describe):
        case Ok(r):
            print(f"   found on {r.owner}")
        case Error(e):
            print(f"   {e.kind.name}: {e}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
