"""Compile a verb format and render it with a tiny formatter."""

from verbfmt import VerbFormatBuilder


class Greeting:
    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count

    def format(self, verb: str) -> str:
        if verb == "s":
            return self.name
        return str(self.count)


fmt = VerbFormatBuilder().register_all("sd").build()
print(fmt("hello %s, you have %d new messages at 100%%", Greeting("ada", 3)))
