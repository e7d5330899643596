# tests/fakes.py

from __future__ import annotations


class FixedClock:
    """
    Deterministic clock for TaskStore.

    Every call returns the current value, then advances it by `step` seconds.
    """

    def __init__(self, start: float, step: float = 1.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


class ScriptedConsole:
    """
    Scripted stdin/stdout for the console loop.

    - input_fn pops the next scripted line; raises EOFError when the script runs out
      (or when the scripted line is the EOFError class itself)
    - print_fn collects everything printed, joined the way print() would
    """

    def __init__(self, lines: list) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.printed: list[str] = []

    def input_fn(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        nxt = self.lines.pop(0)
        if isinstance(nxt, type) and issubclass(nxt, BaseException):
            raise nxt
        return nxt

    def print_fn(self, *args, **kwargs) -> None:
        self.printed.append(" ".join(str(a) for a in args))

    @property
    def output(self) -> str:
        return "\n".join(self.printed)
