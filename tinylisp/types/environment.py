"""Runtime environment for tinylisp.

There are two tiers. The global tier is a single Environment with no `outer`
link, created empty and mutated only by `setq` and `defun`. A local tier is a
full snapshot of some base environment overlaid with new bindings; its `outer`
always points at the global tier. Shadowing happens by overwrite in the
snapshot, not through a parent chain, and a local tier is never mutated after
it has been built.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from tinylisp import LispValue
from tinylisp.types.errors import LispMalformedForm
from tinylisp.types.nil import is_nil
from tinylisp.types.symbol import Symbol, T

_MISSING = object()


class Environment:
    """Mapping from Symbols (case-insensitive) to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        bindings: Optional[Mapping[Symbol, LispValue]] = None,
    ):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    @property
    def root(self) -> Environment:
        """The global tier this environment belongs to."""
        return self if self.outer is None else self.outer

    @property
    def is_global(self) -> bool:
        return self.outer is None

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any previous binding.

        Raises LispMalformedForm if `name` is not a Symbol or is one of the
        reserved symbols T and NIL.
        """
        if not isinstance(name, Symbol):
            raise LispMalformedForm(f"Cannot bind {name!r}: not a symbol")
        if name == T or is_nil(name):
            raise LispMalformedForm(f"Cannot bind reserved symbol {name}")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Return the tier holding `name`: this frame first, then the global tier."""
        if name in self.vars:
            return self
        if self.outer is not None and name in self.outer.vars:
            return self.outer
        return None

    def lookup(self, name: Symbol, default: LispValue = _MISSING) -> LispValue:
        """Look up `name` in this frame, then the global tier.

        Returns `default` when unbound, or raises KeyError if no default is given.
        """
        env = self.find(name)
        if env is not None:
            return env.vars[name]
        if default is _MISSING:
            raise KeyError(name)
        return default

    def extend(self, bindings: Mapping[Symbol, LispValue]) -> Environment:
        """Build a local tier: a snapshot of this environment overlaid with `bindings`."""
        local = Environment(outer=self.root, bindings=self.vars)
        for name, value in bindings.items():
            local.define(name, value)
        return local

    def checkpoint(self) -> dict[Symbol, LispValue]:
        """Copy of the current bindings, for `restore` after a failed evaluation."""
        return dict(self.vars)

    def restore(self, saved: Mapping[Symbol, LispValue]) -> None:
        self.vars.clear()
        self.vars.update(saved)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> <global>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        tier = "global" if self.outer is None else "local"
        return f"<Environment {tier} {self}>"
