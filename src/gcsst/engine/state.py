"""Mutable scan state for one level of the transmutation engine."""

from __future__ import annotations

from dataclasses import dataclass, field

ResultMap = dict[str, set[str]]


@dataclass
class ScanState:
    """Accumulator threaded through the token loop of a single invocation.

    A fresh state is created for the document and for every nested
    ``@media`` body; it is never shared between invocations.
    """

    class_name: str = ""
    focus: list[str] = field(default_factory=list)
    pending_combinator: str = ""
    class_start_seen: bool = False
    pseudo_pending: bool = False
    colon_run: int = 0
    effects: list[str] = field(default_factory=list)
    raw_prefixes: dict[str, list[str]] = field(default_factory=dict)
    declarations: set[str] = field(default_factory=set)
    media_prelude_start: int | None = None
    area: str | None = None

    @property
    def colons(self) -> str:
        """Pending colons, with three or more collapsed to ``::``."""
        return ":" * min(self.colon_run, 2)

    def qualifier(self) -> str:
        return "".join(self.focus).strip().replace(" ", "_")

    def raw_prefix(self) -> str:
        """Prefix for the current selector alternative: ``{qualifier}`` or ``""``.

        Inside a media block the prefix is wrapped as ``{area}__{prefix}``.
        """
        qualifier = self.qualifier()
        prefix = f"{{{qualifier}}}" if qualifier else ""
        if self.area is not None:
            prefix = f"{self.area}__{prefix}"
        return prefix

    def flush_alternative(self) -> None:
        """Record the current alternative's prefix under the current class name."""
        self.raw_prefixes.setdefault(self.class_name, []).append(self.raw_prefix())

    def reset_alternative(self) -> None:
        self.focus.clear()
        self.effects.clear()
        self.class_name = ""
        self.class_start_seen = False
        self.pending_combinator = ""

    def reset_rule(self) -> None:
        self.raw_prefixes.clear()
        self.declarations.clear()
        self.reset_alternative()
