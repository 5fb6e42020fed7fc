"""TraversalConfig and BindingConfig.

Both are frozen (immutable) dataclasses validated on construction.
TraversalConfig selects which records a traversal emits; BindingConfig holds
the fallbacks the renderer helpers in ``binding`` use when translating raw
widget input.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BindingConfig", "TraversalConfig"]


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Immutable configuration for a co-traversal.

    Attributes:
        include_groups: When True, every ContainerNode and RepeatedNode is
            bracketed by an OPEN and a CLOSE ``GroupRecord``.  Default False.
        include_removals: When True, a ``RemoveRecord`` precedes each element
            of a repeated collection.  Default False.
        fallback_to_default: When True (the default), a field with nothing
            stored at its path reports its synthesized default as the current
            value.  When False, ``MISSING`` is reported as-is.
    """

    include_groups: bool = False
    include_removals: bool = False
    fallback_to_default: bool = True

    def __post_init__(self) -> None:
        for name in ("include_groups", "include_removals", "fallback_to_default"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a bool, got {value!r}"
                raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class BindingConfig:
    """Immutable configuration for the renderer binding helpers.

    Attributes:
        invalid_number: Value ``parse_number`` returns for input that does not
            start with a number.  Default 0.
        choice_placeholder: Prompt shown by a choice widget with no current
            value.  Default "Select an option...".
        fallback_label: Label used when a field has neither a display name
            nor a path segment and no kind-specific label applies.
    """

    invalid_number: int | float = 0
    choice_placeholder: str = "Select an option..."
    fallback_label: str = "value"

    def __post_init__(self) -> None:
        if isinstance(self.invalid_number, bool) or not isinstance(
            self.invalid_number, (int, float)
        ):
            msg = f"invalid_number must be an int or float, got {self.invalid_number!r}"
            raise TypeError(msg)
        if not self.choice_placeholder:
            msg = "choice_placeholder must be a non-empty string"
            raise ValueError(msg)
        if not self.fallback_label:
            msg = "fallback_label must be a non-empty string"
            raise ValueError(msg)
