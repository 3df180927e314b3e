"""Options controlling how accessors parse paths."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datapath.path import Grammar

__all__ = ["PathOptions"]


class PathOptions(BaseModel):
    """Path grammars used by an :class:`~datapath.accessor.Accessor`.

    Attributes:
        read_grammar: Grammar used by ``has`` and ``get``.
        write_grammar: Grammar used by ``set``, ``delete`` and ``ensure``.
        max_index_gap: Most ``None`` slots ``set`` may add to reach an index
            past the end of a list.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    read_grammar: Grammar = Grammar.DOTTED
    write_grammar: Grammar = Grammar.BRACKETED
    max_index_gap: int = Field(default=1000, ge=0)
