"""Lark grammar for the supported TOML dialect.

The grammar runs on comment-stripped text (see :mod:`toml_core.comments`).
Statements are key/value pairs and key-group headers, one per line. Newlines
are significant between statements and ignored between array tokens.

Scalar terminals come from :data:`toml_core.scalars.SCALAR_RULES`; their
lexer priorities follow the table order so that DateTime beats Float, and
Float beats Integer.
"""

from __future__ import annotations

from functools import lru_cache

from lark import Lark

from .scalars import SCALAR_RULES


_STRUCTURE = r"""
start: _NL? (_statement _NL)* _statement?

_statement: keyvalue
          | keygroup

keyvalue: KEY "=" value
keygroup: KEYGROUP

?value: {scalars}
      | array

array: "[" _NL? "]"
     | "[" _NL? value (_NL? "," _NL? value)* (_NL? ",")? _NL? "]"

KEY: /[^ \t\r\n=\[][^ \t\r\n=]*/
KEYGROUP: /\[[^ \t\r\n\[\].]+(\.[^ \t\r\n\[\].]+)*\]/

_NL: /[\r\n][ \t\r\n]*/

%import common.WS_INLINE
%ignore WS_INLINE
"""


def _scalar_terminals() -> str:
    lines = []
    for index, rule in enumerate(SCALAR_RULES):
        priority = len(SCALAR_RULES) - index
        lines.append(f"{rule.terminal}.{priority}: /{rule.pattern}/")
    return "\n".join(lines)


GRAMMAR = (
    _STRUCTURE.replace("{scalars}", " | ".join(rule.terminal for rule in SCALAR_RULES))
    + "\n"
    + _scalar_terminals()
    + "\n"
)


@lru_cache(maxsize=None)
def get_parser() -> Lark:
    """Return the process-wide LALR parser, built on first use."""
    return Lark(GRAMMAR, parser="lalr", propagate_positions=True)
