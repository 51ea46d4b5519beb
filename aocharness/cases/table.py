from __future__ import annotations

import ast
import io
import logging
import token
import tokenize
from typing import Any, Iterable, Mapping

from .naming import case_test_name, validate_case_name
from .types import UNCHECKED, CasesError, TestCase

logger = logging.getLogger(__name__)

CaseTable = dict[int, tuple[TestCase, ...]]

UNCHECKED_MARKER = "_"


def build_table(entries: Iterable[tuple[int, TestCase]]) -> CaseTable:
    grouped: dict[int, list[TestCase]] = {}
    for day, case in entries:
        if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 99:
            raise CasesError(f"Invalid exercise id: {day!r}")
        if not isinstance(case.input, str):
            raise CasesError(f"Day {day:02}: case input should be a string")
        grouped.setdefault(day, []).append(case)

    table: CaseTable = {}
    for day in sorted(grouped):
        cases = grouped[day]
        _check_names(day, cases)
        table[day] = tuple(cases)
        logger.debug("Day %02d: %d test case(s)", day, len(cases))

    return table


def merge_tables(*tables: Mapping[int, Iterable[TestCase]]) -> CaseTable:
    return build_table(
        (day, case)
        for table in tables
        for day, cases in table.items()
        for case in cases
    )


def _check_names(day: int, cases: list[TestCase]) -> None:
    seen: set[str] = set()

    for case in cases:
        if case.name is None:
            if len(cases) > 1:
                raise CasesError(
                    f"Day {day:02}: every case needs a name when there is more than one"
                )
            continue

        validate_case_name(day, case.name)
        test_name = case_test_name(day, case.name)

        if test_name in seen:
            raise CasesError(f"Day {day:02}: duplicate case name '{case.name}'")

        seen.add(test_name)


def parse_table(text: str) -> CaseTable:
    """
    Parse a case table written as

        1:
          [small] - "1721\\n979" => 514579 => None;
          [big]   - "..." => _ => 241861950;

    Literals are Python literals. `None` expects the part to be skipped,
    `_` leaves the part unchecked. The case name may be left empty (`[]`)
    only when the exercise has a single case.
    """
    return build_table(_TableParser(text).parse())


class _TableParser:
    def __init__(self, text: str):
        self.text = text
        self.offsets = [0]
        for line in io.StringIO(text).readlines():
            self.offsets.append(self.offsets[-1] + len(line))

        # Wrapped in brackets so line breaks and indentation carry no meaning
        wrapped = io.StringIO("(\n" + text + "\n)")
        try:
            tokens = [
                tok
                for tok in tokenize.generate_tokens(wrapped.readline)
                if tok.type
                not in (token.NL, token.NEWLINE, token.INDENT, token.DEDENT, token.COMMENT)
            ]
        except (tokenize.TokenError, IndentationError, SyntaxError) as exc:
            raise CasesError(f"Invalid case table: {exc}") from exc

        self.tokens = tokens[1:-2] + tokens[-1:]

        self.pos = 0

    def parse(self) -> list[tuple[int, TestCase]]:
        entries: list[tuple[int, TestCase]] = []

        while not self._at(token.ENDMARKER):
            day = self._day()
            self._expect_op(":")

            count = 0
            while self._at_op("["):
                entries.append((day, self._case(day)))
                count += 1

            if count == 0:
                raise CasesError(f"{self._where()}: day {day:02} has no test case")

        return entries

    def _day(self) -> int:
        tok = self._next()
        if tok.type != token.NUMBER or not tok.string.isdigit():
            raise CasesError(f"{self._where(tok)}: expected an exercise id, got {tok.string!r}")
        return int(tok.string)

    def _case(self, day: int) -> TestCase:
        self._expect_op("[")
        name = None
        if not self._at_op("]"):
            tok = self._next()
            if tok.type not in (token.NAME, token.NUMBER):
                raise CasesError(f"{self._where(tok)}: invalid case name {tok.string!r}")
            name = validate_case_name(day, tok.string)
        self._expect_op("]")
        self._expect_op("-")

        raw = self._literal(("=>",))
        if not isinstance(raw, str):
            raise CasesError(f"Day {day:02}: case input should be a string literal")

        self._expect_arrow()
        part1 = self._literal(("=>",))
        self._expect_arrow()
        part2 = self._literal((";",))
        self._expect_op(";")

        return TestCase(name, raw, part1, part2)

    def _literal(self, stops: tuple[str, ...]) -> Any:
        first = self._peek()
        depth = 0
        last = first

        while True:
            tok = self._peek()
            if tok.type == token.ENDMARKER:
                raise CasesError(f"{self._where(tok)}: unexpected end of table")
            if depth == 0 and tok.type == token.OP:
                if ";" in stops and tok.string == ";":
                    break
                if "=>" in stops and self._at_arrow():
                    break
            if tok.type == token.OP and tok.string in "([{":
                depth += 1
            elif tok.type == token.OP and tok.string in ")]}":
                depth -= 1
            last = self._next()

        if last is first and self._peek() is first:
            raise CasesError(f"{self._where(first)}: missing literal")

        source = self.text[self._offset(first.start) : self._offset(last.end)]
        if source.strip() == UNCHECKED_MARKER:
            return UNCHECKED

        try:
            return ast.literal_eval(source.strip())
        except (ValueError, SyntaxError) as exc:
            raise CasesError(f"{self._where(first)}: invalid literal {source!r}") from exc

    def _offset(self, pos: tuple[int, int]) -> int:
        row, col = pos
        return self.offsets[row - 2] + col

    def _peek(self) -> tokenize.TokenInfo:
        return self.tokens[self.pos]

    def _next(self) -> tokenize.TokenInfo:
        tok = self.tokens[self.pos]
        if tok.type != token.ENDMARKER:
            self.pos += 1
        return tok

    def _at(self, kind: int) -> bool:
        return self._peek().type == kind

    def _at_op(self, op: str) -> bool:
        tok = self._peek()
        return tok.type == token.OP and tok.string == op

    def _at_arrow(self) -> bool:
        # `=>` is tokenized as `=` immediately followed by `>`
        if not self._at_op("=") or self.pos + 1 >= len(self.tokens):
            return False
        nxt = self.tokens[self.pos + 1]
        return nxt.type == token.OP and nxt.string == ">" and nxt.start == self._peek().end

    def _expect_arrow(self) -> None:
        if not self._at_arrow():
            raise CasesError(f"{self._where()}: expected '=>'")
        self.pos += 2

    def _expect_op(self, op: str) -> None:
        tok = self._next()
        if tok.type != token.OP or tok.string != op:
            raise CasesError(f"{self._where(tok)}: expected {op!r}, got {tok.string!r}")

    def _where(self, tok: tokenize.TokenInfo | None = None) -> str:
        tok = tok or self._peek()
        return f"line {tok.start[0] - 1}"
