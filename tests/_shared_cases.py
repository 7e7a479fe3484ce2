"""Centralized data-list source cases used across lexer/parser/format tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DataListCase:
    name: str
    source: str
    canonical: str | None = None

    @property
    def expected_format(self) -> str:
        return self.source if self.canonical is None else self.canonical


PARSER_CASES: tuple[DataListCase, ...] = (
    DataListCase(name="single_int", source="A 5"),
    DataListCase(name="negative_int", source="COUNT -42"),
    DataListCase(name="bools", source="ON TRUE, OFF FALSE"),
    DataListCase(name="real", source="VEL 0.5"),
    DataListCase(name="real_exponent", source="EPS 1e-05"),
    DataListCase(name="real_non_finite", source="A NaN, B Infinity, C -Infinity"),
    DataListCase(name="enum", source="MODE #T1"),
    DataListCase(name="char", source="C 'x'"),
    DataListCase(name="string", source='MSG "Hello world"'),
    DataListCase(name="empty_string", source='EMPTY ""'),
    DataListCase(name="bit_array", source="FLAGS 'B0110'"),
    DataListCase(name="array_names", source="A[] 1, B[] 2"),
    DataListCase(name="typed_struc", source="{X: A 1, B 2}"),
    DataListCase(name="untyped_nested_struc", source="{A {B 1}}"),
    DataListCase(
        name="e6pos_struc",
        source="POS {E6POS: X 100.0, Y -25.5, Z 750.0, A 0.0, B 90.0, C 0.0, S 2, T 35, E1 0.0}",
    ),
    DataListCase(
        name="mixed_members",
        source="CFG {CFG_T: NAME \"tool\", ID 3, ACTIVE TRUE, MODE #AUTO, MASK 'B101', SUB {S: K 'k'}}",
    ),
    DataListCase(name="unnamed_scalars", source="1, 2.5, TRUE"),
    DataListCase(name="whitespace_and_newlines", source="A 1 ,\n\tB   2", canonical="A 1, B 2"),
    DataListCase(name="missing_commas", source="A 1 B 2", canonical="A 1, B 2"),
    DataListCase(name="single_quoted_string", source="S 'abc'", canonical='S "abc"'),
    DataListCase(name="double_quoted_char", source='C "c"', canonical="C 'c'"),
    DataListCase(name="leading_plus", source="A +7, B +1.5", canonical="A 7, B 1.5"),
    DataListCase(name="struc_spacing", source="{ X :A 1 ,B 2 }", canonical="{X: A 1, B 2}"),
    DataListCase(name="empty_input", source=""),
)


def case_id(case: DataListCase) -> str:
    return case.name
