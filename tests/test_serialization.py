import json
import math

import pytest

from krldata.ast import BitArrayData, CharData, DataObjectType, IntData, RealData, StringData, StrucData
from krldata.errors import DuplicateStructMember, InvalidPayload, SerializationError, UnknownDiscriminator
from krldata.parser import parse
from krldata.serialization import dumps, from_record, loads, to_record
from tests._shared_cases import PARSER_CASES, DataListCase, case_id


def test_record_puts_discriminator_first() -> None:
    record = to_record(IntData(5, name="A"))

    assert list(record) == ["type", "name", "value"]
    assert record == {"type": int(DataObjectType.INT), "name": "A", "value": 5}


def test_struc_record_lists_members_in_order() -> None:
    (struc,) = parse("S {X: B 'B10', A {C 'c'}}")

    assert to_record(struc) == {
        "type": 7,
        "name": "S",
        "struc_type": "X",
        "value": [
            {"type": 6, "name": "B", "value": [1, 0]},
            {
                "type": 7,
                "name": "A",
                "struc_type": "",
                "value": [{"type": 3, "name": "C", "value": "c"}],
            },
        ],
    }


def test_record_round_trip_reproduces_equal_tree() -> None:
    data = parse('S {X: A 1, B 2.5, C #E, D "str", F \'B01\', G {H TRUE}}, N NaN')

    decoded = [from_record(to_record(node)) for node in data]

    assert decoded == data
    assert [str(node) for node in decoded] == [str(node) for node in data]


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_json_round_trip_of_shared_cases(case: DataListCase) -> None:
    data = parse(case.source)

    assert loads(dumps(data)) == data


def test_dumps_writes_a_json_list_of_records() -> None:
    text = dumps(parse("A 1, B 'x'"), indent=2)

    assert json.loads(text) == [
        {"type": 1, "name": "A", "value": 1},
        {"type": 3, "name": "B", "value": "x"},
    ]


def test_non_finite_reals_survive_json() -> None:
    (value,) = loads(dumps([RealData(-math.inf, name="R")]))

    assert value == RealData(-math.inf, name="R")


def test_decoding_dispatches_on_discriminator_only() -> None:
    # A one-character string payload under the STRING tag is rejected, not reinterpreted.
    with pytest.raises(InvalidPayload):
        from_record({"type": 5, "name": "S", "value": "a"})

    assert from_record({"type": 3, "name": "C", "value": "a"}) == CharData("a", name="C")
    assert from_record({"type": 5, "value": "ab"}) == StringData("ab")


@pytest.mark.parametrize("discriminator", [8, -1, "INT", None, True, 1.0])
def test_unknown_discriminator(discriminator) -> None:
    with pytest.raises(UnknownDiscriminator) as excinfo:
        from_record({"type": discriminator, "name": "A", "value": 1})

    assert excinfo.value.discriminator == discriminator
    assert excinfo.value.to_diagnostic().code == "SERIAL_UNKNOWN_DISCRIMINATOR"


def test_missing_discriminator() -> None:
    with pytest.raises(UnknownDiscriminator):
        from_record({"name": "A", "value": 1})


def test_nested_unknown_discriminator_is_reported() -> None:
    record = {"type": 7, "name": "S", "value": [{"type": 42, "name": "A", "value": 1}]}

    with pytest.raises(UnknownDiscriminator):
        from_record(record)


@pytest.mark.parametrize(
    "record",
    [
        {"type": 0, "name": "A", "value": 1},
        {"type": 1, "name": "A", "value": True},
        {"type": 1, "name": "A", "value": "1"},
        {"type": 1, "name": "A", "value": 2**63},
        {"type": 2, "name": "A", "value": "1.0"},
        {"type": 3, "name": "A", "value": "ab"},
        {"type": 4, "name": "A", "value": "#X"},
        {"type": 6, "name": "A", "value": [0, 2]},
        {"type": 6, "name": "A", "value": "01"},
        {"type": 7, "name": "A", "value": {"B": 1}},
        {"type": 7, "name": "A", "value": [{"type": 1, "name": "", "value": 1}]},
        {"type": 1, "name": 3, "value": 1},
        {"type": 1, "name": "A"},
        ["type", 1],
    ],
)
def test_invalid_payloads(record) -> None:
    with pytest.raises(InvalidPayload):
        from_record(record)


def test_duplicate_member_in_record() -> None:
    record = {
        "type": 7,
        "name": "S",
        "value": [
            {"type": 1, "name": "A", "value": 1},
            {"type": 1, "name": "A", "value": 2},
        ],
    }

    with pytest.raises(DuplicateStructMember):
        from_record(record)


def test_loads_rejects_invalid_json_and_non_list_documents() -> None:
    with pytest.raises(SerializationError):
        loads("{not json")
    with pytest.raises(InvalidPayload):
        loads('{"type": 1, "name": "A", "value": 1}')


def test_bit_array_payload_is_a_list_of_bits() -> None:
    record = to_record(BitArrayData.from_digits("0011", name="F"))

    assert record["value"] == [0, 0, 1, 1]
    assert from_record(record) == BitArrayData((False, False, True, True), name="F")


def test_struc_type_defaults_to_empty() -> None:
    decoded = from_record({"type": 7, "name": "S", "value": []})

    assert decoded == StrucData(name="S")
