import json
from pathlib import Path

import pytest

from dsl_tools.data_generator import FormDataGenerator
from openpyxl import Workbook

from dsl_tools.fixture_readers import (
    FixtureError,
    get_fixture_value,
    read_excel_fixture,
    read_json_fixture,
)

FIXTURE_FILE = Path(__file__).resolve().parents[2] / "fixtures" / "json" / "test-data.json"


def test_shipped_fixture_holds_the_form_values():
    data = read_json_fixture(FIXTURE_FILE)

    assert get_fixture_value(data, "testData.gender") == "Male"
    assert get_fixture_value(data, "testData.state") == "NCR"
    assert get_fixture_value(data, "testData.city") == "Delhi"


def test_missing_key(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"testData": {"gender": "Male"}}), encoding="utf-8")
    data = read_json_fixture(str(path))

    with pytest.raises(FixtureError):
        get_fixture_value(data, "testData.city")
    with pytest.raises(FixtureError):
        get_fixture_value(data, "testData.gender.value")


def test_missing_file(tmp_path):
    with pytest.raises(FixtureError):
        read_json_fixture(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FixtureError):
        read_json_fixture(path)


def write_workbook(path, sheets):
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, rows in sheets.items():
        sheet = workbook.create_sheet(title)
        for row in rows:
            sheet.append(row)
    workbook.save(path)
    return path


def test_excel_rows_are_keyed_by_the_header_row(tmp_path):
    path = write_workbook(tmp_path / "test-data.xlsx", {
        "Students": [
            ["gender", "department", "age"],
            ["Male", "Computer Science", 21],
            ["Female", "Maths"],
            [],
        ],
    })

    rows = read_excel_fixture(path)

    assert rows == [
        {"gender": "Male", "department": "Computer Science", "age": 21},
        {"gender": "Female", "department": "Maths", "age": None},
    ]
    assert [row["gender"] for row in rows] == ["Male", "Female"]


def test_excel_sheet_name_and_header_row(tmp_path):
    path = write_workbook(tmp_path / "test-data.xlsx", {
        "Cover": [["ignored"]],
        "Cities": [
            ["Exported from the admin panel"],
            ["state", "city"],
            ["NCR", "Delhi"],
        ],
    })

    assert read_excel_fixture(str(path), "Cities", header_row=1) == [{"state": "NCR", "city": "Delhi"}]


@pytest.mark.parametrize("sheet_name, header_row", [("Missing", 0), (None, 5), (None, -1)])
def test_excel_unknown_sheet_or_header_row(tmp_path, sheet_name, header_row):
    path = write_workbook(tmp_path / "test-data.xlsx", {"Students": [["gender"], ["Male"]]})

    with pytest.raises(FixtureError):
        read_excel_fixture(path, sheet_name, header_row)


def test_excel_missing_or_broken_file(tmp_path):
    broken = tmp_path / "broken.xlsx"
    broken.write_bytes(b"not a workbook")

    with pytest.raises(FixtureError):
        read_excel_fixture(tmp_path / "nope.xlsx")
    with pytest.raises(FixtureError):
        read_excel_fixture(broken)


def test_generated_person_is_reproducible_with_a_seed():
    assert FormDataGenerator(seed=3).person() == FormDataGenerator(seed=3).person()


def test_generated_person_fields():
    person = FormDataGenerator(seed=11).person()

    assert person.full_name == f"{person.first_name} {person.last_name}"
    assert person.email.endswith("@fake.email.com")
    assert person.email == person.email.lower()
    assert len(person.mobile) == 10 and person.mobile.isdigit()
    assert person.current_address
