import pytest
from pydantic import ValidationError

from exam_results.api.models.schema_models import ExtractExamResultsInput, ExtractExamResultsOutput


def test_input_accepts_text():
    payload = ExtractExamResultsInput(text="Hemoglobin 12.5 g/dL")
    assert payload.text == "Hemoglobin 12.5 g/dL"


def test_input_accepts_empty_text():
    assert ExtractExamResultsInput(text="").text == ""


def test_input_requires_text():
    with pytest.raises(ValidationError):
        ExtractExamResultsInput()


@pytest.mark.parametrize("value", [None, 12, ["Hb 12"], {"text": "Hb"}])
def test_input_rejects_non_string_text(value):
    with pytest.raises(ValidationError):
        ExtractExamResultsInput(text=value)


def test_output_serializes_under_wire_name():
    output = ExtractExamResultsOutput(results_string="Hb: 12.5 | Cr: 1.1")
    assert output.model_dump(by_alias=True) == {"resultsString": "Hb: 12.5 | Cr: 1.1"}


def test_output_accepts_wire_name_on_input():
    output = ExtractExamResultsOutput.model_validate({"resultsString": "Hb: 12.5"})
    assert output.results_string == "Hb: 12.5"


@pytest.mark.parametrize("value", [None, 3, ["Hb: 12.5"]])
def test_output_rejects_non_string_results(value):
    with pytest.raises(ValidationError):
        ExtractExamResultsOutput.model_validate({"resultsString": value})
