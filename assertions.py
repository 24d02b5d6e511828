import jsonschema
import pytest
from jsonschema.exceptions import ValidationError


def assert_matches_schema(data, schema, label, endpoint=""):
    """
    jsonschema.validate with a failure message that carries the validator
    path, the offending value and the full payload.
    """
    try:
        jsonschema.validate(instance=data, schema=schema)
    except ValidationError as e:
        pytest.fail(
            f"Response JSON does not match '{label}' schema:\n"
            f"Endpoint: {endpoint}\n"
            f"Validation message: {e.message}\n"
            f"Validator: {e.validator}\n"
            f"Validator path: {list(e.schema_path)}\n"
            f"Instance path: {list(e.path)}\n"
            f"Offending instance: {e.instance}\n"
            f"Full response: {data}"
        )


def assert_has_fields(record, fields, label):
    assert isinstance(record, dict), f"Expected JSON object for {label}, got {type(record)}: {record}"
    missing = [f for f in fields if f not in record]
    assert not missing, f"{label} is missing {missing}. Got: {record}"


def describe(response):
    """Short envelope summary for assertion messages."""
    return f"status={response.status} success={response.success} error={response.error!r} data={response.data!r}"
