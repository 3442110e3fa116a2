"""Test fixtures for infrastructure/transforms tests."""

from datetime import datetime, timezone

import pandas as pd
import pytest

from row_transform.infrastructure.transforms import PipelineContext


@pytest.fixture
def pipeline_context() -> PipelineContext:
    """Create a standard pipeline context for testing."""
    return PipelineContext(
        pipeline_name="test_pipeline",
        execution_id="test-001",
        timestamp=datetime.now(timezone.utc),
        config={},
    )


@pytest.fixture
def customers_frame() -> pd.DataFrame:
    """Raw customer rows as exported from a CRM."""
    return pd.DataFrame(
        {
            "id": ["1", "2", "3"],
            "full_name": ["ada lovelace", "alan turing", None],
            "gender": ["F", "M", "X"],
            "phone": ["213.373.4253", "12345", None],
            "notes": ["vip", "", "churned"],
        },
        index=[10, 11, 12],
    )


@pytest.fixture
def customer_template() -> list:
    return [
        {
            "field": "full_name",
            "name": "Name",
            "transformations": [{"type": "string", "changeCase": "capitalCase"}],
        },
        {
            "field": "gender",
            "name": "Gender",
            "transformations": [
                {"type": "substitution", "mapping": {"M": "Male", "F": "Female"}}
            ],
        },
        {
            "field": "phone",
            "name": "Phone",
            "transformations": [
                {"type": "findreplace", "find": "[.]", "replace": ""},
                {"type": "phone-number", "countryCode": "US", "outputFormat": "national"},
            ],
        },
        {"field": "id", "name": "CustomerId"},
    ]
