"""Project draft schemas - validation of catalog-management requests."""

import pytest
from pydantic import ValidationError

from slotboard.schemas.projects import ProjectDraftRequest


def _body(**overrides):
    data = {
        "name": "  My Project ",
        "owner": "me",
        "qualifications": [{"name": "Writer", "total": 2}],
    }
    data.update(overrides)
    return data


def test_valid_draft_is_normalized():
    draft = ProjectDraftRequest.model_validate(_body()).to_draft()
    assert draft.name == "My Project"
    assert draft.url == "#"
    assert draft.qualifications == (("Writer", 2),)


def test_tags_from_comma_string():
    request = ProjectDraftRequest.model_validate(_body(tags="python, web,, ,api"))
    assert request.tags == ["python", "web", "api"]


def test_tags_from_list_are_trimmed():
    request = ProjectDraftRequest.model_validate(_body(tags=[" a ", "", "b"]))
    assert request.to_draft().tags == ("a", "b")


@pytest.mark.parametrize("field", ["name", "owner"])
def test_blank_required_field_rejected(field):
    with pytest.raises(ValidationError):
        ProjectDraftRequest.model_validate(_body(**{field: "   "}))


def test_at_least_one_qualification_required():
    with pytest.raises(ValidationError):
        ProjectDraftRequest.model_validate(_body(qualifications=[]))


def test_qualification_total_must_be_positive():
    with pytest.raises(ValidationError):
        ProjectDraftRequest.model_validate(
            _body(qualifications=[{"name": "A", "total": 0}]),
        )


def test_qualification_names_unique():
    with pytest.raises(ValidationError):
        ProjectDraftRequest.model_validate(
            _body(qualifications=[{"name": "A", "total": 1}, {"name": " A", "total": 2}]),
        )


def test_url_kept_when_given():
    request = ProjectDraftRequest.model_validate(_body(url=" https://example.org "))
    assert request.to_draft().url == "https://example.org"
