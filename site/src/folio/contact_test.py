import asyncio

import pytest
from pydantic import ValidationError

from .contact import (
    ContactMessage,
    EMAIL_MESSAGE,
    EMAIL_PATTERN,
    FIELDS,
    REQUIRED_MESSAGE,
    SUBMIT_DELAY_MS,
    html,
    js,
    simulate_submission,
    validate_field,
    validate_form,
)
from .content import DEFAULT_CONTENT
from .models import PersonalInfo


EMAIL = next(field for field in FIELDS if field.name == "email")
SUBJECT = next(field for field in FIELDS if field.name == "subject")

VALID = {"name": "Ada", "email": "ada@example.com", "subject": "", "message": "Hello"}


# ##################################################################
# test email pattern
@pytest.mark.parametrize("value,ok", [
    ("ada@example.com", True),
    ("a.b@c.co.uk", True),
    ("no-at-sign.com", False),
    ("two@@example.com", False),
    ("missing@tld", False),
    ("spa ce@example.com", False),
    ("ada@example.com\n", False),
])
def test_email_pattern(value, ok):
    assert (validate_field(EMAIL, value) is None) == ok


# ##################################################################
# test required fields
# whitespace-only counts as empty, subject may be left blank
def test_required_fields():
    errors = validate_form({"name": "   ", "email": "", "subject": "", "message": "\n"})
    assert errors == {"name": REQUIRED_MESSAGE, "email": REQUIRED_MESSAGE, "message": REQUIRED_MESSAGE}
    assert validate_field(SUBJECT, "") is None


# ##################################################################
# test valid form has no errors
def test_valid_form_has_no_errors():
    assert validate_form(VALID) == {}
    assert validate_form({**VALID, "email": "bad"}) == {"email": EMAIL_MESSAGE}


# ##################################################################
# test simulated submission always succeeds
def test_simulated_submission_always_succeeds(capsys):
    message = asyncio.run(simulate_submission(VALID, delay_ms=0))

    assert message.name == "Ada"
    assert message.status == "new"
    assert message.timestamp.tzinfo is not None
    assert "ada@example.com" in capsys.readouterr().out


# ##################################################################
# test invalid submission rejected
# data the form validator refuses never reaches the simulated send
@pytest.mark.parametrize("data", [
    {"name": "", "email": "not-an-email", "message": ""},
    {**VALID, "name": "   "},
    {**VALID, "email": "ada@example"},
    {**VALID, "message": "\n\t"},
])
def test_invalid_submission_rejected(data, capsys):
    assert validate_form(data)
    with pytest.raises(ValidationError):
        asyncio.run(simulate_submission(data, delay_ms=0))
    assert "Form data" not in capsys.readouterr().out


# ##################################################################
# test contact message model agrees with form
def test_contact_message_model_agrees_with_form():
    with pytest.raises(ValidationError):
        ContactMessage(name="", email="bad", message="")
    message = ContactMessage(name="Ada", email="ada@example.com", message="Hi")
    assert message.subject == ""


# ##################################################################
# test form markup and script
def test_form_markup_and_script():
    info = PersonalInfo.model_validate(DEFAULT_CONTENT["personal_info"])
    page = html(info)
    assert page.count('class="form-group"') == len(FIELDS)
    assert page.count('aria-required="true"') == 3
    assert "novalidate" in page

    script = js()
    assert EMAIL_PATTERN.replace("\\", "\\\\") in script
    assert str(SUBMIT_DELAY_MS) in script
    assert REQUIRED_MESSAGE in script
