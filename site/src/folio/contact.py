"""Contact section: details, client-side validated form, and simulated sending.

Nothing is ever sent anywhere. Submission waits a fixed delay and succeeds.
"""

import asyncio
import html as _html
import json
import re
from datetime import datetime, timezone
from typing import NamedTuple

from pydantic import BaseModel, Field

from .models import PersonalInfo


EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
# at least one non-blank character
REQUIRED_PATTERN = r"^\s*\S"
SUBMIT_DELAY_MS = 1500
STATUS_HIDE_MS = 5000

REQUIRED_MESSAGE = "This field is required"
EMAIL_MESSAGE = "Please enter a valid email address"
FORM_INVALID_MESSAGE = "Please fix the errors before submitting"
SUCCESS_MESSAGE = "✓ Message sent successfully! I'll get back to you soon."
FAILURE_MESSAGE = "✗ Failed to send message. Please try again or email me directly."


class FormField(NamedTuple):
    name: str
    label: str
    kind: str
    required: bool


FIELDS = [
    FormField("name", "Name", "text", True),
    FormField("email", "Email", "email", True),
    FormField("subject", "Subject", "text", False),
    FormField("message", "Message", "textarea", True),
]

_email_re = re.compile(EMAIL_PATTERN)


class ContactMessage(BaseModel):
    name: str = Field(pattern=REQUIRED_PATTERN)
    email: str = Field(pattern=EMAIL_PATTERN)
    subject: str = ""
    message: str = Field(pattern=REQUIRED_PATTERN)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: str = "new"


def validate_field(field: FormField, value: str) -> str | None:
    """Return the inline error for ``value``, or None when it is acceptable."""
    if field.required and not value.strip():
        return REQUIRED_MESSAGE
    if field.kind == "email" and value.strip() and not _email_re.fullmatch(value):
        return EMAIL_MESSAGE
    return None


def validate_form(data: dict[str, str]) -> dict[str, str]:
    """Validate every field. Returns a field name -> error message mapping."""
    errors = {}
    for field in FIELDS:
        error = validate_field(field, data.get(field.name, ""))
        if error:
            errors[field.name] = error
    return errors


async def simulate_submission(data: dict[str, str], delay_ms: int = SUBMIT_DELAY_MS) -> ContactMessage:
    """Pretend to send a message. Valid messages always succeed after ``delay_ms``.

    Raises:
        pydantic.ValidationError: a required field is blank or the email is malformed.
    """
    message = ContactMessage(**{field.name: data.get(field.name, "") for field in FIELDS})
    print(f"Form data: {message.model_dump_json()}")
    await asyncio.sleep(delay_ms / 1000)
    return message


def css() -> str:
    return """
.contact-content {
    display: grid;
    grid-template-columns: 1fr 2fr;
    gap: var(--space-2xl);
}
.contact-item {
    display: flex;
    gap: var(--space-md);
    align-items: flex-start;
    margin-bottom: var(--space-lg);
}
.contact-item i { font-size: 1.5rem; color: var(--accent); margin-top: 0.25rem; }
.contact-item p { color: var(--text-secondary); }

.contact-form {
    background: var(--bg-card);
    border: 1px solid var(--border-color);
    border-radius: 12px;
    padding: var(--space-xl);
}
.form-group { margin-bottom: var(--space-lg); }
.form-group label {
    display: block;
    margin-bottom: var(--space-xs);
    font-size: 0.875rem;
    font-weight: 500;
}
.form-group input, .form-group textarea {
    width: 100%;
    padding: 0.75rem;
    background: var(--bg-primary);
    border: 1px solid var(--border-highlight);
    border-radius: 8px;
    color: var(--text-primary);
    font-family: var(--font-body);
    font-size: 0.9375rem;
}
.form-group textarea { min-height: 140px; resize: vertical; }
.form-group input:focus, .form-group textarea:focus { outline: none; border-color: var(--accent); }
.form-error { display: none; color: #F87171; font-size: 0.8125rem; margin-top: var(--space-xs); }
.form-group.error input, .form-group.error textarea { border-color: #F87171; }
.form-group.error .form-error { display: block; }

.form-status {
    display: none;
    padding: var(--space-md);
    border-radius: 8px;
    margin-bottom: var(--space-lg);
    font-size: 0.875rem;
}
.form-status.success { background: rgba(16, 185, 129, 0.15); color: #10B981; }
.form-status.error { background: rgba(248, 113, 113, 0.15); color: #F87171; }

.btn-submit {
    width: 100%;
    padding: 0.875rem;
    background: var(--accent);
    color: var(--bg-primary);
    border: none;
    border-radius: 8px;
    font-family: var(--font-display);
    font-weight: 600;
    cursor: pointer;
}
.btn-submit:disabled { opacity: 0.7; cursor: wait; }
.loading {
    display: inline-block;
    width: 14px;
    height: 14px;
    border: 2px solid currentColor;
    border-right-color: transparent;
    border-radius: 50%;
    animation: spin 0.8s linear infinite;
    vertical-align: middle;
}
@keyframes spin { to { transform: rotate(360deg); } }

@media (max-width: 768px) { .contact-content { grid-template-columns: 1fr; } }
"""


def _field_html(field: FormField) -> str:
    marker = " *" if field.required else ""
    required = ' required aria-required="true"' if field.required else ""
    if field.kind == "textarea":
        control = f'<textarea id="{field.name}" name="{field.name}"{required}></textarea>'
    else:
        control = f'<input type="{field.kind}" id="{field.name}" name="{field.name}"{required}>'
    return f"""<div class="form-group">
                <label for="{field.name}">{field.label}{marker}</label>
                {control}
                <span class="form-error"></span>
            </div>"""


def html(info: PersonalInfo) -> str:
    email = _html.escape(info.email)
    fields = "\n            ".join(_field_html(field) for field in FIELDS)
    return f"""<section id="contact" class="section" role="region" aria-labelledby="contact-title">
    <h2 id="contact-title" class="section-title fade-in">Get In Touch</h2>
    <div class="contact-content">
        <div class="contact-info fade-in">
            <div class="contact-item">
                <i class="fas fa-envelope"></i>
                <div>
                    <h4>Email</h4>
                    <a href="mailto:{email}">{email}</a>
                </div>
            </div>
            <div class="contact-item">
                <i class="fas fa-map-marker-alt"></i>
                <div>
                    <h4>Location</h4>
                    <p>{_html.escape(info.location)}</p>
                </div>
            </div>
        </div>

        <form id="contact-form" class="contact-form fade-in" novalidate>
            <div id="form-status" class="form-status"></div>
            {fields}
            <button type="submit" class="btn-submit">Send Message</button>
        </form>
    </div>
</section>
"""


def js() -> str:
    messages = json.dumps({
        "required": REQUIRED_MESSAGE,
        "email": EMAIL_MESSAGE,
        "invalid": FORM_INVALID_MESSAGE,
        "success": SUCCESS_MESSAGE,
        "failure": FAILURE_MESSAGE,
    })
    return f"""
// Contact form (validated in the page, sending is simulated)
(function() {{
    const MESSAGES = {messages};
    const EMAIL_RE = new RegExp({json.dumps(EMAIL_PATTERN)});

    function validateField(field) {{
        const group = field.parentElement;
        const errorElement = group.querySelector('.form-error');
        let message = '';
        if (field.hasAttribute('required') && !field.value.trim()) {{
            message = MESSAGES.required;
        }} else if (field.type === 'email' && field.value.trim() && !EMAIL_RE.test(field.value)) {{
            message = MESSAGES.email;
        }}
        group.classList.toggle('error', message !== '');
        if (errorElement) errorElement.textContent = message;
        return message === '';
    }}

    function showStatus(type, message) {{
        const status = document.getElementById('form-status');
        if (!status) return;
        status.className = 'form-status ' + type;
        status.textContent = message;
        status.style.display = 'block';
        setTimeout(function() {{ status.style.display = 'none'; }}, {STATUS_HIDE_MS});
    }}

    function simulateSubmission(data) {{
        return new Promise(function(resolve) {{
            console.log('Form data:', data);
            setTimeout(resolve, {SUBMIT_DELAY_MS});
        }});
    }}

    document.addEventListener('DOMContentLoaded', function() {{
        const form = document.getElementById('contact-form');
        if (!form) return;
        const inputs = form.querySelectorAll('input, textarea');

        inputs.forEach(function(input) {{
            input.addEventListener('blur', function() {{ validateField(input); }});
            input.addEventListener('input', function() {{
                if (input.parentElement.classList.contains('error')) validateField(input);
            }});
        }});

        form.addEventListener('submit', async function(e) {{
            e.preventDefault();
            let valid = true;
            inputs.forEach(function(input) {{ if (!validateField(input)) valid = false; }});
            if (!valid) {{
                showStatus('error', MESSAGES.invalid);
                return;
            }}

            const button = form.querySelector('.btn-submit');
            const originalText = button.textContent;
            button.disabled = true;
            button.innerHTML = '<span class="loading"></span> Sending...';

            const data = {{ timestamp: new Date().toISOString(), status: 'new' }};
            inputs.forEach(function(input) {{ data[input.name] = input.value; }});

            try {{
                await simulateSubmission(data);
                showStatus('success', MESSAGES.success);
                form.reset();
            }} catch (error) {{
                showStatus('error', MESSAGES.failure);
                console.error('Form submission error:', error);
            }} finally {{
                button.disabled = false;
                button.textContent = originalText;
            }}
        }});
    }});
}})();
"""
