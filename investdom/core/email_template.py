"""
Notification email for contact form submissions.

Everything the visitor typed goes through escape_html before it is placed
into the HTML body.
"""

import re
from types import MappingProxyType

from investdom.models.contact import ContactSubmission
from investdom.models.email import EmailMessage

SUBJECT_LABELS = MappingProxyType({
    "kupno": "Chcę kupić dom",
    "budowa": "Zlecenie budowy domu",
    "remont": "Remont / Wykończenie",
    "inne": "Inne zapytanie",
})

DEFAULT_SUBJECT_LABEL = "Kontakt"
PHONE_PLACEHOLDER = "Nie podano"

# Whitespace as JavaScript's \s defines it; Python's \s misses U+FEFF
# and also matches the \x1c-\x1f separators and U+0085
_JS_WHITESPACE = "\t\n\v\f\r " + "".join(
    chr(code) for code in (0x00A0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF)
)
_NOT_SPACE_OR_AT = f"[^{re.escape(_JS_WHITESPACE)}@]"
EMAIL_PATTERN = re.compile(rf"{_NOT_SPACE_OR_AT}+@{_NOT_SPACE_OR_AT}+\.{_NOT_SPACE_OR_AT}+")

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_HTML_SPECIAL = re.compile(r"[&<>\"']")

CONTACT_EMAIL_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ background: #0f172a; color: white; padding: 20px; border-radius: 8px 8px 0 0; }}
    .content {{ background: #f8f9fa; padding: 20px; border: 1px solid #e9ecef; }}
    .field {{ margin-bottom: 15px; }}
    .label {{ font-weight: bold; color: #0f172a; }}
    .value {{ margin-top: 5px; padding: 10px; background: white; border-radius: 4px; }}
    .message-box {{ background: white; padding: 15px; border-left: 4px solid #0ea5e9; margin-top: 10px; }}
    .footer {{ padding: 15px; font-size: 12px; color: #6c757d; text-align: center; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1 style="margin: 0; font-size: 24px;">📬 Nowa wiadomość z formularza</h1>
      <p style="margin: 10px 0 0 0; opacity: 0.9;">InvestDom - Formularz kontaktowy</p>
    </div>
    <div class="content">
      <div class="field">
        <div class="label">👤 Imię i nazwisko:</div>
        <div class="value">{name}</div>
      </div>
      <div class="field">
        <div class="label">📧 Email:</div>
        <div class="value"><a href="mailto:{email}">{email}</a></div>
      </div>
      <div class="field">
        <div class="label">📱 Telefon:</div>
        <div class="value"><a href="tel:{phone_link}">{phone}</a></div>
      </div>
      <div class="field">
        <div class="label">📋 Temat:</div>
        <div class="value">{subject}</div>
      </div>
      <div class="field">
        <div class="label">💬 Wiadomość:</div>
        <div class="message-box">{message}</div>
      </div>
    </div>
    <div class="footer">
      Wiadomość wysłana przez formularz kontaktowy na stronie investdom.com.pl
    </div>
  </div>
</body>
</html>
"""


def escape_html(text: str) -> str:
    return _HTML_SPECIAL.sub(lambda match: _HTML_ENTITIES[match.group(0)], text)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def subject_label(code: str) -> str:
    """Readable topic for a subject code; unknown codes are shown as sent."""
    return SUBJECT_LABELS.get(code) or code or DEFAULT_SUBJECT_LABEL


def build_subject(name: str, label: str) -> str:
    return f"Nowa wiadomość od {name} - {label}"


def render_contact_email(submission: ContactSubmission, label: str) -> str:
    """
    Render the HTML body of the notification email.

    Args:
        submission: Validated contact form data
        label: Readable subject label (see subject_label)

    Returns:
        str: HTML document
    """
    return CONTACT_EMAIL_TEMPLATE.format(
        name=escape_html(submission.name),
        email=escape_html(submission.email),
        phone_link=escape_html(submission.phone),
        phone=escape_html(submission.phone or PHONE_PLACEHOLDER),
        subject=escape_html(label),
        message=escape_html(submission.message).replace("\n", "<br>"),
    )


def build_contact_message(submission: ContactSubmission, sender: str, recipient: str) -> EmailMessage:
    label = subject_label(submission.temat_wybrany)
    return EmailMessage(
        sender=sender,
        to=recipient,
        reply_to=submission.email,
        subject=build_subject(submission.name, label),
        html=render_contact_email(submission, label),
    )
