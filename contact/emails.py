from html import unescape

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.utils import timezone
from django.utils.html import escape, strip_tags


def format_submission_date(value):
    """Render a timestamp like ``10/17/2026, 3:04:05 PM`` in local time."""
    local = timezone.localtime(value)
    hour = local.hour % 12 or 12
    suffix = "PM" if local.hour >= 12 else "AM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local:%M}:{local:%S} {suffix}"
    )


def build_client_acknowledgment(submission):
    owner = settings.CONTACT_OWNER_NAME
    subject = f"Thank You for Contacting {owner}!"
    portfolio_url = escape(settings.CONTACT_PORTFOLIO_URL)
    message = f"""
        <p>Dear {escape(submission.name)},</p>
        <p>Thank you for reaching out to {escape(owner)}'s {escape(settings.CONTACT_SITE_NAME)}!</p>
        <p>I appreciate your interest and will get back to you shortly to discuss your needs.</p>
        <p>In the meantime, feel free to explore more of my projects and services on my website.</p>
        <p>Best regards,</p>
        <p>{escape(owner)}</p>
        <p><a href="{portfolio_url}">My Portfolio</a></p>
    """
    from_email = settings.DEFAULT_FROM_EMAIL
    recipient_list = [submission.email]

    return _html_email(subject, message, from_email, recipient_list)


def build_operator_notification(submission):
    # Header values cannot hold line breaks.
    subject_name = " ".join(submission.name.splitlines())
    subject = f"New Contact Form Submission from {subject_name}"
    company_line = (
        f"<p><strong>Company:</strong> {escape(submission.company)}</p>"
        if submission.company
        else ""
    )
    message = f"""
        <p>You have a new contact form submission!</p>
        <p><strong>Name:</strong> {escape(submission.name)}</p>
        <p><strong>Email:</strong> {escape(submission.email)}</p>
        {company_line}
        <p><strong>Message:</strong></p>
        <p>{escape(submission.message)}</p>
        <p>Submitted on: {format_submission_date(submission.submission_date)}</p>
        <p>Please contact them soon!</p>
    """
    from_email = settings.DEFAULT_FROM_EMAIL
    recipient_list = [settings.CONTACT_OPERATOR_EMAIL or settings.DEFAULT_FROM_EMAIL]

    return _html_email(subject, message, from_email, recipient_list)


def _html_email(subject, message, from_email, recipient_list):
    email = EmailMultiAlternatives(
        subject, unescape(strip_tags(message)).strip(), from_email, recipient_list
    )
    email.attach_alternative(message, "text/html")
    return email
