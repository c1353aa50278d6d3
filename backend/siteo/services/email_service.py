from __future__ import annotations

import logging
from html import escape

import httpx

from siteo.core.config import settings

logger = logging.getLogger(__name__)


class EmailNotConfiguredError(RuntimeError):
    pass


class EmailDeliveryError(RuntimeError):
    pass


def _render_contact_html(*, visitor_name: str, visitor_email: str, visitor_phone: str | None, message: str) -> str:
    name = escape(visitor_name)
    email = escape(visitor_email)
    phone_row = ''
    if visitor_phone:
        phone = escape(visitor_phone)
        phone_row = f'<tr><td><b>PHONE</b></td><td><a href="tel:{phone}">{phone}</a></td></tr>'
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8"></head>'
        '<body style="margin:0; padding:40px 20px; background:#eef2f7; font-family: Arial, sans-serif;">'
        '<div style="max-width:600px; margin:0 auto; background:#ffffff; border-radius:12px;">'
        '<h1 style="font-size:20px;">New Contact Form Submission</h1>'
        '<table>'
        f'<tr><td><b>FROM</b></td><td>{name}</td></tr>'
        f'<tr><td><b>EMAIL</b></td><td><a href="mailto:{email}">{email}</a></td></tr>'
        f'{phone_row}'
        '</table>'
        f'<p style="white-space:pre-wrap;">{escape(message)}</p>'
        f'<p style="color:#64748b; font-size:12px;">To respond to {name}, please use their contact details above.</p>'
        '</div></body></html>'
    )


def send_contact_email(
    *,
    agent_email: str,
    visitor_name: str,
    visitor_email: str,
    message: str,
    visitor_phone: str | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Deliver a website contact-form submission to the agent. Returns the provider message id."""
    api_key = (settings.RESEND_API_KEY or '').strip()
    if not api_key:
        logger.error('Cannot send email: RESEND_API_KEY is not set')
        raise EmailNotConfiguredError('Email service not configured (missing API key)')

    payload = {
        'from': settings.RESEND_FROM_EMAIL,
        'to': [agent_email],
        'reply_to': visitor_email,
        'subject': f'New Website Inquiry from {visitor_name}',
        'html': _render_contact_html(
            visitor_name=visitor_name,
            visitor_email=visitor_email,
            visitor_phone=visitor_phone,
            message=message,
        ),
    }
    headers = {'Authorization': f'Bearer {api_key}', 'Content-Type': 'application/json'}

    logger.info('Sending contact email to %s from visitor %s', agent_email, visitor_email)
    http = client or httpx.Client(timeout=15.0)
    try:
        resp = http.post(f'{settings.RESEND_API_BASE}/emails', json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise EmailDeliveryError(f'Email provider unreachable: {exc}') from exc
    finally:
        if client is None:
            http.close()

    if not resp.is_success:
        logger.warning('Resend error: %s %s', resp.status_code, resp.text[:500])
        raise EmailDeliveryError(f'Email provider returned HTTP {resp.status_code}')

    # The email is already accepted here, so an odd body must not fail the request.
    try:
        body = resp.json()
    except ValueError:
        body = None
    message_id = str(body.get('id') or '') if isinstance(body, dict) else ''
    logger.info('Email sent successfully. ID: %s', message_id)
    return message_id
