"""
Admin page rendering.

Everything is assembled from ``markupsafe.Markup``: template fragments are
Markup, and any plain ``str`` that meets them through ``format``, ``join``
or ``+`` is escaped on the way in. Row fields therefore never reach the page
unescaped, whichever code path they take.
"""
from datetime import datetime
from typing import Iterable

from markupsafe import Markup

from models.contact_message import ContactMessage

SUBJECT_PLACEHOLDER = "-"

ROW_TEMPLATE = Markup(
    "<tr>"
    "<td>{id}</td>"
    "<td>{name}</td>"
    '<td><a href="mailto:{email}">{email}</a></td>'
    "<td>{subject}</td>"
    "<td>{message}</td>"
    "<td>{created_at}</td>"
    "</tr>"
)

TABLE_TEMPLATE = Markup(
    """<table>
              <thead>
                <tr>
                  <th>ID</th>
                  <th>Name</th>
                  <th>Email</th>
                  <th>Subject</th>
                  <th>Message</th>
                  <th>Received</th>
                </tr>
              </thead>
              <tbody>{rows}</tbody>
            </table>"""
)

EMPTY_STATE = Markup('<div class="empty">No messages yet.</div>')

PAGE_HEAD = Markup(
    """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Contact Messages</title>
    <style>
      :root { color-scheme: light; }
      body {
        margin: 0;
        padding: 24px;
        font-family: "Segoe UI", Arial, sans-serif;
        background: #f6f8fb;
        color: #1f2937;
      }
      .card {
        background: white;
        border-radius: 14px;
        box-shadow: 0 12px 30px rgba(31, 41, 55, 0.1);
        overflow: hidden;
      }
      .header { padding: 16px 20px; border-bottom: 1px solid #e5e7eb; }
      .header h1 { margin: 0; font-size: 18px; }
      .table-wrap { overflow-x: auto; }
      table { width: 100%; border-collapse: collapse; min-width: 900px; }
      th, td {
        padding: 12px 14px;
        text-align: left;
        border-bottom: 1px solid #eef2f7;
        vertical-align: top;
        font-size: 14px;
      }
      th { background: #f8fafc; position: sticky; top: 0; z-index: 1; }
      td:nth-child(5) { max-width: 500px; white-space: pre-wrap; line-height: 1.4; }
      .empty { padding: 24px; color: #6b7280; }
    </style>
  </head>
  <body>
    <div class="card">
      <div class="header">
        <h1>Portfolio Contact Messages</h1>
      </div>
      <div class="table-wrap">
        """
)

PAGE_TAIL = Markup(
    """
      </div>
    </div>
  </body>
</html>
"""
)


def format_received(value) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return "" if value is None else str(value)


def render_message_row(row: ContactMessage) -> Markup:
    return ROW_TEMPLATE.format(
        id=row.id,
        name=row.name,
        email=row.email,
        subject=row.subject or SUBJECT_PLACEHOLDER,
        message=row.message,
        created_at=format_received(row.created_at),
    )


def render_messages_page(rows: Iterable[ContactMessage]) -> Markup:
    """Full admin HTML document for ``rows``, in the order given."""
    body = Markup("").join(render_message_row(row) for row in rows)
    content = TABLE_TEMPLATE.format(rows=body) if body else EMPTY_STATE
    return PAGE_HEAD + content + PAGE_TAIL
